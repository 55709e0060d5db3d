import json
from types import SimpleNamespace

import pytest

from compass_helpers import gemini_service
from compass_helpers.gemini_service import GeminiServiceError, parse_json_response
from compass_helpers.models import ChatMessage, College, StudentAnalysis

from conftest import COLLEGES, STUDENT_ANALYSIS, FakeChat, FakeModel


def test_parse_json_strips_fences_and_prose():
    raw = 'Here you go:\n```json\n{"summary": "ok", "keyStrengths": []}\n```'
    assert parse_json_response(raw) == {"summary": "ok", "keyStrengths": []}


def test_parse_json_array_and_trailing_commas():
    raw = '[{"name": "A",}, {"name": "B"},]'
    assert parse_json_response(raw) == [{"name": "A"}, {"name": "B"}]


def test_parse_json_garbage_raises():
    with pytest.raises(GeminiServiceError):
        parse_json_response("no json here")


def test_student_analysis_sends_inline_file_and_language(score_file):
    model = FakeModel(lambda prompt: json.dumps(STUDENT_ANALYSIS))
    result = gemini_service.get_student_analysis(model, score_file, "Spanish")

    assert result.student_name == "Alex Doe"
    assert result.pathways[0].career_options == ["Software Engineer", "Data Scientist"]
    contents, config = model.calls[0]
    assert "in Spanish" in contents[0]
    assert contents[1] == {"mime_type": "application/pdf", "data": b"%PDF-1.4 fake report"}
    assert config["response_mime_type"] == "application/json"


def test_analyze_score_report_parses_colleges(score_file):
    model = FakeModel(lambda prompt: json.dumps(COLLEGES))
    colleges = gemini_service.analyze_score_report(
        model, score_file, "Toronto, Canada", "Computer Science", "Any", "Urban",
        True, True, ["Merit-Based"], "$5,000+", "English",
    )
    assert [c.name for c in colleges] == ["University of Toronto", "University of Waterloo"]
    assert colleges[0].scholarships[0].estimated_amount == "Full Ride"
    assert colleges[1].scholarships == []

    prompt = model.calls[0][0][0]
    assert "Preferred location: Toronto, Canada" in prompt
    assert "Intended degree program: Computer Science" in prompt
    assert "Campus setting: Urban" in prompt
    assert "University size" not in prompt
    assert "Prioritize highly ranked" in prompt
    assert "Merit-Based" in prompt
    assert "Minimum scholarship amount: $5,000+" in prompt


def test_analyze_score_report_accepts_wrapped_array(score_file):
    model = FakeModel(lambda prompt: json.dumps({"colleges": COLLEGES}))
    colleges = gemini_service.analyze_score_report(
        model, score_file, "Any / Undecided", "", "Any", "Any", False, False, [], "Any", "English",
    )
    assert len(colleges) == 2


def test_college_prompt_omits_scholarships_when_not_wanted():
    prompt = gemini_service.build_college_prompt(
        "Any / Undecided", "", "Any", "Any", False, False, ["Athletic"], "Full Ride", "English",
    )
    assert "No specific preferences" in prompt
    assert "Athletic" not in prompt
    assert "Full Ride" not in prompt


def test_transport_errors_become_service_errors(score_file):
    def boom(prompt):
        raise RuntimeError("quota exceeded")

    with pytest.raises(GeminiServiceError, match="quota exceeded") as excinfo:
        gemini_service.get_student_analysis(FakeModel(boom), score_file, "English")
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_empty_response_is_an_error(score_file):
    with pytest.raises(GeminiServiceError, match="empty"):
        gemini_service.get_student_analysis(FakeModel(lambda p: "  "), score_file, "English")


def test_wrong_json_shape_is_an_error(score_file):
    with pytest.raises(GeminiServiceError):
        gemini_service.get_student_analysis(FakeModel(lambda p: "[1, 2]"), score_file, "English")


def test_college_details():
    payload = {
        "overview": "Large research university.",
        "programHighlights": "CS, Engineering",
        "diversityAndCulture": "Very diverse.",
        "studentExperience": "Vibrant city campus.",
        "testimonials": [{"quote": "Loved it", "author": "CS graduate"}],
        "averageGpa": "3.8",
        "acceptanceRate": "43%",
    }
    model = FakeModel(lambda prompt: json.dumps(payload))
    details = gemini_service.get_college_details(model, "University of Toronto", "Strong in maths", "English")
    assert details.acceptance_rate == "43%"
    assert details.testimonials[0].author == "CS graduate"
    assert "University of Toronto" in model.calls[0][0]


def test_sample_score_report_is_plain_text():
    model = FakeModel(lambda prompt: "  Name: Jamie\nMaths: 92\n")
    report = gemini_service.generate_sample_score_report(model, "9th Grade", "English")
    assert report == "Name: Jamie\nMaths: 92"
    assert "9th Grade" in model.calls[0][0]
    assert model.calls[0][1]["response_mime_type"] == "text/plain"


def test_career_data_and_details():
    career = {
        "jobMarketOverview": {"overallOutlook": "Strong", "growthRate": "15%", "competitionLevel": "High"},
        "careerPathCount": "12",
        "industryCount": 8,
        "averageSalaryRange": "$70k - $140k",
        "topCareerPaths": [{"title": "Data Scientist", "description": "Models data."}],
    }
    data = gemini_service.get_career_data(FakeModel(lambda p: json.dumps(career)), "Data Science", "English")
    assert data.career_path_count == 12
    assert data.job_market_overview.growth_rate == "15%"
    assert data.top_career_paths[0].title == "Data Scientist"

    details = gemini_service.get_career_path_details(
        FakeModel(lambda p: json.dumps({"requiredSkills": "Python", "careerProgression": "Senior"})),
        "Data Scientist",
        "English",
    )
    assert details.required_skills == ["Python"]
    assert details.day_to_day_responsibilities == []


def test_counselor_chat_is_seeded_with_analysis():
    model = FakeModel()
    analysis = StudentAnalysis.from_dict(STUDENT_ANALYSIS)
    colleges = [College.from_dict(c) for c in COLLEGES]
    earlier = [ChatMessage("user", "Hi"), ChatMessage("model", "Hello!")]
    chat = gemini_service.start_counselor_chat(model, analysis, colleges, "French", history=earlier)

    assert len(chat.history) == 4
    context = chat.history[0]["parts"][0]
    assert "University of Toronto" in context
    assert "Always reply in French" in context
    assert chat.history[2] == {"role": "user", "parts": ["Hi"]}
    assert gemini_service.send_chat_message(chat, "What about fees?") == "Happy to help!"


def test_chat_failure_raises():
    chat = FakeChat([], error=RuntimeError("network down"))
    with pytest.raises(GeminiServiceError, match="network down"):
        gemini_service.send_chat_message(chat, "hello")



def test_non_list_testimonials_are_ignored():
    payload = {"overview": "Small liberal arts college.", "testimonials": 3}
    details = gemini_service.get_college_details(
        FakeModel(lambda p: json.dumps(payload)), "Reed College", "Strong writer", "English",
    )
    assert details.overview == "Small liberal arts college."
    assert details.testimonials == []


def test_scalar_job_market_overview_falls_back_to_blank():
    payload = {"jobMarketOverview": "Strong outlook", "topCareerPaths": "Analyst"}
    data = gemini_service.get_career_data(FakeModel(lambda p: json.dumps(payload)), "Economics", "English")
    assert data.job_market_overview.overall_outlook == ""
    assert data.top_career_paths == []


def test_payload_that_breaks_the_model_type_is_a_service_error(monkeypatch):
    def broken(data):
        raise AttributeError("'str' object has no attribute 'get'")

    monkeypatch.setattr(gemini_service, "CareerData", SimpleNamespace(from_dict=broken))
    with pytest.raises(GeminiServiceError, match="malformed career data") as excinfo:
        gemini_service.get_career_data(FakeModel(lambda p: "{}"), "Economics", "English")
    assert isinstance(excinfo.value.__cause__, AttributeError)


def test_create_model_uses_requested_name(monkeypatch):
    configured = {}
    monkeypatch.setattr(gemini_service.genai, "configure", lambda api_key: configured.update(key=api_key))
    monkeypatch.setattr(gemini_service.genai, "GenerativeModel", lambda name: SimpleNamespace(name=name))

    model, used = gemini_service.create_model("secret-key", "gemini-2.5-pro")
    assert configured == {"key": "secret-key"}
    assert used == "gemini-2.5-pro"
    assert model.name == "gemini-2.5-pro"


def test_create_model_falls_back_when_requested_model_fails(monkeypatch):
    def make(name):
        if name != gemini_service.FALLBACK_MODEL:
            raise ValueError(f"unknown model {name}")
        return SimpleNamespace(name=name)

    monkeypatch.setattr(gemini_service.genai, "configure", lambda api_key: None)
    monkeypatch.setattr(gemini_service.genai, "GenerativeModel", make)

    model, used = gemini_service.create_model("secret-key", "gemini-9-ultra")
    assert used == gemini_service.FALLBACK_MODEL
    assert model.name == gemini_service.FALLBACK_MODEL


def test_chat_start_failure_raises():
    class NoChatModel(FakeModel):
        def start_chat(self, history=None):
            raise RuntimeError("invalid history")

    analysis = StudentAnalysis.from_dict(STUDENT_ANALYSIS)
    with pytest.raises(GeminiServiceError, match="invalid history"):
        gemini_service.start_counselor_chat(NoChatModel(), analysis, [], "English")
