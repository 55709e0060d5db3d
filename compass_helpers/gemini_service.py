"""Gemini calls behind the college finder.

Every function takes the ``model`` to call so that pages can pass the one
kept in ``st.session_state`` and tests can pass a fake.
"""

import json
import logging
import re
from typing import Iterable, List, Optional

import google.generativeai as genai

from compass_helpers.models import (
    CareerData,
    CareerPathDetails,
    ChatMessage,
    College,
    CollegeDetails,
    FileData,
    StudentAnalysis,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"
FALLBACK_MODEL = "gemini-2.0-flash-lite"
MODEL_OPTIONS = {
    "gemini-2.5-flash": "2.5 Flash (balanced, reads PDFs & images)",
    "gemini-2.5-flash-lite": "2.5 Flash Lite (lowest cost)",
    "gemini-2.0-flash-lite": "2.0 Flash Lite (very low cost)",
    "gemini-2.5-pro": "2.5 Pro (highest quality & cost)",
}

JSON_CONFIG = {
    "response_mime_type": "application/json",
    "temperature": 0.4,
}
TEXT_CONFIG = {
    "response_mime_type": "text/plain",
    "temperature": 0.8,
}

ANY_OPTIONS = {"", "Any", "Any / Undecided"}


class GeminiServiceError(Exception):
    """The AI service failed or returned something unusable."""


def create_model(api_key: str, model_name: str = DEFAULT_MODEL):
    """Configure the client and build a model, falling back if needed.

    Returns ``(model, used_model_name)``.
    """
    genai.configure(api_key=api_key)
    try:
        return genai.GenerativeModel(model_name), model_name
    except Exception:
        logger.warning("Model %s unavailable, falling back to %s", model_name, FALLBACK_MODEL)
        return genai.GenerativeModel(FALLBACK_MODEL), FALLBACK_MODEL


# JSON helpers

def _strip_fences(text: str) -> str:
    if '```' in text:
        return '\n'.join(l for l in text.splitlines() if not l.strip().startswith('```'))
    return text


def _extract_json(text: str) -> str:
    """Cut out the outermost object or array, whichever starts first."""
    starts = [i for i in (text.find('{'), text.find('[')) if i != -1]
    if not starts:
        return text
    s = min(starts)
    closer = '}' if text[s] == '{' else ']'
    e = text.rfind(closer)
    return text[s:e + 1] if e > s else text


def parse_json_response(raw: str):
    """Leniently parse a model response into JSON."""
    candidate = _extract_json(_strip_fences((raw or "").strip()))
    try:
        return json.loads(candidate)
    except json.JSONDecodeError:
        pass
    repaired = re.sub(r',\s*(\]|})', r'\1', candidate)
    try:
        return json.loads(repaired)
    except json.JSONDecodeError as e:
        raise GeminiServiceError(f"Could not parse AI response as JSON: {e}") from e


def _response_text(response) -> str:
    try:
        text = response.text
    except ValueError as e:
        # raised by the SDK when the candidate was blocked or empty
        raise GeminiServiceError(f"AI response has no text: {e}") from e
    if not text or not text.strip():
        raise GeminiServiceError("AI returned an empty response.")
    return text


def _generate(model, contents, generation_config: dict, purpose: str) -> str:
    try:
        response = model.generate_content(contents, generation_config=generation_config)
    except Exception as e:
        logger.exception("Gemini call failed (%s)", purpose)
        raise GeminiServiceError(f"Gemini call failed ({purpose}): {e}") from e
    return _response_text(response)


def _generate_json(model, contents, purpose: str):
    raw = _generate(model, contents, JSON_CONFIG, purpose)
    try:
        return parse_json_response(raw)
    except GeminiServiceError:
        logger.error("Unparseable %s response: %.200s", purpose, raw)
        raise


def _build(factory, data, purpose: str):
    try:
        return factory(data)
    except (TypeError, AttributeError, ValueError) as e:
        logger.exception("Malformed %s payload", purpose)
        raise GeminiServiceError(f"AI returned malformed {purpose}: {e}") from e


def _language_rule(language_name: str) -> str:
    return f"Write every human-readable text value in {language_name}. Keep JSON keys in English."


# Prompt builders

def build_student_analysis_prompt(language_name: str) -> str:
    return (
        "You are an experienced university admissions counselor. The attached document is a "
        "student's test-score report.\n"
        "Analyse the student's academic profile and suggest suitable degree pathways.\n\n"
        "Return ONLY a JSON object with these keys:\n"
        '- "summary": string, a 3-5 sentence overview of the student\'s academic profile\n'
        '- "keyStrengths": array of short strings\n'
        '- "pathways": array of 3 objects {"name": string, "description": string, '
        '"careerOptions": array of strings}\n'
        '- "studentName": string, the student\'s name if it appears in the report, otherwise omit\n\n'
        + _language_rule(language_name)
    )


def build_college_prompt(
    location: str,
    degree_program: str,
    university_size: str,
    campus_setting: str,
    prioritize_rankings: bool,
    wants_scholarship: bool,
    scholarship_types: Iterable[str],
    min_grant_amount: str,
    language_name: str,
) -> str:
    preferences = []
    if location not in ANY_OPTIONS:
        preferences.append(f"- Preferred location: {location}")
    if degree_program not in ANY_OPTIONS:
        preferences.append(f"- Intended degree program: {degree_program}")
    if university_size not in ANY_OPTIONS:
        preferences.append(f"- University size: {university_size}")
    if campus_setting not in ANY_OPTIONS:
        preferences.append(f"- Campus setting: {campus_setting}")
    if prioritize_rankings:
        preferences.append("- Prioritize highly ranked universities")
    if wants_scholarship:
        types = list(scholarship_types)
        if types:
            preferences.append(f"- Needs scholarships of these types: {', '.join(types)}")
        else:
            preferences.append("- Needs scholarships of any type")
        if min_grant_amount not in ANY_OPTIONS:
            preferences.append(f"- Minimum scholarship amount: {min_grant_amount}")

    pref_block = "\n".join(preferences) if preferences else "- No specific preferences"
    scholarship_rule = (
        "Include 1-3 matching scholarships per college."
        if wants_scholarship
        else 'Use an empty "scholarships" array unless a notable scholarship clearly fits.'
    )
    return (
        "You are an expert college admissions advisor. The attached document is a student's "
        "test-score report. Recommend 5 universities that realistically match the student's "
        "scores and the preferences below.\n\n"
        f"=== PREFERENCES ===\n{pref_block}\n=== END ===\n\n"
        "Return ONLY a JSON array. Each element:\n"
        '{"name": string, "website": string (full URL), "reason": string, '
        '"estimatedTuitionLocal": string, "estimatedTuitionInternational": string, '
        '"scholarships": [{"name": string, "description": string, "estimatedAmount": string, '
        '"eligibility": string, "website": string}]}\n'
        f"{scholarship_rule}\n"
        "Tuition estimates are per year and include the currency symbol.\n"
        + _language_rule(language_name)
    )


# Calls

def get_student_analysis(model, score_file: FileData, language_name: str) -> StudentAnalysis:
    data = _generate_json(
        model,
        [build_student_analysis_prompt(language_name), score_file.to_part()],
        "student analysis",
    )
    if not isinstance(data, dict):
        raise GeminiServiceError("Student analysis was not a JSON object.")
    return _build(StudentAnalysis.from_dict, data, "student analysis")


def analyze_score_report(
    model,
    score_file: FileData,
    location: str,
    degree_program: str,
    university_size: str,
    campus_setting: str,
    prioritize_rankings: bool,
    wants_scholarship: bool,
    scholarship_types: Iterable[str],
    min_grant_amount: str,
    language_name: str,
) -> List[College]:
    prompt = build_college_prompt(
        location, degree_program, university_size, campus_setting, prioritize_rankings,
        wants_scholarship, scholarship_types, min_grant_amount, language_name,
    )
    data = _generate_json(model, [prompt, score_file.to_part()], "college recommendations")
    if isinstance(data, dict):
        # some models wrap the array, e.g. {"colleges": [...]}
        data = next((v for v in data.values() if isinstance(v, list)), None)
    if not isinstance(data, list):
        raise GeminiServiceError("College recommendations were not a JSON array.")
    colleges = [
        _build(College.from_dict, item, "college recommendations")
        for item in data if isinstance(item, dict)
    ]
    logger.info("Received %d college recommendations", len(colleges))
    return colleges


def get_college_details(model, college_name: str, student_summary: str, language_name: str) -> CollegeDetails:
    prompt = (
        f"Give a prospective student a detailed profile of {college_name}.\n"
        f"Student profile: {student_summary}\n\n"
        "Return ONLY a JSON object with keys:\n"
        '"overview", "programHighlights", "diversityAndCulture", "studentExperience" (strings), '
        '"testimonials" (array of 2 {"quote": string, "author": string}, representative and '
        'clearly attributed to a type of student), "averageGpa" (string), "acceptanceRate" (string).\n'
        + _language_rule(language_name)
    )
    data = _generate_json(model, prompt, "college details")
    if not isinstance(data, dict):
        raise GeminiServiceError("College details were not a JSON object.")
    return _build(CollegeDetails.from_dict, data, "college details")


def generate_sample_score_report(model, grade: str, language_name: str) -> str:
    prompt = (
        f"Create a realistic, fictional test-score report for a {grade} student. "
        "Include a student name, the school name, the term, 6-8 subjects with marks or grades, "
        "an overall average and a short teacher remark. Format it as a plain-text table "
        "that can be saved and uploaded back into a college finder.\n"
        f"Write it in {language_name}."
    )
    return _generate(model, prompt, TEXT_CONFIG, "sample score report").strip()


def get_career_data(model, degree_name: str, language_name: str) -> CareerData:
    prompt = (
        f"Describe the current job market for graduates of {degree_name}.\n"
        "Return ONLY a JSON object:\n"
        '{"jobMarketOverview": {"overallOutlook": string, "growthRate": string, '
        '"competitionLevel": string}, "careerPathCount": integer, "industryCount": integer, '
        '"averageSalaryRange": string, "topCareerPaths": [{"title": string, "description": string}]}\n'
        "List 5 top career paths.\n"
        + _language_rule(language_name)
    )
    data = _generate_json(model, prompt, "career data")
    if not isinstance(data, dict):
        raise GeminiServiceError("Career data was not a JSON object.")
    return _build(CareerData.from_dict, data, "career data")


def get_career_path_details(model, career_title: str, language_name: str) -> CareerPathDetails:
    prompt = (
        f"Describe the career of a {career_title}.\n"
        "Return ONLY a JSON object:\n"
        '{"dayToDayResponsibilities": [string], "requiredSkills": [string], '
        '"careerProgression": string}\n'
        + _language_rule(language_name)
    )
    data = _generate_json(model, prompt, "career path details")
    if not isinstance(data, dict):
        raise GeminiServiceError("Career path details were not a JSON object.")
    return _build(CareerPathDetails.from_dict, data, "career path details")


def build_counselor_context(analysis: StudentAnalysis, colleges: List[College], language_name: str) -> str:
    college_lines = "\n".join(
        f"- {c.name}: {c.reason} (tuition local {c.estimated_tuition_local}, "
        f"international {c.estimated_tuition_international})"
        for c in colleges
    )
    pathway_lines = "\n".join(f"- {p.name}: {p.description}" for p in analysis.pathways)
    return (
        "You are a friendly university admissions counselor chatting with a student. "
        "Answer concisely and only about their studies, universities, scholarships and careers.\n\n"
        f"Student summary: {analysis.summary}\n"
        f"Key strengths: {', '.join(analysis.key_strengths)}\n"
        f"Suggested pathways:\n{pathway_lines}\n"
        f"Recommended colleges:\n{college_lines}\n\n"
        f"Always reply in {language_name}."
    )


def start_counselor_chat(
    model,
    analysis: StudentAnalysis,
    colleges: List[College],
    language_name: str,
    history: Optional[List[ChatMessage]] = None,
):
    """Open a chat seeded with the analysis; ``history`` replays earlier turns."""
    seed = [
        ChatMessage("user", build_counselor_context(analysis, colleges, language_name)),
        ChatMessage("model", "Understood. I'm ready to help with your university questions."),
    ]
    turns = seed + list(history or [])
    try:
        return model.start_chat(history=[m.to_content() for m in turns])
    except Exception as e:
        logger.exception("Could not open counselor chat")
        raise GeminiServiceError(f"Chat could not be started: {e}") from e


def send_chat_message(chat, message: str) -> str:
    try:
        response = chat.send_message(message)
    except Exception as e:
        logger.exception("Counselor chat message failed")
        raise GeminiServiceError(f"Chat message failed: {e}") from e
    return _response_text(response).strip()
