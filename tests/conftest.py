import base64
import json
import threading

import pytest

from compass_helpers.models import FileData

STUDENT_ANALYSIS = {
    "summary": "Strong in mathematics and physics with steady language results.",
    "keyStrengths": ["Mathematics", "Problem solving"],
    "pathways": [
        {
            "name": "Computer Science",
            "description": "Algorithms and software.",
            "careerOptions": ["Software Engineer", "Data Scientist"],
        }
    ],
    "studentName": "Alex Doe",
}

COLLEGES = [
    {
        "name": "University of Toronto",
        "website": "https://www.utoronto.ca",
        "reason": "Top-ranked CS program.",
        "estimatedTuitionLocal": "CA$6,100 per year",
        "estimatedTuitionInternational": "CA$61,720 per year",
        "scholarships": [
            {
                "name": "Lester B. Pearson Scholarship",
                "description": "Covers tuition and residence.",
                "estimatedAmount": "Full Ride",
                "eligibility": "International students with outstanding achievement.",
            }
        ],
    },
    {
        "name": "University of Waterloo",
        "website": "https://uwaterloo.ca",
        "reason": "Co-op programs.",
        "estimatedTuitionLocal": "$7,500",
        "estimatedTuitionInternational": "$50k",
        "scholarships": [],
    },
]


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeChat:
    def __init__(self, history, reply="Happy to help!", error=None):
        self.history = history
        self.reply = reply
        self.error = error
        self.sent = []

    def send_message(self, message):
        self.sent.append(message)
        if self.error:
            raise self.error
        return FakeResponse(self.reply)


class FakeModel:
    """Stands in for ``genai.GenerativeModel``.

    ``responder`` maps the prompt text to a reply string, or raises.
    """

    def __init__(self, responder=None):
        self.responder = responder or (lambda prompt: "{}")
        self.calls = []
        self.chats = []
        self._lock = threading.Lock()

    def generate_content(self, contents, generation_config=None):
        with self._lock:
            self.calls.append((contents, generation_config))
        prompt = contents[0] if isinstance(contents, list) else contents
        return FakeResponse(self.responder(prompt))

    def start_chat(self, history=None):
        chat = FakeChat(history)
        self.chats.append(chat)
        return chat


def route_analysis(prompt):
    if "degree pathways" in prompt:
        return json.dumps(STUDENT_ANALYSIS)
    if "Recommend 5 universities" in prompt:
        return json.dumps(COLLEGES)
    raise AssertionError(f"unexpected prompt: {prompt[:80]}")


@pytest.fixture
def score_file():
    return FileData(
        name="scores.pdf",
        mime_type="application/pdf",
        base64=base64.b64encode(b"%PDF-1.4 fake report").decode("ascii"),
    )


@pytest.fixture
def analysis_model():
    return FakeModel(route_analysis)
