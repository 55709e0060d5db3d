"""Data types exchanged with Gemini and kept in session state.

JSON keys are camelCase, matching what the prompts ask the model to return;
attributes are snake_case. ``from_dict`` is lenient about missing keys since
the payloads come straight from a language model.
"""

import base64
from dataclasses import dataclass, field
from typing import List, Optional


def _str(data: dict, key: str, default: str = "") -> str:
    value = data.get(key, default)
    if value is None:
        return default
    return str(value)


def _opt_str(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    return str(value) if value not in (None, "") else None


def _str_list(data: dict, key: str) -> List[str]:
    value = data.get(key)
    if isinstance(value, str):
        return [value] if value else []
    if not isinstance(value, list):
        return []
    return [str(v) for v in value if v is not None]


def _dict(data: dict, key: str) -> dict:
    value = data.get(key)
    return value if isinstance(value, dict) else {}


def _dict_list(data: dict, key: str) -> List[dict]:
    value = data.get(key)
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


def _drop_none(data: dict) -> dict:
    return {k: v for k, v in data.items() if v is not None}


@dataclass
class Testimonial:
    quote: str
    author: str

    @classmethod
    def from_dict(cls, data: dict) -> "Testimonial":
        return cls(quote=_str(data, "quote"), author=_str(data, "author"))

    def to_dict(self) -> dict:
        return {"quote": self.quote, "author": self.author}


@dataclass
class CollegeDetails:
    overview: str
    program_highlights: str
    diversity_and_culture: str
    student_experience: str
    testimonials: List[Testimonial] = field(default_factory=list)
    average_gpa: Optional[str] = None
    acceptance_rate: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CollegeDetails":
        return cls(
            overview=_str(data, "overview"),
            program_highlights=_str(data, "programHighlights"),
            diversity_and_culture=_str(data, "diversityAndCulture"),
            student_experience=_str(data, "studentExperience"),
            testimonials=[Testimonial.from_dict(t) for t in _dict_list(data, "testimonials")],
            average_gpa=_opt_str(data, "averageGpa"),
            acceptance_rate=_opt_str(data, "acceptanceRate"),
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "overview": self.overview,
            "programHighlights": self.program_highlights,
            "diversityAndCulture": self.diversity_and_culture,
            "studentExperience": self.student_experience,
            "testimonials": [t.to_dict() for t in self.testimonials],
            "averageGpa": self.average_gpa,
            "acceptanceRate": self.acceptance_rate,
        })


@dataclass
class Scholarship:
    name: str
    description: str
    estimated_amount: str
    eligibility: str
    website: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Scholarship":
        return cls(
            name=_str(data, "name"),
            description=_str(data, "description"),
            estimated_amount=_str(data, "estimatedAmount"),
            eligibility=_str(data, "eligibility"),
            website=_opt_str(data, "website"),
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "name": self.name,
            "description": self.description,
            "estimatedAmount": self.estimated_amount,
            "eligibility": self.eligibility,
            "website": self.website,
        })


@dataclass
class College:
    name: str
    website: str
    reason: str
    estimated_tuition_local: str
    estimated_tuition_international: str
    scholarships: List[Scholarship] = field(default_factory=list)
    details: Optional[CollegeDetails] = None
    video_url: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "College":
        details = data.get("details")
        return cls(
            name=_str(data, "name"),
            website=_str(data, "website"),
            reason=_str(data, "reason"),
            estimated_tuition_local=_str(data, "estimatedTuitionLocal"),
            estimated_tuition_international=_str(data, "estimatedTuitionInternational"),
            scholarships=[Scholarship.from_dict(s) for s in _dict_list(data, "scholarships")],
            details=CollegeDetails.from_dict(details) if isinstance(details, dict) else None,
            video_url=_opt_str(data, "videoUrl"),
            id=_opt_str(data, "id"),
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "name": self.name,
            "website": self.website,
            "reason": self.reason,
            "estimatedTuitionLocal": self.estimated_tuition_local,
            "estimatedTuitionInternational": self.estimated_tuition_international,
            "scholarships": [s.to_dict() for s in self.scholarships],
            "details": self.details.to_dict() if self.details else None,
            "videoUrl": self.video_url,
            "id": self.id,
        })


@dataclass
class FileData:
    name: str
    mime_type: str
    base64: str

    def raw_bytes(self) -> bytes:
        return base64.b64decode(self.base64)

    def to_part(self) -> dict:
        """Inline blob understood by ``generate_content``."""
        return {"mime_type": self.mime_type, "data": self.raw_bytes()}


@dataclass
class DegreePathway:
    name: str
    description: str
    career_options: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "DegreePathway":
        return cls(
            name=_str(data, "name"),
            description=_str(data, "description"),
            career_options=_str_list(data, "careerOptions"),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "careerOptions": list(self.career_options),
        }


@dataclass
class StudentAnalysis:
    summary: str
    pathways: List[DegreePathway] = field(default_factory=list)
    key_strengths: List[str] = field(default_factory=list)
    student_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "StudentAnalysis":
        return cls(
            summary=_str(data, "summary"),
            pathways=[DegreePathway.from_dict(p) for p in _dict_list(data, "pathways")],
            key_strengths=_str_list(data, "keyStrengths"),
            student_name=_opt_str(data, "studentName"),
        )

    def to_dict(self) -> dict:
        return _drop_none({
            "summary": self.summary,
            "pathways": [p.to_dict() for p in self.pathways],
            "keyStrengths": list(self.key_strengths),
            "studentName": self.student_name,
        })


@dataclass
class ChatMessage:
    role: str  # "user" or "model"
    message: str

    def to_content(self) -> dict:
        return {"role": self.role, "parts": [self.message]}


@dataclass
class AnalysisData:
    analysis: StudentAnalysis
    colleges: List[College]
    file_name: str

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisData":
        return cls(
            analysis=StudentAnalysis.from_dict(_dict(data, "analysis")),
            colleges=[College.from_dict(c) for c in _dict_list(data, "colleges")],
            file_name=_str(data, "fileName"),
        )

    def to_dict(self) -> dict:
        return {
            "analysis": self.analysis.to_dict(),
            "colleges": [c.to_dict() for c in self.colleges],
            "fileName": self.file_name,
        }


@dataclass
class AnalysisRecord(AnalysisData):
    id: str = ""
    timestamp: int = 0

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisRecord":
        base = AnalysisData.from_dict(data)
        return cls(
            analysis=base.analysis,
            colleges=base.colleges,
            file_name=base.file_name,
            id=_str(data, "id"),
            timestamp=int(data.get("timestamp") or 0),
        )

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["id"] = self.id
        data["timestamp"] = self.timestamp
        return data


@dataclass
class JobMarketOverview:
    overall_outlook: str
    growth_rate: str
    competition_level: str

    @classmethod
    def from_dict(cls, data: dict) -> "JobMarketOverview":
        return cls(
            overall_outlook=_str(data, "overallOutlook"),
            growth_rate=_str(data, "growthRate"),
            competition_level=_str(data, "competitionLevel"),
        )


@dataclass
class CareerPath:
    title: str
    description: str

    @classmethod
    def from_dict(cls, data: dict) -> "CareerPath":
        return cls(title=_str(data, "title"), description=_str(data, "description"))


@dataclass
class CareerData:
    job_market_overview: JobMarketOverview
    career_path_count: int
    industry_count: int
    average_salary_range: str
    top_career_paths: List[CareerPath] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "CareerData":
        def _int(key):
            try:
                return int(data.get(key) or 0)
            except (TypeError, ValueError):
                return 0

        return cls(
            job_market_overview=JobMarketOverview.from_dict(_dict(data, "jobMarketOverview")),
            career_path_count=_int("careerPathCount"),
            industry_count=_int("industryCount"),
            average_salary_range=_str(data, "averageSalaryRange"),
            top_career_paths=[CareerPath.from_dict(p) for p in _dict_list(data, "topCareerPaths")],
        )


@dataclass
class CareerPathDetails:
    day_to_day_responsibilities: List[str] = field(default_factory=list)
    required_skills: List[str] = field(default_factory=list)
    career_progression: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "CareerPathDetails":
        return cls(
            day_to_day_responsibilities=_str_list(data, "dayToDayResponsibilities"),
            required_skills=_str_list(data, "requiredSkills"),
            career_progression=_str(data, "careerProgression"),
        )
