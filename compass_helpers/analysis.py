"""Form state for the college finder and the two-call analysis run."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

from compass_helpers import gemini_service
from compass_helpers.constants import (
    ALL_SCHOLARSHIPS_KEY,
    CAMPUS_SETTINGS,
    DEFAULT_LOCATION,
    DEGREE_PROGRAMS,
    GRANT_AMOUNTS,
    SCHOLARSHIP_TYPES,
    UNIVERSITY_SIZES,
)
from compass_helpers.models import AnalysisData, FileData

logger = logging.getLogger(__name__)


class AnalysisError(Exception):
    """The analysis run failed as a whole."""


class MissingScoreFileError(AnalysisError):
    """No score report was uploaded."""


@dataclass
class AnalysisRequest:
    score_file: Optional[FileData] = None
    student_picture: Optional[FileData] = None
    location: str = DEFAULT_LOCATION
    degree_program: str = DEGREE_PROGRAMS[0]
    university_size: str = UNIVERSITY_SIZES[0]
    campus_setting: str = CAMPUS_SETTINGS[0]
    prioritize_rankings: bool = False
    wants_scholarship: bool = False
    scholarship_types: List[str] = field(default_factory=list)
    min_grant_amount: str = GRANT_AMOUNTS[0]


def all_scholarships_selected(selected: List[str]) -> bool:
    return len(selected) == len(SCHOLARSHIP_TYPES)


def toggle_scholarship_type(selected: List[str], option: str) -> List[str]:
    """Return the new selection after toggling ``option``.

    Toggling the "All" pseudo-option selects every type, or clears the
    selection when every type is already selected.
    """
    if option == ALL_SCHOLARSHIPS_KEY:
        if all_scholarships_selected(selected):
            return []
        return list(SCHOLARSHIP_TYPES)
    if option in selected:
        return [t for t in selected if t != option]
    return selected + [option]


def run_analysis(model, request: AnalysisRequest, language_name: str) -> AnalysisData:
    """Run the student analysis and college search side by side.

    Both calls must succeed; the first failure aborts the run.
    """
    if request.score_file is None:
        raise MissingScoreFileError("No score report uploaded.")

    score_file = request.score_file
    degree_program = "" if request.degree_program == DEGREE_PROGRAMS[0] else request.degree_program

    logger.info(
        "Running analysis for %s (location=%s, degree=%s, scholarships=%s)",
        score_file.name, request.location, degree_program or "any", request.wants_scholarship,
    )
    with ThreadPoolExecutor(max_workers=2) as executor:
        analysis_future = executor.submit(
            gemini_service.get_student_analysis, model, score_file, language_name,
        )
        colleges_future = executor.submit(
            gemini_service.analyze_score_report,
            model,
            score_file,
            request.location,
            degree_program,
            request.university_size,
            request.campus_setting,
            request.prioritize_rankings,
            request.wants_scholarship,
            list(request.scholarship_types),
            request.min_grant_amount,
            language_name,
        )
        try:
            student_analysis = analysis_future.result()
            colleges = colleges_future.result()
        except Exception as e:
            logger.exception("Analysis failed")
            raise AnalysisError(str(e)) from e

    return AnalysisData(analysis=student_analysis, colleges=colleges, file_name=score_file.name)
