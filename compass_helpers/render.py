"""Result cards for the college finder."""

import logging
from typing import Callable, List, Optional

import streamlit as st

from compass_helpers import gemini_service
from compass_helpers.locales import language_name
from compass_helpers.models import College, DegreePathway, FileData, StudentAnalysis
from compass_helpers.utility import current_locale, t

logger = logging.getLogger(__name__)


def set_error(message: str, retryable: bool = False):
    st.session_state.app_error = {"message": message, "retryable": retryable}


def clear_error():
    st.session_state.pop("app_error", None)


def render_error(on_retry: Optional[Callable[[], None]] = None):
    error = st.session_state.get("app_error")
    if not error:
        return
    st.error(f"❌ {error['message']}")
    if error.get("retryable") and on_retry is not None:
        st.button(f"🔁 {t('error.retry')}", on_click=on_retry, key="retry_button")


def render_summary_card(analysis: StudentAnalysis, student_picture: Optional[FileData] = None):
    with st.container(border=True):
        col1, col2 = st.columns([1, 4])
        with col1:
            if student_picture is not None:
                st.image(student_picture.raw_bytes(), use_container_width=True)
            else:
                st.markdown("### 🎓")
        with col2:
            st.subheader(t("results.summary"))
            st.write(analysis.summary)

        if analysis.key_strengths:
            st.markdown(f"**{t('results.keyStrengths')}**")
            st.markdown("\n".join(f"- ✅ {s}" for s in analysis.key_strengths))

        st.page_link("pages/2_Counselor_Chat.py", label=t("results.startChat"), icon="💬")


def render_degree_pathways(pathways: List[DegreePathway]):
    if not pathways:
        return
    st.subheader(f"🧭 {t('results.pathways')}")
    for pathway in pathways:
        with st.expander(pathway.name):
            st.write(pathway.description)
            if pathway.career_options:
                st.markdown(f"**{t('results.careerOptions')}:** " + ", ".join(pathway.career_options))


def _load_details(college: College, student_summary: str):
    model = st.session_state.get("gemini_model")
    if model is None:
        set_error(t("error.notInitialized"))
        return
    try:
        with st.spinner(t("results.loading.details")):
            college.details = gemini_service.get_college_details(
                model, college.name, student_summary, language_name(current_locale()),
            )
    except gemini_service.GeminiServiceError as e:
        logger.warning("College details for %s failed: %s", college.name, e)
        set_error(t("error.aiService"))


def render_college_card(college: College, student_summary: str, index: int):
    with st.container(border=True):
        st.markdown(f"### 🏛️ {college.name}")
        if college.website:
            st.markdown(f"[{college.website}]({college.website})")
        st.markdown(f"**{t('results.reason')}:** {college.reason}")

        col1, col2 = st.columns(2)
        with col1:
            st.metric(t("results.tuitionLocal"), college.estimated_tuition_local or "N/A")
        with col2:
            st.metric(t("results.tuitionInternational"), college.estimated_tuition_international or "N/A")

        if college.scholarships:
            st.markdown(f"**💰 {t('results.scholarships')}**")
            for scholarship in college.scholarships:
                name = scholarship.name
                if scholarship.website:
                    name = f"[{name}]({scholarship.website})"
                st.markdown(
                    f"- **{name}** ({scholarship.estimated_amount}): {scholarship.description}  \n"
                    f"  _{t('results.eligibility')}: {scholarship.eligibility}_"
                )

        if college.details is None:
            if st.button(t("results.learnMore"), key=f"details_{index}"):
                _load_details(college, student_summary)
                st.rerun()
        else:
            _render_details(college)


def _render_details(college: College):
    details = college.details
    with st.expander(t("results.learnMore"), expanded=True):
        col1, col2 = st.columns(2)
        with col1:
            st.metric(t("results.averageGpa"), details.average_gpa or "N/A")
        with col2:
            st.metric(t("results.acceptanceRate"), details.acceptance_rate or "N/A")
        st.markdown(f"**{t('results.overview')}:** {details.overview}")
        st.markdown(f"**{t('results.programHighlights')}:** {details.program_highlights}")
        st.markdown(f"**{t('results.diversity')}:** {details.diversity_and_culture}")
        st.markdown(f"**{t('results.studentExperience')}:** {details.student_experience}")
        if details.testimonials:
            st.markdown(f"**{t('results.testimonials')}**")
            for testimonial in details.testimonials:
                st.info(f"“{testimonial.quote}”  \n~ {testimonial.author}")
        if college.video_url:
            st.video(college.video_url)
