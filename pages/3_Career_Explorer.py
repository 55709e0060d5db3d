# -*- coding: utf-8 -*-
"""Job market outlook and career paths for a degree"""

import logging

import streamlit as st

from compass_helpers import gemini_service
from compass_helpers.constants import DEGREE_PROGRAMS
from compass_helpers.locales import language_name
from compass_helpers.utility import (
    check_password,
    configure_logging,
    current_locale,
    init_session_state,
    require_gemini,
    sidebar_setup,
    t,
)

logger = logging.getLogger(__name__)

st.set_page_config(page_title="Career Explorer", page_icon="🧭", layout="wide")
configure_logging()

if not check_password():
    st.stop()

sidebar_setup()
init_session_state({'career_data': None, 'career_degree': None, 'career_path_details': {}})

st.title(f"🧭 {t('careerExplorer.title')}")
st.markdown(t("careerExplorer.intro"))

model = require_gemini()
language = language_name(current_locale())

analysis = st.session_state.get('analysis')
choices = [p.name for p in analysis.pathways] if analysis is not None else []
choices += [d for d in DEGREE_PROGRAMS[1:] if d not in choices]

col1, col2 = st.columns([1, 1])
with col1:
    picked = st.selectbox(t("careerExplorer.degree"), choices, help=t("careerExplorer.degreeHelp"))
with col2:
    typed = st.text_input(t("careerExplorer.typeDegree"))
degree = typed.strip() or picked

if st.button(t("careerExplorer.explore"), type="primary", use_container_width=True):
    try:
        with st.spinner(t("careerExplorer.researching", degree=degree)):
            st.session_state.career_data = gemini_service.get_career_data(model, degree, language)
        st.session_state.career_degree = degree
        st.session_state.career_path_details = {}
    except gemini_service.GeminiServiceError as e:
        logger.warning("Career data for %s failed: %s", degree, e)
        st.error(f"❌ {t('careerExplorer.loadFailed')}")

data = st.session_state.career_data
if data is not None:
    st.divider()
    st.header(f"📈 {st.session_state.career_degree}")

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric(t("careerExplorer.careerPaths"), data.career_path_count)
    with col2:
        st.metric(t("careerExplorer.industries"), data.industry_count)
    with col3:
        st.metric(
            t("careerExplorer.averageSalary"),
            data.average_salary_range or t("careerExplorer.notAvailable"),
        )

    overview = data.job_market_overview
    st.subheader(t("careerExplorer.marketOverview"))
    st.markdown(overview.overall_outlook)
    col1, col2 = st.columns(2)
    with col1:
        st.info(f"**{t('careerExplorer.growthRate')}:** {overview.growth_rate}")
    with col2:
        st.info(f"**{t('careerExplorer.competition')}:** {overview.competition_level}")

    st.subheader(t("careerExplorer.topPaths"))
    for i, path in enumerate(data.top_career_paths):
        with st.expander(path.title):
            st.write(path.description)
            details = st.session_state.career_path_details.get(path.title)
            if details is None:
                if st.button(t("careerExplorer.showDetails"), key=f"career_details_{i}"):
                    try:
                        with st.spinner(t("careerExplorer.loadingDetails")):
                            st.session_state.career_path_details[path.title] = (
                                gemini_service.get_career_path_details(model, path.title, language)
                            )
                        st.rerun()
                    except gemini_service.GeminiServiceError as e:
                        logger.warning("Career path details for %s failed: %s", path.title, e)
                        st.error(f"❌ {t('careerExplorer.detailsFailed')}")
            else:
                st.markdown(f"**{t('careerExplorer.responsibilities')}**")
                st.markdown("\n".join(f"- {r}" for r in details.day_to_day_responsibilities))
                st.markdown(f"**{t('careerExplorer.skills')}**")
                st.markdown(", ".join(details.required_skills))
                st.markdown(f"**{t('careerExplorer.progression')}:** {details.career_progression}")
