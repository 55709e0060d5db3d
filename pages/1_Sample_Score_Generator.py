# -*- coding: utf-8 -*-
"""Generate a fictional score report to try the college finder with"""

import logging

import streamlit as st

from compass_helpers import gemini_service
from compass_helpers.constants import GRADES
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

st.set_page_config(page_title="Sample Score Generator", page_icon="🧪", layout="wide")
configure_logging()

if not check_password():
    st.stop()

sidebar_setup()
init_session_state({'sample_report': None})

st.title(f"🧪 {t('scoreGenerator.title')}")
st.markdown(t("scoreGenerator.intro"))

model = require_gemini()

grade = st.selectbox(t("scoreGenerator.grade"), GRADES)

if st.button(t("scoreGenerator.generate"), type="primary", use_container_width=True):
    try:
        with st.spinner(t("scoreGenerator.generating")):
            st.session_state.sample_report = gemini_service.generate_sample_score_report(
                model, grade, language_name(current_locale())
            )
    except gemini_service.GeminiServiceError as e:
        logger.warning("Sample report generation failed: %s", e)
        st.error(f"❌ {t('error.aiService')}")

if st.session_state.sample_report:
    st.divider()
    st.text_area(t("scoreGenerator.reportLabel"), st.session_state.sample_report, height=360)
    st.download_button(
        label=f"📥 {t('scoreGenerator.download')}",
        data=st.session_state.sample_report,
        file_name="sample_score_report.txt",
        mime="text/plain",
        use_container_width=True,
    )
    st.caption(t("scoreGenerator.tip"))
