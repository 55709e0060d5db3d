# -*- coding: utf-8 -*-
"""College Compass - score report analysis and college matching"""

import logging

import streamlit as st

from compass_helpers import history
from compass_helpers.analysis import (
    AnalysisError,
    AnalysisRequest,
    MissingScoreFileError,
    all_scholarships_selected,
    run_analysis,
    toggle_scholarship_type,
)
from compass_helpers.constants import (
    ALL_SCHOLARSHIPS_KEY,
    CAMPUS_SETTINGS,
    DEFAULT_LOCATION,
    DEGREE_PROGRAMS,
    GRANT_AMOUNTS,
    PICTURE_FILE_TYPES,
    SCHOLARSHIP_TYPES,
    SCORE_FILE_TYPES,
    UNIVERSITY_SIZES,
    flatten_locations,
    location_group_of,
)
from compass_helpers.file_reader import FileReadError, read_uploaded_file
from compass_helpers.locales import language_name
from compass_helpers.models import AnalysisData
from compass_helpers.render import (
    clear_error,
    render_college_card,
    render_degree_pathways,
    render_error,
    render_summary_card,
    set_error,
)
from compass_helpers.utility import (
    check_password,
    configure_logging,
    current_locale,
    init_session_state,
    sidebar_setup,
    t,
)

logger = logging.getLogger(__name__)

st.set_page_config(page_title="College Compass", page_icon="🎓", layout="wide")
configure_logging()

if not check_password():
    st.stop()

sidebar_setup()

init_session_state({
    'score_file': None,
    'student_picture': None,
    'analysis': None,
    'colleges': [],
    'analysis_file_name': None,
    'scholarship_types': [],
    'run_requested': False,
    'saved_record_id': None,
    'location': DEFAULT_LOCATION,
    'degree_program': DEGREE_PROGRAMS[0],
    'university_size': UNIVERSITY_SIZES[0],
    'campus_setting': CAMPUS_SETTINGS[0],
    'prioritize_rankings': False,
    'wants_scholarship': False,
    'min_grant_amount': GRANT_AMOUNTS[0],
})


def _read_upload(uploaded, state_key: str, allowed_types):
    """Encode a new upload into session state, showing progress while it reads."""
    id_key = f"{state_key}_upload_id"
    if uploaded is None:
        st.session_state[state_key] = None
        st.session_state[id_key] = None
        return
    upload_id = getattr(uploaded, "file_id", uploaded.name)
    if st.session_state.get(id_key) == upload_id and st.session_state[state_key] is not None:
        return

    st.session_state[state_key] = None
    progress = st.progress(0, text=t("form.uploading", progress=0))
    try:
        file_data = read_uploaded_file(
            uploaded,
            allowed_types,
            on_progress=lambda p: progress.progress(p, text=t("form.uploading", progress=p)),
        )
    except FileReadError as e:
        logger.warning("Upload rejected: %s", e)
        st.error(f"❌ {e}")
        return
    finally:
        progress.empty()
    st.session_state[state_key] = file_data
    st.session_state[id_key] = upload_id


def _on_scholarship_toggle(option: str):
    selected = toggle_scholarship_type(st.session_state.scholarship_types, option)
    st.session_state.scholarship_types = selected
    for scholarship_type in SCHOLARSHIP_TYPES:
        st.session_state[f"scholarship_{scholarship_type}"] = scholarship_type in selected
    st.session_state[f"scholarship_{ALL_SCHOLARSHIPS_KEY}"] = all_scholarships_selected(selected)


def _request_run():
    st.session_state.run_requested = True


def _build_request() -> AnalysisRequest:
    return AnalysisRequest(
        score_file=st.session_state.score_file,
        student_picture=st.session_state.student_picture,
        location=st.session_state.location,
        degree_program=st.session_state.degree_program,
        university_size=st.session_state.university_size,
        campus_setting=st.session_state.campus_setting,
        prioritize_rankings=st.session_state.prioritize_rankings,
        wants_scholarship=st.session_state.wants_scholarship,
        scholarship_types=list(st.session_state.scholarship_types),
        min_grant_amount=st.session_state.min_grant_amount,
    )


def _run():
    clear_error()
    st.session_state.analysis = None
    st.session_state.colleges = []
    st.session_state.saved_record_id = None

    model = st.session_state.get('gemini_model')
    if model is None:
        set_error(t("error.notInitialized"))
        return

    try:
        with st.spinner(t("results.loading.comprehensiveAnalysis")):
            result = run_analysis(model, _build_request(), language_name(current_locale()))
    except MissingScoreFileError:
        set_error(t("form.error.fileMissing"))
        return
    except AnalysisError:
        set_error(t("error.aiService"), retryable=True)
        return

    st.session_state.analysis = result.analysis
    st.session_state.colleges = result.colleges
    st.session_state.analysis_file_name = result.file_name


# Hero
st.title(f"🎓 {t('hero.title')}")
st.markdown(t("hero.subtitle"))
st.divider()

# Scores
st.header(t("form.scoreTitle"))
col1, col2 = st.columns([2, 1])
with col1:
    score_upload = st.file_uploader(t("form.uploadLabel"), type=["png", "jpg", "jpeg", "pdf"], key="score_upload")
    _read_upload(score_upload, "score_file", SCORE_FILE_TYPES)
    if st.session_state.score_file is not None:
        st.success(f"✅ {t('form.uploaded', name=st.session_state.score_file.name)}")
    else:
        st.caption(t("form.uploadStatus"))
    st.page_link("pages/1_Sample_Score_Generator.py", label=t("form.generateSample"), icon="🧪")
with col2:
    picture_upload = st.file_uploader(t("form.pictureLabel"), type=["png", "jpg", "jpeg"], key="picture_upload")
    _read_upload(picture_upload, "student_picture", PICTURE_FILE_TYPES)
    if st.session_state.student_picture is not None:
        st.image(st.session_state.student_picture.raw_bytes(), width=120)

st.divider()

# Preferences
st.header(t("form.preferencesTitle"))
col1, col2 = st.columns(2)
with col1:
    st.selectbox(
        t("form.location"),
        flatten_locations(),
        format_func=lambda o: f"{location_group_of(o)} › {o}" if location_group_of(o) else o,
        key="location",
    )
    st.selectbox(t("form.universitySize"), UNIVERSITY_SIZES, key="university_size")
with col2:
    st.selectbox(t("form.degree"), DEGREE_PROGRAMS, key="degree_program")
    st.selectbox(t("form.campusSetting"), CAMPUS_SETTINGS, key="campus_setting")

st.checkbox(t("form.prioritizeRankings"), key="prioritize_rankings")
st.checkbox(t("form.wantsScholarship"), key="wants_scholarship")

if st.session_state.wants_scholarship:
    with st.container(border=True):
        st.markdown(f"**{t('form.scholarshipTypes')}**")
        options = [ALL_SCHOLARSHIPS_KEY] + SCHOLARSHIP_TYPES
        cols = st.columns(len(options))
        for col, option in zip(cols, options):
            key = f"scholarship_{option}"
            if option == ALL_SCHOLARSHIPS_KEY:
                checked = all_scholarships_selected(st.session_state.scholarship_types)
            else:
                checked = option in st.session_state.scholarship_types
            if key not in st.session_state:
                st.session_state[key] = checked
            with col:
                st.checkbox(
                    t("form.allLabel") if option == ALL_SCHOLARSHIPS_KEY else option,
                    key=key,
                    on_change=_on_scholarship_toggle,
                    args=(option,),
                )
        st.selectbox(t("form.minGrant"), GRANT_AMOUNTS, key="min_grant_amount")

st.button(
    t("form.buttonText"),
    type="primary",
    use_container_width=True,
    disabled=st.session_state.score_file is None,
    on_click=_request_run,
)

if st.session_state.run_requested:
    st.session_state.run_requested = False
    _run()

render_error(on_retry=_request_run)

# Results
analysis = st.session_state.analysis
colleges = st.session_state.colleges
if analysis is not None or colleges:
    st.divider()
    if analysis is not None and analysis.student_name:
        st.header(t("results.analysisTitlePersonalized", name=analysis.student_name))
    else:
        st.header(t("results.analysisTitle"))

    if analysis is not None:
        render_summary_card(analysis, st.session_state.student_picture)
        render_degree_pathways(analysis.pathways)

    if colleges and analysis is not None:
        st.subheader(f"🏫 {t('results.colleges')}")
        for index, college in enumerate(colleges):
            render_college_card(college, analysis.summary, index)

        if st.session_state.saved_record_id:
            st.success(f"✅ {t('results.saved')}")
        elif st.button(f"💾 {t('results.save')}", use_container_width=True):
            try:
                record = history.save_analysis(
                    AnalysisData(
                        analysis=analysis,
                        colleges=colleges,
                        file_name=st.session_state.analysis_file_name or "",
                    )
                )
            except OSError as e:
                logger.exception("Saving analysis failed")
                st.error(f"❌ Saving failed: {e}")
            else:
                st.session_state.saved_record_id = record.id
                st.rerun()

st.divider()
st.caption("Built with Streamlit and Google Gemini AI")
