# -*- coding: utf-8 -*-
"""Chat with an AI counselor about the current analysis"""

import logging

import streamlit as st

from compass_helpers import gemini_service
from compass_helpers.locales import language_name
from compass_helpers.models import ChatMessage
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

st.set_page_config(page_title="AI Counselor", page_icon="💬", layout="wide")
configure_logging()

if not check_password():
    st.stop()

sidebar_setup()
init_session_state({'chat_history': [], 'chat_analysis_id': None})

st.title(f"💬 {t('chat.title')}")

model = require_gemini()

analysis = st.session_state.get('analysis')
colleges = st.session_state.get('colleges') or []
if analysis is None or not colleges:
    st.warning(f"⚠️ {t('chat.missing')}")
    st.page_link("College_Finder.py", label="College Finder", icon="🎓")
    st.stop()

# A new analysis starts a new conversation
if st.session_state.chat_analysis_id != id(analysis):
    st.session_state.chat_history = []
    st.session_state.chat_analysis_id = id(analysis)

col1, col2 = st.columns([4, 1])
with col1:
    st.caption(t("chat.discussing", count=len(colleges), names=", ".join(c.name for c in colleges)))
with col2:
    if st.button(t("chat.clear"), use_container_width=True):
        st.session_state.chat_history = []
        st.rerun()

for message in st.session_state.chat_history:
    with st.chat_message("assistant" if message.role == "model" else "user"):
        st.markdown(message.message)

prompt = st.chat_input(t("chat.placeholder"))
if prompt:
    with st.chat_message("user"):
        st.markdown(prompt)
    try:
        with st.spinner(t("chat.thinking")):
            chat = gemini_service.start_counselor_chat(
                model, analysis, colleges, language_name(current_locale()),
                history=st.session_state.chat_history,
            )
            reply = gemini_service.send_chat_message(chat, prompt)
    except gemini_service.GeminiServiceError as e:
        logger.warning("Counselor reply failed: %s", e)
        st.error(f"❌ {t('error.aiService')}")
    else:
        st.session_state.chat_history.append(ChatMessage("user", prompt))
        st.session_state.chat_history.append(ChatMessage("model", reply))
        with st.chat_message("assistant"):
            st.markdown(reply)
