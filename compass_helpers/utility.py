import hmac
import logging

import streamlit as st

from compass_helpers import gemini_service
from compass_helpers.config import DEFAULT_LOG_LEVEL, get_setting
from compass_helpers.locales import DEFAULT_LOCALE, LOCALES, translate

logger = logging.getLogger(__name__)

_logging_configured = False


def configure_logging():
    """Set up root logging once per process; Streamlit re-runs scripts on every interaction."""
    global _logging_configured
    if _logging_configured:
        return
    level = str(get_setting("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    _logging_configured = True


def init_session_state(defaults: dict):
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def _app_password():
    return get_setting("password", env_name="STREAMLIT_PASSWORD")


def check_password():
    """Return True if the app is open or the user entered the correct password.

    The password comes from st.secrets["password"] or the STREAMLIT_PASSWORD
    environment variable. With neither configured the app is open.
    """
    secret = _app_password()
    if secret is None:
        return True

    def password_entered():
        entered = st.session_state.get("password", "")
        if hmac.compare_digest(entered, str(secret)):
            st.session_state["password_correct"] = True
            del st.session_state["password"]
        else:
            st.session_state["password_correct"] = False

    if st.session_state.get("password_correct", False):
        return True

    st.text_input("Password", type="password", on_change=password_entered, key="password")
    if "password_correct" in st.session_state and not st.session_state["password_correct"]:
        st.error("😕 Password incorrect")
    return False


def current_locale() -> str:
    return st.session_state.get("locale", DEFAULT_LOCALE)


def t(key: str, **params) -> str:
    return translate(current_locale(), key, **params)


def _initialize_gemini(api_key: str, model_name: str) -> bool:
    try:
        model, used = gemini_service.create_model(api_key, model_name)
    except Exception as e:
        logger.exception("Gemini configuration failed")
        st.error(f"❌ Gemini configuration failed: {e}")
        return False
    st.session_state.gemini_model = model
    st.session_state.gemini_model_name = used
    st.session_state.gemini_initialized = True
    if used != model_name:
        st.warning(f"⚠️ '{model_name}' unavailable. Falling back to {used}.")
    return True


def sidebar_setup():
    """Language switcher and Gemini setup shared by every page."""
    init_session_state({
        'locale': DEFAULT_LOCALE,
        'gemini_initialized': False,
        'selected_gemini_model': get_setting("GEMINI_MODEL", gemini_service.DEFAULT_MODEL),
    })
    configured_key = get_setting("GOOGLE_API_KEY")

    with st.sidebar:
        st.selectbox(
            "🌐 Language",
            list(LOCALES.keys()),
            format_func=lambda code: LOCALES[code]["label"],
            key="locale",
        )

        st.header("⚙️ Model & API Setup")
        google_api_key = st.text_input(
            "Google API Key",
            type="password",
            value=configured_key or "",
            help="Enter your Google Gemini API key",
        )

        options = list(gemini_service.MODEL_OPTIONS.keys())
        if st.session_state.selected_gemini_model not in options:
            options.insert(0, st.session_state.selected_gemini_model)
        chosen = st.selectbox(
            "Model",
            options,
            format_func=lambda k: gemini_service.MODEL_OPTIONS.get(k, k),
            index=options.index(st.session_state.selected_gemini_model),
        )
        st.session_state.selected_gemini_model = chosen
        st.caption("Flash models read PDFs and images at the lowest cost.")

        if st.button("Initialize / Update Gemini", use_container_width=True, disabled=not google_api_key):
            if _initialize_gemini(google_api_key, chosen):
                st.success(f"✅ Initialized model: {st.session_state.gemini_model_name}")
        elif configured_key and not st.session_state.gemini_initialized:
            _initialize_gemini(configured_key, chosen)

        if st.session_state.gemini_initialized:
            st.caption(f"Using {st.session_state.gemini_model_name}")


def require_gemini():
    """Stop the page with a warning unless a Gemini model is ready."""
    if not st.session_state.get('gemini_initialized') or not st.session_state.get('gemini_model'):
        st.warning(f"⚠️ {t('error.notInitialized')}")
        st.stop()
    return st.session_state.gemini_model
