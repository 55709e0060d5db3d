import os

import streamlit as st

DEFAULT_LOG_LEVEL = "INFO"


def get_setting(name: str, default=None, env_name: str = None):
    """Look a setting up in ``st.secrets`` first, then the environment.

    A missing ``.streamlit/secrets.toml`` counts as an empty secrets store.
    """
    try:
        value = st.secrets.get(name)
    except FileNotFoundError:
        value = None
    if value is None:
        value = os.environ.get(env_name or name)
    return default if value in (None, "") else value
