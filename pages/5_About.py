import streamlit as st

from compass_helpers.utility import configure_logging

# region <--------- Streamlit App Configuration --------->
st.set_page_config(
    layout="centered",
    page_title="About College Compass"
)
# endregion <--------- Streamlit App Configuration --------->

configure_logging()

st.title("About College Compass")

st.markdown(
    """
    College Compass reads a student's test-score report, asks Google Gemini for an academic
    profile and matching universities, and presents the results as cards you can explore further.
    """
)

st.subheader("Core Features")
st.markdown(
    """
    - **Score Upload:** PNG, JPG or PDF score reports up to 10 MB, plus an optional student picture.
    - **Preferences:** Location, degree program, university size, campus setting, rankings and scholarships.
    - **Parallel Analysis:** Student profile and college recommendations are requested at the same time.
    - **College Details:** Expand any college for highlights, culture, testimonials, GPA and acceptance rate.
    - **AI Counselor:** Chat about your results with a counselor that knows your analysis.
    - **Career Explorer:** Job market outlook and top career paths for any pathway or degree.
    - **Saved Analyses:** Keep results as `data/analysis_*.json` and compare tuition estimates.
    - **Languages:** English, Spanish and French; AI responses follow the selected language.
    """
)

with st.expander("How to Use"):
    st.markdown(
        """
        1. **Set up Gemini:** Enter your Google API key in the sidebar and click *Initialize / Update Gemini*
           (or configure `GOOGLE_API_KEY` in `.streamlit/secrets.toml`).
        2. **Upload Scores:** On the *College Finder* page, upload a score report. No report? Use the
           *Sample Score Generator* page.
        3. **Set Preferences:** Choose location, degree and campus options; tick scholarships if needed.
        4. **Find Colleges:** Click *Find My Colleges* and review your summary, pathways and colleges.
        5. **Dig Deeper:** Use *Learn more*, the *AI Counselor* and the *Career Explorer*.
        6. **Save:** Save the analysis to compare it later on *Saved Analyses*.
        """
    )

with st.expander("Configuration"):
    st.markdown(
        """
        - `GOOGLE_API_KEY`: Gemini API key (secrets or environment).
        - `GEMINI_MODEL`: default model, e.g. `gemini-2.5-flash`.
        - `password` / `STREAMLIT_PASSWORD`: optional app password.
        - `LOG_LEVEL`: logging level, `INFO` by default.
        """
    )

st.caption("AI estimates of tuition, scholarships and admissions are indicative only; always check with the university.")
