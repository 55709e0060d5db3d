# -*- coding: utf-8 -*-
"""Saved analyses & tuition comparison"""

import json
from datetime import datetime

import pandas as pd
import plotly.express as px
import streamlit as st

from compass_helpers import history
from compass_helpers.utility import check_password, configure_logging, sidebar_setup, t

st.set_page_config(page_title="Saved Analyses", page_icon="📂", layout="wide")
configure_logging()

if not check_password():
    st.stop()

sidebar_setup()

st.title(f"📂 {t('savedAnalyses.title')}")
st.markdown(t("savedAnalyses.intro"))

# set by the delete button on the previous run
flash = st.session_state.pop('saved_analyses_flash', None)
if flash:
    st.success(f"✅ {flash}")

records = history.list_analyses()

if not records:
    st.warning(f"⚠️ {t('savedAnalyses.empty')}")
    st.info(f"💡 {t('savedAnalyses.emptyHint')}")
    st.stop()


def _label(record):
    when = datetime.fromtimestamp(record.timestamp / 1000).strftime("%Y-%m-%d %H:%M")
    name = record.analysis.student_name or record.file_name or t("savedAnalyses.unnamed")
    return f"{when} · {name}"


labels = {record.id: _label(record) for record in records}
selected_id = st.selectbox(t("savedAnalyses.select"), list(labels.keys()), format_func=labels.get)
record = next(r for r in records if r.id == selected_id)

col1, col2, col3 = st.columns(3)
with col1:
    st.metric(t("savedAnalyses.scoreReport"), record.file_name or t("savedAnalyses.notAvailable"))
with col2:
    st.metric(t("savedAnalyses.colleges"), len(record.colleges))
with col3:
    st.metric(t("savedAnalyses.scholarships"), sum(len(c.scholarships) for c in record.colleges))

st.subheader(t("savedAnalyses.summary"))
st.write(record.analysis.summary)
if record.analysis.key_strengths:
    st.markdown("\n".join(f"- ✅ {s}" for s in record.analysis.key_strengths))

st.divider()
st.header(f"💵 {t('savedAnalyses.tuitionTitle')}")

df_colleges = pd.DataFrame([
    {
        'College': c.name,
        'Local': history.parse_amount(c.estimated_tuition_local),
        'International': history.parse_amount(c.estimated_tuition_international),
        'Local (as quoted)': c.estimated_tuition_local,
        'International (as quoted)': c.estimated_tuition_international,
        'Scholarships': len(c.scholarships),
    }
    for c in record.colleges
])

if df_colleges.empty:
    st.info(t("savedAnalyses.noColleges"))
else:
    chart_df = df_colleges.melt(
        id_vars=['College'],
        value_vars=['Local', 'International'],
        var_name='Tuition',
        value_name='Estimated Amount',
    ).dropna(subset=['Estimated Amount'])

    if chart_df.empty:
        st.info(t("savedAnalyses.unreadableTuition"))
    else:
        fig = px.bar(
            chart_df,
            x='College',
            y='Estimated Amount',
            color='Tuition',
            barmode='group',
            title=t("savedAnalyses.chartTitle"),
            color_discrete_map={'Local': '#00CC96', 'International': '#636EFA'},
        )
        st.plotly_chart(fig, use_container_width=True)

    st.dataframe(
        df_colleges[['College', 'Local (as quoted)', 'International (as quoted)', 'Scholarships']],
        use_container_width=True,
    )

    st.download_button(
        label=f"📥 {t('savedAnalyses.download')}",
        data=json.dumps(record.to_dict(), indent=4, ensure_ascii=False),
        file_name=f"analysis_{record.id}.json",
        mime='application/json',
        use_container_width=True,
    )

st.divider()
if st.button(f"🗑️ {t('savedAnalyses.delete')}", use_container_width=True):
    if history.delete_analysis(record.id):
        st.session_state.saved_analyses_flash = t("savedAnalyses.deleted", name=labels[record.id])
    st.rerun()
