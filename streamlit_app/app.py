"""Pilot Health — Streamlit dashboard for health professionals.

Run with:
    streamlit run streamlit_app/app.py
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from complaint_records import RecordFileError
from health_engine.engine import HealthScoringEngine
from health_engine.math.fatigue_index import location_weight
from health_engine.math.ipaq import calculate_met_minutes
from health_engine.models.enums import SUPPORTED_LOCALES
from health_engine.reports import scores_to_frame, summarize

from helpers import (
    ACTIVITY_COLORS,
    BMI_COLORS,
    LOCATION_OPTIONS,
    build_record,
    format_optional,
    records_from_upload,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Pilot Health Scoring",
    page_icon="✈️",
    layout="wide",
)


@st.cache_resource
def get_engine() -> HealthScoringEngine:
    return HealthScoringEngine()


def _badge(text: str, color: str) -> None:
    st.markdown(
        f'<div style="background:{color};padding:6px 12px;border-radius:4px;'
        f'margin:2px 0;display:inline-block;">{text}</div>',
        unsafe_allow_html=True,
    )


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

locale = st.sidebar.selectbox("Language", SUPPORTED_LOCALES, index=0)
engine = get_engine()

tab_single, tab_cohort = st.tabs(["Complaint", "Cohort report"])

# ---------------------------------------------------------------------------
# Single complaint calculator
# ---------------------------------------------------------------------------

with tab_single:
    col_profile, col_complaint = st.columns(2)
    form: dict = {}

    with col_profile:
        st.subheader("Pilot profile")
        form["pilot_name"] = st.text_input("Name", "")
        form["weight_kg"] = st.number_input("Weight (kg)", 0.0, 250.0, 75.0, step=0.5)
        form["height_m"] = st.number_input("Height (m)", 0.0, 2.5, 1.75, step=0.01)

    with col_complaint:
        st.subheader("Complaint")
        form["location"] = st.selectbox("Location", LOCATION_OPTIONS)
        form["intensity"] = st.slider("Pain intensity", 0, 10, 5)
        st.caption(f"Location weight: {location_weight(form['location'])}")

    with st.expander("IPAQ activity questionnaire", expanded=True):
        form["has_ipaq"] = st.checkbox("Questionnaire submitted", value=True)
        c1, c2, c3 = st.columns(3)
        form["vigorous_days"] = c1.number_input("Vigorous days", 0, 7, 0)
        form["vigorous_minutes"] = c1.number_input("Vigorous min/day", 0, 600, 0)
        form["moderate_days"] = c2.number_input("Moderate days", 0, 7, 0)
        form["moderate_minutes"] = c2.number_input("Moderate min/day", 0, 600, 0)
        form["walking_days"] = c3.number_input("Walking days", 0, 7, 0)
        form["walking_minutes"] = c3.number_input("Walking min/day", 0, 600, 0)

    with st.expander("NASA-TLX workload", expanded=True):
        form["has_tlx"] = st.checkbox("Assessment submitted", value=True)
        for dim in ("mental", "physical", "temporal", "performance", "effort", "frustration"):
            r_col, w_col = st.columns([3, 1])
            form[f"{dim}_rating"] = r_col.slider(f"{dim.title()} rating", 0, 100, 50)
            form[f"{dim}_weight"] = w_col.number_input(f"{dim.title()} weight", 0, 5, 2)

    record = build_record(form)
    scores = engine.score(record)

    st.divider()
    m1, m2, m3, m4 = st.columns(4)
    with m1:
        st.metric("BMI", format_optional(scores.bmi.bmi))
        _badge(scores.bmi.classification.label(locale), BMI_COLORS[scores.bmi.classification])
    with m2:
        st.metric("Activity", "")
        _badge(scores.activity_level.label(locale), ACTIVITY_COLORS[scores.activity_level])
        if record.activity is not None:
            st.caption(f"{calculate_met_minutes(record.activity).total_met:.0f} MET-min/week")
    with m3:
        st.metric("Workload (TLX)", format_optional(scores.workload_score))
    with m4:
        st.metric("Fatigue-Injury Index", format_optional(scores.fatigue_injury_index))

# ---------------------------------------------------------------------------
# Cohort report
# ---------------------------------------------------------------------------

with tab_cohort:
    upload = st.file_uploader("Complaint export (JSON or CSV)", type=["json", "csv"])
    if upload is not None:
        try:
            records = records_from_upload(upload.getvalue(), upload.name)
        except RecordFileError as exc:
            st.error(str(exc))
        else:
            cohort = engine.score_many(records)
            summary = summarize(cohort, locale)

            k1, k2, k3 = st.columns(3)
            k1.metric("Complaints", summary.total_complaints)
            k2.metric("Pilots", summary.total_pilots)
            k3.metric("Avg intensity", summary.average_intensity)

            d1, d2, d3 = st.columns(3)
            d1.bar_chart(pd.Series(summary.complaints_by_location, name="Location"))
            d2.bar_chart(pd.Series(summary.bmi_distribution, name="BMI"))
            d3.bar_chart(pd.Series(summary.activity_distribution, name="Activity"))

            st.dataframe(scores_to_frame(cohort, locale), use_container_width=True)
