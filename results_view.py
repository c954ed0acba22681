# results_view.py
from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from footprint import breakdown_frame
from guides import disclaimer, improvement_ideas, warming_context
from models import Period
from settings import QuizSettings
from ui_components import metric_row, pill
from warming import series_frame
from wizard import QuizSession

PIE_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#AA46BE"]

# below this, millions would round to 0.00
MILLION_THRESHOLD = 10_000


def format_tonnes(value: float) -> str:
    if abs(value) >= MILLION_THRESHOLD:
        return f"{value / 1_000_000:.2f} million tCO₂e"
    return f"{value:,.1f} tCO₂e"


# ---------------- Figures ----------------


def warming_figure(df_series: pd.DataFrame) -> go.Figure:
    fig = px.line(
        df_series,
        x="Year",
        y="Temp (°C)",
        color="Kind",
        labels={"Temp (°C)": "Global temp. (°C)"},
        title="Projected warming to 2100 (teaching model)",
    )
    fig.update_layout(yaxis_range=[0, 5])
    return fig


def breakdown_figure(df_breakdown: pd.DataFrame) -> go.Figure:
    fig = px.pie(
        df_breakdown,
        names="Category",
        values="tCO2e",
        title="Your yearly footprint",
        color_discrete_sequence=PIE_COLORS,
    )
    fig.update_traces(textinfo="percent+label")
    return fig


# ---------------- Page ----------------


def page_results(session: QuizSession, settings: QuizSettings):
    st.header("Results and final reflection")
    st.caption("These results are based on the choices you made during the quiz.")

    cumulative = session.cumulative_total()
    t_end = session.projected_warming()

    col_warm, col_pie = st.columns(2)
    with col_warm:
        with st.container(border=True):
            st.markdown("If everyone lived with choices like yours, average global temperature could approach:")
            st.metric("Warming by 2100", f"≈ {t_end:.2f} °C")
            st.plotly_chart(warming_figure(series_frame(cumulative, session.calibration)), width="stretch")
            st.caption(disclaimer())

    with col_pie:
        with st.container(border=True):
            df = breakdown_frame(session.selections, session.catalog)
            if df.empty:
                st.info("No emissions to show yet. Answer a few questions first.")
            else:
                st.plotly_chart(breakdown_figure(df), width="stretch")
                for _, row in df.iterrows():
                    st.markdown(f"- **{row['Category']}**: {row['tCO2e']:.2f} tCO₂e/year ({row['Share (%)']:.1f}%)")

    with st.container(border=True):
        st.subheader("Cumulative emissions to 2100")
        metrics = [
            ("Cumulative to 2100", format_tonnes(cumulative)),
            ("Warming above pre-industrial", f"{t_end:.2f} °C"),
        ]
        if settings.show_periods:
            metrics += [
                ("Per year", f"{session.annual_total():.2f} tCO₂e"),
                ("Per month", f"{session.annual_total(Period.MONTHLY):.2f} tCO₂e"),
                ("Per week", f"{session.annual_total(Period.WEEKLY):.2f} tCO₂e"),
            ]
        metric_row(metrics, columns=2)

    st.subheader("What do these numbers mean?")
    for item in warming_context():
        pill(item["name"], item["why"])

    st.subheader("What now? Ideas to improve")
    for item in improvement_ideas():
        pill(item["title"], item["summary"])
