import logging

import altair as alt
import streamlit as st
from contextlib import contextmanager
from typing import Dict, List, Optional

from core.charts import CHART_CARDS, build_dashboard_charts
from core.config import get_settings
from core.data import load_dataset
from core.logging_config import setup_logging
from core.summary import SUMMARY_ERROR_MESSAGE, build_summary

alt.data_transformers.disable_max_rows()
logger = logging.getLogger(__name__)

# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .hero {padding: 24px 0 12px;border-bottom: 1px solid #1f2937;margin-bottom: 16px;}
        .hero .badge {display: inline-block;font-size: 0.8rem;color: #38bdf8;border: 1px solid #1e3a8a;
                      border-radius: 999px;padding: 2px 10px;margin-bottom: 8px;}
        .hero .title {font-size: 2.0rem;font-weight: 700;line-height: 1.2;}
        .hero .lead {color: #9ca3af;font-size: 0.95rem;max-width: 720px;margin-top: 8px;}
        .card {border: 1px solid #1f2937;border-radius: 16px;padding: 16px;
               box-shadow: 0 10px 25px rgba(0,0,0,0.15); margin-bottom: 12px;}
        .card-title {font-weight: 600;font-size: 1.1rem;}
        .card-description {font-size: 0.85rem;color: #9ca3af;margin-top: 4px;}
        .footer {border-top: 1px solid #1f2937;padding-top: 12px;margin-top: 16px;font-size: 0.8rem;color: #6b7280;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str, description: Optional[str] = None):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-title">{title}</div>
          <div class="card-description">{description or ""}</div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def render_hero(summary: Dict[str, List[dict]]):
    st.markdown(
        """
        <div class="hero">
          <div class="badge">Live from your HLTB dataset</div>
          <div class="title">Turn game completion times<br/>into a storytelling dashboard.</div>
          <div class="lead">Explore how long players actually spend finishing games. See trends across
          genres, platforms, and game modes with interactive visualizations powered by the
          HowLongToBeat dataset.</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
    cols = st.columns(3)
    cols[0].metric("Popular genres", len(summary.get("topGenres") or []))
    cols[1].metric("Platforms compared", len(summary.get("topPlatforms") or []))
    cols[2].metric("Interactive charts", len(CHART_CARDS))


def render_chart_grid(summary: Dict[str, List[dict]]):
    charts = build_dashboard_charts(summary)
    names = list(CHART_CARDS)
    for start in range(0, len(names), 2):
        grid = st.columns(2)
        for col, name in zip(grid, names[start:start + 2]):
            title, description = CHART_CARDS[name]
            with col:
                with card(title, description):
                    if not summary.get(name):
                        st.info("No data available for this chart.")
                    else:
                        st.altair_chart(charts[name].properties(title=""), use_container_width=True)


def render_footer(row_count: Optional[int] = None):
    rows_txt = f" · {row_count:,} rows" if row_count is not None else ""
    st.markdown(
        f"""
        <div class="footer">
          <b>About this page</b><br/>
          Reads the HowLongToBeat CSV once on the server and turns it into a browseable set of
          charts.<br/>
          HLTB Insights · Built with Streamlit · Altair · CSV data{rows_txt}
        </div>
        """,
        unsafe_allow_html=True,
    )


# ---------- UI setup ----------
st.set_page_config(page_title="HLTB Insights", layout="wide")
inject_base_styles()

settings = get_settings()
setup_logging(settings.log_level)
try:
    dataset = load_dataset(settings.dataset_path)
    summary = build_summary(dataset, settings=settings)
except Exception:
    logger.exception("dashboard summary failed")
    st.error(SUMMARY_ERROR_MESSAGE)
    st.stop()

render_hero(summary)
render_chart_grid(summary)
render_footer(len(dataset))
