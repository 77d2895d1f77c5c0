# streamlit_app/Home.py
from __future__ import annotations

import streamlit as st

from ui.bootstrap import get_ui_settings
from ui.components import render_chip_row, render_hero, render_model_card, requirement_sliders
from ui.nav import top_nav
from ui.theme import inject_styles

from Surrogate_selector.scoring.engine import ScoringMode, normalize_requirements, rank
from Surrogate_selector.scoring.explain import explain_ranking


st.set_page_config(
    page_title="Surrogate Model Selection Guide",
    layout="centered",
    initial_sidebar_state="collapsed",
)

inject_styles()
top_nav(active="Selector")

settings = get_ui_settings()

render_hero(
    title="Surrogate Model Selection Guide",
    subtitle="Set your requirements; candidates are re-ranked on every change.",
)

# -----------------------------
# Requirements
# -----------------------------
req = requirement_sliders()

needs = normalize_requirements(req)
chips = [
    f"parameter need {needs.parameter_need:.2f}",
    f"latency need {needs.latency_need:.2f}",
    f"smoothness need {needs.smoothness_need:.2f}",
]
if settings.mode is ScoringMode.LEGACY_EQUAL:
    chips.append("legacy scoring")
render_chip_row(chips)

# -----------------------------
# Recommendations
# -----------------------------
st.subheader("Model Recommendations")

for rc in rank(req, mode=settings.mode):
    render_model_card(rc)

if settings.show_breakdown:
    st.dataframe(explain_ranking(req, mode=settings.mode), hide_index=True, use_container_width=True)
