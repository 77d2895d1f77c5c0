"""
Scoring Details

Shows, for the current requirements, every per-axis closeness value and how much
each axis contributes to the final match score.
"""

from __future__ import annotations

import streamlit as st

from ui.bootstrap import get_ui_settings
from ui.components import requirement_sliders
from ui.nav import top_nav
from ui.theme import inject_styles

from Surrogate_selector.catalog.models import DEFAULT_CATALOG
from Surrogate_selector.scoring.engine import DEFAULT_WEIGHTS, ScoringMode
from Surrogate_selector.scoring.explain import explain_ranking


st.set_page_config(
    page_title="Scoring Details",
    layout="wide",
    initial_sidebar_state="collapsed",
)

inject_styles()
top_nav(active="Scoring Details")

settings = get_ui_settings()

mode_label = st.radio(
    "Formula",
    options=[ScoringMode.WEIGHTED.value, ScoringMode.LEGACY_EQUAL.value],
    index=0 if settings.mode is ScoringMode.WEIGHTED else 1,
    horizontal=True,
)
mode = ScoringMode(mode_label)

left, right = st.columns([1, 2])
with left:
    req = requirement_sliders(key_prefix="details")
    st.markdown(
        f"Weights: dimensionality **{DEFAULT_WEIGHTS.dimensionality:.2f}**, "
        f"latency **{DEFAULT_WEIGHTS.latency:.2f}**, smoothness **{DEFAULT_WEIGHTS.smoothness:.2f}**"
    )

with right:
    df = explain_ranking(req, mode=mode)
    st.dataframe(df.drop(columns=["color"]), hide_index=True, use_container_width=True)

    st.markdown("##### Catalog ratings (0-9)")
    st.dataframe(
        [
            {"name": c.name, **dict(zip(("dimensionality", "latency", "smoothness"), c.ratings.as_tuple()))}
            for c in DEFAULT_CATALOG
        ],
        hide_index=True,
        use_container_width=True,
    )
