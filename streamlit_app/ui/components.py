from __future__ import annotations

import html

import streamlit as st

from Surrogate_selector.catalog.schema import RequirementInput
from Surrogate_selector.io.requirements import (
    dimensionality_label,
    format_percent,
    latency_label,
    smoothness_label,
)
from Surrogate_selector.scoring.engine import RankedCandidate


def render_hero(title: str, subtitle: str, kicker: str = "Surrogate model selection") -> None:
    st.markdown(
        f"""
        <div class="hero">
          <div class="kicker">{html.escape(kicker)}</div>
          <div class="h1">{html.escape(title)}</div>
          <p class="p">{html.escape(subtitle)}</p>
        </div>
        """,
        unsafe_allow_html=True,
    )


def requirement_sliders(key_prefix: str = "req") -> RequirementInput:
    """
    Does:
        Render the three requirement controls; slider bounds keep values in range.
    """
    dim = st.slider("Input Dimensionality", min_value=1, max_value=10, value=5, step=1, key=f"{key_prefix}_dim")
    st.caption(dimensionality_label(dim))

    lat = st.slider("Latency Tolerance", min_value=1, max_value=100, value=50, key=f"{key_prefix}_lat")
    st.caption(f"{latency_label(lat)} ({round(lat)}%)")

    smooth = st.slider("Function Smoothness", min_value=1, max_value=100, value=50, key=f"{key_prefix}_smooth")
    st.caption(f"{smoothness_label(smooth)} ({round(smooth)}%)")

    return RequirementInput(
        dimensionality_requirement=float(dim),
        latency_tolerance=float(lat),
        smoothness_requirement=float(smooth),
    )


def render_model_card(rc: RankedCandidate) -> None:
    """
    Does:
        Render one recommendation: name (+ badge), description, percentage and a colored bar.
    """
    c = rc.candidate
    color = c.color if (isinstance(c.color, str) and c.color.startswith("#")) else "#9ca3af"
    badge = '<span class="badge">Best Match</span>' if rc.best_match else ""
    width = max(0.0, min(100.0, rc.score * 100.0))
    st.markdown(
        f"""
        <div class="card">
          <div class="card-head">
            <div>
              <p class="title">{html.escape(c.name)}{badge}</p>
              <p class="meta">{html.escape(c.description)}</p>
            </div>
            <div class="score">
              <div class="value" style="color:{color};">{format_percent(rc.score)}</div>
              <div class="label">Match Score</div>
            </div>
          </div>
          <div class="bar"><div class="fill" style="width:{width:.2f}%;background:{color};"></div></div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_chip_row(items: list[str]) -> None:
    """Does:
        Render a row of small chips (normalized needs, active mode).
    """
    safe = [html.escape(str(x)) for x in items]
    chips = "".join([f'<div class="chip">{x}</div>' for x in safe])
    st.markdown(f'<div class="chip-row">{chips}</div>', unsafe_allow_html=True)
