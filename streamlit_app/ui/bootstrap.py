# streamlit_app/ui/bootstrap.py
from __future__ import annotations

import os
from dataclasses import dataclass

import streamlit as st

from Surrogate_selector.scoring.engine import ScoringMode


def _env_bool(key: str, default: str = "0") -> bool:
    v = os.environ.get(key, default)
    return str(v).strip().lower() in {"1", "true", "yes"}


@dataclass(frozen=True, slots=True)
class UISettings:
    mode: ScoringMode
    show_breakdown: bool


@st.cache_resource(show_spinner=False)
def get_ui_settings() -> UISettings:
    """
    Does:
        Read UI-only flags once per session.
        SS_LEGACY_SCORING=1 -> unweighted legacy formula; SS_SHOW_BREAKDOWN=1 -> per-axis table on Home.
    """
    mode = ScoringMode.LEGACY_EQUAL if _env_bool("SS_LEGACY_SCORING", "0") else ScoringMode.WEIGHTED
    return UISettings(mode=mode, show_breakdown=_env_bool("SS_SHOW_BREAKDOWN", "0"))
