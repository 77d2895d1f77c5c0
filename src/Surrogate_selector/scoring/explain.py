"""Explainable ranking table.

Does: Runs the same computation as rank() but returns per-axis closeness values and
weighted contributions as a DataFrame (one row per candidate, ranked order).
Public API: explain_ranking().
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np
import pandas as pd

from Surrogate_selector.catalog.models import DEFAULT_CATALOG
from Surrogate_selector.catalog.schema import Candidate, RequirementInput
from Surrogate_selector.scoring._constants import _SCALE_MAX
from Surrogate_selector.scoring.engine import (
    DEFAULT_WEIGHTS,
    ScoringMode,
    ScoringWeights,
    rank,
    score_breakdown,
    to_percent,
)

logger = logging.getLogger(__name__)

EXPLAIN_COLUMNS = [
    "rank",
    "name",
    "dim_closeness",
    "lat_closeness",
    "smooth_closeness_raw",
    "smooth_closeness",
    "dim_contrib",
    "lat_contrib",
    "smooth_contrib",
    "score",
    "percent",
    "best_match",
    "color",
]


def _contributions(closeness: np.ndarray, weights: ScoringWeights, mode: ScoringMode) -> np.ndarray:
    # per-axis share of the final score; sums to score
    if mode is ScoringMode.LEGACY_EQUAL:
        return closeness / (3.0 * _SCALE_MAX)
    return closeness * weights.as_array() / _SCALE_MAX


def explain_ranking(
    requirements: RequirementInput,
    candidates: Optional[Sequence[Candidate]] = None,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    mode: ScoringMode = ScoringMode.WEIGHTED,
) -> pd.DataFrame:
    pool = DEFAULT_CATALOG if candidates is None else tuple(candidates)
    ranked = rank(requirements, pool, weights=weights, mode=mode)

    rows = []
    for i, rc in enumerate(ranked, start=1):
        bd = score_breakdown(requirements, rc.candidate, weights=weights, mode=mode)
        closeness = np.array([bd.dim_closeness, bd.lat_closeness, bd.smooth_closeness], dtype=float)
        contrib = _contributions(closeness, weights, mode)
        rows.append(
            {
                "rank": i,
                "name": rc.name,
                "dim_closeness": bd.dim_closeness,
                "lat_closeness": bd.lat_closeness,
                "smooth_closeness_raw": bd.smooth_closeness_raw,
                "smooth_closeness": bd.smooth_closeness,
                "dim_contrib": float(contrib[0]),
                "lat_contrib": float(contrib[1]),
                "smooth_contrib": float(contrib[2]),
                "score": rc.score,
                "percent": to_percent(rc.score),
                "best_match": rc.best_match,
                "color": rc.candidate.color,
            }
        )

    df = pd.DataFrame(rows, columns=EXPLAIN_COLUMNS)
    logger.debug("explain_ranking rows=%d mode=%s", len(df), mode.value)
    return df
