# src/Surrogate_selector/scoring/engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Sequence

import numpy as np

from Surrogate_selector.catalog.models import DEFAULT_CATALOG
from Surrogate_selector.catalog.schema import Candidate, Needs, RequirementInput
from Surrogate_selector.scoring._constants import (
    _DIMENSIONALITY_INPUT_MAX,
    _LEGACY_DENOMINATOR,
    _PERCENT_INPUT_MAX,
    _SCALE_MAX,
)

__all__ = [
    "ScoringMode",
    "ScoringWeights",
    "DEFAULT_WEIGHTS",
    "ScoreBreakdown",
    "RankedCandidate",
    "normalize_requirements",
    "axis_closeness",
    "score_breakdown",
    "score",
    "rank",
    "to_percent",
]

logger = logging.getLogger(__name__)


class ScoringMode(str, Enum):
    WEIGHTED = "weighted"
    LEGACY_EQUAL = "legacy_equal"


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    dimensionality: float = 0.40
    latency: float = 0.35
    smoothness: float = 0.25

    def as_array(self) -> np.ndarray:
        return np.array([self.dimensionality, self.latency, self.smoothness], dtype=float)

    def total(self) -> float:
        return self.dimensionality + self.latency + self.smoothness


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    """
    Does:
        Keep every intermediate value of one candidate's score for explainability.
    """
    candidate: Candidate
    needs: Needs
    dim_closeness: float
    lat_closeness: float
    smooth_closeness_raw: float
    smooth_closeness: float
    mode: ScoringMode
    score: float


@dataclass(frozen=True, slots=True)
class RankedCandidate:
    candidate: Candidate
    score: float
    best_match: bool = False

    @property
    def name(self) -> str:
        return self.candidate.name

    @property
    def percent(self) -> int:
        return to_percent(self.score)


def to_percent(score_value: float) -> int:
    """
    Does:
        Integer match percentage, rounded half-up (how the UI prints it).
    """
    return int(np.floor(float(score_value) * 100.0 + 0.5))


def normalize_requirements(requirements: RequirementInput) -> Needs:
    """
    Does:
        Map each requirement from its human scale (1..10 or 1..100) onto the 0..9 rating scale.
    """
    return Needs(
        parameter_need=(requirements.dimensionality_requirement / _DIMENSIONALITY_INPUT_MAX) * _SCALE_MAX,
        latency_need=(requirements.latency_tolerance / _PERCENT_INPUT_MAX) * _SCALE_MAX,
        smoothness_need=(requirements.smoothness_requirement / _PERCENT_INPUT_MAX) * _SCALE_MAX,
        source=requirements,
    )


def axis_closeness(rating: float, need: float) -> float:
    # not clamped: can only go negative if |rating - need| > 9
    return _SCALE_MAX - abs(float(rating) - float(need))


def score_breakdown(
    requirements: RequirementInput,
    candidate: Candidate,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    mode: ScoringMode = ScoringMode.WEIGHTED,
) -> ScoreBreakdown:
    needs = normalize_requirements(requirements)
    r = candidate.ratings

    dim = axis_closeness(r.dimensionality, needs.parameter_need)
    lat = axis_closeness(r.latency, needs.latency_need)
    smooth_raw = axis_closeness(r.smoothness, needs.smoothness_need)

    if mode is ScoringMode.LEGACY_EQUAL:
        return ScoreBreakdown(
            candidate=candidate,
            needs=needs,
            dim_closeness=dim,
            lat_closeness=lat,
            smooth_closeness_raw=smooth_raw,
            smooth_closeness=smooth_raw,
            mode=mode,
            score=(dim + lat + smooth_raw) / _LEGACY_DENOMINATOR,
        )

    smooth = smooth_raw
    if candidate.smoothness_adjustment is not None:
        smooth = float(candidate.smoothness_adjustment(smooth_raw, needs))

    total = (
        dim * weights.dimensionality
        + lat * weights.latency
        + smooth * weights.smoothness
    ) / _SCALE_MAX

    return ScoreBreakdown(
        candidate=candidate,
        needs=needs,
        dim_closeness=dim,
        lat_closeness=lat,
        smooth_closeness_raw=smooth_raw,
        smooth_closeness=smooth,
        mode=mode,
        score=float(total),
    )


def score(
    requirements: RequirementInput,
    candidate: Candidate,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    mode: ScoringMode = ScoringMode.WEIGHTED,
) -> float:
    return score_breakdown(requirements, candidate, weights=weights, mode=mode).score


def rank(
    requirements: RequirementInput,
    candidates: Optional[Sequence[Candidate]] = None,
    *,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
    mode: ScoringMode = ScoringMode.WEIGHTED,
) -> List[RankedCandidate]:
    """
    Does:
        Score every candidate and return them by descending score.
        Stable sort: equal scores keep catalog order. Position 0 carries best_match=True.

    Notes:
        No validation here; any finite input yields a full list (scores may leave [0, 1]).
    """
    pool = DEFAULT_CATALOG if candidates is None else tuple(candidates)

    scored = [
        RankedCandidate(candidate=c, score=score(requirements, c, weights=weights, mode=mode))
        for c in pool
    ]
    ordered = sorted(scored, key=lambda rc: rc.score, reverse=True)
    if ordered:
        ordered[0] = replace(ordered[0], best_match=True)

    logger.debug(
        "rank mode=%s needs=%s order=%s",
        mode.value,
        normalize_requirements(requirements).as_tuple(),
        [(rc.name, round(rc.score, 4)) for rc in ordered],
    )
    return ordered
