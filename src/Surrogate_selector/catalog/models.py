# src/Surrogate_selector/catalog/models.py
from __future__ import annotations

import math
from typing import Tuple

from Surrogate_selector.catalog.schema import Candidate, Needs, Ratings
from Surrogate_selector.scoring._constants import (
    _GP_LOW_SMOOTHNESS_FACTOR,
    _GP_LOW_SMOOTHNESS_THRESHOLD,
)


def gp_smoothness_penalty(closeness: float, needs: Needs, *, apply_threshold: bool = True) -> float:
    """
    Does:
        Attenuate GP smoothness closeness when the smoothness need is low.
        closeness * (1 - exp(-need/2)), halved again when the raw requirement < 30.
    """
    penalty = math.exp(-needs.smoothness_need / 2.0)
    out = closeness * (1.0 - penalty)
    if apply_threshold and needs.source.smoothness_requirement < _GP_LOW_SMOOTHNESS_THRESHOLD:
        out *= _GP_LOW_SMOOTHNESS_FACTOR
    return out


GAUSSIAN_PROCESS = Candidate(
    name="Gaussian Process (GP)",
    description="Best for low-dimensional, smooth functions with small datasets",
    ratings=Ratings(dimensionality=2, latency=2, smoothness=8),
    color="#3b82f6",
    smoothness_adjustment=gp_smoothness_penalty,
)

DEEP_KERNEL_LEARNING = Candidate(
    name="Deep Kernel Learning (DKL)",
    description="Handles high-D data and non-stationary patterns well",
    ratings=Ratings(dimensionality=6, latency=4, smoothness=5),
    color="#22c55e",
)

BAYESIAN_NEURAL_NETWORK = Candidate(
    name="Bayesian Neural Networks (BNN)",
    description="Flexible architecture but computationally expensive",
    ratings=Ratings(dimensionality=7, latency=8, smoothness=3),
    color="#a855f7",
)

PARTIAL_BNN = Candidate(
    name="Partial BNNs",
    description="Balance between computation and uncertainty estimation",
    ratings=Ratings(dimensionality=9, latency=6, smoothness=2),
    color="#f97316",
)

# Declaration order is the tie-break order for ranking.
DEFAULT_CATALOG: Tuple[Candidate, ...] = (
    GAUSSIAN_PROCESS,
    DEEP_KERNEL_LEARNING,
    BAYESIAN_NEURAL_NETWORK,
    PARTIAL_BNN,
)


def candidate_names(candidates: Tuple[Candidate, ...] = DEFAULT_CATALOG) -> Tuple[str, ...]:
    return tuple(c.name for c in candidates)


def get_candidate(name: str, candidates: Tuple[Candidate, ...] = DEFAULT_CATALOG) -> Candidate:
    for c in candidates:
        if c.name == name:
            return c
    raise KeyError(f"Unknown candidate: {name!r}")
