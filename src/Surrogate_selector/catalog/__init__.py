# src/Surrogate_selector/catalog/__init__.py
from __future__ import annotations

# Stable re-exports (keep this list SHORT).
from Surrogate_selector.catalog.schema import (
    Axis,
    Candidate,
    Needs,
    Ratings,
    RequirementInput,
)
from Surrogate_selector.catalog.models import (
    DEFAULT_CATALOG,
    candidate_names,
    get_candidate,
    gp_smoothness_penalty,
)

__all__ = [
    "Axis",
    "Candidate",
    "Needs",
    "Ratings",
    "RequirementInput",
    "DEFAULT_CATALOG",
    "candidate_names",
    "get_candidate",
    "gp_smoothness_penalty",
]
