# src/Surrogate_selector/catalog/schema.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple


# ---------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------

class Axis(str, Enum):
    DIMENSIONALITY = "dimensionality"
    LATENCY = "latency"
    SMOOTHNESS = "smoothness"


# ---------------------------------------------------------------------
# Requirement side
# ---------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RequirementInput:
    """
    Does:
        Hold the three user requirement levels on their human-facing scales.

    Ranges:
        dimensionality_requirement: 1..10 (integer steps)
        latency_tolerance:          1..100
        smoothness_requirement:     1..100
    """
    dimensionality_requirement: float
    latency_tolerance: float
    smoothness_requirement: float


@dataclass(frozen=True, slots=True)
class Needs:
    """
    Does:
        Requirement levels mapped onto the 0..9 rating scale, plus the raw input
        (some adjustments are keyed on the raw scale).
    """
    parameter_need: float
    latency_need: float
    smoothness_need: float
    source: RequirementInput

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.parameter_need, self.latency_need, self.smoothness_need)


# ---------------------------------------------------------------------
# Candidate side
# ---------------------------------------------------------------------

# (smoothness_closeness, needs) -> adjusted smoothness_closeness
SmoothnessAdjustment = Callable[[float, Needs], float]


@dataclass(frozen=True, slots=True)
class Ratings:
    dimensionality: float
    latency: float
    smoothness: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.dimensionality, self.latency, self.smoothness)

    def get(self, axis: Axis) -> float:
        return float(getattr(self, axis.value))


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    Does:
        Describe one surrogate-model family: fixed ratings in [0, 9] per axis,
        a display color, and an optional non-linear smoothness adjustment.
    """
    name: str
    description: str
    ratings: Ratings
    color: str
    smoothness_adjustment: Optional[SmoothnessAdjustment] = None
