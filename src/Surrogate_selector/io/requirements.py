# src/Surrogate_selector/io/requirements.py
from __future__ import annotations

from typing import Any, Mapping, Tuple

import numpy as np

from Surrogate_selector.catalog.schema import RequirementInput
from Surrogate_selector.scoring._constants import (
    _DIMENSIONALITY_LABEL_CUTS,
    _DIMENSIONALITY_LABEL_TOP,
    _DIMENSIONALITY_RANGE,
    _LATENCY_LABEL_CUTS,
    _LATENCY_LABEL_TOP,
    _LATENCY_RANGE,
    _SMOOTHNESS_LABEL_CUTS,
    _SMOOTHNESS_LABEL_TOP,
    _SMOOTHNESS_RANGE,
)
from Surrogate_selector.scoring.engine import to_percent


class RequirementError(ValueError):
    pass


_FIELDS: Tuple[Tuple[str, Tuple[float, float]], ...] = (
    ("dimensionality_requirement", _DIMENSIONALITY_RANGE),
    ("latency_tolerance", _LATENCY_RANGE),
    ("smoothness_requirement", _SMOOTHNESS_RANGE),
)


def _as_number(value: Any, *, name: str) -> float:
    if isinstance(value, bool):
        raise RequirementError(f"{name}: expected a number, got bool")
    try:
        x = float(value)
    except (TypeError, ValueError) as e:
        raise RequirementError(f"{name}: expected a number, got {value!r}") from e
    if not np.isfinite(x):
        raise RequirementError(f"{name}: must be finite, got {value!r}")
    return x


def validate_requirements(requirements: RequirementInput) -> None:
    """
    Does:
        Boundary check for the presentation layer: finite numbers inside documented ranges,
        dimensionality on integer steps. The scoring engine never calls this.

    Raises:
        RequirementError naming the offending field.
    """
    for name, (lo, hi) in _FIELDS:
        x = _as_number(getattr(requirements, name), name=name)
        if x < lo or x > hi:
            raise RequirementError(f"{name}: {x:g} outside [{lo:g}, {hi:g}]")

    dim = float(requirements.dimensionality_requirement)
    if dim != np.floor(dim):
        raise RequirementError(f"dimensionality_requirement: expected an integer step, got {dim:g}")


def requirements_from_mapping(payload: Mapping[str, Any]) -> RequirementInput:
    missing = [name for name, _ in _FIELDS if name not in payload]
    if missing:
        raise RequirementError(f"requirements: missing keys {missing}")

    req = RequirementInput(
        dimensionality_requirement=_as_number(payload["dimensionality_requirement"], name="dimensionality_requirement"),
        latency_tolerance=_as_number(payload["latency_tolerance"], name="latency_tolerance"),
        smoothness_requirement=_as_number(payload["smoothness_requirement"], name="smoothness_requirement"),
    )
    validate_requirements(req)
    return req


# ---------------------------------------------------------------------
# Display labels (what the UI shows next to each control)
# ---------------------------------------------------------------------

def _label(value: float, cuts, top: str) -> str:
    for upper, label in cuts:
        if value <= upper:
            return label
    return top


def dimensionality_label(value: float) -> str:
    return _label(float(value), _DIMENSIONALITY_LABEL_CUTS, _DIMENSIONALITY_LABEL_TOP)


def latency_label(value: float) -> str:
    return _label(float(value), _LATENCY_LABEL_CUTS, _LATENCY_LABEL_TOP)


def smoothness_label(value: float) -> str:
    return _label(float(value), _SMOOTHNESS_LABEL_CUTS, _SMOOTHNESS_LABEL_TOP)


def format_percent(score_value: float) -> str:
    return f"{to_percent(score_value)}%"
