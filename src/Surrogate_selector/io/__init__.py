# src/Surrogate_selector/io/__init__.py
from __future__ import annotations

from Surrogate_selector.io.requirements import (
    RequirementError,
    dimensionality_label,
    format_percent,
    latency_label,
    requirements_from_mapping,
    smoothness_label,
    validate_requirements,
)

__all__ = [
    "RequirementError",
    "dimensionality_label",
    "format_percent",
    "latency_label",
    "requirements_from_mapping",
    "smoothness_label",
    "validate_requirements",
]
