# src/Surrogate_selector/scoring/_constants.py
from __future__ import annotations

# =============================================================================
# CONSTANTS
# =============================================================================

# Internal rating scale is [0, _SCALE_MAX]; also the max per-axis closeness.
_SCALE_MAX = 9.0

# Human-facing input maxima (inputs are divided by these before rescaling to _SCALE_MAX)
_DIMENSIONALITY_INPUT_MAX = 10.0
_PERCENT_INPUT_MAX = 100.0

# Documented input ranges (inclusive); enforced at the boundary only
_DIMENSIONALITY_RANGE = (1.0, 10.0)
_LATENCY_RANGE = (1.0, 100.0)
_SMOOTHNESS_RANGE = (1.0, 100.0)

# GP low-smoothness gate (raw 1..100 scale, strict "<")
_GP_LOW_SMOOTHNESS_THRESHOLD = 30.0
_GP_LOW_SMOOTHNESS_FACTOR = 0.5

# Legacy formula: unweighted sum over 3 axes divided by 3 * _SCALE_MAX
_LEGACY_DENOMINATOR = 27.0

# Label cutpoints (inclusive upper bounds)
_DIMENSIONALITY_LABEL_CUTS = ((3.0, "Low-dimensional"), (6.0, "Medium-dimensional"))
_DIMENSIONALITY_LABEL_TOP = "High-dimensional"
_LATENCY_LABEL_CUTS = ((33.0, "Fast needed"), (66.0, "Moderate"))
_LATENCY_LABEL_TOP = "Can be slow"
_SMOOTHNESS_LABEL_CUTS = ((33.0, "Non-smooth"), (66.0, "Moderate"))
_SMOOTHNESS_LABEL_TOP = "Very smooth"
