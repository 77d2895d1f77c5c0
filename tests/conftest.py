# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from Surrogate_selector.catalog.schema import RequirementInput


@pytest.fixture
def midpoint() -> RequirementInput:
    return RequirementInput(dimensionality_requirement=5, latency_tolerance=50, smoothness_requirement=50)


@pytest.fixture
def req():
    def _make(dim: float, lat: float, smooth: float) -> RequirementInput:
        return RequirementInput(
            dimensionality_requirement=dim,
            latency_tolerance=lat,
            smoothness_requirement=smooth,
        )

    return _make
