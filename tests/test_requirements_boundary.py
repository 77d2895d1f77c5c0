from __future__ import annotations

import math

import pytest

from Surrogate_selector.catalog.schema import RequirementInput
from Surrogate_selector.io import (
    RequirementError,
    dimensionality_label,
    format_percent,
    latency_label,
    requirements_from_mapping,
    smoothness_label,
    validate_requirements,
)


def test_valid_midpoint_passes(midpoint):
    validate_requirements(midpoint)


@pytest.mark.parametrize(
    "dim, lat, smooth, field",
    [
        (0, 50, 50, "dimensionality_requirement"),
        (11, 50, 50, "dimensionality_requirement"),
        (5.5, 50, 50, "dimensionality_requirement"),
        (5, 0.5, 50, "latency_tolerance"),
        (5, 50, 101, "smoothness_requirement"),
        (5, math.nan, 50, "latency_tolerance"),
        (5, 50, math.inf, "smoothness_requirement"),
    ],
)
def test_invalid_values_name_the_field(req, dim, lat, smooth, field):
    with pytest.raises(RequirementError, match=field):
        validate_requirements(req(dim, lat, smooth))


def test_requirement_error_is_value_error():
    assert issubclass(RequirementError, ValueError)


def test_bool_is_rejected():
    with pytest.raises(RequirementError):
        validate_requirements(RequirementInput(True, 50, 50))  # type: ignore[arg-type]


def test_from_mapping_builds_floats():
    r = requirements_from_mapping(
        {"dimensionality_requirement": "3", "latency_tolerance": 20, "smoothness_requirement": 90.0}
    )
    assert r == RequirementInput(3.0, 20.0, 90.0)


def test_from_mapping_missing_keys():
    with pytest.raises(RequirementError, match="missing keys"):
        requirements_from_mapping({"latency_tolerance": 20})


def test_from_mapping_non_numeric():
    with pytest.raises(RequirementError, match="expected a number"):
        requirements_from_mapping(
            {"dimensionality_requirement": "high", "latency_tolerance": 20, "smoothness_requirement": 90}
        )


@pytest.mark.parametrize(
    "value, label",
    [(1, "Low-dimensional"), (3, "Low-dimensional"), (4, "Medium-dimensional"), (6, "Medium-dimensional"), (7, "High-dimensional")],
)
def test_dimensionality_label(value, label):
    assert dimensionality_label(value) == label


@pytest.mark.parametrize("value, label", [(33, "Fast needed"), (34, "Moderate"), (66, "Moderate"), (67, "Can be slow")])
def test_latency_label(value, label):
    assert latency_label(value) == label


@pytest.mark.parametrize("value, label", [(1, "Non-smooth"), (50, "Moderate"), (100, "Very smooth")])
def test_smoothness_label(value, label):
    assert smoothness_label(value) == label


def test_format_percent():
    assert format_percent(0.9) == "90%"
    assert format_percent(0.0) == "0%"
