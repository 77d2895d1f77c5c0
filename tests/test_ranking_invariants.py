from __future__ import annotations

import math

from Surrogate_selector.catalog import DEFAULT_CATALOG, get_candidate
from Surrogate_selector.scoring.engine import ScoringMode, rank, score, to_percent

GP = "Gaussian Process (GP)"
DKL = "Deep Kernel Learning (DKL)"
BNN = "Bayesian Neural Networks (BNN)"
PBNN = "Partial BNNs"


def _names(ranked):
    return [rc.name for rc in ranked]


def test_midpoint_returns_all_four_with_finite_scores(midpoint):
    out = rank(midpoint, DEFAULT_CATALOG)
    assert len(out) == 4
    assert sorted(_names(out)) == sorted(c.name for c in DEFAULT_CATALOG)
    assert all(math.isfinite(rc.score) for rc in out)
    assert _names(out) == [DKL, BNN, GP, PBNN]


def test_scores_are_sorted_descending(req):
    out = rank(req(3, 70, 40))
    scores = [rc.score for rc in out]
    assert scores == sorted(scores, reverse=True)


def test_only_first_entry_is_best_match(midpoint):
    out = rank(midpoint)
    assert [rc.best_match for rc in out] == [True, False, False, False]


def test_rank_scores_equal_score_function(midpoint):
    for rc in rank(midpoint):
        assert rc.score == score(midpoint, rc.candidate)


def test_rank_is_idempotent(req):
    r = req(7, 35, 62)
    first = [(rc.name, rc.score) for rc in rank(r)]
    second = [(rc.name, rc.score) for rc in rank(r)]
    assert first == second


def test_smooth_low_dimensional_fast_ranks_gp_first(req):
    out = rank(req(2, 20, 90))
    assert out[0].name == GP
    assert out[0].best_match


def test_high_dimensional_slow_non_smooth_ranks_bnns_above_gp(req):
    r = req(9, 90, 10)
    out = _names(rank(r))
    assert out.index(PBNN) < out.index(GP)
    assert out.index(BNN) < out.index(GP)
    assert out[-1] == GP


def test_ties_keep_catalog_order(midpoint):
    # legacy formula: GP and Partial BNNs both sum to 18.5 at the midpoint
    out = rank(midpoint, mode=ScoringMode.LEGACY_EQUAL)
    gp_score = score(midpoint, get_candidate(GP), mode=ScoringMode.LEGACY_EQUAL)
    pbnn_score = score(midpoint, get_candidate(PBNN), mode=ScoringMode.LEGACY_EQUAL)
    assert gp_score == pbnn_score
    names = _names(out)
    assert names.index(GP) < names.index(PBNN)


def test_tie_order_follows_input_order_not_name(midpoint):
    reordered = tuple(reversed(DEFAULT_CATALOG))
    names = _names(rank(midpoint, reordered, mode=ScoringMode.LEGACY_EQUAL))
    assert names.index(PBNN) < names.index(GP)


def test_empty_candidate_list_returns_empty(midpoint):
    assert rank(midpoint, ()) == []


def test_percent_rounds_half_up():
    assert to_percent(0.125) == 13
    assert to_percent(0.9) == 90
    assert to_percent(1.0) == 100


def test_nominal_inputs_stay_in_unit_interval(req):
    for dim in (1, 5, 10):
        for lat in (1, 50, 100):
            for smooth in (1, 29, 30, 100):
                for rc in rank(req(dim, lat, smooth)):
                    assert 0.0 <= rc.score <= 1.0
