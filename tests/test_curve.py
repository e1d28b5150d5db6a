"""Tests for engine/curve.py."""

from __future__ import annotations

import pytest

from workshop_pricing.engine import DEFAULT_ENROLLMENT_POINTS, build_profit_curve, calculate_financials


def test_default_points(fixed_costs, variable_costs):
    curve = build_profit_curve(1_500, fixed_costs, variable_costs)
    assert curve.enrollments == [0, 5, 10, 15, 20]
    assert list(DEFAULT_ENROLLMENT_POINTS) == [0, 5, 10, 15, 20]
    assert curve.price == 1_500


def test_matches_summary_at_each_point(fixed_costs, variable_costs):
    curve = build_profit_curve(1_500, fixed_costs, variable_costs)
    for i, n in enumerate(curve.enrollments):
        s = calculate_financials(1_500, n, fixed_costs, variable_costs)
        assert curve.revenue[i] == pytest.approx(s.total_revenue)
        assert curve.costs[i] == pytest.approx(s.total_costs)
        assert curve.profit[i] == pytest.approx(s.net_profit)


def test_custom_points_keep_order(fixed_costs, variable_costs):
    curve = build_profit_curve(1_000, fixed_costs, variable_costs, [8, 2])
    assert curve.enrollments == [8, 2]
    # 3500 + 50 × 8 = 3900
    assert curve.costs == [3_900, 3_600]
    assert curve.revenue == [8_000, 2_000]


def test_empty_lists():
    curve = build_profit_curve(100, [], [], [0, 1])
    assert curve.profit == [0, 100]


def test_results_are_plain_floats(fixed_costs, variable_costs):
    curve = build_profit_curve(1_500, fixed_costs, variable_costs)
    assert all(type(v) is float for v in curve.profit)
