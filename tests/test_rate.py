"""
Test cases for weekly rate estimation over the recent checkpoint window and the energy-balance fallback rate.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math
from datetime import timedelta

import pytest

from config import settings
from conftest import DAY0, make_series
from engine.enums import WeeklyPlan
from engine.exceptions import InvalidInputError
from engine.models import Checkpoint
from engine.rate import energy_balance_rate, estimate_weekly_rate, plan_rate


def _step_series():
    # flat for the first week, then -1 per day
    return make_series(*[(d, 100.0 if d <= 6 else 100.0 - (d - 6)) for d in range(20)])


def test_insufficient_samples_give_zero():
    assert estimate_weekly_rate([]) == 0.0
    assert estimate_weekly_rate(make_series((0, 100.0))) == 0.0


def test_flat_week_gives_zero():
    assert estimate_weekly_rate(make_series((0, 100.0), (7, 100.0))) == 0.0


def test_same_day_samples_carry_no_trend():
    series = [
        Checkpoint(timestamp=DAY0, value=100.0),
        Checkpoint(timestamp=DAY0 + timedelta(hours=5), value=98.0),
    ]
    assert estimate_weekly_rate(series) == 0.0


def test_linear_decrease_per_week():
    assert estimate_weekly_rate(make_series((0, 200.0), (14, 196.0))) == pytest.approx(-2.0)
    assert estimate_weekly_rate(make_series((0, 50.0), (7, 53.0))) == pytest.approx(3.0)


def test_partial_days_are_truncated():
    series = [
        Checkpoint(timestamp=DAY0, value=100.0),
        Checkpoint(timestamp=DAY0 + timedelta(days=3, hours=20), value=97.0),
    ]
    assert estimate_weekly_rate(series) == pytest.approx(-7.0)


def test_window_keeps_most_recent_samples():
    series = _step_series()
    # last 14 samples span days 6..19: 100 -> 87 over 13 days
    assert estimate_weekly_rate(series) == pytest.approx(-7.0)
    full = estimate_weekly_rate(series, window_samples=len(series))
    assert full == pytest.approx(-13.0 / 19 * 7)


def test_window_is_configurable(monkeypatch):
    monkeypatch.setattr(settings, "rate_window_samples", 1)
    assert estimate_weekly_rate(_step_series()) == 0.0
    monkeypatch.setattr(settings, "rate_window_samples", 2)
    assert estimate_weekly_rate(_step_series()) == pytest.approx(-7.0)


def test_unsorted_input_is_sorted_first():
    series = make_series((14, 196.0), (0, 200.0), (7, 198.0))
    assert estimate_weekly_rate(series) == pytest.approx(-2.0)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_values_rejected(bad):
    with pytest.raises(InvalidInputError):
        estimate_weekly_rate(make_series((0, 100.0), (7, bad)))


def test_energy_balance_rate():
    assert energy_balance_rate(-500) == pytest.approx(-1.0)
    assert energy_balance_rate(250, kcal_per_unit=7700) == pytest.approx(250 * 7 / 7700)
    assert energy_balance_rate(500, kcal_per_unit=0) == 0.0


def test_plan_rate():
    assert plan_rate(WeeklyPlan.lose2) == pytest.approx(-2.0)
    assert plan_rate("gain05") == pytest.approx(0.5)
    assert plan_rate("maintain") == 0.0
    assert plan_rate("not-a-plan") == 0.0
