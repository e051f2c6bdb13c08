# ABOUTME: Tests for historical percentile and month context
# ABOUTME: Scores are compared against the typical score for the month

import pytest

from surf_almanac.forecast.history import (
    HISTORICAL_AVERAGES,
    get_historical_context,
    get_historical_percentile,
)


def test_table_covers_every_month():
    assert sorted(HISTORICAL_AVERAGES) == list(range(1, 13))
    assert HISTORICAL_AVERAGES[6].avg_score == 45
    assert HISTORICAL_AVERAGES[7].avg_score == 42


def test_percentile_of_good_summer_day():
    """70 in July sits almost two deviations above the July mean of 42"""
    assert get_historical_percentile(70, 7) == 95


def test_average_score_is_fiftieth_percentile():
    assert get_historical_percentile(42, 7) == 50
    assert get_historical_percentile(72, 12) == 50


def test_percentile_is_clamped():
    assert get_historical_percentile(0, 12) == 1
    assert get_historical_percentile(100, 7) == 99


def test_percentile_rises_with_score():
    percentiles = [get_historical_percentile(score, 3) for score in range(0, 101, 5)]
    assert percentiles == sorted(percentiles)


def test_unknown_month_raises():
    with pytest.raises(ValueError):
        get_historical_percentile(50, 13)
    with pytest.raises(ValueError):
        get_historical_percentile(50, 0)


def test_context_phrases():
    assert get_historical_context(70, 7) == "Top 10% day for July!"
    assert get_historical_context(55, 7) == "Better than 80% of July days"
    assert get_historical_context(45, 7) == "Above average for July"
    assert get_historical_context(35, 7) == "Typical July conditions"
    assert get_historical_context(10, 7) == "Below average for July"
