# ABOUTME: Tests for measurement and score models
# ABOUTME: Validates construction-time checks on physical ranges

import math

import pytest

from surf_almanac.scoring.models import InvalidMeasurementError, Measurement, ScoreResult


def make_measurement(**overrides) -> Measurement:
    values = dict(
        wave_height_ft=3.0,
        wave_period_s=11,
        swell_direction=280,
        wind_speed_mph=6,
        wind_direction=90,
        tide_height_ft=-0.4,
        tide_phase="low",
    )
    values.update(overrides)
    return Measurement(**values)


def test_measurement_accepts_negative_tide():
    """Tide heights below MLLW are valid"""
    measurement = make_measurement()
    assert measurement.tide_height_ft == -0.4


def test_measurement_rejects_negative_magnitudes():
    """Wave height, period and wind speed cannot be negative"""
    for field in ("wave_height_ft", "wave_period_s", "wind_speed_mph"):
        with pytest.raises(InvalidMeasurementError):
            make_measurement(**{field: -1})


def test_measurement_rejects_nan():
    with pytest.raises(InvalidMeasurementError):
        make_measurement(wave_height_ft=math.nan)
    with pytest.raises(InvalidMeasurementError):
        make_measurement(wind_direction=math.inf)


def test_measurement_rejects_unknown_tide_phase():
    with pytest.raises(InvalidMeasurementError):
        make_measurement(tide_phase="slack")


def test_validation_error_is_a_value_error():
    """Callers can catch the standard ValueError"""
    assert issubclass(InvalidMeasurementError, ValueError)


def test_measurement_is_immutable():
    measurement = make_measurement()
    with pytest.raises(AttributeError):
        measurement.wave_height_ft = 10


def test_score_result_validates_range_and_rating():
    """ScoreResult score must be 0-100 with a known rating"""
    assert ScoreResult(score=0, rating="Poor", breakdown="").score == 0
    assert ScoreResult(score=100, rating="Excellent", breakdown="").score == 100

    with pytest.raises(ValueError):
        ScoreResult(score=101, rating="Excellent", breakdown="")
    with pytest.raises(ValueError):
        ScoreResult(score=-1, rating="Poor", breakdown="")
    with pytest.raises(ValueError):
        ScoreResult(score=50, rating="Meh", breakdown="")
