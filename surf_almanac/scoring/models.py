# ABOUTME: Data models for measurements and condition scores
# ABOUTME: Immutable records validated on construction

import math
from dataclasses import dataclass
from typing import Literal, Optional

TidePhase = Literal["rising", "falling", "high", "low"]
TideClass = Literal["low", "mid", "high", "any"]
Rating = Literal["Poor", "Fair", "Good", "Excellent"]

TIDE_PHASES = ("rising", "falling", "high", "low")
TIDE_CLASSES = ("low", "mid", "high", "any")
RATINGS = ("Poor", "Fair", "Good", "Excellent")


class InvalidMeasurementError(ValueError):
    """Raised when an environmental reading is out of its physical range."""


def require_non_negative(name: str, value: float) -> float:
    """Reject NaN, infinities and negative magnitudes."""
    if value is None or not math.isfinite(value):
        raise InvalidMeasurementError(f"{name} must be a finite number, got {value}")
    if value < 0:
        raise InvalidMeasurementError(f"{name} must be >= 0, got {value}")
    return value


def require_finite(name: str, value: float) -> float:
    if value is None or not math.isfinite(value):
        raise InvalidMeasurementError(f"{name} must be a finite number, got {value}")
    return value


@dataclass(frozen=True)
class Measurement:
    """One instant of surf conditions at a spot"""
    wave_height_ft: float
    wave_period_s: float
    swell_direction: float   # degrees, direction the swell comes from
    wind_speed_mph: float
    wind_direction: float    # degrees
    tide_height_ft: float    # MLLW, may be negative
    tide_phase: TidePhase
    water_temp_f: Optional[float] = None
    air_temp_f: Optional[float] = None

    def __post_init__(self):
        require_non_negative("wave_height_ft", self.wave_height_ft)
        require_non_negative("wave_period_s", self.wave_period_s)
        require_non_negative("wind_speed_mph", self.wind_speed_mph)
        require_finite("swell_direction", self.swell_direction)
        require_finite("wind_direction", self.wind_direction)
        require_finite("tide_height_ft", self.tide_height_ft)
        if self.tide_phase not in TIDE_PHASES:
            raise InvalidMeasurementError(f"Unknown tide phase: {self.tide_phase}")

    def __str__(self) -> str:
        return (
            f"Waves: {self.wave_height_ft:.1f}ft @ {self.wave_period_s:.0f}s from {self.swell_direction:.0f}°, "
            f"Wind: {self.wind_speed_mph:.0f}mph from {self.wind_direction:.0f}°, "
            f"Tide: {self.tide_height_ft:.1f}ft {self.tide_phase}"
        )


@dataclass(frozen=True)
class ScoreResult:
    """Overall 0-100 score for a spot with its rating and explanation"""
    score: int
    rating: Rating
    breakdown: str

    def __post_init__(self):
        if not 0 <= self.score <= 100:
            raise ValueError(f"Score must be 0-100, got {self.score}")
        if self.rating not in RATINGS:
            raise ValueError(f"Unknown rating: {self.rating}")
