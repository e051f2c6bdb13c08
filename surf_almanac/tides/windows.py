# ABOUTME: Finds the best contiguous surf window within a day
# ABOUTME: Blends tide suitability with a typical daily wind pattern

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from surf_almanac.scoring.models import TideClass
from surf_almanac.tides.models import TideSeries

log = logging.getLogger(__name__)

# Typical coastal wind quality by hour of day: (from hour, until hour, score).
# Real wind forecasts are not available for future windows, so this stands in.
DIURNAL_WIND_CURVE = [
    (5, 9, 50),    # dawn patrol, calmest
    (9, 11, 35),   # late morning, still decent
    (11, 15, 10),  # midday, typically windiest
    (15, 17, 20),  # afternoon, wind often building
    (17, 19, 40),  # evening glass-off
]
DEFAULT_WIND_SCORE = 25

TIDE_WEIGHT = 0.5
WIND_WEIGHT = 1.0

# Window sizes to try, largest first
WINDOW_SIZES = (3, 2)

# Surfable hours: windows start at or after FIRST_HOUR and end by LAST_HOUR
FIRST_SURF_HOUR = 5
LAST_SURF_HOUR = 20

# Tide heights scaled against a -1 to 6ft range
WINDOW_TIDE_LOW_FT = -1.0
WINDOW_TIDE_SPAN_FT = 7.0
ANY_TIDE_WINDOW_SCORE = 70

# (upper bound height ft, description), checked in order
TIDE_DESCRIPTIONS = [
    (1.0, "Low tide"),
    (2.5, "Low-mid tide"),
    (4.0, "Mid tide"),
    (5.0, "Mid-high tide"),
]
HIGH_TIDE_DESCRIPTION = "High tide"


def format_hour(hour: int, with_minutes: bool = True) -> str:
    """Format an hour of day as "6:00 AM" (or "6 AM" when with_minutes is False)."""
    suffix = ":00" if with_minutes else ""
    if hour in (0, 24):
        return f"12{suffix} AM"
    if hour == 12:
        return f"12{suffix} PM"
    if hour < 12:
        return f"{hour}{suffix} AM"
    return f"{hour - 12}{suffix} PM"


def diurnal_wind_score(hour: int) -> int:
    for start, end, score in DIURNAL_WIND_CURVE:
        if start <= hour < end:
            return score
    return DEFAULT_WIND_SCORE


def score_tide_for_window(height: float, best_tide: TideClass) -> int:
    """
    Score a tide height for window planning, 20-100.

    Same shape as the spot tide score but tuned to a -1 to 6ft range.
    """
    if best_tide == "any":
        return ANY_TIDE_WINDOW_SCORE

    tide_pct = min(1.0, max(0.0, (height - WINDOW_TIDE_LOW_FT) / WINDOW_TIDE_SPAN_FT))

    if best_tide == "low":
        if tide_pct < 0.3:
            return 100
        if tide_pct < 0.45:
            return 80
        if tide_pct < 0.6:
            return 50
        return 20

    if best_tide == "mid":
        if 0.35 <= tide_pct <= 0.65:
            return 100
        if 0.25 <= tide_pct <= 0.75:
            return 80
        return 50

    if best_tide == "high":
        if tide_pct > 0.7:
            return 100
        if tide_pct > 0.55:
            return 80
        if tide_pct > 0.4:
            return 50
        return 20

    return 50


def describe_tide(height: float) -> str:
    """Coarse tide level label, "Low tide" through "High tide"."""
    for limit, description in TIDE_DESCRIPTIONS:
        if height < limit:
            return description
    return HIGH_TIDE_DESCRIPTION


@dataclass(frozen=True)
class TimeWindow:
    """Recommended surf window [start_hour, end_hour) in local hours"""
    start_hour: int
    end_hour: int
    reason: str
    avg_score: float = 0.0
    avg_tide_ft: float = 0.0

    def __post_init__(self):
        if not 0 <= self.start_hour < self.end_hour <= 24:
            raise ValueError(f"Invalid window {self.start_hour}-{self.end_hour}")

    @property
    def start(self) -> str:
        return format_hour(self.start_hour)

    @property
    def end(self) -> str:
        return format_hour(self.end_hour)

    def __str__(self) -> str:
        return f"{self.start} - {self.end}: {self.reason}"


@dataclass(frozen=True)
class _HourScore:
    hour: int
    score: float
    tide_height: float


def _window_reason(start_hour: int, avg_tide: float) -> str:
    tide_desc = describe_tide(avg_tide)
    if 5 <= start_hour < 9:
        return f"{tide_desc} + light morning winds"
    if start_hour >= 17:
        return f"{tide_desc} + evening glass-off"
    return f"{tide_desc} conditions"


def find_best_time_window(
    series: TideSeries,
    best_tide: TideClass,
    day: Optional[date] = None,
    first_hour: int = FIRST_SURF_HOUR,
    last_hour: int = LAST_SURF_HOUR
) -> Optional[TimeWindow]:
    """
    Find the best 2-4 hour surf window from hourly tide predictions.

    Each hour scores half its tide suitability plus the full diurnal wind
    score. Windows of 3 then 2 consecutive hours are compared by mean
    score; the first window found wins ties.

    Args:
        series: Tide predictions
        best_tide: Spot's preferred tide
        day: Only use samples on this calendar day (all samples if None)
        first_hour: Earliest window start hour
        last_hour: Latest window end hour

    Returns:
        TimeWindow, or None when no samples fall in the surfable hours
    """
    hourly_scores = []
    for prediction in series.hourly:
        if day is not None and prediction.time.date() != day:
            continue
        hour = prediction.time.hour
        if hour < first_hour or hour >= last_hour:
            continue

        score = (
            score_tide_for_window(prediction.height, best_tide) * TIDE_WEIGHT
            + diurnal_wind_score(hour) * WIND_WEIGHT
        )
        hourly_scores.append(_HourScore(hour=hour, score=score, tide_height=prediction.height))

    if not hourly_scores:
        return None

    best: Optional[list[_HourScore]] = None
    best_avg = 0.0

    for size in WINDOW_SIZES:
        for i in range(len(hourly_scores) - size + 1):
            window = hourly_scores[i:i + size]
            if any(b.hour != a.hour + 1 for a, b in zip(window, window[1:])):
                continue
            avg_score = sum(h.score for h in window) / size
            if best is None or avg_score > best_avg:
                best = window
                best_avg = avg_score

    if best is None:
        # Not enough consecutive hours for a 2-hour window
        best = [max(hourly_scores, key=lambda h: h.score)]
        best_avg = best[0].score

    avg_tide = sum(h.tide_height for h in best) / len(best)
    return TimeWindow(
        start_hour=best[0].hour,
        end_hour=best[-1].hour + 1,
        reason=_window_reason(best[0].hour, avg_tide),
        avg_score=best_avg,
        avg_tide_ft=avg_tide,
    )
