# ABOUTME: Seven-day outlook built from tide predictions per day
# ABOUTME: Scores each day, picks the best one and explains why

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from typing import Mapping, Optional, Union

from surf_almanac.scoring.models import TideClass
from surf_almanac.spots.models import SpotConfig
from surf_almanac.sun.calculator import SunTimes, resolve_timezone, get_sun_times
from surf_almanac.sun.moon import MoonInfo, get_moon_phase
from surf_almanac.tides.models import TideSeries
from surf_almanac.tides.windows import TimeWindow, find_best_time_window, format_hour

log = logging.getLogger(__name__)

FORECAST_DAYS = 7
BASE_DAY_SCORE = 50

# Hours of the day considered when counting good tide hours
DAYLIGHT_FIRST_HOUR = 6
DAYLIGHT_LAST_HOUR = 18
DAWN_FIRST_HOUR = 6
DAWN_LAST_HOUR = 9

VERY_HIGH_TIDE_FT = 6.0
NEGATIVE_LOW_TIDE_FT = -0.5

# Best day must beat the weekly average by more than this to be called out
STANDOUT_MARGIN = 15

NO_TIDE_ANALYSIS = "Tide data unavailable"
AVERAGE_ANALYSIS = "Average conditions expected"


@dataclass(frozen=True)
class DayForecast:
    day: date
    day_name: str        # "Sat"
    date_str: str        # "Oct 18"
    tide_data: Optional[TideSeries]
    sun_times: SunTimes
    moon_phase: MoonInfo
    score: int
    analysis: str
    best_time_window: Optional[TimeWindow] = None


@dataclass(frozen=True)
class WeekForecast:
    days: tuple[DayForecast, ...]
    best_day: Optional[DayForecast]
    best_day_reason: str


def is_tide_ideal_for_spot(height: float, best_tide: TideClass) -> bool:
    """Whether a tide height suits the spot, on a -1 to 6ft local range."""
    if best_tide == "any":
        return True
    if best_tide == "low":
        return height < 2
    if best_tide == "mid":
        return 1.5 <= height <= 4
    if best_tide == "high":
        return height > 3.5
    return False


def score_day(
    day: date,
    tide_data: Optional[TideSeries],
    best_tide: TideClass
) -> tuple[int, str, Optional[TimeWindow]]:
    """
    Score one day from its tide pattern.

    Starts at 50: +25 for two or more ideal dawn hours (+15 for one), +20
    for six or more ideal daylight hours (+10 for three), +5 on weekends,
    -10 when a high tide tops 6ft and -5 for a low below -0.5ft.

    Returns:
        (score 0-100, analysis text, best window or None)
    """
    if tide_data is None:
        return BASE_DAY_SCORE, NO_TIDE_ANALYSIS, None

    score = BASE_DAY_SCORE
    analysis_points = []

    ideal_hours = [
        p.time.hour
        for p in tide_data.hourly
        if p.time.date() == day
        and DAYLIGHT_FIRST_HOUR <= p.time.hour <= DAYLIGHT_LAST_HOUR
        and is_tide_ideal_for_spot(p.height, best_tide)
    ]

    dawn_hours = [h for h in ideal_hours if DAWN_FIRST_HOUR <= h <= DAWN_LAST_HOUR]
    if len(dawn_hours) >= 2:
        score += 25
        analysis_points.append("Great early morning tide")
    elif len(dawn_hours) >= 1:
        score += 15
        analysis_points.append("Good dawn patrol window")

    if len(ideal_hours) >= 6:
        score += 20
        analysis_points.append("Extended surf window")
    elif len(ideal_hours) >= 3:
        score += 10

    if day.weekday() >= 5:
        score += 5
        analysis_points.append("Weekend")

    if tide_data.high_low:
        heights = [t.height for t in tide_data.high_low]
        if max(heights) > VERY_HIGH_TIDE_FT:
            score -= 10
            analysis_points.append("Very high tide")
        if min(heights) < NEGATIVE_LOW_TIDE_FT:
            score -= 5
            analysis_points.append("Negative low tide")

    window = find_best_time_window(
        tide_data,
        best_tide,
        day=day,
        first_hour=DAYLIGHT_FIRST_HOUR,
        last_hour=DAYLIGHT_LAST_HOUR,
    )

    score = max(0, min(100, score))
    analysis = " • ".join(analysis_points) if analysis_points else AVERAGE_ANALYSIS
    return score, analysis, window


def best_day_reason(best_day: DayForecast, days: tuple[DayForecast, ...]) -> str:
    """One sentence on why `best_day` stands out from the rest of the week."""
    parts = [f"{best_day.day_name} {best_day.date_str}"]

    if best_day.analysis:
        parts.append(best_day.analysis.lower())

    window = best_day.best_time_window
    if window is not None:
        parts.append(
            f"best from {format_hour(window.start_hour, with_minutes=False)} "
            f"to {format_hour(window.end_hour, with_minutes=False)}"
        )

    avg_score = sum(d.score for d in days) / len(days)
    if best_day.score > avg_score + STANDOUT_MARGIN:
        parts.append("significantly better than other days")

    return " — ".join(parts)


def get_next_days(count: int, start: date) -> list[date]:
    """`count` consecutive calendar days beginning with `start`."""
    return [start + timedelta(days=i) for i in range(count)]


def analyze_week(
    tide_data_by_day: Mapping[date, TideSeries],
    spot: SpotConfig,
    start: date,
    tz: Union[str, tzinfo, None] = None
) -> WeekForecast:
    """
    Build a seven-day outlook for a spot.

    Wave and wind readings are not forecast, so days are ranked on tide
    pattern alone. The first day with the highest score is the best day.

    Args:
        tide_data_by_day: Tide predictions keyed by calendar day
        spot: Spot configuration
        start: First day of the outlook (usually today)
        tz: Local timezone for sun times

    Returns:
        WeekForecast
    """
    local = resolve_timezone(tz)
    days = []

    for day in get_next_days(FORECAST_DAYS, start):
        tide_data = tide_data_by_day.get(day)
        score, analysis, window = score_day(day, tide_data, spot.best_tide)

        days.append(DayForecast(
            day=day,
            day_name=day.strftime("%a"),
            date_str=f"{day.strftime('%b')} {day.day}",
            tide_data=tide_data,
            sun_times=get_sun_times(spot.lat, spot.lng, day, local),
            moon_phase=get_moon_phase(datetime.combine(day, time(12), tzinfo=local)),
            score=score,
            analysis=analysis,
            best_time_window=window,
        ))

    days = tuple(days)
    best_day = None
    for candidate in days:
        if best_day is None or candidate.score > best_day.score:
            best_day = candidate

    if best_day is None:
        return WeekForecast(days=days, best_day=None, best_day_reason="Unable to determine best day")

    log.info(f"Best day for {spot.id}: {best_day.day} (score {best_day.score})")
    return WeekForecast(days=days, best_day=best_day, best_day_reason=best_day_reason(best_day, days))
