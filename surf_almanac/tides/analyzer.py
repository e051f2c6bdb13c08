# ABOUTME: Current tide height and tide phase from a tide series
# ABOUTME: Linear interpolation between hourly samples, phase from high/low events

from datetime import datetime
from typing import Optional

from surf_almanac.scoring.models import TidePhase
from surf_almanac.tides.models import TidePrediction, TideSeries

# Within this many minutes of a high/low event the tide counts as "at" it
PHASE_PEAK_WINDOW_MINUTES = 30


def get_current_tide_height(series: TideSeries, now: datetime) -> float:
    """
    Interpolate the tide height at `now` from the hourly samples.

    Before the first sample or after the last one the nearest endpoint is
    returned; there is no extrapolation.

    Args:
        series: Tide predictions
        now: Instant to evaluate, comparable with the sample times

    Returns:
        Height in feet, 0.0 if there are no hourly samples
    """
    hourly = series.hourly
    if not hourly:
        return 0.0

    if now <= hourly[0].time:
        return hourly[0].height
    if now >= hourly[-1].time:
        return hourly[-1].height

    for current, following in zip(hourly, hourly[1:]):
        if current.time <= now < following.time:
            span = (following.time - current.time).total_seconds()
            progress = (now - current.time).total_seconds() / span
            return current.height + progress * (following.height - current.height)

    return hourly[-1].height


def _event_phase(event: TidePrediction) -> TidePhase:
    return "high" if event.is_high else "low"


def get_tide_phase(series: TideSeries, now: datetime) -> TidePhase:
    """
    Classify the tide as rising, falling, high or low.

    Within PHASE_PEAK_WINDOW_MINUTES before the next event or after the
    previous one, the event's own type is returned. Otherwise the tide is
    rising after a low and falling after a high. With no earlier event the
    answer defaults to "rising".
    """
    prev_tide: Optional[TidePrediction] = None
    next_tide: Optional[TidePrediction] = None

    for event in series.high_low:
        if event.time <= now:
            prev_tide = event
        else:
            next_tide = event
            break

    if next_tide is not None:
        minutes_to_next = (next_tide.time - now).total_seconds() / 60
        if minutes_to_next < PHASE_PEAK_WINDOW_MINUTES:
            return _event_phase(next_tide)

    if prev_tide is not None:
        minutes_since_prev = (now - prev_tide.time).total_seconds() / 60
        if minutes_since_prev < PHASE_PEAK_WINDOW_MINUTES:
            return _event_phase(prev_tide)
        return "falling" if prev_tide.is_high else "rising"

    return "rising"


def get_next_tides(
    series: TideSeries, now: datetime
) -> tuple[Optional[TidePrediction], Optional[TidePrediction]]:
    """Next (high, low) events strictly after `now`; either may be None."""
    next_high = None
    next_low = None
    for event in series.high_low:
        if event.time <= now:
            continue
        if event.is_high and next_high is None:
            next_high = event
        elif event.type == "L" and next_low is None:
            next_low = event
        if next_high and next_low:
            break
    return next_high, next_low
