# ABOUTME: Sunrise, sunset and civil twilight for a location and date
# ABOUTME: NOAA fractional-year solar approximation with clamped hour angles

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Union
from zoneinfo import ZoneInfo

from surf_almanac.config import Config

# Solar elevation at sunrise/sunset (refraction plus solar radius) and at
# the edge of civil twilight, in degrees
SUNRISE_ELEVATION = -0.833
CIVIL_TWILIGHT_ELEVATION = -6.0

DEFAULT_BUFFER_MINUTES = 10


@dataclass(frozen=True)
class SunTimes:
    """Sun events for one location and day, timezone-aware"""
    sunrise: datetime
    sunset: datetime
    first_light: datetime  # civil twilight begins
    last_light: datetime   # civil twilight ends


def resolve_timezone(tz: Union[str, tzinfo, None]) -> tzinfo:
    if tz is None:
        return ZoneInfo(Config.TIMEZONE)
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def _hour_angle(lat_rad: float, decl: float, elevation: float) -> float:
    """
    Hour angle in degrees at which the sun reaches `elevation`.

    The cosine is clamped to [-1, 1]. In polar night that gives 0 (rise and
    set collapse onto solar noon); in midnight sun it gives 180 (a full
    24 hour day), so the ordering of events still holds.
    """
    elevation_rad = math.radians(elevation)
    numerator = math.sin(elevation_rad) - math.sin(lat_rad) * math.sin(decl)
    denominator = math.cos(lat_rad) * math.cos(decl)
    if abs(denominator) < 1e-12:
        cos_ha = math.copysign(1.0, numerator) if numerator else 0.0
    else:
        cos_ha = numerator / denominator
    return math.degrees(math.acos(max(-1.0, min(1.0, cos_ha))))


def get_sun_times(
    lat: float,
    lng: float,
    day: date,
    tz: Union[str, tzinfo, None] = None
) -> SunTimes:
    """
    Calculate sun times for a location.

    Args:
        lat: Latitude in degrees (-90 to 90)
        lng: Longitude in degrees, east positive
        day: Calendar date
        tz: Timezone for the returned datetimes (Config.TIMEZONE by default)

    Returns:
        SunTimes with first_light <= sunrise <= sunset <= last_light
    """
    if not -90 <= lat <= 90:
        raise ValueError(f"Latitude must be between -90 and 90, got {lat}")

    day_of_year = day.timetuple().tm_yday

    # Fractional year in radians
    gamma = (2 * math.pi / 365) * (day_of_year - 1)

    # Equation of time in minutes
    eqtime = 229.18 * (
        0.000075
        + 0.001868 * math.cos(gamma)
        - 0.032077 * math.sin(gamma)
        - 0.014615 * math.cos(2 * gamma)
        - 0.040849 * math.sin(2 * gamma)
    )

    # Solar declination in radians
    decl = (
        0.006918
        - 0.399912 * math.cos(gamma)
        + 0.070257 * math.sin(gamma)
        - 0.006758 * math.cos(2 * gamma)
        + 0.000907 * math.sin(2 * gamma)
        - 0.002697 * math.cos(3 * gamma)
        + 0.00148 * math.sin(3 * gamma)
    )

    lat_rad = math.radians(lat)
    ha = _hour_angle(lat_rad, decl, SUNRISE_ELEVATION)
    ha_civil = _hour_angle(lat_rad, decl, CIVIL_TWILIGHT_ELEVATION)

    # Solar noon in minutes after UTC midnight
    solar_noon = 720 - 4 * lng - eqtime
    utc_midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    local = resolve_timezone(tz)

    def at(minutes: float) -> datetime:
        return (utc_midnight + timedelta(minutes=math.floor(minutes + 0.5))).astimezone(local)

    return SunTimes(
        sunrise=at(solar_noon - ha * 4),
        sunset=at(solar_noon + ha * 4),
        first_light=at(solar_noon - ha_civil * 4),
        last_light=at(solar_noon + ha_civil * 4),
    )


def format_time(moment: datetime) -> str:
    """Format as "6:45 AM"."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def calculate_leave_by(
    target_time: datetime,
    drive_minutes: float,
    buffer_minutes: float = DEFAULT_BUFFER_MINUTES
) -> datetime:
    """When to leave home to arrive by `target_time` with a parking buffer."""
    return target_time - timedelta(minutes=drive_minutes + buffer_minutes)


def time_until(target_time: datetime, now: datetime) -> str:
    """Describe how far off `target_time` is, e.g. "in 1h 5m" or "passed"."""
    diff_mins = math.floor((target_time - now).total_seconds() / 60 + 0.5)

    if diff_mins < 0:
        return "passed"
    if diff_mins < 60:
        return f"in {diff_mins} min"
    hours, mins = divmod(diff_mins, 60)
    if mins == 0:
        return f"in {hours}h"
    return f"in {hours}h {mins}m"


def is_daylight_hours(sun_times: SunTimes, now: datetime) -> bool:
    """True between first light and last light inclusive."""
    return sun_times.first_light <= now <= sun_times.last_light
