# ABOUTME: Dawn patrol status from the clock, sun times and drive time
# ABOUTME: Walks too-early -> leave-now -> on-the-way -> surfing -> missed

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Literal, Optional

from surf_almanac.config import Config
from surf_almanac.sun.calculator import SunTimes, calculate_leave_by, format_time

DawnPatrolState = Literal["too-early", "leave-now", "on-the-way", "surfing", "missed"]

# Order the states occur in through a day
STATE_ORDER: tuple[DawnPatrolState, ...] = (
    "too-early", "leave-now", "on-the-way", "surfing", "missed",
)

# How long before leave-by the status flips to "leave-now"
LEAVE_NOW_WINDOW = timedelta(minutes=30)


@dataclass(frozen=True)
class DawnPatrolStatus:
    status: DawnPatrolState
    message: str
    leave_by: Optional[datetime] = None


def get_dawn_patrol_status(
    now: datetime,
    sun_times: SunTimes,
    drive_minutes: Optional[float] = None,
    buffer_minutes: Optional[float] = None
) -> DawnPatrolStatus:
    """
    Classify where `now` falls relative to a first-light session.

    With a drive estimate, leave-by is first light minus the drive and a
    parking buffer. More than 30 minutes before leave-by is "too-early",
    the last 30 minutes are "leave-now", the drive itself is "on-the-way",
    then "surfing" until sunset and "missed" after. Without a drive
    estimate the status is "too-early" before first light.

    Args:
        now: Current time (timezone-aware)
        sun_times: Sun events for the spot and day
        drive_minutes: Estimated drive, None or 0 when unknown
        buffer_minutes: Parking buffer, Config.DAWN_PATROL_BUFFER_MINUTES by default

    Returns:
        DawnPatrolStatus
    """
    if buffer_minutes is None:
        buffer_minutes = Config.DAWN_PATROL_BUFFER_MINUTES

    if now >= sun_times.sunset:
        return DawnPatrolStatus(status="missed", message="Sun has set")

    if not drive_minutes:
        if now < sun_times.first_light:
            return DawnPatrolStatus(
                status="too-early",
                message=f"First light at {format_time(sun_times.first_light)}"
            )
        if now < sun_times.sunrise:
            return DawnPatrolStatus(
                status="surfing",
                message=f"Sunrise at {format_time(sun_times.sunrise)}"
            )
        return DawnPatrolStatus(
            status="surfing",
            message=f"Sun is up until {format_time(sun_times.sunset)}"
        )

    leave_by = calculate_leave_by(sun_times.first_light, drive_minutes, buffer_minutes)
    arrive_by = leave_by + timedelta(minutes=drive_minutes + buffer_minutes)

    if now < leave_by - LEAVE_NOW_WINDOW:
        return DawnPatrolStatus(
            status="too-early",
            message=f"Leave by {format_time(leave_by)} for first light",
            leave_by=leave_by
        )

    if now < leave_by:
        mins_until_leave = int((leave_by - now).total_seconds() / 60 + 0.5)
        return DawnPatrolStatus(
            status="leave-now",
            message=f"Leave in {mins_until_leave} min for dawn patrol!",
            leave_by=leave_by
        )

    if now < arrive_by:
        return DawnPatrolStatus(
            status="on-the-way",
            message="Go now to catch first light!",
            leave_by=leave_by
        )

    return DawnPatrolStatus(
        status="surfing",
        message=f"Sun up until {format_time(sun_times.sunset)}"
    )
