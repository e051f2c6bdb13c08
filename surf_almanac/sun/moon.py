# ABOUTME: Moon phase lookup from a reference new moon
# ABOUTME: Eight named phases with approximate illumination

import calendar
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

MoonPhase = Literal[
    "new", "waxing-crescent", "first-quarter", "waxing-gibbous",
    "full", "waning-gibbous", "last-quarter", "waning-crescent",
]

KNOWN_NEW_MOON = datetime(2024, 1, 11, 11, 57, tzinfo=timezone.utc)
SYNODIC_MONTH_DAYS = 29.53058867

PHASES = [
    ("new", "🌑", "New Moon"),
    ("waxing-crescent", "🌒", "Waxing Crescent"),
    ("first-quarter", "🌓", "First Quarter"),
    ("waxing-gibbous", "🌔", "Waxing Gibbous"),
    ("full", "🌕", "Full Moon"),
    ("waning-gibbous", "🌖", "Waning Gibbous"),
    ("last-quarter", "🌗", "Last Quarter"),
    ("waning-crescent", "🌘", "Waning Crescent"),
]

SIGNIFICANT_PHASES = {"new", "full", "first-quarter", "last-quarter"}


@dataclass(frozen=True)
class MoonInfo:
    phase: MoonPhase
    illumination: int  # 0-100
    emoji: str
    name: str


def get_moon_phase(moment: datetime) -> MoonInfo:
    """
    Moon phase at `moment` (naive datetimes are treated as UTC).

    Lunar age is the time since a known new moon modulo the synodic month.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)

    days_since = (moment - KNOWN_NEW_MOON).total_seconds() / 86400
    lunar_age = days_since % SYNODIC_MONTH_DAYS
    fraction = lunar_age / SYNODIC_MONTH_DAYS

    illumination = int(math.floor((1 - math.cos(fraction * 2 * math.pi)) / 2 * 100 + 0.5))
    phase, emoji, name = PHASES[int(fraction * 8) % 8]

    return MoonInfo(phase=phase, illumination=illumination, emoji=emoji, name=name)


def get_month_moon_phases(year: int, month: int) -> dict[int, MoonInfo]:
    """Moon info at noon UTC for each day of the month (month is 1-12)."""
    days_in_month = calendar.monthrange(year, month)[1]
    return {
        day: get_moon_phase(datetime(year, month, day, 12, tzinfo=timezone.utc))
        for day in range(1, days_in_month + 1)
    }


def is_significant_phase(phase: MoonPhase) -> bool:
    """New, full and quarter moons."""
    return phase in SIGNIFICANT_PHASES
