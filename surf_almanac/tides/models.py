# ABOUTME: Data models for tide predictions
# ABOUTME: Hourly heights plus discrete high/low events for one tide station

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Literal, Optional

TideEventType = Literal["H", "L"]


@dataclass(frozen=True)
class TidePrediction:
    """Tide height (feet above MLLW) at one instant"""
    time: datetime
    height: float
    type: Optional[TideEventType] = None  # "H"/"L" for high/low events, None for hourly

    @property
    def is_high(self) -> bool:
        return self.type == "H"


@dataclass(frozen=True)
class TideSeries:
    """
    Tide predictions for one station.

    `hourly` holds evenly spaced heights, `high_low` the turning points.
    Both are kept sorted by time.
    """
    hourly: tuple[TidePrediction, ...] = field(default_factory=tuple)
    high_low: tuple[TidePrediction, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "hourly", tuple(sorted(self.hourly, key=lambda p: p.time)))
        object.__setattr__(self, "high_low", tuple(sorted(self.high_low, key=lambda p: p.time)))

    @property
    def is_empty(self) -> bool:
        return not self.hourly and not self.high_low

    def for_day(self, day: date) -> "TideSeries":
        """Subset of predictions that fall on the given local calendar day."""
        return TideSeries(
            hourly=tuple(p for p in self.hourly if p.time.date() == day),
            high_low=tuple(p for p in self.high_low if p.time.date() == day),
        )

    def days(self) -> list[date]:
        """Calendar days covered by the hourly samples, in order."""
        return sorted({p.time.date() for p in self.hourly})

    def by_day(self) -> dict[date, "TideSeries"]:
        """Split a multi-day series into one series per calendar day."""
        covered = set(self.days()) | {p.time.date() for p in self.high_low}
        return {day: self.for_day(day) for day in sorted(covered)}
