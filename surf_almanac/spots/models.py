# ABOUTME: Data model for a surf location's static configuration
# ABOUTME: Coordinates, swell/wind orientation and preferred tide per spot

from dataclasses import dataclass, field
from typing import Optional

from surf_almanac.scoring.models import TideClass, TIDE_CLASSES


@dataclass(frozen=True)
class SpotConfig:
    """Static description of a surf spot"""
    id: str
    name: str
    lat: float
    lng: float
    region: str
    optimal_swell_directions: tuple[float, ...]  # degrees
    offshore_wind_direction: float               # degrees
    best_tide: TideClass
    buoy_station: str
    tide_station: str
    break_type: str = "beach"
    skill_level: str = "intermediate"
    description: str = ""
    hazards: tuple[str, ...] = field(default_factory=tuple)
    best_season: Optional[str] = None

    def __post_init__(self):
        if self.best_tide not in TIDE_CLASSES:
            raise ValueError(f"Unknown tide preference for {self.id}: {self.best_tide}")
        if not self.optimal_swell_directions:
            raise ValueError(f"Spot {self.id} needs at least one optimal swell direction")
        if not -90 <= self.lat <= 90:
            raise ValueError(f"Latitude out of range for {self.id}: {self.lat}")
