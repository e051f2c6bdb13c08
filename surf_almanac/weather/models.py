# ABOUTME: Data models for raw buoy observations
# ABOUTME: NDBC readings already converted to feet, mph and Fahrenheit

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class BuoyReading:
    """One NDBC buoy observation"""
    station_id: str
    timestamp_utc: datetime
    wave_height_ft: float
    wave_period_s: float
    wave_direction: float   # degrees, 0 when the buoy reports none
    wind_speed_mph: float
    wind_direction: float   # degrees, 0 when the buoy reports none
    water_temp_f: Optional[float] = None
    air_temp_f: Optional[float] = None

    def __str__(self) -> str:
        return (
            f"{self.station_id}: {self.wave_height_ft:.1f}ft @ {self.wave_period_s:.0f}s "
            f"from {self.wave_direction:.0f}°, wind {self.wind_speed_mph:.0f}mph "
            f"@ {self.timestamp_utc:%Y-%m-%d %H:%M}Z"
        )
