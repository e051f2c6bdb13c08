# ABOUTME: API clients for NOAA buoy observations and tide predictions
# ABOUTME: Turns NDBC text files and CO-OPS JSON into engine inputs

import logging
import requests
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from surf_almanac.config import Config
from surf_almanac.scoring.models import Measurement
from surf_almanac.sun.calculator import resolve_timezone
from surf_almanac.tides.analyzer import get_current_tide_height, get_tide_phase
from surf_almanac.tides.models import TidePrediction, TideSeries
from surf_almanac.weather.models import BuoyReading

log = logging.getLogger(__name__)

# NDBC realtime2 column positions
# #YY MM DD hh mm WDIR WSPD GST WVHT DPD APD MWD PRES ATMP WTMP ...
COL_WDIR = 5
COL_WSPD = 6
COL_WVHT = 8
COL_DPD = 9
COL_MWD = 11
COL_ATMP = 13
COL_WTMP = 14
MIN_COLUMNS = 15

FEET_PER_METER = 3.28084
MPH_PER_MS = 2.237

USER_AGENT = "BayAreaSurfAlmanac/1.0"


def _parse_number(value: str) -> Optional[float]:
    """NDBC writes "MM" for missing values."""
    try:
        return float(value)
    except ValueError:
        return None


def meters_to_feet(meters: float) -> float:
    return round(meters * FEET_PER_METER, 1)


def ms_to_mph(ms: float) -> float:
    return round(ms * MPH_PER_MS, 1)


def celsius_to_fahrenheit(celsius: float) -> int:
    return int(round(celsius * 9 / 5 + 32))


def parse_ndbc_text(station_id: str, text: str) -> list[BuoyReading]:
    """
    Parse an NDBC realtime2 standard meteorological file.

    Rows missing wave height or dominant period are skipped. Results keep
    file order, which is newest first.
    """
    readings = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        parts = line.split()
        if len(parts) < MIN_COLUMNS:
            continue

        wave_height_m = _parse_number(parts[COL_WVHT])
        wave_period = _parse_number(parts[COL_DPD])
        if wave_height_m is None or wave_period is None:
            continue

        try:
            year, month, day, hour, minute = (int(p) for p in parts[:5])
        except ValueError:
            log.warning(f"Skipping NDBC row with bad timestamp: {line}")
            continue
        if year < 100:
            year += 2000

        wind_speed = _parse_number(parts[COL_WSPD])
        water_temp = _parse_number(parts[COL_WTMP])
        air_temp = _parse_number(parts[COL_ATMP])

        readings.append(BuoyReading(
            station_id=station_id,
            timestamp_utc=datetime(year, month, day, hour, minute, tzinfo=timezone.utc),
            wave_height_ft=meters_to_feet(wave_height_m),
            wave_period_s=wave_period,
            wave_direction=_parse_number(parts[COL_MWD]) or 0.0,
            wind_speed_mph=ms_to_mph(wind_speed) if wind_speed is not None else 0.0,
            wind_direction=_parse_number(parts[COL_WDIR]) or 0.0,
            water_temp_f=celsius_to_fahrenheit(water_temp) if water_temp is not None else None,
            air_temp_f=celsius_to_fahrenheit(air_temp) if air_temp is not None else None,
        ))

    return readings


class NDBCBuoyClient:
    """Client for NOAA National Data Buoy Center realtime observations"""

    def __init__(self, base_url: str = None, timeout: int = None):
        self.base_url = base_url or Config.NDBC_BASE_URL
        self.timeout = timeout or Config.REQUEST_TIMEOUT_SECONDS

    def fetch(self, station_id: str) -> list[BuoyReading]:
        """
        Fetch recent observations for a buoy station.

        Returns:
            Readings newest first, empty list on any error.
        """
        url = f"{self.base_url}/{station_id}.txt"
        try:
            response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=self.timeout)

            if response.status_code != 200:
                log.error(f"NDBC HTTP error for {station_id}: {response.status_code}")
                return []

            return parse_ndbc_text(station_id, response.text)

        except requests.RequestException as e:
            log.error(f"NDBC request failed for {station_id}: {e}")
            return []

    def fetch_latest(self, station_id: str) -> Optional[BuoyReading]:
        """Most recent usable observation, None if unavailable."""
        readings = self.fetch(station_id)
        return readings[0] if readings else None

    def fetch_many(self, station_ids: list[str]) -> dict[str, Optional[BuoyReading]]:
        """Latest observation per station; failed stations map to None."""
        return {station_id: self.fetch_latest(station_id) for station_id in station_ids}


class CoopsTideClient:
    """Client for NOAA CO-OPS tide predictions (feet above MLLW, local time)"""

    def __init__(self, base_url: str = None, timeout: int = None, tz: str = None):
        self.base_url = base_url or Config.COOPS_BASE_URL
        self.timeout = timeout or Config.REQUEST_TIMEOUT_SECONDS
        self.tz = resolve_timezone(tz)

    def fetch(self, station_id: str, begin: date, days: int = 1) -> Optional[TideSeries]:
        """
        Fetch hourly and high/low predictions for a date range.

        Args:
            station_id: CO-OPS station id, e.g. "9414290"
            begin: First day
            days: Number of days, including the first

        Returns:
            TideSeries, or None on any error
        """
        end = begin + timedelta(days=days - 1)
        high_low = self._fetch_predictions(station_id, begin, end, "hilo")
        if high_low is None:
            return None
        hourly = self._fetch_predictions(station_id, begin, end, "h")
        if hourly is None:
            return None

        return TideSeries(
            hourly=tuple(TidePrediction(time=p.time, height=p.height) for p in hourly),
            high_low=tuple(high_low),
        )

    def _fetch_predictions(
        self,
        station_id: str,
        begin: date,
        end: date,
        interval: str
    ) -> Optional[list[TidePrediction]]:
        params = {
            "station": station_id,
            "product": "predictions",
            "datum": "MLLW",
            "time_zone": "lst_ldt",
            "units": "english",
            "interval": interval,
            "format": "json",
            "begin_date": begin.strftime("%Y%m%d"),
            "end_date": end.strftime("%Y%m%d"),
            "application": Config.COOPS_APPLICATION,
        }

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)

            if response.status_code != 200:
                log.error(f"CO-OPS HTTP error for {station_id}: {response.status_code}")
                return None

            data = response.json()

            if "error" in data:
                log.error(f"CO-OPS API error for {station_id}: {data['error'].get('message')}")
                return None

            return [self._parse_prediction(p) for p in data["predictions"]]

        except (requests.RequestException, KeyError, TypeError, ValueError) as e:
            log.error(f"CO-OPS request failed for {station_id}: {e}")
            return None

    def _parse_prediction(self, raw: dict) -> TidePrediction:
        """CO-OPS rows look like {"t": "2025-10-16 05:42", "v": "1.234", "type": "L"}."""
        moment = datetime.strptime(raw["t"], "%Y-%m-%d %H:%M").replace(tzinfo=self.tz)
        return TidePrediction(time=moment, height=float(raw["v"]), type=raw.get("type") or None)


def build_measurement(
    reading: BuoyReading,
    tides: Optional[TideSeries],
    now: datetime
) -> Measurement:
    """
    Combine a buoy reading with the tide state at `now`.

    Without tide data the tide is taken as 0ft and rising.
    """
    if tides is None:
        tide_height, tide_phase = 0.0, "rising"
    else:
        tide_height = get_current_tide_height(tides, now)
        tide_phase = get_tide_phase(tides, now)

    return Measurement(
        wave_height_ft=reading.wave_height_ft,
        wave_period_s=reading.wave_period_s,
        swell_direction=reading.wave_direction,
        wind_speed_mph=reading.wind_speed_mph,
        wind_direction=reading.wind_direction,
        tide_height_ft=tide_height,
        tide_phase=tide_phase,
        water_temp_f=reading.water_temp_f,
        air_temp_f=reading.air_temp_f,
    )
