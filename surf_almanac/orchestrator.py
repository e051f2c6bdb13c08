# ABOUTME: Main coordinator tying data sources, scoring, tides and sun math together
# ABOUTME: Builds ranked spot reports and week outlooks for one surfer profile

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from surf_almanac.config import Config
from surf_almanac.debug import debug_log
from surf_almanac.forecast.history import get_historical_context, get_historical_percentile
from surf_almanac.forecast.week import WeekForecast, analyze_week
from surf_almanac.scoring.calculator import (
    NO_DATA_BREAKDOWN,
    RankedSpot,
    SpotScoreCalculator,
    conditions_quality,
)
from surf_almanac.scoring.models import Measurement, ScoreResult
from surf_almanac.scoring.skill import SurferProfile
from surf_almanac.spots.catalog import SURF_SPOTS
from surf_almanac.spots.models import SpotConfig
from surf_almanac.sun.calculator import SunTimes, get_sun_times, resolve_timezone
from surf_almanac.sun.dawn_patrol import DawnPatrolStatus, get_dawn_patrol_status
from surf_almanac.tides.analyzer import get_next_tides
from surf_almanac.tides.models import TidePrediction, TideSeries
from surf_almanac.tides.windows import TimeWindow, find_best_time_window
from surf_almanac.weather.sources import CoopsTideClient, NDBCBuoyClient, build_measurement

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpotReport:
    """Everything known about one spot right now"""
    spot: SpotConfig
    result: ScoreResult
    quality: str
    best_window: Optional[TimeWindow]
    sun_times: SunTimes
    dawn_patrol: DawnPatrolStatus
    percentile: int
    historical_context: str
    next_high: Optional[TidePrediction] = None
    next_low: Optional[TidePrediction] = None

    @property
    def score(self) -> int:
        return self.result.score


@dataclass(frozen=True)
class LiveData:
    """Inputs gathered from the data sources for one refresh"""
    conditions: dict[str, Measurement]
    tides_by_station: dict[str, TideSeries]


class SurfAlmanac:
    """Orchestrates scoring, tide and sun components for a surfer"""

    def __init__(
        self,
        profile: Optional[SurferProfile] = None,
        spots: Sequence[SpotConfig] = SURF_SPOTS,
        buoy_client: Optional[NDBCBuoyClient] = None,
        tide_client: Optional[CoopsTideClient] = None,
        tz: Optional[str] = None
    ):
        self.profile = profile or SurferProfile(Config.DEFAULT_SURFER_TYPE, Config.DEFAULT_SKILL_LEVEL)
        self.spots = tuple(spots)
        self.calculator = SpotScoreCalculator()
        self.buoy_client = buoy_client or NDBCBuoyClient()
        self.tide_client = tide_client or CoopsTideClient(tz=tz)
        self.tz = resolve_timezone(tz)

    def collect(self, now: datetime, days: int = 1) -> LiveData:
        """
        Fetch buoy and tide data for every spot.

        Stations are fetched once each. Spots whose buoy is offline are left
        out of `conditions`; stations whose tides failed are left out of
        `tides_by_station`.
        """
        buoy_ids = sorted({spot.buoy_station for spot in self.spots})
        tide_ids = sorted({spot.tide_station for spot in self.spots})

        readings = self.buoy_client.fetch_many(buoy_ids)
        tides_by_station = {}
        for station_id in tide_ids:
            series = self.tide_client.fetch(station_id, now.astimezone(self.tz).date(), days=days)
            if series is None:
                log.warning(f"No tide predictions for station {station_id}")
                continue
            tides_by_station[station_id] = series

        conditions = {}
        for spot in self.spots:
            reading = readings.get(spot.buoy_station)
            if reading is None:
                debug_log(f"Buoy {spot.buoy_station} offline, skipping {spot.id}", "ORCHESTRATOR")
                continue
            conditions[spot.id] = build_measurement(
                reading, tides_by_station.get(spot.tide_station), now
            )

        debug_log(
            f"Collected {len(conditions)} spot conditions, {len(tides_by_station)} tide stations",
            "ORCHESTRATOR"
        )
        return LiveData(conditions=conditions, tides_by_station=tides_by_station)

    def rank(self, conditions_by_spot: Mapping[str, Measurement]) -> list[RankedSpot]:
        """Spots ranked by descending score; ties keep catalog order."""
        return self.calculator.rank_spots(self.spots, conditions_by_spot, self.profile)

    def spot_report(
        self,
        spot: SpotConfig,
        conditions: Optional[Measurement],
        tides: Optional[TideSeries],
        now: datetime,
        drive_minutes: Optional[float] = None
    ) -> SpotReport:
        """
        Build the full report for one spot at `now`.

        Args:
            spot: Spot configuration
            conditions: Current measurement, None if the buoy is offline
            tides: Tide predictions covering today, None if unavailable
            now: Current time (timezone-aware)
            drive_minutes: Drive estimate from the surfer's home

        Returns:
            SpotReport
        """
        local_now = now.astimezone(self.tz)
        today = local_now.date()

        if conditions is None:
            result = ScoreResult(score=0, rating="Poor", breakdown=NO_DATA_BREAKDOWN)
        else:
            result = self.calculator.calculate(conditions, spot, self.profile)

        best_window = None
        next_high = next_low = None
        if tides is not None:
            best_window = find_best_time_window(tides, spot.best_tide, day=today)
            next_high, next_low = get_next_tides(tides, now)

        sun_times = get_sun_times(spot.lat, spot.lng, today, self.tz)

        return SpotReport(
            spot=spot,
            result=result,
            quality=conditions_quality(result.score),
            best_window=best_window,
            sun_times=sun_times,
            dawn_patrol=get_dawn_patrol_status(now, sun_times, drive_minutes),
            percentile=get_historical_percentile(result.score, today.month),
            historical_context=get_historical_context(result.score, today.month),
            next_high=next_high,
            next_low=next_low,
        )

    def reports(
        self,
        data: LiveData,
        now: datetime,
        drive_minutes: Optional[Mapping[str, float]] = None
    ) -> list[SpotReport]:
        """Reports for every spot, best score first (stable on ties)."""
        drive_minutes = drive_minutes or {}
        reports = [
            self.spot_report(
                spot,
                data.conditions.get(spot.id),
                data.tides_by_station.get(spot.tide_station),
                now,
                drive_minutes.get(spot.id),
            )
            for spot in self.spots
        ]
        return sorted(reports, key=lambda r: r.score, reverse=True)

    def week_forecast(self, spot: SpotConfig, tides: Optional[TideSeries], today: date) -> WeekForecast:
        """Seven-day outlook for a spot from a multi-day tide series."""
        tide_data_by_day = tides.by_day() if tides is not None else {}
        return analyze_week(tide_data_by_day, spot, today, self.tz)
