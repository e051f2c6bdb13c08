# ABOUTME: Independent 0-100 sub-scores for each surf condition factor
# ABOUTME: Wave height, wave period, wind, swell direction and tide scorers

import math

from surf_almanac.scoring.angles import angle_difference
from surf_almanac.scoring.models import TidePhase, TideClass, require_finite, require_non_negative
from surf_almanac.scoring.skill import get_skill_range

# Neutral wave-height score when the surfer profile is not in the table
UNKNOWN_PROFILE_SCORE = 50

# (minimum period seconds, score), checked top down
PERIOD_BUCKETS = [(15, 100), (13, 90), (11, 75), (9, 55), (7, 35)]
SHORT_PERIOD_SCORE = 20

# (wind below mph, score); anything at or above the last limit scores 5
WIND_SPEED_BUCKETS = [(5, 100), (10, 85), (15, 65), (20, 40), (25, 20)]
HOWLING_WIND_SCORE = 5
GLASSY_WIND_MPH = 5

# (max degrees off offshore, multiplier)
WIND_DIRECTION_MULTIPLIERS = [(45, 1.0), (90, 0.85), (135, 0.6)]
ONSHORE_MULTIPLIER = 0.4
GLASSY_MIN_MULTIPLIER = 0.9

# (max degrees off nearest optimal bearing, score)
SWELL_DIRECTION_BUCKETS = [(15, 100), (30, 85), (45, 70), (60, 50), (90, 30)]
WRONG_SWELL_SCORE = 10

# Tide heights are scaled against a 0-6ft local range
TIDE_RANGE_FT = 6.0
ANY_TIDE_SCORE = 80


def round_half_up(value: float) -> int:
    """Round halves upward (round() would send 92.5 to 92)."""
    return int(math.floor(value + 0.5))


def score_wave_height(height: float, surfer_type: str, skill_level: str) -> int:
    """
    Score wave height against the surfer's ideal and surfable ranges.

    100 inside the ideal range, 60-100 between surfable minimum and ideal,
    50-100 between ideal maximum and surfable maximum, a 0-30 ramp below
    the surfable minimum and a 30-point start losing 10 per foot above the
    surfable maximum.

    Args:
        height: Wave height in feet
        surfer_type: Board type key
        skill_level: Skill level key

    Returns:
        Score 0-100 (50 when the profile is unknown)
    """
    require_non_negative("wave height", height)
    config = get_skill_range(surfer_type, skill_level)
    if config is None:
        return UNKNOWN_PROFILE_SCORE

    if config.min_ideal <= height <= config.max_ideal:
        return 100

    # Below ideal but surfable
    if config.min_surfable <= height < config.min_ideal:
        span = config.min_ideal - config.min_surfable
        return round_half_up(100 - ((config.min_ideal - height) / span) * 40)

    # Above ideal but surfable
    if config.max_ideal < height <= config.max_surfable:
        span = config.max_surfable - config.max_ideal
        return round_half_up(100 - ((height - config.max_ideal) / span) * 50)

    if height < config.min_surfable:
        return max(0, round_half_up((height / config.min_surfable) * 30))

    return max(0, round_half_up(30 - (height - config.max_surfable) * 10))


def score_wave_period(period: float) -> int:
    """Longer period means more organized groundswell; step buckets from 20 to 100."""
    require_non_negative("wave period", period)
    for min_period, score in PERIOD_BUCKETS:
        if period >= min_period:
            return score
    return SHORT_PERIOD_SCORE


def wind_speed_score(speed: float) -> int:
    for limit, score in WIND_SPEED_BUCKETS:
        if speed < limit:
            return score
    return HOWLING_WIND_SCORE


def wind_direction_multiplier(direction: float, offshore_direction: float) -> float:
    """1.0 offshore down to 0.4 straight onshore."""
    diff = angle_difference(direction, offshore_direction)
    for max_diff, multiplier in WIND_DIRECTION_MULTIPLIERS:
        if diff <= max_diff:
            return multiplier
    return ONSHORE_MULTIPLIER


def score_wind(speed: float, direction: float, offshore_direction: float) -> int:
    """
    Score wind speed scaled by how close the wind is to offshore.

    Below 5mph direction barely matters, so the multiplier never drops
    under 0.9 in glassy conditions.

    Args:
        speed: Wind speed in mph
        direction: Wind direction in degrees
        offshore_direction: Bearing that blows offshore at the spot

    Returns:
        Score 0-100
    """
    require_non_negative("wind speed", speed)
    require_finite("wind direction", direction)

    multiplier = wind_direction_multiplier(direction, offshore_direction)
    if speed < GLASSY_WIND_MPH:
        multiplier = max(GLASSY_MIN_MULTIPLIER, multiplier)

    return round_half_up(wind_speed_score(speed) * multiplier)


def score_swell_direction(swell_direction: float, optimal_directions: list[float]) -> int:
    """Score by distance from the nearest optimal swell bearing."""
    require_finite("swell direction", swell_direction)
    min_diff = 180.0
    for optimal in optimal_directions:
        min_diff = min(min_diff, angle_difference(swell_direction, optimal))

    for max_diff, score in SWELL_DIRECTION_BUCKETS:
        if min_diff <= max_diff:
            return score
    return WRONG_SWELL_SCORE


def score_tide(height: float, phase: TidePhase, best_tide: TideClass) -> int:
    """
    Score tide height against the spot's preferred tide.

    The phase is accepted for interface stability but does not change
    the score.
    """
    require_finite("tide height", height)
    if best_tide == "any":
        return ANY_TIDE_SCORE

    tide_pct = min(1.0, max(0.0, height / TIDE_RANGE_FT))

    if best_tide == "low":
        if tide_pct < 0.33:
            return 100
        if tide_pct < 0.5:
            return 75
        if tide_pct < 0.67:
            return 50
        return 30

    if best_tide == "mid":
        if 0.33 <= tide_pct <= 0.67:
            return 100
        if 0.2 <= tide_pct <= 0.8:
            return 75
        return 50

    if best_tide == "high":
        if tide_pct > 0.67:
            return 100
        if tide_pct > 0.5:
            return 75
        if tide_pct > 0.33:
            return 50
        return 30

    return 50
