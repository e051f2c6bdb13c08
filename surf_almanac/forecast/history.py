# ABOUTME: Frames a score against typical conditions for the month
# ABOUTME: Percentile from a fixed table of NorCal monthly averages

import calendar
import math
from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class MonthlyAverage:
    avg_score: float
    avg_wave_height_ft: float
    good_days_pct: float


# Typical Northern California conditions by calendar month (1 = January)
HISTORICAL_AVERAGES: dict[int, MonthlyAverage] = {
    1: MonthlyAverage(avg_score=68, avg_wave_height_ft=6.5, good_days_pct=45),
    2: MonthlyAverage(avg_score=65, avg_wave_height_ft=5.8, good_days_pct=40),
    3: MonthlyAverage(avg_score=58, avg_wave_height_ft=4.5, good_days_pct=35),
    4: MonthlyAverage(avg_score=52, avg_wave_height_ft=3.5, good_days_pct=30),
    5: MonthlyAverage(avg_score=48, avg_wave_height_ft=3.0, good_days_pct=25),
    6: MonthlyAverage(avg_score=45, avg_wave_height_ft=2.5, good_days_pct=20),
    7: MonthlyAverage(avg_score=42, avg_wave_height_ft=2.2, good_days_pct=18),
    8: MonthlyAverage(avg_score=44, avg_wave_height_ft=2.5, good_days_pct=20),
    9: MonthlyAverage(avg_score=55, avg_wave_height_ft=3.5, good_days_pct=35),
    10: MonthlyAverage(avg_score=65, avg_wave_height_ft=5.0, good_days_pct=45),
    11: MonthlyAverage(avg_score=70, avg_wave_height_ft=6.0, good_days_pct=50),
    12: MonthlyAverage(avg_score=72, avg_wave_height_ft=7.0, good_days_pct=52),
}

# Spread of daily scores around the monthly mean
SCORE_STD_DEV = 15
# tanh scale that approximates the normal CDF
TANH_SCALE = 0.8


def get_historical_percentile(
    score: float,
    month: int,
    averages: Mapping[int, MonthlyAverage] = HISTORICAL_AVERAGES
) -> int:
    """
    Percentile (1-99) of a score among typical days of the given month.

    Uses 50 * (1 + tanh(0.8 * z)) as a cheap stand-in for the normal CDF,
    where z is the score's distance from the monthly mean in standard
    deviations.

    Args:
        score: Overall 0-100 score
        month: Calendar month 1-12
        averages: Monthly averages table

    Returns:
        Percentile clamped to 1-99
    """
    if month not in averages:
        raise ValueError(f"No historical averages for month {month}")

    z_score = (score - averages[month].avg_score) / SCORE_STD_DEV
    percentile = int(math.floor(50 * (1 + math.tanh(z_score * TANH_SCALE)) + 0.5))
    return max(1, min(99, percentile))


def get_historical_context(
    score: float,
    month: int,
    averages: Mapping[int, MonthlyAverage] = HISTORICAL_AVERAGES
) -> str:
    """Short phrase such as "Top 10% day for June!"."""
    percentile = get_historical_percentile(score, month, averages)
    month_name = calendar.month_name[month]

    if percentile >= 90:
        return f"Top 10% day for {month_name}!"
    if percentile >= 75:
        return f"Better than {percentile}% of {month_name} days"
    if percentile >= 50:
        return f"Above average for {month_name}"
    if percentile >= 25:
        return f"Typical {month_name} conditions"
    return f"Below average for {month_name}"
