# ABOUTME: Combines condition sub-scores into one 0-100 score per spot
# ABOUTME: Produces rating, breakdown text and a ranked list of spots

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from surf_almanac.scoring.conditions import (
    round_half_up,
    score_swell_direction,
    score_tide,
    score_wave_height,
    score_wave_period,
    score_wind,
)
from surf_almanac.scoring.models import Measurement, Rating, ScoreResult
from surf_almanac.scoring.skill import SurferProfile
from surf_almanac.spots.models import SpotConfig

log = logging.getLogger(__name__)

# Factor weights. Wind appears twice: the 0.10 "wind direction" weight
# reuses the combined speed+direction wind score, so wind carries 0.30 total.
WEIGHTS = {
    "wave_height": 0.30,
    "wave_period": 0.20,
    "wind": 0.20,
    "swell_direction": 0.15,
    "wind_direction": 0.10,
    "tide": 0.05,
}

# (minimum score, rating), checked top down
RATING_THRESHOLDS: list[tuple[int, Rating]] = [(80, "Excellent"), (60, "Good"), (40, "Fair")]

QUALITY_LABELS = [
    (90, "Epic conditions"),
    (80, "Excellent conditions"),
    (70, "Very good conditions"),
    (60, "Good conditions"),
    (50, "Fair conditions"),
    (40, "Below average"),
    (30, "Poor conditions"),
]

NO_DATA_BREAKDOWN = "No conditions data available."


def rating_for_score(score: int) -> Rating:
    """Excellent >= 80, Good >= 60, Fair >= 40, else Poor."""
    for threshold, rating in RATING_THRESHOLDS:
        if score >= threshold:
            return rating
    return "Poor"


def conditions_quality(score: int) -> str:
    """Finer-grained label for a score, e.g. "Very good conditions"."""
    for threshold, label in QUALITY_LABELS:
        if score >= threshold:
            return label
    return "Not recommended"


@dataclass(frozen=True)
class SubScores:
    """Per-factor scores behind an overall score"""
    wave_height: int
    wave_period: int
    wind: int
    swell_direction: int
    tide: int

    def weighted_total(self) -> float:
        return (
            self.wave_height * WEIGHTS["wave_height"]
            + self.wave_period * WEIGHTS["wave_period"]
            + self.wind * WEIGHTS["wind"]
            + self.swell_direction * WEIGHTS["swell_direction"]
            + self.wind * WEIGHTS["wind_direction"]
            + self.tide * WEIGHTS["tide"]
        )


@dataclass(frozen=True)
class RankedSpot:
    """A spot together with its score result"""
    spot: SpotConfig
    result: ScoreResult

    @property
    def score(self) -> int:
        return self.result.score


class SpotScoreCalculator:
    """Calculates 0-100 surf scores for spots given current conditions"""

    def sub_scores(
        self,
        conditions: Measurement,
        spot: SpotConfig,
        profile: SurferProfile
    ) -> SubScores:
        """Score each condition factor independently."""
        return SubScores(
            wave_height=score_wave_height(
                conditions.wave_height_ft, profile.surfer_type, profile.skill_level
            ),
            wave_period=score_wave_period(conditions.wave_period_s),
            wind=score_wind(
                conditions.wind_speed_mph,
                conditions.wind_direction,
                spot.offshore_wind_direction
            ),
            swell_direction=score_swell_direction(
                conditions.swell_direction, list(spot.optimal_swell_directions)
            ),
            tide=score_tide(conditions.tide_height_ft, conditions.tide_phase, spot.best_tide),
        )

    def calculate(
        self,
        conditions: Measurement,
        spot: SpotConfig,
        profile: SurferProfile
    ) -> ScoreResult:
        """
        Calculate the overall score for a spot.

        Weights:
        - Wave height: 30%
        - Wave period: 20%
        - Wind (speed and direction): 20%
        - Swell direction: 15%
        - Wind again, as the direction component: 10%
        - Tide: 5%

        Args:
            conditions: Current measurement at the spot
            spot: Spot configuration
            profile: Surfer board type and skill

        Returns:
            ScoreResult with score clamped to 0-100
        """
        scores = self.sub_scores(conditions, spot, profile)
        score = min(100, max(0, round_half_up(scores.weighted_total())))

        return ScoreResult(
            score=score,
            rating=rating_for_score(score),
            breakdown=self._breakdown_text(conditions, profile, scores),
        )

    def rank_spots(
        self,
        spots: Sequence[SpotConfig],
        conditions_by_spot: Mapping[str, Measurement],
        profile: SurferProfile
    ) -> list[RankedSpot]:
        """
        Score every spot and sort by descending score.

        Spots without a measurement score 0. The sort is stable, so spots
        with equal scores keep their input order.
        """
        ranked = []
        for spot in spots:
            conditions = conditions_by_spot.get(spot.id)
            if conditions is None:
                log.warning(f"No conditions for {spot.id}, scoring as 0")
                result = ScoreResult(score=0, rating="Poor", breakdown=NO_DATA_BREAKDOWN)
            else:
                result = self.calculate(conditions, spot, profile)
            ranked.append(RankedSpot(spot=spot, result=result))

        return sorted(ranked, key=lambda r: r.score, reverse=True)

    def _breakdown_text(
        self,
        conditions: Measurement,
        profile: SurferProfile,
        scores: SubScores
    ) -> str:
        """Human-readable summary of why the spot scored as it did."""
        parts = []
        height = conditions.wave_height_ft
        period = conditions.wave_period_s
        wind = conditions.wind_speed_mph

        # Wave size
        if scores.wave_height >= 80:
            parts.append(f"Excellent wave size ({height:.1f}ft) for {profile} surfers.")
        elif scores.wave_height >= 60:
            parts.append(f"Good wave size ({height:.1f}ft) for developing skills.")
        elif height > 6:
            parts.append(f"Large waves ({height:.1f}ft) - challenging for most surfers.")
        elif height < 2:
            parts.append(f"Small waves ({height:.1f}ft) - may be underwhelming.")
        else:
            parts.append(f"Waves at {height:.1f}ft.")

        # Period
        if scores.wave_period >= 75:
            parts.append(f"Good wave period ({period:.1f}s) indicates organized groundswell.")
        elif scores.wave_period <= 35:
            parts.append(
                f"Short period ({period:.1f}s) suggests wind swell - expect choppier conditions."
            )

        # Wind
        if wind < 5:
            parts.append("Light winds with glassy conditions.")
        elif wind < 10:
            parts.append(f"Light winds ({round_half_up(wind)}mph) with clean conditions.")
        elif wind < 15:
            parts.append(f"Moderate winds ({round_half_up(wind)}mph) with manageable texture.")
        else:
            parts.append(f"Strong winds ({round_half_up(wind)}mph) creating challenging conditions.")

        # Swell direction
        if scores.swell_direction >= 85:
            parts.append("Swell direction is ideal for this spot.")
        elif scores.swell_direction <= 30:
            parts.append("Swell direction is not optimal for this spot.")

        return " ".join(parts)
