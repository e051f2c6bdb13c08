# ABOUTME: Wave-height preferences per board type and skill level
# ABOUTME: Static lookup table of ideal and surfable wave ranges in feet

import logging
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillRange:
    """Ideal and surfable wave-height bounds (feet) for one surfer profile"""
    min_ideal: float
    max_ideal: float
    min_surfable: float
    max_surfable: float

    def __post_init__(self):
        if not (self.min_surfable <= self.min_ideal <= self.max_ideal <= self.max_surfable):
            raise ValueError(
                f"Skill range must satisfy min_surfable <= min_ideal <= max_ideal <= max_surfable, "
                f"got {self.min_surfable}/{self.min_ideal}/{self.max_ideal}/{self.max_surfable}"
            )


SKILL_CONFIGS: dict[str, dict[str, SkillRange]] = {
    "longboard": {
        "beginner": SkillRange(min_ideal=1.5, max_ideal=3, min_surfable=1, max_surfable=5),
        "advanced": SkillRange(min_ideal=2, max_ideal=5, min_surfable=1.5, max_surfable=7),
        "expert": SkillRange(min_ideal=3, max_ideal=6, min_surfable=2, max_surfable=10),
    },
    "mediumboard": {
        "beginner": SkillRange(min_ideal=2, max_ideal=4, min_surfable=1.5, max_surfable=6),
        "advanced": SkillRange(min_ideal=3, max_ideal=6, min_surfable=2, max_surfable=8),
        "expert": SkillRange(min_ideal=4, max_ideal=8, min_surfable=2.5, max_surfable=12),
    },
    "shortboard": {
        "beginner": SkillRange(min_ideal=2.5, max_ideal=4, min_surfable=2, max_surfable=6),
        "advanced": SkillRange(min_ideal=3, max_ideal=7, min_surfable=2.5, max_surfable=10),
        "expert": SkillRange(min_ideal=4, max_ideal=10, min_surfable=3, max_surfable=15),
    },
}

# Alternate names accepted for board types and skill levels
SURFER_TYPE_ALIASES = {"mid-length": "mediumboard", "midlength": "mediumboard"}
SKILL_LEVEL_ALIASES = {"intermediate": "advanced"}

DEFAULT_IDEAL_RANGE = (2.0, 5.0)


def get_skill_range(surfer_type: str, skill_level: str) -> Optional[SkillRange]:
    """
    Look up the wave-height range for a board type and skill level.

    Args:
        surfer_type: "longboard", "mediumboard" (or "mid-length"), "shortboard"
        skill_level: "beginner", "advanced" (or "intermediate"), "expert"

    Returns:
        SkillRange, or None if the pair is unknown
    """
    board = SURFER_TYPE_ALIASES.get(surfer_type, surfer_type)
    level = SKILL_LEVEL_ALIASES.get(skill_level, skill_level)
    config = SKILL_CONFIGS.get(board, {}).get(level)
    if config is None:
        log.warning(f"Unknown surfer profile: {surfer_type}/{skill_level}")
    return config


def get_ideal_wave_range(surfer_type: str, skill_level: str) -> tuple[float, float]:
    """Ideal (min, max) wave height in feet, 2-5ft for unknown profiles."""
    config = get_skill_range(surfer_type, skill_level)
    if config is None:
        return DEFAULT_IDEAL_RANGE
    return (config.min_ideal, config.max_ideal)


@dataclass(frozen=True)
class SurferProfile:
    """Who is surfing: board type plus skill level"""
    surfer_type: str
    skill_level: str

    @property
    def skill_range(self) -> Optional[SkillRange]:
        return get_skill_range(self.surfer_type, self.skill_level)

    def __str__(self) -> str:
        return f"{self.skill_level} {self.surfer_type}"
