# ABOUTME: Compass bearing helpers shared by wind and swell scoring
# ABOUTME: Folds angle differences into (-180, 180] and labels bearings

import math

CARDINAL_DIRECTIONS = [
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
]

# Arrow points the way the swell is travelling, i.e. away from its source
SWELL_ARROWS = {
    "N": "↓", "NNE": "↙", "NE": "↙", "ENE": "←",
    "E": "←", "ESE": "←", "SE": "↖", "SSE": "↖",
    "S": "↑", "SSW": "↗", "SW": "↗", "WSW": "→",
    "W": "→", "WNW": "→", "NW": "↘", "NNW": "↘",
}


def normalize_angle(angle: float) -> float:
    """
    Fold an angle in degrees into the range (-180, 180].

    Every direction comparison in the engine goes through this function,
    so a 350 vs 10 degree comparison comes out as 20 degrees, not 340.

    Args:
        angle: Angle in degrees, any magnitude

    Returns:
        Equivalent angle in (-180, 180]
    """
    normalized = float(angle)
    while normalized <= -180:
        normalized += 360
    while normalized > 180:
        normalized -= 360
    return normalized


def angle_difference(a: float, b: float) -> float:
    """Absolute circular distance between two bearings, 0-180 degrees."""
    return abs(normalize_angle(a - b))


def cardinal_direction(degrees: float) -> str:
    """16-point compass label for a bearing (e.g. 280 -> "W")."""
    index = int(math.floor((degrees % 360) / 22.5 + 0.5)) % 16
    return CARDINAL_DIRECTIONS[index]


def swell_source(degrees: float) -> dict:
    """
    Describe where a swell from the given bearing originates.

    Args:
        degrees: Swell direction (direction it travels from)

    Returns:
        {"direction": str, "source": str, "arrow": str}
    """
    cardinal = cardinal_direction(degrees)

    if 270 <= degrees <= 315:
        source = "North Pacific / Alaska"
    elif 225 <= degrees < 270:
        source = "West Pacific"
    elif 180 <= degrees < 225:
        source = "South Pacific / Southern Hemisphere"
    elif degrees >= 315 or degrees < 45:
        source = "North Pacific / Gulf of Alaska"
    else:
        source = "Local wind swell"

    return {
        "direction": cardinal,
        "source": source,
        "arrow": SWELL_ARROWS.get(cardinal, "→"),
    }
