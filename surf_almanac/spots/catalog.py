# ABOUTME: Catalog of Northern California surf spots
# ABOUTME: Loaded once as immutable configuration for scoring and forecasts

from typing import Optional

from surf_almanac.spots.models import SpotConfig

SURF_SPOTS: tuple[SpotConfig, ...] = (
    SpotConfig(
        id="half-moon-bay",
        name="Half Moon Bay (Mavericks)",
        description="World-famous big wave spot, also has smaller breaks nearby",
        lat=37.494,
        lng=-122.501,
        region="Bay Area",
        optimal_swell_directions=(270, 290, 310),  # W to NW
        offshore_wind_direction=45,               # NE
        best_tide="mid",
        buoy_station="46012",
        tide_station="9414290",
        break_type="reef",
        skill_level="expert",
        hazards=("Heavy waves", "Rocks", "Strong currents", "Cold water", "Sharks"),
        best_season="October - March (big wave season)",
    ),
    SpotConfig(
        id="pacifica-linda-mar",
        name="Pacifica (Linda Mar)",
        description="Popular beginner-friendly beach break with consistent waves",
        lat=37.593,
        lng=-122.504,
        region="Bay Area",
        optimal_swell_directions=(260, 280, 300),
        offshore_wind_direction=90,
        best_tide="mid",
        buoy_station="46026",
        tide_station="9414290",
        break_type="beach",
        skill_level="beginner",
        hazards=("Rip currents", "Crowded lineup"),
        best_season="Year-round, best in fall",
    ),
    SpotConfig(
        id="ocean-beach-sf",
        name="Ocean Beach SF",
        description="Powerful beach break, can get heavy. Not for beginners.",
        lat=37.76,
        lng=-122.51,
        region="Bay Area",
        optimal_swell_directions=(270, 285, 300),
        offshore_wind_direction=90,
        best_tide="mid",
        buoy_station="46026",
        tide_station="9414290",
        break_type="beach",
        skill_level="advanced",
        hazards=("Heavy shorebreak", "Strong rips", "Cold water", "Sharks", "Sneaker waves"),
        best_season="Fall and winter for best waves",
    ),
    SpotConfig(
        id="fort-point",
        name="Fort Point",
        description="Historic spot under the Golden Gate Bridge, needs big NW swell",
        lat=37.811,
        lng=-122.477,
        region="Bay Area",
        optimal_swell_directions=(270, 290, 310),
        offshore_wind_direction=135,
        best_tide="mid",
        buoy_station="46237",
        tide_station="9414290",
        break_type="point",
        skill_level="advanced",
        hazards=("Rocks", "Strong currents", "Ship traffic", "Cold water"),
        best_season="Winter (needs big NW swell to break)",
    ),
    SpotConfig(
        id="bolinas",
        name="Bolinas",
        lat=37.909,
        lng=-122.686,
        region="Marin",
        optimal_swell_directions=(250, 270, 290),
        offshore_wind_direction=45,
        best_tide="any",
        buoy_station="46214",
        tide_station="9415020",
        break_type="point",
    ),
    SpotConfig(
        id="stinson-beach",
        name="Stinson Beach",
        lat=37.902,
        lng=-122.644,
        region="Marin",
        optimal_swell_directions=(250, 270, 290),
        offshore_wind_direction=45,
        best_tide="mid",
        buoy_station="46214",
        tide_station="9415020",
    ),
    SpotConfig(
        id="rodeo-beach",
        name="Rodeo Beach",
        lat=37.833,
        lng=-122.538,
        region="Bay Area",
        optimal_swell_directions=(270, 285, 300),
        offshore_wind_direction=90,
        best_tide="mid",
        buoy_station="46026",
        tide_station="9414290",
    ),
    SpotConfig(
        id="muir-beach",
        name="Muir Beach",
        lat=37.859,
        lng=-122.578,
        region="Marin",
        optimal_swell_directions=(250, 270, 290),
        offshore_wind_direction=90,
        best_tide="mid",
        buoy_station="46214",
        tide_station="9415020",
    ),
    SpotConfig(
        id="dillon-beach",
        name="Dillon Beach",
        lat=38.248,
        lng=-122.965,
        region="Marin",
        optimal_swell_directions=(270, 285, 300),
        offshore_wind_direction=45,
        best_tide="mid",
        buoy_station="46013",
        tide_station="9415020",
    ),
    SpotConfig(
        id="salmon-creek",
        name="Salmon Creek",
        lat=38.315,
        lng=-123.048,
        region="Sonoma",
        optimal_swell_directions=(285, 300, 315),
        offshore_wind_direction=90,
        best_tide="mid",
        buoy_station="46013",
        tide_station="9415020",
    ),
)

_SPOTS_BY_ID = {spot.id: spot for spot in SURF_SPOTS}


def get_spot(spot_id: str) -> Optional[SpotConfig]:
    """Look up a spot by id, None if unknown."""
    return _SPOTS_BY_ID.get(spot_id)
