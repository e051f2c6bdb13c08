# ABOUTME: Application configuration including region, timezone and data source settings
# ABOUTME: Centralized config so the scoring engine never reads the environment itself

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration"""

    # Region: Northern California coast (SF Bay Area, Marin, Sonoma)
    REGION_NAME = os.getenv("REGION_NAME", "Bay Area")
    TIMEZONE = os.getenv("TIMEZONE", "America/Los_Angeles")

    # Surfer profile used when none is supplied
    DEFAULT_SURFER_TYPE = os.getenv("DEFAULT_SURFER_TYPE", "mediumboard")
    DEFAULT_SKILL_LEVEL = os.getenv("DEFAULT_SKILL_LEVEL", "advanced")

    # Extra minutes for parking and suiting up before first light
    DAWN_PATROL_BUFFER_MINUTES = int(os.getenv("DAWN_PATROL_BUFFER_MINUTES", "10"))

    # Data sources
    NDBC_BASE_URL = os.getenv("NDBC_BASE_URL", "https://www.ndbc.noaa.gov/data/realtime2")
    COOPS_BASE_URL = os.getenv(
        "COOPS_BASE_URL", "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"
    )
    COOPS_APPLICATION = os.getenv("COOPS_APPLICATION", "BayAreaSurfAlmanac")
    REQUEST_TIMEOUT_SECONDS = int(os.getenv("REQUEST_TIMEOUT_SECONDS", "10"))

    # Debug mode
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
