# ABOUTME: Debug tracing helper gated on the DEBUG config flag
# ABOUTME: Prints categorized trace lines to stdout when debugging is enabled

from surf_almanac.config import Config


def debug_log(message: str, category: str = "DEBUG") -> None:
    """Print a trace line like "[CATEGORY] message" when Config.DEBUG is on."""
    if Config.DEBUG:
        print(f"[{category}] {message}", flush=True)
