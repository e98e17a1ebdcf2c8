"""
Runtime settings.

Nothing here runs at import time; call get_settings() where the
environment should be read.
"""
import os
from typing import Optional

from dotenv import load_dotenv

from superover.constants import DEFAULT_BOWLER, DEFAULT_TEAM
from superover.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _log_level(name: str, default: str) -> str:
    level = os.getenv(name, default).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}",
            {"value": level, "valid": list(LOG_LEVELS)},
        )
    return level


class Settings:
    """Settings from environment variables"""

    def __init__(self):
        self.STRATEGY: str = os.getenv("SUPER_OVER_STRATEGY", "rule-based")
        self.BOWLING_MODE: str = os.getenv("SUPER_OVER_BOWLING_MODE", "fixed")
        self.TARGET_MODE: str = os.getenv("SUPER_OVER_TARGET_MODE", "fixed")
        self.SEED: Optional[int] = _optional_int("SUPER_OVER_SEED")
        self.LOG_LEVEL: str = _log_level("SUPER_OVER_LOG_LEVEL", "WARNING")

        # Console output
        self.TEAM: str = os.getenv("SUPER_OVER_TEAM", DEFAULT_TEAM)
        self.BOWLER: str = os.getenv("SUPER_OVER_BOWLER", DEFAULT_BOWLER)


def get_settings() -> Settings:
    """Read a local .env file (if any) and the environment"""
    load_dotenv()
    return Settings()
