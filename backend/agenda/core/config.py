"""
Centralized configuration module for application-wide settings.

Settings are read from environment variables (optionally loaded from a
``.env`` file) so that the same code runs unchanged in development, tests
and production.
"""

import logging
import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Only load from .env when the process is not already configured for tests
if os.getenv("TESTING", "").lower() not in ("true", "1", "yes"):
    load_dotenv()

BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent

_TRUTHY = ("true", "1", "yes")

# ===========================
# Timezone Configuration
# ===========================


def get_app_timezone() -> ZoneInfo:
    """
    Get the application timezone from environment variable.

    Returns:
        ZoneInfo: Application timezone (defaults to UTC if not configured)

    Environment Variables:
        TZ: Timezone identifier (e.g., 'Europe/Lisbon', 'UTC')
            Default: 'UTC'
    """
    tz_name = os.getenv("TZ", "UTC")

    try:
        return ZoneInfo(tz_name)
    except Exception as e:
        logger.warning(
            f"Invalid timezone '{tz_name}' specified in TZ environment variable. "
            f"Falling back to UTC. Error: {e}"
        )
        return ZoneInfo("UTC")


# Global timezone instance - initialized once at import time
APP_TZ = get_app_timezone()


def now(tz: Optional[ZoneInfo] = None) -> datetime:
    """Current time as an aware datetime in the application timezone."""
    return datetime.now(tz or APP_TZ)


# ===========================
# Application Settings
# ===========================


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower().strip() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except (TypeError, ValueError):
        logger.warning(
            f"Invalid integer for {name}, using default {default}",
            extra={"context": {"variable": name, "value": os.getenv(name)}},
        )
        return default


@dataclass(frozen=True)
class Settings:
    """Snapshot of the environment-driven settings."""

    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    log_json: bool = False
    log_to_file: bool = False
    log_dir: Path = BACKEND_ROOT / "logs"
    testing: bool = False


def get_settings() -> Settings:
    """
    Build a Settings instance from the current environment.

    Environment Variables:
        HOST, PORT: Address the development server binds to
        LOG_LEVEL: Root log level (DEBUG, INFO, ...)
        LOG_JSON: Emit JSON lines on the console instead of coloured text
        LOG_TO_FILE: Also write rotating JSON log files
        LOG_DIR: Directory for log files
        TESTING: Marks the process as a test run
    """
    return Settings(
        host=os.getenv("HOST", "127.0.0.1"),
        port=_env_int("PORT", 3000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        log_json=_env_flag("LOG_JSON"),
        log_to_file=_env_flag("LOG_TO_FILE"),
        log_dir=Path(os.getenv("LOG_DIR", str(BACKEND_ROOT / "logs"))),
        testing=_env_flag("TESTING"),
    )


def log_timezone_config():
    """
    Log the active timezone configuration.

    Should be called during application startup to provide visibility
    into the timezone being used for date/time operations.
    """
    logger.info(
        "Timezone configuration initialized",
        extra={
            "context": {
                "timezone": str(APP_TZ),
                "tz_env_var": os.getenv("TZ", "UTC"),
            }
        },
    )
