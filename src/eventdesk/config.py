"""Configuration management for eventdesk."""

import calendar
import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

EVENTDESK_HOME = Path(os.environ.get("EVENTDESK_HOME", Path.home() / "eventdesk"))
CONFIG_FILE = EVENTDESK_HOME / "config" / "eventdesk.conf"
DATA_DIR = EVENTDESK_HOME / "data"

STORE_BACKENDS = ("memory", "file", "http")

_WEEKDAYS = {name.lower(): i for i, name in enumerate(calendar.day_name)}


@dataclass
class Config:
    """eventdesk configuration."""

    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    store_backend: str = "memory"
    store_url: str = ""
    store_token: str = ""
    store_file: str = ""
    week_start: int = calendar.SUNDAY
    recent_bookings_limit: int = 5
    currency_symbol: str = "$"


def parse_weekday(value: str) -> int:
    """Map a weekday name ("Sunday", "mon") to a calendar module constant."""
    value = value.strip().lower()
    for name, index in _WEEKDAYS.items():
        if value and name.startswith(value):
            return index
    raise ValueError(f"Unknown weekday: {value!r}")


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from eventdesk.conf, then apply environment overrides."""
    config = Config()
    path = path or CONFIG_FILE

    if path.exists():
        for line in path.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "gemini_api_key":
                    config.gemini_api_key = value
                case "gemini_model":
                    config.gemini_model = value
                case "store_backend":
                    if value.lower() in STORE_BACKENDS:
                        config.store_backend = value.lower()
                    else:
                        logger.warning(f"Unknown STORE_BACKEND {value!r}, using {config.store_backend}")
                case "store_url":
                    config.store_url = value.rstrip("/")
                case "store_token":
                    config.store_token = value
                case "store_file":
                    config.store_file = value
                case "week_start":
                    try:
                        config.week_start = parse_weekday(value)
                    except ValueError as e:
                        logger.warning(f"Failed to parse WEEK_START: {e}")
                case "recent_bookings_limit":
                    try:
                        limit = int(value)
                        if limit < 1:
                            raise ValueError(value)
                        config.recent_bookings_limit = limit
                    except ValueError:
                        logger.warning(f"Failed to parse RECENT_BOOKINGS_LIMIT: {value!r}")
                case "currency_symbol":
                    config.currency_symbol = value

    # Environment wins over the config file for the API credential
    env_key = os.environ.get("GEMINI_API_KEY") or os.environ.get("API_KEY")
    if env_key:
        config.gemini_api_key = env_key

    return config
