"""
Configuration management for the flight lookup service.

Loads settings from environment variables with sensible defaults.
All configuration is centralized here; components receive the values
they need at construction instead of reading the environment themselves.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = 'https://api.aviationstack.com/v1'


def _parse_int(value: Optional[str], default: int) -> int:
    """Parse an integer setting, falling back to default if empty/invalid."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class AviationStackConfig:
    """AviationStack API configuration."""
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 10
    cache_seconds: int = 300  # Freshness hint sent upstream, not a local cache

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    aviationstack: AviationStackConfig

    # Flask settings
    secret_key: str
    debug: bool


def load_config() -> AppConfig:
    """Load all configuration from the current environment."""
    return AppConfig(
        aviationstack=AviationStackConfig(
            api_key=os.getenv('AVIATIONSTACK_API_KEY') or None,
            base_url=(os.getenv('AVIATIONSTACK_BASE_URL') or DEFAULT_BASE_URL).rstrip('/'),
            timeout=_parse_int(os.getenv('AVIATIONSTACK_TIMEOUT'), 10),
            cache_seconds=_parse_int(os.getenv('AVIATIONSTACK_CACHE_SECONDS'), 300),
        ),
        secret_key=os.getenv('SECRET_KEY', 'dev-key-change-in-prod'),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
