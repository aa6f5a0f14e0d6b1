"""
Configuration for the scan services.
Reads values from Django settings when a project has configured them,
otherwise from the environment (a .env file is loaded on import).

Components never read configuration themselves: build a ScanConfig once
and hand it to each service.
"""
import os
import logging
from dataclasses import dataclass
from typing import Dict, Optional

from django.conf import settings
from dotenv import load_dotenv

# Load .env file
load_dotenv()

logger = logging.getLogger('footprint.services.config')

BROWSER_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'
DEFAULT_HIBP_API_URL = 'https://haveibeenpwned.com/api/v3'


def _get(key: str) -> Optional[str]:
    """Get config value from Django settings or environment."""
    if settings.configured:
        value = getattr(settings, key, None)
        if value not in (None, ''):
            return str(value)
    return os.getenv(key)


def _get_stripped(key: str) -> Optional[str]:
    value = _get(key)
    if value and value.strip():
        return value.strip()
    return None


def _get_number(key: str, default, cast=float):
    value = _get_stripped(key)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        logger.warning(f"Ignoring malformed {key}={value!r}, using {default}")
        return default


def has_key(key: str) -> bool:
    """Check if an API key is configured and non-blank."""
    return _get_stripped(key) is not None


@dataclass(frozen=True)
class ScanConfig:
    """Timeouts, credentials and sampling rates shared by the scan services."""

    probe_timeout: float = 5.0
    breach_timeout: float = 10.0
    max_workers: int = 6
    probe_user_agent: str = BROWSER_USER_AGENT
    breach_user_agent: str = 'Digital-Footprint-Scanner'
    hibp_api_url: str = DEFAULT_HIBP_API_URL
    hibp_api_key: Optional[str] = None
    phone_inclusion_rate: float = 0.4
    synthetic_breach_rate: float = 0.5

    @classmethod
    def from_env(cls) -> 'ScanConfig':
        """Build a config from Django settings / environment variables."""
        return cls(
            probe_timeout=_get_number('FOOTPRINT_PROBE_TIMEOUT', cls.probe_timeout),
            breach_timeout=_get_number('FOOTPRINT_BREACH_TIMEOUT', cls.breach_timeout),
            max_workers=max(1, _get_number('FOOTPRINT_MAX_WORKERS', cls.max_workers, int)),
            hibp_api_url=(_get_stripped('HIBP_API_URL') or DEFAULT_HIBP_API_URL).rstrip('/'),
            hibp_api_key=_get_stripped('HIBP_API_KEY'),
            phone_inclusion_rate=_get_number('FOOTPRINT_PHONE_INCLUSION_RATE',
                                             cls.phone_inclusion_rate),
            synthetic_breach_rate=_get_number('FOOTPRINT_SYNTHETIC_BREACH_RATE',
                                              cls.synthetic_breach_rate),
        )

    def get_api_status(self) -> Dict[str, bool]:
        """Get status of configured upstream credentials."""
        return {
            'hibp': bool(self.hibp_api_key),
        }
