"""
Breach Checker Service - Have I Been Pwned v3 with synthetic fallback.
"""
import time
import logging
from typing import List, Optional
from urllib.parse import quote

import requests

from footprint.services.config_helper import ScanConfig
from footprint.services.errors import RateLimitError
from footprint.services.fallback import FallbackMetrics, SyntheticBreachGenerator
from footprint.services.fallback.fallback_metrics import API, SYNTHETIC
from footprint.services.models import BreachRecord

logger = logging.getLogger(__name__)

SCAN_TYPE = 'email'


class UpstreamUnavailable(Exception):
    """Breach service answered with something other than data, 404 or 429."""


class BreachChecker:
    """
    Looks an email address up in the breach-disclosure service.

    A 404 means no breaches. A 429 is raised to the caller. Every other
    failure is answered from the SyntheticBreachGenerator so the scan still
    completes.
    """

    def __init__(self, config: ScanConfig = None,
                 generator: SyntheticBreachGenerator = None,
                 metrics: FallbackMetrics = None):
        """Initialize the breach checker."""
        self.config = config or ScanConfig()
        self.generator = generator or SyntheticBreachGenerator(
            inclusion_rate=self.config.synthetic_breach_rate
        )
        self.metrics = metrics or FallbackMetrics()

    def check_email(self, email: str) -> List[BreachRecord]:
        """
        Check if an email has been involved in data breaches.

        Args:
            email: Email address to check

        Returns:
            List of BreachRecord, possibly empty

        Raises:
            RateLimitError: If the breach service is rate limiting us
        """
        start_time = time.time()
        try:
            breaches = self._check_hibp(email)
        except UpstreamUnavailable as e:
            duration_ms = (time.time() - start_time) * 1000
            self.metrics.record(API, SCAN_TYPE, False, duration_ms, error=str(e))
            logger.warning(f"Breach service failed for domain {_domain(email)!r}, "
                           f"using synthetic data: {e}")
            breaches = self.generator.generate(email)
            self.metrics.record(SYNTHETIC, SCAN_TYPE, True)
            return breaches

        self.metrics.record(API, SCAN_TYPE, True, (time.time() - start_time) * 1000)
        return breaches

    def _headers(self):
        headers = {'User-Agent': self.config.breach_user_agent}
        if self.config.hibp_api_key:
            headers['hibp-api-key'] = self.config.hibp_api_key
        return headers

    def _check_hibp(self, email: str) -> List[BreachRecord]:
        """Query HIBP; raise UpstreamUnavailable for anything unusable."""
        try:
            response = requests.get(
                f"{self.config.hibp_api_url}/breachedaccount/{quote(email, safe='')}",
                params={'truncateResponse': 'false'},
                headers=self._headers(),
                timeout=self.config.breach_timeout,
            )
        except requests.exceptions.RequestException as e:
            raise UpstreamUnavailable(str(e)) from e

        if response.status_code == 404:
            # No breaches found
            return []
        if response.status_code == 429:
            raise RateLimitError(retry_after=_retry_after(response))
        if response.status_code != 200:
            raise UpstreamUnavailable(f'API returned {response.status_code}')

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamUnavailable(f'Malformed response: {e}') from e

        if not isinstance(data, list):
            raise UpstreamUnavailable('Malformed response: expected a list of breaches')

        return [BreachRecord.from_api(item) for item in data if isinstance(item, dict)]


def _retry_after(response: requests.Response) -> Optional[int]:
    value = response.headers.get('Retry-After')
    try:
        return int(value) if value is not None else None
    except (TypeError, ValueError):
        return None


def _domain(email: str) -> str:
    return email.rsplit('@', 1)[-1] if '@' in email else ''
