"""
Exceptions raised to callers of the scan services.

Per-probe and upstream failures are converted into result data and never
show up here; only conditions the caller has to act on are raised.
"""
from typing import Optional


class FootprintScanError(Exception):
    """Base class for scan service errors."""


class RateLimitError(FootprintScanError):
    """Breach service answered 429. Retry timing is up to the caller."""

    def __init__(self, message: str = 'Rate limit exceeded. Please try again later.',
                 retry_after: Optional[int] = None):
        super().__init__(message)
        self.retry_after = retry_after


class ScanCancelledError(FootprintScanError):
    """A username scan was aborted by its caller before completing."""
