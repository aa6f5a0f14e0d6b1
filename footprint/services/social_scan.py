"""
Social media scanning module.
Checks a fixed catalog of platforms for a username, one probe per platform.
"""
import json
import time
import logging
import concurrent.futures
from threading import Event
from typing import Callable, Dict, List, Optional
from urllib.parse import quote

import requests

from footprint.services.config_helper import ScanConfig
from footprint.services.errors import ScanCancelledError
from footprint.services.models import Existence, ExistenceVerdict, PlatformTarget

logger = logging.getLogger('footprint.services.social')

PROFILE_EXISTS = 'Profile exists'
PROFILE_NOT_FOUND = 'Profile not found'
PROFILE_ASSUMED = 'Profile likely exists (check inconclusive)'
MANUAL_CHECK = 'Manual verification required'
CHECK_FAILED = 'Check failed'

# (name, profile url template, existence-check url template)
PLATFORM_CATALOG = (
    ('GitHub', 'https://github.com/{username}', 'https://api.github.com/users/{username}'),
    ('Twitter/X', 'https://twitter.com/{username}', None),
    ('Instagram', 'https://instagram.com/{username}', None),
    ('Reddit', 'https://reddit.com/user/{username}',
     'https://www.reddit.com/user/{username}/about.json'),
    ('YouTube', 'https://youtube.com/@{username}', None),
    ('Pinterest', 'https://pinterest.com/{username}', None),
)


def build_platform_catalog(username: str) -> List[PlatformTarget]:
    """Render the platform catalog for one username, in catalog order."""
    handle = quote(username, safe='')
    return [
        PlatformTarget(
            name=name,
            profile_url=profile.format(username=handle),
            check_url=check.format(username=handle) if check else None,
        )
        for name, profile, check in PLATFORM_CATALOG
    ]


def _github_info(data: Dict) -> Optional[str]:
    return data.get('bio') or data.get('name')


def _reddit_info(data: Dict) -> Optional[str]:
    about = data.get('data')
    if isinstance(about, dict):
        return f"{about.get('link_karma', 0)} karma"
    return None


PUBLIC_INFO_EXTRACTORS: Dict[str, Callable[[Dict], Optional[str]]] = {
    'GitHub': _github_info,
    'Reddit': _reddit_info,
}


class ExistenceProber:
    """Probes a single platform for a username. Never raises."""

    def __init__(self, config: ScanConfig = None):
        self.config = config or ScanConfig()

    @property
    def headers(self) -> Dict[str, str]:
        # Several platforms block default client signatures
        return {'User-Agent': self.config.probe_user_agent}

    def probe(self, target: PlatformTarget, username: str = '') -> ExistenceVerdict:
        """
        Check whether the username's profile exists on one platform.

        Args:
            target: Catalog entry rendered for the username
            username: Username being checked (used for logging only)

        Returns:
            ExistenceVerdict for the platform
        """
        if target.has_api:
            exists, info = self._check_api(target)
        else:
            exists, info = self._check_profile_url(target)

        logger.debug(f"{target.name} probe for {username!r}: {exists.value}")
        return ExistenceVerdict(
            platform=target.name,
            url=target.profile_url,
            exists=exists,
            public_info=info,
        )

    def _get(self, url: str) -> requests.Response:
        # Headers only; the body is read explicitly, if at all
        return requests.get(
            url,
            headers=self.headers,
            timeout=self.config.probe_timeout,
            stream=True,
        )

    def _check_api(self, target: PlatformTarget):
        """Check using the platform's existence endpoint."""
        started = time.monotonic()
        response = None
        try:
            response = self._get(target.check_url)
            response.raise_for_status()
            if response.status_code != 200:
                return Existence.UNKNOWN, MANUAL_CHECK
            body = self._read_body(response, started)
        except requests.exceptions.RequestException as e:
            status = getattr(e.response, 'status_code', None)
            if status == 404:
                return Existence.NOT_FOUND, PROFILE_NOT_FOUND
            # Only a 404 is a confident negative without a dedicated API
            logger.debug(f"{target.name} API check inconclusive: {e}")
            return Existence.EXISTS, PROFILE_ASSUMED
        finally:
            if response is not None:
                response.close()

        return Existence.EXISTS, self._public_info(target, body)

    def _read_body(self, response: requests.Response, started: float) -> bytes:
        """
        Read the response body within the probe timeout.

        The client timeout applies to each socket read, so a body that
        trickles in is cut off here once the whole request overruns.
        """
        chunks = []
        for chunk in response.iter_content(chunk_size=1):
            chunks.append(chunk)
            if time.monotonic() - started > self.config.probe_timeout:
                raise requests.exceptions.Timeout(
                    f"Body not received within {self.config.probe_timeout}s"
                )
        return b''.join(chunks)

    def _public_info(self, target: PlatformTarget, body: bytes) -> str:
        extractor = PUBLIC_INFO_EXTRACTORS.get(target.name)
        if extractor is None:
            return PROFILE_EXISTS
        try:
            data = json.loads(body)
        except ValueError:
            return PROFILE_EXISTS
        if not isinstance(data, dict):
            return PROFILE_EXISTS
        return extractor(data) or PROFILE_EXISTS

    def _check_profile_url(self, target: PlatformTarget):
        """Check by requesting the public profile page (200 / 404 only)."""
        try:
            response = self._get(target.profile_url)
        except requests.exceptions.RequestException as e:
            logger.debug(f"{target.name} profile check failed: {e}")
            return Existence.UNKNOWN, CHECK_FAILED

        # The status alone decides; the page body is never read
        status = response.status_code
        response.close()

        if status == 200:
            return Existence.EXISTS, PROFILE_EXISTS
        if status == 404:
            return Existence.NOT_FOUND, PROFILE_NOT_FOUND
        return Existence.UNKNOWN, MANUAL_CHECK


class SocialScanner:
    """Scans the platform catalog for a username concurrently."""

    # How often a running scan looks at its cancel event (seconds)
    CANCEL_POLL_INTERVAL = 0.1
    # Slack on top of probe_timeout before unfinished probes are given up
    DEADLINE_MARGIN = 1.0

    def __init__(self, config: ScanConfig = None, prober: ExistenceProber = None):
        """Initialize social scanner."""
        self.config = config or ScanConfig()
        self.prober = prober or ExistenceProber(self.config)

    def scan(self, username: str, cancel_event: Event = None) -> List[ExistenceVerdict]:
        """
        Probe every catalog platform for the username.

        Probes run on a thread pool; results are merged back by catalog
        position, so the output order never depends on completion order.
        A probe still running probe_timeout + DEADLINE_MARGIN seconds after
        the scan started is abandoned and reported as a failed check.

        Args:
            username: Username to check (already validated by the caller)
            cancel_event: Set by the caller to abort the scan

        Returns:
            One ExistenceVerdict per catalog entry, in catalog order

        Raises:
            ScanCancelledError: If cancel_event was set before the scan finished
        """
        if not username:
            return []

        targets = build_platform_catalog(username)
        results: List[Optional[ExistenceVerdict]] = [None] * len(targets)
        cancel_event = cancel_event or Event()

        executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=max(1, min(len(targets), self.config.max_workers))
        )
        deadline = time.monotonic() + self.config.probe_timeout + self.DEADLINE_MARGIN
        try:
            future_to_index = {
                executor.submit(self._probe_one, target, username, cancel_event): index
                for index, target in enumerate(targets)
            }
            pending = set(future_to_index)

            while pending:
                if cancel_event.is_set():
                    raise ScanCancelledError(f"Username scan for {username!r} was cancelled")
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                done, pending = concurrent.futures.wait(
                    pending,
                    timeout=min(self.CANCEL_POLL_INTERVAL, remaining),
                    return_when=concurrent.futures.FIRST_COMPLETED,
                )
                for future in done:
                    index = future_to_index[future]
                    results[index] = self._collect(future, targets[index])

            if cancel_event.is_set():
                raise ScanCancelledError(f"Username scan for {username!r} was cancelled")

            for future in pending:
                future.cancel()
                target = targets[future_to_index[future]]
                logger.warning(f"{target.name} check for {username!r} did not finish in time")
                results[future_to_index[future]] = self._unchecked(target)
        finally:
            # Overrunning probes are abandoned to finish in the background
            executor.shutdown(wait=False, cancel_futures=True)

        return results

    def _probe_one(self, target: PlatformTarget, username: str,
                   cancel_event: Event) -> Optional[ExistenceVerdict]:
        if cancel_event.is_set():
            return None
        return self.prober.probe(target, username)

    def _collect(self, future: concurrent.futures.Future,
                 target: PlatformTarget) -> ExistenceVerdict:
        try:
            verdict = future.result()
        except Exception as e:
            logger.error(f"Error checking {target.name}: {e}")
            verdict = None

        if verdict is None:
            return self._unchecked(target)
        return verdict

    @staticmethod
    def _unchecked(target: PlatformTarget) -> ExistenceVerdict:
        return ExistenceVerdict(
            platform=target.name,
            url=target.profile_url,
            exists=Existence.UNKNOWN,
            public_info=CHECK_FAILED,
        )
