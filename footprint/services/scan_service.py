"""
Scan Service - one entry point wiring every scanner to a shared config.
"""
import random
import logging
from threading import Event
from typing import Any, List, Union

from footprint.services.breach_check import BreachChecker
from footprint.services.config_helper import ScanConfig
from footprint.services.fallback import FallbackMetrics, SyntheticBreachGenerator
from footprint.services.models import (
    BreachRecord,
    ExistenceVerdict,
    PasswordAssessment,
    PhoneExposureFinding,
    ScanCategory,
)
from footprint.services.password_strength import check_password_strength
from footprint.services.phone_scan import PhoneScanner
from footprint.services.privacy_advisor import PrivacyAdvisor
from footprint.services.social_scan import SocialScanner

logger = logging.getLogger('footprint.services.scan')


class FootprintScanService:
    """
    Runs username, email, phone and password checks for one caller.

    Each call is independent; the service holds no per-scan state.
    """

    def __init__(self, config: ScanConfig = None, rng: random.Random = None):
        self.config = config or ScanConfig.from_env()
        rng = rng or random.Random()
        self.metrics = FallbackMetrics()
        self.social = SocialScanner(self.config)
        self.breaches = BreachChecker(
            self.config,
            generator=SyntheticBreachGenerator(rng, self.config.synthetic_breach_rate),
            metrics=self.metrics,
        )
        self.phone = PhoneScanner(self.config, rng)
        self.advisor = PrivacyAdvisor()
        logger.info(f"Scan service ready (APIs configured: {self.config.get_api_status()})")

    def scan_username(self, username: str, cancel_event: Event = None) -> List[ExistenceVerdict]:
        return self.social.scan(username, cancel_event=cancel_event)

    def scan_email(self, email: str) -> List[BreachRecord]:
        return self.breaches.check_email(email)

    def scan_phone(self, phone: str) -> List[PhoneExposureFinding]:
        return self.phone.scan(phone)

    def check_password(self, password: str) -> PasswordAssessment:
        return check_password_strength(password)

    def recommendations(self, scan_type: Union[ScanCategory, str], results: Any) -> List[str]:
        return self.advisor.get_recommendations(scan_type, results)
