"""
Phone number scanning module.
"""
import re
import random
import logging
from typing import List

from footprint.services.config_helper import ScanConfig
from footprint.services.models import PhoneExposureFinding, RiskLevel

logger = logging.getLogger('footprint.services.phone')

# (name, type, risk level)
EXPOSURE_SOURCES = (
    ('Public Directories', 'directory', RiskLevel.LOW),
    ('Marketing Lists', 'marketing', RiskLevel.MEDIUM),
    ('Social Media', 'social', RiskLevel.MEDIUM),
    ('Data Breaches', 'breach', RiskLevel.HIGH),
)


def normalize_phone(phone: str) -> str:
    """Strip everything but digits, keeping a leading '+'."""
    phone = phone.strip()
    digits = re.sub(r'[^0-9]', '', phone)
    return f'+{digits}' if phone.startswith('+') else digits


class PhoneScanner:
    """
    Estimates where a phone number is exposed.

    Each exposure source is an independent draw from ``rng``; there is no
    real lookup behind it yet.
    """

    def __init__(self, config: ScanConfig = None, rng: random.Random = None):
        """Initialize phone scanner."""
        self.config = config or ScanConfig()
        self.rng = rng or random.Random()

    def scan(self, phone: str) -> List[PhoneExposureFinding]:
        """
        Scan for phone number exposure.

        Args:
            phone: Phone number as entered by the user

        Returns:
            Findings in source catalog order; may be empty
        """
        normalized = normalize_phone(phone)
        logger.debug(f"Checking {len(EXPOSURE_SOURCES)} exposure sources "
                     f"for number ending {normalized[-4:]!r}")

        exposures = []
        for name, source_type, risk_level in EXPOSURE_SOURCES:
            if self.rng.random() < self.config.phone_inclusion_rate:
                exposures.append(PhoneExposureFinding(
                    source=name,
                    type=source_type,
                    details=f'Phone number found in {name.lower()}',
                    risk_level=risk_level,
                ))

        return exposures
