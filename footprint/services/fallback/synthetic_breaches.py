"""
Heuristic breach data used when the breach service cannot be reached.

Domain matches are deterministic; the extra LinkedIn record is drawn from
the injected random source so tests can pin it down.
"""
import random
import logging
from typing import List

from footprint.services.models import BreachRecord

logger = logging.getLogger('footprint.fallback.synthetic')

YAHOO_BREACH = BreachRecord(
    name='Yahoo',
    title='Yahoo',
    domain='yahoo.com',
    breach_date='2013-08-01',
    added_date='2016-12-14',
    pwn_count=3000000000,
    description='In August 2013, Yahoo suffered a massive data breach.',
    data_classes=('Email addresses', 'Passwords', 'Security questions'),
    is_verified=True,
    synthetic=True,
)

ADOBE_BREACH = BreachRecord(
    name='Adobe',
    title='Adobe',
    domain='adobe.com',
    breach_date='2013-10-04',
    added_date='2013-12-04',
    pwn_count=152445165,
    description='In October 2013, 153 million Adobe accounts were breached.',
    data_classes=('Email addresses', 'Password hints', 'Passwords', 'Usernames'),
    is_verified=True,
    synthetic=True,
)

DROPBOX_BREACH = BreachRecord(
    name='Dropbox',
    title='Dropbox',
    domain='dropbox.com',
    breach_date='2012-07-01',
    added_date='2016-08-31',
    pwn_count=68648009,
    description='In mid-2012, Dropbox suffered a data breach which exposed the stored credentials of tens of millions of their customers.',
    data_classes=('Email addresses', 'Passwords'),
    is_verified=True,
    synthetic=True,
)

LINKEDIN_BREACH = BreachRecord(
    name='LinkedIn',
    title='LinkedIn',
    domain='linkedin.com',
    breach_date='2012-05-05',
    added_date='2016-05-21',
    pwn_count=164611595,
    description='In May 2012, LinkedIn was breached and personal data of millions was leaked.',
    data_classes=('Email addresses', 'Passwords'),
    is_verified=True,
    synthetic=True,
)

# Mail-provider keyword -> breach tied to that provider
KNOWN_DOMAIN_BREACHES = (
    ('yahoo', YAHOO_BREACH),
    ('adobe', ADOBE_BREACH),
    ('dropbox', DROPBOX_BREACH),
)


class SyntheticBreachGenerator:
    """Produces plausible breach records for an email address."""

    def __init__(self, rng: random.Random = None, inclusion_rate: float = 0.5):
        self.rng = rng or random.Random()
        self.inclusion_rate = inclusion_rate

    def generate(self, email: str) -> List[BreachRecord]:
        """
        Build breach records for an email without contacting any service.

        Args:
            email: Email address being checked

        Returns:
            List of records flagged ``synthetic``; may be empty
        """
        domain = email.rsplit('@', 1)[-1].lower() if '@' in email else ''
        breaches = [
            record for keyword, record in KNOWN_DOMAIN_BREACHES
            if domain and keyword in domain
        ]

        # Random chance of other breaches
        if self.rng.random() < self.inclusion_rate:
            if all(b.name != LINKEDIN_BREACH.name for b in breaches):
                breaches.append(LINKEDIN_BREACH)

        logger.debug(f"Generated {len(breaches)} synthetic breach(es) for domain {domain!r}")
        return breaches
