# Scan services: platform probes, breach lookup, phone exposure,
# password strength and privacy advice

from .breach_check import BreachChecker
from .config_helper import ScanConfig
from .errors import FootprintScanError, RateLimitError, ScanCancelledError
from .password_strength import check_password_strength
from .phone_scan import PhoneScanner
from .privacy_advisor import PrivacyAdvisor, generate_recommendations
from .scan_service import FootprintScanService
from .social_scan import ExistenceProber, SocialScanner

__all__ = [
    'BreachChecker',
    'ExistenceProber',
    'FootprintScanError',
    'FootprintScanService',
    'PhoneScanner',
    'PrivacyAdvisor',
    'RateLimitError',
    'ScanCancelledError',
    'ScanConfig',
    'SocialScanner',
    'check_password_strength',
    'generate_recommendations',
]
