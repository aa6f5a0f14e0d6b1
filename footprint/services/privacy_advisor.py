"""
Privacy Advisor module for turning scan results into actionable advice.
"""
from typing import Any, Iterable, List, Mapping, Optional, Union

from footprint.services.models import Existence, ScanCategory

VISIBILITY_THRESHOLD = 5

HIGH_VISIBILITY = ('Your username is highly visible across multiple platforms. '
                   'Consider using different usernames for different purposes.')
REVIEW_PRIVACY = 'Review privacy settings on all platforms where your username appears.'
ENABLE_2FA_ALL = 'Enable two-factor authentication on all accounts.'

CHANGE_PASSWORDS = 'Change passwords immediately on all affected services.'
ENABLE_2FA = 'Enable two-factor authentication where available.'
MONITOR_ACCOUNTS = 'Monitor your accounts for suspicious activity.'
SENSITIVE_EXPOSED = ('⚠️ Sensitive data was exposed. '
                     'Consider freezing credit and monitoring identity theft.')
NO_BREACHES = '✓ Good news! No breaches found for this email.'
UNIQUE_PASSWORDS = 'Continue using strong, unique passwords for each service.'

SECONDARY_NUMBER = ('Your phone number appears in multiple sources. '
                    'Consider using a secondary number for online services.')
SPAM_FILTERING = 'Enable spam call filtering on your device.'
SMS_PHISHING = 'Be cautious of phishing attempts via SMS.'

LOCATION_FOUND = '⚠️ Location data found in file. Remove GPS data before sharing photos online.'
DEVICE_INFO_FOUND = ('Device information is embedded in your files. '
                     'Use metadata removal tools before sharing.')
STRIP_METADATA = 'Always strip metadata from files before uploading to public platforms.'


def _field(item: Any, name: str, default: Any = None) -> Any:
    """Read a field from a result object or from its dict form."""
    if isinstance(item, Mapping):
        return item.get(name, default)
    return getattr(item, name, default)


def _exists(verdict: Any) -> bool:
    exists = _field(verdict, 'exists')
    return exists is Existence.EXISTS or exists is True


class PrivacyAdvisor:
    """Provides rule-based privacy recommendations for one scan category."""

    def get_recommendations(self, scan_type: Union[ScanCategory, str], results: Any) -> List[str]:
        """
        Generate recommendations for a scan's results.

        Args:
            scan_type: Scan category (enum or its string value)
            results: That category's result payload: verdicts for username,
                breach records for email, findings for phone, a mapping for
                metadata

        Returns:
            Ordered list of recommendation strings; empty for unknown categories
        """
        category = self._category(scan_type)
        if category is ScanCategory.USERNAME:
            return self._username(results or [])
        if category is ScanCategory.EMAIL:
            return self._email(results or [])
        if category is ScanCategory.PHONE:
            return self._phone(results or [])
        if category is ScanCategory.METADATA:
            return self._metadata(results or {})
        return []

    @staticmethod
    def _category(scan_type) -> Optional[ScanCategory]:
        if isinstance(scan_type, ScanCategory):
            return scan_type
        try:
            return ScanCategory(scan_type)
        except ValueError:
            return None

    def _username(self, verdicts: Iterable) -> List[str]:
        recommendations = []
        found = sum(1 for v in verdicts if _exists(v))
        if found > VISIBILITY_THRESHOLD:
            recommendations.append(HIGH_VISIBILITY)
        recommendations.append(REVIEW_PRIVACY)
        recommendations.append(ENABLE_2FA_ALL)
        return recommendations

    def _email(self, breaches: Iterable) -> List[str]:
        breaches = list(breaches)
        if not breaches:
            return [NO_BREACHES, UNIQUE_PASSWORDS]

        recommendations = [CHANGE_PASSWORDS, ENABLE_2FA, MONITOR_ACCOUNTS]
        if any(_field(b, 'is_sensitive', False) for b in breaches):
            recommendations.append(SENSITIVE_EXPOSED)
        return recommendations

    def _phone(self, findings: Iterable) -> List[str]:
        # TODO: advise on keeping the number private when nothing was found
        if not list(findings):
            return []
        return [SECONDARY_NUMBER, SPAM_FILTERING, SMS_PHISHING]

    def _metadata(self, metadata: Any) -> List[str]:
        recommendations = []
        if _field(metadata, 'location'):
            recommendations.append(LOCATION_FOUND)
        if _field(metadata, 'device_info') or _field(metadata, 'deviceInfo'):
            recommendations.append(DEVICE_INFO_FOUND)
        recommendations.append(STRIP_METADATA)
        return recommendations


def generate_recommendations(scan_type: Union[ScanCategory, str], results: Any) -> List[str]:
    """Convenience function for one-off recommendations."""
    return PrivacyAdvisor().get_recommendations(scan_type, results)
