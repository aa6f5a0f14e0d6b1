"""
Result types shared by the scan services.

Everything here is built fresh for one scan request and never mutated
afterwards. Persisting or rendering the results is the caller's job, so each
type offers a ``to_dict()`` that produces plain JSON-friendly values.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


class Existence(Enum):
    """Tri-state outcome of a profile existence probe."""

    EXISTS = 'exists'
    NOT_FOUND = 'not_found'
    UNKNOWN = 'unknown'

    def as_bool(self) -> Optional[bool]:
        """Map to True/False/None for consumers that expect a nullable flag."""
        if self is Existence.EXISTS:
            return True
        if self is Existence.NOT_FOUND:
            return False
        return None


class RiskLevel(Enum):
    LOW = 'low'
    MEDIUM = 'medium'
    HIGH = 'high'


class StrengthTier(Enum):
    WEAK = 'Weak'
    FAIR = 'Fair'
    GOOD = 'Good'
    STRONG = 'Strong'


class ScanCategory(Enum):
    USERNAME = 'username'
    EMAIL = 'email'
    PHONE = 'phone'
    METADATA = 'metadata'


@dataclass(frozen=True)
class PlatformTarget:
    """One catalog entry, already rendered for a specific username."""

    name: str
    profile_url: str
    check_url: Optional[str] = None

    @property
    def has_api(self) -> bool:
        return bool(self.check_url)


@dataclass(frozen=True)
class ExistenceVerdict:
    platform: str
    url: str
    exists: Existence
    public_info: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'platform': self.platform,
            'url': self.url,
            'exists': self.exists.as_bool(),
            'public_info': self.public_info,
        }


def _unique(values: Iterable[str]) -> Tuple[str, ...]:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return tuple(seen)


@dataclass(frozen=True)
class BreachRecord:
    """
    A single breach an email address appeared in.

    Genuine and synthetic records share this shape. ``synthetic`` marks
    records produced by the fallback generator; it is left out of
    ``to_dict()`` unless explicitly requested.
    """

    name: str = ''
    title: str = ''
    domain: str = ''
    breach_date: str = ''
    added_date: str = ''
    pwn_count: int = 0
    description: str = ''
    data_classes: Tuple[str, ...] = field(default_factory=tuple)
    is_verified: bool = False
    is_fabricated: bool = False
    is_sensitive: bool = False
    is_retired: bool = False
    is_spam_list: bool = False
    synthetic: bool = False

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> 'BreachRecord':
        """
        Build a record from a Have I Been Pwned breach object.

        Args:
            data: Breach object with the service's PascalCase keys

        Returns:
            BreachRecord with every missing field set to its empty value
        """
        try:
            pwn_count = int(data.get('PwnCount') or 0)
        except (TypeError, ValueError):
            pwn_count = 0

        return cls(
            name=str(data.get('Name') or ''),
            title=str(data.get('Title') or ''),
            domain=str(data.get('Domain') or ''),
            breach_date=str(data.get('BreachDate') or ''),
            added_date=str(data.get('AddedDate') or ''),
            pwn_count=pwn_count,
            description=str(data.get('Description') or ''),
            data_classes=_unique(str(c) for c in (data.get('DataClasses') or [])),
            is_verified=bool(data.get('IsVerified', False)),
            is_fabricated=bool(data.get('IsFabricated', False)),
            is_sensitive=bool(data.get('IsSensitive', False)),
            is_retired=bool(data.get('IsRetired', False)),
            is_spam_list=bool(data.get('IsSpamList', False)),
        )

    def to_dict(self, include_provenance: bool = False) -> Dict[str, Any]:
        result = {
            'name': self.name,
            'title': self.title,
            'domain': self.domain,
            'breach_date': self.breach_date,
            'added_date': self.added_date,
            'pwn_count': self.pwn_count,
            'description': self.description,
            'data_classes': list(self.data_classes),
            'is_verified': self.is_verified,
            'is_fabricated': self.is_fabricated,
            'is_sensitive': self.is_sensitive,
            'is_retired': self.is_retired,
            'is_spam_list': self.is_spam_list,
        }
        if include_provenance:
            result['synthetic'] = self.synthetic
        return result


@dataclass(frozen=True)
class PhoneExposureFinding:
    source: str
    type: str
    details: str
    risk_level: RiskLevel

    def to_dict(self) -> Dict[str, Any]:
        return {
            'source': self.source,
            'type': self.type,
            'details': self.details,
            'risk_level': self.risk_level.value,
        }


@dataclass(frozen=True)
class PasswordAssessment:
    score: int
    strength: StrengthTier
    feedback: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'score': self.score,
            'strength': self.strength.value,
            'feedback': list(self.feedback),
        }
