"""
Rule-based password strength scoring.

Pure and cheap enough to run on every keystroke. The password is never
logged or stored.
"""
import re

from footprint.services.models import PasswordAssessment, StrengthTier

COMMON_PREFIX = re.compile(r'^(123|abc|qwerty|password)', re.IGNORECASE)
REPEATED_CHAR = re.compile(r'(.)\1{2,}')

# (minimum score, tier), highest first
STRENGTH_TIERS = (
    (80, StrengthTier.STRONG),
    (60, StrengthTier.GOOD),
    (40, StrengthTier.FAIR),
)

# (pattern, points, feedback when missing)
CHARACTER_CLASSES = (
    (re.compile(r'[a-z]'), 15, 'Add lowercase letters'),
    (re.compile(r'[A-Z]'), 15, 'Add uppercase letters'),
    (re.compile(r'[0-9]'), 15, 'Add numbers'),
    (re.compile(r'[^a-zA-Z0-9]'), 15, 'Add special characters (!@#$%^&*)'),
)


def strength_tier(score: int) -> StrengthTier:
    for minimum, tier in STRENGTH_TIERS:
        if score >= minimum:
            return tier
    return StrengthTier.WEAK


def check_password_strength(password: str) -> PasswordAssessment:
    """
    Score a password from 0 to 100.

    Args:
        password: Password to assess

    Returns:
        PasswordAssessment with score, tier and feedback in rule order
    """
    score = 0
    feedback = []

    # Length
    if len(password) >= 8:
        score += 20
    else:
        feedback.append('Password should be at least 8 characters')
    if len(password) >= 12:
        score += 10
    if len(password) >= 16:
        score += 10

    # Character variety
    for pattern, points, advice in CHARACTER_CLASSES:
        if pattern.search(password):
            score += points
        else:
            feedback.append(advice)

    # Penalties
    if COMMON_PREFIX.match(password):
        score -= 20
        feedback.append('Avoid common patterns')
    if REPEATED_CHAR.search(password):
        score -= 10
        feedback.append('Avoid repeating characters')

    score = max(0, min(100, score))
    return PasswordAssessment(score=score, strength=strength_tier(score), feedback=tuple(feedback))
