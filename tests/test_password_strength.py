"""
Tests for password strength scoring.
"""

import os
import sys
import random
import string
import unittest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from footprint.services.models import StrengthTier
from footprint.services.password_strength import check_password_strength, strength_tier

ALL_MISSING = [
    'Password should be at least 8 characters',
    'Add lowercase letters',
    'Add uppercase letters',
    'Add numbers',
    'Add special characters (!@#$%^&*)',
]


class TestPasswordStrength(unittest.TestCase):

    def test_common_word_is_weak(self):
        """'password' loses the common-pattern penalty."""
        result = check_password_strength('password')

        self.assertEqual(result.score, 15)
        self.assertIs(result.strength, StrengthTier.WEAK)
        self.assertIn('Avoid common patterns', result.feedback)

    def test_mixed_password_is_good_or_better(self):
        result = check_password_strength('Tr0ub4dor&3')

        self.assertEqual(result.score, 80)
        self.assertIs(result.strength, StrengthTier.STRONG)
        self.assertEqual(result.feedback, ())

    def test_repeating_characters_penalised(self):
        result = check_password_strength('aaaaaaaa')

        self.assertEqual(result.score, 25)
        self.assertEqual(result.feedback[-1], 'Avoid repeating characters')

    def test_empty_password(self):
        result = check_password_strength('')

        self.assertEqual(result.score, 0)
        self.assertIs(result.strength, StrengthTier.WEAK)
        self.assertEqual(list(result.feedback), ALL_MISSING)

    def test_common_prefix_is_case_insensitive(self):
        result = check_password_strength('Abcdefgh1!')

        self.assertEqual(result.score, 60)
        self.assertIs(result.strength, StrengthTier.GOOD)
        self.assertEqual(result.feedback, ('Avoid common patterns',))

    def test_length_bonuses(self):
        self.assertEqual(check_password_strength('Xk9#mP2$vL7&').score, 90)
        self.assertEqual(check_password_strength('Xk9#mP2$vL7&qR4!').score, 100)

    def test_feedback_follows_rule_order(self):
        result = check_password_strength('abc')

        self.assertEqual(list(result.feedback), [
            'Password should be at least 8 characters',
            'Add uppercase letters',
            'Add numbers',
            'Add special characters (!@#$%^&*)',
            'Avoid common patterns',
        ])
        self.assertEqual(result.score, 0)

    def test_both_penalties(self):
        result = check_password_strength('1234444')

        self.assertEqual(result.score, 0)
        self.assertEqual(result.feedback[-2:], ('Avoid common patterns', 'Avoid repeating characters'))

    def test_unicode_digits_do_not_count(self):
        self.assertIn('Add numbers', check_password_strength('Abcdefg٣!').feedback)

    def test_line_breaks_do_not_count_as_repeats(self):
        """A run of line breaks is not a repeated character."""
        result = check_password_strength('ab\n\n\ncdEF1!')

        self.assertEqual(result.score, 80)
        self.assertNotIn('Avoid repeating characters', result.feedback)

    def test_tier_thresholds(self):
        self.assertIs(strength_tier(100), StrengthTier.STRONG)
        self.assertIs(strength_tier(80), StrengthTier.STRONG)
        self.assertIs(strength_tier(79), StrengthTier.GOOD)
        self.assertIs(strength_tier(60), StrengthTier.GOOD)
        self.assertIs(strength_tier(59), StrengthTier.FAIR)
        self.assertIs(strength_tier(40), StrengthTier.FAIR)
        self.assertIs(strength_tier(39), StrengthTier.WEAK)
        self.assertIs(strength_tier(0), StrengthTier.WEAK)

    def test_score_always_bounded(self):
        """Fuzzed input should always land in [0, 100] with a matching tier."""
        rng = random.Random(1234)
        alphabet = string.printable + 'äöü€😀٣'
        for _ in range(500):
            password = ''.join(rng.choice(alphabet) for _ in range(rng.randint(0, 40)))
            result = check_password_strength(password)
            self.assertGreaterEqual(result.score, 0)
            self.assertLessEqual(result.score, 100)
            self.assertIs(result.strength, strength_tier(result.score))

    def test_same_input_same_output(self):
        self.assertEqual(check_password_strength('S3cure!pass'), check_password_strength('S3cure!pass'))

    def test_to_dict(self):
        self.assertEqual(check_password_strength('Tr0ub4dor&3').to_dict(),
                         {'score': 80, 'strength': 'Strong', 'feedback': []})


if __name__ == '__main__':
    unittest.main()
