"""
Tests for the scan service facade.
"""

import os
import sys
import unittest
from unittest import mock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from footprint.services.config_helper import ScanConfig
from footprint.services.models import Existence, StrengthTier
from footprint.services.scan_service import FootprintScanService
from helpers import fixed_rng, make_response


class TestFootprintScanService(unittest.TestCase):

    def setUp(self):
        self.service = FootprintScanService(ScanConfig(), rng=fixed_rng(0.0))

    def test_phone_and_recommendations(self):
        findings = self.service.scan_phone('+1 555 123 4567')

        self.assertEqual(len(findings), 4)
        self.assertEqual(len(self.service.recommendations('phone', findings)), 3)

    def test_password(self):
        self.assertIs(self.service.check_password('password').strength, StrengthTier.WEAK)

    @mock.patch('footprint.services.breach_check.requests.get')
    def test_email_fallback_shares_metrics(self, mock_get):
        mock_get.return_value = make_response(502)

        breaches = self.service.scan_email('someone@yahoo.com')

        self.assertEqual([b.name for b in breaches], ['Yahoo', 'LinkedIn'])
        self.assertTrue(all(b.synthetic for b in breaches))
        self.assertEqual(self.service.metrics.get_stats()['synthetic_calls'], 1)

    @mock.patch('footprint.services.social_scan.requests.get')
    def test_username(self, mock_get):
        mock_get.return_value = make_response(404)

        verdicts = self.service.scan_username('nobody-here')

        self.assertEqual(len(verdicts), 6)
        self.assertTrue(all(v.exists is Existence.NOT_FOUND for v in verdicts))


if __name__ == '__main__':
    unittest.main()
