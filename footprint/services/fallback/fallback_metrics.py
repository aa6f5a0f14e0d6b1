"""
Fallback Metrics - Track breach lookups answered by the service vs synthesized.
Lets auditors tell how much of the breach data shown was genuine.
"""

import logging
from datetime import datetime
from typing import Dict, List
from threading import Lock
from collections import defaultdict

logger = logging.getLogger('footprint.fallback.metrics')

API = 'api'
SYNTHETIC = 'synthetic'


class FallbackMetrics:
    """Thread-safe record of upstream calls and synthetic fallbacks."""

    MAX_RECORDS = 10000

    def __init__(self):
        self._lock = Lock()
        self._records: List[Dict] = []
        self._start_time = datetime.now()

    def record(self, method: str, scan_type: str, success: bool,
               duration_ms: float = 0, error: str = None):
        """
        Record a lookup.

        Args:
            method: 'api' or 'synthetic'
            scan_type: Type of scan performed
            success: Whether the upstream answered usably
            duration_ms: Time taken in milliseconds
            error: Failure reason, if any
        """
        record = {
            'timestamp': datetime.now().isoformat(),
            'method': method,
            'scan_type': scan_type,
            'success': success,
            'duration_ms': duration_ms,
            'error': error,
        }

        with self._lock:
            self._records.append(record)
            # Keep only the most recent half once the cap is hit
            if len(self._records) > self.MAX_RECORDS:
                self._records = self._records[-(self.MAX_RECORDS // 2):]

        logger.debug(f"Recorded: {method} {scan_type} success={success} {duration_ms:.1f}ms")

    def get_stats(self) -> Dict:
        """
        Get aggregated statistics.

        Returns:
            {
                'api_calls': int,
                'synthetic_calls': int,
                'api_failures': int,
                'fallback_percentage': float,
                'avg_api_time_ms': float,
                'by_scan_type': {...},
            }
        """
        with self._lock:
            records = list(self._records)

        api_calls = sum(1 for r in records if r['method'] == API)
        synthetic_calls = sum(1 for r in records if r['method'] == SYNTHETIC)
        api_failures = sum(1 for r in records if r['method'] == API and not r['success'])

        total_lookups = api_calls - api_failures + synthetic_calls
        fallback_pct = (synthetic_calls / total_lookups * 100) if total_lookups > 0 else 0

        api_times = [r['duration_ms'] for r in records if r['method'] == API and r['duration_ms'] > 0]
        avg_api_time = sum(api_times) / len(api_times) if api_times else 0

        by_scan_type = defaultdict(lambda: {API: 0, SYNTHETIC: 0, 'failures': 0})
        for r in records:
            by_scan_type[r['scan_type']][r['method']] += 1
            if not r['success']:
                by_scan_type[r['scan_type']]['failures'] += 1

        return {
            'api_calls': api_calls,
            'synthetic_calls': synthetic_calls,
            'api_failures': api_failures,
            'fallback_percentage': round(fallback_pct, 2),
            'avg_api_time_ms': round(avg_api_time, 2),
            'by_scan_type': dict(by_scan_type),
            'total_records': len(records),
            'tracking_since': self._start_time.isoformat(),
        }

    def get_failure_reasons(self) -> Dict[str, int]:
        """Get count of failures by reason."""
        with self._lock:
            reasons = defaultdict(int)
            for r in self._records:
                if not r['success'] and r.get('error'):
                    reasons[r['error']] += 1
            return dict(reasons)
