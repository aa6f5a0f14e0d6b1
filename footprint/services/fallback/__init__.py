# Fallback data for when the breach service is unreachable

from .fallback_metrics import FallbackMetrics
from .synthetic_breaches import SyntheticBreachGenerator

__all__ = ['FallbackMetrics', 'SyntheticBreachGenerator']
