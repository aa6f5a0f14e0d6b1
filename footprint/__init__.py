"""
Digital footprint scanner - exposure probes and risk advice.
"""

__version__ = '1.0.0'
