"""
LocalLife statistical analysis engine.

Correlations, weather patterns and calendar-year statistics over a
personal dataset of daily records.
"""

__version__ = "0.1.0"
