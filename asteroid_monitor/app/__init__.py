"""Application orchestration package for Asteroid Monitor.

Contains controller-adjacent modules:
- filtering: hazard filter and closest-first ordering
- stats: summary statistics and counter formatting
- rendering: preview/full list presentation, severity and banners
- state: immutable application state and its transitions
"""

__all__ = ["filtering", "stats", "rendering", "state"]
