"""
Analysis Module

Statistics, charts and the lessons built on them

Modules:
- statistics: Summaries, quantiles, normal approximation
- visualization: Reusable plotting utilities (matplotlib + seaborn)
- lessons: Narrated walkthroughs of the datasets
- run_lessons: Command line runner
"""

__version__ = "1.0.0"
