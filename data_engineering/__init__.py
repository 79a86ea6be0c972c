"""
Data Engineering Module for the visualization lessons

This module contains the data-side code:
1. loaders - Read and validate the reference dataset exports
2. utils/ - pandera schemas and quality checks
3. features/ - Derived columns and groupings (rates, dollars per day, regions)

Usage:
    from data_engineering.loaders import load_gapminder
    from data_engineering.features import add_dollars_per_day
"""

__version__ = "1.0.0"
