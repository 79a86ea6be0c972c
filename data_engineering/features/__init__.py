"""
Derived columns and groupings used by the lessons
"""

from .factors import reorder
from .rates import add_murder_rate, us_murder_rate, add_disease_rate, us_disease_average
from .heights import coerce_reported_heights, non_numeric_heights
from .gapminder import (
    add_dollars_per_day,
    add_west_group,
    add_region_group,
    countries_in_both_years,
    income_and_survival,
    life_expectancy_change
)

__all__ = [
    'reorder',
    'add_murder_rate',
    'us_murder_rate',
    'add_disease_rate',
    'us_disease_average',
    'coerce_reported_heights',
    'non_numeric_heights',
    'add_dollars_per_day',
    'add_west_group',
    'add_region_group',
    'countries_in_both_years',
    'income_and_survival',
    'life_expectancy_change',
]
