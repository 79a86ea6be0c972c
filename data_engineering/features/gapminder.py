"""
Gapminder Derived Features

Creates the columns used by the income and health case studies:
- Dollars per day (gdp / population / 365), a poverty indicator
- West vs Developing split
- Regional groupings (five groups, or the detailed seven-group split)
- Countries observed in both comparison years
- Per-group income and infant survival
- Life expectancy change between two years

Usage:
    from data_engineering.features.gapminder import add_dollars_per_day, add_region_group

    gapminder = add_dollars_per_day(gapminder)
    gapminder = add_region_group(gapminder)
"""

import numpy as np
import pandas as pd

from config.settings import (
    WEST, EAST_ASIA, LATIN_AMERICA, PACIFIC_ISLANDS,
    GROUP_LEVELS, DETAILED_GROUP_LEVELS
)


def add_dollars_per_day(gapminder: pd.DataFrame) -> pd.DataFrame:
    """Add dollars_per_day = gdp / population / 365"""
    out = gapminder.copy()
    out['dollars_per_day'] = out['gdp'] / out['population'] / 365
    return out


def add_west_group(gapminder: pd.DataFrame) -> pd.DataFrame:
    """Add group = 'West' for western regions, 'Developing' otherwise"""
    out = gapminder.copy()
    out['group'] = np.where(out['region'].isin(WEST), 'West', 'Developing')
    return out


def add_region_group(gapminder: pd.DataFrame, detailed: bool = False) -> pd.DataFrame:
    """
    Add a regional group column, first matching rule wins

    Basic split (ordered Others, Latin America, East Asia,
    Sub-Saharan Africa, West): anything unmatched is 'Others'.

    Detailed split: The West, Northern Africa, East Asia, Southern Asia,
    Latin America, Sub-Saharan Africa, Pacific Islands; anything unmatched
    is left missing.

    Args:
        gapminder: Table with region and continent columns
        detailed: Use the seven-group split

    Returns:
        Copy with 'group' as an ordered categorical
    """
    out = gapminder.copy()
    region = out['region'].astype(object)
    continent = out['continent'].astype(object)
    sub_saharan = (continent == 'Africa') & (region != 'Northern Africa')

    if detailed:
        conditions = [
            region.isin(WEST),
            region == 'Northern Africa',
            region.isin(EAST_ASIA),
            region == 'Southern Asia',
            region.isin(LATIN_AMERICA),
            sub_saharan,
            region.isin(PACIFIC_ISLANDS),
        ]
        choices = DETAILED_GROUP_LEVELS
        levels = DETAILED_GROUP_LEVELS
        default = None
    else:
        conditions = [
            region.isin(WEST),
            region.isin(EAST_ASIA),
            region.isin(LATIN_AMERICA),
            sub_saharan,
        ]
        choices = ['West', 'East Asia', 'Latin America', 'Sub-Saharan Africa']
        levels = GROUP_LEVELS
        default = 'Others'

    # Assign in reverse so earlier rules overwrite later ones
    group = pd.Series(default, index=out.index, dtype=object)
    for condition, choice in reversed(list(zip(conditions, choices))):
        group[condition.to_numpy(dtype=bool)] = choice

    out['group'] = pd.Categorical(group, categories=levels)
    return out


def countries_in_both_years(gapminder: pd.DataFrame, past_year: int, present_year: int) -> list:
    """
    Countries with dollars_per_day available in both years

    Returns:
        List of country names, in the order they appear for past_year
    """
    if 'dollars_per_day' not in gapminder.columns:
        gapminder = add_dollars_per_day(gapminder)

    has_income = gapminder['dollars_per_day'].notna()
    past = gapminder.loc[has_income & (gapminder['year'] == past_year), 'country'].astype(str)
    present = set(gapminder.loc[has_income & (gapminder['year'] == present_year), 'country'].astype(str))

    return [c for c in dict.fromkeys(past) if c in present]


def income_and_survival(gapminder: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Average income and infant survival per regional group for one year

    Both are population weighted:
        income = sum(gdp) / sum(population) / 365
        infant_survival_rate = 1 - sum(infant_mortality / 1000 * population) / sum(population)

    Args:
        gapminder: Table with a 'group' column (see add_region_group)
        year: Year to summarize

    Returns:
        DataFrame with group, income, infant_survival_rate sorted by income
    """
    if 'group' not in gapminder.columns:
        raise ValueError("gapminder needs a 'group' column; call add_region_group first")

    dat = gapminder[
        (gapminder['year'] == year)
        & gapminder['gdp'].notna()
        & gapminder['infant_mortality'].notna()
        & gapminder['group'].notna()
    ].copy()
    dat['infant_deaths'] = dat['infant_mortality'] / 1000 * dat['population']

    surv_income = dat.groupby('group', observed=True).agg(
        gdp=('gdp', 'sum'),
        population=('population', 'sum'),
        infant_deaths=('infant_deaths', 'sum'),
    )
    surv_income['income'] = surv_income['gdp'] / surv_income['population'] / 365
    surv_income['infant_survival_rate'] = 1 - surv_income['infant_deaths'] / surv_income['population']

    return (
        surv_income[['income', 'infant_survival_rate']]
        .reset_index()
        .sort_values('income')
        .reset_index(drop=True)
    )


def life_expectancy_change(gapminder: pd.DataFrame, first_year: int = 2010,
                           second_year: int = 2015, regions=WEST,
                           min_population: float = 10**7) -> pd.DataFrame:
    """
    Life expectancy in two years side by side, with average and difference

    Keeps large countries (population above min_population) in the given
    regions.

    Returns:
        DataFrame with country, life_expectancy_<first>, life_expectancy_<second>,
        average, difference
    """
    dat = gapminder[
        gapminder['year'].isin([first_year, second_year])
        & gapminder['region'].isin(regions)
        & gapminder['life_expectancy'].notna()
        & (gapminder['population'] > min_population)
    ]

    wide = dat.assign(country=dat['country'].astype(str)).pivot(
        index='country', columns='year', values='life_expectancy'
    )
    wide = wide.reindex(columns=[first_year, second_year])
    wide.columns = [f'life_expectancy_{y}' for y in wide.columns]
    wide = wide.reset_index()

    first = wide[f'life_expectancy_{first_year}']
    second = wide[f'life_expectancy_{second_year}']
    wide['average'] = (second + first) / 2
    wide['difference'] = second - first
    return wide
