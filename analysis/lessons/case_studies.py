#!/usr/bin/env python3
"""
Lesson 5: Gapminder Case Studies

Trends in world health and economics:
1. Infant mortality myths (Sri Lanka vs Turkey)
2. Fertility vs life expectancy, 1962 and 2012, by continent
3. Time series for the US, South Korea and Germany
4. Income distribution (dollars per day) on log scales
5. West vs developing world, 1970 vs 2010
6. Income vs infant survival by region group

Usage:
    python -m analysis.run_lessons --lessons 5
"""

import numpy as np

from analysis.lessons.common import FigureLog, print_header, print_section, show
from analysis.statistics import n_distinct, summarize
from analysis.visualization import (
    boxplot, density_plot, faceted_scatter, histogram, labelled_scatter, time_series
)
from config.settings import PAST_YEAR, PRESENT_YEAR
from data_engineering.features import (
    add_dollars_per_day, add_region_group, add_west_group, countries_in_both_years,
    income_and_survival, reorder
)
from data_engineering.loaders import load_gapminder

NAME = 'case_studies'
WRAP_YEARS = [1962, 1980, 1990, 2000, 2012]
LIFE_EXPECTANCY_LABELS = {'South Korea': (1975, 60), 'Germany': (1965, 72)}


def _infant_mortality(gapminder, figures, results):
    print_section('1. Infant mortality, 2015')
    pair = gapminder[(gapminder['year'] == 2015)
                     & gapminder['country'].isin(['Sri Lanka', 'Turkey'])]
    results['sri_lanka_vs_turkey'] = pair[['country', 'infant_mortality']].reset_index(drop=True)
    show(results['sri_lanka_vs_turkey'])


def _fertility_life_expectancy(gapminder, figures, results):
    print_section('2. Fertility vs life expectancy')
    y1962 = gapminder[gapminder['year'] == 1962]
    figures.save(labelled_scatter(y1962, 'fertility', 'life_expectancy'), 'fertility_1962')
    figures.save(labelled_scatter(y1962, 'fertility', 'life_expectancy', hue='continent'),
                 'fertility_1962_by_continent')

    compare = gapminder[gapminder['year'].isin([1962, 2012])]
    figures.save(faceted_scatter(compare, 'fertility', 'life_expectancy', hue='continent',
                                 row='continent', col='year'),
                 'fertility_continent_by_year_grid')
    figures.save(faceted_scatter(compare, 'fertility', 'life_expectancy', hue='continent',
                                 col='year'),
                 'fertility_1962_vs_2012')

    wrap = gapminder[gapminder['year'].isin(WRAP_YEARS)
                     & gapminder['continent'].isin(['Europe', 'Asia'])]
    figures.save(faceted_scatter(wrap, 'fertility', 'life_expectancy', hue='continent',
                                 col='year', wrap=3),
                 'fertility_europe_asia_wrap')


def _time_series(gapminder, figures, results):
    print_section('3. Time series')
    us = gapminder[gapminder['country'] == 'United States']
    figures.save(time_series(us, 'year', 'fertility', kind='point'), 'us_fertility_points')
    figures.save(time_series(us, 'year', 'fertility'), 'us_fertility_line')

    pair = gapminder[gapminder['country'].isin(['South Korea', 'Germany'])]
    figures.save(time_series(pair, 'year', 'fertility', group='country', colored=False),
                 'korea_germany_fertility_black')
    figures.save(time_series(pair, 'year', 'fertility', group='country'),
                 'korea_germany_fertility')
    figures.save(time_series(pair, 'year', 'life_expectancy', group='country',
                             labels=LIFE_EXPECTANCY_LABELS),
                 'korea_germany_life_expectancy')


def _income(gapminder, figures, results):
    print_section(f'4. Income distribution, {PAST_YEAR}')
    past = gapminder[(gapminder['year'] == PAST_YEAR) & gapminder['gdp'].notna()].copy()

    figures.save(histogram(past, 'dollars_per_day', binwidth=1), 'dollars_per_day_histogram')
    past['log2_dollars_per_day'] = np.log2(past['dollars_per_day'])
    figures.save(histogram(past, 'log2_dollars_per_day', binwidth=1),
                 'log2_dollars_per_day_histogram')
    figures.save(histogram(past, 'dollars_per_day', binwidth=1, log2=True),
                 'dollars_per_day_log2_axis')

    results['population_range'] = summarize(
        gapminder[gapminder['year'] == PAST_YEAR],
        minimum=('population', 'min'), maximum=('population', 'max')
    )
    show(results['population_range'])
    pops = gapminder[gapminder['year'] == PAST_YEAR].copy()
    pops['log10_population'] = np.log10(pops['population'])
    figures.save(histogram(pops, 'log10_population', binwidth=0.5, color='grey'),
                 'log10_population_histogram')

    results['n_regions'] = n_distinct(past['region'])
    print(f"\n  Regions: {results['n_regions']}")

    # reorder sorts levels by a summary of another variable
    demo = reorder(['Asia', 'Asia', 'West', 'West', 'West'], [10, 11, 12, 6, 4])
    results['reorder_demo'] = list(demo.categories)
    print(f"  reorder by mean: {results['reorder_demo']}")

    figures.save(boxplot(past, 'region', 'dollars_per_day', rotate_labels=True, xlabel=''),
                 'dollars_per_day_by_region')

    by_median = reorder(past['region'].astype(str), past['dollars_per_day'], func='median')
    order = list(by_median.cat.categories)
    results['region_order'] = order
    figures.save(boxplot(past, 'region', 'dollars_per_day', hue='continent', order=order,
                         rotate_labels=True, dodge=False, xlabel=''),
                 'dollars_per_day_by_region_ordered')
    figures.save(boxplot(past, 'region', 'dollars_per_day', hue='continent', order=order,
                         log2=True, rotate_labels=True, show_points=True, dodge=False, xlabel=''),
                 'dollars_per_day_by_region_log2')


def _west_vs_developing(gapminder, figures, results):
    print_section(f'5. West vs developing, {PAST_YEAR} vs {PRESENT_YEAR}')
    gapminder = add_west_group(gapminder)
    has_gdp = gapminder['gdp'].notna()
    past = gapminder[(gapminder['year'] == PAST_YEAR) & has_gdp]

    figures.save(histogram(past, 'dollars_per_day', binwidth=1, log2=True, col='group',
                           color='grey'),
                 'west_vs_developing_past')

    both_years = gapminder[gapminder['year'].isin([PAST_YEAR, PRESENT_YEAR]) & has_gdp]
    figures.save(histogram(both_years, 'dollars_per_day', binwidth=1, log2=True,
                           row='year', col='group', color='grey'),
                 'west_vs_developing_by_year_all')

    country_list = countries_in_both_years(gapminder, PAST_YEAR, PRESENT_YEAR)
    results['countries_in_both_years'] = country_list
    print(f'  Countries with income data in both years: {len(country_list)}')

    common = both_years[both_years['country'].astype(str).isin(country_list)].copy()
    figures.save(histogram(common, 'dollars_per_day', binwidth=1, log2=True,
                           row='year', col='group', color='grey'),
                 'west_vs_developing_by_year')

    order = list(reorder(common['region'].astype(str), common['dollars_per_day'],
                         func='median').cat.categories)
    figures.save(boxplot(common, 'region', 'dollars_per_day', log2=True, rotate_labels=True,
                         row='year', order=order, xlabel=''),
                 'regions_by_year')
    common['year_label'] = common['year'].astype(str)
    figures.save(boxplot(common, 'region', 'dollars_per_day', hue='year_label', order=order,
                         log2=True, rotate_labels=True, dodge=True, xlabel=''),
                 'regions_past_vs_present')

    print('\nDensities:')
    figures.save(density_plot(common, 'dollars_per_day', log2=True, row='year',
                              color='grey', alpha=0.8),
                 'income_density_by_year')
    figures.save(density_plot(common, 'dollars_per_day', hue='group', log2=True, row='year'),
                 'income_density_west_vs_developing')
    figures.save(density_plot(common, 'dollars_per_day', hue='group', log2=True, row='year',
                              count=True),
                 'income_density_counts')
    figures.save(density_plot(common, 'dollars_per_day', hue='group', log2=True, row='year',
                              count=True, bw=0.75),
                 'income_density_counts_smooth')

    grouped = add_region_group(common)
    results['group_counts'] = grouped.groupby(['year', 'group'], observed=True).size()
    figures.save(density_plot(grouped, 'dollars_per_day', hue='group', log2=True, row='year',
                              count=True, bw=0.75),
                 'income_density_five_groups')
    figures.save(density_plot(grouped, 'dollars_per_day', hue='group', log2=True, row='year',
                              count=True, bw=0.75, stacked=True, alpha=0.4),
                 'income_density_five_groups_stacked')


def _income_and_survival(gapminder, figures, results):
    print_section(f'6. Income and infant survival, {PRESENT_YEAR}')
    grouped = add_region_group(gapminder, detailed=True)
    surv_income = income_and_survival(grouped, PRESENT_YEAR)
    results['income_and_survival'] = surv_income
    show(surv_income)
    figures.save(labelled_scatter(surv_income, 'income', 'infant_survival_rate', label='group',
                                  hue='group', log_scale=True, nudge_x=0.05),
                 'income_vs_infant_survival')


def run(data_dir=None, output_dir=None):
    figures = FigureLog(NAME, output_dir)
    results = {}

    print_header('LESSON 5: GAPMINDER CASE STUDIES')

    gapminder = add_dollars_per_day(load_gapminder(data_dir))
    print(f'  ✓ Gapminder: {len(gapminder):,} rows, '
          f"{gapminder['country'].nunique()} countries, "
          f"{gapminder['year'].min()}-{gapminder['year'].max()}")

    _infant_mortality(gapminder, figures, results)
    _fertility_life_expectancy(gapminder, figures, results)
    _time_series(gapminder, figures, results)
    _income(gapminder, figures, results)
    _west_vs_developing(gapminder, figures, results)
    _income_and_survival(gapminder, figures, results)

    results['figures'] = figures.paths
    return results


if __name__ == '__main__':
    run()
