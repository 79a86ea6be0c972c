#!/usr/bin/env python3
"""
Lesson 3: Summarizing With Tables

summarize, group_by-style summaries and sorting on the heights and
murders tables. No figures.

Usage:
    python -m analysis.run_lessons --lessons 3
"""

from analysis.lessons.common import print_header, print_section, show
from analysis.statistics import mean_sd, summarize
from data_engineering.features import add_murder_rate, us_murder_rate
from data_engineering.loaders import load_heights, load_murders

NAME = 'summarizing'


def run(data_dir=None, output_dir=None):
    results = {}

    print_header('LESSON 3: SUMMARIZING WITH TABLES')

    heights = load_heights(data_dir)
    males = heights[heights['sex'] == 'Male']

    print_section('1. Summaries of male heights')
    results['male_summary'] = mean_sd(males, 'height')
    results['male_range'] = summarize(males, median=('height', 'median'),
                                      minimum=('height', 'min'), maximum=('height', 'max'))
    show(results['male_summary'])
    show(results['male_range'])

    # A summary must reduce to a single value
    try:
        summarize(males, range=('height', lambda s: s.quantile([0, 0.5, 1])))
    except ValueError as e:
        results['multi_value_error'] = str(e)
        print(f'\n❌ {e}')

    print_section('2. Murder rates')
    murders = add_murder_rate(load_murders(data_dir))
    results['mean_state_rate'] = float(
        summarize(murders, rate=('murder_rate', 'mean'))['rate'].iloc[0]
    )
    results['us_rate'] = us_murder_rate(murders)
    print(f"  Average of state rates:   {results['mean_state_rate']:.3f}")
    print(f"  US rate:                  {results['us_rate']:.3f}")

    print_section('3. Grouped summaries')
    results['heights_by_sex'] = mean_sd(heights, 'height', by='sex')
    results['median_rate_by_region'] = summarize(
        murders, by='region', median_rate=('murder_rate', 'median')
    )
    show(results['heights_by_sex'])
    print()
    show(results['median_rate_by_region'])

    print_section('4. Sorting')
    columns = ['state', 'region', 'population', 'murder_rate']
    results['by_population'] = murders.sort_values('population', kind='stable')[columns]
    results['by_rate'] = murders.sort_values('murder_rate', kind='stable')[columns]
    results['by_rate_desc'] = murders.sort_values('murder_rate', ascending=False,
                                                  kind='stable')[columns]
    results['by_region_then_rate'] = murders.sort_values(['region', 'murder_rate'],
                                                         kind='stable')[columns]

    print('Smallest populations:')
    show(results['by_population'], max_rows=6)
    print('\nHighest murder rates:')
    show(results['by_rate_desc'], max_rows=6)
    print('\nBy region, then murder rate:')
    show(results['by_region_then_rate'], max_rows=6)

    return results


if __name__ == '__main__':
    run()
