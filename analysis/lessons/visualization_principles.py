#!/usr/bin/env python3
"""
Lesson 6: Data Visualization Principles

Good and bad choices side by side: axis limits, ordered bars, showing the
data, colour-blind friendly palettes, slope charts, average/difference
plots and heatmaps of measles incidence before and after the vaccine.

Usage:
    python -m analysis.run_lessons --lessons 6
"""

import matplotlib.pyplot as plt

from analysis.lessons.common import FigureLog, print_header, print_section, show
from analysis.visualization import (
    average_difference_plot, bar_chart, colour_swatch, disease_heatmap, disease_trends,
    histogram, jitter_plot, limits_comparison, point_strip, slope_chart
)
from config.settings import VACCINE_YEAR, WEST
from data_engineering.features import (
    add_disease_rate, add_murder_rate, life_expectancy_change, us_disease_average
)
from data_engineering.loaders import (
    load_gapminder, load_heights, load_murders, load_us_contagious_diseases
)

NAME = 'visualization_principles'
DISEASE = 'Measles'
SLOPE_LABEL_NUDGE = {'United Kingdom': 0.22, 'Portugal': 0.22}


def run(data_dir=None, output_dir=None):
    figures = FigureLog(NAME, output_dir)
    results = {}

    print_header('LESSON 6: DATA VISUALIZATION PRINCIPLES')

    gapminder = load_gapminder(data_dir)

    print_section('1. Axis limits')
    y2012 = gapminder[gapminder['year'] == 2012]
    figures.save(limits_comparison(y2012, 'continent', 'life_expectancy'),
                 'life_expectancy_limits')

    print_section('2. Ordering categories')
    murders = add_murder_rate(load_murders(data_dir))
    fig, axes = plt.subplots(1, 2, figsize=(12, 10))
    bar_chart(murders, 'state', 'murder_rate', ax=axes[0])
    bar_chart(murders, 'state', 'murder_rate', ordered=True, ax=axes[1])
    fig.tight_layout()
    figures.save(fig, 'murder_rate_bars')
    results['highest_rate_state'] = str(murders.loc[murders['murder_rate'].idxmax(), 'state'])
    print(f"  Highest murder rate: {results['highest_rate_state']}")

    print_section('3. Show the data')
    heights = load_heights(data_dir)
    figures.save(point_strip(heights, 'sex', 'height'), 'heights_points')
    figures.save(jitter_plot(heights, 'sex', 'height'), 'heights_jitter')
    figures.save(histogram(heights, 'height', binwidth=1, density=True, row='sex'),
                 'heights_histogram_by_sex')
    figures.save(jitter_plot(heights, 'sex', 'height', with_boxplot=True), 'heights_jitter_boxplot')

    print_section('4. Colour-blind friendly palette')
    figures.save(colour_swatch(), 'colour_blind_palette')

    print_section('5. Life expectancy, 2010 vs 2015')
    change = life_expectancy_change(gapminder, 2010, 2015, regions=WEST)
    results['life_expectancy_change'] = change
    show(change.sort_values('difference', ascending=False).round(2))

    dat = gapminder[gapminder['year'].isin([2010, 2015])
                    & gapminder['region'].isin(WEST)
                    & gapminder['life_expectancy'].notna()
                    & (gapminder['population'] > 10**7)]
    figures.save(slope_chart(dat, 'year', 'life_expectancy', group='country',
                             nudge=SLOPE_LABEL_NUDGE, ylabel='Life Expectancy'),
                 'life_expectancy_slope')
    figures.save(average_difference_plot(change, label='country',
                                         xlabel='Average of 2010 and 2015',
                                         ylabel='Difference between 2015 and 2010'),
                 'life_expectancy_average_difference')

    print_section(f'6. {DISEASE} before and after the vaccine ({VACCINE_YEAR})')
    diseases = load_us_contagious_diseases(data_dir)
    rates = add_disease_rate(diseases, DISEASE)
    us_average = us_disease_average(diseases, DISEASE)
    results['disease_rates'] = rates
    results['us_average'] = us_average

    before = us_average.loc[us_average['year'] < VACCINE_YEAR, 'us_rate'].mean()
    after = us_average.loc[us_average['year'] >= VACCINE_YEAR, 'us_rate'].mean()
    results['average_rate_before'] = float(before)
    results['average_rate_after'] = float(after)
    print(f'  Average US rate before: {before:.2f} per 10,000')
    print(f'  Average US rate after:  {after:.2f} per 10,000')

    figures.save(disease_heatmap(rates, DISEASE), 'measles_heatmap')
    figures.save(disease_trends(rates, us_average), 'measles_trends')

    results['figures'] = figures.paths
    return results


if __name__ == '__main__':
    run()
