#!/usr/bin/env python3
"""
Lesson 4: Building Plots Layer by Layer

The murders scatterplot built up one layer at a time (points, labels,
log scales, titles, colour, reference line), then the basic univariate
charts on male heights and a boxplot by region.

Usage:
    python -m analysis.run_lessons --lessons 4
"""

from analysis.lessons.common import FigureLog, print_header, print_section
from analysis.statistics import average, sample_sd
from analysis.visualization import (
    binwidth_comparison, boxplot, density_plot, histogram, labelled_scatter, qq_plot
)
from data_engineering.features import us_murder_rate
from data_engineering.loaders import load_heights, load_murders

NAME = 'plotting_grammar'


def run(data_dir=None, output_dir=None):
    figures = FigureLog(NAME, output_dir)
    results = {}

    print_header('LESSON 4: BUILDING PLOTS LAYER BY LAYER')

    murders = load_murders(data_dir)
    murders['population_millions'] = murders['population'] / 10**6

    print_section('1. Murders scatterplot')
    figures.save(labelled_scatter(murders, 'population_millions', 'total'), 'murders_points')
    figures.save(labelled_scatter(murders, 'population_millions', 'total', label='abb'),
                 'murders_labels')
    figures.save(labelled_scatter(murders, 'population_millions', 'total', label='abb',
                                  log_scale=True, nudge_x=0.05),
                 'murders_log_scale')

    # Murders per million people, so the line is total = r * population in millions
    results['us_rate_per_million'] = us_murder_rate(murders, per=10**6)
    print(f"  US murders per million people: {results['us_rate_per_million']:.2f}")

    figures.save(labelled_scatter(
        murders, 'population_millions', 'total', label='abb', hue='region',
        log_scale=True, reference_rate=results['us_rate_per_million'], nudge_x=0.05,
        title='US Gun Murders in 2010',
        xlabel='Populations in millions (log scale)',
        ylabel='Total number of murders (log scale)',
        legend_title='Region'
    ), 'murders_final')

    print_section('2. Male heights')
    heights = load_heights(data_dir)
    male = heights[heights['sex'] == 'Male']

    figures.save(histogram(male, 'height'), 'male_height_histogram_default_bins')
    figures.save(histogram(male, 'height', binwidth=1, color='blue',
                           xlabel='Male heights in inches', title='Histogram'),
                 'male_height_histogram')
    figures.save(density_plot(male, 'height', fill=False, color='black'), 'male_height_density')
    figures.save(density_plot(male, 'height', fill=True, color='blue', alpha=1),
                 'male_height_density_filled')

    results['male_params'] = {'mean': average(male['height']), 'sd': sample_sd(male['height'])}
    print(f"  Average: {results['male_params']['mean']:.2f}  SD: {results['male_params']['sd']:.2f}")

    figures.save(qq_plot(male, 'height'), 'male_height_qq_standard_normal')
    figures.save(qq_plot(male, 'height', params=results['male_params'], identity_line=True),
                 'male_height_qq_fitted')
    figures.save(qq_plot(male, 'height', standardize=True, identity_line=True),
                 'male_height_qq_standard_units')
    figures.save(binwidth_comparison(male, 'height', binwidths=(1, 2, 3)),
                 'male_height_binwidths')

    print_section('3. Population and region')
    figures.save(histogram(murders, 'population_millions', bins=15,
                           xlabel='Population in millions'),
                 'population_histogram')
    figures.save(boxplot(murders, 'region', 'total'), 'murders_by_region')

    results['figures'] = figures.paths
    return results


if __name__ == '__main__':
    run()
