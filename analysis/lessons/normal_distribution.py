#!/usr/bin/env python3
"""
Lesson 2: The Normal Distribution

Standard units, the 2 SD rule, QQ points and a case study on
self-reported heights where a few typos wreck the average and SD but not
the median and MAD.

Usage:
    python -m analysis.run_lessons --lessons 2
"""

import warnings

from analysis.lessons.common import FigureLog, print_header, print_section, show
from analysis.statistics import (
    average, ecdf, population_sd, proportion_within, qq_points, quantiles,
    sample_sd, standard_units, summarize
)
from analysis.visualization import boxplot, qq_scatter
from data_engineering.features import coerce_reported_heights, non_numeric_heights
from data_engineering.loaders import load_heights, load_reported_heights

NAME = 'normal_distribution'


def run(data_dir=None, output_dir=None):
    figures = FigureLog(NAME, output_dir)
    results = {}

    print_header('LESSON 2: THE NORMAL DISTRIBUTION')

    heights = load_heights(data_dir)
    male = heights.loc[heights['sex'] == 'Male', 'height']

    print_section('1. Average and standard deviation')
    results['average'] = average(male)
    results['population_sd'] = population_sd(male)
    results['sample_sd'] = sample_sd(male)
    print(f"  Average:           {results['average']:.3f}")
    print(f"  SD (divide by n):  {results['population_sd']:.3f}")
    print(f"  SD (n - 1):        {results['sample_sd']:.3f}")

    print_section('2. Standard units')
    z = standard_units(male)
    results['within_2_sd'] = proportion_within(z, 2)
    results['at_most_69_5'] = float(ecdf(male)(69.5))
    print(f"  Proportion within 2 SD:   {results['within_2_sd']:.3f}")
    print(f"  Proportion <= 69.5:       {results['at_most_69_5']:.3f}")

    print_section('3. Quantiles')
    results['quartiles'] = quantiles(male, [0.25, 0.5, 0.75])
    show(results['quartiles'])

    results['qq_points'] = qq_points(male)
    results['qq_points_standardized'] = qq_points(male, standardize=True)
    figures.save(qq_scatter(results['qq_points']), 'male_height_qq')
    figures.save(qq_scatter(results['qq_points_standardized']), 'male_height_qq_standard_units')

    print_section('4. Case study: self-reported heights')
    reported = load_reported_heights(data_dir)
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always', UserWarning)
        reported = coerce_reported_heights(reported)
    for w in caught:
        print(f'  ⚠️  {w.message}')

    results['non_numeric'] = non_numeric_heights(reported)
    print(f"\nEntries that are not numbers: {len(results['non_numeric'])}")
    show(results['non_numeric'][['sex', 'original_heights']], max_rows=10)

    clean = reported[reported['height'].notna()]
    results['robust_summary'] = summarize(
        clean, by='sex',
        average=('height', 'mean'),
        sd=('height', 'sd'),
        median=('height', 'median'),
        MAD=('height', 'mad'),
    )
    print('\nSummary by sex (average/SD vs median/MAD):')
    show(results['robust_summary'])

    figures.save(boxplot(clean, 'sex', 'height'), 'reported_heights_boxplot')

    results['figures'] = figures.paths
    return results


if __name__ == '__main__':
    run()
