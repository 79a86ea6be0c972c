#!/usr/bin/env python3
"""
Lesson 1: Describing Distributions

Heights of students and NHANES blood pressure:
- Distinct values and frequency tables
- Percentiles by sex
- Exact interval proportions vs the normal approximation
- Density smoothness and male/female densities
- Blood pressure summaries by age decade, gender and race

Usage:
    python -m analysis.run_lessons --lessons 1
"""

from analysis.lessons.common import FigureLog, print_header, print_section, show
from analysis.statistics import (
    count_singletons, frequency_table, mean_sd, n_distinct, normal_approximation,
    percentile_table, summarize
)
from analysis.visualization import density_plot, ecdf_plot, smoothness_comparison
from data_engineering.loaders import load_heights, load_nhanes

NAME = 'distributions'
PERCENTILES = [0.1, 0.3, 0.5, 0.7, 0.9]
# NHANES age decades carry a leading space
AGE_20S = ' 20-29'
AGE_40S = ' 40-49'


def run(data_dir=None, output_dir=None):
    figures = FigureLog(NAME, output_dir)
    results = {}

    print_header('LESSON 1: DESCRIBING DISTRIBUTIONS')

    heights = load_heights(data_dir)
    male = heights.loc[heights['sex'] == 'Male', 'height']
    female = heights.loc[heights['sex'] == 'Female', 'height']

    print_section('1. Distinct values')
    results['unique_heights'] = n_distinct(heights['height'])
    results['singletons'] = count_singletons(heights['height'])
    print(f"  Distinct heights:      {results['unique_heights']}")
    print(f"  Reported only once:    {results['singletons']}")

    results['sex_counts'] = frequency_table(heights['sex'])
    results['sex_proportions'] = frequency_table(heights['sex'], normalize=True)
    print('\nCounts by sex:')
    show(results['sex_counts'])
    print('\nProportions by sex:')
    show(results['sex_proportions'].round(3))

    print_section('2. Percentiles')
    results['percentiles'] = percentile_table({'female': female, 'male': male}, PERCENTILES)
    show(results['percentiles'])

    print_section('3. Normal approximation')
    results['male_69_72'] = normal_approximation(male, 69, 72)
    results['male_79_81'] = normal_approximation(male, 79, 81)
    for interval in ('male_69_72', 'male_79_81'):
        r = results[interval]
        print(f"  {interval}: exact={r['exact']:.4f}  normal={r['approx']:.4f}  "
              f"ratio={r['ratio']:.2f}")

    print_section('4. Figures')
    figures.save(ecdf_plot(heights, 'height'), 'height_ecdf')
    figures.save(smoothness_comparison(heights[heights['sex'] == 'Male'], 'height'),
                 'male_height_smoothness')
    figures.save(density_plot(heights, 'height', hue='sex', alpha=0.2), 'height_density_by_sex')

    print_section('5. NHANES systolic blood pressure')
    nhanes = load_nhanes(data_dir)
    is_female = nhanes['Gender'] == 'female'

    female_20s = nhanes[(nhanes['AgeDecade'] == AGE_20S) & is_female]
    results['female_20s_reference'] = mean_sd(female_20s, 'BPSysAve')
    results['female_20s_range'] = summarize(female_20s, minimum=('BPSysAve', 'min'),
                                            maximum=('BPSysAve', 'max'))
    print('Females aged 20-29 (reference):')
    show(results['female_20s_reference'])
    show(results['female_20s_range'])

    results['female_by_age'] = mean_sd(nhanes[is_female], 'BPSysAve', by='AgeDecade')
    results['male_by_age'] = mean_sd(nhanes[nhanes['Gender'] == 'male'], 'BPSysAve', by='AgeDecade')
    results['by_age_and_gender'] = mean_sd(nhanes, 'BPSysAve', by=['AgeDecade', 'Gender'])
    print('\nFemales by age decade:')
    show(results['female_by_age'])
    print('\nMales by age decade:')
    show(results['male_by_age'])
    print('\nBy age decade and gender:')
    show(results['by_age_and_gender'], max_rows=30)

    male_40s = nhanes[(nhanes['AgeDecade'] == AGE_40S) & (nhanes['Gender'] == 'male')]
    results['male_40s_by_race'] = (
        mean_sd(male_40s, 'BPSysAve', by='Race1')
        .sort_values('average')
        .reset_index(drop=True)
    )
    print('\nMales aged 40-49 by race (sorted by average):')
    show(results['male_40s_by_race'])

    results['figures'] = figures.paths
    return results


if __name__ == '__main__':
    run()
