"""
End-to-end tests: every lesson and the command line runners on the
synthetic datasets.
"""

import pytest

from analysis.lessons import (
    LESSONS, case_studies, distributions, normal_distribution, plotting_grammar,
    summarizing, visualization_principles
)
from analysis.run_lessons import main as run_lessons_main
from scripts.verify_data import main as verify_data_main


# ===== FIXTURES =====


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / 'figures'


def assert_figures_saved(results, output_dir, lesson):
    assert results['figures']
    for name, path in results['figures'].items():
        assert path == output_dir / lesson / f'{name}.png'
        assert path.exists()


# ===== LESSONS =====


def test_registry():
    assert sorted(LESSONS) == [1, 2, 3, 4, 5, 6]
    assert LESSONS[1][0] == 'distributions'
    assert LESSONS[6][1] is visualization_principles.run


def test_distributions(data_dir, output_dir, capsys):
    results = distributions.run(data_dir, output_dir)

    assert results['sex_counts'].sum() == 120
    assert results['sex_proportions']['Male'] == pytest.approx(80 / 120)
    assert list(results['percentiles'].columns) == ['female', 'male']
    assert list(results['percentiles'].index) == ['10%', '30%', '50%', '70%', '90%']
    assert results['male_69_72']['exact'] > 0

    assert len(results['female_20s_reference']) == 1
    assert list(results['female_20s_range'].columns) == ['minimum', 'maximum']
    averages = results['male_40s_by_race']['average'].dropna()
    assert averages.is_monotonic_increasing

    assert_figures_saved(results, output_dir, 'distributions')
    assert 'LESSON 1' in capsys.readouterr().out


def test_normal_distribution(data_dir, output_dir):
    results = normal_distribution.run(data_dir, output_dir)

    assert results['sample_sd'] > results['population_sd']
    assert 0.85 < results['within_2_sd'] <= 1
    assert len(results['qq_points']) == 19
    assert len(results['non_numeric']) == 3
    assert list(results['robust_summary'].columns) == ['sex', 'average', 'sd', 'median', 'MAD']
    assert_figures_saved(results, output_dir, 'normal_distribution')


def test_summarizing(data_dir, output_dir):
    results = summarizing.run(data_dir, output_dir)

    assert 'expecting result of length one' in results['multi_value_error']
    assert results['us_rate'] != pytest.approx(results['mean_state_rate'])
    assert len(results['median_rate_by_region']) == 4
    assert results['by_rate_desc']['murder_rate'].is_monotonic_decreasing
    assert results['by_population']['population'].is_monotonic_increasing
    assert 'figures' not in results


def test_plotting_grammar(data_dir, output_dir):
    results = plotting_grammar.run(data_dir, output_dir)

    assert results['us_rate_per_million'] > 0
    assert 'murders_final' in results['figures']
    assert_figures_saved(results, output_dir, 'plotting_grammar')


def test_case_studies(data_dir, output_dir):
    results = case_studies.run(data_dir, output_dir)

    assert set(results['sri_lanka_vs_turkey']['country']) == {'Sri Lanka', 'Turkey'}
    assert results['reorder_demo'] == ['West', 'Asia']
    assert len(results['countries_in_both_years']) == 18
    assert results['income_and_survival']['income'].is_monotonic_increasing
    assert_figures_saved(results, output_dir, 'case_studies')


def test_visualization_principles(data_dir, output_dir):
    results = visualization_principles.run(data_dir, output_dir)

    assert results['highest_rate_state'] == 'District of Columbia'
    assert results['average_rate_before'] > results['average_rate_after']
    assert len(results['life_expectancy_change']) == 6
    assert 'measles_heatmap' in results['figures']
    assert_figures_saved(results, output_dir, 'visualization_principles')


# ===== COMMAND LINE =====


def test_run_lessons_cli_success(data_dir, output_dir, capsys):
    with pytest.raises(SystemExit) as exc:
        run_lessons_main(['--lessons', '3', '--data-dir', str(data_dir),
                          '--output-dir', str(output_dir)])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert 'Total: 1/1 lessons completed successfully' in out


def test_run_lessons_cli_reports_failures(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        run_lessons_main(['--lessons', '3', '4', '--data-dir', str(tmp_path),
                          '--output-dir', str(tmp_path / 'figures')])
    assert exc.value.code == 1
    out = capsys.readouterr().out
    assert 'Total: 0/2 lessons completed successfully' in out
    assert 'not found' in out


def test_run_lessons_cli_rejects_unknown_lesson():
    with pytest.raises(SystemExit) as exc:
        run_lessons_main(['--lessons', '7'])
    assert exc.value.code == 2


def test_verify_data(data_dir, tmp_path, capsys):
    assert verify_data_main(['--data-dir', str(data_dir)]) == 0
    assert 'ALL CHECKS PASSED' in capsys.readouterr().out

    assert verify_data_main(['--data-dir', str(tmp_path)]) == 1
    assert 'NOT FOUND' in capsys.readouterr().out
