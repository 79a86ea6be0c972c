"""
Tests for the chart builders.
"""

import numpy as np
import pandas as pd
import pytest
from matplotlib.figure import Figure
from scipy import stats
from scipy.integrate import trapezoid

from analysis.visualization import (
    average_difference_plot, bar_chart, binwidth_comparison, boxplot, colour_swatch,
    density_plot, disease_heatmap, disease_trends, drop_missing, ecdf_plot,
    faceted_scatter, histogram, jitter_plot, labelled_scatter, limits_comparison,
    qq_plot, qq_scatter, save_figure, slope_chart, smoothness_comparison, time_series
)
from analysis.visualization.distributions import (
    bw_nrd0, histogram_edges, kde_curve, ppoints, right_closed_counts
)
from analysis.statistics import qq_points
from data_engineering.features import (
    add_disease_rate, add_dollars_per_day, add_murder_rate, add_west_group,
    life_expectancy_change, us_disease_average
)


# ===== HELPERS =====


def test_drop_missing_warns_with_count():
    df = pd.DataFrame({'x': [1.0, np.nan, np.inf, 4.0], 'y': [1, 2, 3, None]})
    with pytest.warns(UserWarning, match='Removed 3 rows containing missing values'):
        out = drop_missing(df, ['x', 'y'])
    assert list(out['x']) == [1.0]


def test_drop_missing_unknown_column():
    with pytest.raises(ValueError, match='Columns not found'):
        drop_missing(pd.DataFrame({'x': [1]}), ['x', 'z'])


def test_histogram_edges_binwidth():
    edges = histogram_edges([1.2, 3.7, 5.0], binwidth=1)
    np.testing.assert_allclose(edges, [0.5, 1.5, 2.5, 3.5, 4.5, 5.5])


def test_histogram_edges_centred_on_multiples_of_binwidth():
    edges = histogram_edges([66, 68, 70, 70, 72], binwidth=1)
    np.testing.assert_allclose(edges % 1, 0.5)
    assert edges[0] == 65.5 and edges[-1] == 72.5

    edges = histogram_edges([0.9, 5.2], binwidth=2)
    np.testing.assert_allclose(edges, [-1, 1, 3, 5, 7])


def test_histogram_edges_log2():
    edges = histogram_edges([1.5, 3, 10], binwidth=1, log2=True)
    np.testing.assert_allclose(edges, 2 ** np.array([0.5, 1.5, 2.5, 3.5]))


def test_histogram_edges_default_bins_centred_on_minimum():
    edges = histogram_edges(np.arange(30.0))
    assert len(edges) == 31
    np.testing.assert_allclose(edges[[0, -1]], [-0.5, 29.5])


def test_right_closed_counts():
    np.testing.assert_array_equal(right_closed_counts([0.5, 1.0, 1.5, 2.0], [0.5, 1.5, 2.5]), [3, 1])


def test_histogram_integer_values_fill_centred_bar():
    fig = histogram(pd.DataFrame({'x': [66, 68, 70, 70, 72]}), 'x', binwidth=1)
    bars = {patch.get_x() + patch.get_width() / 2: patch.get_height()
            for patch in fig.axes[0].patches}
    assert bars[70.0] == 2
    assert bars[69.0] == 0


def test_histogram_edges_rejects_bad_input():
    with pytest.raises(ValueError):
        histogram_edges([], binwidth=1)
    with pytest.raises(ValueError):
        histogram_edges([1, 2], binwidth=0)


def test_bw_nrd0_matches_formula():
    x = np.arange(1.0, 21.0)
    iqr = np.percentile(x, 75) - np.percentile(x, 25)
    expected = 0.9 * min(x.std(ddof=1), iqr / 1.34) * 20 ** -0.2
    assert bw_nrd0(x) == pytest.approx(expected)


def test_kde_curve_integrates_to_one():
    rng = np.random.default_rng(0)
    x = rng.normal(0, 1, 200)
    grid = np.linspace(-8, 8, 2001)
    y = kde_curve(x, grid)
    assert trapezoid(y, grid) == pytest.approx(1, abs=1e-3)
    # Larger adjust flattens the peak
    assert kde_curve(x, grid, adjust=2).max() < y.max()


def test_kde_curve_explicit_bandwidth():
    x = np.array([0.0, 1.0])
    grid = np.array([0.0])
    y = kde_curve(x, grid, bw=0.5)
    expected = (stats.norm.pdf(0, 0, 0.5) + stats.norm.pdf(0, 1, 0.5)) / 2
    assert y[0] == pytest.approx(expected)


def test_ppoints():
    np.testing.assert_allclose(ppoints(3), (np.arange(1, 4) - 3 / 8) / (3 + 1 - 3 / 4))
    np.testing.assert_allclose(ppoints(20), (np.arange(1, 21) - 0.5) / 20)


# ===== DISTRIBUTIONS =====


def test_histograms(heights):
    male = heights[heights['sex'] == 'Male']
    assert isinstance(histogram(male, 'height', binwidth=1), Figure)
    assert isinstance(histogram(heights['height'].to_numpy(), bins=15), Figure)
    assert isinstance(histogram(heights, 'height', density=True, row='sex'), Figure)
    assert isinstance(binwidth_comparison(male, 'height'), Figure)


def test_histogram_bar_count(heights):
    fig = histogram(heights, 'height', binwidth=1)
    ax = fig.axes[0]
    total = sum(patch.get_height() for patch in ax.patches)
    assert total == len(heights)


def test_log2_histogram_drops_non_positive():
    df = pd.DataFrame({'x': [0.5, 1, 2, 4, 8, 0]})
    with pytest.warns(UserWarning, match='Removed 1 rows'):
        fig = histogram(df, 'x', binwidth=1, log2=True)
    assert fig.axes[0].get_xscale() == 'log'


def test_density_plots(heights, gapminder):
    assert isinstance(density_plot(heights, 'height', hue='sex'), Figure)
    assert isinstance(smoothness_comparison(heights, 'height'), Figure)

    dat = add_west_group(add_dollars_per_day(gapminder))
    dat = dat[dat['year'].isin([1970, 2010])]
    fig = density_plot(dat, 'dollars_per_day', hue='group', log2=True, row='year',
                       count=True, stacked=True, bw=0.75)
    assert len(fig.axes) == 2


def test_density_skips_single_value_group():
    df = pd.DataFrame({'x': [1.0, 2.0, 3.0, 5.0, 5.0], 'g': ['a', 'a', 'a', 'b', 'b']})
    with pytest.warns(UserWarning, match='fewer than two distinct values'):
        density_plot(df, 'x', hue='g')


def test_qq_plots(heights):
    male = heights[heights['sex'] == 'Male']
    fig = qq_plot(male, 'height', params='fit', identity_line=True)
    ax = fig.axes[0]
    assert ax.get_xlabel() == 'theoretical'
    assert len(ax.collections[0].get_offsets()) == len(male)
    assert isinstance(qq_plot(male, 'height', params={'mean': 69, 'sd': 3}), Figure)
    assert isinstance(qq_scatter(qq_points(male['height'])), Figure)


def test_ecdf_and_categories(heights, murders):
    assert isinstance(ecdf_plot(heights, 'height'), Figure)
    assert isinstance(boxplot(heights, 'sex', 'height', show_points=True), Figure)
    assert isinstance(jitter_plot(heights, 'sex', 'height', with_boxplot=True), Figure)
    assert isinstance(limits_comparison(heights, 'sex', 'height'), Figure)
    murders = add_murder_rate(murders)
    assert isinstance(boxplot(murders, 'region', 'murder_rate', row='region'), Figure)


def test_limits_comparison_left_panel_starts_at_zero(heights):
    fig = limits_comparison(heights, 'sex', 'height', limits=(0, 84))
    assert fig.axes[0].get_ylim() == (0, 84)
    assert fig.axes[1].get_ylim()[0] > 0


def test_bar_chart_ordered(murders):
    murders = add_murder_rate(murders)
    fig = bar_chart(murders, 'state', 'murder_rate', ordered=True)
    labels = [t.get_text() for t in fig.axes[0].get_yticklabels()]
    lowest = murders.sort_values('murder_rate')['state'].iloc[0]
    assert labels[0] == lowest

    fig = bar_chart(murders, 'state', 'murder_rate')
    labels = [t.get_text() for t in fig.axes[0].get_yticklabels()]
    assert labels == sorted(murders['state'])


# ===== RELATIONSHIPS =====


def test_labelled_scatter_log_scale(murders):
    murders = murders.assign(population_millions=murders['population'] / 10**6)
    fig = labelled_scatter(murders, 'population_millions', 'total', label='abb',
                           hue='region', log_scale=True, reference_rate=30, nudge_x=0.05)
    ax = fig.axes[0]
    assert ax.get_xscale() == 'log' and ax.get_yscale() == 'log'
    assert len(ax.texts) == len(murders)


def test_faceted_scatter(gapminder):
    compare = gapminder[gapminder['year'].isin([1962, 2012])]
    fig = faceted_scatter(compare, 'fertility', 'life_expectancy', hue='continent',
                          row='continent', col='year')
    assert len(fig.axes) == compare['continent'].nunique() * 2

    years = gapminder[gapminder['year'].isin([1962, 1980, 1990, 2000, 2012])]
    assert len(faceted_scatter(years, 'fertility', 'life_expectancy', col='year', wrap=3).axes) == 5


def test_faceted_scatter_wrap_needs_col(gapminder):
    with pytest.raises(ValueError, match='wrap'):
        faceted_scatter(gapminder, 'fertility', 'life_expectancy', wrap=3)


def test_time_series(gapminder):
    pair = gapminder[gapminder['country'].isin(['South Korea', 'Germany'])]
    fig = time_series(pair, 'year', 'life_expectancy', group='country',
                      labels={'South Korea': (1975, 60), 'Germany': (1965, 72)})
    ax = fig.axes[0]
    assert len(ax.lines) == 2
    assert {t.get_text() for t in ax.texts} == {'South Korea', 'Germany'}

    with pytest.raises(ValueError, match='kind'):
        time_series(pair, 'year', 'fertility', kind='bar')


def test_slope_chart(gapminder):
    dat = gapminder[gapminder['year'].isin([2010, 2015])
                    & gapminder['country'].isin(['Germany', 'Italy', 'Portugal'])]
    fig = slope_chart(dat, 'year', 'life_expectancy', group='country', nudge={'Portugal': 0.2})
    ax = fig.axes[0]
    assert len(ax.lines) == 3
    assert len(ax.texts) == 6

    with pytest.raises(ValueError, match='exactly two'):
        slope_chart(gapminder[gapminder['country'] == 'Germany'], 'year', 'life_expectancy',
                    group='country')


def test_average_difference_and_swatch(gapminder):
    change = life_expectancy_change(gapminder)
    fig = average_difference_plot(change, label='country')
    assert len(fig.axes[0].texts) == len(change)
    np.testing.assert_array_equal(fig.axes[0].lines[0].get_ydata(), [0, 0])
    assert isinstance(colour_swatch(), Figure)


def test_average_difference_identity_line(gapminder):
    change = life_expectancy_change(gapminder)
    fig = average_difference_plot(change, label='country', identity_line=True)
    line = fig.axes[0].lines[0]
    assert line.get_slope() == 1
    assert line.get_xy1() == (0, 0)


# ===== HEATMAPS =====


def test_disease_charts(diseases):
    rates = add_disease_rate(diseases, 'Measles')
    with pytest.warns(UserWarning, match='Removed 1 rows'):
        heatmap = disease_heatmap(rates, 'Measles')
    ax = heatmap.axes[0]
    assert [t.get_text() for t in ax.get_yticklabels()] == list(rates['state'].cat.categories)

    with pytest.warns(UserWarning):
        trends = disease_trends(rates, us_disease_average(diseases, 'Measles'))
    assert trends.axes[0].get_yscale() == 'function'


# ===== SAVING =====


def test_save_figure(tmp_path, heights):
    fig = histogram(heights, 'height', binwidth=1)
    path = save_figure(fig, 'heights', tmp_path / 'nested')
    assert path == tmp_path / 'nested' / 'heights.png'
    assert path.exists()
