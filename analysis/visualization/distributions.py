#!/usr/bin/env python3
"""
Distribution Charts

Histograms, smooth densities, QQ-plots, ECDFs, boxplots, strip/jitter
plots and bar charts built with matplotlib and seaborn.

All builders:
- take a DataFrame and column names (vectors are accepted where noted)
- drop rows with missing plotted values, warning how many were removed
- return the matplotlib Figure (draw into `ax` when one is given)

Usage:
    from analysis.visualization.distributions import histogram, density_plot

    fig = histogram(heights[heights['sex'] == 'Male'], 'height', binwidth=1)
    fig = density_plot(gapminder, 'dollars_per_day', hue='group', log2=True, row='year')
"""

import warnings

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from scipy import stats
from typing import Optional, Sequence

from config.settings import FIGURE_SIZE, HUE_COLOR, HIST_FILL, HIST_EDGE
from analysis.statistics import sample_sd, standard_units
from analysis.visualization.style import (
    as_frame, drop_missing, log2_axis, rotate_xticklabels, figure_axes, category_levels
)
from data_engineering.features.factors import reorder


# ============================================================================
# HELPERS
# ============================================================================

def _positive_only(data: pd.DataFrame, column: str) -> pd.DataFrame:
    """Mask non-positive values before a log transform"""
    return data.assign(**{column: data[column].where(data[column] > 0)})


def histogram_edges(values, binwidth: Optional[float] = None, bins: Optional[int] = None,
                    log2: bool = False) -> np.ndarray:
    """
    Bin edges covering the data, placed like geom_histogram

    With binwidth w, bins are centred on multiples of w (edges at
    k * w + w / 2). Otherwise `bins` bins (30 by default) of width
    range / (bins - 1) are centred on the smallest value. With log2, bins
    are built on the log2 scale and returned on the original scale.
    """
    values = np.asarray(values, dtype=float)
    if len(values) == 0:
        raise ValueError('Cannot bin an empty set of values')
    if log2:
        values = np.log2(values)

    vmin, vmax = values.min(), values.max()
    if binwidth is not None:
        if binwidth <= 0:
            raise ValueError(f'binwidth must be positive, got {binwidth}')
        start = np.floor((vmin - binwidth / 2) / binwidth) * binwidth + binwidth / 2
        # Bins are closed on the right, so the first edge must lie below vmin
        if start >= vmin:
            start -= binwidth
        n_bins = max(1, int(np.ceil((vmax - start) / binwidth)))
        edges = start + binwidth * np.arange(n_bins + 1)
    else:
        bins = bins or 30
        if vmin == vmax or bins == 1:
            width = 1.0 if vmin == vmax else vmax - vmin
        else:
            width = (vmax - vmin) / (bins - 1)
        edges = vmin - width / 2 + width * np.arange(bins + 1)

    return 2 ** edges if log2 else edges


def right_closed_counts(values, edges) -> np.ndarray:
    """Counts per bin (edges[i], edges[i + 1]], the first bin also closed on the left"""
    values = np.asarray(values, dtype=float)
    index = np.searchsorted(edges, values, side='left') - 1
    index[values == edges[0]] = 0
    inside = (index >= 0) & (index < len(edges) - 1)
    return np.bincount(index[inside], minlength=len(edges) - 1)


def _hist(values, bins, density=False, color=HIST_FILL, edgecolor=HIST_EDGE, ax=None, **kwargs):
    """ax.hist over precomputed right-closed counts"""
    ax = ax or plt.gca()
    edges = np.asarray(bins, dtype=float)
    counts = right_closed_counts(values, edges)
    mids = (edges[:-1] + edges[1:]) / 2
    return ax.hist(mids, bins=edges, weights=counts, density=density, color=color,
                   edgecolor=edgecolor, **kwargs)


def bw_nrd0(values) -> float:
    """Silverman's rule-of-thumb bandwidth (R's default for density)"""
    values = np.asarray(values, dtype=float)
    hi = sample_sd(values)
    q75, q25 = np.percentile(values, [75, 25])
    lo = min(hi, (q75 - q25) / 1.34)
    if not lo:
        lo = hi or abs(values[0]) or 1.0
    return 0.9 * lo * len(values) ** (-0.2)


def kde_curve(values, grid, bw: Optional[float] = None, adjust: float = 1) -> np.ndarray:
    """
    Gaussian kernel density evaluated on a grid

    Args:
        values: Data (at least two distinct values)
        grid: Points to evaluate at
        bw: Kernel standard deviation in data units (default: bw_nrd0)
        adjust: Multiplier on the bandwidth; larger is smoother
    """
    values = np.asarray(values, dtype=float)
    bandwidth = (bw if bw is not None else bw_nrd0(values)) * adjust
    kde = stats.gaussian_kde(values, bw_method=bandwidth / sample_sd(values))
    return kde(grid)


# ============================================================================
# HISTOGRAMS AND DENSITIES
# ============================================================================

def histogram(data, x: str = 'x', binwidth: Optional[float] = None, bins: Optional[int] = None,
              log2: bool = False, density: bool = False, row: Optional[str] = None,
              col: Optional[str] = None, color: str = HIST_FILL, edgecolor: str = HIST_EDGE,
              xlabel: Optional[str] = None, title: Optional[str] = None, ax=None):
    """
    Histogram, optionally faceted by row and/or column variables

    Args:
        data: DataFrame, or a vector (then x names it)
        x: Column to bin
        binwidth: Bin width (on the log2 scale when log2=True)
        bins: Number of bins when binwidth is not given (default 30)
        log2: Bin and display on a log2 axis
        density: Bar heights as densities instead of counts
        row, col: Facet variables (one panel per level)
    """
    data = as_frame(data, x)
    if log2:
        data = _positive_only(data, x)
    data = drop_missing(data, [x, row, col])

    edges = histogram_edges(data[x], binwidth=binwidth, bins=bins, log2=log2)
    ylabel = 'density' if density else 'count'

    if row is not None or col is not None:
        g = sns.FacetGrid(data, row=row, col=col, margin_titles=True, height=3, aspect=1.6,
                          row_order=category_levels(data[row]) if row else None,
                          col_order=category_levels(data[col]) if col else None)
        g.map(_hist, x, bins=edges, density=density, color=color, edgecolor=edgecolor)
        if log2:
            for facet_ax in g.axes.flat:
                log2_axis(facet_ax)
        g.set_axis_labels(xlabel or x, ylabel)
        if title:
            g.figure.suptitle(title, y=1.02)
        return g.figure

    fig, ax = figure_axes(ax)
    _hist(data[x], edges, density=density, color=color, edgecolor=edgecolor, ax=ax)
    if log2:
        log2_axis(ax)
    ax.set_xlabel(xlabel or x)
    ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    return fig


def density_plot(data, x: str = 'x', hue: Optional[str] = None, adjust: float = 1,
                 bw: Optional[float] = None, alpha: float = 0.2, fill: bool = True,
                 count: bool = False, stacked: bool = False, log2: bool = False,
                 row: Optional[str] = None, color: str = HIST_FILL,
                 linewidth: float = 1.5, n_points: int = 512,
                 xlabel: Optional[str] = None, title: Optional[str] = None, ax=None):
    """
    Smooth density curves, optionally one per hue level and one panel per row level

    Args:
        data: DataFrame, or a vector (then x names it)
        hue: Grouping variable drawn as separate (filled) curves
        adjust: Bandwidth multiplier
        bw: Bandwidth in data units (log2 units when log2=True)
        alpha: Fill transparency
        count: Scale each curve by its group size, so areas are proportional
               to the number of observations
        stacked: Stack the curves on top of each other
        log2: Estimate on the log2 scale and display a log2 axis
        row: Facet variable (one panel per level, shared x axis)
    """
    data = as_frame(data, x)
    if log2:
        data = _positive_only(data, x)
    data = drop_missing(data, [x, hue, row])

    values = np.log2(data[x]) if log2 else data[x].astype(float)
    grid = np.linspace(values.min(), values.max(), n_points)
    xs = 2 ** grid if log2 else grid

    row_levels = category_levels(data[row]) if row else [None]
    hue_levels = category_levels(data[hue]) if hue else [None]
    colors = dict(zip(hue_levels, sns.color_palette(n_colors=len(hue_levels)))) if hue else {None: color}

    if row is not None:
        fig, axes = plt.subplots(len(row_levels), 1, sharex=True, squeeze=False,
                                 figsize=(FIGURE_SIZE[0], 3 * len(row_levels)))
        axes = axes[:, 0]
    else:
        fig, single = figure_axes(ax)
        axes = [single]

    for panel_ax, row_level in zip(axes, row_levels):
        panel = data if row is None else data[data[row] == row_level]
        base = np.zeros_like(grid)

        for hue_level in hue_levels:
            group = panel if hue is None else panel[panel[hue] == hue_level]
            group_values = values.loc[group.index]
            if group_values.nunique() < 2:
                warnings.warn(f'Groups with fewer than two distinct values are dropped: {hue_level}',
                              UserWarning, stacklevel=2)
                continue

            y = kde_curve(group_values, grid, bw=bw, adjust=adjust)
            if count:
                y = y * len(group_values)

            lower = base if stacked else np.zeros_like(grid)
            upper = lower + y
            if stacked:
                base = upper

            c = colors[hue_level]
            label = None if hue is None else str(hue_level)
            if fill:
                panel_ax.fill_between(xs, lower, upper, color=c, alpha=alpha, label=label)
                panel_ax.plot(xs, upper, color=c, linewidth=linewidth)
            else:
                panel_ax.plot(xs, upper, color=c, linewidth=linewidth, label=label)

        if log2:
            log2_axis(panel_ax)
        panel_ax.set_ylabel('count' if count else 'density')
        if row is not None:
            panel_ax.set_title(f'{row} = {row_level}', fontsize=10)
        if hue is not None:
            panel_ax.legend(title=hue)

    axes[-1].set_xlabel(xlabel or x)
    if title:
        fig.suptitle(title)
    return fig


def histogram_with_density(data, x: str = 'x', binwidth: float = 1, adjust: float = 1,
                           color: str = HUE_COLOR, ax=None):
    """Density-scaled histogram with a smooth density curve on top"""
    data = drop_missing(as_frame(data, x), [x])
    fig, ax = figure_axes(ax)

    edges = histogram_edges(data[x], binwidth=binwidth)
    _hist(data[x], edges, density=True, color='grey', edgecolor='white', ax=ax)
    grid = np.linspace(data[x].min(), data[x].max(), 512)
    ax.plot(grid, kde_curve(data[x], grid, adjust=adjust), color=color, linewidth=2)

    ax.set_xlabel(x)
    ax.set_ylabel('density')
    return fig


def smoothness_comparison(data, x: str = 'x', adjusts: Sequence[float] = (0.5, 2),
                          binwidth: float = 1):
    """Side-by-side histograms with densities of different smoothness"""
    fig, axes = plt.subplots(1, len(adjusts), figsize=(6 * len(adjusts), 5), squeeze=False)
    for ax, adjust in zip(axes[0], adjusts):
        histogram_with_density(data, x, binwidth=binwidth, adjust=adjust, ax=ax)
        ax.set_title(f'adjust = {adjust:g}')
    fig.tight_layout()
    return fig


def binwidth_comparison(data, x: str = 'x', binwidths: Sequence[float] = (1, 2, 3)):
    """The same histogram with several bin widths, side by side"""
    fig, axes = plt.subplots(1, len(binwidths), figsize=(5 * len(binwidths), 4), squeeze=False)
    for ax, width in zip(axes[0], binwidths):
        histogram(data, x, binwidth=width, color='blue', ax=ax, title=f'binwidth = {width:g}')
    fig.tight_layout()
    return fig


# ============================================================================
# QUANTILES
# ============================================================================

def ppoints(n: int) -> np.ndarray:
    """Probability points (i - a) / (n + 1 - 2a), a = 3/8 for n <= 10 else 1/2"""
    a = 3 / 8 if n <= 10 else 0.5
    return (np.arange(1, n + 1) - a) / (n + 1 - 2 * a)


def qq_plot(data, sample: str = 'x', params=None, standardize: bool = False,
            identity_line: bool = False, ax=None):
    """
    QQ-plot of every observation against normal quantiles

    Args:
        data: DataFrame, or a vector (then sample names it)
        sample: Column holding the sample
        params: None for N(0, 1), 'fit' for the sample's average and SD,
                or a dict with 'mean' and 'sd'
        standardize: Convert the sample to standard units first
        identity_line: Draw the line y = x
    """
    data = drop_missing(as_frame(data, sample), [sample])
    values = data[sample].to_numpy(dtype=float)
    if standardize:
        values = standard_units(values)

    if params is None:
        loc, scale = 0.0, 1.0
    elif params == 'fit':
        loc, scale = values.mean(), sample_sd(values)
    else:
        loc, scale = params['mean'], params['sd']

    theoretical = stats.norm.ppf(ppoints(len(values)), loc=loc, scale=scale)

    fig, ax = figure_axes(ax)
    ax.scatter(theoretical, np.sort(values), s=12, color='black')
    if identity_line:
        ax.axline((0, 0), slope=1, color='black', linewidth=1)
    ax.set_xlabel('theoretical')
    ax.set_ylabel('sample')
    return fig


def qq_scatter(points: pd.DataFrame, identity_line: bool = True, ax=None):
    """Plot observed against theoretical quantiles (see statistics.qq_points)"""
    fig, ax = figure_axes(ax)
    ax.scatter(points['theoretical'], points['observed'], color='black')
    if identity_line:
        ax.axline((0, 0), slope=1, color='black', linewidth=1)
    ax.set_xlabel('theoretical_quantiles')
    ax.set_ylabel('observed_quantiles')
    return fig


def ecdf_plot(data, x: str = 'x', hue: Optional[str] = None, ax=None):
    """Empirical CDF: proportion of values at or below each value"""
    data = drop_missing(as_frame(data, x), [x, hue])
    fig, ax = figure_axes(ax)
    sns.ecdfplot(data=data, x=x, hue=hue, ax=ax)
    ax.set_ylabel('F(a)')
    return fig


# ============================================================================
# CATEGORIES
# ============================================================================

def boxplot(data: pd.DataFrame, x: str, y: str, hue: Optional[str] = None,
            order: Optional[list] = None, log2: bool = False, rotate_labels: bool = False,
            show_points: bool = False, whis: float = 1.5, row: Optional[str] = None,
            dodge=None, xlabel: Optional[str] = None, ylabel: Optional[str] = None,
            title: Optional[str] = None, ax=None):
    """
    Boxplot of y per category of x

    Args:
        hue: Fill variable; nested hues (one per x level) are not dodged
        order: Category order (default: category order, else sorted)
        log2: Log2 y axis
        show_points: Overlay the individual observations
        whis: Whisker reach in IQRs
        row: Facet variable (one panel per level, shared x axis)
        dodge: Force or prevent side-by-side boxes for hue levels
    """
    if log2:
        data = _positive_only(data, y)
    data = drop_missing(data, [x, y, hue, row])
    order = order or category_levels(data[x])

    extra = {} if dodge is None else {'dodge': dodge}
    hue_order = category_levels(data[hue]) if hue else None

    row_levels = category_levels(data[row]) if row else [None]
    if row is not None:
        fig, axes = plt.subplots(len(row_levels), 1, sharex=True, squeeze=False,
                                 figsize=(FIGURE_SIZE[0], 4 * len(row_levels)))
        axes = axes[:, 0]
    else:
        fig, single = figure_axes(ax)
        axes = [single]

    for panel_ax, row_level in zip(axes, row_levels):
        panel = data if row is None else data[data[row] == row_level]
        sns.boxplot(data=panel, x=x, y=y, hue=hue, order=order, hue_order=hue_order,
                    whis=whis, ax=panel_ax, **extra)
        if show_points:
            sns.stripplot(data=panel, x=x, y=y, order=order, color='black', size=3,
                          jitter=False, ax=panel_ax)
        if log2:
            log2_axis(panel_ax, axis='y')
        if rotate_labels:
            rotate_xticklabels(panel_ax)
        panel_ax.set_xlabel(xlabel if xlabel is not None else x)
        panel_ax.set_ylabel(ylabel or y)
        if row is not None:
            panel_ax.set_title(f'{row} = {row_level}', fontsize=10)

    if title:
        fig.suptitle(title)
    return fig


def jitter_plot(data: pd.DataFrame, x: str, y: str, width: float = 0.1, alpha: float = 0.2,
                with_boxplot: bool = False, whis: float = 3, ylabel: Optional[str] = None, ax=None):
    """
    Every observation per category, jittered horizontally so points do not overlap

    With with_boxplot, a boxplot (whiskers at `whis` IQRs) is drawn underneath.
    """
    data = drop_missing(data, [x, y])
    order = category_levels(data[x])
    fig, ax = figure_axes(ax)

    if with_boxplot:
        sns.boxplot(data=data, x=x, y=y, order=order, whis=whis, color='white',
                    showfliers=True, ax=ax)
    sns.stripplot(data=data, x=x, y=y, order=order, jitter=width, alpha=alpha,
                  color='black', ax=ax)

    ax.set_ylabel(ylabel or y)
    return fig


def point_strip(data: pd.DataFrame, x: str, y: str, ylim=None, ax=None):
    """Points per category without jitter, optionally with fixed y limits"""
    data = drop_missing(data, [x, y])
    fig, ax = figure_axes(ax)
    sns.stripplot(data=data, x=x, y=y, order=category_levels(data[x]), jitter=False,
                  color='black', ax=ax)
    if ylim is not None:
        ax.set_ylim(*ylim)
    return fig


def limits_comparison(data: pd.DataFrame, x: str, y: str, limits=(0, 84)):
    """The same points with axis limits forced to include zero (left) and fitted to the data (right)"""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    point_strip(data, x, y, ylim=limits, ax=axes[0])
    point_strip(data, x, y, ax=axes[1])
    fig.tight_layout()
    return fig


def bar_chart(data: pd.DataFrame, category: str, value: str, ordered: bool = False,
              horizontal: bool = True, xlabel: str = '', ax=None):
    """
    One bar per row (values used as-is)

    Args:
        ordered: Sort bars by value instead of alphabetically
        horizontal: Bars run left to right with categories on the y axis
    """
    data = drop_missing(data, [category, value])
    if ordered:
        labels = reorder(data[category].astype(str), data[value], func='mean')
        order = list(labels.cat.categories)
    else:
        order = sorted(data[category].astype(str).unique())

    heights = data.assign(**{category: data[category].astype(str)}).set_index(category)[value]
    heights = heights.reindex(order)
    positions = np.arange(len(order))

    fig, ax = figure_axes(ax, figsize=(6, max(4, 0.18 * len(order))) if horizontal else None)
    if horizontal:
        ax.barh(positions, heights.values, color='dimgrey')
        ax.set_yticks(positions)
        ax.set_yticklabels(order, fontsize=7)
        ax.set_ylabel(xlabel)
        ax.set_xlabel(value)
    else:
        ax.bar(positions, heights.values, color='dimgrey')
        ax.set_xticks(positions)
        ax.set_xticklabels(order)
        rotate_xticklabels(ax)
        ax.set_xlabel(xlabel)
        ax.set_ylabel(value)
    return fig
