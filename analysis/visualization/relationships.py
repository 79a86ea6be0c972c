#!/usr/bin/env python3
"""
Relationship Charts

Scatterplots (labelled, log-scaled, faceted), time series, slope charts
and average/difference plots.

Usage:
    from analysis.visualization.relationships import labelled_scatter, faceted_scatter

    fig = labelled_scatter(murders, 'population_millions', 'total', label='abb',
                           hue='region', log_scale=True, reference_rate=r)
    fig = faceted_scatter(gapminder_1962_2012, 'fertility', 'life_expectancy',
                          hue='continent', row='continent', col='year')
"""

import numpy as np
import pandas as pd
import seaborn as sns
from typing import Dict, Optional, Sequence, Tuple

from config.settings import REFERENCE_LINE, COLOR_BLIND_FRIENDLY
from analysis.visualization.style import drop_missing, log10_axes, figure_axes, category_levels


def labelled_scatter(data: pd.DataFrame, x: str, y: str, label: Optional[str] = None,
                     hue: Optional[str] = None, size: float = 3, color: str = 'black',
                     log_scale: bool = False, reference_rate: Optional[float] = None,
                     nudge_x: float = 0.0, title: Optional[str] = None,
                     xlabel: Optional[str] = None, ylabel: Optional[str] = None,
                     legend_title: Optional[str] = None, ax=None):
    """
    Scatterplot with optional text labels, colour groups and a reference line

    Args:
        label: Column with point labels (e.g. state abbreviations)
        hue: Column coloring the points
        size: Point size in ggplot-like units (scaled to matplotlib area)
        log_scale: Log10 scale on both axes
        reference_rate: Draw y = reference_rate * x (a straight line of
                        slope one on log axes)
        nudge_x: Horizontal label offset (in log10 units on log axes)
        legend_title: Title of the hue legend
    """
    data = drop_missing(data, [x, y, label, hue])
    fig, ax = figure_axes(ax)

    if reference_rate is not None:
        xs = np.linspace(data[x].min(), data[x].max(), 200)
        ax.plot(xs, reference_rate * xs, zorder=1, **REFERENCE_LINE)

    point_size = (size * 4) ** 2 / 2
    if hue is None:
        ax.scatter(data[x], data[y], s=point_size, color=color, zorder=2)
    else:
        levels = category_levels(data[hue])
        palette = sns.color_palette(n_colors=len(levels))
        for level, c in zip(levels, palette):
            sub = data[data[hue] == level]
            ax.scatter(sub[x], sub[y], s=point_size, color=c, label=str(level), zorder=2)
        ax.legend(title=legend_title or hue)

    if label is not None:
        for _, row in data.iterrows():
            x_text = row[x] * 10 ** nudge_x if log_scale else row[x] + nudge_x
            ax.text(x_text, row[y], str(row[label]), fontsize=8, zorder=3,
                    ha='left' if nudge_x else 'center', va='center')

    if log_scale:
        log10_axes(ax)

    ax.set_xlabel(xlabel or x)
    ax.set_ylabel(ylabel or y)
    if title:
        ax.set_title(title)
    return fig


def faceted_scatter(data: pd.DataFrame, x: str, y: str, hue: Optional[str] = None,
                    row: Optional[str] = None, col: Optional[str] = None,
                    wrap: Optional[int] = None, height: float = 3.5):
    """
    Scatterplot split into panels, one per level of row/col

    Args:
        row, col: Facet variables (grid layout)
        wrap: Wrap the col panels into this many columns (requires col, no row)
    """
    if wrap is not None and (col is None or row is not None):
        raise ValueError('wrap needs a col facet and no row facet')
    data = drop_missing(data, [x, y, hue, row, col])

    g = sns.relplot(
        data=data, x=x, y=y, hue=hue, row=row, col=col, col_wrap=wrap,
        hue_order=category_levels(data[hue]) if hue else None,
        row_order=category_levels(data[row]) if row else None,
        col_order=category_levels(data[col]) if col else None,
        kind='scatter', height=height, aspect=1.2, facet_kws={'margin_titles': wrap is None}
    )
    return g.figure


def time_series(data: pd.DataFrame, x: str, y: str, group: Optional[str] = None,
                kind: str = 'line', labels: Optional[Dict[str, Tuple[float, float]]] = None,
                colored: bool = True, ax=None):
    """
    Values over time, one line per group

    Args:
        group: Column separating the series (e.g. country)
        kind: 'line' or 'point'
        labels: {group: (x, y)} positions for in-plot labels; when given, the
                legend is replaced by labels drawn in the series colour
        colored: Colour each group; otherwise every line is black
    """
    if kind not in ('line', 'point'):
        raise ValueError(f"kind must be 'line' or 'point', got '{kind}'")
    data = drop_missing(data, [x, y, group]).sort_values(x)
    fig, ax = figure_axes(ax)

    groups = category_levels(data[group]) if group else [None]
    palette = sns.color_palette(n_colors=len(groups)) if colored else ['black'] * len(groups)
    colors = dict(zip(groups, palette))

    for level in groups:
        sub = data if level is None else data[data[group] == level]
        name = None if level is None else str(level)
        if kind == 'line':
            ax.plot(sub[x], sub[y], color=colors[level], label=name)
        else:
            ax.scatter(sub[x], sub[y], color=colors[level], label=name)

    if labels:
        for level, (lx, ly) in labels.items():
            ax.text(lx, ly, str(level), color=colors.get(level, 'black'), fontsize=12)
    elif group is not None and colored:
        ax.legend(title=group)

    ax.set_xlabel(x)
    ax.set_ylabel(y)
    return fig


def slope_chart(data: pd.DataFrame, x: str, y: str, group: str,
                nudge: Optional[Dict[str, float]] = None, ylabel: Optional[str] = None, ax=None):
    """
    Compare two time points: one line per group joining its two values

    Labels sit left of the first point and right of the second.

    Args:
        x: Column with exactly two distinct values (e.g. year)
        nudge: {group: offset} extra horizontal offset of the right-hand
               label, for labels that would overlap
    """
    data = drop_missing(data, [x, y, group])
    points = category_levels(data[x])
    if len(points) != 2:
        raise ValueError(f'slope_chart needs exactly two {x} values, got {len(points)}')

    nudge = nudge or {}
    fig, ax = figure_axes(ax, figsize=(6, 8))
    groups = category_levels(data[group])
    palette = dict(zip(groups, sns.color_palette(n_colors=len(groups))))

    for level in groups:
        sub = data[data[group] == level].set_index(x)[y].reindex(points)
        ax.plot([1, 2], sub.values, color=palette[level])
        if pd.notna(sub.iloc[0]):
            ax.text(0.97, sub.iloc[0], str(level), ha='right', va='center', fontsize=8)
        if pd.notna(sub.iloc[1]):
            ax.text(2.03 + nudge.get(level, 0.0), sub.iloc[1], str(level), ha='left',
                    va='center', fontsize=8)

    ax.set_xticks([1, 2])
    ax.set_xticklabels([str(p) for p in points])
    ax.set_xlim(0.4, 2.6)
    ax.set_xlabel('')
    ax.set_ylabel(ylabel or y)
    return fig


def average_difference_plot(table: pd.DataFrame, label: str, x: str = 'average',
                            y: str = 'difference', xlabel: Optional[str] = None,
                            ylabel: Optional[str] = None, identity_line: bool = False, ax=None):
    """
    Difference between two measurements against their average, points labelled

    A dashed line marks zero difference, or y = x with identity_line
    (geom_abline's default line).
    """
    table = drop_missing(table, [x, y, label])
    fig, ax = figure_axes(ax)
    ax.scatter(table[x], table[y], color='black')
    for _, row in table.iterrows():
        ax.annotate(str(row[label]), (row[x], row[y]), textcoords='offset points',
                    xytext=(4, 4), fontsize=8)
    if identity_line:
        ax.axline((0, 0), slope=1, color='black', linestyle='--', linewidth=1)
    else:
        ax.axhline(0, color='black', linestyle='--', linewidth=1)
    ax.set_xlabel(xlabel or x)
    ax.set_ylabel(ylabel or y)
    return fig


def colour_swatch(palette: Sequence[str] = COLOR_BLIND_FRIENDLY, ax=None):
    """One large point per colour along the diagonal"""
    fig, ax = figure_axes(ax, figsize=(6, 6))
    positions = np.arange(1, len(palette) + 1)
    ax.scatter(positions, positions, c=list(palette), s=250)
    for pos, c in zip(positions, palette):
        ax.annotate(c, (pos, pos), textcoords='offset points', xytext=(10, -4), fontsize=8)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    return fig
