"""
Shared plotting helpers: theme, missing-value handling, log axes and saving
"""

import warnings
from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.ticker as mticker
import numpy as np
import pandas as pd
import seaborn as sns

from config.settings import FIGURE_SIZE, FIGURE_DPI


def set_theme():
    """Whitegrid style and default figure size for all lesson figures"""
    sns.set_style('whitegrid')
    plt.rcParams['figure.figsize'] = FIGURE_SIZE


def as_frame(data, x='x') -> pd.DataFrame:
    """Wrap a vector in a one-column DataFrame; DataFrames pass through"""
    if isinstance(data, pd.DataFrame):
        return data
    return pd.DataFrame({x: np.asarray(data)})


def drop_missing(data: pd.DataFrame, columns) -> pd.DataFrame:
    """
    Drop rows with missing values in the plotted columns

    Warns with the number of removed rows, like ggplot does.
    Infinite values count as missing.
    """
    columns = [c for c in columns if c is not None]
    missing = [c for c in columns if c not in data.columns]
    if missing:
        raise ValueError(f'Columns not found: {missing}')

    subset = data[columns].replace([np.inf, -np.inf], np.nan)
    keep = subset.notna().all(axis=1)
    removed = int((~keep).sum())
    if removed > 0:
        warnings.warn(f'Removed {removed} rows containing missing values',
                      UserWarning, stacklevel=3)
    return data[keep]


def log2_axis(ax, axis='x'):
    """Log base 2 scale with plain (non-exponent) tick labels"""
    formatter = mticker.FuncFormatter(lambda v, _: f'{v:g}')
    if axis == 'x':
        ax.set_xscale('log', base=2)
        ax.xaxis.set_major_formatter(formatter)
    else:
        ax.set_yscale('log', base=2)
        ax.yaxis.set_major_formatter(formatter)


def log10_axes(ax):
    """Log base 10 scale on both axes"""
    ax.set_xscale('log', base=10)
    ax.set_yscale('log', base=10)
    formatter = mticker.FuncFormatter(lambda v, _: f'{v:g}')
    ax.xaxis.set_major_formatter(formatter)
    ax.yaxis.set_major_formatter(formatter)


def rotate_xticklabels(ax, angle=90):
    """Vertical category labels, right aligned"""
    for label in ax.get_xticklabels():
        label.set_rotation(angle)
        label.set_horizontalalignment('right')


def save_figure(fig, name: str, output_dir, dpi: int = FIGURE_DPI) -> Path:
    """
    Save a figure as PNG and close it

    Args:
        fig: matplotlib Figure
        name: File stem (no extension)
        output_dir: Destination directory (created if needed)
        dpi: Resolution

    Returns:
        Path of the saved file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f'{name}.png'
    fig.savefig(path, dpi=dpi, bbox_inches='tight')
    plt.close(fig)
    return path


def figure_axes(ax=None, figsize=None):
    """New figure and axes, or the figure owning the given axes"""
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize or FIGURE_SIZE)
        return fig, ax
    return ax.figure, ax


def category_levels(series: pd.Series) -> list:
    """Observed levels, in category order for categoricals, sorted otherwise"""
    if isinstance(series.dtype, pd.CategoricalDtype):
        present = set(series.dropna())
        return [level for level in series.cat.categories if level in present]
    return sorted(series.dropna().unique())
