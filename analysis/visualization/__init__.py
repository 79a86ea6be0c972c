"""
Chart builders for the lessons (matplotlib + seaborn)
"""

from .style import set_theme, save_figure, drop_missing
from .distributions import (
    histogram,
    density_plot,
    histogram_with_density,
    smoothness_comparison,
    binwidth_comparison,
    qq_plot,
    qq_scatter,
    ecdf_plot,
    boxplot,
    jitter_plot,
    point_strip,
    limits_comparison,
    bar_chart
)
from .relationships import (
    labelled_scatter,
    faceted_scatter,
    time_series,
    slope_chart,
    average_difference_plot,
    colour_swatch
)
from .heatmaps import disease_heatmap, disease_trends

__all__ = [
    'set_theme',
    'save_figure',
    'drop_missing',
    'histogram',
    'density_plot',
    'histogram_with_density',
    'smoothness_comparison',
    'binwidth_comparison',
    'qq_plot',
    'qq_scatter',
    'ecdf_plot',
    'boxplot',
    'jitter_plot',
    'point_strip',
    'limits_comparison',
    'bar_chart',
    'labelled_scatter',
    'faceted_scatter',
    'time_series',
    'slope_chart',
    'average_difference_plot',
    'colour_swatch',
    'disease_heatmap',
    'disease_trends',
]
