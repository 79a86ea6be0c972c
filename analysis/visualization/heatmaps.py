"""
Contagious disease charts: state-by-year heatmap and state trend lines

Both use a square-root colour/axis scale so the pre-vaccine peaks do not
wash out the small post-vaccine rates.
"""

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.colors import PowerNorm
from typing import Optional, Sequence

from config.settings import VACCINE_YEAR, DISEASE_TREND_BREAKS
from analysis.visualization.style import drop_missing, category_levels


def disease_heatmap(rates: pd.DataFrame, disease: str, marker_year: Optional[int] = VACCINE_YEAR,
                    value: str = 'rate'):
    """
    One tile per state and year coloured by rate

    Args:
        rates: Output of add_disease_rate (state ordered by rate)
        disease: Title
        marker_year: Draw a vertical line at this year (None to skip)
    """
    rates = drop_missing(rates, ['year', 'state', value])
    states = category_levels(rates['state'])
    table = rates.pivot_table(index='state', columns='year', values=value,
                              aggfunc='mean', observed=True)
    table = table.reindex(states)

    years = table.columns.to_numpy(dtype=float)
    x_edges = np.append(years - 0.5, years[-1] + 0.5)
    y_edges = np.arange(len(states) + 1)

    fig, ax = plt.subplots(figsize=(10, max(6, 0.2 * len(states))))
    mesh = ax.pcolormesh(x_edges, y_edges, table.to_numpy(dtype=float),
                         cmap='Reds', norm=PowerNorm(gamma=0.5),
                         edgecolors='grey', linewidth=0.1)
    fig.colorbar(mesh, ax=ax, label=value)

    if marker_year is not None:
        ax.axvline(marker_year, color='blue')

    ax.set_yticks(y_edges[:-1] + 0.5)
    ax.set_yticklabels([str(s) for s in states], fontsize=7)
    ax.set_xlim(x_edges[0], x_edges[-1])
    ax.grid(False)
    ax.set_title(disease)
    ax.set_xlabel('')
    ax.set_ylabel('')
    return fig


def disease_trends(rates: pd.DataFrame, us_average: pd.DataFrame,
                   marker_year: Optional[int] = VACCINE_YEAR,
                   breaks: Sequence[float] = DISEASE_TREND_BREAKS,
                   title: str = 'Cases per 10,000 by state', label_at=(1955, 50)):
    """
    Faint line per state with the US average on top, square-root y axis

    Args:
        rates: Output of add_disease_rate
        us_average: Output of us_disease_average (year, us_rate)
        breaks: Y axis tick positions
        label_at: (x, y) of the 'US average' label, None to skip
    """
    rates = drop_missing(rates, ['year', 'rate', 'state'])
    fig, ax = plt.subplots(figsize=(10, 6))

    for _, state_rates in rates.groupby('state', observed=True):
        state_rates = state_rates.sort_values('year')
        ax.plot(state_rates['year'], state_rates['rate'], color='grey', alpha=0.2, linewidth=1)

    avg = us_average.dropna().sort_values('year')
    ax.plot(avg['year'], avg['us_rate'], color='black', linewidth=1.5)

    ax.set_yscale('function', functions=(np.sqrt, np.square))
    ax.set_yticks(list(breaks))
    ax.set_yticklabels([f'{b:g}' for b in breaks])

    if marker_year is not None:
        ax.axvline(marker_year, color='blue')
    if label_at is not None:
        ax.text(label_at[0], label_at[1], 'US average', color='black')

    ax.set_title(title)
    ax.set_xlabel('')
    ax.set_ylabel('')
    return fig
