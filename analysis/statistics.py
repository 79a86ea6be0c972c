#!/usr/bin/env python3
"""
Summary Statistics

Numeric summaries used throughout the lessons:
- Average and standard deviation (population and sample definitions)
- Standard units and the share of values within k SDs
- Empirical CDF, quantiles, percentiles and QQ-plot points
- Normal approximation of interval probabilities
- Robust summaries (median, MAD)
- dplyr-style summarize over optional groups

Missing values propagate (like R without na.rm) except in summarize,
which removes them first by default.

Usage:
    from analysis.statistics import standard_units, qq_points, summarize

    z = standard_units(male_heights)
    points = qq_points(male_heights, standardize=True)
    summarize(heights, by='sex', average=('height', 'mean'), standard_deviation=('height', 'sd'))
"""

import numpy as np
import pandas as pd
from scipy import stats
from typing import Callable, Dict, Optional, Sequence, Union

# Default QQ-plot proportions: 0.05, 0.10, ..., 0.95
QQ_PROBS = np.round(np.arange(0.05, 0.951, 0.05), 2)


def _as_array(x) -> np.ndarray:
    return np.asarray(x, dtype=float)


# ============================================================================
# CENTER AND SPREAD
# ============================================================================

def average(x) -> float:
    """sum(x) / length(x)"""
    values = _as_array(x)
    return float(values.sum() / len(values))


def population_sd(x) -> float:
    """sqrt(sum((x - mu)^2) / length(x)): the average distance from the average"""
    values = _as_array(x)
    mu = average(values)
    return float(np.sqrt(((values - mu) ** 2).sum() / len(values)))


def sample_sd(x) -> float:
    """Standard deviation dividing by length(x) - 1 (R's sd)"""
    values = _as_array(x)
    if len(values) < 2:
        return float('nan')
    return float(np.std(values, ddof=1))


def standard_units(x) -> np.ndarray:
    """
    z = (x - average) / SD, using the sample SD

    The standard unit tells how many SDs a value is away from the average.
    """
    values = _as_array(x)
    return (values - values.mean()) / sample_sd(values)


def proportion_within(z, k: float = 2) -> float:
    """Share of standard units strictly inside (-k, k)"""
    return float(np.mean(np.abs(_as_array(z)) < k))


def mad(x) -> float:
    """Median absolute deviation scaled to be consistent with the SD of normal data"""
    return float(stats.median_abs_deviation(_as_array(x), scale='normal'))


def robust_summary(x) -> Dict[str, float]:
    """Average, SD, median and MAD side by side; outliers pull the first two apart"""
    values = _as_array(x)
    return {
        'average': average(values),
        'sd': sample_sd(values),
        'median': float(np.median(values)),
        'mad': mad(values),
    }


# ============================================================================
# DISTRIBUTIONS
# ============================================================================

def ecdf(x) -> Callable:
    """
    Empirical cumulative distribution function

    Returns:
        F such that F(a) is the proportion of values <= a (vectorised)
    """
    values = np.sort(_as_array(x))
    n = len(values)

    def F(a):
        result = np.searchsorted(values, a, side='right') / n
        return float(result) if np.ndim(result) == 0 else result

    return F


def proportion_between(x, a: float, b: float) -> float:
    """Proportion of values in the interval (a, b]"""
    values = _as_array(x)
    return float(np.mean((values > a) & (values <= b)))


def normal_probability(a: float, b: float, mean: float = 0, sd: float = 1) -> float:
    """Pr(a < X <= b) for X ~ Normal(mean, sd)"""
    return float(stats.norm.cdf(b, mean, sd) - stats.norm.cdf(a, mean, sd))


def normal_approximation(x, a: float, b: float) -> Dict[str, float]:
    """
    Compare the observed share of values in (a, b] with the normal approximation

    The normal distribution uses the data's average and sample SD.

    Returns:
        Dict with exact, approx and ratio (exact / approx)
    """
    values = _as_array(x)
    exact = proportion_between(values, a, b)
    approx = normal_probability(a, b, values.mean(), sample_sd(values))
    return {
        'exact': exact,
        'approx': approx,
        'ratio': exact / approx if approx > 0 else float('nan'),
    }


def _quantile_labels(probs) -> list:
    return [f'{p * 100:g}%' for p in probs]


def quantiles(x, probs: Sequence[float]) -> pd.Series:
    """
    Sample quantiles with linear interpolation (R type 7)

    Returns:
        Series indexed by percentage labels ('10%', '50%', ...)
    """
    probs = list(probs)
    values = np.quantile(_as_array(x), probs)
    return pd.Series(values, index=_quantile_labels(probs))


def percentile_table(groups: Dict[str, Sequence[float]], probs: Sequence[float]) -> pd.DataFrame:
    """Quantiles of several groups, one column per group"""
    return pd.DataFrame({name: quantiles(values, probs) for name, values in groups.items()})


def qq_points(x, probs: Optional[Sequence[float]] = None, standardize: bool = False) -> pd.DataFrame:
    """
    Observed vs theoretical normal quantiles

    Args:
        x: Data
        probs: Proportions (default 0.05 to 0.95 by 0.05)
        standardize: Convert to standard units and compare with N(0, 1);
                     otherwise use a normal with the data's average and SD

    Returns:
        DataFrame with columns p, theoretical, observed
    """
    probs = QQ_PROBS if probs is None else np.asarray(probs, dtype=float)
    values = _as_array(x)

    if standardize:
        values = standard_units(values)
        theoretical = stats.norm.ppf(probs)
    else:
        theoretical = stats.norm.ppf(probs, loc=values.mean(), scale=sample_sd(values))

    return pd.DataFrame({
        'p': probs,
        'theoretical': theoretical,
        'observed': np.quantile(values, probs),
    })


# ============================================================================
# FREQUENCIES
# ============================================================================

def frequency_table(x, normalize: bool = False) -> pd.Series:
    """Count (or proportion) of each distinct value, sorted by value"""
    series = pd.Series(x)
    table = series.value_counts(normalize=normalize, sort=False)
    try:
        return table.sort_index()
    except TypeError:
        return table


def count_singletons(x) -> int:
    """Number of distinct values reported exactly once"""
    return int((pd.Series(x).value_counts() == 1).sum())


def n_distinct(x) -> int:
    """Number of distinct values, missing counted as one value"""
    return int(pd.Series(x).nunique(dropna=False))


# ============================================================================
# SUMMARIZE
# ============================================================================

AGGREGATIONS: Dict[str, Callable] = {
    'mean': lambda s: s.mean(),
    'median': lambda s: s.median(),
    'min': lambda s: s.min(),
    'max': lambda s: s.max(),
    'sum': lambda s: s.sum(),
    'sd': lambda s: sample_sd(s) if len(s) else float('nan'),
    'mad': lambda s: mad(s) if len(s) else float('nan'),
    'n': lambda s: len(s),
    'n_distinct': lambda s: s.nunique(dropna=False),
}


def _resolve(func: Union[str, Callable]) -> Callable:
    if callable(func):
        return func
    if func not in AGGREGATIONS:
        raise ValueError(f"Unknown aggregation '{func}'. Available: {', '.join(AGGREGATIONS)}")
    return AGGREGATIONS[func]


def _summarize_frame(frame: pd.DataFrame, aggregations: dict, dropna: bool) -> dict:
    row = {}
    for name, (column, func) in aggregations.items():
        if column not in frame.columns:
            raise ValueError(f"Column '{column}' not found for summary '{name}'")
        values = frame[column]
        if dropna:
            values = values.dropna()
        result = _resolve(func)(values)
        if np.ndim(result) != 0:
            raise ValueError(
                f"Summary '{name}': expecting result of length one, got {np.size(result)}"
            )
        row[name] = result
    return row


def summarize(df: pd.DataFrame, by: Optional[Union[str, Sequence[str]]] = None,
              dropna: bool = True, **aggregations) -> pd.DataFrame:
    """
    Reduce a table (or each group of it) to one row of named summaries

    Args:
        df: Input table
        by: Grouping column(s); None summarizes the whole table
        dropna: Remove missing values before each summary (na.rm = TRUE)
        **aggregations: name=(column, func) where func is a name in
                        AGGREGATIONS or a callable taking a Series

    Returns:
        DataFrame with the grouping columns followed by one column per
        summary. Missing group keys form their own group.

    Raises:
        ValueError: A summary returns more than one value
    """
    if not aggregations:
        raise ValueError('summarize needs at least one name=(column, func) summary')

    if by is None:
        return pd.DataFrame([_summarize_frame(df, aggregations, dropna)])

    keys = [by] if isinstance(by, str) else list(by)
    rows = []
    for key, group in df.groupby(keys, observed=True, dropna=False, sort=True):
        key = key if isinstance(key, tuple) else (key,)
        row = dict(zip(keys, key))
        row.update(_summarize_frame(group, aggregations, dropna))
        rows.append(row)

    return pd.DataFrame(rows, columns=keys + list(aggregations))


def mean_sd(df: pd.DataFrame, column: str, by=None) -> pd.DataFrame:
    """Average and standard_deviation of one column, optionally by group"""
    return summarize(df, by=by, average=(column, 'mean'), standard_deviation=(column, 'sd'))
