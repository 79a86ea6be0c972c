"""
Category ordering helpers

Plots order categorical axes by their levels, so sorting a bar chart or a
boxplot means reordering the levels of the category by a statistic of
another column.
"""

import numpy as np
import pandas as pd


def reorder(categories, values, func='mean'):
    """
    Order category levels by a per-level statistic of values

    Args:
        categories: Sequence or Series of labels
        values: Numeric values aligned with categories
        func: Aggregation name or callable ('mean', 'median', ...)

    Returns:
        Categorical (Series if categories is a Series) whose levels are
        sorted ascending by the statistic; levels with a missing statistic
        go last
    """
    index = categories.index if isinstance(categories, pd.Series) else None
    labels = pd.Series(np.asarray(categories, dtype=object))
    numbers = pd.Series(np.asarray(values, dtype=float))

    if len(labels) != len(numbers):
        raise ValueError(
            f'categories and values must have the same length ({len(labels)} != {len(numbers)})'
        )

    stats = numbers.groupby(labels).agg(func)
    order = stats.sort_values(kind='mergesort', na_position='last').index.tolist()

    reordered = pd.Categorical(labels, categories=order)
    if index is not None:
        return pd.Series(reordered, index=index, name=categories.name)
    return reordered
