"""
Per-capita rates for the murders and contagious disease datasets

Usage:
    from data_engineering.features.rates import add_murder_rate, us_murder_rate

    murders = add_murder_rate(murders)
    rate = us_murder_rate(murders)
"""

import numpy as np
import pandas as pd

from config.settings import DISEASE_EXCLUDED_STATES
from data_engineering.features.factors import reorder


def add_murder_rate(murders: pd.DataFrame, per: float = 100000) -> pd.DataFrame:
    """Add murder_rate = total / population * per"""
    out = murders.copy()
    out['murder_rate'] = out['total'] / out['population'] * per
    return out


def us_murder_rate(murders: pd.DataFrame, per: float = 100000) -> float:
    """
    Country-wide murder rate

    Weighted by population (total murders over total population), so it is
    not the average of the state rates: small states count less.
    """
    return float(murders['total'].sum() / murders['population'].sum() * per)


def add_disease_rate(diseases: pd.DataFrame, disease: str,
                     exclude_states=DISEASE_EXCLUDED_STATES) -> pd.DataFrame:
    """
    Yearly cases per 10,000 people for one disease, by state

    The count is annualised by weeks_reporting. Years with no reporting
    weeks get a missing rate. States are reordered by their mean rate.

    Args:
        diseases: us_contagious_diseases table
        disease: Disease name (e.g. 'Measles')
        exclude_states: States left out of the plot

    Returns:
        Filtered copy with a 'rate' column and 'state' as an ordered categorical
    """
    dat = diseases[
        (~diseases['state'].isin(exclude_states)) & (diseases['disease'] == disease)
    ].copy()

    if len(dat) == 0:
        raise ValueError(f"No records for disease '{disease}'")

    weeks = dat['weeks_reporting'].replace(0, np.nan)
    dat['rate'] = dat['count'] / dat['population'] * 10000 * 52 / weeks
    dat['state'] = reorder(dat['state'].astype(str), dat['rate'], func='mean')
    return dat


def us_disease_average(diseases: pd.DataFrame, disease: str) -> pd.DataFrame:
    """
    US-wide yearly rate per 10,000 for one disease

    Returns:
        DataFrame with columns year, us_rate
    """
    dat = diseases[diseases['disease'] == disease]
    avg = dat.groupby('year').agg(count=('count', 'sum'), population=('population', 'sum'))
    avg['us_rate'] = avg['count'] / avg['population'] * 10000
    return avg[['us_rate']].reset_index()
