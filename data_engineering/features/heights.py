"""
Self-reported height cleaning

Students typed their heights freely: inches, feet and inches (5' 4"),
centimeters (165cm) or nonsense (>9000). Only plain numbers are kept.
"""

import warnings

import pandas as pd


def coerce_reported_heights(reported: pd.DataFrame) -> pd.DataFrame:
    """
    Convert the free-text height column to numbers

    The raw text is kept in 'original_heights'. Entries that are not plain
    numbers become missing and a UserWarning reports how many.
    """
    out = reported.copy()
    out['original_heights'] = out['height']
    out['height'] = pd.to_numeric(out['height'], errors='coerce')

    introduced = int((out['height'].isna() & out['original_heights'].notna()).sum())
    if introduced > 0:
        warnings.warn(f'NAs introduced by coercion: {introduced} heights are not numbers',
                      UserWarning, stacklevel=2)
    return out


def non_numeric_heights(reported: pd.DataFrame) -> pd.DataFrame:
    """Rows whose height could not be read as a number"""
    if 'original_heights' not in reported.columns:
        with warnings.catch_warnings():
            warnings.simplefilter('ignore', UserWarning)
            reported = coerce_reported_heights(reported)
    return reported[reported['height'].isna()]
