"""
Data loading utilities for the reference datasets
Reads the CSV exports, validates them and restores factor columns
"""

import pandas as pd
from pathlib import Path
from typing import Optional, Union

from config.paths import DATASET_FILES, dataset_path
from config.settings import SEX_LEVELS, MURDER_REGION_LEVELS
from data_engineering.utils.validation import validate_dataset

# Columns R stores as factors, with their level order when it matters
CATEGORICAL_COLUMNS = {
    'murders': {'region': MURDER_REGION_LEVELS},
    'heights': {'sex': SEX_LEVELS},
    'gapminder': {'continent': None, 'region': None},
    'nhanes': {'Gender': ['female', 'male'], 'AgeDecade': None, 'Race1': None},
    'us_contagious_diseases': {'disease': None, 'state': None},
}

# Columns that must be read as text
TEXT_COLUMNS = {
    'reported_heights': {'height': str, 'time_stamp': str, 'sex': str},
}


def load_dataset(name: str, data_dir: Optional[Union[str, Path]] = None,
                 validate: bool = True, verbose: bool = False) -> pd.DataFrame:
    """
    Load one reference dataset

    Args:
        name: Dataset name (murders, heights, reported_heights, gapminder,
              nhanes, us_contagious_diseases)
        data_dir: Directory holding <name>.csv (None for data/bronze/reference)
        validate: Validate against the dataset's pandera schema
        verbose: Print validation progress and quality checks

    Returns:
        DataFrame with factor columns as pandas categoricals

    Raises:
        ValueError: Unknown dataset name
        FileNotFoundError: CSV export missing
    """
    file_path = dataset_path(name, data_dir)

    if not file_path.exists():
        raise FileNotFoundError(
            f"Dataset '{name}' not found. Expected: {file_path}"
        )

    df = pd.read_csv(file_path, dtype=TEXT_COLUMNS.get(name))

    # R row names exported by write.csv
    if 'Unnamed: 0' in df.columns:
        df = df.drop(columns=['Unnamed: 0'])

    if validate:
        df = validate_dataset(df, name, verbose=verbose)

    for col, levels in CATEGORICAL_COLUMNS.get(name, {}).items():
        if col in df.columns:
            if levels is None:
                df[col] = df[col].astype('category')
            else:
                # Values outside the levels become missing
                known = df[col].where(df[col].isin(levels))
                df[col] = pd.Categorical(known, categories=levels)

    return df


def load_murders(data_dir=None) -> pd.DataFrame:
    """US gun murders by state (2010)"""
    return load_dataset('murders', data_dir)


def load_heights(data_dir=None) -> pd.DataFrame:
    """Student heights in inches by sex"""
    return load_dataset('heights', data_dir)


def load_reported_heights(data_dir=None) -> pd.DataFrame:
    """Raw self-reported heights with free-text height column"""
    return load_dataset('reported_heights', data_dir)


def load_gapminder(data_dir=None) -> pd.DataFrame:
    """Gapminder country-year indicators"""
    return load_dataset('gapminder', data_dir)


def load_nhanes(data_dir=None) -> pd.DataFrame:
    """NHANES health survey records"""
    return load_dataset('nhanes', data_dir)


def load_us_contagious_diseases(data_dir=None) -> pd.DataFrame:
    """Yearly disease counts by US state"""
    return load_dataset('us_contagious_diseases', data_dir)


def get_data_summary(data_dir=None) -> pd.DataFrame:
    """
    Availability summary of all reference datasets

    Returns:
        DataFrame with one row per dataset: name, path, exists, size_mb
    """
    rows = []
    for name in DATASET_FILES:
        file_path = dataset_path(name, data_dir)
        exists = file_path.exists()
        rows.append({
            'dataset': name,
            'path': str(file_path),
            'exists': exists,
            'size_mb': file_path.stat().st_size / (1024 * 1024) if exists else None,
        })
    return pd.DataFrame(rows)
