#!/usr/bin/env python3
"""
Reference Dataset Schema Validation

Uses pandera to validate the reference datasets for:
- Schema compliance (columns present, data types, ranges)
- Category levels (sex, region, gender)
- Data quality checks (missing values)

Usage:
    from data_engineering.utils.validation import validate_dataset

    validate_dataset(murders, 'murders')
    validate_dataset(gapminder, 'gapminder')
"""

import pandera as pa
from pandera import Column, Check
import pandas as pd

from config.settings import SEX_LEVELS, MURDER_REGION_LEVELS


# ============================================================================
# SCHEMAS
# ============================================================================

murders_schema = pa.DataFrameSchema(
    {
        'state': Column(str, nullable=False, unique=True),
        'abb': Column(str, Check.str_length(2, 2), nullable=False),
        'region': Column(str, Check.isin(MURDER_REGION_LEVELS), nullable=False),
        'population': Column(int, Check.greater_than(0), nullable=False),
        'total': Column(int, Check.greater_than_or_equal_to(0), nullable=False),
    },
    strict=False,  # Allow extra columns not defined here
    coerce=True,   # Coerce types when possible
    description='US gun murders by state for 2010'
)

heights_schema = pa.DataFrameSchema(
    {
        'sex': Column(str, Check.isin(SEX_LEVELS), nullable=False),
        'height': Column(float, Check.greater_than(0), nullable=False,
                         description='Height in inches'),
    },
    strict=False,
    coerce=True,
    description='Self-reported heights in inches (cleaned)'
)

reported_heights_schema = pa.DataFrameSchema(
    {
        'time_stamp': Column(str, nullable=False),
        'sex': Column(str, Check.isin(SEX_LEVELS), nullable=False),
        # Free text: numbers, feet/inches, centimeters, trolling
        'height': Column(str, nullable=True),
    },
    strict=False,
    coerce=True,
    description='Raw self-reported heights as typed by students'
)

gapminder_schema = pa.DataFrameSchema(
    {
        'country': Column(str, nullable=False),
        'year': Column(int, Check.in_range(1900, 2100), nullable=False),
        'infant_mortality': Column(float, Check.greater_than_or_equal_to(0), nullable=True,
                                   description='Deaths per 1000 live births'),
        'life_expectancy': Column(float, Check.in_range(0, 120), nullable=True),
        'fertility': Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        'population': Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        'gdp': Column(float, Check.greater_than_or_equal_to(0), nullable=True,
                      description='GDP in constant 2000 US dollars'),
        'continent': Column(str, nullable=True),
        'region': Column(str, nullable=True),
    },
    strict=False,
    coerce=True,
    description='Gapminder health and income outcomes by country and year'
)

nhanes_schema = pa.DataFrameSchema(
    {
        'Gender': Column(str, Check.isin(['female', 'male']), nullable=False),
        'AgeDecade': Column(str, nullable=True),
        'Race1': Column(str, nullable=True),
        'BPSysAve': Column(float, Check.greater_than(0), nullable=True,
                           description='Average systolic blood pressure'),
    },
    strict=False,
    coerce=True,
    description='US National Health and Nutrition Examination Survey'
)

us_contagious_diseases_schema = pa.DataFrameSchema(
    {
        'disease': Column(str, nullable=False),
        'state': Column(str, nullable=False),
        'year': Column(int, Check.in_range(1900, 2100), nullable=False),
        'weeks_reporting': Column(int, Check.in_range(0, 53), nullable=False),
        'count': Column(float, Check.greater_than_or_equal_to(0), nullable=True),
        'population': Column(float, Check.greater_than(0), nullable=True),
    },
    strict=False,
    coerce=True,
    description='Yearly contagious disease counts by US state'
)

SCHEMAS = {
    'murders': murders_schema,
    'heights': heights_schema,
    'reported_heights': reported_heights_schema,
    'gapminder': gapminder_schema,
    'nhanes': nhanes_schema,
    'us_contagious_diseases': us_contagious_diseases_schema,
}


# ============================================================================
# VALIDATION FUNCTIONS
# ============================================================================

def validate_dataset(df: pd.DataFrame, name: str, verbose: bool = False) -> pd.DataFrame:
    """
    Validate a reference dataset against its schema

    Args:
        df: DataFrame to validate
        name: Dataset name (key of SCHEMAS)
        verbose: Print progress and quality checks

    Returns:
        Validated DataFrame with coerced dtypes

    Raises:
        ValueError: If no schema exists for the dataset
        pandera.errors.SchemaErrors: If validation fails
    """
    if name not in SCHEMAS:
        raise ValueError(f"No schema defined for dataset '{name}'")

    if verbose:
        print(f'\n{"="*70}')
        print(f'Validating {name} dataset')
        print(f'{"="*70}')

    try:
        validated = SCHEMAS[name].validate(df, lazy=True)
    except pa.errors.SchemaErrors as err:
        print(f'  ❌ Schema validation failed for {name}:')
        print(err.failure_cases)
        raise

    if verbose:
        print(f'  ✓ Schema validation passed')
        check_data_quality(validated, name)
        print(f'  ✓ All validations passed for {name}\n')

    return validated


def check_data_quality(df: pd.DataFrame, name: str):
    """
    Perform data quality checks beyond schema validation

    Checks:
    - Missing value percentages
    - Duplicate rows
    """
    if len(df) == 0:
        print(f'  ⚠️  {name} is empty')
        return

    missing_pct = (df.isnull().sum() / len(df) * 100).sort_values(ascending=False)
    missing_pct = missing_pct[missing_pct > 0]
    if len(missing_pct) > 0:
        print(f'  Missing values:')
        for col, pct in missing_pct.items():
            flag = '  ⚠️' if pct > 50 else ''
            print(f'    - {col}: {pct:.1f}%{flag}')
    else:
        print(f'  ✓ No missing values')

    dup_count = df.duplicated().sum()
    if dup_count > 0:
        print(f'  ⚠️  WARNING: {dup_count} duplicate rows found')
