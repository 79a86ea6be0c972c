"""
Shared data utilities: schema validation for the reference datasets
"""

from .validation import SCHEMAS, validate_dataset, check_data_quality

__all__ = ['SCHEMAS', 'validate_dataset', 'check_data_quality']
