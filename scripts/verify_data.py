#!/usr/bin/env python3
"""
Data Verification Script

Checks that all reference dataset exports are present and match their
schemas before running the lessons.

Usage:
    python scripts/verify_data.py
    python scripts/verify_data.py --data-dir ~/dslabs
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

import pandera as pa
from config.paths import REFERENCE_DATA, ensure_directories, print_architecture
from data_engineering.loaders import get_data_summary, load_dataset


def verify_dataset(name, data_dir=None):
    """Load and validate one dataset, printing the quality checks"""
    try:
        df = load_dataset(name, data_dir, verbose=True)
        print(f'  ✓ Contains {len(df):,} rows, {len(df.columns)} columns')
        return True
    except pa.errors.SchemaErrors:
        return False
    except Exception as e:
        print(f'  ✗ Error reading file: {e}')
        return False


def main(argv=None):
    """Main verification function"""
    parser = argparse.ArgumentParser(description='Verify the reference dataset exports')
    parser.add_argument('--data-dir', type=Path, default=None,
                        help=f'Directory with the CSV exports (default: {REFERENCE_DATA})')
    args = parser.parse_args(argv)

    print('=' * 80)
    print('DATA VERIFICATION')
    print('=' * 80)

    # Check directory structure
    print('\n1. Checking directory structure...')
    ensure_directories()
    print('  ✓ Directory structure initialized')

    print('\n2. Checking dataset files...')
    print()
    summary = get_data_summary(args.data_dir)

    all_ok = True
    for row in summary.itertuples(index=False):
        if row.exists:
            print(f'✓ {row.dataset}: {row.size_mb:.1f} MB')
            if not verify_dataset(row.dataset, args.data_dir):
                all_ok = False
        else:
            print(f'✗ {row.dataset}: NOT FOUND')
            print(f'  Expected: {row.path}')
            all_ok = False

    print()
    print('=' * 80)

    if all_ok:
        print('✓ ALL CHECKS PASSED')
        print()
        print('Next steps:')
        print('  1. Run lessons: python -m analysis.run_lessons')
        return 0
    else:
        print('✗ VERIFICATION FAILED')
        print_architecture()
        print('Export each missing dataset to CSV (e.g. write.csv(murders, "murders.csv"))')
        print('and place it in the data directory.')
        return 1


if __name__ == '__main__':
    sys.exit(main())
