#!/usr/bin/env python3
"""
Run the Lessons

Runs the data visualization lessons in sequence, saving every figure.

Usage:
    python -m analysis.run_lessons

    # Or with specific lessons only:
    python -m analysis.run_lessons --lessons 1 2 5

    # Reading the CSV exports from another directory:
    python -m analysis.run_lessons --data-dir ~/dslabs --output-dir outputs/figures
"""

import sys
import argparse
import time
import traceback
from pathlib import Path

from config.paths import FIGURES, REFERENCE_DATA
from analysis.lessons import LESSONS


def run_lesson(number, data_dir=None, output_dir=None):
    """Run one lesson, returning True on success"""
    name, run = LESSONS[number]
    print('\n' + '='*80)
    print(f'RUNNING LESSON {number}: {name}')
    print('='*80)

    start_time = time.time()
    try:
        run(data_dir=data_dir, output_dir=output_dir)
    except FileNotFoundError as e:
        print(f'\n❌ Lesson {number} failed: {e}')
        return False
    except Exception as e:
        print(f'\n❌ Error running Lesson {number}: {e}')
        traceback.print_exc()
        return False

    elapsed = time.time() - start_time
    print(f'\n✅ Lesson {number} complete! ({elapsed:.1f}s)')
    return True


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Run the data visualization lessons',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run all lessons
  python -m analysis.run_lessons

  # Run specific lessons only
  python -m analysis.run_lessons --lessons 1 2 3
        """
    )

    parser.add_argument(
        '--lessons',
        type=int,
        nargs='+',
        choices=sorted(LESSONS),
        default=sorted(LESSONS),
        help='Specific lessons to run (default: all)'
    )

    parser.add_argument(
        '--data-dir',
        type=Path,
        default=None,
        help=f'Directory with the dataset CSV exports (default: {REFERENCE_DATA})'
    )

    parser.add_argument(
        '--output-dir',
        type=Path,
        default=None,
        help=f'Directory for the figures (default: {FIGURES})'
    )

    args = parser.parse_args(argv)
    output_dir = args.output_dir or FIGURES

    print('='*80)
    print('DATA VISUALIZATION LESSONS')
    print('='*80)
    print(f'\nRunning lessons: {", ".join(map(str, args.lessons))}')
    print(f'Data directory: {args.data_dir or REFERENCE_DATA}')
    print(f'Output directory: {output_dir}')

    results = {}
    start_time_total = time.time()

    for number in args.lessons:
        results[number] = run_lesson(number, args.data_dir, output_dir)

    total_elapsed = time.time() - start_time_total

    # Summary
    print('\n' + '='*80)
    print('LESSON SUMMARY')
    print('='*80)

    for number in args.lessons:
        status = '✅ Success' if results[number] else '❌ Failed'
        print(f'  Lesson {number} ({LESSONS[number][0]}): {status}')

    success_count = sum(1 for v in results.values() if v)
    total_count = len(results)

    print(f'\nTotal: {success_count}/{total_count} lessons completed successfully')
    print(f'Time elapsed: {total_elapsed:.1f}s ({total_elapsed/60:.1f}m)')
    print(f'\n📁 Figures saved to: {output_dir}/')

    if success_count == total_count:
        print('\n🎉 All lessons completed successfully!')
        sys.exit(0)
    else:
        print(f'\n⚠️  {total_count - success_count} lesson(s) failed')
        sys.exit(1)


if __name__ == '__main__':
    main()
