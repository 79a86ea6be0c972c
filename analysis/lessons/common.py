"""
Console narration and figure bookkeeping shared by the lessons
"""

from pathlib import Path

import pandas as pd

from config.paths import FIGURES
from analysis.visualization.style import save_figure, set_theme


def print_header(text):
    """Print a formatted header"""
    print('\n' + '=' * 80)
    print(text.center(80))
    print('=' * 80 + '\n')


def print_section(text):
    print('\n' + '-' * 70)
    print(text)
    print('-' * 70)


def show(table: pd.DataFrame, max_rows: int = 20):
    """Print a table without its index"""
    if isinstance(table, pd.Series):
        print(table.to_string())
    else:
        print(table.head(max_rows).to_string(index=False))


class FigureLog:
    """Saves lesson figures into one directory and remembers their paths"""

    def __init__(self, lesson: str, output_dir=None):
        self.output_dir = Path(output_dir) / lesson if output_dir else FIGURES / lesson
        self.paths = {}
        set_theme()

    def save(self, fig, name: str) -> Path:
        path = save_figure(fig, name, self.output_dir)
        self.paths[name] = path
        print(f'  ✓ Saved: {path.name}')
        return path
