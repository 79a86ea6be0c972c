"""
Lessons on exploring and visualizing data

Each lesson has run(data_dir=None, output_dir=None) which narrates the
analysis on the console, saves its figures and returns its results.
"""

from . import (
    distributions,
    normal_distribution,
    summarizing,
    plotting_grammar,
    case_studies,
    visualization_principles
)

# Lesson number -> (name, run function)
LESSONS = {
    1: (distributions.NAME, distributions.run),
    2: (normal_distribution.NAME, normal_distribution.run),
    3: (summarizing.NAME, summarizing.run),
    4: (plotting_grammar.NAME, plotting_grammar.run),
    5: (case_studies.NAME, case_studies.run),
    6: (visualization_principles.NAME, visualization_principles.run),
}

__all__ = ['LESSONS']
