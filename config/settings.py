"""
Plotting constants and region groupings shared by the lessons
"""

# Figure defaults
FIGURE_SIZE = (10, 6)
FIGURE_DPI = 150

# Default hue used for single-series overlays (ggplot2's second discrete colour)
HUE_COLOR = '#00BFC4'

# Histogram styling
HIST_FILL = '#3498db'
HIST_EDGE = 'black'

# Color-blind friendly palette (grey, orange, sky blue, green,
# yellow, blue, vermillion, purple)
COLOR_BLIND_FRIENDLY = [
    '#999999',
    '#E69F00',
    '#56B4E9',
    '#009E73',
    '#F0E442',
    '#0072B2',
    '#D55E00',
    '#CC79A7',
]

# Reference line styling
REFERENCE_LINE = {'color': 'darkgrey', 'linestyle': '--', 'linewidth': 1}

# ==============================================================================
# GAPMINDER REGION GROUPINGS
# ==============================================================================

WEST = [
    'Western Europe',
    'Northern Europe',
    'Southern Europe',
    'Northern America',
    'Australia and New Zealand',
]

EAST_ASIA = ['Eastern Asia', 'South-Eastern Asia']
LATIN_AMERICA = ['Caribbean', 'Central America', 'South America']
PACIFIC_ISLANDS = ['Melanesia', 'Micronesia', 'Polynesia']

# Factor level order for the five-group split (plot order)
GROUP_LEVELS = ['Others', 'Latin America', 'East Asia', 'Sub-Saharan Africa', 'West']

# Level order for the detailed seven-group split
DETAILED_GROUP_LEVELS = [
    'The West',
    'Northern Africa',
    'East Asia',
    'Southern Asia',
    'Latin America',
    'Sub-Saharan Africa',
    'Pacific Islands',
]

# Comparison years
PAST_YEAR = 1970
PRESENT_YEAR = 2010

# ==============================================================================
# CATEGORY ORDERS
# ==============================================================================

SEX_LEVELS = ['Female', 'Male']
MURDER_REGION_LEVELS = ['Northeast', 'South', 'North Central', 'West']

# ==============================================================================
# DISEASE DATA
# ==============================================================================

# Year the measles vaccine was introduced
VACCINE_YEAR = 1963
DISEASE_EXCLUDED_STATES = ('Hawaii', 'Alaska')
DISEASE_TREND_BREAKS = [5, 25, 125, 300]
