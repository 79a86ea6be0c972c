"""
Project Path Configuration

Centralized path definitions for reference datasets and lesson outputs
Using Medallion Architecture: Bronze (raw exports) → Outputs (figures, reports)
"""

from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# ==============================================================================
# REFERENCE DATA (Bronze Layer)
# ==============================================================================

DATA_ROOT = PROJECT_ROOT / "data"

# Bronze Layer: CSV exports of the reference datasets, never modified
BRONZE = DATA_ROOT / "bronze"
REFERENCE_DATA = BRONZE / "reference"

# One CSV per dataset, named after the dataset
DATASET_FILES = {
    'murders': REFERENCE_DATA / "murders.csv",
    'heights': REFERENCE_DATA / "heights.csv",
    'reported_heights': REFERENCE_DATA / "reported_heights.csv",
    'gapminder': REFERENCE_DATA / "gapminder.csv",
    'nhanes': REFERENCE_DATA / "nhanes.csv",
    'us_contagious_diseases': REFERENCE_DATA / "us_contagious_diseases.csv",
}

# ==============================================================================
# OUTPUTS
# ==============================================================================

OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
FIGURES = OUTPUTS_ROOT / "figures"
REPORTS = OUTPUTS_ROOT / "reports"

# ==============================================================================
# DIRECTORY INITIALIZATION
# ==============================================================================

def dataset_path(name, data_dir=None):
    """Path of a dataset CSV, optionally under another directory"""
    if name not in DATASET_FILES:
        raise ValueError(
            f"Unknown dataset '{name}'. Available: {', '.join(sorted(DATASET_FILES))}"
        )
    if data_dir is None:
        return DATASET_FILES[name]
    return Path(data_dir) / DATASET_FILES[name].name


def ensure_directories():
    """Create all necessary directories if they don't exist"""
    for directory in [DATA_ROOT, BRONZE, REFERENCE_DATA, OUTPUTS_ROOT, FIGURES, REPORTS]:
        directory.mkdir(parents=True, exist_ok=True)


# ==============================================================================
# ARCHITECTURE DOCUMENTATION
# ==============================================================================

ARCHITECTURE_DOCS = """
DATA LAYOUT
===========

Bronze Layer (data/bronze/reference/):
  - CSV exports of the reference datasets
  - One file per dataset: murders, heights, reported_heights,
    gapminder, nhanes, us_contagious_diseases
  - Never modified; derived columns live only in memory

Outputs (outputs/):
  - figures/<lesson>/ : PNG charts saved by each lesson
  - reports/          : printed summaries redirected by the user
"""

def print_architecture():
    """Print architecture documentation"""
    print(ARCHITECTURE_DOCS)
