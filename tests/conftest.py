"""
Shared fixtures: small synthetic versions of the reference datasets

Shapes and column names follow the real CSV exports; values are random
but seeded.
"""

import matplotlib
matplotlib.use('Agg')

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest


# ===== RAW TABLES =====


def make_murders():
    return pd.DataFrame({
        'state': ['Alabama', 'Alaska', 'California', 'Connecticut', 'Illinois',
                  'Iowa', 'New York', 'Texas', 'Vermont', 'District of Columbia'],
        'abb': ['AL', 'AK', 'CA', 'CT', 'IL', 'IA', 'NY', 'TX', 'VT', 'DC'],
        'region': ['South', 'West', 'West', 'Northeast', 'North Central',
                   'North Central', 'Northeast', 'South', 'Northeast', 'South'],
        'population': [4779736, 710231, 37253956, 3574097, 12830632,
                       3046355, 19378102, 25145561, 625741, 601723],
        'total': [135, 19, 1257, 97, 364, 21, 517, 805, 2, 99],
    })


def make_heights(seed=1):
    rng = np.random.default_rng(seed)
    male = np.round(rng.normal(69.3, 3.6, 80), 1)
    female = np.round(rng.normal(64.9, 3.8, 40), 1)
    return pd.DataFrame({
        'sex': ['Male'] * len(male) + ['Female'] * len(female),
        'height': np.concatenate([male, female]),
    })


def make_reported_heights():
    heights = ['70', '68.5', "5' 4\"", '165cm', '72', '64', '5.7', '>9000',
               '69', '63', '6', '71', '66', '60', '67', '68', '61.5', '74']
    sex = ['Male', 'Male', 'Female', 'Female', 'Male', 'Female', 'Male', 'Male',
           'Male', 'Female', 'Male', 'Male', 'Female', 'Female', 'Male', 'Male',
           'Female', 'Male']
    return pd.DataFrame({
        'time_stamp': [f'2014-09-02 15:{i:02d}:00' for i in range(len(heights))],
        'sex': sex,
        'height': heights,
    })


# country, continent, region, 1970 dollars per day, 1960 population (millions)
GAPMINDER_COUNTRIES = [
    ('United States', 'Americas', 'Northern America', 60, 180),
    ('Germany', 'Europe', 'Western Europe', 45, 72),
    ('United Kingdom', 'Europe', 'Northern Europe', 40, 52),
    ('Portugal', 'Europe', 'Southern Europe', 15, 11),
    ('Italy', 'Europe', 'Southern Europe', 35, 50),
    ('Australia', 'Oceania', 'Australia and New Zealand', 42, 15),
    ('South Korea', 'Asia', 'Eastern Asia', 4, 25),
    ('China', 'Asia', 'Eastern Asia', 0.8, 650),
    ('Indonesia', 'Asia', 'South-Eastern Asia', 1.5, 90),
    ('Sri Lanka', 'Asia', 'Southern Asia', 2, 10),
    ('India', 'Asia', 'Southern Asia', 1.2, 450),
    ('Turkey', 'Asia', 'Western Asia', 6, 28),
    ('Brazil', 'Americas', 'South America', 8, 72),
    ('Mexico', 'Americas', 'Central America', 10, 38),
    ('Egypt', 'Africa', 'Northern Africa', 2.5, 27),
    ('Nigeria', 'Africa', 'Western Africa', 1.8, 45),
    ('Kenya', 'Africa', 'Eastern Africa', 1.4, 8),
    ('Fiji', 'Oceania', 'Melanesia', 5, 0.4),
]


def make_gapminder(seed=2):
    rng = np.random.default_rng(seed)
    rows = []
    for country, continent, region, dpd_1970, pop_1960 in GAPMINDER_COUNTRIES:
        west = dpd_1970 >= 15
        for year in range(1960, 2017):
            t = year - 1960
            population = pop_1960 * 1e6 * (1.006 if west else 1.02) ** t
            dollars_per_day = dpd_1970 * (1.02 if west else 1.04) ** (year - 1970)
            gdp = population * dollars_per_day * 365 if year <= 2011 else np.nan
            base_life = 70 if west else 48
            rows.append({
                'country': country,
                'year': year,
                'infant_mortality': max(2.0, (30 if west else 140) - t * (0.4 if west else 1.6)
                                        + rng.normal(0, 1)),
                'life_expectancy': min(85.0, base_life + t * (0.18 if west else 0.35)
                                       + rng.normal(0, 0.5)),
                'fertility': np.nan if year == 2016 else
                             max(1.2, (2.8 if west else 6.5) - t * (0.025 if west else 0.07)
                                 + rng.normal(0, 0.1)),
                'population': population,
                'gdp': gdp,
                'continent': continent,
                'region': region,
            })
    return pd.DataFrame(rows)


def make_nhanes(seed=3, n=240):
    rng = np.random.default_rng(seed)
    decades = rng.choice([' 20-29', ' 30-39', ' 40-49', ' 50-59', None], n)
    gender = rng.choice(['female', 'male'], n)
    race = rng.choice(['Black', 'Hispanic', 'Mexican', 'White', 'Other'], n)
    bp = np.round(rng.normal(118, 15, n), 1)
    bp[rng.random(n) < 0.05] = np.nan
    return pd.DataFrame({
        'ID': np.arange(n),
        'Gender': gender,
        'AgeDecade': decades,
        'Race1': race,
        'BPSysAve': bp,
    })


def make_us_contagious_diseases(seed=4):
    rng = np.random.default_rng(seed)
    rows = []
    states = ['Alabama', 'Alaska', 'California', 'Hawaii', 'New York', 'Texas']
    for disease in ['Measles', 'Polio']:
        for state in states:
            base = rng.uniform(5, 40)
            for year in range(1950, 1976):
                population = 1e6 + 5e4 * (year - 1950)
                rate = base if year < 1963 else base * 0.1
                weeks = 0 if (state == 'Texas' and year == 1951) else int(rng.integers(30, 53))
                rows.append({
                    'disease': disease,
                    'state': state,
                    'year': year,
                    'weeks_reporting': weeks,
                    'count': float(round(rate * population / 10000 * weeks / 52)),
                    'population': population,
                })
    return pd.DataFrame(rows)


DATASETS = {
    'murders': make_murders,
    'heights': make_heights,
    'reported_heights': make_reported_heights,
    'gapminder': make_gapminder,
    'nhanes': make_nhanes,
    'us_contagious_diseases': make_us_contagious_diseases,
}


# ===== FIXTURES =====


@pytest.fixture
def murders():
    return make_murders()


@pytest.fixture
def heights():
    return make_heights()


@pytest.fixture
def reported_heights():
    return make_reported_heights()


@pytest.fixture
def gapminder():
    return make_gapminder()


@pytest.fixture
def nhanes():
    return make_nhanes()


@pytest.fixture
def diseases():
    return make_us_contagious_diseases()


@pytest.fixture(scope='session')
def data_dir(tmp_path_factory):
    """Directory holding a CSV export of every synthetic dataset"""
    directory = tmp_path_factory.mktemp('reference')
    for name, make in DATASETS.items():
        make().to_csv(directory / f'{name}.csv', index=False)
    return directory


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
