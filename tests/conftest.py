import pandas as pd
import pytest

import settings
from pyramid_scales import make_scales


@pytest.fixture
def records():
    rows = [
        (2000, '20-24', 'Europe', 3_000_000, 2_900_000),
        (2000, '80+', 'Europe', 1_000_000, 2_000_000),
        (2000, '0-4', 'Europe', 2_500_000, 2_400_000),
        (2000, '5-9', 'Europe', 2_600_000, 2_450_000),
        (2001, '20-24', 'Europe', 3_100_000, 2_950_000),
        (2001, '0-4', 'Europe', 2_400_000, 2_300_000),
        (2000, '20-24', 'Oceania', 900_000, 880_000),
        (2000, '80+', 'Oceania', 100_000, 150_000),
        (2023, '0-4', 'Oceania', 1_000_000, 950_000),
    ]
    return pd.DataFrame(rows, columns=['year', 'age', 'region', 'male_pop', 'female_pop'])


@pytest.fixture
def scales():
    return make_scales(settings.BAR_WIDTH)


@pytest.fixture
def caps():
    return settings.REGION_MAX_POPULATION
