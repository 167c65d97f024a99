import os

# Define color and font constants for consistent styling
FONT_FAMILY = '"Helvetica Neue", Helvetica, Arial, sans-serif'
COLOR_FEMALE = '#a71930'   # Crimson
COLOR_MALE = '#30ced8'     # Bright Cyan
COLOR_LABEL = '#333333'
PLOTLY_TEMPLATE = 'plotly_white'

# Chart geometry, in pixels
BAR_HEIGHT = 20
BAR_WIDTH = 380
CENTER_OFFSET = 20   # gap on each side of the age labels
TICK_COUNT = 6

# Animation
FIRST_YEAR = 1980
LAST_YEAR = 2023
DEFAULT_YEAR = 2000
DEFAULT_REGION = 'Europe'
TICK_INTERVAL_MS = 200

# Mapping regions to their population limits (axis domain only, never used to clip)
REGION_MAX_POPULATION = {
    'Central and Southern Asia': 100_000_000,
    'Sub-Saharan Africa': 100_000_000,
    'Eastern Asia': 80_000_000,
    'Europe': 40_000_000,
    'Northern America': 20_000_000,
    'Latin America and the Caribbean': 60_000_000,
    'Northern Africa and Western Asia': 40_000_000,
    'Oceania': 2_000_000,
    'South-Eastern Asia': 40_000_000,
}

# --- DATA LOCATION ---
data_folder = os.path.join(os.path.dirname(__file__), 'data')
# Bundled file is a synthetic 1980-2023 sample; point this at the full dataset
dataset_path = os.path.join(data_folder, 'third_dataset.csv')

LOG_LEVEL = 'INFO'
