import logging
import os
import zipfile

import openpyxl
import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from pyramid_scales import configure_region_scales

logger = logging.getLogger(__name__)

# Source column -> record field
COLUMN_MAP = {
    'Year': 'year',
    'age_bracket': 'age',
    'Region': 'region',
    'Male': 'male_pop',
    'Female': 'female_pop',
}
RECORD_COLUMNS = list(COLUMN_MAP.values())


class DatasetError(Exception):
    """The dataset file is missing or does not have the expected columns."""


class MalformedAgeBracketError(ValueError):
    """An age bracket label has no leading number to sort on."""


# --- FUNCTIONS FOR LOADING DATA ---
def parse_excel_file(excel_file):
    """Read every worksheet table of a workbook into a DataFrame keyed '<sheet>_<table>'."""
    workbook = openpyxl.load_workbook(excel_file, data_only=True)

    tables_dfs = {
        f'{ws.title}_{tbl.name}': pd.DataFrame(
            [[cell.value for cell in row] for row in ws[tbl.ref][1:]],
            columns=[cell.value for cell in ws[tbl.ref][0]]
        ) for ws in workbook for tbl in ws.tables.values() if tbl.ref
    }

    # Plain sheets without a defined table: fall back to the first sheet
    if not tables_dfs:
        rows = list(workbook.worksheets[0].iter_rows(values_only=True))
        if rows:
            tables_dfs[workbook.worksheets[0].title] = pd.DataFrame(rows[1:], columns=rows[0])

    return tables_dfs


def read_raw_dataset(path):
    if not os.path.exists(path):
        raise DatasetError(f"Dataset file not found: {path}")

    if path.lower().endswith('.xlsx'):
        try:
            tables_dfs = parse_excel_file(path)
        except (zipfile.BadZipFile, InvalidFileException, KeyError) as e:
            raise DatasetError(f"Could not read workbook {path}: {e}") from e
        if not tables_dfs:
            raise DatasetError(f"No tables found in workbook: {path}")
        return next(iter(tables_dfs.values()))

    try:
        return pd.read_csv(path, dtype={'age_bracket': str, 'Region': str})
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise DatasetError(f"Could not read dataset {path}: {e}") from e


def load_dataset(path):
    """
    Load the population table and return one row per record with the
    columns year, age, region, male_pop and female_pop.
    """
    df_raw = read_raw_dataset(path)

    missing = [col for col in COLUMN_MAP if col not in df_raw.columns]
    if missing:
        raise DatasetError(f"Missing expected columns in {path}: {missing}")

    df = df_raw[list(COLUMN_MAP)].rename(columns=COLUMN_MAP).copy()

    # Numeric columns as numbers, the rest as strings
    try:
        df['year'] = pd.to_numeric(df['year']).astype(int)
        df['male_pop'] = pd.to_numeric(df['male_pop'])
        df['female_pop'] = pd.to_numeric(df['female_pop'])
    except (ValueError, TypeError) as e:
        raise DatasetError(f"Non-numeric Year, Male or Female values in {path}: {e}") from e
    df['age'] = df['age'].astype(str)
    df['region'] = df['region'].astype(str)

    df = df.reset_index(drop=True)
    logger.info("Loaded %d records for %d regions from %s", len(df), df['region'].nunique(), path)
    return df


def list_regions(data):
    """Distinct regions, in the order they first appear in the data."""
    return list(pd.unique(data['region']))


# --- FILTERING ---
def filter_by_region(data, region, scales, caps):
    """
    Narrow the full record set to one region and point both gender scales
    at that region's population cap.
    """
    configure_region_scales(scales, region, caps)
    return data[data['region'] == region].copy()


def age_bracket_start(labels):
    """Leading integer of each age label: '80+' -> 80, '20-24' -> 20."""
    starts = labels.astype(str).str.extract(r'^\s*(\d+)', expand=False)
    bad = labels[starts.isna()]
    if not bad.empty:
        raise MalformedAgeBracketError(f"Age brackets without a numeric prefix: {sorted(set(bad))}")
    return starts.astype(int)


def select_year(view, year):
    """
    Rows of ``view`` for ``year``, oldest age bracket first.

    The sort is a stable ascending sort on the numeric prefix that is then
    reversed, so slot 0 holds the oldest bracket and is drawn at the top.
    """
    year_data = view[view['year'] == year]
    if year_data.empty:
        return year_data.copy()

    year_data = year_data.assign(age_start=age_bracket_start(year_data['age']))
    year_data = year_data.sort_values('age_start', kind='stable').iloc[::-1]
    return year_data.drop(columns=['age_start']).reset_index(drop=True)
