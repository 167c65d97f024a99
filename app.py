import logging

import streamlit as st

import settings
from pyramid_data import (
    DatasetError, MalformedAgeBracketError, filter_by_region, list_regions, load_dataset, select_year
)
from pyramid_figure import PyramidSurface, build_figure
from pyramid_join import update_chart
from pyramid_scales import UnknownRegionError, make_scales
from pyramid_state import ChartState, advance_playback

# Set Streamlit page layout to wide
st.set_page_config(layout='wide')

logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)


# load data - use st.cache_data for more responsive app
@st.cache_data
def load_data(path):
    return load_dataset(path)


# --- LOAD DATA ---
try:
    data = load_data(settings.dataset_path)
except DatasetError as e:
    logger.error("Could not load dataset: %s", e)
    st.error(f"Error loading dataset: {e}")
    st.stop()

regions = list_regions(data)

# --- SESSION STATE ---
if 'chart_state' not in st.session_state:
    default_region = settings.DEFAULT_REGION if settings.DEFAULT_REGION in regions else regions[0]
    st.session_state.chart_state = ChartState(selected_region=default_region)
if 'surface' not in st.session_state:
    st.session_state.surface = PyramidSurface()
if 'scales' not in st.session_state:
    st.session_state.scales = make_scales(settings.BAR_WIDTH)
if 'region_select' not in st.session_state:
    st.session_state.region_select = st.session_state.chart_state.selected_region

state = st.session_state.chart_state
surface = st.session_state.surface
scales = st.session_state.scales


# --- EVENT HANDLING ---
def handle_year_input_change():
    state.set_year(st.session_state.year_input)


def handle_play_button_click():
    state.toggle_play()


def handle_region_change():
    state.set_region(st.session_state.region_select)


# --- UPDATE CHART ---
try:
    filtered_data = filter_by_region(data, state.selected_region, scales, settings.REGION_MAX_POPULATION)
    year_data = select_year(filtered_data, state.displayed_year)
    update_chart(year_data, scales, surface, state, settings.BAR_HEIGHT)
except (UnknownRegionError, MalformedAgeBracketError) as e:
    logger.exception("Chart update failed for %s %s", state.selected_region, state.displayed_year)
    st.error(f"Error updating chart for {state.selected_region} ({state.displayed_year}): {e}")
    st.stop()

# Keep the slider in step with the timer
st.session_state.year_input = surface.slider_value

# --- SIDEBAR CONTROLS ---
st.sidebar.header("Controls")

st.sidebar.selectbox(
    "Select Region:",
    options=regions,
    key='region_select',
    on_change=handle_region_change
)

st.sidebar.slider(
    "Year:",
    min_value=settings.FIRST_YEAR,
    max_value=settings.LAST_YEAR,
    step=1,
    key='year_input',
    on_change=handle_year_input_change
)

st.sidebar.button(
    "Pause" if state.is_playing else "Play",
    on_click=handle_play_button_click,
    use_container_width=True
)

# --- MAIN PAGE CONTENT ---
st.title("Population Pyramid")
st.plotly_chart(build_figure(surface, scales), use_container_width=True)

# --- ANIMATION ---
if advance_playback(state, settings.TICK_INTERVAL_MS):
    st.rerun()
