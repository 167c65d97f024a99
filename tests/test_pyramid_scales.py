import pytest

import settings
from pyramid_scales import (
    LinearScale, UnknownRegionError, axis_ticks, configure_region_scales, format_millions, nice_ticks
)


def test_scales_start_at_zero_and_mirror(scales, caps):
    configure_region_scales(scales, 'Europe', caps)
    cap = caps['Europe']

    assert scales.female(0) == 0
    assert scales.male(0) == 0
    assert scales.male(cap) == settings.BAR_WIDTH
    assert scales.female(cap) == -settings.BAR_WIDTH


def test_scale_interpolates_linearly():
    scale = LinearScale(domain=(0, 40_000_000), output_range=(0, 380))
    assert scale(3_000_000) == pytest.approx(28.5)
    assert scale(20_000_000) == pytest.approx(190)


def test_degenerate_domain_maps_to_middle():
    scale = LinearScale(domain=(0, 0), output_range=(0, 100))
    assert scale(5) == 50


def test_unknown_region_raises(scales, caps):
    with pytest.raises(UnknownRegionError) as excinfo:
        configure_region_scales(scales, 'Atlantis', caps)
    assert str(excinfo.value) == "No population cap for region 'Atlantis'"
    assert isinstance(excinfo.value, LookupError)


def test_region_change_only_touches_domain(scales, caps):
    configure_region_scales(scales, 'Oceania', caps)

    assert scales.domain_max == 2_000_000
    assert scales.female.output_range == (0, -settings.BAR_WIDTH)
    assert scales.male.output_range == (0, settings.BAR_WIDTH)


@pytest.mark.parametrize('stop, expected', [
    (40_000_000, [i * 5_000_000 for i in range(9)]),
    (2_000_000, [0, 500_000, 1_000_000, 1_500_000, 2_000_000]),
    (100_000_000, [0, 20_000_000, 40_000_000, 60_000_000, 80_000_000, 100_000_000]),
])
def test_nice_ticks(stop, expected):
    assert nice_ticks(0, stop, 6) == expected


def test_nice_ticks_small_range():
    assert nice_ticks(0, 1, 5) == pytest.approx([0, 0.2, 0.4, 0.6, 0.8, 1.0])


@pytest.mark.parametrize('value, label', [
    (0, '0M'),
    (500_000, '0.5M'),
    (5_000_000, '5M'),
    (100_000_000, '100M'),
])
def test_format_millions(value, label):
    assert format_millions(value) == label


def test_female_axis_labels_read_positive(scales, caps):
    configure_region_scales(scales, 'Oceania', caps)
    positions, labels = axis_ticks(scales.female, offset=-20, count=6)

    assert labels == ['0M', '0.5M', '1M', '1.5M', '2M']
    assert positions[0] == -20
    assert positions[-1] == -settings.BAR_WIDTH - 20
