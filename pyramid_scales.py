import math
from dataclasses import dataclass

import numpy as np

# Thresholds for picking a 1, 2, 5 or 10 tick step
E10 = math.sqrt(50)
E5 = math.sqrt(10)
E2 = math.sqrt(2)

INITIAL_DOMAIN_MAX = 60_000_000


class UnknownRegionError(LookupError):
    """A region with no entry in the population cap table."""


class LinearScale:
    """Maps a numeric domain linearly onto an output range, like a d3 linear scale."""

    def __init__(self, domain=(0, 1), output_range=(0, 1)):
        self.domain = tuple(domain)
        self.output_range = tuple(output_range)

    def __call__(self, value):
        d0, d1 = self.domain
        r0, r1 = self.output_range
        span = d1 - d0
        # Degenerate domain maps everything to the middle of the range
        t = (value - d0) / span if span else 0.5
        return r0 + t * (r1 - r0)

    def ticks(self, count=10):
        return nice_ticks(self.domain[0], self.domain[1], count)

    def __repr__(self):
        return f"LinearScale(domain={self.domain}, output_range={self.output_range})"


@dataclass
class PyramidScales:
    female: LinearScale
    male: LinearScale

    @property
    def domain_max(self):
        return self.male.domain[1]


def make_scales(bar_width, domain_max=INITIAL_DOMAIN_MAX):
    """Female scale runs to -bar_width, male to +bar_width, so the two sides mirror."""
    return PyramidScales(
        female=LinearScale(domain=(0, domain_max), output_range=(0, -bar_width)),
        male=LinearScale(domain=(0, domain_max), output_range=(0, bar_width)),
    )


def configure_region_scales(scales, region, caps):
    """Set both scale domains to [0, cap] for ``region``; the output ranges are left alone."""
    if region not in caps:
        raise UnknownRegionError(f"No population cap for region {region!r}")
    max_population = caps[region]
    scales.female.domain = (0, max_population)
    scales.male.domain = (0, max_population)
    return max_population


def tick_increment(start, stop, count):
    step = (stop - start) / max(0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= E10 else 5 if error >= E5 else 2 if error >= E2 else 1
    if power >= 0:
        return factor * 10 ** power
    return -(10 ** -power) / factor


def nice_ticks(start, stop, count):
    """Roughly ``count`` evenly spaced round values inside [start, stop]."""
    if start == stop or count <= 0:
        return [start]
    reverse = stop < start
    if reverse:
        start, stop = stop, start

    step = tick_increment(start, stop, count)
    if step > 0:
        lo, hi = math.ceil(start / step), math.floor(stop / step)
        ticks = np.arange(lo, hi + 1) * step
    else:
        # negative increments encode 1/step for sub-unit spacing
        lo, hi = math.ceil(start * -step), math.floor(stop * -step)
        ticks = np.arange(lo, hi + 1) / -step

    ticks = ticks.tolist()
    return ticks[::-1] if reverse else ticks


def format_millions(value):
    """Axis tick label, e.g. 5000000 -> '5M', 500000 -> '0.5M'."""
    return f"{value / 1_000_000:g}M"


def axis_ticks(scale, offset=0, count=6):
    """
    Tick positions (in pixels, shifted by ``offset``) and labels for a scale.
    Labels always show the domain value, so the female side reads positive.
    """
    values = scale.ticks(count)
    positions = [scale(v) + offset for v in values]
    labels = [format_millions(v) for v in values]
    return positions, labels
