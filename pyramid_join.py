"""Keyed enter/update/exit reconciliation of pyramid bar groups.

The ordered rows for one (region, year) slice are projected onto
:class:`BarEntry` values, then diffed against the keys already drawn on a
rendering surface. Age-bracket labels are the identity keys. The diff is a
pure function; the surface applies it.
"""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BarEntry:
    key: str
    slot: int
    y: float
    female_width: float
    male_width: float

    @property
    def label(self):
        return self.key


@dataclass
class JoinResult:
    enter: list = field(default_factory=list)
    update: list = field(default_factory=list)
    exit: list = field(default_factory=list)

    @property
    def entries(self):
        """Everything that is drawn after the join, in slot order."""
        return sorted(self.enter + self.update, key=lambda e: e.slot)


def compute_bar_entries(ordered, scales, bar_height):
    """
    One BarEntry per row of the ordered slice. Widths are signed pixels:
    female is negative (drawn leftwards), male is positive.
    """
    entries = []
    for slot, row in enumerate(ordered.itertuples(index=False)):
        entries.append(BarEntry(
            key=row.age,
            slot=slot,
            y=slot * bar_height,
            female_width=-scales.female(row.female_pop),
            male_width=scales.male(row.male_pop),
        ))
    return entries


def join(previous_keys, entries):
    """
    Diff the keys currently drawn against the new entries.

    Returns a JoinResult where ``enter`` and ``update`` hold BarEntry values
    and ``exit`` holds the keys to remove. If two entries share a key the
    last one wins.
    """
    by_key = {}
    for entry in entries:
        by_key[entry.key] = entry

    previous = set(previous_keys)
    result = JoinResult()
    for key, entry in by_key.items():
        if key in previous:
            result.update.append(entry)
        else:
            result.enter.append(entry)
    result.exit = [key for key in previous_keys if key not in by_key]

    logger.debug("join: %d enter, %d update, %d exit",
                 len(result.enter), len(result.update), len(result.exit))
    return result


def chart_title(region, year):
    return f"{region}'s Population by Age and Gender ({year})"


def update_chart(ordered, scales, surface, state, bar_height):
    """
    Project the ordered slice onto the surface: enter new groups, move and
    resize surviving ones, drop stale ones, then refresh the title and the
    year control.
    """
    entries = compute_bar_entries(ordered, scales, bar_height)
    result = join(surface.keys(), entries)

    for key in result.exit:
        surface.remove(key)
    for entry in result.enter:
        surface.create(entry)
    for entry in result.update:
        surface.update(entry)

    surface.title = chart_title(state.selected_region, state.displayed_year)
    surface.slider_value = state.displayed_year
    return result
