import time
from dataclasses import dataclass

import settings


@dataclass
class ChartState:
    """Current region, year and play flag; changed only by the UI and the timer."""
    selected_region: str = settings.DEFAULT_REGION
    displayed_year: int = settings.DEFAULT_YEAR
    is_playing: bool = False
    first_year: int = settings.FIRST_YEAR
    last_year: int = settings.LAST_YEAR

    def toggle_play(self):
        self.is_playing = not self.is_playing
        return self.is_playing

    def set_year(self, year):
        # Moving the slider by hand stops playback
        self.is_playing = False
        self.displayed_year = int(year)

    def set_region(self, region):
        self.selected_region = region

    def tick(self):
        """Advance one year while playing, wrapping past the last year. Returns True if it advanced."""
        if not self.is_playing:
            return False
        self.displayed_year += 1
        if self.displayed_year > self.last_year:
            self.displayed_year = self.first_year
        return True


def advance_playback(state, interval_ms, sleep=time.sleep):
    """One animation step: wait out the tick interval, then tick. Returns True if the chart should redraw."""
    if not state.is_playing:
        return False
    sleep(interval_ms / 1000)
    return state.tick()
