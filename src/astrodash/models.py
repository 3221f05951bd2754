"""Data model definitions — records, moon phases, navigation views."""

from dataclasses import dataclass
from enum import Enum


class MoonPhase(Enum):
    """The eight named lunar phases, in cycle order starting at New Moon."""

    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    @property
    def glyph(self) -> str:
        """Display emoji for this phase."""
        return PHASE_GLYPHS[self]


# Single source for phase → glyph pairing
PHASE_GLYPHS: dict[MoonPhase, str] = {
    MoonPhase.NEW_MOON: "🌑",
    MoonPhase.WAXING_CRESCENT: "🌒",
    MoonPhase.FIRST_QUARTER: "🌓",
    MoonPhase.WAXING_GIBBOUS: "🌔",
    MoonPhase.FULL_MOON: "🌕",
    MoonPhase.WANING_GIBBOUS: "🌖",
    MoonPhase.LAST_QUARTER: "🌗",
    MoonPhase.WANING_CRESCENT: "🌘",
}


DEFAULT_LOCATION = "New York"


class NavView(Enum):
    """Top-level views selectable from the sidebar."""

    DASHBOARD = "dashboard"
    SEARCH = "search"
    ABOUT = "about"


@dataclass(frozen=True)
class WeatherRecord:
    """One day of mock weather/moon data. Never mutated after load."""

    date: str  # "YYYY-MM-DD", unique within the set
    temperature_f: int  # Degrees Fahrenheit
    time: str  # Moonrise time, "HH:MM" 24-hour
    phase: MoonPhase

    @property
    def phase_icon(self) -> str:
        return self.phase.glyph


@dataclass(frozen=True)
class SummaryStats:
    """Aggregates over the full, unfiltered record set."""

    total_items: int
    avg_temperature: float  # Rounded to one decimal; 0 for an empty set
    unique_phases: int
