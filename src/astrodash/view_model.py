"""Dashboard view state — navigation, today's phase indicator and filter inputs."""

import logging
from dataclasses import dataclass, field

from astrodash.compute import (
    filter_records,
    find_record_for_date,
    resolve_phase_bucket,
    summarize,
    today_iso,
)
from astrodash.models import DEFAULT_LOCATION, MoonPhase, NavView, SummaryStats, WeatherRecord

logger = logging.getLogger(__name__)

DEFAULT_PHASE_GLYPH = MoonPhase.WAXING_CRESCENT.glyph


@dataclass
class NavigationState:
    """Three-way view selector. Search results are visible only on the search view."""

    active_view: NavView = NavView.DASHBOARD
    results_visible: bool = False

    def select(self, view: NavView | str) -> None:
        """Switch views. Raises ValueError for an unknown view name."""
        view = NavView(view)
        self.active_view = view
        self.results_visible = view is NavView.SEARCH

    def submit_search(self) -> None:
        """Search button: reveal results and jump to the search view."""
        self.results_visible = True
        self.active_view = NavView.SEARCH


@dataclass
class TodayPhaseIndicator:
    """Glyph for the current moon phase. Keeps its last value on a lookup miss."""

    glyph: str = DEFAULT_PHASE_GLYPH

    def refresh(self, records: tuple[WeatherRecord, ...], today: str) -> str:
        record = find_record_for_date(records, today)
        if record is not None:
            self.glyph = record.phase_icon
            logger.debug("Today's phase for %s: %s", today, record.phase.value)
        else:
            logger.debug("No record for %s; keeping %s", today, self.glyph)
        return self.glyph


@dataclass
class DataViewModel:
    """All state behind the dashboard, search and about views.

    The record set starts empty with ``loading`` set; ``set_records`` is
    called once the simulated load completes. Summary statistics always
    cover the full set, never the filtered view.
    """

    records: tuple[WeatherRecord, ...] = ()
    loading: bool = True
    search_term: str = ""
    phase_slider_value: float = 0
    current_time: str = ""
    location: str = DEFAULT_LOCATION
    tz_name: str | None = None
    navigation: NavigationState = field(default_factory=NavigationState)
    today_indicator: TodayPhaseIndicator = field(default_factory=TodayPhaseIndicator)

    def set_records(
        self, records: tuple[WeatherRecord, ...], today: str | None = None
    ) -> None:
        """Install the record set, leave the loading state and re-resolve today's phase."""
        self.records = tuple(records)
        self.loading = False
        self.today_indicator.refresh(
            self.records, today if today is not None else today_iso(self.tz_name)
        )

    def set_tz_name(self, tz_name: str | None, today: str | None = None) -> None:
        """Adopt a time zone; a loaded record set re-resolves today's phase when it changes."""
        if tz_name == self.tz_name:
            return
        self.tz_name = tz_name
        if not self.loading:
            self.today_indicator.refresh(
                self.records, today if today is not None else today_iso(self.tz_name)
            )

    @property
    def phase_bucket(self) -> str:
        return resolve_phase_bucket(self.phase_slider_value)

    @property
    def filtered_records(self) -> tuple[WeatherRecord, ...]:
        return filter_records(self.records, self.search_term, self.phase_bucket)

    @property
    def summary(self) -> SummaryStats:
        return summarize(self.records)

    @property
    def current_phase_glyph(self) -> str:
        return self.today_indicator.glyph

    @property
    def location_display(self) -> str:
        return f"{self.location}, USA"
