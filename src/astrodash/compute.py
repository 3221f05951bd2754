"""Derivation layer — phase buckets, record filtering, summary stats and clock helpers."""

import logging
import math
from collections.abc import Iterable, Sequence
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

from pytz import timezone

from astrodash.models import MoonPhase, SummaryStats, WeatherRecord

logger = logging.getLogger(__name__)

ALL_PHASES = "All"

# Slider buckets: "All" followed by the phases in cycle order
PHASE_BUCKETS: tuple[str, ...] = (ALL_PHASES,) + tuple(p.value for p in MoonPhase)

BUCKET_WIDTH = 12.5


def resolve_phase_bucket(value: float) -> str:
    """Map a 0–100 slider value to a phase bucket label.

    The bucket index is ``floor(value / 12.5)``. Any index outside
    PHASE_BUCKETS (negative, past the end, NaN or infinite input)
    resolves to "All".

    Args:
        value: Slider position, nominally 0–100.

    Returns:
        One of the nine labels in PHASE_BUCKETS.
    """
    if not math.isfinite(value):
        return ALL_PHASES
    index = math.floor(value / BUCKET_WIDTH)
    if 0 <= index < len(PHASE_BUCKETS):
        return PHASE_BUCKETS[index]
    return ALL_PHASES


def slider_value_for_bucket(label: str) -> float:
    """Inverse of resolve_phase_bucket: the lowest slider value for a label.

    Raises:
        ValueError: If label is not one of PHASE_BUCKETS.
    """
    return PHASE_BUCKETS.index(label) * BUCKET_WIDTH


def matches_search(record: WeatherRecord, search_term: str) -> bool:
    term = search_term.lower()
    return term in record.date.lower() or term in record.phase.value.lower()


def matches_bucket(record: WeatherRecord, bucket: str) -> bool:
    return bucket == ALL_PHASES or bucket in record.phase.value


def filter_records(
    records: Iterable[WeatherRecord],
    search_term: str,
    bucket: str,
) -> tuple[WeatherRecord, ...]:
    """Return the records matching both the search term and the phase bucket.

    Search is a case-insensitive substring match on date or phase name.
    The bucket matches when it is "All" or a substring of the phase name.
    Original order is preserved.

    Args:
        records: Full record set.
        search_term: Free text; empty matches every record.
        bucket: Label from PHASE_BUCKETS (see resolve_phase_bucket).

    Returns:
        Ordered tuple of matching records.
    """
    return tuple(
        r for r in records if matches_search(r, search_term) and matches_bucket(r, bucket)
    )


def _round_tenths(value: float) -> float:
    # Half-up on the float's exact binary value, not banker's rounding
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def summarize(records: Sequence[WeatherRecord]) -> SummaryStats:
    """Count, mean temperature (one decimal) and distinct phase count."""
    total = len(records)
    avg = _round_tenths(sum(r.temperature_f for r in records) / total) if total > 0 else 0.0
    return SummaryStats(
        total_items=total,
        avg_temperature=avg,
        unique_phases=len({r.phase for r in records}),
    )


def find_record_for_date(
    records: Iterable[WeatherRecord], iso_date: str
) -> WeatherRecord | None:
    """First record whose date string equals iso_date exactly, else None."""
    for record in records:
        if record.date == iso_date:
            return record
    return None


def now_in_zone(tz_name: str | None = None) -> datetime:
    """Current wall-clock time, in tz_name if given, else the local zone."""
    if tz_name:
        return datetime.now(timezone(tz_name))
    return datetime.now()


def today_iso(tz_name: str | None = None) -> str:
    """Today's calendar date as "YYYY-MM-DD"."""
    if tz_name:
        return now_in_zone(tz_name).date().isoformat()
    return date.today().isoformat()


def format_clock(moment: datetime) -> str:
    """12-hour clock string without a leading zero, e.g. "9:05:03 PM"."""
    return moment.strftime("%I:%M:%S %p").lstrip("0")
