"""Tabular rendering of weather records and summary statistics."""

from collections.abc import Iterable

from astrodash.models import SummaryStats, WeatherRecord
from astrodash.strings import t

COLUMNS: tuple[str, ...] = ("col_date", "col_temperature", "col_time", "col_phase")


def record_row(record: WeatherRecord) -> dict[str, str]:
    """Display cells for one record, keyed by column heading."""
    return {
        t("col_date"): record.date,
        t("col_temperature"): t("temperature", value=record.temperature_f),
        t("col_time"): record.time,
        t("col_phase"): f"{record.phase_icon} {record.phase.value}",
    }


def record_rows(records: Iterable[WeatherRecord]) -> list[dict[str, str]]:
    return [record_row(r) for r in records]


def summary_items(stats: SummaryStats) -> list[tuple[str, str]]:
    """(label, value) pairs for the summary strip. Average always shows one decimal."""
    return [
        (t("summary_total"), str(stats.total_items)),
        (t("summary_avg_temp"), t("temperature", value=f"{stats.avg_temperature:.1f}")),
        (t("summary_unique_phases"), str(stats.unique_phases)),
    ]


def render_text_table(records: Iterable[WeatherRecord]) -> str:
    """Plain-text, left-aligned table for terminal output."""
    headers = [t(key) for key in COLUMNS]
    rows = [list(row.values()) for row in record_rows(records)]
    widths = [
        max([len(headers[i])] + [len(row[i]) for row in rows]) for i in range(len(headers))
    ]

    def fmt(cells: list[str]) -> str:
        return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines += [fmt(row) for row in rows]
    return "\n".join(lines)
