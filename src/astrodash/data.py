"""Static mock record set shown by the dashboard."""

from astrodash.models import MoonPhase, WeatherRecord

REFERENCE_RECORDS: tuple[WeatherRecord, ...] = (
    WeatherRecord("2025-01-16", 76, "23:37", MoonPhase.WAXING_CRESCENT),
    WeatherRecord("2025-01-17", 76, "00:02", MoonPhase.WAXING_CRESCENT),
    WeatherRecord("2025-01-18", 74, "00:09", MoonPhase.FIRST_QUARTER),
    WeatherRecord("2025-01-19", 78, "01:04", MoonPhase.WAXING_GIBBOUS),
    WeatherRecord("2025-01-20", 79, "01:42", MoonPhase.WAXING_GIBBOUS),
    WeatherRecord("2025-01-21", 81, "02:18", MoonPhase.FULL_MOON),
    WeatherRecord("2025-01-22", 80, "03:19", MoonPhase.WANING_GIBBOUS),
    WeatherRecord("2025-01-23", 77, "04:21", MoonPhase.WANING_GIBBOUS),
    WeatherRecord("2025-01-24", 75, "05:29", MoonPhase.LAST_QUARTER),
    WeatherRecord("2025-01-25", 72, "06:58", MoonPhase.WANING_CRESCENT),
    WeatherRecord("2025-01-26", 70, "08:39", MoonPhase.WANING_CRESCENT),
    WeatherRecord("2025-01-27", 68, "10:07", MoonPhase.NEW_MOON),
    WeatherRecord("2025-01-28", 69, "12:25", MoonPhase.WAXING_CRESCENT),
    WeatherRecord("2025-01-29", 73, "14:35", MoonPhase.WAXING_CRESCENT),
    WeatherRecord("2025-01-30", 76, "16:58", MoonPhase.WAXING_CRESCENT),
)


def load_reference_records() -> tuple[WeatherRecord, ...]:
    """Return the fixed fifteen-day record set in chronological order."""
    return REFERENCE_RECORDS
