import math
import unittest
from datetime import datetime

from astrodash.compute import (
    ALL_PHASES,
    PHASE_BUCKETS,
    filter_records,
    find_record_for_date,
    format_clock,
    resolve_phase_bucket,
    slider_value_for_bucket,
    summarize,
)
from astrodash.data import REFERENCE_RECORDS
from astrodash.models import MoonPhase, WeatherRecord


class PhaseBucketTests(unittest.TestCase):
    def test_every_slider_value_resolves_to_a_label(self) -> None:
        for value in range(0, 101):
            self.assertIn(resolve_phase_bucket(value), PHASE_BUCKETS)

    def test_endpoints(self) -> None:
        self.assertEqual(resolve_phase_bucket(0), "All")
        self.assertEqual(resolve_phase_bucket(100), "Waning Crescent")

    def test_boundaries_fall_on_multiples_of_12_5(self) -> None:
        self.assertEqual(resolve_phase_bucket(12), "All")
        self.assertEqual(resolve_phase_bucket(12.4), "All")
        self.assertEqual(resolve_phase_bucket(12.5), "New Moon")
        self.assertEqual(resolve_phase_bucket(13), "New Moon")
        self.assertEqual(resolve_phase_bucket(24.9), "New Moon")
        self.assertEqual(resolve_phase_bucket(25), "Waxing Crescent")
        self.assertEqual(resolve_phase_bucket(62.5), "Full Moon")
        self.assertEqual(resolve_phase_bucket(87.4), "Waning Gibbous")
        self.assertEqual(resolve_phase_bucket(87.5), "Last Quarter")
        self.assertEqual(resolve_phase_bucket(99.9), "Last Quarter")
        self.assertEqual(resolve_phase_bucket(100), "Waning Crescent")

    def test_out_of_range_defaults_to_all(self) -> None:
        self.assertEqual(resolve_phase_bucket(-1), ALL_PHASES)
        self.assertEqual(resolve_phase_bucket(112.5), ALL_PHASES)
        self.assertEqual(resolve_phase_bucket(500), ALL_PHASES)
        self.assertEqual(resolve_phase_bucket(math.nan), ALL_PHASES)
        self.assertEqual(resolve_phase_bucket(math.inf), ALL_PHASES)
        self.assertEqual(resolve_phase_bucket(-math.inf), ALL_PHASES)

    def test_slider_value_for_bucket_inverts_resolver(self) -> None:
        self.assertEqual(slider_value_for_bucket("All"), 0)
        self.assertEqual(slider_value_for_bucket("First Quarter"), 37.5)
        for label in PHASE_BUCKETS:
            self.assertEqual(resolve_phase_bucket(slider_value_for_bucket(label)), label)

    def test_slider_value_for_unknown_bucket(self) -> None:
        with self.assertRaises(ValueError):
            slider_value_for_bucket("Blue Moon")


class FilterTests(unittest.TestCase):
    def test_empty_term_and_all_returns_full_set_in_order(self) -> None:
        self.assertEqual(filter_records(REFERENCE_RECORDS, "", "All"), REFERENCE_RECORDS)

    def test_search_is_case_insensitive_on_phase(self) -> None:
        result = filter_records(REFERENCE_RECORDS, "waxing CRESCENT", "All")
        self.assertEqual(
            [r.date for r in result],
            ["2025-01-16", "2025-01-17", "2025-01-28", "2025-01-29", "2025-01-30"],
        )

    def test_search_matches_date_substring(self) -> None:
        result = filter_records(REFERENCE_RECORDS, "01-2", "All")
        self.assertEqual(result[0].date, "2025-01-20")
        self.assertEqual(len(result), 10)

    def test_search_is_not_trimmed(self) -> None:
        self.assertEqual(filter_records(REFERENCE_RECORDS, " full", "All"), ())
        self.assertEqual(len(filter_records(REFERENCE_RECORDS, "full", "All")), 1)

    def test_bucket_filter(self) -> None:
        result = filter_records(REFERENCE_RECORDS, "", "Waning Gibbous")
        self.assertEqual([r.date for r in result], ["2025-01-22", "2025-01-23"])

    def test_every_phase_matches_its_own_bucket(self) -> None:
        for phase in MoonPhase:
            record = WeatherRecord("2025-02-01", 60, "10:00", phase)
            self.assertEqual(filter_records([record], "", phase.value), (record,))

    def test_search_and_bucket_combine(self) -> None:
        result = filter_records(REFERENCE_RECORDS, "2025-01-2", "Waxing Crescent")
        self.assertEqual([r.date for r in result], ["2025-01-28", "2025-01-29"])

    def test_filter_is_idempotent(self) -> None:
        once = filter_records(REFERENCE_RECORDS, "an", "Waning Crescent")
        twice = filter_records(once, "an", "Waning Crescent")
        self.assertEqual(once, twice)
        self.assertEqual(len(once), 2)

    def test_bucket_match_is_case_sensitive(self) -> None:
        self.assertEqual(filter_records(REFERENCE_RECORDS, "", "full moon"), ())


class SummaryTests(unittest.TestCase):
    def test_reference_set(self) -> None:
        stats = summarize(REFERENCE_RECORDS)
        self.assertEqual(stats.total_items, 15)
        self.assertEqual(stats.avg_temperature, round(1124 / 15, 1))
        self.assertEqual(stats.avg_temperature, 74.9)
        self.assertEqual(stats.unique_phases, 8)

    def test_empty_set(self) -> None:
        stats = summarize(())
        self.assertEqual(stats.total_items, 0)
        self.assertEqual(stats.avg_temperature, 0)
        self.assertEqual(stats.unique_phases, 0)

    def test_average_rounds_half_up(self) -> None:
        records = [
            WeatherRecord(f"2025-02-0{i}", temp, "10:00", MoonPhase.FULL_MOON)
            for i, temp in enumerate([74, 74, 74, 75], start=1)
        ]
        self.assertEqual(summarize(records).avg_temperature, 74.3)
        records = [
            WeatherRecord(f"2025-02-0{i}", temp, "10:00", MoonPhase.NEW_MOON)
            for i, temp in enumerate([60, 60, 60, 61, 60, 61, 61, 61], start=1)
        ]
        self.assertEqual(summarize(records).avg_temperature, 60.5)

    def test_duplicate_phases_collapse(self) -> None:
        records = [
            WeatherRecord("2025-02-01", 60, "10:00", MoonPhase.FULL_MOON),
            WeatherRecord("2025-02-02", 61, "11:00", MoonPhase.FULL_MOON),
        ]
        stats = summarize(records)
        self.assertEqual(stats.unique_phases, 1)
        self.assertEqual(stats.avg_temperature, 60.5)


class DateAndClockTests(unittest.TestCase):
    def test_find_record_exact_match_only(self) -> None:
        self.assertEqual(find_record_for_date(REFERENCE_RECORDS, "2025-01-21").phase, MoonPhase.FULL_MOON)
        self.assertIsNone(find_record_for_date(REFERENCE_RECORDS, "2025-1-21"))
        self.assertIsNone(find_record_for_date(REFERENCE_RECORDS, "2025-01-31"))

    def test_format_clock(self) -> None:
        self.assertEqual(format_clock(datetime(2025, 1, 16, 21, 5, 3)), "9:05:03 PM")
        self.assertEqual(format_clock(datetime(2025, 1, 16, 0, 30, 0)), "12:30:00 AM")
        self.assertEqual(format_clock(datetime(2025, 1, 16, 11, 0, 59)), "11:00:59 AM")


if __name__ == "__main__":
    unittest.main()
