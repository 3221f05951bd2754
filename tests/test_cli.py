import contextlib
import io
import unittest
from unittest import mock

from astrodash import cli


class CliTests(unittest.TestCase):
    def _run(self, argv: list[str], environ: dict[str, str] | None = None) -> tuple[int, str]:
        env = {"ASTRODASH_LOAD_DELAY": "0", "ASTRODASH_LOG_LEVEL": "INFO"}
        env.update(environ or {})
        out = io.StringIO()
        with mock.patch.dict("os.environ", env), mock.patch.object(cli, "load_dotenv"):
            with contextlib.redirect_stdout(out):
                code = cli.main(argv)
        return code, out.getvalue()

    def test_full_snapshot(self) -> None:
        code, output = self._run(["--today", "2025-01-27"])
        self.assertEqual(code, 0)
        self.assertIn("Location: New York, USA", output)
        self.assertIn("Moon Phase: 🌑", output)
        self.assertIn("Moon Phase: All", output)
        self.assertIn("2025-01-30", output)
        self.assertIn("Total Records: 15", output)
        self.assertIn("Average Temperature: 74.9 °F", output)
        self.assertIn("Unique Moon Phases: 8", output)

    def test_filters_apply_to_table_not_summary(self) -> None:
        _, output = self._run(["--search", "2025-01-2", "--phase", "50"])
        self.assertIn("Moon Phase: Waxing Gibbous", output)
        self.assertIn("2025-01-20", output)
        self.assertNotIn("2025-01-19", output)
        self.assertIn("Total Records: 15", output)

    def test_invalid_config_exits_with_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with contextlib.redirect_stderr(io.StringIO()):
                self._run([], {"ASTRODASH_LOAD_DELAY": "later"})
        self.assertEqual(ctx.exception.code, 2)

    def test_watch_prints_clock_ticks_after_snapshot(self) -> None:
        code, output = self._run(["--watch", "0.05"], {"ASTRODASH_CLOCK_INTERVAL": "0.01"})
        self.assertEqual(code, 0)
        snapshot, _, ticks = output.partition("Unique Moon Phases: 8")
        self.assertNotIn("Moon Rise:", snapshot)
        self.assertGreaterEqual(ticks.count("Moon Rise:"), 2)

    def test_infinite_phase_means_all(self) -> None:
        code, output = self._run(["--phase", "inf"])
        self.assertEqual(code, 0)
        self.assertIn("Moon Phase: All", output)
        self.assertIn("2025-01-16", output)

    def test_unknown_log_level_exits_with_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with contextlib.redirect_stderr(io.StringIO()):
                self._run([], {"ASTRODASH_LOG_LEVEL": "verbose"})
        self.assertEqual(ctx.exception.code, 2)

    def test_negative_watch_rejected(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            with contextlib.redirect_stderr(io.StringIO()):
                self._run(["--watch", "-1"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
