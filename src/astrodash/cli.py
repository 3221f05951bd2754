"""Terminal snapshot of the dashboard.

    uv run astrodash --search waxing --phase 30
"""

import argparse
import asyncio

from dotenv import load_dotenv

from astrodash.config import ConfigError, Settings, configure_logging, load_settings
from astrodash.renderers.table import render_text_table, summary_items
from astrodash.session import open_session
from astrodash.strings import t
from astrodash.view_model import DataViewModel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astrodash",
        description="Print the AstroDash moon phase table with optional filters.",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Case-insensitive text matched against date or phase name.",
    )
    parser.add_argument(
        "--phase",
        type=float,
        default=0.0,
        help="Phase slider value 0-100 (default: 0, all phases).",
    )
    parser.add_argument(
        "--today",
        default=None,
        help="Date (YYYY-MM-DD) used for today's moon phase (default: real today).",
    )
    parser.add_argument(
        "--watch",
        type=float,
        default=0.0,
        help="Keep the session open and print the clock for this many seconds.",
    )
    return parser


def format_snapshot(view_model: DataViewModel) -> str:
    lines = [
        f"{t('card_location')}: {view_model.location_display}",
        f"{t('card_moon_phase')}: {view_model.current_phase_glyph}",
        f"{t('label_phase')} {view_model.phase_bucket}",
        "",
        render_text_table(view_model.filtered_records),
        "",
    ]
    lines += [f"{label} {value}" for label, value in summary_items(view_model.summary)]
    return "\n".join(lines)


async def run_snapshot(args: argparse.Namespace, settings: Settings) -> str:
    watching = False

    def on_tick(value: str) -> None:
        if watching:
            print(f"{t('card_moon_rise')}: {value}", flush=True)

    async with open_session(settings, today=args.today, on_tick=on_tick) as session:
        view_model = await session.wait_loaded()
        view_model.search_term = args.search
        view_model.phase_slider_value = args.phase
        snapshot = format_snapshot(view_model)
        print(snapshot, flush=True)
        if args.watch > 0:
            watching = True
            await asyncio.sleep(args.watch)
    return snapshot


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.watch < 0:
        parser.error("--watch must not be negative")

    try:
        settings = load_settings()
    except ConfigError as e:
        parser.error(str(e))
    configure_logging(settings)

    asyncio.run(run_snapshot(args, settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
