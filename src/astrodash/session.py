"""Scoped async lifetime for a dashboard view: one-shot simulated load plus a clock ticker.

Both activities run as tasks inside an ``asyncio.TaskGroup`` owned by
``open_session``; leaving the ``async with`` block cancels whatever is
still running, including a load that has not finished yet.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime
from functools import partial

from astrodash.compute import format_clock, now_in_zone
from astrodash.config import Settings
from astrodash.data import load_reference_records
from astrodash.models import WeatherRecord
from astrodash.view_model import DataViewModel

logger = logging.getLogger(__name__)


async def simulated_load(delay: float) -> tuple[WeatherRecord, ...]:
    """Pause for delay seconds, then return the reference records. Cannot fail."""
    logger.info("Loading astronomical data (simulated %.2fs delay)", delay)
    await asyncio.sleep(delay)
    records = load_reference_records()
    logger.info("Loaded %d records", len(records))
    return records


async def run_clock(
    interval: float,
    on_tick: Callable[[str], None],
    now: Callable[[], datetime] = datetime.now,
) -> None:
    """Report the formatted time immediately and then every interval seconds, forever."""
    while True:
        on_tick(format_clock(now()))
        await asyncio.sleep(interval)


@dataclass
class DashboardSession:
    view_model: DataViewModel
    load_task: asyncio.Task[None]
    clock_task: asyncio.Task[None]

    async def wait_loaded(self) -> DataViewModel:
        await self.load_task
        return self.view_model


@asynccontextmanager
async def open_session(
    settings: Settings,
    *,
    today: str | None = None,
    now: Callable[[], datetime] | None = None,
    on_tick: Callable[[str], None] | None = None,
) -> AsyncIterator[DashboardSession]:
    """Start the load and clock tasks for one view lifetime.

    Args:
        settings: Delay, clock cadence, location and time zone.
        today: ISO date used for the today's-phase lookup; None = real today.
        now: Clock source for the ticker; defaults to now in settings.tz_name.
        on_tick: Extra callback for each formatted clock string.

    Yields:
        DashboardSession whose view_model starts in the loading state.

    Raises:
        Whatever the body or a task raised. A lone error is re-raised
        unwrapped; several at once surface as an ExceptionGroup.
    """
    view_model = DataViewModel(location=settings.location, tz_name=settings.tz_name)
    clock = now if now is not None else partial(now_in_zone, settings.tz_name)

    def tick(value: str) -> None:
        view_model.current_time = value
        if on_tick is not None:
            on_tick(value)

    async def load() -> None:
        records = await simulated_load(settings.load_delay_seconds)
        view_model.set_records(records, today=today)

    try:
        async with asyncio.TaskGroup() as group:
            load_task = group.create_task(load(), name="astrodash-load")
            clock_task = group.create_task(
                run_clock(settings.clock_interval_seconds, tick, clock),
                name="astrodash-clock",
            )
            try:
                yield DashboardSession(
                    view_model=view_model, load_task=load_task, clock_task=clock_task
                )
            finally:
                load_task.cancel()
                clock_task.cancel()
                logger.info("Dashboard session closed")
    except BaseExceptionGroup as eg:
        # TaskGroup wraps errors; a single one is re-raised as itself
        if len(eg.exceptions) == 1:
            raise eg.exceptions[0] from None
        raise
