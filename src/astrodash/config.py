"""Runtime settings read from the environment (``.env`` is loaded by the entry points)."""

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass

from pytz import UnknownTimeZoneError, timezone

from astrodash.models import DEFAULT_LOCATION

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


class ConfigError(Exception):
    """An environment value could not be parsed."""


@dataclass(frozen=True)
class Settings:
    location: str = DEFAULT_LOCATION
    load_delay_seconds: float = 1.0
    clock_interval_seconds: float = 1.0
    tz_name: str | None = None  # IANA zone; None = local/browser zone
    log_level: str = "INFO"


def _read_seconds(env: Mapping[str, str], key: str, default: float, allow_zero: bool) -> float:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ConfigError(f"{key} must be a number of seconds, got {raw!r}") from e
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        raise ConfigError(f"{key} out of range: {raw!r}")
    return value


def _read_log_level(env: Mapping[str, str]) -> str:
    level = env.get("ASTRODASH_LOG_LEVEL", "").strip().upper() or "INFO"
    if level not in logging.getLevelNamesMapping():
        raise ConfigError(f"Unknown log level: {level}")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ASTRODASH_* variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        Parsed Settings; unset variables take their defaults.

    Raises:
        ConfigError: On a non-numeric, infinite or negative delay, a non-positive
            clock interval, an unknown time zone name, or an unknown log level.
    """
    env = os.environ if environ is None else environ

    tz_name = env.get("ASTRODASH_TIMEZONE", "").strip() or None
    if tz_name is not None:
        try:
            timezone(tz_name)
        except UnknownTimeZoneError as e:
            raise ConfigError(f"Unknown time zone: {tz_name}") from e

    settings = Settings(
        location=env.get("ASTRODASH_LOCATION", "").strip() or DEFAULT_LOCATION,
        load_delay_seconds=_read_seconds(env, "ASTRODASH_LOAD_DELAY", 1.0, allow_zero=True),
        clock_interval_seconds=_read_seconds(
            env, "ASTRODASH_CLOCK_INTERVAL", 1.0, allow_zero=False
        ),
        tz_name=tz_name,
        log_level=_read_log_level(env),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
