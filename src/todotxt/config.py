"""
Settings read from the environment.

Variables:
    TODOTXT_LOG_LEVEL  level used by configure_logging() (default WARNING)
    TODOTXT_TODAY      ISO date that pins "today" for the default clock

Values are read on every call so tests can monkeypatch the environment.
"""

import logging
import os
import sys
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from todotxt.clock import Clock, FixedClock, system_clock
from todotxt.errors import ConfigurationError

log = logging.getLogger(__name__)

ENV_PREFIX = "TODOTXT"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str) -> Optional[str]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip()


def _parse_today(raw: Optional[str]) -> Optional[date]:
    if raw is None:
        return None
    try:
        return datetime.strptime(raw, "%Y-%m-%d").date()
    except ValueError as exc:
        raise ConfigurationError(f"{_k('TODAY')} must be YYYY-MM-DD, got {raw!r}") from exc


def _parse_log_level(raw: Optional[str]) -> str:
    if raw is None:
        return "WARNING"
    level = raw.upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"{_k('LOG_LEVEL')} must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}")
    return level


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    today: Optional[date] = None

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            log_level=_parse_log_level(_env(_k("LOG_LEVEL"))),
            today=_parse_today(_env(_k("TODAY"))),
        )


def get_settings() -> Settings:
    return Settings.from_env()


def default_clock() -> Clock:
    """
    Clock used by tasks built without an explicit ``clock=``.

    Reads only TODOTXT_TODAY. A value that does not parse is logged and
    ignored, so building a task never fails on configuration.
    """
    try:
        today = _parse_today(_env(_k("TODAY")))
    except ConfigurationError as exc:
        log.warning("%s; using the system clock", exc)
        return system_clock
    if today is not None:
        return FixedClock(today)
    return system_clock


def configure_logging(level: Optional[str] = None) -> None:
    """
    Send todotxt logs to stderr.

    Meant for applications and scripts; the library itself never touches
    the root logger.
    """
    logging.basicConfig(
        level=level or get_settings().log_level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
