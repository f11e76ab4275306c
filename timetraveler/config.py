from __future__ import annotations

import os

from dotenv import load_dotenv

from .date.types import TimestampConfig

ENV_DEFAULT_HOUR = "TIMETRAVELER_DEFAULT_HOUR"
ENV_DISTRIBUTE_TIMES = "TIMETRAVELER_DISTRIBUTE_TIMES"
ENV_CHRONOLOGICAL_ORDER = "TIMETRAVELER_CHRONOLOGICAL_ORDER"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise RuntimeError(f"Invalid {name}={raw!r} (expected one of: true/false, yes/no, on/off, 1/0)")


def _env_hour(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        hour = int(raw)
    except ValueError:
        raise RuntimeError(f"Invalid {name}={raw!r} (expected an hour 0-23)") from None
    if not 0 <= hour <= 23:
        raise RuntimeError(f"Invalid {name}={hour} (expected an hour 0-23)")
    return hour


def timestamp_config_from_env(
    *,
    default_hour: int | None = None,
    distribute_times: bool | None = None,
    chronological_order: bool | None = None,
    dotenv: bool = True,
) -> TimestampConfig:
    """Build a TimestampConfig from TIMETRAVELER_* env vars (and .env, if present).

    Explicit keyword arguments win over the environment; anything unset falls
    back to the TimestampConfig defaults.
    """

    if dotenv:
        load_dotenv()

    base = TimestampConfig()
    return TimestampConfig(
        default_hour=default_hour if default_hour is not None else _env_hour(ENV_DEFAULT_HOUR, base.default_hour),
        distribute_times=(
            distribute_times
            if distribute_times is not None
            else _env_bool(ENV_DISTRIBUTE_TIMES, base.distribute_times)
        ),
        chronological_order=(
            chronological_order
            if chronological_order is not None
            else _env_bool(ENV_CHRONOLOGICAL_ORDER, base.chronological_order)
        ),
    )
