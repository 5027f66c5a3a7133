"""Validation and runtime guardrails."""

from __future__ import annotations

import re
import time
from collections.abc import Sequence

from .errors import ConfigError

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def blocking_sleep(seconds: float) -> None:
    """Block the current thread between provider calls."""
    if seconds > 0:
        time.sleep(seconds)


def parse_length(raw: str | None, default: int) -> int:
    """Parse a length answer; anything but a plain integer, or zero, falls back to default."""
    value = (raw or "").strip()
    if not INTEGER_PATTERN.fullmatch(value):
        return default
    return int(value) or default


def parse_tlds(raw: str) -> tuple[str, ...]:
    """Split a comma-separated TLD list and keep entries starting with a dot.

    An input with no dotted entries yields an empty tuple rather than the
    default list.
    """
    parts = (part.strip() for part in raw.split(","))
    return tuple(part for part in parts if part.startswith("."))


def validate_runtime_constraints(
    *,
    tlds: Sequence[str],
    min_length: int,
    max_length: int,
    delay_ms: int,
    request_timeout: float,
) -> None:
    """Validate CLI/runtime configuration and raise ConfigError on invalid values."""
    if min_length < 1 or max_length < 1:
        raise ConfigError("--min-length and --max-length must be >= 1.")
    if delay_ms < 0:
        raise ConfigError("delay must be >= 0 ms.")
    if request_timeout <= 0:
        raise ConfigError("--timeout must be > 0.")
    for tld in tlds:
        if not isinstance(tld, str) or not tld.startswith("."):
            raise ConfigError(f"TLD {tld!r} must start with '.'.")
