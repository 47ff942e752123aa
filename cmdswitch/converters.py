"""Converter functions to use with `CommandLine.get_switch_value`.

Every converter takes the raw string value of a switch. Converters raise
``ValueError`` on malformed input, which the caller sees unchanged.
"""
from __future__ import annotations

from pathlib import Path

TRUTHY_LITERALS = {"1", "true", "yes", "on"}
FALSY_LITERALS = {"0", "false", "no", "off"}


def identity(value: str) -> str:
    """Return the raw value unchanged."""
    return value


def to_bool(value: str) -> bool:
    """Parse a boolean literal such as ``true``, ``no`` or ``1``."""
    normalized = value.strip().lower()
    if normalized in TRUTHY_LITERALS:
        return True
    if normalized in FALSY_LITERALS:
        return False
    raise ValueError(f"Unsupported boolean literal: {value!r}")


def to_int(value: str) -> int:
    return int(value)


def to_float(value: str) -> float:
    return float(value)


def to_path(value: str) -> Path:
    """Parse a file-system path, expanding the user's home directory."""
    return Path(value).expanduser()


def to_list(value: str, sep: str = ",") -> list[str]:
    """Split a separated list of items, dropping empty items.

    Use ``functools.partial(to_list, sep=":")`` for other separators.
    """
    return [item.strip() for item in value.split(sep) if item.strip()]


def infer_type(value: str) -> int | float | str | bool:
    """Best-effort conversion to bool, int or float, falling back to str."""
    # Try bool
    if value.lower() in ("true", "false"):
        return value.lower() == "true"

    # Try int
    try:
        return int(value)
    except ValueError:
        pass

    # Try float
    try:
        return float(value)
    except ValueError:
        pass

    # Otherwise, assume it's a string
    return value
