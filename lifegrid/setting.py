"""Command-line settings: board size, cell scale and step delay."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    """Board side length in cells, cell side in pixels, step delay in milliseconds."""

    size: int = 20
    scale: int = 20
    delay: int = 1000


_FIELDS = {
    "-s": "size",
    "size": "size",
    "-c": "scale",
    "scale": "scale",
    "-d": "delay",
    "delay": "delay",
}
_HELP_KEYS = frozenset({"-h", "help"})
_MINIMUM = {"size": 1, "scale": 1, "delay": 0}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def usage() -> str:
    """Return the help text listing the accepted options."""
    return (
        "-h help\n"
        "size:integer -s:integer - set the size of the playing field\n"
        "scale:integer -c:integer - set cell margin size\n"
        "delay:integer -d:integer - set the running delay time\n"
    )


def _to_int(field: str, value: str) -> int:
    match = _LEADING_INT.match(value)
    if match is None:
        raise ValueError(f"{field}: expected an integer, got {value!r}")
    number = int(match.group(1))
    if number < _MINIMUM[field]:
        raise ValueError(f"{field}: must be at least {_MINIMUM[field]}, got {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    """Build settings from ``key:value`` words; keys are case-insensitive.

    Unknown keys are ignored. A help key prints the usage text.
    """
    if argv is None:
        argv = sys.argv[1:]
    values: dict[str, int] = {}
    for word in argv:
        key, _, value = word.lower().partition(":")
        if key in _HELP_KEYS:
            print(usage())
        elif key in _FIELDS:
            field = _FIELDS[key]
            values[field] = _to_int(field, value)
    return Settings(**values)