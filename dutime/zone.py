"""Parsing and printing of zone offsets such as ``+01:00``, ``-0530`` or ``Z``."""

from __future__ import annotations

from .strops import strtoi_lim

_MAX_ZONE_HOURS = 14


def _read(text: str, pos: int, ulim: int) -> tuple[int, int] | None:
    try:
        return strtoi_lim(text, pos, 0, ulim)
    except ValueError:
        return None


def parse_zone(text: str, pos: int = 0) -> tuple[int, int]:
    """Read a zone offset from TEXT at POS.

    Accepted are ``Z`` and ``[+-]HH[:]MM[[:]SS]`` with zero-padded hours
    (at most 14) and minutes.  Return the offset in seconds east of UTC and
    the position after what was accepted.  Nothing is consumed when no
    offset is found; an offset that stops after its hours still carries
    the hours but consumes nothing, as the hours alone are not accepted.
    """
    c = text[pos : pos + 1]
    if c == "Z":
        return 0, pos + 1
    if c not in ("+", "-"):
        return 0, pos

    negative = c == "-"
    end = pos
    res = 0

    def signed() -> tuple[int, int]:
        return (-res if negative else res), end

    got = _read(text, pos + 1, _MAX_ZONE_HOURS)
    if got is None:
        return signed()
    hours, tp = got
    if tp - pos < 3:
        # only fully zero-padded hours count
        return signed()
    res += 3600 * hours
    if text[tp : tp + 1] == ":":
        tp += 1

    got = _read(text, tp, 59)
    if got is None:
        return signed()
    minutes, up = got
    if up - tp < 2:
        return signed()
    res += 60 * minutes
    end = tp = up
    if text[tp : tp + 1] == ":":
        tp += 1

    got = _read(text, tp, 59)
    if got is None:
        return signed()
    seconds, tp = got
    res += seconds
    end = tp
    return signed()


def format_zone(seconds: int) -> str:
    """Print an offset in seconds east of UTC as ``+HH:MM`` (seconds are dropped)."""
    sign = "+"
    if seconds < 0:
        seconds = -seconds
        sign = "-"
    return f"{sign}{seconds // 3600:02d}:{(seconds // 60) % 60:02d}"