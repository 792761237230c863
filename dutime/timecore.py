"""Times of day: parsing, formatting and arithmetic on hour/minute/second values."""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from enum import IntEnum

from .strops import nanos_to_str, pad_number, strtoi_lim
from .token import PadMode, Spec, SpecFlag, iter_format

NANOS_PER_SEC = 1_000_000_000
SECS_PER_MIN = 60
MINS_PER_HOUR = 60
HOURS_PER_DAY = 24
SECS_PER_HOUR = SECS_PER_MIN * MINS_PER_HOUR
SECS_PER_DAY = SECS_PER_HOUR * HOURS_PER_DAY

HMS_DEFAULT_FORMAT = "%H:%M:%S"

_NANO_DIGITS = 9


class TimeType(IntEnum):
    """Kinds of time values."""

    TUNK = 0
    HMS = 1


class TimeParseError(ValueError):
    """Raised when a time string does not match its format."""


@dataclass(frozen=True)
class HMS:
    """An hour/minute/second time of day with nanoseconds.

    ``carry`` holds the days carried over by the last arithmetic operation.
    """

    h: int = 0
    m: int = 0
    s: int = 0
    ns: int = 0
    carry: int = 0
    typ: TimeType = TimeType.HMS

    def seconds_since_midnight(self) -> int:
        """Return the whole seconds elapsed since midnight."""
        return (self.h * MINS_PER_HOUR + self.m) * SECS_PER_MIN + self.s


@dataclass
class ParsedTime:
    """Time components collected while parsing, with flags for what was seen."""

    h: int = 0
    m: int = 0
    s: int = 0
    ns: int = 0
    am_pm: bool = False
    pm: bool = False
    h_set: bool = False
    m_set: bool = False
    s_set: bool = False
    ns_set: bool = False


def guess_time(parsed: ParsedTime) -> HMS:
    """Turn collected components into an HMS time, applying any am/pm indicator."""
    if not (parsed.h_set or parsed.m_set or parsed.s_set or parsed.ns_set):
        raise TimeParseError("no time component given")
    if min(parsed.h, parsed.m, parsed.s, parsed.ns) < 0:
        raise TimeParseError("negative time component")
    hour = parsed.h
    if parsed.am_pm:
        hour %= HOURS_PER_DAY // 2
        hour += 12 if parsed.pm else 0
    return HMS(h=hour, m=parsed.m, s=parsed.s, ns=parsed.ns)


def _read(text: str, pos: int, llim: int, ulim: int) -> tuple[int, int]:
    try:
        return strtoi_lim(text, pos, llim, ulim)
    except ValueError as exc:
        raise TimeParseError(str(exc)) from exc


def _expect(text: str, pos: int, char: str) -> int:
    if text[pos : pos + 1] != char:
        raise TimeParseError(f"expected {char!r} at position {pos}")
    return pos + 1


def parse_time_spec(parsed: ParsedTime, text: str, pos: int, spec: Spec) -> int:
    """Read the component SPEC stands for from TEXT at POS into PARSED.

    Return the position after what was read.
    """
    flag = spec.spfl
    if flag == SpecFlag.N_TSTD:
        parsed.h, pos = _read(text, pos, 0, 23)
        pos = _expect(text, pos, ":")
        parsed.m, pos = _read(text, pos, 0, 59)
        pos = _expect(text, pos, ":")
        parsed.s, pos = _read(text, pos, 0, 60)
        parsed.h_set = parsed.m_set = parsed.s_set = True
    elif flag == SpecFlag.N_HOUR:
        if spec.sc12:
            parsed.h, pos = _read(text, pos, 1, 12)
        else:
            parsed.h, pos = _read(text, pos, 0, 23)
        parsed.h_set = True
    elif flag == SpecFlag.N_MIN:
        parsed.m, pos = _read(text, pos, 0, 59)
        parsed.m_set = True
    elif flag == SpecFlag.N_SEC:
        parsed.s, pos = _read(text, pos, 0, 60)
        parsed.s_set = True
    elif flag == SpecFlag.N_NANO:
        value, end = _read(text, pos, 0, 999_999_999)
        digits = end - pos
        if digits < _NANO_DIGITS:
            value *= 10 ** (_NANO_DIGITS - digits)
        parsed.ns = value
        parsed.ns_set = True
        pos = end
    elif flag == SpecFlag.S_AMPM:
        parsed.am_pm = True
        marker = "".join(chr(ord(c) | 0x20) for c in text[pos : pos + 2])
        if marker == "am":
            parsed.pm = False
        elif marker == "pm":
            parsed.pm = True
        else:
            raise TimeParseError(f"expected am/pm at position {pos}")
        pos += 2
    elif flag == SpecFlag.LIT_PERCENT:
        pos = _expect(text, pos, "%")
    elif flag == SpecFlag.LIT_TAB:
        pos = _expect(text, pos, "\t")
    elif flag == SpecFlag.LIT_NL:
        pos = _expect(text, pos, "\n")
    else:
        raise TimeParseError(f"specifier {flag.name} is not a time specifier")
    return pos


def _two_digits(value: int, spec: Spec) -> str:
    width = 1 if spec.pad == PadMode.OMIT else 2
    return pad_number(value, width, spec.padchar())


def format_time_spec(parsed: ParsedTime, spec: Spec) -> str:
    """Print the component SPEC stands for from PARSED; non-time specs print nothing."""
    flag = spec.spfl
    if flag == SpecFlag.N_TSTD:
        return f"{parsed.h:02d}:{parsed.m:02d}:{parsed.s:02d}"
    if flag == SpecFlag.N_HOUR:
        hour = parsed.h
        if spec.sc12 and not 1 <= hour <= 12:
            hour = hour - 12 if hour else 12
        return _two_digits(hour, spec)
    if flag == SpecFlag.N_MIN:
        return _two_digits(parsed.m, spec)
    if flag == SpecFlag.N_SEC:
        return _two_digits(parsed.s, spec)
    if flag == SpecFlag.S_AMPM:
        marker = "PM" if 12 <= parsed.h < 24 else "AM"
        return marker if spec.cap else marker.lower()
    if flag == SpecFlag.N_NANO:
        return nanos_to_str(parsed.ns)
    if flag == SpecFlag.LIT_PERCENT:
        return "%"
    if flag == SpecFlag.LIT_TAB:
        return "\t"
    if flag == SpecFlag.LIT_NL:
        return "\n"
    return ""


def _translate_format(fmt: str | None) -> str:
    if fmt is None:
        return HMS_DEFAULT_FORMAT
    if not fmt.startswith("%") and fmt.lower() == "hms":
        return HMS_DEFAULT_FORMAT
    return fmt


def parse_time(text: str, fmt: str | None = None) -> tuple[HMS, int]:
    """Parse TEXT according to FMT (default ``%H:%M:%S``, or the name ``hms``).

    Parsing stops when either the format or the text runs out.  Return the
    time and the position after what was consumed.
    """
    fmt = _translate_format(fmt)
    parsed = ParsedTime()
    pos = 0
    for spec, raw in iter_format(fmt):
        if pos >= len(text):
            break
        if spec.spfl == SpecFlag.UNK:
            if raw[0] != text[pos]:
                raise TimeParseError(f"expected {raw[0]!r} at position {pos}")
            pos += 1
        else:
            pos = parse_time_spec(parsed, text, pos, spec)
    return guess_time(parsed), pos


def format_time(value: HMS, fmt: str | None = None) -> str:
    """Print VALUE according to FMT (default ``%H:%M:%S``)."""
    fmt = _translate_format(fmt)
    parsed = ParsedTime(h=value.h, m=value.m, s=value.s, ns=value.ns)
    parts = []
    for spec, raw in iter_format(fmt):
        if spec.spfl == SpecFlag.UNK:
            parts.append(raw[0])
        else:
            parts.append(format_time_spec(parsed, spec))
    return "".join(parts)


def add_seconds(value: HMS, seconds: int, corr: int = 0) -> HMS:
    """Add SECONDS to VALUE on a day of SECS_PER_DAY + CORR seconds.

    Whole days that wrap around end up in the result's ``carry``.
    """
    total = value.seconds_since_midnight() + seconds
    days, rem = divmod(total, SECS_PER_DAY + corr)
    if rem < SECS_PER_DAY:
        hour, rem = divmod(rem, SECS_PER_HOUR)
        minute, sec = divmod(rem, SECS_PER_MIN)
    else:
        # the leap second of a day that has one
        hour, minute, sec = 23, 59, 59 + corr
    return replace(value, h=hour, m=minute, s=sec, carry=days, typ=TimeType.HMS)


def diff_seconds(t1: HMS, t2: HMS) -> int:
    """Return T2 - T1 in whole seconds."""
    return t2.seconds_since_midnight() - t1.seconds_since_midnight()


def diff_nanos(t1: HMS, t2: HMS) -> int:
    """Return T2 - T1 in nanoseconds."""
    return diff_seconds(t1, t2) * NANOS_PER_SEC + (t2.ns - t1.ns)


def compare_times(t1: HMS, t2: HMS) -> int:
    """Return -1, 0 or 1 as T1 is before, equal to or after T2."""
    k1 = (t1.h, t1.m, t1.s, t1.ns)
    k2 = (t2.h, t2.m, t2.s, t2.ns)
    return (k1 > k2) - (k1 < k2)


def current_time() -> HMS:
    """Return the current UTC time of day, at microsecond precision."""
    secs, nanos = divmod(time.time_ns(), NANOS_PER_SEC)
    tonly = secs % SECS_PER_DAY
    hour, rem = divmod(tonly, SECS_PER_HOUR)
    minute, sec = divmod(rem, SECS_PER_MIN)
    return HMS(h=hour, m=minute, s=sec, ns=(nanos // 1000) * 1000)