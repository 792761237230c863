"""Light-weight locale support for weekday and month names.

A locale file holds blocks, each being a locale name on a line by itself
followed by four lines of tab-separated names: abbreviated weekdays, long
weekdays, abbreviated months and long months.  Weekdays run Monday to
Sunday, months January to December; index 0 of every list is unused.

Parsers and formatters keep separate name sets, chosen with
``set_input_locale()`` and ``set_format_locale()``.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

DEFAULT_LOCALE_FILE = "locale"
LOCALE_FILE_ENV = "LOCALE_FILE"

# one-letter weekday and month codes (the latter are futures expiry codes)
ABAB_WDAY = "XMTWRFAS"
ABAB_MON = "_FGHJKMNQUVXZ"

# a line contributes at most this many names
_MAX_NAMES = 12
_CONTROL = re.compile(r"[\x00-\x1f]")


@dataclass(frozen=True)
class NameList:
    """Names indexed from 1, with the shortest and longest name length."""

    names: tuple[str, ...]
    min_len: int
    max_len: int

    def __getitem__(self, index: int) -> str:
        return self.names[index]

    def __len__(self) -> int:
        return len(self.names)

    @classmethod
    def from_line(cls, line: str) -> NameList:
        """Build a list from one newline-terminated, tab-separated line.

        Every ASCII control character ends a name; text after the last
        control character is ignored.
        """
        if not line.endswith("\n"):
            raise LookupError("locale line is not terminated")
        segments = _CONTROL.split(line)[:-1][:_MAX_NAMES]
        lengths = [len(s) for s in segments]
        return cls(("",) + tuple(segments), min(lengths), max(lengths))


@dataclass(frozen=True)
class LocaleNames:
    """The four name lists that make up a locale."""

    long_wday: NameList
    abbr_wday: NameList
    long_mon: NameList
    abbr_mon: NameList


DEFAULT_NAMES = LocaleNames(
    long_wday=NameList(
        (
            "Miracleday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
            "Sunday",
        ),
        6,
        9,
    ),
    abbr_wday=NameList(
        ("Mir", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"), 3, 3
    ),
    long_mon=NameList(
        (
            "Miraculary",
            "January",
            "February",
            "March",
            "April",
            "May",
            "June",
            "July",
            "August",
            "September",
            "October",
            "November",
            "December",
        ),
        3,
        9,
    ),
    abbr_mon=NameList(
        (
            "Mir",
            "Jan",
            "Feb",
            "Mar",
            "Apr",
            "May",
            "Jun",
            "Jul",
            "Aug",
            "Sep",
            "Oct",
            "Nov",
            "Dec",
        ),
        3,
        3,
    ),
)

_input = DEFAULT_NAMES
_format = DEFAULT_NAMES


def _take_line(data: str, pos: int) -> tuple[str, int]:
    end = data.find("\n", pos)
    if end < 0:
        raise LookupError("locale block is incomplete")
    return data[pos : end + 1], end + 1


def read_locale(path: str | os.PathLike[str], name: str) -> LocaleNames:
    """Read the locale NAME from the locale file at PATH.

    Raise OSError if the file cannot be read, ValueError if it is empty and
    LookupError if NAME is not found or its block is malformed.  The first
    occurrence of NAME in the file must be followed by a newline.
    """
    if not name:
        raise LookupError("empty locale name")
    with open(path, encoding="utf-8", errors="surrogateescape") as fh:
        data = fh.read()
    if not data:
        raise ValueError(f"locale file {os.fspath(path)!r} is empty")
    at = data.find(name)
    if at < 0:
        raise LookupError(f"locale {name!r} not found")
    pos = at + len(name)
    if data[pos : pos + 1] != "\n":
        raise LookupError(f"locale {name!r} not found")
    pos += 1
    lists = []
    for _ in range(4):
        line, pos = _take_line(data, pos)
        lists.append(NameList.from_line(line))
    abbr_wday, long_wday, abbr_mon, long_mon = lists
    return LocaleNames(
        long_wday=long_wday,
        abbr_wday=abbr_wday,
        long_mon=long_mon,
        abbr_mon=abbr_mon,
    )


def _locale_file() -> str:
    return os.environ.get(LOCALE_FILE_ENV) or DEFAULT_LOCALE_FILE


def _load(name: str) -> LocaleNames | None:
    try:
        return read_locale(_locale_file(), name)
    except LookupError:
        return None


def set_input_locale(name: str | None) -> bool:
    """Use locale NAME for parsing; None or "" restores the English defaults.

    The locale file is taken from $LOCALE_FILE, else ``locale``.  Return
    whether the names changed; an unknown locale leaves them as they are.
    """
    global _input
    if not name:
        _input = DEFAULT_NAMES
        return True
    loaded = _load(name)
    if loaded is None:
        return False
    _input = loaded
    return True


def set_format_locale(name: str | None) -> bool:
    """Use locale NAME for formatting; None or "" restores the English defaults.

    Behaves like set_input_locale() otherwise.
    """
    global _format
    if not name:
        _format = DEFAULT_NAMES
        return True
    loaded = _load(name)
    if loaded is None:
        return False
    _format = loaded
    return True


def input_names() -> LocaleNames:
    """Return the names currently used for parsing."""
    return _input


def format_names() -> LocaleNames:
    """Return the names currently used for formatting."""
    return _format