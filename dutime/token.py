"""Tokeniser for format specifiers such as ``%Y``, ``%_b`` or ``%dth``."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

BIZDA_AFTER = 0
BIZDA_BEFORE = 1


class SpecFlag(IntEnum):
    """What a format specifier stands for."""

    UNK = 0
    N_STD = 1
    # date specs
    N_DSTD = 2
    N_DFIRST = 2
    N_YEAR = 3
    N_MON = 4
    N_DCNT_WEEK = 5
    N_DCNT_MON = 6
    N_DCNT_YEAR = 7
    N_WCNT_MON = 8
    N_WCNT_YEAR = 9
    N_QTR = 10
    N_LAST = 10
    S_WDAY = 11
    S_DFIRST = 11
    S_MON = 12
    S_QTR = 13
    S_DLAST = 13
    # time specs
    N_SEC = 14
    N_TFIRST = 14
    N_MIN = 15
    N_HOUR = 16
    N_TSTD = 17
    N_NANO = 18
    N_TLAST = 18
    # date/time specs
    N_EPOCH = 19
    N_ZDIFF = 20
    N_DTLAST = 20
    S_AMPM = 21
    S_TFIRST = 21
    S_TLAST = 21
    LIT_PERCENT = 22
    LIT_TAB = 23
    LIT_NL = 24


class AbbrMode(IntEnum):
    """How names are to be abbreviated."""

    NORM = 0
    ABBR = 1
    LONG = 2
    ILL = 3


class PadMode(IntEnum):
    """How numbers are to be padded."""

    NONE = 0
    ZERO = 1
    SPC = 2
    OMIT = 3


class WeekCount(IntEnum):
    """Week-count conventions for week numbers and weekdays."""

    ISO = 0
    MON = 1
    SUN = 2
    ABS = 3


@dataclass
class Spec:
    """A tokenised format specifier with its modifiers."""

    spfl: SpecFlag = SpecFlag.UNK
    ord: bool = False
    rom: bool = False
    tai: bool = False
    ab: int = BIZDA_AFTER
    bizda: bool = False
    abbr: AbbrMode = AbbrMode.NORM
    pad: PadMode = PadMode.NONE
    sc12: bool = False
    cap: bool = False
    wk_cnt: WeekCount = WeekCount.ISO

    def padchar(self) -> str:
        """Return the padding character: '0' unless space or omit padding is asked for."""
        return "0" if self.pad < PadMode.SPC else " "


_SIMPLE = {
    "F": SpecFlag.N_DSTD,
    "T": SpecFlag.N_TSTD,
    "y": SpecFlag.N_YEAR,
    "m": SpecFlag.N_MON,
    "d": SpecFlag.N_DCNT_MON,
    "w": SpecFlag.N_DCNT_WEEK,
    "D": SpecFlag.N_DCNT_YEAR,
    "j": SpecFlag.N_DCNT_YEAR,
    "c": SpecFlag.N_WCNT_MON,
    "a": SpecFlag.S_WDAY,
    "b": SpecFlag.S_MON,
    "h": SpecFlag.S_MON,
    "H": SpecFlag.N_HOUR,
    "M": SpecFlag.N_MIN,
    "S": SpecFlag.N_SEC,
    "N": SpecFlag.N_NANO,
    "P": SpecFlag.S_AMPM,
    "s": SpecFlag.N_EPOCH,
    "Z": SpecFlag.N_ZDIFF,
    "%": SpecFlag.LIT_PERCENT,
    "t": SpecFlag.LIT_TAB,
    "n": SpecFlag.LIT_NL,
    "Q": SpecFlag.S_QTR,
    "q": SpecFlag.N_QTR,
}

_LONG = {
    "Y": SpecFlag.N_YEAR,
    "A": SpecFlag.S_WDAY,
    "B": SpecFlag.S_MON,
}

_WEEK_YEAR = {
    "U": WeekCount.SUN,
    "V": WeekCount.ISO,
    "C": WeekCount.ABS,
    "W": WeekCount.MON,
}

_PADS = {"0": PadMode.ZERO, " ": PadMode.SPC, "-": PadMode.OMIT}


def parse_spec(fmt: str, pos: int) -> tuple[Spec, int]:
    """Tokenise the specifier at FMT[POS].

    Return the spec and the position after it.  A character other than '%'
    yields an UNK spec and consumes one character; an unknown directive
    yields an UNK spec and consumes the '%' and the character after it.
    """
    res = Spec()
    i = pos
    if i >= len(fmt) or fmt[i] != "%":
        return res, min(i + 1, len(fmt))

    while True:
        i += 1
        c = fmt[i] if i < len(fmt) else ""
        if c == "_":
            res.abbr = AbbrMode.ABBR
        elif c == "O":
            res.rom = True
        elif c in _PADS and c:
            res.pad = _PADS[c]
        elif c == "r":
            res.tai = True
        else:
            break

    if c in _LONG and c:
        res.abbr = AbbrMode.LONG
        res.spfl = _LONG[c]
    elif c == "u":
        res.wk_cnt = WeekCount.MON
        res.spfl = SpecFlag.N_DCNT_WEEK
    elif c in _WEEK_YEAR and c:
        res.wk_cnt = _WEEK_YEAR[c]
        res.spfl = SpecFlag.N_WCNT_YEAR
    elif c == "I":
        res.sc12 = True
        res.spfl = SpecFlag.N_HOUR
    elif c == "p":
        res.cap = True
        res.spfl = SpecFlag.S_AMPM
    elif c in ("G", "g") and c:
        if c == "G":
            res.abbr = AbbrMode.LONG
        res.tai = True
        res.spfl = SpecFlag.N_YEAR
    elif c in _SIMPLE and c:
        res.spfl = _SIMPLE[c]
    else:
        return res, min(i + 1, len(fmt))

    # ordinal suffix
    if (
        SpecFlag.UNK < res.spfl <= SpecFlag.N_LAST
        and fmt[i + 1 : i + 3] == "th"
        and not res.rom
    ):
        res.ord = True
        i += 2
    # business day suffix
    if res.spfl in (SpecFlag.N_DCNT_MON, SpecFlag.N_DCNT_YEAR):
        nxt = fmt[i + 1 : i + 2]
        if nxt == "B":
            res.ab = BIZDA_BEFORE
            res.bizda = True
            i += 1
        elif nxt == "b":
            res.bizda = True
            i += 1
    return res, i + 1


def iter_format(fmt: str) -> Iterator[tuple[Spec, str]]:
    """Yield each spec of FMT with the raw text it was read from.

    For an UNK spec the first character of the text is the literal to match
    or print.
    """
    pos = 0
    while pos < len(fmt):
        spec, end = parse_spec(fmt, pos)
        yield spec, fmt[pos:end]
        pos = end