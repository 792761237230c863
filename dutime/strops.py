"""String helpers for parsing and printing date/time components.

Parsers take a string and a start position.  They return the value
together with the position just past what they consumed, and raise
``ValueError`` when nothing could be read or the value is out of range.
"""

from __future__ import annotations

from collections.abc import Sequence

INT32_MAX = 2**31 - 1

_ROMAN_VALUES = {
    "N": 0,
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

# (one, ten, five) letters for hundreds, tens and units
_ROMAN_PLACES = (
    (100, "C", "M", "D"),
    (10, "X", "C", "L"),
    (1, "I", "X", "V"),
)


def _digit_at(text: str, i: int) -> int | None:
    if i < len(text):
        c = text[i]
        if "0" <= c <= "9":
            return ord(c) - ord("0")
    return None


def _read_limited(
    text: str, start: int, llim: int, ulim: int, rulim: int
) -> tuple[int, int]:
    pos = start
    res = 0
    # rulim caps the number of digits read to the number of digits in ulim
    while rulim:
        digit = _digit_at(text, pos)
        if digit is None:
            break
        res = res * 10 + digit
        pos += 1
        if res > ulim:
            break
        rulim //= 10
    if pos == start:
        raise ValueError(f"no digits at position {start}")
    if res < llim or res > ulim:
        raise ValueError(f"{res} not within [{llim}, {ulim}]")
    return res, pos


def strtoi_lim(text: str, pos: int, llim: int, ulim: int) -> tuple[int, int]:
    """Read an unsigned number in [llim, ulim] with at most as many digits as ulim."""
    return _read_limited(text, pos, llim, ulim, max(ulim, 10))


def padstrtoi_lim(text: str, pos: int, llim: int, ulim: int) -> tuple[int, int]:
    """Like strtoi_lim() but leading spaces count as padding digits."""
    rulim = max(ulim, 10)
    while pos < len(text) and text[pos] == " ":
        pos += 1
        rulim //= 10
    return _read_limited(text, pos, llim, ulim, rulim)


def strtoi(text: str, pos: int) -> tuple[int, int]:
    """Read an optionally negative 32-bit number."""
    start = pos
    negative = False
    if pos < len(text) and text[pos] == "-":
        negative = True
        pos += 1
    res = 0
    while res < INT32_MAX // 10:
        digit = _digit_at(text, pos)
        if digit is None:
            break
        res = res * 10 + digit
        pos += 1
    if pos == start:
        raise ValueError(f"no number at position {start}")
    return (-res if negative else res), pos


def _roman_at(text: str, i: int) -> int:
    if i < len(text):
        return _ROMAN_VALUES.get(text[i].upper(), -1)
    return -1


def romstrtoi_lim(text: str, pos: int, llim: int, ulim: int) -> tuple[int, int]:
    """Read a roman numeral (case-insensitive) with a value in [llim, ulim]."""
    start = pos
    res = 0
    value = _roman_at(text, pos)
    while pos < len(text):
        following = _roman_at(text, pos + 1)
        if value < 0:
            break
        if following < 0 or value >= following:
            res += value
        else:
            res -= value
        value = following
        pos += 1
    if pos == start:
        raise ValueError(f"no roman numeral at position {start}")
    if res < llim or res > ulim:
        raise ValueError(f"{res} not within [{llim}, {ulim}]")
    return res, pos


def _roman_digit(digit: int, one: str, ten: str, five: str) -> str:
    if digit == 9:
        return one + ten
    if digit == 4:
        return one + five
    if digit >= 5:
        return five + one * (digit - 5)
    return one * digit


def int_to_roman(value: int) -> str:
    """Return VALUE as an upper-case roman numeral; 0 gives the empty string."""
    if value < 0:
        raise ValueError("roman numerals cannot be negative")
    thousands, rest = divmod(value, 1000)
    parts = ["M" * thousands]
    for place, one, ten, five in _ROMAN_PLACES:
        digit, rest = divmod(rest, place)
        parts.append(_roman_digit(digit, one, ten, five))
    return "".join(parts)


def _lower(c: str) -> str:
    return chr(ord(c) | 0x20) if c else ""


def ordinal_end(text: str, number_end: int) -> int:
    """Skip an ordinal suffix after the number that starts TEXT and ends at NUMBER_END.

    Any number accepts "th"; numbers ending in 1, 2, 3 (but not 11-13) also
    accept "st", "nd" and "rd".  Return the position after the suffix.
    """
    if number_end == 0 or number_end >= len(text):
        raise ValueError("no ordinal suffix")
    first = _lower(text[number_end])
    second = _lower(text[number_end + 1]) if number_end + 1 < len(text) else ""
    suffix = first + second
    if suffix == "th":
        return number_end + 2
    if number_end >= 2 and text[number_end - 2] == "1":
        raise ValueError("teen numbers take only the 'th' suffix")
    wanted = {"1": "st", "2": "nd", "3": "rd"}.get(text[number_end - 1])
    if wanted is None:
        raise ValueError("number takes only the 'th' suffix")
    if suffix == wanted:
        return number_end + 2
    return number_end


def with_ordinal(digits: str) -> str:
    """Append the English ordinal suffix to a two-digit number, dropping a leading 0."""
    if len(digits) >= 2 and digits[-2] == "1":
        return digits + "th"
    if len(digits) >= 2 and digits[-2] == "0":
        digits = digits[:-2] + digits[-1]
    suffix = {"1": "st", "2": "nd", "3": "rd"}.get(digits[-1:], "th")
    return digits + suffix


def lookup_name(text: str, pos: int, names: Sequence[str]) -> tuple[int, int]:
    """Find the first of NAMES[1:] that prefixes TEXT at POS, ignoring case.

    Return its index and the position after it.
    """
    for index, name in enumerate(names):
        if index == 0:
            continue
        end = pos + len(name)
        if text[pos:end].lower() == name.lower() and len(text[pos:end]) == len(name):
            return index, end
    raise ValueError(f"no known name at position {pos}")


def pad_number(value: int, width: int, pad: str) -> str:
    """Print VALUE padded on the left to WIDTH with PAD ('0', ' ' or '' for none)."""
    if value < 0:
        raise ValueError("cannot pad a negative number")
    text = str(value)
    if not pad:
        return text
    return text.rjust(width, pad)


def nanos_to_str(value: int, width: int = 9) -> str:
    """Print the WIDTH most significant digits of a 9-digit nanosecond count."""
    if not 0 <= value <= 999_999_999:
        raise ValueError("nanoseconds must be within [0, 999999999]")
    return f"{value:09d}"[: max(0, min(width, 9))]