# dutime

Small, dependency-free building blocks for working with times in their own
format language. The format codes look like `strftime` codes but they are not
the same: `%T` is a full `HH:MM:SS` time, `%N` is nanoseconds, `%s` is an
epoch count and `%Z` is a zone offset. Modifiers such as `%0`, `%-`, `% `,
`%_` and `%O` change the padding, ask for abbreviated names or switch to
Roman numerals.

## Installation

```
pip install dutime
```

Python 3.10 or later is required. There are no runtime dependencies.

## What is inside

| Module | Purpose |
| --- | --- |
| `dutime.strops` | Bounded number parsing (`strtoi_lim`, `padstrtoi_lim`, `strtoi`), Roman numerals (`romstrtoi_lim`, `int_to_roman`), ordinal suffixes (`ordinal_end`, `with_ordinal`), case-insensitive name lookup (`lookup_name`) and padded number output (`pad_number`, `nanos_to_str`). Parsers take a string and a start position, return the value and the position after it, and raise `ValueError` on failure. |
| `dutime.token` | The format-code tokeniser: `parse_spec` reads one code, `iter_format` walks a whole format string. A code is described by a `Spec` with a `SpecFlag`, an `AbbrMode`, a `PadMode` and a `WeekCount`. |
| `dutime.leaps` | `leaps_before` finds the index of the last transition before a key in a sorted table that starts and ends with sentinels. |
| `dutime.timecore` | Times of day: `parse_time`, `format_time`, `add_seconds`, `diff_seconds`, `diff_nanos`, `compare_times` and `current_time`, built on the `HMS` value. Parse failures raise `TimeParseError`. |
| `dutime.zone` | Zone offsets such as `+01:00`, `-0530` or `Z`: `parse_zone` and `format_zone`. |
| `dutime.tzmap` | Compiled maps from short codes to zone names: `compile_map`, `check_lines` and the `TzMap` reader. Problems reading a map raise `TzMapError`. |
| `dutime.dtlocale` | Weekday and month names for parsing and for formatting, read from a tab-separated locale file: `read_locale`, `set_input_locale`, `set_format_locale`, `input_names`, `format_names`. |

## Examples

Parse and format a time of day:

```python
from dutime.timecore import add_seconds, format_time, parse_time

t, end = parse_time("12:34:56", "%T")
print(format_time(t, "%I:%M %p"))   # 12:34 PM

later = add_seconds(t, 3600)
print(format_time(later))           # 13:34:56
```

`add_seconds` wraps around midnight and stores the days carried over in the
result's `carry` field.

Zone offsets:

```python
from dutime.zone import format_zone, parse_zone

print(parse_zone("+05:30"))   # (19800, 6)
print(format_zone(-19800))    # -05:30
```

Roman numerals and ordinals:

```python
from dutime.strops import int_to_roman, with_ordinal

print(int_to_roman(2024))     # MMXXIV
print(with_ordinal("03"))     # 3rd
```

Build and query a zone-name map:

```python
from dutime.tzmap import TzMap, compile_map

data = compile_map(["ABC\tEurope/London\n", "XYZ\tAmerica/New_York\n"])
with TzMap.from_bytes(data) as m:
    print(m.find("XYZ"))      # America/New_York
```

Codes must be given in ascending order for lookups to work; `check_lines`
reports codes out of order, codes that are too long and zones that cannot
be found under the zone directory.

## Zone-name maps on the command line

The `dutime-tzmap` command has three subcommands:

- `cc [INPUT] [-o OUTPUT] [-e]` compiles `CODE<TAB>Zone/Name` lines (from
  INPUT or standard input) into a binary map, `tzcc.tzm` by default; `-e`
  skips zones not present under `/usr/share/zoneinfo`.
- `show [-f MAP] [NAMES...]` prints the zone for each code given, or dumps
  the whole map when no codes are given.
- `check [FILES...]` checks source files or compiled maps and prints the
  problems found.

```
dutime-tzmap --help
```

## What the package does not do

It handles times of day, zone offsets and the pieces around them. It has no
calendar dates: no date parsing or formatting, no date arithmetic, and no
conversion between local time and UTC. A zone-name map only turns a code
into a zone name; it does not read zone data.

## Running the tests

```
pip install "dutime[test]"
pytest
```