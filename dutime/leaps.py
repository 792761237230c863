"""Lookup of leap-second transitions in sorted tables."""

from __future__ import annotations

from collections.abc import Sequence


def leaps_before(table: Sequence[int], key: int) -> int:
    """Return the index of the last transition before KEY in sorted TABLE.

    The result I is meant to satisfy ``table[I] < key <= table[I + 1]``;
    tables are expected to start and end with sentinel entries.
    """
    n = len(table)
    if n < 2:
        raise ValueError("a transition table needs at least two entries")
    lo = 0
    hi = n - 1
    i = hi // 2
    while True:
        low = table[i]
        up = table[i + 1]
        if low < key <= up:
            break
        if key > up:
            lo = i + 1
            i = (i + hi) // 2
        else:
            hi = i - 1
            i = (i + lo) // 2
        if not (hi > lo and i + 1 < n):
            break
    return i