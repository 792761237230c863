"""Time building blocks: format tokens, times of day, zone offsets, leap tables, zone-name maps and locale names."""

__version__ = "0.1.0"

__all__ = ["dtlocale", "leaps", "strops", "timecore", "token", "tzmap", "zone"]