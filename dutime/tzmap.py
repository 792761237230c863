"""Zone-name maps: compiled files that map codes to time zone names.

A map file starts with a 16-byte header: the magic ``TZm1``, the big-endian
size of the zone-name block and 8 reserved bytes.  The zone-name block holds
NUL-terminated zone names, padded to a multiple of 4 bytes.  The mapped-name
block follows: each code padded with NULs to whole 4-byte words, then one
big-endian word holding the zone name's offset shifted left by 8 bits.
"""

from __future__ import annotations

import argparse
import os
import struct
import sys
from bisect import bisect_left
from collections.abc import Iterable, Iterator

MAGIC = b"TZm1"
HEADER_SIZE = 16
DEFAULT_TZDIR = "/usr/share/zoneinfo"
DEFAULT_MAP_FILE = "tzcc.tzm"

_WORD = 4
_MAX_CODE = 255
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class TzMapError(Exception):
    """Raised when a zone-name map cannot be opened or is malformed."""


def _encode(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


def _decode(raw: bytes) -> str:
    return raw.decode(_ENCODING, _ERRORS)


def _words(size: int) -> int:
    return (size + _WORD - 1) // _WORD * _WORD


class TzMap:
    """A loaded zone-name map."""

    def __init__(self, entries: list[tuple[bytes, str]]) -> None:
        self._entries: list[tuple[bytes, str]] | None = entries
        self._keys = [code for code, _ in entries]

    @classmethod
    def open(cls, path: str | os.PathLike[str]) -> TzMap:
        """Load the map stored in the file at PATH."""
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            raise TzMapError(f"cannot open {os.fspath(path)!r}: {exc}") from exc
        return cls.from_bytes(data)

    @classmethod
    def from_bytes(cls, data: bytes) -> TzMap:
        """Load a map from its on-disk representation."""
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            raise TzMapError("file too short for a zone-name map")
        if data[: len(MAGIC)] != MAGIC:
            raise TzMapError("not a zone-name map (bad magic)")
        (off,) = struct.unpack_from(">I", data, len(MAGIC))
        body = data[HEADER_SIZE:]
        if off > len(body):
            raise TzMapError("zone-name block exceeds file size")
        znames = body[:off]
        region = body[off:]

        entries: list[tuple[bytes, str]] = []
        pos = 0
        while pos < len(region):
            start = pos
            end = region.find(b"\0", start)
            if end < 0:
                end = len(region)
            size = end - start
            if size == 0:
                raise TzMapError(f"empty mapped name at offset {start}")
            pos = start + _words(size)
            if pos + _WORD > len(region):
                raise TzMapError("truncated mapped-name entry")
            (word,) = struct.unpack_from(">I", region, pos)
            pos += _WORD
            zoff = word >> 8
            if zoff >= len(znames):
                raise TzMapError(f"zone offset {zoff} out of range")
            zend = znames.find(b"\0", zoff)
            if zend < 0:
                zend = len(znames)
            entries.append((region[start:end], _decode(znames[zoff:zend])))
        return cls(entries)

    def _live(self) -> list[tuple[bytes, str]]:
        if self._entries is None:
            raise TzMapError("zone-name map is closed")
        return self._entries

    def find(self, mname: str) -> str | None:
        """Return the zone name MNAME maps to, or None if it is not in the map."""
        entries = self._live()
        key = _encode(mname)
        i = bisect_left(self._keys, key)
        if i < len(self._keys) and self._keys[i] == key:
            return entries[i][1]
        return None

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield (code, zone name) pairs in file order."""
        for code, zone in self._live():
            yield _decode(code), zone

    def close(self) -> None:
        """Release the map; further lookups raise TzMapError."""
        self._entries = None
        self._keys = []

    def __enter__(self) -> TzMap:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _zone_exists(zone: str, tzdir: str) -> bool:
    path = zone if zone.startswith("/") else os.path.join(tzdir, zone)
    return os.path.exists(path)


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def compile_map(
    lines: Iterable[str],
    existing_only: bool = False,
    tzdir: str = DEFAULT_TZDIR,
) -> bytes:
    """Compile ``code<TAB>zone`` lines into the on-disk map format.

    Lines without a separator, without a code, without a zone name or with a
    code longer than 255 characters are skipped.  With EXISTING_ONLY, zones
    not found under TZDIR are skipped with a warning on stderr.
    """
    zones = bytearray()
    zone_offsets: dict[bytes, int] = {}
    mnames = bytearray()

    for raw in lines:
        line = _strip_newline(raw)
        if not line:
            continue
        code, sep, zone = line.partition("\t")
        if not sep or not code or not zone:
            continue
        if len(code) + 1 > _MAX_CODE + 1:
            continue
        if existing_only and not _zone_exists(zone, tzdir):
            print(
                f"Warning: zone `{zone}' skipped: "
                "not present in global zone database",
                file=sys.stderr,
            )
            continue
        zone_raw = _encode(zone)
        zoff = zone_offsets.get(zone_raw)
        if zoff is None:
            zoff = len(zones)
            zone_offsets[zone_raw] = zoff
            zones += zone_raw + b"\0"
        code_raw = _encode(code)
        mnames += code_raw.ljust(_words(len(code_raw)), b"\0")
        mnames += struct.pack(">I", (zoff & 0xFFFF) << 8)

    off = _words(len(zones))
    zones = zones.ljust(off, b"\0")
    header = MAGIC + struct.pack(">I", off) + bytes(HEADER_SIZE - len(MAGIC) - _WORD)
    return header + bytes(zones) + bytes(mnames)


def check_lines(
    lines: Iterable[str],
    filename: str = "-",
    tzdir: str = DEFAULT_TZDIR,
) -> list[str]:
    """Check ``code<TAB>zone`` source lines and return the error messages.

    Codes must be in ascending order, at most 255 characters long, and the
    zones must exist under TZDIR.
    """
    errors: list[str] = []
    last = ""
    for lno, raw in enumerate(lines, start=1):
        line = _strip_newline(raw)
        if not line:
            continue

        def report(msg: str) -> None:
            errors.append(f"Error in {filename}:{lno}: {msg}")

        code, sep, zone = line.partition("\t")
        if not sep:
            report("no separator")
            continue
        if not code:
            report("no code")
            continue
        if not zone:
            report("no zone name")
        if len(code) > _MAX_CODE:
            report(f"code too long ({len(code)} chars, max is {_MAX_CODE})")
        elif last[: len(code)] >= code:
            report(f"non-ascending order `{code}' (after `{last}')")
        last = code[:_MAX_CODE]
        if zone and not _zone_exists(zone, tzdir):
            report(f"cannot find zone `{zone}' in TZDIR")
    return errors


def _check_compiled(path: str, tzdir: str) -> list[str]:
    try:
        tzm = TzMap.open(path)
    except TzMapError as exc:
        return [f"cannot open input file `{path}': {exc}"]
    with tzm:
        return [
            f"cannot find zone `{zone}' in TZDIR"
            for _, zone in tzm.items()
            if not _zone_exists(zone, tzdir)
        ]


def _check_file(path: str | None, tzdir: str) -> list[str]:
    if path is None:
        return check_lines(sys.stdin, "-", tzdir)
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as exc:
        return [f"Cannot open file `{path}': {exc.strerror}"]
    if data[: len(MAGIC)] == MAGIC:
        return _check_compiled(path, tzdir)
    text = _decode(data)
    return check_lines(text.splitlines(keepends=True), path, tzdir)


def _cmd_cc(args: argparse.Namespace) -> int:
    try:
        if args.input is None:
            data = compile_map(sys.stdin, args.existing_only)
        else:
            with open(args.input, encoding=_ENCODING, errors=_ERRORS) as fh:
                data = compile_map(fh, args.existing_only)
    except OSError:
        print(f"cannot read file `{args.input or 'stdin'}'", file=sys.stderr)
        return 1
    try:
        with open(args.output, "wb") as fh:
            fh.write(data)
    except OSError as exc:
        print(f"cannot open output file `{args.output}': {exc.strerror}", file=sys.stderr)
        try:
            os.unlink(args.output)
        except OSError:
            pass
        return 1
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    try:
        tzm = TzMap.open(args.tzmap)
    except TzMapError as exc:
        print(f"cannot open input file `{args.tzmap}': {exc}", file=sys.stderr)
        return 1
    with tzm:
        if not args.names:
            for code, zone in tzm.items():
                print(f"{code}\t{zone}")
        for name in args.names:
            zone = tzm.find(name)
            if zone is not None:
                print(zone)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    files = args.files or [None]
    failed = False
    for path in files:
        errors = _check_file(path, DEFAULT_TZDIR)
        for msg in errors:
            print(msg, file=sys.stderr)
        failed = failed or bool(errors)
    return 1 if failed else 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tzmap", description="Zone-name map tool.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    cc = sub.add_parser("cc", help="compile a zone-name map")
    cc.add_argument("input", nargs="?", default=None)
    cc.add_argument("-o", "--output", default=DEFAULT_MAP_FILE)
    cc.add_argument("-e", "--existing-only", action="store_true")

    show = sub.add_parser("show", help="look up codes or dump a map")
    show.add_argument("-f", "--tzmap", default=DEFAULT_MAP_FILE)
    show.add_argument("names", nargs="*")

    check = sub.add_parser("check", help="check map sources or compiled maps")
    check.add_argument("files", nargs="*")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the tzmap command and return its exit status."""
    try:
        args = _parser().parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1
    handlers = {"cc": _cmd_cc, "show": _cmd_show, "check": _cmd_check}
    return handlers[args.cmd](args)


if __name__ == "__main__":
    sys.exit(main())