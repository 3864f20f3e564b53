"""Binary search over sorted, newline-delimited byte regions.

Index and exception-list files are sorted by their first space-delimited
field. The search works on anything supporting ``find``/``rfind`` and
slicing over bytes, so both ``mmap.mmap`` objects and ``bytes`` can be
searched. Every probe is clamped to the ``[lo, hi)`` window, so a probe
that would run past the end of the region ends the search instead of
reading out of bounds.

Lines whose first field is empty (the indented licence header at the top
of WordNet files, or blank lines) are stepped over as if they sort before
every key.
"""

from __future__ import annotations

import mmap
from pathlib import Path
from typing import Union

from wordnet_lookup.exceptions import MissingDatabaseFileError

Buffer = Union[bytes, mmap.mmap]


def first_field(line: bytes) -> bytes:
    """Return the text of a line up to the first space."""
    return line.split(b" ", 1)[0]


def binary_search(buf: Buffer, key: bytes) -> bytes | None:
    """Find the line whose first field equals ``key`` exactly.

    Returns the whole line without its newline, or None.
    """
    if not key:
        return None
    lo, hi = 0, len(buf)
    # lo and hi always sit on line boundaries
    while lo < hi:
        mid = (lo + hi) // 2
        newline = buf.rfind(b"\n", lo, mid)
        start = lo if newline == -1 else newline + 1
        end = buf.find(b"\n", start, hi)
        if end == -1:
            end = hi
        line = buf[start:end].rstrip(b"\r")
        field = first_field(line)
        if not field or key > field:
            lo = end + 1
        elif key < field:
            hi = start
        else:
            return line
    return None


def map_file(path: Path) -> Buffer:
    """Map a file read-only; empty files yield an empty ``bytes``."""
    try:
        with open(path, "rb") as f:
            if f.seek(0, 2) == 0:
                return b""
            return mmap.mmap(f.fileno(), 0, access=mmap.ACCESS_READ)
    except OSError as e:
        raise MissingDatabaseFileError(path) from e


def search_file(path: Path, key: bytes) -> bytes | None:
    """Open, map and search a sorted file, releasing the mapping afterwards."""
    buf = map_file(path)
    try:
        return binary_search(buf, key)
    finally:
        if isinstance(buf, mmap.mmap):
            buf.close()
