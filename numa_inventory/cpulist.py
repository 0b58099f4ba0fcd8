"""
numa_inventory.cpulist
AUTHOR: carter-vin

CPU range parser for node cpulist files ("0-31\n")

Only one contiguous range per node is supported
"""

from __future__ import annotations

import re
from pathlib import Path

from numa_inventory.errors import ConversionError, FormatError, read_source

_SIGNED = re.compile(r"[+-]?[0-9]+")


def _convert(label: str, segment: str) -> int:
    if not _SIGNED.fullmatch(segment):
        raise ConversionError(f"convert {label} {segment!r}: not an integer")
    return int(segment)


def parse_cpu_range(text: str) -> list[int]:
    """
    Parse "<first>-<last>" into ascending CPU IDs (inclusive)

    - "5-5" -> [5]
    - first > last -> [] (reversed range is not rejected)
    """
    tokens = text.rstrip("\n").split("-")
    if len(tokens) != 2:
        raise FormatError(f"invalid format: {text!r}")

    first = _convert("first", tokens[0])
    last = _convert("last", tokens[1])

    return list(range(first, last + 1))


def read_cpulist(path: Path) -> list[int]:
    contents = read_source(path)
    return parse_cpu_range(contents)
