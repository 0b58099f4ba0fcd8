"""
numa_inventory.meminfo
AUTHOR: carter-vin

Per-node meminfo parser (/sys/devices/system/node/node<N>/meminfo)

Line shape:
    Node 0 MemTotal:       263777956 kB

- Malformed / unknown lines are skipped
- Recognized fields must hold an unsigned integer (kB), stored as bytes
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from numa_inventory.errors import ParseError, read_source

# meminfo field name -> MemInfoRecord attribute
FIELD_MAP = {
    "MemTotal": "mem_total",
    "MemFree": "mem_free",
    "Active(file)": "active_file",
    "Inactive(file)": "inactive_file",
    "SReclaimable": "s_reclaimable",
}

_UNSIGNED = re.compile(r"[0-9]+")

# meminfo counters are 64-bit unsigned
MAX_VALUE_KB = 2**64 - 1


@dataclass(frozen=True)
class MemInfoRecord:
    """
    Node memory counters, all in bytes
    Missing fields stay 0
    """

    mem_total: int = 0
    mem_free: int = 0
    active_file: int = 0
    inactive_file: int = 0
    s_reclaimable: int = 0


def parse_meminfo(contents: str) -> MemInfoRecord:
    values: dict[str, int] = {}
    for line in contents.split("\n"):
        tokens = line.split(":")
        if len(tokens) != 2:
            continue

        key_tokens = tokens[0].strip().split(" ")
        if len(key_tokens) != 3:
            continue

        attr = FIELD_MAP.get(key_tokens[2])
        if attr is None:
            continue

        raw = tokens[1].strip().replace(" kB", "")
        if not _UNSIGNED.fullmatch(raw) or int(raw) > MAX_VALUE_KB:
            raise ParseError(f"invalid value for {key_tokens[2]}: {raw!r}")

        values[attr] = int(raw) * 1024

    return MemInfoRecord(**values)


def read_meminfo(path: Path) -> MemInfoRecord:
    """
    Read and parse a node meminfo file

    Raises SourceReadError if unreadable, ParseError on a bad value
    """
    return parse_meminfo(read_source(path))
