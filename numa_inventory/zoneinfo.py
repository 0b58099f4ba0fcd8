"""
numa_inventory.zoneinfo
AUTHOR: carter-vin

Low watermark aggregation from /proc/zoneinfo

Best-effort sum: a "low" line with a bad value adds 0 instead of
failing the whole scan. Only an unreadable source is an error.
"""

from __future__ import annotations

from pathlib import Path

from numa_inventory.errors import read_source


def sum_low_watermark_pages(contents: str) -> int:
    """
    Sum the "low" watermark (pages) across all zones
    """
    total = 0
    for line in contents.split("\n"):
        fields = line.split()
        if not fields or not fields[0].startswith("low"):
            continue
        if len(fields) < 2 or not fields[1].isascii() or not fields[1].isdigit():
            continue
        total += int(fields[1])
    return total


def read_watermark_low(path: Path, page_size: int) -> int:
    """
    Total low watermark in bytes

    Raises SourceReadError if the zone info file cannot be read
    """
    return sum_low_watermark_pages(read_source(path)) * page_size
