"""
numa_inventory.available
AUTHOR: carter-vin

Per-node available memory estimate

Same heuristic the kernel uses for MemAvailable, scoped to one node:
- free memory minus the low watermark
- plus page cache, less min(half, watermark)
- plus reclaimable slab, less min(half, watermark)
- clamped at 0

If zone info cannot be read, fall back to the plain sum of free,
page cache and reclaimable slab (overestimates, never fails).
"""

from __future__ import annotations

from pathlib import Path

from numa_inventory.errors import SourceReadError
from numa_inventory.meminfo import MemInfoRecord
from numa_inventory.zoneinfo import read_watermark_low


def fallback_available(m: MemInfoRecord) -> int:
    return m.mem_free + m.s_reclaimable + m.active_file + m.inactive_file


def estimate_available(m: MemInfoRecord, watermark_low: int) -> int:
    """
    Estimate available bytes given the aggregate low watermark (bytes)

    Intermediate values may go negative; only the result is clamped
    """
    available = m.mem_free - watermark_low

    page_cache = m.active_file + m.inactive_file
    page_cache -= min(page_cache // 2, watermark_low)
    available += page_cache

    available += m.s_reclaimable - min(m.s_reclaimable // 2, watermark_low)

    return max(available, 0)


def calculate_available_memory(
    m: MemInfoRecord,
    *,
    zoneinfo_path: Path,
    page_size: int,
) -> int:
    """
    Read the watermark and estimate; degrade to the plain sum when
    zone info is unreadable
    """
    try:
        watermark_low = read_watermark_low(zoneinfo_path, page_size)
    except SourceReadError:
        return fallback_available(m)

    return estimate_available(m, watermark_low)
