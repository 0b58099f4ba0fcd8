"""
numa_inventory.config
AUTHOR: carter-vin

Source locations for the inventory

Kernel paths are explicit config (not module globals) so tests and
simulations can point discovery at a synthetic tree.

Env overrides:
- NUMA_INVENTORY_NODE_ROOT: topology directory
- NUMA_INVENTORY_ZONEINFO: zone info file
- NUMA_INVENTORY_PAGE_SIZE: page size in bytes
"""

from __future__ import annotations

import mmap
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_NODE_ROOT = Path("/sys/devices/system/node")
DEFAULT_ZONEINFO_PATH = Path("/proc/zoneinfo")

NODE_ROOT_ENV = "NUMA_INVENTORY_NODE_ROOT"
ZONEINFO_ENV = "NUMA_INVENTORY_ZONEINFO"
PAGE_SIZE_ENV = "NUMA_INVENTORY_PAGE_SIZE"


def host_page_size() -> int:
    return mmap.PAGESIZE


def _parse_page_size(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"page size must be an integer: {raw!r}") from None
    if value <= 0:
        raise ValueError(f"page size must be positive: {value}")
    return value


@dataclass(frozen=True)
class InventoryConfig:
    """
    Where discovery reads from
    - page_size: None -> host page size
    """

    node_root: Path = DEFAULT_NODE_ROOT
    zoneinfo_path: Path = DEFAULT_ZONEINFO_PATH
    page_size: Optional[int] = None

    def resolved_page_size(self) -> int:
        if self.page_size is None:
            return host_page_size()
        return self.page_size

    @staticmethod
    def from_env() -> "InventoryConfig":
        """
        Build config from env vars, falling back to kernel defaults
        """
        node_root = os.getenv(NODE_ROOT_ENV)
        zoneinfo = os.getenv(ZONEINFO_ENV)
        page_size = os.getenv(PAGE_SIZE_ENV)

        return InventoryConfig(
            node_root=Path(node_root) if node_root else DEFAULT_NODE_ROOT,
            zoneinfo_path=Path(zoneinfo) if zoneinfo else DEFAULT_ZONEINFO_PATH,
            page_size=_parse_page_size(page_size) if page_size else None,
        )

    def with_overrides(
        self,
        *,
        node_root: Optional[Path] = None,
        zoneinfo_path: Optional[Path] = None,
        page_size: Optional[int] = None,
    ) -> "InventoryConfig":
        """
        Apply explicit (CLI) overrides on top of this config
        """
        if page_size is not None:
            page_size = _parse_page_size(str(page_size))
        return InventoryConfig(
            node_root=node_root or self.node_root,
            zoneinfo_path=zoneinfo_path or self.zoneinfo_path,
            page_size=page_size if page_size is not None else self.page_size,
        )
