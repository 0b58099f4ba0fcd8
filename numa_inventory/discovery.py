"""
numa_inventory.discovery
AUTHOR: carter-vin

NUMA node discovery

For each node<N> directory under the topology root:
- read meminfo -> MemInfoRecord
- read cpulist -> CPU IDs
- estimate available memory
- assemble a Node

Failure semantics:
- non-node entries are skipped
- any other failure aborts the whole call (no partial results)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from numa_inventory.available import calculate_available_memory
from numa_inventory.config import InventoryConfig
from numa_inventory.cpulist import read_cpulist
from numa_inventory.errors import NumaError, ParseError, SourceReadError
from numa_inventory.meminfo import read_meminfo

NODE_PREFIX = "node"
MEMINFO_FILE = "meminfo"
CPULIST_FILE = "cpulist"

_NODE_ID = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Node:
    """
    Capacity snapshot for one NUMA node
    - cpus: ascending CPU IDs, a fresh list per discovery call
    - mem_*_bytes: byte counts

    Fields cannot be reassigned; compared by value, not hashable
    """

    __hash__ = None  # type: ignore[assignment]

    node_id: int
    cpus: list[int]
    mem_total_bytes: int
    mem_free_bytes: int
    mem_available_bytes: int

    def to_dict(self) -> dict[str, Any]:
        # Explicit key mapping for stability
        return {
            "node_id": self.node_id,
            "cpus": list(self.cpus),
            "mem_total_bytes": self.mem_total_bytes,
            "mem_free_bytes": self.mem_free_bytes,
            "mem_available_bytes": self.mem_available_bytes,
        }


def _list_node_dirs(node_root: Path) -> list[Path]:
    try:
        entries = sorted(node_root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SourceReadError(f"list {node_root}: {e.strerror or e}", path=node_root) from e

    return [entry for entry in entries if entry.name.startswith(NODE_PREFIX) and entry.is_dir()]


def _parse_node_id(node_dir: Path) -> int:
    suffix = node_dir.name[len(NODE_PREFIX):]
    if not _NODE_ID.fullmatch(suffix):
        raise ParseError(f"invalid node id {suffix!r} in {node_dir.name!r}", path=node_dir)
    return int(suffix)


def _read_node(node_dir: Path, node_id: int, config: InventoryConfig) -> Node:
    meminfo_path = node_dir / MEMINFO_FILE
    try:
        meminfo = read_meminfo(meminfo_path)
    except NumaError as e:
        raise e.with_context(f"parse meminfo {meminfo_path}", meminfo_path) from e

    cpulist_path = node_dir / CPULIST_FILE
    try:
        cpus = read_cpulist(cpulist_path)
    except NumaError as e:
        raise e.with_context(f"parse cpulist {cpulist_path}", cpulist_path) from e

    return Node(
        node_id=node_id,
        cpus=cpus,
        mem_total_bytes=meminfo.mem_total,
        mem_free_bytes=meminfo.mem_free,
        mem_available_bytes=calculate_available_memory(
            meminfo,
            zoneinfo_path=config.zoneinfo_path,
            page_size=config.resolved_page_size(),
        ),
    )


def discover_nodes(config: Optional[InventoryConfig] = None) -> list[Node]:
    """
    Discover all NUMA nodes on the host

    Nodes come back in directory name order. Raises a NumaError
    subclass on the first failure.
    """
    if config is None:
        config = InventoryConfig()

    nodes: list[Node] = []
    for node_dir in _list_node_dirs(config.node_root):
        node_id = _parse_node_id(node_dir)
        nodes.append(_read_node(node_dir, node_id, config))

    return nodes
