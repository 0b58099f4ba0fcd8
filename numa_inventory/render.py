"""
numa_inventory.render
AUTHOR: carter-vin

Output formats for the node inventory
- json: versioned envelope, deterministic key order
- text: one line per node for operators
"""

from __future__ import annotations

import json
from typing import Iterable

from numa_inventory.discovery import Node

SCHEMA_VERSION = "1"


def format_gb(bytes_value: int | None) -> str:
    if bytes_value is None:
        return "n/a"
    gb = bytes_value / (1024 ** 3)
    if gb >= 10:
        return f"{gb:.0f} GB"
    return f"{gb:.1f} GB"


def format_cpus(cpus: list[int]) -> str:
    if not cpus:
        return "-"
    if len(cpus) == 1:
        return str(cpus[0])
    return f"{cpus[0]}-{cpus[-1]}"


def nodes_to_json(nodes: Iterable[Node]) -> str:
    """
    Serialize nodes as a single JSON object

    sort_keys + compact separators keep output stable
    """
    payload = {
        "schema_version": SCHEMA_VERSION,
        "nodes": [node.to_dict() for node in nodes],
    }
    return json.dumps(
        payload,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def render_text(nodes: Iterable[Node]) -> str:
    nodes = list(nodes)
    lines = [f"numa nodes: {len(nodes)}"]
    for node in nodes:
        lines.append(
            f"node{node.node_id} "
            f"cpus={format_cpus(node.cpus)} ({len(node.cpus)}) "
            f"total={format_gb(node.mem_total_bytes)} "
            f"free={format_gb(node.mem_free_bytes)} "
            f"available={format_gb(node.mem_available_bytes)}"
        )
    return "\n".join(lines)
