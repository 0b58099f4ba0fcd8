"""
Shared fixtures: synthetic sysfs / procfs trees under tmp_path
"""

from pathlib import Path

import pytest

from numa_inventory.config import InventoryConfig


def write_node(
    node_root: Path,
    name: str,
    *,
    meminfo: str,
    cpulist: str = "0-3\n",
) -> Path:
    node_dir = node_root / name
    node_dir.mkdir(parents=True)
    (node_dir / "meminfo").write_text(meminfo, encoding="utf-8")
    (node_dir / "cpulist").write_text(cpulist, encoding="utf-8")
    return node_dir


def node_meminfo(node_id: int, **fields_kb: int) -> str:
    """
    Render a node meminfo file from short field names (values in kB)
    """
    names = {
        "total": "MemTotal",
        "free": "MemFree",
        "active_file": "Active(file)",
        "inactive_file": "Inactive(file)",
        "s_reclaimable": "SReclaimable",
    }
    lines = [f"Node {node_id} {names[key]}:{value:>16} kB" for key, value in fields_kb.items()]
    return "\n".join(lines) + "\n"


@pytest.fixture
def node_root(tmp_path: Path) -> Path:
    root = tmp_path / "node"
    root.mkdir()
    return root


@pytest.fixture
def missing_zoneinfo_config(tmp_path: Path, node_root: Path) -> InventoryConfig:
    """
    Config whose zone info does not exist -> estimator fallback path
    """
    return InventoryConfig(
        node_root=node_root,
        zoneinfo_path=tmp_path / "no-such-zoneinfo",
        page_size=4096,
    )
