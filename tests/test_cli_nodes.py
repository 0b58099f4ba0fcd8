"""
Contract tests for the numa-inventory CLI
"""

import json
from pathlib import Path

from typer.testing import CliRunner

from conftest import node_meminfo, write_node

from numa_inventory.main import app


def _json_lines(output: str) -> list[dict]:
    payloads = []
    for line in output.splitlines():
        line = line.strip()
        if line.startswith("{"):
            payloads.append(json.loads(line))
    return payloads


def _inventory(output: str) -> dict:
    return next(p for p in _json_lines(output) if "schema_version" in p)


def _events(output: str) -> list[str]:
    return [p["event_type"] for p in _json_lines(output) if "event_type" in p]


def test_nodes_json_output(tmp_path: Path, node_root: Path) -> None:
    """
    JSON format prints a versioned envelope with every node
    """
    write_node(node_root, "node0", meminfo=node_meminfo(0, total=1000, free=500), cpulist="0-3\n")

    runner = CliRunner()
    result = runner.invoke(
        app,
        [
            "nodes",
            "--format",
            "json",
            "--node-root",
            str(node_root),
            "--zoneinfo",
            str(tmp_path / "missing"),
        ],
    )

    assert result.exit_code == 0
    payload = _inventory(result.output)
    assert payload["schema_version"] == "1"
    assert payload["nodes"] == [
        {
            "node_id": 0,
            "cpus": [0, 1, 2, 3],
            "mem_total_bytes": 1024000,
            "mem_free_bytes": 512000,
            "mem_available_bytes": 512000,
        }
    ]

    events = _events(result.output)
    assert events[0] == "inventory_start"
    assert "inventory_completed" in events
    assert events[-1] == "inventory_shutdown"


def test_nodes_text_output(tmp_path: Path, node_root: Path) -> None:
    write_node(node_root, "node0", meminfo=node_meminfo(0, total=1000, free=500), cpulist="0-3\n")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["nodes", "--node-root", str(node_root), "--zoneinfo", str(tmp_path / "missing")],
    )

    assert result.exit_code == 0
    assert "numa nodes: 1" in result.output
    assert "node0 cpus=0-3 (4)" in result.output


def test_nodes_env_override_root(tmp_path: Path, node_root: Path) -> None:
    write_node(node_root, "node0", meminfo=node_meminfo(0, total=1000, free=500))

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["nodes", "--format", "json"],
        env={
            "NUMA_INVENTORY_NODE_ROOT": str(node_root),
            "NUMA_INVENTORY_ZONEINFO": str(tmp_path / "missing"),
        },
    )

    assert result.exit_code == 0
    assert [n["node_id"] for n in _inventory(result.output)["nodes"]] == [0]


def test_nodes_failure_exits_nonzero_with_event(tmp_path: Path, node_root: Path) -> None:
    """
    A bad cpulist fails the run with an inventory_failed event
    """
    write_node(node_root, "node0", meminfo=node_meminfo(0, total=1000, free=500), cpulist="badrange")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["nodes", "--node-root", str(node_root), "--zoneinfo", str(tmp_path / "missing")],
    )

    assert result.exit_code == 1
    failed = [p for p in _json_lines(result.output) if p.get("event_type") == "inventory_failed"]
    assert len(failed) == 1
    assert failed[0]["error_type"] == "FormatError"
    assert failed[0]["path"].endswith("cpulist")
    assert "numa nodes" not in result.output


def test_nodes_rejects_unknown_format(node_root: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["nodes", "--format", "yaml", "--node-root", str(node_root)])

    assert result.exit_code == 2


def test_version_command() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "numa-inventory v" in result.output
