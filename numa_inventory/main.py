"""
numa_inventory.main
------------
AUTHOR: carter-vin

CLI entrypoint

Key contract:
- `numa-inventory --help` shows a Commands section.
- `numa-inventory nodes` prints the node inventory to stdout.
- events go to stderr; a NumaError exits 1 after an inventory_failed event.
"""

from __future__ import annotations

import platform
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import typer

from numa_inventory import __version__
from numa_inventory.config import InventoryConfig
from numa_inventory.discovery import discover_nodes
from numa_inventory.errors import NumaError
from numa_inventory.logging import emit_event
from numa_inventory.render import nodes_to_json, render_text

app = typer.Typer(
    add_completion=False,
    help="numa-inventory: per-node CPU and memory inventory",
)

VALID_FORMATS = {"text", "json"}


# -----------------------------
# DATA CLASSES
# -----------------------------
@dataclass(frozen=True)
class EnvironmentInfo:
    """
    Snapshot of the runtime environment
    """

    python_version: str
    os: str
    machine: str
    utc_now: str


def collect_environment_info() -> EnvironmentInfo:
    return EnvironmentInfo(
        python_version=sys.version.split()[0],
        os=f"{platform.system()} {platform.release()}",
        machine=platform.machine(),
        utc_now=datetime.now(timezone.utc).isoformat(),
    )


# -----------------------------
# ROOT COMMAND BEHAVIOR
# -----------------------------
@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """
    Print a hint when no subcommand is given
    """
    if ctx.invoked_subcommand is None:
        typer.echo("No command provided. Try: numa-inventory --help")


# -----------------------------
# CLI COMMANDS
# -----------------------------
@app.command()
def version() -> None:
    """
    Print version & runtime env
    """
    env = collect_environment_info()

    typer.echo(f"numa-inventory v{__version__}")
    typer.echo(f"python={env.python_version}")
    typer.echo(f"os={env.os}")
    typer.echo(f"machine={env.machine}")
    typer.echo(f"utc_now={env.utc_now}")


@app.command("nodes")
def nodes(
    output_format: str = typer.Option(
        "text",
        "--format",
        help="Output format: text or json.",
    ),
    node_root: Optional[Path] = typer.Option(
        None,
        "--node-root",
        help="Topology directory (default /sys/devices/system/node).",
    ),
    zoneinfo: Optional[Path] = typer.Option(
        None,
        "--zoneinfo",
        help="Zone info file (default /proc/zoneinfo).",
    ),
    page_size: Optional[int] = typer.Option(
        None,
        "--page-size",
        help="Page size in bytes (default: host page size).",
        min=1,
    ),
) -> None:
    """
    Discover NUMA nodes and print the inventory
    """
    if output_format not in VALID_FORMATS:
        raise typer.BadParameter("--format must be 'text' or 'json'")

    try:
        config = InventoryConfig.from_env().with_overrides(
            node_root=node_root,
            zoneinfo_path=zoneinfo,
            page_size=page_size,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    emit_event(
        "inventory_start",
        version=__version__,
        node_root=str(config.node_root),
        zoneinfo_path=str(config.zoneinfo_path),
    )

    try:
        found = discover_nodes(config)

        if output_format == "json":
            typer.echo(nodes_to_json(found))
        else:
            typer.echo(render_text(found))

        emit_event(
            "inventory_completed",
            version=__version__,
            nodes=len(found),
        )

    except NumaError as e:
        emit_event(
            "inventory_failed",
            version=__version__,
            error_type=type(e).__name__,
            path=str(e.path) if e.path is not None else None,
            message=str(e),
        )
        raise typer.Exit(code=1)

    finally:
        emit_event("inventory_shutdown", version=__version__)


if __name__ == "__main__":
    app()
