"""numa_inventory package exports."""

from numa_inventory.discovery import Node, discover_nodes
from numa_inventory.config import InventoryConfig
from numa_inventory.errors import (
    ConversionError,
    FormatError,
    NumaError,
    ParseError,
    SourceReadError,
)

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "FormatError",
    "InventoryConfig",
    "Node",
    "NumaError",
    "ParseError",
    "SourceReadError",
    "discover_nodes",
]
