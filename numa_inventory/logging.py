"""
numa_inventory.logging
AUTHOR: carter-vin

CLI run events as JSON lines on stderr

Only the CLI calls this; discovery and the parsers stay silent so
library callers get exceptions, not log noise.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any

# One run: start -> completed | failed -> shutdown
VALID_EVENT_TYPES = {
    "inventory_start",
    "inventory_completed",
    "inventory_failed",
    "inventory_shutdown",
}

MESSAGE_LIMIT = 200


def _clip(message: str) -> str:
    # error text can embed whole file contents (bad cpulist repr)
    overflow = len(message) - MESSAGE_LIMIT
    if overflow <= 0:
        return message
    return f"{message[:MESSAGE_LIMIT]}...[truncated {overflow} chars]"


def emit_event(event_type: str, *, version: str, **fields: Any) -> None:
    """
    Write one inventory event

    Raises ValueError for event types outside VALID_EVENT_TYPES
    """
    if event_type not in VALID_EVENT_TYPES:
        raise ValueError(f"invalid event_type: {event_type}")

    message = fields.get("message")
    if isinstance(message, str):
        fields["message"] = _clip(message)

    record = dict(fields)
    record.update(
        event_type=event_type,
        version=version,
        utc_now=datetime.now(timezone.utc).isoformat(),
    )

    line = json.dumps(record, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    sys.stderr.write(line + "\n")
