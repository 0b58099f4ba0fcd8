"""
numa_inventory.errors
AUTHOR: carter-vin

Error taxonomy for kernel pseudo-file parsing

- SourceReadError: source missing or unreadable (IOError)
- FormatError: structurally wrong line / field count
- ConversionError: text not parseable as the expected number
- ParseError: bad node ID or bad meminfo field value

Every class derives from NumaError so callers can catch one type
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class NumaError(Exception):
    """
    Base error for inventory failures
    - path: offending source, when known
    """

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message

    def with_context(self, prefix: str, path: Optional[Path] = None) -> "NumaError":
        """
        Return a copy of this error (same class) with a prefixed message

        Keeps the class so callers can still catch by category
        """
        return type(self)(f"{prefix}: {self.message}", path=path or self.path)


class SourceReadError(NumaError, OSError):
    pass


class FormatError(NumaError, ValueError):
    pass


class ConversionError(NumaError, ValueError):
    pass


class ParseError(NumaError, ValueError):
    pass


def read_source(path: Path) -> str:
    """
    Read a pseudo-file as UTF-8 text

    Failure semantics:
    - any OSError becomes SourceReadError (original chained)
    - invalid bytes are replaced, so they only affect the line they sit on
    """
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceReadError(f"read {path}: {e.strerror or e}", path=path) from e
