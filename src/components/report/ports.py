"""
Report component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class TextStreamPort(Protocol):
    """Writable text stream, e.g. sys.stdout."""

    def write(self, s: str, /) -> int:
        ...

    def flush(self) -> None:
        ...
