from typing import Protocol


class PlatformPort(Protocol):
    def name(self) -> str:
        """Return the operating system identifier, e.g. "linux"."""
        ...
