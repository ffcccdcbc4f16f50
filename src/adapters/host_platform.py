import sys


class HostPlatform:
    """Reports the platform the interpreter is running on."""

    def name(self) -> str:
        # "linux", "darwin", "win32", ...
        return sys.platform
