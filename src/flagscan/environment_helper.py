"""Environment and process access for flagscan."""

import os
import sys

from .types import ArgsList

TRUTHY_VALUES = ("1", "true", "yes", "on")


def debug_log(message: str) -> None:
    """Log debug message when FLAGSCAN_DEBUG=1 is set."""
    if EnvironmentHelper.is_debug_enabled():
        print(f"[DEBUG] {message}", file=sys.stderr, flush=True)


class EnvironmentHelper:
    """Utility class for environment and process operations."""

    @staticmethod
    def is_debug_enabled() -> bool:
        """Check whether debug tracing is switched on."""
        return os.environ.get("FLAGSCAN_DEBUG", "").lower() in TRUTHY_VALUES

    @staticmethod
    def get_process_args() -> ArgsList:
        """Get the process arguments without the program name."""
        return list(sys.argv[1:])
