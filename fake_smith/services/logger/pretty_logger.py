import sys
from datetime import datetime, timezone
from typing import Any

from fake_smith.services.logger.interface import Producer
from fake_smith.services.logger.memory_logger import MemoryLogger

_COLORS = {
    "verbose": "\033[37m",  # grey
    "debug": "\033[36m",    # cyan
    "info": "\033[32m",     # green
    "warn": "\033[33m",     # yellow
    "error": "\033[31m",    # red
    "fatal": "\033[35m",    # magenta
}
_RESET = "\033[0m"


class PrettyLogger(MemoryLogger):
    """Capturing logger that also echoes each entry to stderr.

    Handy when a failing test needs to show what the agent under test logged.
    """

    def _append(self, level: str, data: Any, producer: Producer | None) -> Any:
        value = super()._append(level, data, producer)
        ts = datetime.now(timezone.utc).strftime("%H:%M:%S")
        color = _COLORS.get(level, "")
        print(f"{color}{ts} [{level.upper()}]{_RESET} {value}", file=sys.stderr)
        return value
