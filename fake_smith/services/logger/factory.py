from __future__ import annotations

from fake_smith.services.logger.memory_logger import MemoryLogger
from fake_smith.services.logger.pretty_logger import PrettyLogger

LOGGERS: dict[str, type[MemoryLogger]] = {
    "memory": MemoryLogger,
    "pretty": PrettyLogger,
}


def make_logger(name: str = "memory") -> MemoryLogger:
    """Build a fresh capture logger for the implementation called *name*."""
    cls = LOGGERS.get(name)
    if cls is None:
        raise ValueError(
            f"Unknown logger implementation: '{name}' "
            f"(available: {', '.join(LOGGERS)})"
        )
    return cls()
