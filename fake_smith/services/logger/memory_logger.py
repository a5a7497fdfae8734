from __future__ import annotations

from typing import Any

from fake_smith.services.logger.interface import LEVELS, LoggingInterface, Producer


class MemoryLogger(LoggingInterface):
    """In-memory logger that stores entries per level for test assertions."""

    def __init__(self) -> None:
        self.logs: dict[str, list[Any]] = {}

    def log(self, level: str) -> list[Any]:
        if level not in self.logs:
            self.logs[level] = []
        return self.logs[level]

    def verbose(self, data: Any = None, producer: Producer | None = None) -> None:
        self._append("verbose", data, producer)

    def debug(self, data: Any = None, producer: Producer | None = None) -> None:
        self._append("debug", data, producer)

    def info(self, data: Any = None, producer: Producer | None = None) -> None:
        self._append("info", data, producer)

    def warn(self, data: Any = None, producer: Producer | None = None) -> None:
        self._append("warn", data, producer)

    def error(self, data: Any = None, producer: Producer | None = None) -> None:
        self._append("error", data, producer)

    def fatal(self, data: Any = None, producer: Producer | None = None) -> None:
        self._append("fatal", data, producer)

    @property
    def messages(self) -> list[Any]:
        """Convenience: every captured value, grouped by level from verbose to fatal."""
        levels = [level for level in LEVELS if level in self.logs]
        levels += [level for level in self.logs if level not in LEVELS]
        return [value for level in levels for value in self.logs[level]]

    def _append(self, level: str, data: Any, producer: Producer | None) -> Any:
        value = producer() if producer is not None else data
        self.log(level).append(value)
        return value
