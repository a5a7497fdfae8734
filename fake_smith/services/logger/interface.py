from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

LEVELS = ("verbose", "debug", "info", "warn", "error", "fatal")

Producer = Callable[[], Any]


class LoggingInterface(ABC):
    """Agent logger surface. Each level takes a literal value or a lazy producer."""

    # level -> captured entries, in the order they were logged
    logs: dict[str, list[Any]]

    @abstractmethod
    def log(self, level: str) -> list[Any]:
        """Return the captured entries for *level*."""
        ...

    @abstractmethod
    def verbose(self, data: Any = None, producer: Producer | None = None) -> None: ...

    @abstractmethod
    def debug(self, data: Any = None, producer: Producer | None = None) -> None: ...

    @abstractmethod
    def info(self, data: Any = None, producer: Producer | None = None) -> None: ...

    @abstractmethod
    def warn(self, data: Any = None, producer: Producer | None = None) -> None: ...

    @abstractmethod
    def error(self, data: Any = None, producer: Producer | None = None) -> None: ...

    @abstractmethod
    def fatal(self, data: Any = None, producer: Producer | None = None) -> None: ...
