from __future__ import annotations

from typing import Any


class MessageRegistry:
    """Messages published per queue, kept in publish order."""

    def __init__(self) -> None:
        self._queues: dict[str, list[Any]] = {}

    def enqueue(self, queue_name: str, message: Any) -> None:
        if queue_name not in self._queues:
            self._queues[queue_name] = []
        self._queues[queue_name].append(message)

    def messages_for(self, queue_name: str) -> list[Any]:
        if queue_name not in self._queues:
            self._queues[queue_name] = []
        return self._queues[queue_name]

    def queue_names(self) -> list[str]:
        return list(self._queues)

    def clear(self) -> None:
        self._queues.clear()
