from __future__ import annotations

from typing import Any, Callable

ReplyHandler = Callable[[Any], Any]


class ReplyHandlerRegistry:
    """Per-queue functions that turn a published message into its reply."""

    def __init__(self) -> None:
        self._handlers: dict[str, ReplyHandler] = {}

    def set_reply_handler(self, queue_name: str, fn: ReplyHandler) -> None:
        self._handlers[queue_name] = fn

    def get(self, queue_name: str) -> ReplyHandler | None:
        return self._handlers.get(queue_name)

    def clear(self) -> None:
        self._handlers.clear()
