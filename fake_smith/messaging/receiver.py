from __future__ import annotations

from typing import Any, Callable

from fake_smith import support
from fake_smith.config.context import SmithContext
from fake_smith.services.message_queue.subscriptions import MessageHandler


class Receiver:
    """Stand-in for Smith's consumer: subscriptions go to the context."""

    def __init__(
        self,
        queue_name: str,
        options: dict[str, Any] | None = None,
        *,
        context: SmithContext | None = None,
    ) -> None:
        self.queue_name = queue_name
        self.options = options or {}
        self._context = context
        self._requeue_opts: dict[str, Any] | None = None
        self._on_requeue_limit: Callable[..., Any] | None = None

    @property
    def context(self) -> SmithContext:
        return self._context or support.current_context()

    def subscribe(self, handler: MessageHandler) -> None:
        self.context.subscriptions.define(self.queue_name, self.options, handler)

    def unsubscribe(self, completion: Callable[[], Any] | None = None) -> None:
        self.context.subscriptions.undefine(self.queue_name, completion)

    # Requeueing is never simulated; these only record what they were given.

    def set_requeue_parameters(self, opts: dict[str, Any]) -> None:
        self._requeue_opts = opts

    requeue_parameters = set_requeue_parameters

    def on_requeue_limit(self, handler: Callable[..., Any]) -> None:
        self._on_requeue_limit = handler

    def __repr__(self) -> str:
        return f"Receiver({self.queue_name!r}, {self.options!r})"
