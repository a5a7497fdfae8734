from __future__ import annotations

from typing import Any, Callable

from fake_smith import support
from fake_smith.config.context import SmithContext


class Sender:
    """Stand-in for Smith's producer.

    ``publish`` records the message on the context. When the test registered
    a reply handler for the queue and the sender has an ``on_reply`` callback,
    the reply is computed and delivered before ``publish`` returns.
    """

    def __init__(
        self,
        queue_name: str,
        opts: dict[str, Any] | None = None,
        setup: Callable[[Sender], Any] | None = None,
        *,
        context: SmithContext | None = None,
    ) -> None:
        self.queue_name = queue_name
        self.opts = opts
        self._context = context
        self._on_reply: Callable[[Any], Any] | None = None
        if setup is not None:
            setup(self)

    @property
    def context(self) -> SmithContext:
        return self._context or support.current_context()

    def on_reply(self, opts: dict[str, Any] | None, handler: Callable[[Any], Any]) -> None:
        self._on_reply = handler

    def on_timeout(self, handler: Callable[..., Any]) -> None:
        # Timeouts never fire.
        pass

    def publish(self, message: Any, completion: Callable[[], Any] | None = None) -> None:
        context = self.context
        context.messages.enqueue(self.queue_name, message)
        if completion is not None:
            completion()
        reply_fn = context.replies.get(self.queue_name)
        if reply_fn is not None and self._on_reply is not None:
            self._on_reply(reply_fn(message))

    def message_count(self, completion: Callable[[int], Any] | None = None) -> None:
        if completion is not None:
            completion(len(self.context.messages.messages_for(self.queue_name)))

    def __repr__(self) -> str:
        return f"Sender({self.queue_name!r})"
