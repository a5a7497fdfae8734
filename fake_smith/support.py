"""Module-level test helpers operating on the currently installed context.

Facades built without an explicit ``context=`` resolve state through
``current_context()``, so production code that constructs ``Receiver`` or
``Sender`` directly still lands in the same registries the test inspects.
"""

from __future__ import annotations

from typing import Any

from fake_smith.config.context import SmithContext
from fake_smith.config.settings import FakeSmithSettings
from fake_smith.services.logger.interface import LoggingInterface
from fake_smith.services.message_queue.replies import ReplyHandler

_current: SmithContext | None = None


def current_context() -> SmithContext:
    """Return the installed context, creating one from settings on first use."""
    global _current
    if _current is None:
        _current = SmithContext.from_settings(FakeSmithSettings())
    return _current


def install_context(context: SmithContext) -> SmithContext:
    global _current
    _current = context
    return context


def reset(settings: FakeSmithSettings | None = None) -> SmithContext:
    """Install a fresh context: no subscriptions, messages, replies or logs."""
    return install_context(SmithContext.from_settings(settings))


clear_all = reset


def set_reply_handler(queue_name: str, fn: ReplyHandler) -> None:
    current_context().replies.set_reply_handler(queue_name, fn)


def send_message(queue_name: str, payload: Any, receiver: Any) -> Any:
    """Deliver *payload* to the subscriber of *queue_name*, as the broker would."""
    return current_context().subscriptions.dispatch(queue_name, payload, receiver)


def subscribed_queues() -> list[str]:
    return current_context().subscriptions.queue_names()


def get_messages(queue_name: str) -> list[Any]:
    return current_context().messages.messages_for(queue_name)


def logger() -> LoggingInterface:
    return current_context().logger
