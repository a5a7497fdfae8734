"""Queue subscriptions and synchronous delivery to their handlers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from fake_smith.errors import NoSubscribersError
from fake_smith.services.message_queue.ack import AckDecorator

MessageHandler = Callable[[Any, AckDecorator], Any]


@dataclass
class Subscription:
    handler: MessageHandler
    options: dict[str, Any] = field(default_factory=dict)


class SubscriptionRegistry:
    """At most one handler per queue name; redefining replaces silently."""

    def __init__(self, default_auto_ack: bool = True) -> None:
        self._subscriptions: dict[str, Subscription] = {}
        self._default_auto_ack = default_auto_ack

    def define(
        self, queue_name: str, options: dict[str, Any] | None, handler: MessageHandler
    ) -> None:
        self._subscriptions[queue_name] = Subscription(handler, dict(options or {}))

    def undefine(self, queue_name: str, completion: Callable[[], Any] | None = None) -> None:
        """Remove the subscription, then run *completion* (always, even if absent)."""
        self._subscriptions.pop(queue_name, None)
        if completion is not None:
            completion()

    def dispatch(self, queue_name: str, payload: Any, receiver: Any) -> Any:
        """Deliver *payload* to the queue's handler.

        The receiver is wrapped in an AckDecorator. With ``auto_ack`` on, the
        message is acknowledged before the handler runs, so a handler that
        acks again gets MessageAckedTwiceError.
        """
        subscription = self._subscriptions.get(queue_name)
        if subscription is None:
            raise NoSubscribersError(queue_name)
        wrapped = AckDecorator(receiver)
        auto_ack = subscription.options.get("auto_ack", self._default_auto_ack)
        if auto_ack:
            wrapped.ack()
        return subscription.handler(payload, wrapped)

    def options_for(self, queue_name: str) -> dict[str, Any] | None:
        subscription = self._subscriptions.get(queue_name)
        return subscription.options if subscription else None

    def queue_names(self) -> list[str]:
        return list(self._subscriptions)

    def clear(self) -> None:
        self._subscriptions.clear()
