"""State shared by the fake Receiver, Sender and Agent objects."""

from __future__ import annotations

from fake_smith.config.settings import FakeSmithSettings
from fake_smith.services.logger.factory import make_logger
from fake_smith.services.logger.interface import LoggingInterface
from fake_smith.services.message_queue.messages import MessageRegistry
from fake_smith.services.message_queue.replies import ReplyHandlerRegistry
from fake_smith.services.message_queue.subscriptions import SubscriptionRegistry


class SmithContext:
    """Holds the message, subscription and reply registries plus the logger.

    A fresh context is the "reset" state: create a new one between tests
    instead of wiping globals.
    """

    def __init__(
        self,
        messages: MessageRegistry | None = None,
        subscriptions: SubscriptionRegistry | None = None,
        replies: ReplyHandlerRegistry | None = None,
        logger: LoggingInterface | None = None,
        log_impl: str = "memory",
    ) -> None:
        self.messages = messages or MessageRegistry()
        self.subscriptions = subscriptions or SubscriptionRegistry()
        self.replies = replies or ReplyHandlerRegistry()
        self.log_impl = log_impl
        self.logger = logger or make_logger(log_impl)

    @classmethod
    def from_settings(cls, settings: FakeSmithSettings | None = None) -> SmithContext:
        settings = settings or FakeSmithSettings()
        return cls(
            subscriptions=SubscriptionRegistry(default_auto_ack=settings.default_auto_ack),
            log_impl=settings.log_impl,
        )

    def reset(self) -> None:
        """Clear everything in place, with a new logger of the configured implementation."""
        self.messages.clear()
        self.subscriptions.clear()
        self.replies.clear()
        self.logger = make_logger(self.log_impl)
