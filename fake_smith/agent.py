from __future__ import annotations

from typing import Any, Callable, Iterable

from fake_smith import support
from fake_smith.config.context import SmithContext
from fake_smith.messaging.receiver import Receiver
from fake_smith.messaging.sender import Sender
from fake_smith.services.logger.interface import LoggingInterface


class Agent:
    """Stand-in for Smith's agent orchestrator.

    Lifecycle hooks either do nothing or call their callback straight away.
    Receivers and senders it hands out share the agent's context.
    """

    def __init__(self, *, context: SmithContext | None = None) -> None:
        self._context = context

    @classmethod
    def options(cls, opts: dict[str, Any]) -> None:
        pass

    @property
    def context(self) -> SmithContext:
        return self._context or support.current_context()

    def receiver(
        self,
        queue_name: str,
        opts: dict[str, Any] | None = None,
        setup: Callable[[Receiver], Any] | None = None,
    ) -> Receiver:
        receiver = Receiver(queue_name, opts, context=self._context)
        if setup is not None:
            setup(receiver)
        return receiver

    def sender(
        self,
        queue_names: str | Iterable[str] | None,
        opts: dict[str, Any] | None = None,
        setup: Callable[[Sender], Any] | None = None,
    ) -> list[Sender]:
        if queue_names is None:
            queue_names = []
        elif isinstance(queue_names, str):
            queue_names = [queue_names]
        return [Sender(name, opts, setup, context=self._context) for name in queue_names]

    def acknowledge_start(self, callback: Callable[[], Any]) -> Any:
        return callback()

    def acknowledge_stop(self, callback: Callable[[], Any]) -> Any:
        return callback()

    def run_signal_handlers(self, sig: Any, handlers: Any) -> None:
        pass

    def setup_control_queue(self) -> None:
        pass

    def setup_stats_queue(self) -> None:
        pass

    def start_keep_alive(self) -> None:
        pass

    def queues(self) -> None:
        return None

    @property
    def logger(self) -> LoggingInterface:
        return self.context.logger

    def get_test_logger(self) -> LoggingInterface:
        return self.logger
