"""Acknowledgement tracking for delivered messages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator

from fake_smith.errors import MessageAckedTwiceError


class ReceiverInterface(ABC):
    """Minimal capability a delivered-message handle exposes."""

    @abstractmethod
    def ack(self) -> Any: ...


class AckDecorator(ReceiverInterface):
    """Wraps a message handle and refuses to acknowledge it twice.

    Every attribute not defined here is forwarded to the wrapped handle, as
    are indexing, len, iteration, membership, truthiness, equality and
    hashing, so handlers can use it exactly as they would the real one.
    The decorator's own ``ack``, ``acked``, ``wrapped`` and ``callback``
    shadow any attributes of the same name on the handle; reach those
    through ``wrapped``.
    """

    def __init__(self, receiver: Any) -> None:
        self._receiver = receiver
        self._acked = False

    @property
    def acked(self) -> bool:
        return self._acked

    @property
    def wrapped(self) -> Any:
        return self._receiver

    def ack(self) -> Any:
        if self._acked:
            raise MessageAckedTwiceError()
        self._acked = True
        return self._receiver.ack()

    @property
    def callback(self) -> Callable[[Any], Any]:
        """One-argument function form of ``ack`` for callback-style call sites."""

        def _ack(_obj: Any = None) -> Any:
            return self.ack()

        return _ack

    def __getattr__(self, name: str) -> Any:
        # Only reached for names missing on the decorator itself.
        if name == "_receiver":
            raise AttributeError(name)
        return getattr(self._receiver, name)

    def __getitem__(self, key: Any) -> Any:
        return self._receiver[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._receiver[key] = value

    def __len__(self) -> int:
        return len(self._receiver)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._receiver)

    def __contains__(self, item: Any) -> bool:
        return item in self._receiver

    def __bool__(self) -> bool:
        return bool(self._receiver)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AckDecorator):
            other = other._receiver
        return self._receiver == other

    def __hash__(self) -> int:
        return hash(self._receiver)

    def __repr__(self) -> str:
        return f"AckDecorator({self._receiver!r}, acked={self._acked})"
