"""Root-level pytest setup: fake Smith fixtures plus a stand-in message handle."""

from __future__ import annotations

from typing import Callable

import pytest

pytest_plugins = ["fake_smith.testing.fixtures"]


class RecordingReceiver:
    """Message handle that counts how often the broker was told it was acked."""

    def __init__(self) -> None:
        self.acks = 0
        self.rejected = False

    def ack(self) -> str:
        self.acks += 1
        return "acked"

    def reject(self, requeue: bool = False) -> None:
        self.rejected = requeue


@pytest.fixture
def make_receiver() -> Callable[[], RecordingReceiver]:
    return RecordingReceiver
