class FakeSmithError(Exception):
    """Base class for errors raised by the fake messaging layer."""


class NoSubscribersError(FakeSmithError, LookupError):
    """A message was sent to a queue nobody subscribed to."""

    def __init__(self, queue_name: str) -> None:
        super().__init__(f"no subscribers on queue: {queue_name}")
        self.queue_name = queue_name


class MessageAckedTwiceError(FakeSmithError, RuntimeError):
    """A delivered message was acknowledged more than once."""

    def __init__(self) -> None:
        super().__init__("message was acked twice")
