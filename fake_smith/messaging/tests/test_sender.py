from typing import Any

from fake_smith import support
from fake_smith.config.context import SmithContext
from fake_smith.messaging.sender import Sender


def _count(sender: Sender) -> int:
    counts: list[int] = []
    sender.message_count(counts.append)
    return counts[0]


def test_publish_records_message(smith_context: SmithContext):
    sender = Sender("agency.results")
    before = _count(sender)
    sender.publish({"ok": True})
    assert _count(sender) == before + 1
    assert support.get_messages("agency.results")[-1] == {"ok": True}


def test_publish_runs_completion(smith_context: SmithContext):
    done: list[bool] = []
    Sender("agency.results").publish("m", lambda: done.append(True))
    assert done == [True]


def test_setup_called_with_sender(smith_context: SmithContext):
    seen: list[Sender] = []
    sender = Sender("agency.results", None, seen.append)
    assert seen == [sender]


def test_reply_round_trip(smith_context: SmithContext):
    support.set_reply_handler("agency.rpc", lambda m: {"echo": m})
    replies: list[Any] = []
    sender = Sender("agency.rpc")
    sender.on_reply({"auto_ack": True}, replies.append)
    sender.publish("ping")
    assert replies == [{"echo": "ping"}]


def test_reply_happens_after_completion(smith_context: SmithContext):
    support.set_reply_handler("agency.rpc", lambda m: "reply")
    order: list[str] = []
    sender = Sender("agency.rpc")
    sender.on_reply(None, lambda r: order.append(r))
    sender.publish("ping", lambda: order.append("completion"))
    assert order == ["completion", "reply"]


def test_no_reply_without_on_reply(smith_context: SmithContext):
    called: list[Any] = []
    support.set_reply_handler("agency.rpc", lambda m: called.append(m))
    Sender("agency.rpc").publish("ping")
    assert called == []


def test_no_reply_without_reply_handler(smith_context: SmithContext):
    replies: list[Any] = []
    sender = Sender("agency.rpc")
    sender.on_reply(None, replies.append)
    sender.publish("ping")
    assert replies == []
    assert support.get_messages("agency.rpc") == ["ping"]


def test_on_timeout_never_fires(smith_context: SmithContext):
    fired: list[bool] = []
    sender = Sender("agency.rpc")
    sender.on_timeout(lambda: fired.append(True))
    sender.publish("ping")
    assert fired == []


def test_message_count_without_completion_is_noop(smith_context: SmithContext):
    assert Sender("agency.results").message_count() is None


def test_explicit_context(smith_context: SmithContext):
    private = SmithContext()
    Sender("agency.results", context=private).publish("m")
    assert private.messages.messages_for("agency.results") == ["m"]
    assert support.get_messages("agency.results") == []
