from datetime import datetime, timezone

import pytest

from fastchat.message import Message


def test_fields_are_kept():
    message = Message("bob", "hello")
    assert message.sender == "bob"
    assert message.content == "hello"


def test_timestamp_is_taken_at_creation():
    before = datetime.now(timezone.utc)
    message = Message("bob", "hello")
    after = datetime.now(timezone.utc)
    assert before <= message.timestamp <= after


def test_empty_sender_is_rejected():
    with pytest.raises(ValueError, match="sender"):
        Message("", "hello")


def test_empty_content_is_rejected():
    with pytest.raises(ValueError, match="content"):
        Message("bob", "")


def test_message_is_immutable():
    message = Message("bob", "hello")
    with pytest.raises(AttributeError):
        message.content = "changed"  # type: ignore[misc]
    assert message.content == "hello"