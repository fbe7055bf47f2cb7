import io

import pytest

from fastchat.message import Message
from fastchat.message_notifier import ConsoleMessageNotifier, MessageNotifier
from fastchat.password_hasher import Sha512PasswordHasher
from fastchat.user import User


@pytest.fixture
def user():
    return User("bob", Sha512PasswordHasher().hash("password"))


def test_message_posted_line(capsys):
    ConsoleMessageNotifier().notify_message_posted(Message("bob", "hello"))
    assert capsys.readouterr().out == "bob': hello\n"


def test_user_joined_line(capsys, user):
    ConsoleMessageNotifier().notify_user_joined(user)
    assert capsys.readouterr().out == "bob joined the room\n"


def test_user_left_line(capsys, user):
    ConsoleMessageNotifier().notify_user_left(user)
    assert capsys.readouterr().out == "bob left the room\n"


def test_custom_stream(user):
    stream = io.StringIO()
    notifier = ConsoleMessageNotifier(stream)
    notifier.notify_user_joined(user)
    notifier.notify_user_left(user)
    assert stream.getvalue() == "bob joined the room\nbob left the room\n"


def test_abstract_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        MessageNotifier()  # type: ignore[abstract]