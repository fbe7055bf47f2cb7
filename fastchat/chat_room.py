"""Chat rooms that users join and post messages to."""

from __future__ import annotations

from fastchat.message import Message
from fastchat.message_notifier import MessageNotifier
from fastchat.user import User


class ChatRoom:
    """A named room holding its members and message history."""

    def __init__(self, name: str, message_notifier: MessageNotifier | None) -> None:
        if not name:
            raise ValueError("Chat room name cannot be empty")
        if message_notifier is None:
            raise ValueError("Chat room requires a message notifier")
        self._name = name
        self._notifier = message_notifier
        self._users: list[User] = []
        self._messages: list[Message] = []

    def __repr__(self) -> str:
        return f"ChatRoom(name={self._name!r}, users={len(self._users)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def users(self) -> tuple[User, ...]:
        """Members in the order they joined."""
        return tuple(self._users)

    @property
    def chat_history(self) -> tuple[Message, ...]:
        """Messages in the order they were posted."""
        return tuple(self._messages)

    def has_user(self, username: str) -> bool:
        return any(user.username == username for user in self._users)

    def join(self, user: User) -> None:
        """Add ``user``; joining twice has no effect."""
        if user is None:
            raise ValueError("Cannot join a chat room without a user")
        if self.has_user(user.username):
            return
        self._users.append(user)
        self._notifier.notify_user_joined(user)

    def leave(self, username: str) -> None:
        """Remove the member called ``username``; unknown names are ignored."""
        if not username:
            raise ValueError("Username cannot be empty")
        member = next((u for u in self._users if u.username == username), None)
        if member is None:
            return
        self._notifier.notify_user_left(member)
        self._users.remove(member)

    def post_message(self, message: Message) -> None:
        """Record ``message`` if its sender is a member; otherwise ignore it."""
        if message is None:
            raise ValueError("Cannot post an empty message")
        if not self.has_user(message.sender):
            return
        self._messages.append(message)
        self._notifier.notify_message_posted(message)