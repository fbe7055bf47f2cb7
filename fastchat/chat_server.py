"""The chat server: user accounts, sessions and rooms."""

from __future__ import annotations

from fastchat.chat_room import ChatRoom
from fastchat.message_notifier import MessageNotifier
from fastchat.password_hasher import PasswordHasher
from fastchat.user import User


def _require(value: str, what: str) -> None:
    if not value:
        raise ValueError(f"{what} cannot be empty")


class ChatServer:
    """Keeps registered users, who is online, and the rooms."""

    def __init__(self, hasher: PasswordHasher | None) -> None:
        if hasher is None:
            raise ValueError("Chat server requires a password hasher")
        self._hasher = hasher
        self._rooms: list[ChatRoom] = []
        self._users: dict[str, User] = {}
        self._online: dict[str, User] = {}

    def __repr__(self) -> str:
        return (
            f"ChatServer(users={len(self._users)}, online={len(self._online)}, "
            f"rooms={len(self._rooms)})"
        )

    def register_user(self, username: str, password: str) -> User | None:
        """Create a new account; return None if the name is already taken."""
        _require(username, "Username")
        _require(password, "Password")
        if username in self._users:
            return None
        user = User(username, self._hasher.hash(password))
        self._users[username] = user
        return user

    def login(self, username: str, password: str) -> User | None:
        """Bring a user online.

        Returns None if the user is unknown, already online, or the
        password is wrong.
        """
        _require(username, "Username")
        _require(password, "Password")
        user = self._users.get(username)
        if user is None or username in self._online:
            return None
        if not user.check_password(password, self._hasher):
            return None
        self._online[username] = user
        return user

    def logout(self, username: str) -> None:
        """Take a user offline, removing them from every room they are in."""
        _require(username, "Username")
        if username not in self._online:
            return
        for room in self._rooms:
            if room.has_user(username):
                room.leave(username)
        del self._online[username]

    def find_room(self, name: str) -> ChatRoom | None:
        """Return the room called ``name``, or None."""
        _require(name, "Room name")
        return next((room for room in self._rooms if room.name == name), None)

    def create_room(
        self, name: str, message_notifier: MessageNotifier | None
    ) -> ChatRoom | None:
        """Create a room; return None if one with that name exists."""
        _require(name, "Room name")
        if any(room.name == name for room in self._rooms):
            return None
        room = ChatRoom(name, message_notifier)
        self._rooms.append(room)
        return room