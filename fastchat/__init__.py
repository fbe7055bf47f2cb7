"""An in-memory chat-room model with users, rooms, messages and a ping HTTP endpoint."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "chat_room",
    "chat_server",
    "message",
    "message_notifier",
    "password_hasher",
    "user",
]