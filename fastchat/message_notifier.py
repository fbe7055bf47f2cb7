"""Notifications about activity in chat rooms."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from fastchat.message import Message
from fastchat.user import User


class MessageNotifier(ABC):
    """Receives events from a chat room."""

    @abstractmethod
    def notify_message_posted(self, message: Message) -> None:
        """Called after a message has been posted."""

    @abstractmethod
    def notify_user_joined(self, user: User) -> None:
        """Called after a user has joined."""

    @abstractmethod
    def notify_user_left(self, user: User) -> None:
        """Called when a user leaves."""


class ConsoleMessageNotifier(MessageNotifier):
    """Writes each event as a line of text, to standard output by default."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def _write(self, line: str) -> None:
        print(line, file=self._stream if self._stream is not None else sys.stdout)

    def notify_message_posted(self, message: Message) -> None:
        self._write(f"{message.sender}': {message.content}")

    def notify_user_joined(self, user: User) -> None:
        self._write(f"{user.username} joined the room")

    def notify_user_left(self, user: User) -> None:
        self._write(f"{user.username} left the room")