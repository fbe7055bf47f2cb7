"""Chat messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Message:
    """A piece of text posted by a user, stamped with the time it was created."""

    sender: str
    content: str
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self) -> None:
        if not self.sender:
            raise ValueError("Message sender cannot be empty")
        if not self.content:
            raise ValueError("Message content cannot be empty")