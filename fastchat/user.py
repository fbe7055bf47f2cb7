"""Registered chat users."""

from __future__ import annotations

from dataclasses import dataclass, field

from fastchat.password_hasher import PasswordHasher


@dataclass(frozen=True)
class User:
    """A user known by name, holding the hash of their password."""

    username: str
    password_hash: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.password_hash:
            raise ValueError("User's password hash cannot be empty")

    def check_password(self, password: str, hasher: PasswordHasher) -> bool:
        """Return whether ``password`` matches this user's stored hash."""
        return hasher.verify(self.password_hash, password)