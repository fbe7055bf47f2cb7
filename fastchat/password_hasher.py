"""Password hashing strategies."""

from __future__ import annotations

import hashlib
import hmac
from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Turns passwords into hashes and checks passwords against them."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return the hash of ``password``."""

    @abstractmethod
    def verify(self, hash: str, password: str) -> bool:
        """Return whether ``password`` matches ``hash``."""


class Sha512PasswordHasher(PasswordHasher):
    """Hashes passwords as lowercase hexadecimal SHA-512 digests."""

    def hash(self, password: str) -> str:
        return hashlib.sha512(password.encode("utf-8")).hexdigest()

    def verify(self, hash: str, password: str) -> bool:
        return hmac.compare_digest(hash, self.hash(password))