"""
Credential store for the enable password and enable secret.

Only SHA-256 digests are stored; callers hash what the user typed and
compare digests.
"""

import hashlib
import threading
from typing import Optional


def hash_password(plain: str) -> str:
    """Return the hex SHA-256 digest of a password."""
    return hashlib.sha256(plain.encode("utf-8")).hexdigest()


class CredentialStore:
    """Thread-safe holder for password digests."""

    def __init__(self):
        self._lock = threading.Lock()
        self._password: Optional[str] = None
        self._secret: Optional[str] = None

    def set_enable_password(self, plain: str) -> None:
        digest = hash_password(plain)
        with self._lock:
            self._password = digest

    def set_enable_secret(self, plain: str) -> None:
        digest = hash_password(plain)
        with self._lock:
            self._secret = digest

    def enable_password_digest(self) -> Optional[str]:
        with self._lock:
            return self._password

    def enable_secret_digest(self) -> Optional[str]:
        with self._lock:
            return self._secret

    def requires_authentication(self) -> bool:
        with self._lock:
            return self._password is not None or self._secret is not None

    def verify_password(self, plain: str) -> bool:
        digest = hash_password(plain)
        with self._lock:
            return self._password is not None and digest == self._password

    def verify_secret(self, plain: str) -> bool:
        digest = hash_password(plain)
        with self._lock:
            return self._secret is not None and digest == self._secret
