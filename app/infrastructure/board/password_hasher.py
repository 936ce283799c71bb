"""
Adapter: PBKDF2 password hashing.

Implements PasswordHasher port with hashlib. Stored format:
``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>``.
"""

import hashlib
import hmac
import secrets

from app.domain.board.ports import PasswordHasher

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 260_000
SALT_BYTES = 16


class Pbkdf2PasswordHasher(PasswordHasher):
    """Salted PBKDF2-HMAC-SHA256 hasher.

    Args:
        iterations: Work factor for new hashes. Existing hashes keep the
            iteration count they were created with.
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS) -> None:
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(SALT_BYTES)
        digest = _derive(password, salt, self._iterations)
        return f"{ALGORITHM}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, hashed: str) -> bool:
        try:
            algorithm, iterations, salt_hex, digest_hex = hashed.split("$")
            salt = bytes.fromhex(salt_hex)
            expected = bytes.fromhex(digest_hex)
            rounds = int(iterations)
        except ValueError:
            return False
        if algorithm != ALGORITHM:
            return False
        return hmac.compare_digest(_derive(password, salt, rounds), expected)


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
