"""PBKDF2 password hasher.

Hash format: ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>``.
"""

import hashlib
import hmac
import secrets

from football_network.domain.user.ports import IPasswordHasher

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 260_000
SALT_BYTES = 16


class Pbkdf2PasswordHasher(IPasswordHasher):
    """
    Examples:
        >>> hasher = Pbkdf2PasswordHasher(iterations=1_000)
        >>> hashed = hasher.hash("secret123")
        >>> hasher.verify("secret123", hashed), hasher.verify("nope", hashed)
        (True, False)
    """

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        self._iterations = iterations

    def hash(self, password: str) -> str:
        salt = secrets.token_bytes(SALT_BYTES)
        digest = self._derive(password, salt, self._iterations)
        return f"{ALGORITHM}${self._iterations}${salt.hex()}${digest.hex()}"

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            algorithm, iterations, salt_hex, digest_hex = password_hash.split("$")
            if algorithm != ALGORITHM:
                return False
            expected = bytes.fromhex(digest_hex)
            actual = self._derive(password, bytes.fromhex(salt_hex), int(iterations))
        except ValueError:
            return False
        return hmac.compare_digest(expected, actual)

    @staticmethod
    def _derive(password: str, salt: bytes, iterations: int) -> bytes:
        return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
