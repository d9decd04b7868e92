"""Password hashing and at-rest secret encryption adapters.

- :class:`BcryptPasswordHasher` stores account passwords as salted bcrypt
  hashes (``$2b$`` prefix, cost 10 by default).
- :class:`FernetSecretCipher` encrypts node daemon tokens with a Fernet key
  derived from the application key by SHA-256, so any non-empty passphrase
  can be used as ``PANELSEED_APP_KEY``.
"""

import base64
import hashlib

import bcrypt
from cryptography.fernet import Fernet, InvalidToken

from panelseed.interfaces.crypto import PasswordHasher, SecretCipher

DEFAULT_BCRYPT_ROUNDS = 10


class BcryptPasswordHasher(PasswordHasher):
    """Password hasher backed by the `bcrypt` library."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # not a bcrypt hash at all
            return False


def derive_fernet_key(app_key: str | bytes) -> bytes:
    """Derive a urlsafe-base64 Fernet key from an arbitrary application key.

    Raises:
        ValueError: If ``app_key`` is empty.
    """
    if not app_key:
        raise ValueError("Secret cipher requires a non-empty application key")
    material = app_key.encode("utf-8") if isinstance(app_key, str) else app_key
    return base64.urlsafe_b64encode(hashlib.sha256(material).digest())


class FernetSecretCipher(SecretCipher):
    """Secret cipher backed by `cryptography`'s Fernet recipe."""

    def __init__(self, app_key: str | bytes) -> None:
        self._fernet = Fernet(derive_fernet_key(app_key))

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("utf-8")

    def decrypt(self, ciphertext: str) -> str:
        try:
            plaintext = self._fernet.decrypt(ciphertext.encode("utf-8"))
        except InvalidToken as e:
            raise ValueError("Ciphertext was not produced with this key") from e
        return plaintext.decode("utf-8")
