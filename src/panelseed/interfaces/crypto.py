"""Interfaces for password hashing and at-rest secret encryption."""

import abc

# pylint: disable=too-few-public-methods


class PasswordHasher(abc.ABC):
    """One-way, salted hashing of account passwords."""

    @abc.abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash of ``password`` suitable for storage."""

    @abc.abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        """Return True if ``password`` matches the stored ``hashed`` value."""


class SecretCipher(abc.ABC):
    """Symmetric encryption for secrets stored in the panel database."""

    @abc.abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """Return a text ciphertext for ``plaintext``."""

    @abc.abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """Return the plaintext for ``ciphertext``.

        Raises:
            ValueError: If ``ciphertext`` was not produced with this key.
        """
