"""Identity and credential generators for PANELSEED."""

import secrets
import string
import uuid

from panelseed.domain.models import DaemonCredentials
from panelseed.interfaces.id_generator import (
    TOKEN_ID_LENGTH,
    TOKEN_LENGTH,
    CredentialGenerator,
    IdGenerator,
)

# pylint: disable=too-few-public-methods

ALPHABET = string.ascii_letters + string.digits


def random_string(length: int) -> str:
    """Return ``length`` random alphanumeric characters from the OS CSPRNG."""
    return "".join(secrets.choice(ALPHABET) for _ in range(length))


class UUIDv4Generator(IdGenerator):
    """UUIDv4 generator.

    UUIDv4 are universally unique identifiers that are randomly generated.
    They are not guaranteed to be sequential or ordered in any way.
    This generator uses Python's built-in `uuid` library to create UUIDv4 identifiers.
    """

    def new_id(self) -> str:
        """Generate a new UUID."""
        return str(uuid.uuid4())


class SecretsCredentialGenerator(CredentialGenerator):
    """Daemon credentials drawn from :mod:`secrets`."""

    def new_credentials(self) -> DaemonCredentials:
        return DaemonCredentials(
            token_id=random_string(TOKEN_ID_LENGTH),
            token=random_string(TOKEN_LENGTH),
        )


class SimpleIdGenerator(IdGenerator):
    """A simple ID generator that produces sequential, UUID-shaped IDs.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self) -> None:
        self._counter = 0

    def new_id(self) -> str:
        """Generate a new unique identifier."""
        self._counter += 1
        return str(uuid.UUID(int=self._counter))


class SequentialCredentialGenerator(CredentialGenerator):
    """Deterministic credentials for tests (``tokid00000000001``, ``token0…01``)."""

    def __init__(self) -> None:
        self._counter = 0

    def new_credentials(self) -> DaemonCredentials:
        self._counter += 1
        return DaemonCredentials(
            token_id=f"tokid{self._counter:0{TOKEN_ID_LENGTH - 5}d}",
            token=f"token{self._counter:0{TOKEN_LENGTH - 5}d}",
        )
