"""Interfaces for identity and credential generators."""

import abc

from panelseed.domain.models import DaemonCredentials

# pylint: disable=too-few-public-methods

TOKEN_ID_LENGTH = 16
TOKEN_LENGTH = 64


class IdGenerator(abc.ABC):
    """Contract for an identity token (UUID) generator."""

    @abc.abstractmethod
    def new_id(self) -> str:
        """Generate a new unique identifier."""


class CredentialGenerator(abc.ABC):
    """Contract for node agent credential generation."""

    @abc.abstractmethod
    def new_credentials(self) -> DaemonCredentials:
        """Generate a token id of 16 characters and a secret token of 64."""
