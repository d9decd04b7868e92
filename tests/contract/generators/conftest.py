"""Fixtures for id and credential generator contract tests."""

from collections.abc import Iterable

import pytest

from panelseed.adapters.id_generators import (
    SecretsCredentialGenerator,
    SequentialCredentialGenerator,
    SimpleIdGenerator,
    UUIDv4Generator,
)
from panelseed.interfaces.id_generator import CredentialGenerator, IdGenerator


@pytest.fixture(params=["uuid4", "simple"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"uuid4"` → UUIDv4Generator
      - `"simple"` → SimpleIdGenerator
    """
    match request.param:
        case "uuid4":
            yield UUIDv4Generator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["secrets", "sequential"])
def credential_generator(request: pytest.FixtureRequest) -> Iterable[CredentialGenerator]:
    """Return a fresh CredentialGenerator instance for the requested backend."""
    match request.param:
        case "secrets":
            yield SecretsCredentialGenerator()
        case "sequential":
            yield SequentialCredentialGenerator()
        case _:
            raise ValueError(f"unknown credential generator type: {request.param}")
