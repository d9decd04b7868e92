"""Bootstrap the message bus with handlers, unit of work and adapters."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, Any

from panelseed import config
from panelseed.adapters.crypto import BcryptPasswordHasher, FernetSecretCipher
from panelseed.adapters.db.engine import make_engine
from panelseed.adapters.id_generators import SecretsCredentialGenerator, UUIDv4Generator
from panelseed.adapters.unit_of_work import SqlAlchemyUnitOfWork
from panelseed.service_layer.handlers import COMMAND_HANDLERS
from panelseed.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from panelseed.interfaces.unit_of_work import AbstractUnitOfWork
    from panelseed.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """Store handle passed explicitly to the seeder and the renderer."""

    uow: AbstractUnitOfWork
    message_bus: MessageBus


def build_uow(url: str, app_key: str) -> AbstractUnitOfWork:
    """Build a new unit of work over ``url`` that encrypts secrets with ``app_key``."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine, FernetSecretCipher(app_key))


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., Any]],
    **extra_dependencies: object,
) -> MessageBus:
    """Build a message bus with injected dependencies.

    Every handler receives the unit of work plus the production hasher and
    generators; ``extra_dependencies`` may add (e.g. an ``observer``) or
    override any of them.
    """
    dependencies: dict[str, object] = {
        "uow": uow,
        "hasher": BcryptPasswordHasher(),
        "id_generator": UUIDv4Generator(),
        "credential_generator": SecretsCredentialGenerator(),
        **extra_dependencies,
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def open_store(
    url: str, app_key: str, **extra_dependencies: object
) -> AppContainer:
    """Open a configured handle on the panel store."""
    uow = build_uow(url, app_key)
    message_bus = build_message_bus(uow, COMMAND_HANDLERS, **extra_dependencies)
    return AppContainer(uow=uow, message_bus=message_bus)


def bootstrap(**extra_dependencies: object) -> AppContainer:
    """Open the store named by ``PANELSEED_DB_URL`` / ``PANELSEED_APP_KEY``.

    Raises:
        DatabaseUrlNotSetError: If ``PANELSEED_DB_URL`` is not set.
        AppKeyNotSetError: If ``PANELSEED_APP_KEY`` is not set.
    """
    return open_store(config.get_db_url(), config.get_app_key(), **extra_dependencies)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
