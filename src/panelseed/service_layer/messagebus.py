"""Command dispatch for the service layer."""

import logging
from collections.abc import Callable
from typing import Any

from panelseed.domain.errors import PanelSeedError
from panelseed.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(PanelSeedError, LookupError):
    """Raised when a command type has no registered handler."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """Route each command to the one handler registered for its type.

    Handlers arrive with their dependencies already bound (see
    :mod:`panelseed.bootstrap`), so dispatch is a plain call with the command.
    The unit of work the handlers share is exposed as ``uow`` so read-side
    views can use the same store.

    Args:
        uow: The unit of work bound into the handlers.
        command_handlers: Command type to single-argument callable.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., Any]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> Any:
        """Dispatch ``cmd`` and return the handler's result.

        Raises:
            NoHandlerForCommand: Nothing is registered for ``type(cmd)``.
        """
        handler = self._command_handlers.get(type(cmd))
        if handler is None:
            logger.error("No handler found for command %s", type(cmd).__name__)
            raise NoHandlerForCommand(cmd)

        name = getattr(handler, "__name__", None) or getattr(
            getattr(handler, "func", None), "__name__", repr(handler)
        )
        logger.debug("Handling %r with %s", cmd, name)
        try:
            return handler(cmd)
        except Exception:
            # callers decide how loudly to report; keep the traceback for -vvv
            logger.debug("%s failed for %r", name, cmd, exc_info=True)
            raise
