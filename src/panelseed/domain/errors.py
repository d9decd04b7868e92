"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class PanelSeedError(Exception):
    """Base class for all PANELSEED errors."""


class ConfigurationError(PanelSeedError):
    """Raised when a required setting is missing or malformed.

    Attributes:
        name (str): The setting (usually an environment variable) at fault.
        reason (str): Human-readable description of the problem.
    """

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


# ============================================================================
#                           Store errors
# ============================================================================


class StoreError(PanelSeedError):
    """Base class for errors raised by the store access layer."""


class NodeNotFoundError(StoreError):
    """Raised when no Resource Node matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Node not found: {name}")
        self.name = name


class PersistenceError(StoreError):
    """Raised when the store rejects a write or the connection is lost."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"Failed to {operation}: {detail}")
        self.operation = operation
        self.detail = detail


class SecretDecryptionError(StoreError):
    """Raised when a secret stored at rest cannot be decrypted with the app key."""

    def __init__(self, field: str) -> None:
        super().__init__(
            f"Stored value for '{field}' cannot be decrypted; "
            "check that PANELSEED_APP_KEY matches the key used at creation."
        )
        self.field = field
