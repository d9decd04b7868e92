"""Repository adapters for the panel store."""

from .memory import (
    InMemoryAllocationRepository,
    InMemoryNodeRepository,
    InMemoryPanelData,
    InMemoryPrincipalRepository,
    InMemoryZoneRepository,
)
from .sqlalchemy import (
    SqlAlchemyAllocationRepository,
    SqlAlchemyNodeRepository,
    SqlAlchemyPrincipalRepository,
    SqlAlchemyZoneRepository,
)

__all__ = [
    "InMemoryAllocationRepository",
    "InMemoryNodeRepository",
    "InMemoryPanelData",
    "InMemoryPrincipalRepository",
    "InMemoryZoneRepository",
    "SqlAlchemyAllocationRepository",
    "SqlAlchemyNodeRepository",
    "SqlAlchemyPrincipalRepository",
    "SqlAlchemyZoneRepository",
]
