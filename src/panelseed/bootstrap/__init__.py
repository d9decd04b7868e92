"""Bootstrap (composition root) for PANELSEED.

Assembles the application at runtime: wires the concrete store, crypto and
generator adapters into the service-layer handlers, and hands entrypoints an
explicit store handle (`AppContainer`) instead of ambient global wiring.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `panelseed.adapters`, `panelseed.service_layer`,
  `panelseed.interfaces`, `panelseed.domain`, and `panelseed.config`.
- Inner layers must not import `panelseed.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, open_store

__all__ = ["AppContainer", "bootstrap", "open_store"]
