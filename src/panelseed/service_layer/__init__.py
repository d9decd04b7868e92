"""Service layer for PANELSEED.

Commands and their handlers (the idempotent provisioning run), the message
bus that routes commands, and read-side views (node agent configuration).

Dependency rule: may import `panelseed.domain` and `panelseed.interfaces`;
must not import `panelseed.adapters` or `panelseed.bootstrap`.
"""
