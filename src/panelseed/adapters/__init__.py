"""Adapters (infrastructure) for PANELSEED.

Provide concrete implementations of the interfaces: SQLAlchemy tables and
repositories for the panel store, an in-memory store for tests, bcrypt
password hashing, Fernet secret encryption, and identity/credential
generators, plus engine wiring and Alembic migrations.

Dependency rule: may import `panelseed.domain` and `panelseed.interfaces`;
neither of those may import this package.
"""
