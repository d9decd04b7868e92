"""Alembic migration environment for the panel store."""
