"""SQLAlchemy plumbing for the panel store: engine, metadata, types, tables."""
