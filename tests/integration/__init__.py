"""Integration tests against real SQLite files."""
