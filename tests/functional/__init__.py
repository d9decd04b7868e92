"""Functional tests driving the ``panelseed`` CLI end to end."""
