"""Command-line interface for PANELSEED."""
