"""Contract tests shared by every implementation of an interface."""
