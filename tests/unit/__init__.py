"""Unit tests: one module at a time, against in-memory stores and fakes."""
