"""Deterministic tactical simulation core for companion AI encounters."""

__version__ = "0.1.0"
