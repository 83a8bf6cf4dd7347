"""Logging setup and the event log line sink."""
