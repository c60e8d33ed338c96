"""Agenda API: users and appointments over HTTP, backed by in-memory stores."""

__version__ = "1.0.0"
