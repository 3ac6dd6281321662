"""Uptime monitor: probe services and keep rolling uptime stats in a JSON document."""

__version__ = "1.0.0"
