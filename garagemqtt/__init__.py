"""Garage door status types and MQTT session building blocks."""

__version__ = "0.1.0"

__all__ = ["callback", "diagnostics", "session", "timers", "types"]