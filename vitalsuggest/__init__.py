"""Vital-sign health suggestion service."""

__version__ = "1.0.0"
