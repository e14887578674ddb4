"""Murmure webhook delivery and history."""

__version__ = "0.3.0"
