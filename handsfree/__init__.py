"""Hands-free voice command capture."""

__version__ = "0.1.0"
