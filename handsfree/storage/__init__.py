"""Storage for saved contacts and confirmations."""

from .entity_store import EntityStore

__all__ = [
    "EntityStore",
]
