"""Concrete event store implementations."""

from .event_store import SQLModelEventStore
from .memory import InMemoryEventStore

__all__ = [
    "InMemoryEventStore",
    "SQLModelEventStore",
]
