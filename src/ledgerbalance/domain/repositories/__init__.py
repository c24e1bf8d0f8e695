"""Repository protocol definitions for domain layer."""

from .event_store import EventStore

__all__ = ["EventStore"]
