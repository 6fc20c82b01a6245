"""Thread repository implementations."""

from .inmemory import InMemoryThreadRepository

__all__ = [
    "InMemoryThreadRepository",
]
