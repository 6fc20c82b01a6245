"""Persistence infrastructure providers."""

from dishka import Scope, provide

from discuss.domain.repository import ThreadRepository
from discuss.persistence.repository import InMemoryThreadRepository
from discuss.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider.

    Threads live for the lifetime of the process; a networked backend
    plugs in here by providing another ThreadRepository.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide process-wide thread repository."""
        return InMemoryThreadRepository()
