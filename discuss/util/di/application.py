"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import OpenThreadUseCase, SubmitReplyUseCase
from discuss.config import ThreadSettings
from discuss.domain.repository import ThreadRepository
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_open_thread_use_case(
        self,
        thread_repository: ThreadRepository,
        thread_settings: ThreadSettings,
    ) -> OpenThreadUseCase:
        """Provide open thread use case."""
        return OpenThreadUseCase(
            thread_repository=thread_repository,
            thread_settings=thread_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_submit_reply_use_case(
        self, thread_repository: ThreadRepository
    ) -> SubmitReplyUseCase:
        """Provide submit reply use case."""
        return SubmitReplyUseCase(thread_repository=thread_repository)
