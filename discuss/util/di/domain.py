"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import ThreadSettings
from discuss.domain.service import ComposerState
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Thread stores are built per subject by ``OpenThreadUseCase``; only the
    session's composer state comes from the container.
    """

    scope = Scope.REQUEST

    @provide
    def get_composer_state(self, thread_settings: ThreadSettings) -> ComposerState:
        """Provide composer state for the acting user."""
        return ComposerState(author_label=thread_settings.default_author_label)
