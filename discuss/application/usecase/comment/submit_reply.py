"""Submit reply use case."""

import logfire
from pydantic import BaseModel, ConfigDict

from discuss.domain.error import PersistenceError
from discuss.domain.repository import ThreadRepository
from discuss.domain.service import ComposerState, ThreadStore
from discuss.domain.value import CommentId

from .open_thread import CommentItem


class SubmitReplyRequest(BaseModel):
    """Submit reply request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    node_id: str  # Node whose composer is submitted ("ROOT" for top-level)
    store: ThreadStore
    composer: ComposerState


class SubmitReplyResponse(BaseModel):
    """Submit reply response."""

    comment: CommentItem
    persisted: bool


class SubmitReplyUseCase:
    """Use case for committing a composer draft and saving the reply."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize submit reply use case.

        Args:
            thread_repository: Repository new replies are forwarded to
        """
        self.thread_repository = thread_repository

    async def execute(self, request: SubmitReplyRequest) -> SubmitReplyResponse:
        """Execute submit reply flow.

        Steps:
        1. Commit the draft into the in-memory thread and reset the composer
        2. Forward the new reply to the repository

        A failed save does not roll back step 1: the reply stays visible
        and ``persisted`` is False so the caller can retry the save.

        Args:
            request: Submit reply request with the session's store and composer

        Returns:
            The committed reply and whether it was saved

        Raises:
            AddReplyError: If the draft is rejected; draft and composer
                state are unchanged
        """
        node_id = CommentId(request.node_id)
        store = request.store

        node = request.composer.commit_and_close(node_id, store)

        persisted = True
        try:
            await self.thread_repository.save_reply(store.subject_id, node)
        except PersistenceError as e:
            persisted = False
            logfire.error(
                "Reply save failed",
                subject_id=store.subject_id,
                comment_id=node.id,
                error=str(e),
            )

        return SubmitReplyResponse(
            comment=CommentItem.from_domain(node),
            persisted=persisted,
        )
