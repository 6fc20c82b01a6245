"""Open thread use case."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from discuss.config import ThreadSettings
from discuss.domain.model.comment import CommentNode
from discuss.domain.repository import ThreadRepository
from discuss.domain.service import ThreadStore
from discuss.domain.value import SubjectId


class CommentItem(BaseModel):
    """Comment item in response, flattened for sequential rendering."""

    comment_id: str
    parent_id: str | None
    author_label: str
    author_initial: str  # Avatar fallback
    avatar_ref: str | None
    body: str
    depth: int
    reply_count: int
    created_at: datetime

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentItem":
        """Convert a domain comment node, without its replies."""
        return cls(
            comment_id=node.id,
            parent_id=node.parent_id,
            author_label=node.author_label.root,
            author_initial=node.author_label.initial,
            avatar_ref=node.avatar_ref.root if node.avatar_ref else None,
            body=node.body,
            depth=node.depth,
            reply_count=node.reply_count,
            created_at=node.created_at,
        )


class OpenThreadRequest(BaseModel):
    """Open thread request."""

    subject_id: str


class OpenThreadResponse(BaseModel):
    """Open thread response.

    ``store`` is the live thread the session keeps mutating; ``comments``
    is a snapshot of it in tree order.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    subject_id: str
    store: ThreadStore
    comments: list[CommentItem]
    total: int


class OpenThreadUseCase:
    """Use case for hydrating the thread of a discussion subject."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        thread_settings: ThreadSettings,
    ) -> None:
        """Initialize open thread use case.

        Args:
            thread_repository: Repository the thread is loaded from
            thread_settings: Settings for the created thread store
        """
        self.thread_repository = thread_repository
        self.thread_settings = thread_settings

    async def execute(self, request: OpenThreadRequest) -> OpenThreadResponse:
        """Execute open thread flow.

        Steps:
        1. Load root comments from the repository
        2. Build a thread store from them (validates ids and depths)
        3. Snapshot the thread in tree order

        Args:
            request: Open thread request with subject ID

        Returns:
            The live store and a tree-ordered snapshot of its comments

        Raises:
            ThreadIntegrityError: If the stored thread is inconsistent
            PersistenceError: If the repository cannot be read
        """
        subject_id = SubjectId(request.subject_id)
        roots = await self.thread_repository.load_thread(subject_id)

        store = ThreadStore(
            subject_id=subject_id,
            settings=self.thread_settings,
            roots=roots,
        )

        comments = [
            CommentItem.from_domain(node)
            for root in store.list_roots()
            for node in root.walk()
        ]

        return OpenThreadResponse(
            subject_id=request.subject_id,
            store=store,
            comments=comments,
            total=store.count(),
        )
