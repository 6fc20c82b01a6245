"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List

from discuss.domain.model.comment import CommentNode
from discuss.domain.value import SubjectId


class ThreadRepository(ABC):
    """Repository for comment threads.

    Defines the contract for loading and saving a thread.
    Implementations live in the persistence layer and raise
    ``PersistenceError`` when the backing store fails.
    """

    @abstractmethod
    async def load_thread(self, subject_id: SubjectId) -> List[CommentNode]:
        """Load the root comments of a thread.

        Args:
            subject_id: The discussion subject (post, confession, ...)

        Returns:
            Root comments in insertion order, each with its replies
            populated. Empty list when the subject has no comments.
        """
        pass

    @abstractmethod
    async def save_reply(self, subject_id: SubjectId, node: CommentNode) -> None:
        """Persist a newly committed comment.

        Args:
            subject_id: The discussion subject
            node: The committed comment; ``node.parent_id`` is None for a
                top-level comment
        """
        pass
