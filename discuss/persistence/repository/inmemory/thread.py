"""In-memory thread repository."""

from collections import defaultdict

from discuss.domain.error import PersistenceError
from discuss.domain.model.comment import CommentNode
from discuss.domain.repository.thread import ThreadRepository
from discuss.domain.value import CommentId, SubjectId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository.

    Stores comments flat per subject and assembles the tree on load, the
    way a relational backend would. Set ``fail_saves`` to simulate an
    unavailable backend.
    """

    def __init__(self) -> None:
        self._comments: dict[SubjectId, list[CommentNode]] = defaultdict(list)
        self.fail_saves = False

    async def load_thread(self, subject_id: SubjectId) -> list[CommentNode]:
        """Load root comments with their replies, in insertion order."""
        flat = self._comments.get(subject_id, [])

        # Adjacency map: parent_id -> [row positions] in save order
        adjacency: dict[CommentId | None, list[int]] = defaultdict(list)
        for position, row in enumerate(flat):
            adjacency[row.parent_id].append(position)

        # Post-order, so every row is built after its replies
        built: dict[int, CommentNode] = {}
        expanded: set[int] = set()
        stack = [(position, False) for position in reversed(adjacency[None])]
        while stack:
            position, ready = stack.pop()
            row = flat[position]
            if ready:
                children = tuple(
                    built[child] for child in adjacency[row.id] if child in built
                )
                built[position] = row.model_copy(update={"children": children})
            elif position not in expanded:
                expanded.add(position)
                stack.append((position, True))
                stack.extend((child, False) for child in reversed(adjacency[row.id]))

        return [built[position] for position in adjacency[None]]

    async def save_reply(self, subject_id: SubjectId, node: CommentNode) -> None:
        """Store a comment without its replies."""
        if self.fail_saves:
            raise PersistenceError(f"Thread store unavailable for {subject_id}")
        self._comments[subject_id].append(node.model_copy(update={"children": ()}))

    async def seed(self, subject_id: SubjectId, roots: list[CommentNode]) -> None:
        """Store a whole pre-built thread, e.g. fixtures or an import."""
        for root in roots:
            for node in root.walk():
                await self.save_reply(subject_id, node)
