"""Thread store domain service."""

from datetime import datetime
from typing import Callable, Iterable, Optional

import logfire

from discuss.config import ThreadSettings
from discuss.domain.error import (
    BodyTooLongError,
    EmptyBodyError,
    ParentNotFoundError,
    PersistenceError,
    ThreadIntegrityError,
)
from discuss.domain.model.comment import CommentNode
from discuss.domain.value import ROOT, AuthorLabel, AvatarRef, CommentId, SubjectId

from .base import Service

# Position of a node: index among the roots, then among each level's children
Path = tuple[int, ...]

ReplySink = Callable[[SubjectId, CommentNode], None]


class ThreadStore(Service):
    """Owns the comment tree of one discussion subject.

    Nodes are immutable. Appending a reply rebuilds the nodes on the path
    from the root to the parent and swaps in a new root tuple, so any node
    a caller already holds keeps describing the thread as it was.
    Children positions never change (append-only), which keeps the
    id -> path index valid across mutations.
    """

    def __init__(
        self,
        subject_id: SubjectId,
        settings: ThreadSettings | None = None,
        clock: Callable[[], datetime] = datetime.now,
        roots: Iterable[CommentNode] = (),
        on_commit: Optional[ReplySink] = None,
    ) -> None:
        """Initialize thread store.

        Args:
            subject_id: Discussion subject this thread belongs to
            settings: Thread settings (id format, body limits)
            clock: Source of ``created_at`` timestamps
            roots: Existing root comments when hydrating from a repository
            on_commit: Called with every committed node after it is added

        Raises:
            ThreadIntegrityError: If hydrated roots break id or depth rules
        """
        self.subject_id = subject_id
        self.settings = settings or ThreadSettings()
        self._clock = clock
        self._on_commit = on_commit
        self._roots: tuple[CommentNode, ...] = ()
        self._index: dict[CommentId, Path] = {}
        self._hydrate(tuple(roots))

    def _hydrate(self, roots: tuple[CommentNode, ...]) -> None:
        index: dict[CommentId, Path] = {}
        stack: list[tuple[CommentNode, Path, CommentNode | None]] = [
            (roots[position], (position,), None)
            for position in reversed(range(len(roots)))
        ]
        while stack:
            node, path, parent = stack.pop()
            if node.id == ROOT or node.id in index:
                raise ThreadIntegrityError(f"Duplicate comment id: {node.id}")
            expected_depth = parent.depth + 1 if parent else 0
            if node.depth != expected_depth:
                raise ThreadIntegrityError(
                    f"Comment {node.id} has depth {node.depth}, expected {expected_depth}"
                )
            expected_parent = parent.id if parent else None
            if node.parent_id != expected_parent:
                raise ThreadIntegrityError(
                    f"Comment {node.id} names parent {node.parent_id}, "
                    f"but is nested under {expected_parent}"
                )
            if not node.body.strip():
                raise ThreadIntegrityError(f"Comment {node.id} has an empty body")
            index[node.id] = path
            for position in reversed(range(len(node.children))):
                stack.append((node.children[position], path + (position,), node))

        self._roots = roots
        self._index = index
        if roots:
            logfire.info(
                "Thread hydrated",
                subject_id=self.subject_id,
                roots=len(roots),
                comments=len(index),
            )

    def add_reply(
        self,
        parent_id: CommentId,
        author_label: AuthorLabel | str,
        body: str,
        avatar_ref: AvatarRef | str | None = None,
    ) -> CommentNode:
        """Add a top-level comment or a reply to an existing comment.

        Args:
            parent_id: Parent comment ID, or ``ROOT`` for a top-level comment
            author_label: Display name of the author
            body: Comment text, stored as typed
            avatar_ref: Opaque avatar reference, stored as is

        Returns:
            The committed node

        Raises:
            ParentNotFoundError: If ``parent_id`` is not in the thread
            EmptyBodyError: If ``body`` is blank after trimming
            BodyTooLongError: If ``body`` exceeds ``max_body_length``
            Exception: Whatever ``on_commit`` raises other than
                ``PersistenceError``; the reply is rolled back first
        """
        with logfire.span(
            "thread_store.add_reply",
            subject_id=self.subject_id,
            parent_id=parent_id,
        ):
            if parent_id == ROOT:
                parent = None
                siblings = self._roots
            else:
                parent = self.find_node(parent_id)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        subject_id=self.subject_id,
                        parent_id=parent_id,
                    )
                    raise ParentNotFoundError(parent_id)
                siblings = parent.children

            if not body.strip():
                logfire.warn("Reply body is empty", parent_id=parent_id)
                raise EmptyBodyError(parent_id)
            if len(body) > self.settings.max_body_length:
                raise BodyTooLongError(len(body), self.settings.max_body_length)

            if isinstance(author_label, str):
                author_label = AuthorLabel(author_label)
            if isinstance(avatar_ref, str):
                avatar_ref = AvatarRef(avatar_ref)

            node = CommentNode(
                id=self._mint_id(parent_id, len(siblings)),
                parent_id=parent.id if parent else None,
                author_label=author_label,
                avatar_ref=avatar_ref,
                body=body,
                created_at=self._clock(),
                depth=parent.depth + 1 if parent else 0,
            )

            previous_roots = self._roots
            if parent is None:
                self._roots = self._roots + (node,)
                self._index[node.id] = (len(self._roots) - 1,)
            else:
                parent_path = self._index[parent.id]
                self._roots = _graft(self._roots, parent_path, node)
                self._index[node.id] = parent_path + (len(siblings),)

            try:
                self._forward(node)
            except Exception:
                # Sink failures other than persistence outages undo the append
                self._roots = previous_roots
                del self._index[node.id]
                logfire.error(
                    "Reply sink failed, comment rolled back",
                    subject_id=self.subject_id,
                    comment_id=node.id,
                )
                raise

            logfire.info(
                "Comment created",
                subject_id=self.subject_id,
                comment_id=node.id,
                parent_id=node.parent_id,
                depth=node.depth,
            )
            return node

    def _mint_id(self, parent_id: CommentId, sibling_count: int) -> CommentId:
        """Build an id from the parent's current child count.

        Hydrated threads may already use the next ordinal (ids from another
        scheme, or gaps), so the ordinal is bumped until it is free.
        """
        if parent_id == ROOT:
            prefix = self.settings.root_prefix
        else:
            prefix = f"{parent_id}{self.settings.id_separator}"
        ordinal = sibling_count + 1
        while CommentId(f"{prefix}{ordinal}") in self._index:
            ordinal += 1
        return CommentId(f"{prefix}{ordinal}")

    def _forward(self, node: CommentNode) -> None:
        if self._on_commit is None:
            return
        try:
            self._on_commit(self.subject_id, node)
        except PersistenceError as e:
            # The reply stays in the thread; persistence is best effort
            logfire.warn(
                "Reply not forwarded to persistence",
                subject_id=self.subject_id,
                comment_id=node.id,
                error=str(e),
            )

    def find_node(self, comment_id: CommentId) -> CommentNode | None:
        """Find a comment anywhere in the thread.

        Args:
            comment_id: Comment ID

        Returns:
            The comment with its replies if found, None otherwise
        """
        path = self._index.get(comment_id)
        if path is None:
            return None
        node = self._roots[path[0]]
        for position in path[1:]:
            node = node.children[position]
        return node

    def list_roots(self) -> tuple[CommentNode, ...]:
        """Top-level comments in insertion order."""
        return self._roots

    def like(self, comment_id: CommentId) -> None:
        """Accept a like without recording it.

        Reactions are not modelled: the like affordance exists in the UI
        but has no effect on the thread.
        """
        logfire.info(
            "Like ignored", subject_id=self.subject_id, comment_id=comment_id
        )

    def count(self) -> int:
        """Total number of comments at every depth."""
        return len(self._index)

    def __contains__(self, comment_id: object) -> bool:
        return comment_id in self._index


def _graft(
    nodes: tuple[CommentNode, ...], path: Path, child: CommentNode
) -> tuple[CommentNode, ...]:
    """Return ``nodes`` with ``child`` appended under the node at ``path``.

    Walks down the path collecting each level's siblings, then rebuilds the
    spine bottom-up, so thread depth is not bound by the call stack.
    """
    spine: list[tuple[tuple[CommentNode, ...], int]] = []
    level = nodes
    for position in path:
        spine.append((level, position))
        level = level[position].children

    children = level + (child,)
    for siblings, position in reversed(spine):
        updated = siblings[position].model_copy(update={"children": children})
        children = siblings[:position] + (updated,) + siblings[position + 1 :]
    return children
