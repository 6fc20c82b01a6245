"""Composer state domain service."""

import logfire

from discuss.domain.model.comment import CommentNode
from discuss.domain.model.composer import CLOSED, ComposerEntry
from discuss.domain.value import AuthorLabel, AvatarRef, CommentId

from .base import Service
from .thread_store import ThreadStore


class ComposerState(Service):
    """Inline reply editors of one session, keyed by node id.

    Any number of composers may be open at once. Entries are dropped once
    their reply commits, so only nodes with an open box or a pending draft
    take up space.
    """

    def __init__(
        self,
        author_label: AuthorLabel | str = "You",
        avatar_ref: AvatarRef | None = None,
    ) -> None:
        """Initialize composer state.

        Args:
            author_label: Display name of the acting user, used for commits
            avatar_ref: Avatar of the acting user
        """
        if isinstance(author_label, str):
            author_label = AuthorLabel(author_label)
        self.author_label = author_label
        self.avatar_ref = avatar_ref
        self._entries: dict[CommentId, ComposerEntry] = {}

    def get(self, node_id: CommentId) -> ComposerEntry:
        """Composer entry for a node, closed and empty when never touched."""
        return self._entries.get(node_id, CLOSED)

    def open_ids(self) -> list[CommentId]:
        return [node_id for node_id, entry in self._entries.items() if entry.is_open]

    def toggle(self, node_id: CommentId) -> bool:
        """Open or close the reply box under a node.

        Returns:
            True if the composer is now open
        """
        entry = self.get(node_id)
        self._entries[node_id] = entry.model_copy(update={"is_open": not entry.is_open})
        logfire.debug("Composer toggled", node_id=node_id, is_open=not entry.is_open)
        return not entry.is_open

    def set_draft(self, node_id: CommentId, text: str) -> None:
        """Replace the draft text for a node. Validation happens on commit."""
        entry = self.get(node_id)
        self._entries[node_id] = entry.model_copy(update={"draft_text": text})

    def close(self, node_id: CommentId) -> None:
        """Hide the reply box, keeping whatever was typed."""
        entry = self.get(node_id)
        if entry.draft_text:
            self._entries[node_id] = entry.model_copy(update={"is_open": False})
        else:
            self._entries.pop(node_id, None)

    def commit_and_close(self, node_id: CommentId, store: ThreadStore) -> CommentNode:
        """Commit the draft under a node as a reply, then reset its composer.

        Args:
            node_id: Node whose composer holds the draft (``ROOT`` for the
                top-level composer)
            store: Thread the reply is added to

        Returns:
            The committed reply

        Raises:
            AddReplyError: If the store rejects the reply. The draft and
                open state are left exactly as they were.
        """
        entry = self.get(node_id)
        with logfire.span(
            "composer.commit_and_close",
            node_id=node_id,
            draft_length=len(entry.draft_text),
        ):
            node = store.add_reply(
                node_id,
                self.author_label,
                entry.draft_text,
                avatar_ref=self.avatar_ref,
            )
            self._entries.pop(node_id, None)
            return node
