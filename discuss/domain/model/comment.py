"""Comment node entity.

Comments are threaded discussions with unlimited depth. A node owns its
replies by value, so a thread is a tree of immutable nodes that the thread
store replaces along the affected spine on every append.
"""

from datetime import datetime
from typing import Iterator, Optional

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import AuthorLabel, AvatarRef, CommentId


class CommentNode(DomainModel):
    """Comment node entity.

    Represents a top-level comment or a reply to another comment.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - depth: Nesting level (0 for top-level, increments with each reply)
    - children: Replies in insertion order, oldest first
    """

    id: CommentId
    parent_id: Optional[CommentId] = None
    author_label: AuthorLabel
    avatar_ref: Optional[AvatarRef] = None
    body: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    depth: int = Field(default=0, ge=0)
    children: tuple["CommentNode", ...] = ()

    @property
    def reply_count(self) -> int:
        """Number of replies at every depth below this node."""
        return sum(1 for _ in self.walk()) - 1

    def walk(self) -> Iterator["CommentNode"]:
        """Yield this node and its descendants in pre-order."""
        stack: list[CommentNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
