"""Domain model entities for discussion threads."""

from discuss.domain.model.comment import CommentNode
from discuss.domain.model.composer import CLOSED, ComposerEntry

__all__ = [
    "CommentNode",
    "ComposerEntry",
    "CLOSED",
]
