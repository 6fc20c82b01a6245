"""Domain value objects for discussion threads."""

from discuss.domain.value.identifiers import ROOT, CommentId, SubjectId
from discuss.domain.value.types import AuthorLabel, AvatarRef

__all__ = [
    # Identifiers
    "CommentId",
    "SubjectId",
    "ROOT",
    # Types
    "AuthorLabel",
    "AvatarRef",
]
