"""Strongly typed identifiers for discussion entities.

Comment ids are minted from their parent's id, so they are plain strings
rather than UUIDs.
"""

from typing import NewType

CommentId = NewType("CommentId", str)
SubjectId = NewType("SubjectId", str)

# Parent id addressing the top level of a thread
ROOT = CommentId("ROOT")
