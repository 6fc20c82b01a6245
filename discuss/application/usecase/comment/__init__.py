"""Comment use cases."""

from .open_thread import (
    CommentItem,
    OpenThreadRequest,
    OpenThreadResponse,
    OpenThreadUseCase,
)
from .submit_reply import (
    SubmitReplyRequest,
    SubmitReplyResponse,
    SubmitReplyUseCase,
)

__all__ = [
    "CommentItem",
    "OpenThreadRequest",
    "OpenThreadResponse",
    "OpenThreadUseCase",
    "SubmitReplyRequest",
    "SubmitReplyResponse",
    "SubmitReplyUseCase",
]
