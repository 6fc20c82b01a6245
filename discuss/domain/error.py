"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class AddReplyError(DomainError):
    """A reply was rejected before touching the thread."""

    pass


class ParentNotFoundError(AddReplyError):
    """Raised when a reply targets a node that is not in the thread."""

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__(f"Parent comment not found: {parent_id}")


class EmptyBodyError(AddReplyError):
    """Raised when a reply body is empty after trimming whitespace."""

    def __init__(self, parent_id: str):
        self.parent_id = parent_id
        super().__init__(f"Reply to {parent_id} has an empty body")


class BodyTooLongError(AddReplyError):
    """Raised when a reply body exceeds the configured maximum length."""

    def __init__(self, length: int, limit: int):
        self.length = length
        self.limit = limit
        super().__init__(f"Reply body is {length} characters, limit is {limit}")


class ThreadIntegrityError(DomainError):
    """Raised when a hydrated thread breaks identity or depth rules."""

    def __init__(self, message: str):
        super().__init__(message)


class PersistenceError(DomainError):
    """Raised by a thread repository when the backing store is unavailable.

    Never fatal to the in-memory thread: the reply stays committed locally
    and the caller decides whether to retry the save.
    """

    pass
