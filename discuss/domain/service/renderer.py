"""Display projection of a thread.

Flattens a thread into the order it is painted: each comment followed by
its replies (recursively) before its next sibling. The presentation layer
indents each row by ``depth``.
"""

from typing import Final, Iterator

from discuss.domain.model.comment import CommentNode
from discuss.domain.model.common import DomainModel
from discuss.domain.model.composer import CLOSED

from .composer import ComposerState
from .thread_store import ThreadStore


# Default for ``max_depth``: take the cap from the store's settings
FROM_SETTINGS: Final = object()


class DisplayRow(DomainModel):
    """One comment as it should be painted."""

    node: CommentNode
    depth: int
    is_composer_open: bool = False
    draft_text: str = ""
    # Replies below a depth cap that were not emitted as rows
    hidden_replies: int = 0


def iter_display(
    store: ThreadStore,
    composer: ComposerState | None = None,
    max_depth: int | None | object = FROM_SETTINGS,
) -> Iterator[DisplayRow]:
    """Yield display rows in pre-order.

    The sequence reflects the thread at the moment iteration starts; replies
    added meanwhile show up on the next call.

    Args:
        store: Thread to render
        composer: Composer state to merge into rows (all closed when None)
        max_depth: Deepest level to emit, None for unlimited. Defaults to
            the store's ``render_max_depth`` setting.

    Yields:
        DisplayRow for each visible comment
    """
    if max_depth is FROM_SETTINGS:
        max_depth = store.settings.render_max_depth

    stack: list[CommentNode] = list(reversed(store.list_roots()))
    while stack:
        node = stack.pop()
        entry = composer.get(node.id) if composer else CLOSED
        capped = max_depth is not None and node.depth >= max_depth
        yield DisplayRow(
            node=node,
            depth=node.depth,
            is_composer_open=entry.is_open,
            draft_text=entry.draft_text,
            hidden_replies=node.reply_count if capped else 0,
        )
        if not capped:
            stack.extend(reversed(node.children))


def render_thread(
    store: ThreadStore,
    composer: ComposerState | None = None,
    max_depth: int | None | object = FROM_SETTINGS,
) -> list[DisplayRow]:
    """Eager form of :func:`iter_display`."""
    return list(iter_display(store, composer, max_depth))
