"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Callable, Iterator

import pytest

from discuss.domain.model import CommentNode
from discuss.domain.value import AuthorLabel, CommentId

BASE_TIME = datetime(2025, 7, 16, 22, 26, 20)


def make_node(
    comment_id: str,
    body: str = "A comment",
    *children: CommentNode,
    author: str = "Alice",
    parent_id: str | None = None,
    depth: int = 0,
) -> CommentNode:
    """Helper to build a hydrated comment node.

    Children are re-parented and re-depthed so nested calls read like the
    tree they build:

        make_node("c1", "A", make_node("c1-1", "B"), make_node("c1-2", "C"))
    """
    fixed = tuple(
        _reparent(child, CommentId(comment_id), depth + 1) for child in children
    )
    return CommentNode(
        id=CommentId(comment_id),
        parent_id=CommentId(parent_id) if parent_id else None,
        author_label=AuthorLabel(author),
        body=body,
        created_at=BASE_TIME,
        depth=depth,
        children=fixed,
    )


def _reparent(node: CommentNode, parent_id: CommentId, depth: int) -> CommentNode:
    children = tuple(_reparent(child, node.id, depth + 1) for child in node.children)
    return node.model_copy(
        update={"parent_id": parent_id, "depth": depth, "children": children}
    )


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """Deterministic clock advancing one minute per call."""
    ticks: Iterator[int] = iter(range(10_000))

    def _now() -> datetime:
        return BASE_TIME + timedelta(minutes=next(ticks))

    return _now
