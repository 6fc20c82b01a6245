"""Unit tests for ComposerState."""

import pytest

from discuss.domain.error import EmptyBodyError, ParentNotFoundError
from discuss.domain.model import ComposerEntry
from discuss.domain.service import ComposerState, ThreadStore
from discuss.domain.value import ROOT, AuthorLabel, AvatarRef, CommentId, SubjectId
from tests.conftest import make_node

C1 = CommentId("c1")
C2 = CommentId("c2")


@pytest.fixture
def store() -> ThreadStore:
    return ThreadStore(
        subject_id=SubjectId("confession-7"),
        roots=[make_node("c1", "First"), make_node("c2", "Second")],
    )


class TestToggle:
    """Tests for toggle method."""

    def test_toggle_opens_then_closes(self):
        composer = ComposerState()

        assert composer.toggle(C1) is True
        assert composer.get(C1).is_open is True
        assert composer.toggle(C1) is False
        assert composer.get(C1).is_open is False

    def test_untouched_node_reads_closed(self):
        composer = ComposerState()

        assert composer.get(C1) == ComposerEntry(is_open=False, draft_text="")

    def test_composers_are_independent(self):
        """Opening one composer should not affect another."""
        composer = ComposerState()

        composer.toggle(C1)
        composer.toggle(C2)
        composer.toggle(C1)

        assert composer.get(C1).is_open is False
        assert composer.get(C2).is_open is True
        assert composer.open_ids() == [C2]

    def test_toggle_keeps_draft(self):
        composer = ComposerState()
        composer.toggle(C1)
        composer.set_draft(C1, "half written")

        composer.toggle(C1)

        assert composer.get(C1).draft_text == "half written"


class TestDraft:
    """Tests for set_draft and close methods."""

    def test_set_draft_overwrites(self):
        composer = ComposerState()

        composer.set_draft(C1, "first")
        composer.set_draft(C1, "second")

        assert composer.get(C1).draft_text == "second"

    def test_set_draft_accepts_blank_text(self):
        composer = ComposerState()

        composer.set_draft(C1, "   ")

        assert composer.get(C1).draft_text == "   "

    def test_close_hides_box_and_keeps_draft(self):
        composer = ComposerState()
        composer.toggle(C1)
        composer.set_draft(C1, "keep me")

        composer.close(C1)

        assert composer.get(C1) == ComposerEntry(is_open=False, draft_text="keep me")

    def test_close_without_draft_forgets_entry(self):
        composer = ComposerState()
        composer.toggle(C1)

        composer.close(C1)

        assert composer.get(C1) == ComposerEntry()
        assert composer.open_ids() == []


class TestCommitAndClose:
    """Tests for commit_and_close method."""

    def test_commit_adds_reply_and_resets_composer(self, store):
        """Successful commit should clear draft, close box, and add reply."""
        # Arrange
        composer = ComposerState(author_label="Dana")
        assert composer.toggle(C1) is True
        composer.set_draft(C1, "draft text")

        # Act
        reply = composer.commit_and_close(C1, store)

        # Assert
        assert reply.body == "draft text"
        assert reply.author_label == AuthorLabel("Dana")
        assert reply.parent_id == C1
        assert store.find_node(C1).children == (reply,)
        assert composer.get(C1) == ComposerEntry(is_open=False, draft_text="")

    def test_commit_uses_acting_user_avatar(self, store):
        composer = ComposerState(
            author_label="Dana", avatar_ref=AvatarRef("avatars/dana.png")
        )
        composer.set_draft(C2, "hello")

        reply = composer.commit_and_close(C2, store)

        assert reply.avatar_ref == AvatarRef("avatars/dana.png")

    def test_default_author_label(self, store):
        composer = ComposerState()
        composer.set_draft(C1, "hey")

        reply = composer.commit_and_close(C1, store)

        assert reply.author_label == AuthorLabel("You")

    def test_top_level_composer(self, store):
        composer = ComposerState()
        composer.toggle(ROOT)
        composer.set_draft(ROOT, "New thread starter")

        node = composer.commit_and_close(ROOT, store)

        assert node.depth == 0
        assert store.list_roots()[-1] == node
        assert composer.get(ROOT).is_open is False

    def test_failed_commit_preserves_draft_and_open_state(self, store):
        """Rejected commit should leave the composer exactly as it was."""
        # Arrange
        composer = ComposerState()
        composer.toggle(C1)
        composer.set_draft(C1, "   ")
        before = composer.get(C1)

        # Act & Assert
        with pytest.raises(EmptyBodyError):
            composer.commit_and_close(C1, store)

        assert composer.get(C1) == before
        assert composer.get(C1).is_open is True
        assert store.find_node(C1).children == ()

    def test_failed_commit_on_unknown_node_preserves_draft(self, store):
        composer = ComposerState()
        missing = CommentId("gone")
        composer.set_draft(missing, "orphaned reply")

        with pytest.raises(ParentNotFoundError):
            composer.commit_and_close(missing, store)

        assert composer.get(missing).draft_text == "orphaned reply"
        assert composer.get(missing).is_open is False

    def test_sink_failure_keeps_draft_without_duplicate_reply(self):
        attempts = []

        def flaky_sink(subject, node):
            attempts.append(node.id)
            if len(attempts) == 1:
                raise RuntimeError("network")

        store = ThreadStore(
            subject_id=SubjectId("confession-7"),
            roots=[make_node("c1", "First")],
            on_commit=flaky_sink,
        )
        composer = ComposerState()
        composer.toggle(C1)
        composer.set_draft(C1, "retry me")

        with pytest.raises(RuntimeError):
            composer.commit_and_close(C1, store)
        assert composer.get(C1) == ComposerEntry(is_open=True, draft_text="retry me")

        composer.commit_and_close(C1, store)

        assert [c.body for c in store.find_node(C1).children] == ["retry me"]
        assert composer.get(C1).is_open is False

    def test_commit_leaves_other_composers_alone(self, store):
        composer = ComposerState()
        composer.toggle(C1)
        composer.set_draft(C1, "reply one")
        composer.toggle(C2)
        composer.set_draft(C2, "reply two")

        composer.commit_and_close(C1, store)

        assert composer.get(C2) == ComposerEntry(is_open=True, draft_text="reply two")
