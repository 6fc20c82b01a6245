"""Composer entry entity.

Transient state of the inline reply editor under one node. It is never
part of the thread and carries no durability requirement.
"""

from discuss.domain.model.common import DomainModel


class ComposerEntry(DomainModel):
    """Open/closed flag and unsaved draft for one node's reply box."""

    is_open: bool = False
    draft_text: str = ""


CLOSED = ComposerEntry()
