"""Domain services."""

from .base import Service
from .composer import ComposerState
from .renderer import FROM_SETTINGS, DisplayRow, iter_display, render_thread
from .thread_store import ReplySink, ThreadStore

__all__ = [
    "FROM_SETTINGS",
    "ComposerState",
    "DisplayRow",
    "ReplySink",
    "Service",
    "ThreadStore",
    "iter_display",
    "render_thread",
]
