"""Local to-do tracking layered on top of GitHub issues."""

from .board import TodoBoard, TodoEntry, TodoGroup, merge_for_display
from .models import TodoAnnotation, TodoStatus, TodoStorage
from .status_writer import StatusLabelWriter
from .store import TodoStore
from .updater import TodoUpdater, UpdateOutcome

__all__ = [
    "StatusLabelWriter",
    "TodoAnnotation",
    "TodoBoard",
    "TodoEntry",
    "TodoGroup",
    "TodoStatus",
    "TodoStorage",
    "TodoStore",
    "TodoUpdater",
    "UpdateOutcome",
    "merge_for_display",
]
