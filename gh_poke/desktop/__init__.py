"""Desktop notification summaries and dispatch."""

from .notifier import send_desktop_notification
from .summary import build_feed_summary, build_views_summary

__all__ = ["build_feed_summary", "build_views_summary", "send_desktop_notification"]
