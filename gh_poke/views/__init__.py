"""Aggregation, deduplication and prioritization of work item views."""

from .aggregator import ViewAggregator, ViewSet, resolve_organization
from .dedup import merge_reviews
from .prioritizer import Prioritizer, prioritize

__all__ = [
    "Prioritizer",
    "ViewAggregator",
    "ViewSet",
    "merge_reviews",
    "prioritize",
    "resolve_organization",
]
