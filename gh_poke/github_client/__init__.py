"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import ItemKind, RemoteItem

__all__ = [
    "GitHubClient",
    "ItemKind",
    "RemoteItem",
]
