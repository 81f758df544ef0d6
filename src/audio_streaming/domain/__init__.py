"""
Domain Layer

Contains pure business logic organized by bounded contexts:
- shared/: Identifiers, constrained types and exceptions
- catalog/: Catalog items, authors, releases, search and ranking
- playback/: Playback queue and transport state
- listeners/: Listener profiles, likes and playlists
"""

from audio_streaming.domain.shared import ItemId, ListenerId
from audio_streaming.domain.shared.exceptions import DomainError

__all__ = [
    "ItemId",
    "ListenerId",
    "DomainError",
]
