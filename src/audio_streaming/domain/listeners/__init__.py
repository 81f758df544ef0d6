"""
Listeners Bounded Context

Domain logic for listener profiles, likes and playlists.
"""

from audio_streaming.domain.listeners.entities import Listener, Playlist
from audio_streaming.domain.listeners.registry import ListenerRegistry, normalize_email
from audio_streaming.domain.listeners.repository import ListenerRepository

__all__ = [
    # Entities
    "Listener",
    "Playlist",
    # Aggregate
    "ListenerRegistry",
    "normalize_email",
    # Repository
    "ListenerRepository",
]
