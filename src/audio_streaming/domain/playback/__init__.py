"""
Playback Bounded Context

Domain logic for the playback queue, its cursor and transport state.
"""

from audio_streaming.domain.playback.queue import PlaybackQueue
from audio_streaming.domain.playback.value_objects import NO_SELECTION, QueueSource, QueueState

__all__ = [
    # Aggregate
    "PlaybackQueue",
    # Value Objects
    "QueueState",
    "QueueSource",
    "NO_SELECTION",
]
