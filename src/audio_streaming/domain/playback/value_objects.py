"""Immutable value objects for the playback bounded context."""

from __future__ import annotations

from enum import Enum

from audio_streaming.domain.shared.messages import StatusLabels

NO_SELECTION = -1
"""Cursor value meaning no item is selected."""


class QueueState(Enum):
    """Derived playback queue state.

    - EMPTY: no items, cursor -1, not playing
    - READY: items queued, cursor valid, not playing
    - PLAYING: items queued, cursor valid, playing

    Only ``clear()`` returns a non-empty queue to EMPTY.
    """

    EMPTY = "empty"
    READY = "ready"
    PLAYING = "playing"

    @property
    def label(self) -> str:
        labels = {
            QueueState.EMPTY: StatusLabels.EMPTY,
            QueueState.READY: StatusLabels.PAUSED,
            QueueState.PLAYING: StatusLabels.PLAYING,
        }
        return labels[self]


class QueueSource(Enum):
    """Where a wholesale queue replacement came from."""

    CATALOG = "catalog"
    SEARCH = "search"
    RECOMMENDATIONS = "recommendations"
    PLAYLIST = "playlist"
    LIKES = "likes"
