"""Playback queue aggregate: ordered items, cursor and transport state."""

from __future__ import annotations

import random
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, PrivateAttr

from audio_streaming.domain.catalog.entities import AudioItem
from audio_streaming.domain.catalog.services import PopularityRanking
from audio_streaming.domain.playback.value_objects import NO_SELECTION, QueueState


class PlaybackQueue(BaseModel):
    """Aggregate root driving playback for a single listening session.

    Items are borrowed references to catalog or playlist items, never copies,
    so play and like counters stay shared. The same item may be queued more
    than once.

    None of the operations raise for an empty queue or a boundary: they
    report through their bool or count return value instead. The queue state
    is private, so it only changes through these operations.
    """

    model_config = ConfigDict(extra="forbid")

    _entries: list[AudioItem] = PrivateAttr(default_factory=list)
    _cursor: int = PrivateAttr(default=NO_SELECTION)
    _playing: bool = PrivateAttr(default=False)
    _shuffled: bool = PrivateAttr(default=False)
    _rng: random.Random = PrivateAttr(default_factory=random.Random)

    def __init__(self, *, rng: random.Random | None = None, **data: object) -> None:
        super().__init__(**data)
        if rng is not None:
            self._rng = rng

    # === Accessors ===

    @property
    def length(self) -> int:
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def current_index(self) -> int:
        return self._cursor

    @property
    def current_item(self) -> AudioItem | None:
        if 0 <= self._cursor < len(self._entries):
            return self._entries[self._cursor]
        return None

    @property
    def is_playing(self) -> bool:
        return self._playing

    @property
    def is_shuffled(self) -> bool:
        return self._shuffled

    @property
    def state(self) -> QueueState:
        if not self._entries:
            return QueueState.EMPTY
        return QueueState.PLAYING if self._playing else QueueState.READY

    @property
    def status_label(self) -> str:
        return self.state.label

    @property
    def total_duration_seconds(self) -> int:
        return sum(item.duration_seconds for item in self._entries)

    def snapshot(self) -> list[AudioItem]:
        """Independent copy of the queued items."""
        return list(self._entries)

    # === Queue replacement and mutation ===

    def set_queue(self, items: Sequence[AudioItem] | None) -> bool:
        """Replace the whole queue with a copy of ``items``.

        Returns False, leaving the queue untouched, when ``items`` is None or
        empty. Otherwise the cursor moves to the first item, paused.
        """
        if not items:
            return False

        self._entries = list(items)
        self._cursor = 0
        self._playing = False
        return True

    def add_one(self, item: AudioItem | None) -> bool:
        if item is None:
            return False

        was_empty = not self._entries
        self._entries.append(item)
        if was_empty:
            self._cursor = 0
        return True

    def add_many(self, items: Sequence[AudioItem] | None) -> int:
        """Append items and return how many were added."""
        if not items:
            return 0

        was_empty = not self._entries
        self._entries.extend(items)
        if was_empty:
            self._cursor = 0
        return len(items)

    def clear(self) -> int:
        """Empty the queue and return the count removed."""
        count = len(self._entries)
        self._entries.clear()
        self._cursor = NO_SELECTION
        self._playing = False
        return count

    def select(self, index: int) -> bool:
        """Move the cursor to ``index`` without starting playback."""
        if 0 <= index < len(self._entries):
            self._cursor = index
            return True
        return False

    # === Transport ===

    def play(self) -> bool:
        """Play the item under the cursor, counting a new play each call."""
        if not self._entries:
            return False

        if not 0 <= self._cursor < len(self._entries):
            self._cursor = 0

        item = self._entries[self._cursor]
        item.increment_play()
        item.play()
        self._playing = True
        return True

    def pause(self) -> bool:
        if not (self._playing and self._entries):
            return False

        current = self.current_item
        if current is not None:
            current.pause()
        self._playing = False
        return True

    def next(self) -> bool:
        """Advance and play. At the last item, stop and return False."""
        if self._cursor + 1 < len(self._entries):
            self._cursor += 1
            self.play()
            return True

        self._playing = False
        return False

    def previous(self) -> bool:
        """Step back and play. At the first item, replay it and return False."""
        if not self._entries:
            return False

        if self._cursor - 1 >= 0:
            self._cursor -= 1
            self.play()
            return True

        self.play()
        return False

    # === Ordering ===

    def shuffle(self) -> bool:
        """Randomly permute the queue, keeping the active item at the head."""
        if not self._entries:
            return False

        current = self.current_item
        self._rng.shuffle(self._entries)
        if current is not None:
            self._entries.pop(self._index_of(current))
            self._entries.insert(0, current)
            self._cursor = 0

        self._shuffled = True
        return True

    def sort_by_popularity(self) -> bool:
        """Stable sort by likes desc, plays desc; the cursor follows the active item."""
        if not self._entries:
            return False

        current = self.current_item
        self._entries.sort(key=PopularityRanking.sort_key)
        if current is not None:
            index = self._index_of(current)
            self._cursor = index if index >= 0 else 0

        self._shuffled = False
        return True

    def _index_of(self, item: AudioItem) -> int:
        # Identity, not title equality: duplicate titles must not steal the cursor.
        for index, entry in enumerate(self._entries):
            if entry is item:
                return index
        return -1
