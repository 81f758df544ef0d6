"""Query for retrieving the current queue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from ...domain.catalog.entities import AudioItem
from ...domain.shared.types import CursorInt, NonNegativeInt

if TYPE_CHECKING:
    from ...domain.playback.queue import PlaybackQueue


class GetQueueQuery(BaseModel):
    model_config = ConfigDict(frozen=True)


class QueueView(BaseModel):

    items: list[SerializeAsAny[AudioItem]] = Field(default_factory=list)
    current_index: CursorInt = -1
    current_item: SerializeAsAny[AudioItem] | None = None
    status_label: str
    is_playing: bool = False
    is_shuffled: bool = False
    total_duration: NonNegativeInt = 0

    @property
    def length(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0


class GetQueueHandler:

    def __init__(self, *, queue: PlaybackQueue) -> None:
        self._queue = queue

    def handle(self, query: GetQueueQuery) -> QueueView:
        return QueueView(
            items=self._queue.snapshot(),
            current_index=self._queue.current_index,
            current_item=self._queue.current_item,
            status_label=self._queue.status_label,
            is_playing=self._queue.is_playing,
            is_shuffled=self._queue.is_shuffled,
            total_duration=self._queue.total_duration_seconds,
        )
