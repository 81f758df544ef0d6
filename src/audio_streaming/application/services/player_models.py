"""DTOs for the player application service."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, SerializeAsAny

from ...domain.catalog.entities import AudioItem
from ...domain.playback.value_objects import QueueSource
from ...domain.shared.types import NonNegativeInt


class PlayStatus(Enum):
    SUCCESS = "success"
    NO_ITEMS = "no_items"
    NOT_FOUND = "not_found"


class PlayResult(BaseModel):

    status: PlayStatus
    source: QueueSource
    message: str = ""
    queued: NonNegativeInt = 0
    current: SerializeAsAny[AudioItem] | None = None

    @property
    def is_success(self) -> bool:
        return self.status == PlayStatus.SUCCESS

    @classmethod
    def success(cls, source: QueueSource, queued: int, current: AudioItem | None) -> PlayResult:
        return cls(
            status=PlayStatus.SUCCESS,
            source=source,
            message=f"Queued {queued} items from {source.value}.",
            queued=queued,
            current=current,
        )

    @classmethod
    def error(cls, status: PlayStatus, source: QueueSource, message: str) -> PlayResult:
        return cls(status=status, source=source, message=message)
