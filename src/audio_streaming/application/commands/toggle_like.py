"""Command and handler for liking or unliking an item."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, SerializeAsAny

from ...domain.catalog.entities import AudioItem
from ...domain.shared.messages import LogTemplates
from ...domain.shared.types import EmailStr, NonNegativeInt
from ...domain.shared.value_objects import ItemIdField

if TYPE_CHECKING:
    from ...domain.catalog.index import CatalogIndex
    from ...domain.listeners.registry import ListenerRegistry
    from ...domain.playback.queue import PlaybackQueue

logger = logging.getLogger(__name__)


class LikeStatus(Enum):
    """Status codes for toggle like results."""

    LIKED = "liked"
    UNLIKED = "unliked"
    NO_ITEM = "no_item"
    LISTENER_NOT_FOUND = "listener_not_found"


class ToggleLikeCommand(BaseModel):
    """Toggle a like on ``item_id``, or on the current queue item when omitted."""

    model_config = ConfigDict(frozen=True)

    email: EmailStr
    item_id: ItemIdField | None = None


class ToggleLikeResult(BaseModel):

    status: LikeStatus
    message: str
    item: SerializeAsAny[AudioItem] | None = None
    like_count: NonNegativeInt = 0

    @property
    def is_success(self) -> bool:
        return self.status in (LikeStatus.LIKED, LikeStatus.UNLIKED)

    @property
    def liked(self) -> bool:
        return self.status == LikeStatus.LIKED

    @classmethod
    def toggled(cls, item: AudioItem, liked: bool) -> ToggleLikeResult:
        status = LikeStatus.LIKED if liked else LikeStatus.UNLIKED
        verb = "Liked" if liked else "Removed like from"
        return cls(
            status=status,
            message=f'{verb} "{item.title}".',
            item=item,
            like_count=item.like_count,
        )

    @classmethod
    def error(cls, status: LikeStatus, message: str) -> ToggleLikeResult:
        return cls(status=status, message=message)


class ToggleLikeHandler:

    def __init__(
        self,
        *,
        listeners: ListenerRegistry,
        catalog: CatalogIndex,
        queue: PlaybackQueue,
    ) -> None:
        self._listeners = listeners
        self._catalog = catalog
        self._queue = queue

    def handle(self, command: ToggleLikeCommand) -> ToggleLikeResult:
        listener = self._listeners.find(command.email)
        if listener is None:
            return ToggleLikeResult.error(
                LikeStatus.LISTENER_NOT_FOUND, f"Unknown listener '{command.email}'"
            )

        if command.item_id is not None:
            item = self._catalog.get_item(command.item_id)
        else:
            item = self._queue.current_item

        if item is None:
            return ToggleLikeResult.error(LikeStatus.NO_ITEM, "Nothing to like")

        liked = listener.toggle_like(item)
        template = LogTemplates.LIKE_ADDED if liked else LogTemplates.LIKE_REMOVED
        logger.info(template, listener.email, item.title)
        return ToggleLikeResult.toggled(item, liked)
