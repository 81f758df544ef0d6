"""Player Application Service - fills the queue and drives transport."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ...domain.catalog.services import PopularityRanking
from ...domain.playback.value_objects import QueueSource
from ...domain.shared.messages import LogTemplates
from .player_models import PlayResult, PlayStatus

if TYPE_CHECKING:
    from ...domain.catalog.entities import AudioItem
    from ...domain.catalog.index import CatalogIndex
    from ...domain.listeners.registry import ListenerRegistry
    from ...domain.playback.queue import PlaybackQueue

logger = logging.getLogger(__name__)


class PlayerApplicationService:
    """Replaces the queue from catalog selections and forwards transport commands.

    Every ``play_*`` method swaps the whole queue and starts the first item.
    An empty selection leaves the queue untouched and is reported as
    ``PlayStatus.NO_ITEMS``.
    """

    def __init__(
        self,
        *,
        queue: PlaybackQueue,
        catalog: CatalogIndex,
        listeners: ListenerRegistry,
        recommendation_limit: int = PopularityRanking.DEFAULT_RECOMMENDATION_LIMIT,
    ) -> None:
        self._queue = queue
        self._catalog = catalog
        self._listeners = listeners
        self._recommendation_limit = recommendation_limit

    @property
    def queue(self) -> PlaybackQueue:
        return self._queue

    # === Queue replacement ===

    def play_search(self, term: str) -> PlayResult:
        return self._replace_queue(self._catalog.search(term), QueueSource.SEARCH)

    def play_recommendations(self) -> PlayResult:
        return self._replace_queue(
            self._catalog.recommend(self._recommendation_limit), QueueSource.RECOMMENDATIONS
        )

    def play_catalog(self) -> PlayResult:
        return self._replace_queue(self._catalog.all_items(), QueueSource.CATALOG)

    def play_playlist(self, email: str, playlist_name: str) -> PlayResult:
        listener = self._listeners.find(email)
        if listener is None:
            return PlayResult.error(
                PlayStatus.NOT_FOUND, QueueSource.PLAYLIST, f"Unknown listener '{email}'"
            )

        playlist = listener.find_playlist(playlist_name)
        if playlist is None:
            return PlayResult.error(
                PlayStatus.NOT_FOUND,
                QueueSource.PLAYLIST,
                f"Playlist '{playlist_name}' not found",
            )

        return self._replace_queue(playlist.item_list(), QueueSource.PLAYLIST)

    def play_likes(self, email: str) -> PlayResult:
        listener = self._listeners.find(email)
        if listener is None:
            return PlayResult.error(
                PlayStatus.NOT_FOUND, QueueSource.LIKES, f"Unknown listener '{email}'"
            )
        return self._replace_queue(listener.liked_items(), QueueSource.LIKES)

    def _replace_queue(self, items: Sequence[AudioItem], source: QueueSource) -> PlayResult:
        if not self._queue.set_queue(items):
            logger.info(LogTemplates.QUEUE_SELECTION_REJECTED, source.value)
            return PlayResult.error(PlayStatus.NO_ITEMS, source, "Nothing to play")

        logger.info(LogTemplates.QUEUE_REPLACED, self._queue.length, source.value)
        self._queue.play()
        return PlayResult.success(source, self._queue.length, self._queue.current_item)

    # === Queue mutation ===

    def enqueue(self, item: AudioItem | None) -> bool:
        added = self._queue.add_one(item)
        if added:
            logger.info(LogTemplates.QUEUE_APPENDED, 1, self._queue.length)
        return added

    def enqueue_many(self, items: Sequence[AudioItem] | None) -> int:
        count = self._queue.add_many(items)
        if count:
            logger.info(LogTemplates.QUEUE_APPENDED, count, self._queue.length)
        return count

    def clear(self) -> int:
        count = self._queue.clear()
        logger.info(LogTemplates.QUEUE_CLEARED, count)
        return count

    def select(self, index: int) -> bool:
        return self._queue.select(index)

    # === Transport ===

    def play(self) -> bool:
        return self._queue.play()

    def pause(self) -> bool:
        return self._queue.pause()

    def next(self) -> bool:
        advanced = self._queue.next()
        if not advanced:
            logger.debug(LogTemplates.QUEUE_END_REACHED, self._queue.current_index)
        return advanced

    def previous(self) -> bool:
        return self._queue.previous()

    def shuffle(self) -> bool:
        shuffled = self._queue.shuffle()
        if shuffled:
            current = self._queue.current_item
            logger.info(
                LogTemplates.QUEUE_SHUFFLED,
                self._queue.length,
                current.title if current is not None else "",
            )
        return shuffled

    def sort_by_popularity(self) -> bool:
        sorted_ = self._queue.sort_by_popularity()
        if sorted_:
            logger.info(LogTemplates.QUEUE_SORTED, self._queue.length)
        return sorted_
