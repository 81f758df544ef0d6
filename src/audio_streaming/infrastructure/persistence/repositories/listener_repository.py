"""JSON implementation of the listener repository."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from audio_streaming.domain.catalog.entities import AudioItem
from audio_streaming.domain.catalog.index import CatalogIndex
from audio_streaming.domain.listeners.entities import Listener, Playlist
from audio_streaming.domain.listeners.repository import ListenerRepository
from audio_streaming.domain.shared.exceptions import PersistenceError
from audio_streaming.domain.shared.messages import ErrorMessages, LogTemplates
from audio_streaming.domain.shared.value_objects import ItemId, ListenerId
from audio_streaming.infrastructure.persistence.records import (
    SCHEMA_VERSION,
    ListenerDocument,
    ListenerRecord,
    PlaylistRecord,
)

if TYPE_CHECKING:
    from ..json_store import JsonDocumentStore

logger = logging.getLogger(__name__)


class JsonListenerRepository(ListenerRepository):
    def __init__(self, store: JsonDocumentStore, document_name: str) -> None:
        self._store = store
        self._document_name = document_name

    @property
    def path(self) -> str:
        return str(self._store.path_for(self._document_name))

    def load(self, catalog: CatalogIndex) -> list[Listener]:
        raw = self._store.read(self._document_name)
        try:
            document = ListenerDocument.model_validate(raw)
            if document.schema_version != SCHEMA_VERSION:
                raise PersistenceError(
                    self.path,
                    ErrorMessages.UNSUPPORTED_SCHEMA.format(
                        version=document.schema_version, expected=SCHEMA_VERSION
                    ),
                )
            return [self._record_to_listener(record, catalog) for record in document.listeners]
        except (PydanticValidationError, ValueError) as exc:
            raise PersistenceError(
                self.path, ErrorMessages.INVALID_DOCUMENT.format(path=self.path, reason=exc)
            ) from exc

    def save(self, listeners: Sequence[Listener]) -> None:
        document = ListenerDocument(
            listeners=[self._listener_to_record(listener) for listener in listeners]
        )
        self._store.write(self._document_name, document.model_dump(mode="json"))

    # === Mapping ===

    @staticmethod
    def _resolve(
        listener_email: str, item_ids: Iterable[str], catalog: CatalogIndex
    ) -> list[AudioItem]:
        items: list[AudioItem] = []
        for raw_id in item_ids:
            item = catalog.get_item(ItemId(raw_id))
            if item is None:
                logger.warning(LogTemplates.LISTENER_UNKNOWN_ITEM, listener_email, raw_id)
                continue
            items.append(item)
        return items

    def _record_to_listener(self, record: ListenerRecord, catalog: CatalogIndex) -> Listener:
        listener = Listener(
            id=ListenerId(record.id),
            email=record.email,
            display_name=record.display_name,
            saved_queue_position=record.saved_queue_position,
        )
        # Counters are already persisted with the catalog, so likes are
        # restored without calling item.like().
        listener.likes.update(self._resolve(listener.email, record.liked_item_ids, catalog))

        for playlist_record in record.playlists:
            playlist = Playlist(name=playlist_record.name)
            for item in self._resolve(listener.email, playlist_record.item_ids, catalog):
                playlist.add_item(item)
            listener.playlists.append(playlist)

        return listener

    @staticmethod
    def _listener_to_record(listener: Listener) -> ListenerRecord:
        return ListenerRecord(
            id=listener.id.value,
            email=listener.email,
            display_name=listener.display_name,
            liked_item_ids=[item.id.value for item in listener.liked_items()],
            playlists=[
                PlaylistRecord(
                    name=playlist.name,
                    item_ids=[item.id.value for item in playlist.items],
                )
                for playlist in listener.playlists
            ],
            saved_queue_position=listener.saved_queue_position,
        )
