"""JSON implementation of the catalog repository."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from audio_streaming.domain.catalog.entities import AudioItem, Author, Episode, Release, Track
from audio_streaming.domain.catalog.repository import CatalogRepository
from audio_streaming.domain.shared.exceptions import PersistenceError
from audio_streaming.domain.shared.messages import ErrorMessages
from audio_streaming.domain.shared.value_objects import AuthorId, ItemId, ReleaseId
from audio_streaming.infrastructure.persistence.records import (
    SCHEMA_VERSION,
    AuthorRecord,
    CatalogDocument,
    EpisodeRecord,
    ReleaseRecord,
    TrackRecord,
)

if TYPE_CHECKING:
    from ..json_store import JsonDocumentStore

logger = logging.getLogger(__name__)


class JsonCatalogRepository(CatalogRepository):
    def __init__(self, store: JsonDocumentStore, document_name: str) -> None:
        self._store = store
        self._document_name = document_name

    @property
    def path(self) -> str:
        return str(self._store.path_for(self._document_name))

    def load(self) -> list[AudioItem]:
        raw = self._store.read(self._document_name)
        try:
            document = CatalogDocument.model_validate(raw)
            if document.schema_version != SCHEMA_VERSION:
                raise PersistenceError(
                    self.path,
                    ErrorMessages.UNSUPPORTED_SCHEMA.format(
                        version=document.schema_version, expected=SCHEMA_VERSION
                    ),
                )
            return self._document_to_items(document)
        except (PydanticValidationError, ValueError) as exc:
            raise PersistenceError(
                self.path, ErrorMessages.INVALID_DOCUMENT.format(path=self.path, reason=exc)
            ) from exc

    def save(self, items: Sequence[AudioItem]) -> None:
        document = self._items_to_document(items)
        self._store.write(self._document_name, document.model_dump(mode="json"))

    # === Mapping ===

    def _document_to_items(self, document: CatalogDocument) -> list[AudioItem]:
        authors = {
            record.id: Author(id=AuthorId(record.id), name=record.name, genres=set(record.genres))
            for record in document.authors
        }

        releases: dict[str, Release] = {}
        for record in document.releases:
            author = authors.get(record.author_id)
            if author is None:
                raise PersistenceError(
                    self.path,
                    ErrorMessages.DANGLING_AUTHOR.format(
                        title=record.title, author_id=record.author_id
                    ),
                )
            releases[record.id] = Release(
                id=ReleaseId(record.id), title=record.title, author=author, year=record.year
            )

        items: list[AudioItem] = []
        by_id: dict[str, Track] = {}
        for record in document.items:
            match record:
                case TrackRecord():
                    track = self._record_to_track(record, authors, releases)
                    by_id[record.id] = track
                    items.append(track)
                case EpisodeRecord():
                    items.append(
                        Episode(
                            id=ItemId(record.id),
                            title=record.title,
                            duration_seconds=record.duration_seconds,
                            play_count=record.play_count,
                            like_count=record.like_count,
                            host=record.host,
                            episode_number=record.episode_number,
                        )
                    )

        for record in document.releases:
            release = releases[record.id]
            for track_id in record.track_ids:
                track = by_id.get(track_id)
                if track is not None:
                    release.add_track(track)

        return items

    def _record_to_track(
        self,
        record: TrackRecord,
        authors: dict[str, Author],
        releases: dict[str, Release],
    ) -> Track:
        author = authors.get(record.author_id)
        if author is None:
            raise PersistenceError(
                self.path,
                ErrorMessages.DANGLING_AUTHOR.format(title=record.title, author_id=record.author_id),
            )

        release: Release | None = None
        if record.release_id is not None:
            release = releases.get(record.release_id)
            if release is None:
                raise PersistenceError(
                    self.path,
                    ErrorMessages.DANGLING_RELEASE.format(
                        title=record.title, release_id=record.release_id
                    ),
                )

        return Track(
            id=ItemId(record.id),
            title=record.title,
            duration_seconds=record.duration_seconds,
            play_count=record.play_count,
            like_count=record.like_count,
            author=author,
            release=release,
        )

    @staticmethod
    def _items_to_document(items: Sequence[AudioItem]) -> CatalogDocument:
        authors: dict[AuthorId, Author] = {}
        releases: dict[ReleaseId, Release] = {}
        item_records: list[Any] = []

        for item in items:
            match item:
                case Track(author=author, release=release):
                    authors.setdefault(author.id, author)
                    if release is not None:
                        releases.setdefault(release.id, release)
                        authors.setdefault(release.author.id, release.author)
                    item_records.append(
                        TrackRecord(
                            id=item.id.value,
                            title=item.title,
                            duration_seconds=item.duration_seconds,
                            play_count=item.play_count,
                            like_count=item.like_count,
                            author_id=author.id.value,
                            release_id=release.id.value if release is not None else None,
                        )
                    )
                case Episode():
                    item_records.append(
                        EpisodeRecord(
                            id=item.id.value,
                            title=item.title,
                            duration_seconds=item.duration_seconds,
                            play_count=item.play_count,
                            like_count=item.like_count,
                            host=item.host,
                            episode_number=item.episode_number,
                        )
                    )

        return CatalogDocument(
            authors=[
                AuthorRecord(id=author.id.value, name=author.name, genres=author.genre_list())
                for author in authors.values()
            ],
            releases=[
                ReleaseRecord(
                    id=release.id.value,
                    title=release.title,
                    author_id=release.author.id.value,
                    year=release.year,
                    track_ids=[track.id.value for track in release.tracks],
                )
                for release in releases.values()
            ],
            items=item_records,
        )
