"""Strongly-typed identifiers used across all bounded contexts."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Annotated, ClassVar, TypeVar

from pydantic import PlainSerializer, PlainValidator

from audio_streaming.domain.shared.messages import ErrorMessages

_IdT = TypeVar("_IdT", bound="EntityId")


@dataclass(frozen=True)
class EntityId:
    """Opaque string identifier, generated as a UUID4 when not supplied."""

    EMPTY_MESSAGE: ClassVar[str] = "ID cannot be empty"

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError(self.EMPTY_MESSAGE)

    def __str__(self) -> str:
        return self.value

    # Subclasses are declared with eq=False so they inherit this hash and __eq__.
    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    @classmethod
    def new(cls: type[_IdT]) -> _IdT:
        return cls(str(uuid.uuid4()))


@dataclass(frozen=True, eq=False)
class ItemId(EntityId):
    """Stable identifier of a catalog item."""

    EMPTY_MESSAGE: ClassVar[str] = ErrorMessages.EMPTY_ITEM_ID


@dataclass(frozen=True, eq=False)
class AuthorId(EntityId):
    EMPTY_MESSAGE: ClassVar[str] = ErrorMessages.EMPTY_AUTHOR_ID


@dataclass(frozen=True, eq=False)
class ReleaseId(EntityId):
    EMPTY_MESSAGE: ClassVar[str] = ErrorMessages.EMPTY_RELEASE_ID


@dataclass(frozen=True, eq=False)
class ListenerId(EntityId):
    EMPTY_MESSAGE: ClassVar[str] = ErrorMessages.EMPTY_LISTENER_ID


def _id_field(id_type: type[EntityId]) -> object:
    # Serializes as plain string in JSON, stores as the typed ID in the model.
    return Annotated[
        id_type,
        PlainValidator(lambda v: id_type(v) if isinstance(v, str) else v),
        PlainSerializer(lambda v: v.value, return_type=str),
    ]


ItemIdField = _id_field(ItemId)
AuthorIdField = _id_field(AuthorId)
ReleaseIdField = _id_field(ReleaseId)
ListenerIdField = _id_field(ListenerId)
