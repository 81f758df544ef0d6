"""
Shared Domain Kernel

Contains identifiers, constrained types and exceptions shared across all bounded contexts.
"""

from audio_streaming.domain.shared.exceptions import (
    BusinessRuleViolationError,
    DocumentNotFoundError,
    DomainError,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)
from audio_streaming.domain.shared.value_objects import AuthorId, ItemId, ListenerId, ReleaseId

__all__ = [
    "ItemId",
    "AuthorId",
    "ReleaseId",
    "ListenerId",
    "DomainError",
    "ValidationError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "PersistenceError",
    "DocumentNotFoundError",
]
