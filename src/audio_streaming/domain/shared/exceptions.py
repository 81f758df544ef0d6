"""Base exception classes for domain-level errors."""

from __future__ import annotations


class DomainError(Exception):
    """Base exception for all domain-level errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when domain validation fails."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class EntityNotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, identifier: str | int, message: str | None = None) -> None:
        msg = message or f"{entity_type} with id '{identifier}' not found"
        super().__init__(msg, code="ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.identifier = identifier


class BusinessRuleViolationError(DomainError):
    """Raised when a business rule is violated."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        msg = message or f"Business rule violated: {rule}"
        super().__init__(msg, code="BUSINESS_RULE_VIOLATION")
        self.rule = rule


class PersistenceError(DomainError):
    """Raised when a catalog or listener document cannot be read or written."""

    def __init__(self, path: str, message: str | None = None) -> None:
        msg = message or f"Persistence failure for '{path}'"
        super().__init__(msg, code="PERSISTENCE_ERROR")
        self.path = path


class DocumentNotFoundError(PersistenceError):
    """Raised when a persisted document does not exist yet."""

    def __init__(self, path: str) -> None:
        super().__init__(path, message=f"No document found at '{path}'")
        self.code = "DOCUMENT_NOT_FOUND"
