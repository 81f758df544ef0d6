"""In-memory registry of listeners keyed by normalized email."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from audio_streaming.domain.listeners.entities import Listener
from audio_streaming.domain.shared.exceptions import EntityNotFoundError, ValidationError
from audio_streaming.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _looks_like_email(email: str) -> bool:
    return "@" in email and "." in email


class ListenerRegistry:
    """Aggregate of every known listener. Emails are unique once normalized."""

    def __init__(self, listeners: Iterable[Listener] = ()) -> None:
        self._listeners: dict[str, Listener] = {}
        for listener in listeners:
            self._listeners[listener.email] = listener

    def register(self, email: str, display_name: str) -> Listener:
        """Create and store a new listener.

        Raises:
            ValidationError: If a field is blank, the email is malformed or
                already registered.
        """
        email = normalize_email(email or "")
        display_name = (display_name or "").strip()

        if not email or not display_name:
            raise ValidationError(ErrorMessages.LISTENER_FIELDS_REQUIRED)
        if not _looks_like_email(email):
            raise ValidationError(ErrorMessages.INVALID_EMAIL.format(email=email), field="email")
        if email in self._listeners:
            raise ValidationError(
                ErrorMessages.EMAIL_ALREADY_REGISTERED.format(email=email), field="email"
            )

        listener = Listener(email=email, display_name=display_name)
        self._listeners[email] = listener
        logger.info(LogTemplates.LISTENER_REGISTERED, email)
        return listener

    def find(self, email: str) -> Listener | None:
        return self._listeners.get(normalize_email(email))

    def get(self, email: str) -> Listener:
        listener = self.find(email)
        if listener is None:
            raise EntityNotFoundError("Listener", normalize_email(email))
        return listener

    def remove(self, email: str) -> bool:
        listener = self._listeners.pop(normalize_email(email), None)
        if listener is None:
            return False
        logger.info(LogTemplates.LISTENER_REMOVED, listener.email)
        return True

    def replace_all(self, listeners: Iterable[Listener]) -> None:
        self._listeners = {listener.email: listener for listener in listeners}

    def all(self) -> list[Listener]:
        return list(self._listeners.values())

    def __contains__(self, email: object) -> bool:
        return isinstance(email, str) and normalize_email(email) in self._listeners

    def __iter__(self) -> Iterator[Listener]:
        return iter(list(self._listeners.values()))

    def __len__(self) -> int:
        return len(self._listeners)
