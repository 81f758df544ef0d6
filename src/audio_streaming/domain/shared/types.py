"""Reusable Pydantic Annotated types for domain-wide validation.

Every constrained type used across bounded contexts is defined here once,
so models can simply annotate their fields::

    from audio_streaming.domain.shared.types import DurationSeconds, NonEmptyStr

    class MyModel(BaseModel):
        duration_seconds: DurationSeconds
        name: NonEmptyStr
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BeforeValidator, Field

# ── Numeric constraints ─────────────────────────────────────────────

NonNegativeInt = Annotated[int, Field(ge=0)]
"""Integer >= 0."""

DurationSeconds = Annotated[int, Field(ge=0, le=86_400)]
"""Item duration in seconds: 0 … 86 400 (24 hours)."""

ReleaseYear = Annotated[int, Field(ge=1000, le=9999)]
"""Four-digit release year."""

EpisodeNumber = Annotated[int, Field(ge=0)]
"""Sequential episode number within a show."""

CursorInt = Annotated[int, Field(ge=-1)]
"""Queue cursor: -1 means no selection."""

RecommendationLimit = Annotated[int, Field(ge=1, le=50)]
"""Number of recommended items: 1 … 50."""


# ── String constraints ──────────────────────────────────────────────

NonEmptyStr = Annotated[str, Field(min_length=1)]
"""String with at least one character."""

TitleStr = Annotated[str, Field(min_length=1, max_length=500)]
"""Item or release title: 1-500 characters."""


def _normalize_email(v: object) -> object:
    if isinstance(v, str):
        return v.strip().lower()
    return v


EmailStr = Annotated[str, BeforeValidator(_normalize_email), Field(min_length=3)]
"""Trimmed, lower-cased email address."""
