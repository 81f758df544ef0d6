"""
Application Commands (CQRS Write Side)

Command objects and their handlers for write operations.
Commands represent intent to change the system state.
"""

from audio_streaming.application.commands.toggle_like import (
    LikeStatus,
    ToggleLikeCommand,
    ToggleLikeHandler,
    ToggleLikeResult,
)

__all__ = [
    # Like
    "ToggleLikeCommand",
    "ToggleLikeHandler",
    "ToggleLikeResult",
    "LikeStatus",
]
