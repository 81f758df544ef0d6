"""
Application Queries (CQRS Read Side)

Query objects and their handlers for read operations.
"""

from audio_streaming.application.queries.get_queue import GetQueueHandler, GetQueueQuery, QueueView

__all__ = [
    "GetQueueQuery",
    "GetQueueHandler",
    "QueueView",
]
