"""Centralized message constants for error messages, validation, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Identifier Validation Errors
    EMPTY_ITEM_ID = "Item ID cannot be empty"
    EMPTY_AUTHOR_ID = "Author ID cannot be empty"
    EMPTY_RELEASE_ID = "Release ID cannot be empty"
    EMPTY_LISTENER_ID = "Listener ID cannot be empty"

    # Listener Validation Errors
    LISTENER_FIELDS_REQUIRED = "Email and display name are required"
    INVALID_EMAIL = "Invalid email format: {email}"
    EMAIL_ALREADY_REGISTERED = "Email '{email}' is already registered"
    EMPTY_PLAYLIST_NAME = "Playlist name cannot be empty"
    PLAYLIST_ALREADY_EXISTS = "Playlist '{name}' already exists"

    # Persistence Errors
    UNREADABLE_DOCUMENT = "Could not read document at '{path}': {reason}"
    INVALID_DOCUMENT = "Document at '{path}' is not valid: {reason}"
    UNWRITABLE_DOCUMENT = "Could not write document at '{path}': {reason}"
    DANGLING_AUTHOR = "'{title}' references unknown author '{author_id}'"
    DANGLING_RELEASE = "'{title}' references unknown release '{release_id}'"
    UNSUPPORTED_SCHEMA = "Unsupported schema version {version} (expected {expected})"

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Application Lifecycle
    APP_STARTING = "Starting audio streaming session (environment: %s)"
    APP_STOPPED = "Audio streaming session closed"
    APP_FATAL_ERROR = "Fatal error: %s"
    APP_CATALOG_SUMMARY = "Catalog holds %d items, %d listeners"
    APP_RECOMMENDATION = "Recommended #%d: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"

    # Catalog Index
    CATALOG_ITEM_ADDED = "Indexed '%s' under %d key(s)"
    CATALOG_AUTHOR_CREATED = "Created author '%s'"
    CATALOG_SEARCH_EXACT = "Search '%s' matched index key (%d items)"
    CATALOG_SEARCH_SCAN = "Search '%s' fell back to substring scan (%d items)"
    CATALOG_REPLACED = "Catalog replaced with %d items (%d authors)"

    # Playback
    ITEM_PLAYING = "Playing %s"
    ITEM_PAUSED = "Paused %s"
    QUEUE_REPLACED = "Queue replaced with %d items from %s"
    QUEUE_APPENDED = "Appended %d item(s) to queue (length %d)"
    QUEUE_SHUFFLED = "Queue shuffled (%d items), keeping '%s' at the head"
    QUEUE_SORTED = "Queue sorted by popularity (%d items)"
    QUEUE_CLEARED = "Cleared %d items from queue"
    QUEUE_END_REACHED = "End of queue reached at position %d"
    QUEUE_SELECTION_REJECTED = "Queue replacement from %s ignored: no items"

    # Listeners
    LIKE_ADDED = "Listener %s liked '%s'"
    LIKE_REMOVED = "Listener %s removed like from '%s'"
    LISTENER_REGISTERED = "Registered listener %s"
    LISTENER_REMOVED = "Removed listener %s"
    LISTENER_UNKNOWN_ITEM = "Listener %s references unknown item %s, skipping"

    # Persistence
    DOCUMENT_READ = "Read document %s"
    DOCUMENT_WRITTEN = "Wrote document %s"
    LIBRARY_LOADED = "Loaded catalog (%d items) and %d listeners from disk"
    LIBRARY_LOAD_FAILED = "Could not load library: %s"
    LIBRARY_SEEDED = "Seeded starter catalog with %d items"
    LIBRARY_SAVED = "Saved catalog (%d items) and %d listeners"
    LIBRARY_SAVE_FAILED = "Could not save library: %s"


class StatusLabels:
    """Human-readable queue status labels."""

    EMPTY = "Queue empty"
    PLAYING = "▶ Playing"
    PAUSED = "⏸ Paused"


class DisplayLabels:
    """Fallback and tag strings used when describing catalog items."""

    TRACK_TAG = "[Track]"
    EPISODE_TAG = "[Episode]"
    SINGLE = "Single"
