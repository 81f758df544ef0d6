"""JSON document store with atomic replace-on-write."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from audio_streaming.domain.shared.exceptions import DocumentNotFoundError, PersistenceError
from audio_streaming.domain.shared.messages import ErrorMessages, LogTemplates

logger = logging.getLogger(__name__)


class JsonDocumentStore:
    """Reads and writes whole JSON documents under a data directory.

    A write goes to a temporary file beside the target and is then moved over
    it with ``os.replace``, so readers never observe a half-written document.
    """

    def __init__(self, data_dir: Path | str) -> None:
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / name

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def read(self, name: str) -> Any:
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8") as fh:
                document = json.load(fh)
        except FileNotFoundError as exc:
            raise DocumentNotFoundError(str(path)) from exc
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(
                str(path), ErrorMessages.UNREADABLE_DOCUMENT.format(path=path, reason=exc)
            ) from exc

        logger.debug(LogTemplates.DOCUMENT_READ, path)
        return document

    def write(self, name: str, document: Any) -> None:
        path = self.path_for(name)
        tmp_name: str | None = None
        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._data_dir,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                json.dump(document, fh, ensure_ascii=False, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(
                str(path), ErrorMessages.UNWRITABLE_DOCUMENT.format(path=path, reason=exc)
            ) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

        logger.debug(LogTemplates.DOCUMENT_WRITTEN, path)
