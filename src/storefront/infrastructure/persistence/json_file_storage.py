"""JSON-file-backed implementation of CartStorage.

The file holds a single JSON object mapping keys to text values, so one
file can serve several keys the way browser local storage does.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from storefront.domain.exceptions import StorageError
from storefront.domain.repository.cart_storage import CartStorage

logger = logging.getLogger(__name__)


class JsonFileStorage(CartStorage):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CartStorage interface ------------------------------------------------

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        # A write always lands, even over a file that can no longer be read
        try:
            entries = self._load()
        except StorageError:
            logger.warning("Overwriting unreadable storage file %s", self._file_path, exc_info=True)
            entries = {}
        entries[key] = value
        self._persist(entries)

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise StorageError(f"Cannot read {self._file_path}: {exc}") from exc
        except (ValueError, RecursionError) as exc:
            raise StorageError(f"Storage file {self._file_path} is corrupt: {exc}") from exc
        if not isinstance(raw, dict):
            raise StorageError(f"Storage file {self._file_path} must hold a JSON object")
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _persist(self, entries: dict[str, str]) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(entries, indent=2) + "\n", encoding="utf-8"
            )
        except OSError as exc:
            raise StorageError(f"Cannot write {self._file_path}: {exc}") from exc
