"""
Persistence port for the plant record.

The record is stored as a JSON-serializable object under one fixed key of
a small key/value document, so other keys written by the client survive
a save.
"""

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

if TYPE_CHECKING:
    from .plant_state import PlantRecord

logger = logging.getLogger(__name__)

STORAGE_KEY = "plant-companion-data"


class StorageError(Exception):
    """Raised when the storage backend cannot be read or written."""


class PlantStorage:
    """Interface for plant record persistence."""

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Return the stored record as a dict, or None if nothing is stored.

        Raises:
            StorageError: if the stored state cannot be read
        """
        raise NotImplementedError

    def save(self, record: "PlantRecord") -> None:
        """
        Write the full record.

        Raises:
            StorageError: if the write fails
        """
        raise NotImplementedError


class InMemoryStorage(PlantStorage):
    """Keeps the serialized record in a dict. Used in tests and demo mode."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None, key: str = STORAGE_KEY):
        self.key = key
        self.data: Dict[str, Any] = {}
        self.save_count = 0
        if initial is not None:
            self.data[key] = json.loads(json.dumps(initial))

    def load(self) -> Optional[Dict[str, Any]]:
        stored = self.data.get(self.key)
        return json.loads(json.dumps(stored)) if stored is not None else None

    def save(self, record: "PlantRecord") -> None:
        self.data[self.key] = json.loads(json.dumps(record.to_dict()))
        self.save_count += 1


class JsonFileStorage(PlantStorage):
    """
    JSON file backed key/value storage.

    The file holds one JSON object; the plant record lives under
    STORAGE_KEY. Writes go to a temporary file that replaces the original,
    so a crash mid-write never leaves a truncated document.
    """

    def __init__(self, path: Union[str, Path], key: str = STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def _read_document(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(document, dict):
            raise StorageError(f"{self.path} does not contain a JSON object")
        return document

    def load(self) -> Optional[Dict[str, Any]]:
        stored = self._read_document().get(self.key)
        if stored is None:
            logger.debug(f"[STORAGE] No '{self.key}' entry in {self.path}")
            return None
        if not isinstance(stored, dict):
            raise StorageError(f"Entry '{self.key}' in {self.path} is not an object")
        return stored

    def save(self, record: "PlantRecord") -> None:
        try:
            document = self._read_document()
        except StorageError as e:
            logger.warning(f"[STORAGE] Overwriting unreadable document: {e}")
            document = {}
        document[self.key] = record.to_dict()

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Cannot write {self.path}: {e}") from e

        logger.debug(f"[STORAGE] Saved '{self.key}' to {self.path}")
