"""Persistence of the local to-do list as a JSON file."""

import json
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from ..exceptions import MalformedKeyError, StorageReadError, StorageWriteError
from ..keys import parse_issue_key
from .models import TodoAnnotation, TodoStorage

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TodoStore:
    """Reads and writes the to-do list.

    The whole file is read, changed in memory and written back. Only one
    process is expected to write at a time; there is no locking.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Location of the JSON file, e.g. ``~/.poke/todo.json``
        """
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageReadError(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageReadError(f"Unexpected content in {self.path}")
        return data

    def load(self) -> TodoStorage:
        """Load the to-do list.

        Never fails: a missing or corrupt file gives an empty list, and records
        that cannot be decoded are skipped.

        Returns:
            TodoStorage with every readable record
        """
        if not self.path.exists():
            return TodoStorage()

        try:
            data = self._read()
        except StorageReadError as e:
            logger.warning("%s; starting with an empty to-do list", e)
            return TodoStorage()

        records = data.get("issues") or {}
        if not isinstance(records, dict):
            logger.warning("Ignoring malformed 'issues' in %s", self.path)
            return TodoStorage()

        storage = TodoStorage()
        for key, record in records.items():
            try:
                parse_issue_key(key)
                storage.issues[key] = TodoAnnotation.model_validate(record)
            except (MalformedKeyError, ValidationError) as e:
                logger.warning("Skipping stored entry %s: %s", key, e)

        return storage

    def save(self, storage: TodoStorage) -> Path:
        """Write the to-do list.

        The data goes to a temporary file next to the target which then
        replaces it, so an interrupted write never leaves a truncated file.

        Returns:
            Path to the saved file

        Raises:
            StorageWriteError: If the file cannot be written
        """
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(storage.to_record(), f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(f"Error saving todo data to {self.path}: {e}") from e

        logger.debug("Saved to %s", self.path)
        return self.path

    def update(self, mutate: Callable[[TodoStorage], T]) -> T:
        """Load, apply ``mutate`` and save in one step.

        Returns:
            Whatever ``mutate`` returned

        Raises:
            StorageWriteError: If the file cannot be written
        """
        storage = self.load()
        result = mutate(storage)
        self.save(storage)
        return result
