"""
Best-score stores.

A store keeps a single integer under a fixed key. The session loads it once when it starts and saves
it each time the score beats it.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

# ##>: Module logger.
_logger = logging.getLogger(__name__)

DEFAULT_KEY = '@bestScore'


class BestScoreStore(Protocol):
    """
    Capability pair used by the session to read and persist the best score.
    """

    def load(self) -> int | None:
        """Return the stored best score, or None when nothing is stored."""

    def save(self, value: int) -> bool:
        """Persist the best score and report whether it succeeded."""


class MemoryScoreStore:
    """
    Store keeping the best score in memory, for tests and sessions without persistence.
    """

    def __init__(self, value: int | None = None):
        self.value = value

    def load(self) -> int | None:
        return self.value

    def save(self, value: int) -> bool:
        self.value = value
        return True


class JsonScoreStore:
    """
    Store keeping the best score in a JSON object on disk.

    Other keys of the file are preserved, so several stores may share one file.

    Parameters
    ----------
    path : str | Path
        Location of the JSON file. Parent directories are created on save.
    key : str
        Key of the best score inside the JSON object.
    """

    def __init__(self, path: str | Path, key: str = DEFAULT_KEY):
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, 'r', encoding='utf-8') as file_h:
            data = json.load(file_h)
        if not isinstance(data, dict):
            raise ValueError(f'Expected a JSON object in {self.path}, got {type(data).__name__}')
        return data

    def load(self) -> int | None:
        """
        Read the best score.

        Returns
        -------
        int | None
            The stored score, or None if the file or the key is missing.

        Raises
        ------
        ValueError
            If the file does not hold a JSON object or the value is not an integer.
        """
        value = self._read().get(self.key)
        if value is None:
            return None
        return int(value)

    def save(self, value: int) -> bool:
        """
        Write the best score, keeping the other keys of the file.

        Returns
        -------
        bool
            True once the file is written. Errors from the file system propagate.
        """
        try:
            data = self._read()
        except ValueError:
            _logger.warning('Overwriting unreadable best score file %s', self.path)
            data = {}
        data[self.key] = int(value)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as file_h:
            json.dump(data, file_h)
        return True
