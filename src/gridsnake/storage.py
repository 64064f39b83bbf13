# storage.py
"""Best-score persistence: one integer under a fixed key."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Union

from .config import STORAGE_KEY

logger = logging.getLogger(__name__)


class ScoreStoreError(Exception):
    """Raised when the best score cannot be read or written."""


class ScoreStore:
    def load(self) -> int:
        raise NotImplementedError

    def save(self, value: int) -> None:
        raise NotImplementedError


class MemoryScoreStore(ScoreStore):
    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = int(value)
        self.saves += 1


class JsonScoreStore(ScoreStore):
    """Keeps {"snake-high-score": n} in a small JSON file. Missing file means 0."""

    def __init__(self, path: Union[str, Path], key: str = STORAGE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ScoreStoreError(f"Could not read {self.path}: {e}") from e

        value = data.get(self.key, 0) if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ScoreStoreError(f"Bad value for {self.key!r} in {self.path}: {value!r}")
        return value

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump({self.key: int(value)}, f)
            tmp.replace(self.path)
        except OSError as e:
            raise ScoreStoreError(f"Could not write {self.path}: {e}") from e
        logger.debug("Saved best score %d to %s", value, self.path)
