from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Protocol, Tuple

from veilcode.core.session import compute_stars

logger = logging.getLogger(__name__)

STORAGE_KEY = "veilcodeProgress"
DEFAULT_DATA_DIR = Path.home() / ".veilcode"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStorage:
    """In-process storage, handy for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def delete(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage:
    """One ``<key>.json`` file per key inside ``base_dir`` (default ~/.veilcode)."""

    def __init__(self, base_dir: Optional[Path] = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else DEFAULT_DATA_DIR
        self._base_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, key: str) -> Path:
        return self._base_dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", path, e)
            return None

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        if path.exists():
            path.unlink()


@dataclass
class LevelProgress:
    best_time_seconds: Optional[float] = None


class ProgressStore:
    """Solved levels, best times and the last played level.

    Loaded once at construction; every mutation is written straight back to
    storage. Unreadable or malformed data starts over from empty progress.
    """

    def __init__(self, storage: Optional[KeyValueStorage] = None, key: str = STORAGE_KEY) -> None:
        self._storage = storage if storage is not None else JsonFileStorage()
        self._key = key
        self._solved, self._last_played, self._levels = self._load()

    @property
    def solved_ids(self) -> FrozenSet[int]:
        return frozenset(self._solved)

    @property
    def last_played_level(self) -> Optional[int]:
        return self._last_played

    def is_solved(self, level_id: int) -> bool:
        return level_id in self._solved

    def get_level_progress(self, level_id: int) -> LevelProgress:
        return self._levels.get(level_id, LevelProgress())

    def best_time(self, level_id: int) -> Optional[float]:
        return self.get_level_progress(level_id).best_time_seconds

    def stars(self, level_id: int) -> int:
        return compute_stars(self.best_time(level_id))

    def save_best_time(self, level_id: int, seconds: float) -> bool:
        """Record ``seconds`` if it beats the stored best. Returns True if stored."""
        if not _is_valid_time(seconds):
            logger.warning("Ignoring invalid time %r for level %s", seconds, level_id)
            return False
        current = self.best_time(level_id)
        if current is not None and not seconds < current:
            return False
        self._levels[level_id] = LevelProgress(best_time_seconds=float(seconds))
        self._save()
        return True

    def mark_solved(self, level_id: int) -> bool:
        """Add ``level_id`` to the solved set. Solving twice changes nothing."""
        if level_id in self._solved:
            return False
        self._solved.append(level_id)
        self._last_played = level_id
        self._save()
        return True

    def set_last_played(self, level_id: int) -> None:
        if self._last_played == level_id:
            return
        self._last_played = level_id
        self._save()

    def reset(self) -> None:
        """Clear all progress."""
        self._solved = []
        self._last_played = None
        self._levels = {}
        self._save()

    def to_payload(self) -> dict:
        return {
            "solvedIds": list(self._solved),
            "lastPlayedLevel": self._last_played,
            "levels": {
                str(level_id): {"bestTimeSeconds": lp.best_time_seconds}
                for level_id, lp in self._levels.items()
                if lp.best_time_seconds is not None
            },
        }

    def _load(self) -> Tuple[list, Optional[int], Dict[int, LevelProgress]]:
        empty: Tuple[list, Optional[int], Dict[int, LevelProgress]] = ([], None, {})
        raw = self._storage.get(self._key)
        if not raw:
            return empty
        try:
            payload = json.loads(raw)
        except (ValueError, TypeError, RecursionError) as e:
            logger.warning("Could not parse progress under %r: %s", self._key, e)
            return empty
        if not isinstance(payload, dict) or not isinstance(payload.get("solvedIds"), list):
            logger.warning("Ignoring progress under %r: unexpected shape", self._key)
            return empty

        solved: list = []
        for value in payload["solvedIds"]:
            level_id = _as_level_id(value)
            if level_id is not None and level_id not in solved:
                solved.append(level_id)

        last_played = _as_level_id(payload.get("lastPlayedLevel"))

        levels: Dict[int, LevelProgress] = {}
        raw_levels = payload.get("levels")
        if isinstance(raw_levels, dict):
            for key, value in raw_levels.items():
                level_id = _as_level_id(key)
                if level_id is None or not isinstance(value, dict):
                    continue
                best = value.get("bestTimeSeconds")
                if not _is_valid_time(best):
                    continue
                levels[level_id] = LevelProgress(best_time_seconds=float(best))
        return solved, last_played, levels

    def _save(self) -> None:
        try:
            self._storage.set(self._key, json.dumps(self.to_payload()))
        except OSError as e:
            logger.warning("Could not save progress under %r: %s", self._key, e)


def _is_valid_time(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def _as_level_id(value: object) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        level_id = int(value)
        return level_id if level_id > 0 else None
    return None
