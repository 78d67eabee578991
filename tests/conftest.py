"""Shared fixtures for the veilcode test-suite."""

from __future__ import annotations

import pytest

from veilcode.core.glyphs import Family
from veilcode.core.progress import MemoryStorage, ProgressStore
from veilcode.core.puzzles import Puzzle, PuzzleRepository


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def progress(storage: MemoryStorage) -> ProgressStore:
    return ProgressStore(storage)


@pytest.fixture()
def ten_puzzles() -> PuzzleRepository:
    words = ["OPEN", "LOOK", "LISTEN", "WAIT", "KEY", "DOOR", "SIGNAL", "HIDDEN", "AWAKE", "GATES"]
    families = [Family.F1, Family.F4, Family.F5, Family.F3, Family.F2, Family.F1, Family.F3, Family.F2, Family.F4, Family.F5]
    return PuzzleRepository.from_puzzles(
        Puzzle(id=n, word=word, family=family, clue=f"clue {n}", tag=f"tag {n}")
        for n, (word, family) in enumerate(zip(words, families), start=1)
    )
