from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, TYPE_CHECKING, Tuple

from veilcode.core.runes import Rune, solution_runes

if TYPE_CHECKING:
    from veilcode.core.puzzles import Puzzle

# (upper bound in seconds, stars) checked in order; slower than all bands is 0.
STAR_BANDS: Tuple[Tuple[float, int], ...] = ((15.0, 3), (30.0, 2), (60.0, 1))


def compute_stars(elapsed_seconds: Optional[float]) -> int:
    """Star rating for a completion time. Each band's upper bound is exclusive."""
    if elapsed_seconds is None:
        return 0
    for limit, stars in STAR_BANDS:
        if elapsed_seconds < limit:
            return stars
    return 0


class GuessOutcome(str, Enum):
    NOT_READY = "not_ready"
    INCORRECT = "incorrect"
    CORRECT = "correct"


@dataclass
class GuessResult:
    """Result of submitting the rune slots."""

    outcome: GuessOutcome
    elapsed_seconds: Optional[float] = None
    stars: int = 0

    @property
    def solved(self) -> bool:
        return self.outcome is GuessOutcome.CORRECT


class LevelSession:
    """One attempt at a puzzle: the rune slots, the active slot and a stopwatch.

    The stopwatch starts when the session is created and stops on the first
    correct submission. After that the session is complete and ignores edits.
    """

    def __init__(self, puzzle: "Puzzle", clock: Callable[[], float] = time.monotonic) -> None:
        self._puzzle = puzzle
        self._solution = solution_runes(puzzle.word, puzzle.family)
        self._slots: List[Optional[Rune]] = [None] * len(self._solution)
        self._selected: Optional[int] = 0
        self._clock = clock
        self._start_time = clock()
        self._elapsed: Optional[float] = None
        self._result: Optional[GuessResult] = None

    @property
    def puzzle(self) -> "Puzzle":
        return self._puzzle

    @property
    def solution(self) -> Tuple[Rune, ...]:
        return self._solution

    @property
    def slots(self) -> Tuple[Optional[Rune], ...]:
        return tuple(self._slots)

    @property
    def selected_index(self) -> Optional[int]:
        return self._selected

    @property
    def start_time(self) -> float:
        return self._start_time

    @property
    def elapsed_seconds(self) -> Optional[float]:
        """Final time once solved, otherwise None."""
        return self._elapsed

    def elapsed(self) -> float:
        """Seconds since the level started (frozen once solved)."""
        if self._elapsed is not None:
            return self._elapsed
        return max(0.0, self._clock() - self._start_time)

    def is_complete(self) -> bool:
        return self._result is not None

    def is_ready(self) -> bool:
        return all(slot is not None for slot in self._slots)

    def select_slot(self, index: int) -> bool:
        if self.is_complete() or not 0 <= index < len(self._slots):
            return False
        self._selected = index
        return True

    def place_rune(self, rune: Rune) -> bool:
        """Put ``rune`` in the active slot and move to the next empty one."""
        if self.is_complete() or not self._slots:
            return False
        target = self._selected
        if target is None:
            target = self._first_empty()
            if target is None:
                return False
        self._slots[target] = rune
        self._selected = self._first_empty(after=target)
        return True

    def clear(self) -> None:
        if self.is_complete():
            return
        self._slots = [None] * len(self._solution)
        self._selected = 0

    def is_correct(self) -> bool:
        if len(self._slots) != len(self._solution):
            return False
        return all(
            guess is not None and guess.key == answer.key
            for guess, answer in zip(self._slots, self._solution)
        )

    def submit(self) -> GuessResult:
        if self._result is not None:
            return self._result
        if not self.is_ready():
            return GuessResult(outcome=GuessOutcome.NOT_READY)
        if not self.is_correct():
            return GuessResult(outcome=GuessOutcome.INCORRECT)
        self._elapsed = max(0.0, self._clock() - self._start_time)
        self._result = GuessResult(
            outcome=GuessOutcome.CORRECT,
            elapsed_seconds=self._elapsed,
            stars=compute_stars(self._elapsed),
        )
        return self._result

    def _first_empty(self, after: int = -1) -> Optional[int]:
        for index in range(after + 1, len(self._slots)):
            if self._slots[index] is None:
                return index
        return None
