"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from veilcode.core.progress import ProgressStore
from veilcode.core.puzzles import Puzzle, is_unlocked


@dataclass
class LevelState:
    """UI state for a single level: unlock status, result and selection."""

    puzzle: Puzzle
    unlocked: bool
    solved: bool
    stars: int = 0
    is_current: bool = False


def build_level_states(
    puzzles: Iterable[Puzzle],
    progress: ProgressStore,
    current_id: Optional[int] = None,
) -> list[LevelState]:
    """Compute unlock/solve state for every level and mark the current one."""
    solved = progress.solved_ids
    states = [
        LevelState(
            puzzle=puzzle,
            unlocked=is_unlocked(puzzle.id, solved),
            solved=puzzle.id in solved,
            stars=progress.stars(puzzle.id),
            is_current=puzzle.id == current_id,
        )
        for puzzle in puzzles
    ]
    if current_id is None:
        for st in states:
            if st.unlocked and not st.solved:
                st.is_current = True
                break
    return states
