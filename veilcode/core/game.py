"""Screen flow and level progression for one play session.

``GameSession`` owns every piece of mutable game state. UI code drives it
through its methods and listens for the events it emits; it never reaches
into the state directly.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from veilcode.core.glyphs import Family
from veilcode.core.progress import ProgressStore
from veilcode.core.puzzles import Puzzle, PuzzleRepository, is_unlocked
from veilcode.core.runes import Rune, make_rune
from veilcode.core.session import GuessOutcome, GuessResult, LevelSession

logger = logging.getLogger(__name__)

SEALED_MESSAGE = "That level is still sealed. Solve the previous one first."
NOT_READY_MESSAGE = "Complete all slots first."
INCORRECT_MESSAGE = "Not quite. Try again."


class Screen(str, Enum):
    SPLASH = "splash"
    LEVEL_SELECT = "level-select"
    LEVEL_INTRO = "level-intro"
    PLAYING = "game"


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScreenChanged:
    screen: Screen
    level_id: Optional[int] = None


@dataclass(frozen=True)
class LevelSealed:
    level_id: int
    message: str = SEALED_MESSAGE


@dataclass(frozen=True)
class LevelStarted:
    level_id: int
    slot_count: int
    family: Family


@dataclass(frozen=True)
class GuessChanged:
    slots: tuple
    selected_index: Optional[int]
    ready: bool


@dataclass(frozen=True)
class FamilyChanged:
    family: Family


@dataclass(frozen=True)
class GuessRejected:
    level_id: int
    outcome: GuessOutcome
    message: str


@dataclass(frozen=True)
class LevelSolved:
    level_id: int
    elapsed_seconds: float
    stars: int
    best_time: Optional[float]
    next_level_id: Optional[int]


@dataclass(frozen=True)
class SuccessClosed:
    level_id: int


GameEvent = Union[
    ScreenChanged,
    LevelSealed,
    LevelStarted,
    GuessChanged,
    FamilyChanged,
    GuessRejected,
    LevelSolved,
    SuccessClosed,
]
Listener = Callable[[GameEvent], None]


class GameSession:
    def __init__(
        self,
        puzzles: PuzzleRepository,
        progress: ProgressStore,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._puzzles = puzzles
        self._progress = progress
        self._clock = clock
        self._listeners: List[Listener] = []

        self._screen = Screen.SPLASH
        self._current_level_id = progress.last_played_level or 1
        if puzzles.find(self._current_level_id) is None:
            self._current_level_id = 1
        self._level: Optional[LevelSession] = None
        self._keyboard_family = Family.F1
        self._success_visible = False

    # -- observers ---------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for events; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # -- read-only state ---------------------------------------------------

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def puzzles(self) -> PuzzleRepository:
        return self._puzzles

    @property
    def progress(self) -> ProgressStore:
        return self._progress

    @property
    def current_level_id(self) -> int:
        return self._current_level_id

    @property
    def level(self) -> Optional[LevelSession]:
        return self._level

    @property
    def active_puzzle(self) -> Optional[Puzzle]:
        return self._level.puzzle if self._level is not None else None

    @property
    def keyboard_family(self) -> Family:
        return self._keyboard_family

    @property
    def success_visible(self) -> bool:
        return self._success_visible

    def is_unlocked(self, level_id: int) -> bool:
        return is_unlocked(level_id, self._progress.solved_ids)

    def can_continue(self) -> bool:
        return bool(self._progress.solved_ids)

    def level_intro_stars(self, level_id: int) -> int:
        return self._progress.stars(level_id)

    # -- navigation --------------------------------------------------------

    def _set_screen(self, screen: Screen, level_id: Optional[int] = None) -> None:
        if screen is not Screen.PLAYING:
            self._level = None
            self._success_visible = False
        self._screen = screen
        self._emit(ScreenChanged(screen=screen, level_id=level_id))

    def show_splash(self) -> None:
        self._set_screen(Screen.SPLASH)

    def show_level_select(self) -> None:
        self._set_screen(Screen.LEVEL_SELECT)

    def leave_level(self) -> None:
        """Abandon the level in progress; the partial guess is dropped."""
        if self._level is not None and not self._level.is_complete():
            logger.debug("Leaving level %s without solving", self._level.puzzle.id)
        self.show_level_select()

    def _check_open(self, level_id: int) -> Optional[Puzzle]:
        puzzle = self._puzzles.find(level_id)
        if puzzle is None:
            logger.debug("Ignoring request for unknown level %s", level_id)
            return None
        if not self.is_unlocked(level_id):
            self._emit(LevelSealed(level_id=level_id))
            return None
        return puzzle

    def show_level_intro(self, level_id: int) -> bool:
        puzzle = self._check_open(level_id)
        if puzzle is None:
            return False
        self._current_level_id = puzzle.id
        self._set_screen(Screen.LEVEL_INTRO, level_id=puzzle.id)
        return True

    def enter_level(self, level_id: int) -> bool:
        """Start playing ``level_id`` with empty slots and a fresh timer."""
        puzzle = self._check_open(level_id)
        if puzzle is None:
            return False
        self._current_level_id = puzzle.id
        self._level = LevelSession(puzzle, clock=self._clock)
        self._keyboard_family = puzzle.family
        self._success_visible = False
        self._screen = Screen.PLAYING
        logger.info("Level %s started (%s letters, %s)", puzzle.id, len(puzzle.word), puzzle.family.label)
        self._emit(ScreenChanged(screen=Screen.PLAYING, level_id=puzzle.id))
        self._emit(LevelStarted(level_id=puzzle.id, slot_count=len(self._level.slots), family=puzzle.family))
        self._emit(FamilyChanged(family=self._keyboard_family))
        self._emit_guess()
        return True

    def continue_game(self) -> None:
        """Jump to the first open level not yet solved, else the level map."""
        for puzzle in self._puzzles.all():
            if self.is_unlocked(puzzle.id) and not self._progress.is_solved(puzzle.id):
                self.show_level_intro(puzzle.id)
                return
        self.show_level_select()

    def next_level(self) -> bool:
        """From the success overlay, open the intro of the following level."""
        following = self._puzzles.next_after(self._current_level_id)
        if following is None or not self.is_unlocked(following.id):
            return False
        self.close_success()
        return self.show_level_intro(following.id)

    def close_success(self) -> None:
        if not self._success_visible:
            return
        self._success_visible = False
        self._emit(SuccessClosed(level_id=self._current_level_id))

    # -- guess editing -----------------------------------------------------

    def _emit_guess(self) -> None:
        if self._level is None:
            return
        self._emit(
            GuessChanged(
                slots=self._level.slots,
                selected_index=self._level.selected_index,
                ready=self._level.is_ready(),
            )
        )

    def select_slot(self, index: int) -> None:
        if self._level is not None and self._level.select_slot(index):
            self._emit_guess()

    def select_family(self, family: object) -> None:
        fam = Family.parse(family)  # type: ignore[arg-type]
        if fam is None or fam is self._keyboard_family:
            return
        self._keyboard_family = fam
        self._emit(FamilyChanged(family=fam))

    def place_rune(self, rune: Rune) -> None:
        if self._level is not None and self._level.place_rune(rune):
            self._emit_guess()

    def press_key(self, letter: str) -> None:
        """A rune keyboard key: the letter in the currently shown family."""
        rune = make_rune(letter, self._keyboard_family)
        if rune is not None:
            self.place_rune(rune)

    def clear_guess(self) -> None:
        if self._level is None:
            return
        self._level.clear()
        self._emit_guess()

    def submit_guess(self) -> Optional[GuessResult]:
        level = self._level
        if level is None or level.is_complete():
            return None
        result = level.submit()
        level_id = level.puzzle.id
        if result.outcome is GuessOutcome.NOT_READY:
            self._emit(GuessRejected(level_id, result.outcome, NOT_READY_MESSAGE))
            return result
        if result.outcome is GuessOutcome.INCORRECT:
            self._emit(GuessRejected(level_id, result.outcome, INCORRECT_MESSAGE))
            return result

        elapsed = result.elapsed_seconds or 0.0
        self._progress.save_best_time(level_id, elapsed)
        self._progress.mark_solved(level_id)
        self._success_visible = True
        following = self._puzzles.next_after(level_id)
        logger.info("Level %s solved in %.2fs (%s stars)", level_id, elapsed, result.stars)
        self._emit(
            LevelSolved(
                level_id=level_id,
                elapsed_seconds=elapsed,
                stars=result.stars,
                best_time=self._progress.best_time(level_id),
                next_level_id=following.id if following is not None else None,
            )
        )
        return result
