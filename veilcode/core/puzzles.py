from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Collection, Dict, Iterable, List, Optional

import yaml

from veilcode.core.glyphs import LETTERS, Family

DEFAULT_PUZZLES_PATH = Path(__file__).resolve().parent.parent / "data" / "puzzles.yaml"


@dataclass(frozen=True)
class Puzzle:
    id: int
    word: str
    family: Family
    clue: str
    tag: str


def is_unlocked(puzzle_id: int, solved_ids: Collection[int]) -> bool:
    """Level 1 is always open; level N opens once level N-1 is solved."""
    if puzzle_id == 1:
        return True
    return (puzzle_id - 1) in solved_ids


class PuzzleRepository:
    """Ordered puzzle list loaded from YAML."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_PUZZLES_PATH
        self._puzzles = self._load_puzzles()

    @classmethod
    def from_puzzles(cls, puzzles: Iterable[Puzzle]) -> "PuzzleRepository":
        """Build a repository from puzzles already in memory."""
        repo = cls.__new__(cls)
        repo._path = None
        repo._puzzles = _index_puzzles(list(puzzles), source="puzzle list")
        return repo

    def all(self) -> List[Puzzle]:
        return list(self._puzzles.values())

    def get(self, puzzle_id: int) -> Puzzle:
        return self._puzzles[puzzle_id]

    def find(self, puzzle_id: int) -> Optional[Puzzle]:
        return self._puzzles.get(puzzle_id)

    def first(self) -> Puzzle:
        return self._puzzles[1]

    def next_after(self, puzzle_id: int) -> Optional[Puzzle]:
        return self._puzzles.get(puzzle_id + 1)

    def __len__(self) -> int:
        return len(self._puzzles)

    def _load_puzzles(self) -> Dict[int, Puzzle]:
        if not self._path.exists():
            raise FileNotFoundError(f"Puzzle file not found: {self._path}")

        name = self._path.name
        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict):
            raise ValueError(f"{name}: expected YAML with a 'puzzles' list")
        entries = raw.get("puzzles")
        if not isinstance(entries, list) or not entries:
            raise ValueError(f"{name}: 'puzzles' must be a non-empty list")
        puzzles = [_parse_entry(entry, name, n) for n, entry in enumerate(entries, start=1)]
        return _index_puzzles(puzzles, source=name)


def _parse_entry(entry: object, source: str, position: int) -> Puzzle:
    where = f"{source}: puzzle #{position}"
    if not isinstance(entry, dict):
        raise ValueError(f"{where}: expected a mapping")
    for field_name in ("id", "word", "family", "clue", "tag"):
        if entry.get(field_name) is None:
            raise ValueError(f"{where}: missing '{field_name}'")

    puzzle_id = entry["id"]
    if isinstance(puzzle_id, bool) or not isinstance(puzzle_id, int):
        raise ValueError(f"{where}: 'id' must be an integer")
    family = Family.parse(entry["family"])
    if family is None:
        raise ValueError(f"{where}: unknown family {entry['family']!r}")
    return Puzzle(
        id=puzzle_id,
        word=_normalize_word(entry["word"], where),
        family=family,
        clue=str(entry["clue"]).strip(),
        tag=str(entry["tag"]).strip(),
    )


def _normalize_word(word: object, where: str) -> str:
    text = str(word).strip().upper()
    if not text or any(ch not in LETTERS for ch in text):
        raise ValueError(f"{where}: word must contain only letters A-Z, got {word!r}")
    return text


def _index_puzzles(puzzles: List[Puzzle], source: str) -> Dict[int, Puzzle]:
    if not puzzles:
        raise ValueError(f"{source}: no puzzles defined")
    ordered = sorted(puzzles, key=lambda p: p.id)
    for expected, puzzle in enumerate(ordered, start=1):
        if puzzle.id != expected:
            raise ValueError(
                f"{source}: puzzle ids must run 1..{len(ordered)} without gaps; "
                f"expected {expected}, found {puzzle.id}"
            )
    return {p.id: p for p in ordered}


# ---------------------------------------------------------------------------
# Authoring helpers
# ---------------------------------------------------------------------------

def _next_id(existing: Iterable[Puzzle]) -> int:
    return max((p.id for p in existing), default=0) + 1


def make_puzzle(
    word: str,
    family: object,
    tag: str,
    clue: str,
    existing: Iterable[Puzzle] = (),
) -> Puzzle:
    """Create the next puzzle after ``existing`` (id = highest id + 1)."""
    fam = Family.parse(family)  # type: ignore[arg-type]
    if fam is None:
        raise ValueError(f"unknown family {family!r}")
    return Puzzle(
        id=_next_id(existing),
        word=_normalize_word(word, "make_puzzle"),
        family=fam,
        clue=clue,
        tag=tag,
    )


def make_puzzle_set(
    words: Iterable[str],
    existing: Iterable[Puzzle] = (),
    *,
    family: object = Family.F1,
    tag: str = "Word",
    clue_template: Callable[[str], str] = lambda word: f"A word about {word.lower()}.",
) -> List[Puzzle]:
    """Create consecutive puzzles for ``words`` sharing family and tag."""
    fam = Family.parse(family)  # type: ignore[arg-type]
    if fam is None:
        raise ValueError(f"unknown family {family!r}")
    start = _next_id(existing)
    return [
        Puzzle(
            id=start + n,
            word=_normalize_word(word, "make_puzzle_set"),
            family=fam,
            clue=clue_template(word),
            tag=tag,
        )
        for n, word in enumerate(words)
    ]
