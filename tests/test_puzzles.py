"""Tests for veilcode.core.puzzles – YAML puzzle loading and unlock rules."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from veilcode.core.glyphs import Family
from veilcode.core.puzzles import (
    Puzzle,
    PuzzleRepository,
    is_unlocked,
    make_puzzle,
    make_puzzle_set,
)


def _write_yaml(path: Path, data) -> Path:
    path.write_text(yaml.dump(data, allow_unicode=True, default_flow_style=False), encoding="utf-8")
    return path


def _entry(n: int, word: str = "OPEN", family: str = "F1") -> dict:
    return {"id": n, "word": word, "family": family, "clue": f"clue {n}", "tag": f"tag {n}"}


# ---------------------------------------------------------------------------
# Puzzle dataclass
# ---------------------------------------------------------------------------

class TestPuzzleDataclass:
    def test_frozen(self):
        p = Puzzle(id=1, word="OPEN", family=Family.F1, clue="c", tag="t")
        with pytest.raises(AttributeError):
            p.word = "SHUT"  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Unlock chain
# ---------------------------------------------------------------------------

class TestIsUnlocked:
    def test_first_always_open(self):
        assert is_unlocked(1, set())
        assert is_unlocked(1, {5, 6})

    def test_locked_until_previous_solved(self):
        assert not is_unlocked(5, {1, 2, 3})
        assert is_unlocked(5, {1, 2, 3, 4})

    def test_no_skipping(self):
        # Only the direct predecessor counts.
        assert is_unlocked(5, {4})
        assert not is_unlocked(6, {1, 2, 3, 4})


# ---------------------------------------------------------------------------
# Bundled puzzle list
# ---------------------------------------------------------------------------

class TestDefaultPuzzles:
    def test_loads_ten(self):
        repo = PuzzleRepository()
        assert [p.id for p in repo.all()] == list(range(1, 11))

    def test_first_puzzle(self):
        first = PuzzleRepository().first()
        assert first.word == "OPEN"
        assert first.family is Family.F1
        assert first.tag == "Threshold"

    def test_words_are_letters(self):
        for puzzle in PuzzleRepository().all():
            assert puzzle.word.isalpha() and puzzle.word.isupper()


# ---------------------------------------------------------------------------
# PuzzleRepository – happy paths
# ---------------------------------------------------------------------------

class TestPuzzleRepositoryHappy:
    def test_sorted_by_id(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(2, "LOOK"), _entry(1)]})
        repo = PuzzleRepository(path)
        assert [p.word for p in repo.all()] == ["OPEN", "LOOK"]

    def test_word_uppercased(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(1, " door ")]})
        assert PuzzleRepository(path).get(1).word == "DOOR"

    def test_family_parsed(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(1, family="f6")]})
        assert PuzzleRepository(path).get(1).family is Family.F6

    def test_lookup_helpers(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(1), _entry(2, "LOOK")]})
        repo = PuzzleRepository(path)
        assert len(repo) == 2
        assert repo.find(3) is None
        assert repo.next_after(1).word == "LOOK"
        assert repo.next_after(2) is None
        with pytest.raises(KeyError):
            repo.get(3)

    def test_from_puzzles(self):
        repo = PuzzleRepository.from_puzzles([Puzzle(1, "KEY", Family.F2, "c", "t")])
        assert repo.first().word == "KEY"


# ---------------------------------------------------------------------------
# PuzzleRepository – error paths
# ---------------------------------------------------------------------------

class TestPuzzleRepositoryErrors:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PuzzleRepository(tmp_path / "nope.yaml")

    def test_empty_yaml(self, tmp_path: Path):
        (tmp_path / "p.yaml").write_text("", encoding="utf-8")
        with pytest.raises(ValueError, match="expected YAML"):
            PuzzleRepository(tmp_path / "p.yaml")

    def test_no_puzzles(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": []})
        with pytest.raises(ValueError, match="non-empty list"):
            PuzzleRepository(path)

    def test_missing_field(self, tmp_path: Path):
        entry = _entry(1)
        del entry["clue"]
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [entry]})
        with pytest.raises(ValueError, match="missing 'clue'"):
            PuzzleRepository(path)

    def test_bad_word(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(1, "OPEN 2")]})
        with pytest.raises(ValueError, match="only letters"):
            PuzzleRepository(path)

    def test_unknown_family(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(1, family="F9")]})
        with pytest.raises(ValueError, match="unknown family"):
            PuzzleRepository(path)

    def test_gap_in_ids(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(1), _entry(3)]})
        with pytest.raises(ValueError, match="without gaps"):
            PuzzleRepository(path)

    def test_duplicate_ids(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(1), _entry(1)]})
        with pytest.raises(ValueError, match="without gaps"):
            PuzzleRepository(path)

    def test_ids_must_start_at_one(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry(2)]})
        with pytest.raises(ValueError, match="expected 1"):
            PuzzleRepository(path)

    def test_non_integer_id(self, tmp_path: Path):
        path = _write_yaml(tmp_path / "p.yaml", {"puzzles": [_entry("one")]})  # type: ignore[arg-type]
        with pytest.raises(ValueError, match="'id' must be an integer"):
            PuzzleRepository(path)


# ---------------------------------------------------------------------------
# Authoring helpers
# ---------------------------------------------------------------------------

class TestAuthoringHelpers:
    def test_make_puzzle_next_id(self):
        existing = PuzzleRepository().all()
        puzzle = make_puzzle("ember", "F6", "Fire", "It outlives the flame.", existing)
        assert puzzle.id == 11
        assert puzzle.word == "EMBER"
        assert puzzle.family is Family.F6

    def test_make_puzzle_first(self):
        assert make_puzzle("ONE", Family.F1, "t", "c").id == 1

    def test_make_puzzle_bad_family(self):
        with pytest.raises(ValueError):
            make_puzzle("ONE", "F0", "t", "c")

    def test_make_puzzle_set(self):
        existing = [Puzzle(1, "OPEN", Family.F1, "c", "t")]
        made = make_puzzle_set(["moon", "tide"], existing, family="F3")
        assert [(p.id, p.word) for p in made] == [(2, "MOON"), (3, "TIDE")]
        assert made[0].clue == "A word about moon."
        assert made[0].tag == "Word"
        assert all(p.family is Family.F3 for p in made)
