from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from veilcode.core.glyphs import Family, generate, normalize_letter
from veilcode.core.strokes import Glyph

# Rune keyboard rows as laid out on the game screen.
KEYBOARD_ROWS: Tuple[str, ...] = ("ABCDEFGHI", "JKLMNOPQR", "STUVWXYZ")


@dataclass(frozen=True)
class Rune:
    """A letter drawn in a specific family. Two runes match iff their keys do."""

    letter: str
    family: Family

    def __post_init__(self) -> None:
        letter = normalize_letter(self.letter)
        family = Family.parse(self.family)  # type: ignore[arg-type]
        if letter is None:
            raise ValueError(f"invalid rune letter {self.letter!r}")
        if family is None:
            raise ValueError(f"unknown family {self.family!r}")
        object.__setattr__(self, "letter", letter)
        object.__setattr__(self, "family", family)

    @property
    def key(self) -> str:
        return f"{self.family.value}_{self.letter}"

    def glyph(self) -> Glyph:
        return generate(self.letter, self.family)


def make_rune(letter: object, family: object) -> Optional[Rune]:
    """Build a rune, normalizing case. Invalid input gives None."""
    ch = normalize_letter(letter)
    fam = Family.parse(family)  # type: ignore[arg-type]
    if ch is None or fam is None:
        return None
    return Rune(letter=ch, family=fam)


def solution_runes(word: str, family: object) -> Tuple[Rune, ...]:
    """The rune sequence that spells ``word`` in one family.

    Characters that are not letters are skipped.
    """
    runes = []
    for ch in word:
        rune = make_rune(ch, family)
        if rune is not None:
            runes.append(rune)
    return tuple(runes)
