"""Deterministic rune glyph generation for the six families (F1-F6).

Every family maps a letter index ``i`` (A=0 .. Z=25) to a tuple of strokes.
Generation is pure: no randomness, no state. Cosmetic display jitter is
applied by renderers (see :mod:`veilcode.core.render`), never here.
"""

from __future__ import annotations

import math
import string
from enum import Enum
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Tuple, Union

from veilcode.core.glyph_tables import MONOLITH, ORBIT
from veilcode.core.strokes import Circle, Glyph, Line, Path, PathCommand, Point, Polyline

LETTERS = string.ascii_uppercase


class Family(str, Enum):
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"

    @property
    def label(self) -> str:
        return _FAMILY_LABELS[self]

    @classmethod
    def parse(cls, value: Union["Family", str, None]) -> Optional["Family"]:
        """Return the family for an id like ``"F3"``, or None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().upper())
        except ValueError:
            return None


_FAMILY_LABELS = {
    Family.F1: "Monolith",
    Family.F2: "Veil",
    Family.F3: "Orbit",
    Family.F4: "Labyrinth",
    Family.F5: "Starburst",
    Family.F6: "Constellation",
}


def normalize_letter(letter: object) -> Optional[str]:
    """Upper-case a single A-Z letter; anything else yields None."""
    if not isinstance(letter, str) or len(letter) != 1:
        return None
    ch = letter.upper()
    if ch not in LETTERS:
        return None
    return ch


def letter_index(letter: str) -> int:
    return ord(letter) - ord("A")


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# ---------------------------------------------------------------------------
# F2: Veil
# ---------------------------------------------------------------------------

def veil(i: int) -> Glyph:
    """One flowing quadratic path plus 1-3 short hooks around the center."""
    segments = 3 + i % 3
    x: float = 28 + i % 6
    y: float = 24 + i % 5
    commands = [PathCommand("M", (x, y))]
    for s in range(segments):
        dx = 12 + (i + s) % 5
        dy = (9 if s % 2 == 0 else -9) + ((i + s * 3) % 3 - 1)
        cx = x + dx * 0.5
        cy = y + dy * 0.6 * (1 if s % 2 == 0 else -1)
        x = _clamp(x + dx, 20, 80)
        y = _clamp(y + dy, 20, 80)
        commands.append(PathCommand("Q", (cx, cy, x, y)))

    strokes: List = [Path(tuple(commands))]
    for h in range(1 + i % 3):
        angle = math.radians((i * 13 + h * 47) % 360)
        length = 6 + (i + h) % 4
        hx = 50 + math.cos(angle) * (8 + i % 6)
        hy = 50 + math.sin(angle) * (8 + h * 3)
        hx2 = hx + math.cos(angle + math.pi / 2) * length
        hy2 = hy + math.sin(angle + math.pi / 2) * length
        strokes.append(Line(hx, hy, hx2, hy2))
    return tuple(strokes)


# ---------------------------------------------------------------------------
# F4: Labyrinth
# ---------------------------------------------------------------------------

LABYRINTH_POINTS: Tuple[Point, ...] = (
    (30, 30),
    (50, 25),
    (70, 30),
    (75, 50),
    (70, 70),
    (50, 75),
    (30, 70),
    (25, 50),
    (50, 50),
)


def labyrinth(i: int) -> Glyph:
    """A straight-line walk over the octagon-plus-center reference points."""
    pts = LABYRINTH_POINTS
    idx = i % len(pts)
    commands = [PathCommand("M", pts[idx])]
    for s in range(4 + i % 4):
        stride = 1 + (i + s * 2) % 3
        idx = (idx + stride) % len(pts)
        commands.append(PathCommand("L", pts[idx]))
    if i % 2 == 0:
        commands.append(PathCommand("Z"))
    return (Path(tuple(commands)),)


# ---------------------------------------------------------------------------
# F5: Starburst
# ---------------------------------------------------------------------------

STAR_CENTER: Point = (50.0, 50.0)


def starburst(i: int) -> Glyph:
    """Radial rays with per-ray jitter; odd letters add a star outline."""
    cx, cy = STAR_CENTER
    rays = 4 + i % 5
    base = math.radians((i * 19) % 360)
    spread = 2 * math.pi / rays
    strokes: List = []
    for r in range(rays):
        offset = math.radians((i + r * 7) % 15 - 7)
        angle = base + r * spread + offset
        inner = 8 + (i + r) % 5
        outer = 22 + (i * 2 + r) % 9
        strokes.append(
            Line(
                cx + math.cos(angle) * inner,
                cy + math.sin(angle) * inner,
                cx + math.cos(angle) * outer,
                cy + math.sin(angle) * outer,
            )
        )
    if i % 2 == 1:
        outline = []
        for r in range(rays):
            angle = base + r * spread
            length = 20 + (i + r) % 7
            outline.append((cx + math.cos(angle) * length, cy + math.sin(angle) * length))
        strokes.append(Polyline(tuple(outline), closed=True))
    strokes.append(Circle(cx, cy, 3))
    return tuple(strokes)


# ---------------------------------------------------------------------------
# F6: Constellation
# ---------------------------------------------------------------------------

def constellation_points(i: int) -> Tuple[Point, ...]:
    count = 3 + i % 4
    angle_base = (i * 21) % 360
    radius = 14 + i % 8
    points = []
    for n in range(count):
        a = math.radians(angle_base + n * (360 / count))
        x = 50 + math.cos(a) * (radius + (6 if n % 2 else -4))
        y = 50 + math.sin(a) * (radius + (-5 if n % 3 else 5))
        points.append((x, y))
    return tuple(points)


def constellation(i: int) -> Glyph:
    """Star dots first, then the open chain of lines joining them."""
    points = constellation_points(i)
    dots = [Circle(x, y, 2.4) for x, y in points]
    links = [Line(a[0], a[1], b[0], b[1]) for a, b in zip(points, points[1:])]
    return tuple(dots + links)


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_GENERATORS: Dict[Family, Callable[[int], Glyph]] = {
    Family.F1: lambda i: MONOLITH[LETTERS[i]],
    Family.F2: veil,
    Family.F3: lambda i: ORBIT[LETTERS[i]],
    Family.F4: labyrinth,
    Family.F5: starburst,
    Family.F6: constellation,
}


@lru_cache(maxsize=None)
def _generate(letter: str, family: Family) -> Glyph:
    return _GENERATORS[family](letter_index(letter))


def generate(letter: object, family: object) -> Glyph:
    """Return the glyph for ``letter`` in ``family``.

    Unknown letters or families produce an empty glyph so that callers can
    always render something.
    """
    ch = normalize_letter(letter)
    fam = Family.parse(family)  # type: ignore[arg-type]
    if ch is None or fam is None:
        return ()
    return _generate(ch, fam)


def generate_alphabet(family: object) -> Dict[str, Glyph]:
    """All 26 glyphs of a family keyed by letter, A to Z."""
    return {letter: generate(letter, family) for letter in LETTERS}
