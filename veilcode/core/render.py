"""Display-only transforms applied when a glyph is drawn.

The Monolith family is shown with a small random tilt and Veil glyphs are
drawn slightly enlarged. Neither affects glyph identity or rune matching.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

from veilcode.core.glyphs import Family
from veilcode.core.strokes import Point, VIEWPORT_SIZE

DEFAULT_JITTER_DEGREES = 4.0
VEIL_SCALE = 1.25

_CENTER = VIEWPORT_SIZE / 2


@dataclass(frozen=True)
class RenderTransform:
    rotation_degrees: float = 0.0
    scale: float = 1.0

    @property
    def is_identity(self) -> bool:
        return self.rotation_degrees == 0.0 and self.scale == 1.0

    def apply(self, x: float, y: float) -> Point:
        """Map a viewport point, rotating then scaling about the center."""
        dx = (x - _CENTER) * self.scale
        dy = (y - _CENTER) * self.scale
        theta = math.radians(self.rotation_degrees)
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        return (_CENTER + dx * cos_t - dy * sin_t, _CENTER + dx * sin_t + dy * cos_t)


IDENTITY = RenderTransform()


def display_transform(
    family: object,
    rng: Optional[random.Random] = None,
    jitter_degrees: float = DEFAULT_JITTER_DEGREES,
) -> RenderTransform:
    """Pick the cosmetic transform for one on-screen glyph of ``family``."""
    fam = Family.parse(family)  # type: ignore[arg-type]
    if fam is Family.F1:
        source = rng if rng is not None else random
        return RenderTransform(rotation_degrees=(source.random() - 0.5) * jitter_degrees)
    if fam is Family.F2:
        return RenderTransform(scale=VEIL_SCALE)
    return IDENTITY
