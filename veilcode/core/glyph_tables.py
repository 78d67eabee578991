"""Hand-drawn glyph art for the Monolith (F1) and Orbit (F3) families.

These shapes are artwork, not the output of a rule; keep them as data.
"""

from __future__ import annotations

from typing import Dict

from veilcode.core.strokes import Circle, Glyph, Line, Path, Polyline, Rect

P = Path.parse
PL = Polyline.parse


MONOLITH: Dict[str, Glyph] = {
    "A": (
        Circle(50, 50, 26),
        PL("50,26 30,70 70,70 50,26"),
    ),
    "B": (
        PL("35,20 20,40 30,60 50,65 65,45 55,25 35,20"),
        PL("45,30 32,46 40,58 52,60 60,47 53,33 45,30"),
    ),
    "C": (
        P("M70 25 Q40 15 25 35 Q15 50 25 65 Q40 85 65 75 Q50 70 48 60"),
        Circle(55, 55, 4),
    ),
    "D": (
        Rect(25, 25, 50, 50, 8, 8),
        P("M25 25 L75 75"),
        P("M35 35 L65 65"),
    ),
    "E": (
        P("M25 70 Q50 40 75 70"),
        P("M30 60 Q50 35 70 60"),
        P("M35 52 Q50 32 65 52"),
    ),
    "F": (
        PL("40,20 55,30 40,40 55,50 40,60 55,70 40,80"),
        Line(60, 25, 75, 35),
    ),
    "G": (
        P("M35 25 Q20 40 22 55 Q24 75 42 85 Q60 90 75 72 Q85 60 80 42 Q75 25 55 20 Q45 18 35 25 Z"),
        Line(55, 20, 60, 10),
        Line(60, 10, 70, 8),
    ),
    "H": (
        P("M45 20 Q40 40 45 60 Q50 80 45 90"),
        Circle(62, 50, 14),
        Line(62, 36, 62, 64),
    ),
    "I": (
        PL("50,20 30,40 50,60 70,40 50,20"),
        P("M50 60 Q48 72 40 80 Q35 85 33 90"),
    ),
    "J": (
        PL("35,25 50,40 65,25"),
        PL("50,40 50,60 40,75"),
        PL("50,60 60,75"),
    ),
    "K": (
        P("M30 25 Q20 50 30 75 Q40 90 55 85 Q70 80 78 60 Q83 45 78 30 Q72 15 55 15 Q40 15 30 25"),
        Line(50, 25, 50, 75),
    ),
    "L": (
        Circle(42, 45, 18),
        Circle(58, 55, 18),
        Line(30, 70, 70, 30),
    ),
    "M": (
        PL("30,80 40,35 50,50 60,35 70,80"),
        PL("40,35 50,25 60,35"),
    ),
    "N": (
        Rect(25, 25, 50, 40, 6, 6),
        Rect(32, 32, 36, 26, 4, 4),
        P("M61 32 L68 18"),
    ),
    "O": (
        P("M20 50 Q35 25 50 25 Q65 25 80 50 Q65 75 50 75 Q35 75 20 50 Z"),
        Circle(50, 50, 10),
        Circle(50, 50, 4),
    ),
    "P": (
        Rect(28, 25, 44, 40, 4, 4),
        Line(50, 25, 50, 65),
        P("M28 65 L40 80 60 80 72 65"),
    ),
    "Q": (
        Circle(50, 45, 22),
        P("M60 60 Q70 75 75 85"),
    ),
    "R": (
        PL("50,20 35,40 50,60 65,40 50,20"),
        PL("35,40 32,65 50,80 68,65 65,40"),
    ),
    "S": (
        P("M70 22 Q48 18 40 30 Q32 40 40 48 Q50 58 42 68 Q34 78 25 78"),
        Circle(72, 30, 4),
    ),
    "T": (
        Circle(50, 50, 23),
        Line(32, 39, 68, 61),
        Line(35, 68, 65, 68),
    ),
    "U": (
        P("M28 70 Q30 30 50 25 Q70 30 72 70"),
        P("M38 62 Q50 50 62 62"),
    ),
    "V": (
        Line(50, 22, 50, 78),
        Line(25, 50, 75, 50),
        Line(32, 32, 68, 68),
        Line(68, 32, 32, 68),
    ),
    "W": (
        P("M25 55 Q25 35 40 35 Q55 35 55 55 Q55 75 40 75 Q25 75 25 55 Z"),
        P("M75 55 Q75 35 60 35 Q45 35 45 55 Q45 75 60 75 Q75 75 75 55 Z"),
    ),
    "X": (
        P("M30 30 Q50 20 55 25 Q60 30 55 40 Q50 50 35 60 Q25 68 22 78"),
        P("M70 30 Q50 20 45 25 Q40 30 45 40 Q50 50 65 60 Q75 68 78 78"),
    ),
    "Y": (
        Circle(50, 50, 20),
        Line(50, 30, 50, 15),
        Line(35, 60, 25, 75),
        Line(65, 60, 75, 75),
    ),
    "Z": (
        Rect(28, 28, 44, 44, 4, 4),
        P("M28 72 L72 28"),
        Circle(50, 50, 4),
    ),
}


ORBIT: Dict[str, Glyph] = {
    "A": (
        Circle(50, 50, 22),
        Circle(50, 50, 10),
        Circle(68, 40, 3),
        P("M28 50 Q50 30 72 50"),
    ),
    "B": (
        Circle(50, 50, 18),
        Circle(60, 40, 8),
        Circle(38, 60, 4),
        P("M32 40 Q50 70 68 40"),
    ),
    "C": (
        Circle(50, 50, 20),
        Circle(50, 50, 6),
        Circle(34, 44, 3),
        Circle(66, 56, 3),
        P("M30 58 Q50 30 70 42"),
    ),
    "D": (
        Circle(50, 50, 19),
        Circle(62, 54, 7),
        Circle(40, 36, 3),
        P("M32 52 Q50 70 68 48"),
    ),
    "E": (
        Circle(50, 48, 18),
        Circle(50, 48, 8),
        Circle(36, 60, 4),
        P("M34 38 Q50 30 66 38"),
    ),
    "F": (
        Circle(50, 50, 21),
        Circle(60, 50, 6),
        Circle(40, 50, 6),
        Circle(50, 34, 3),
        P("M30 60 Q50 72 70 60"),
    ),
    "G": (
        Circle(50, 50, 20),
        Circle(56, 60, 7),
        Circle(40, 44, 4),
        P("M32 48 Q50 28 68 52"),
    ),
    "H": (
        Circle(48, 50, 18),
        Circle(60, 42, 10),
        Circle(40, 60, 3),
        P("M34 44 Q50 70 70 54"),
    ),
    "I": (
        Circle(50, 50, 17),
        Circle(50, 50, 5),
        Circle(64, 48, 3),
        Circle(42, 64, 3),
        P("M32 40 Q50 32 68 44"),
    ),
    "J": (
        Circle(50, 50, 19),
        Circle(44, 40, 8),
        Circle(62, 58, 4),
        P("M30 52 Q50 30 70 52"),
    ),
    "K": (
        Circle(50, 50, 22),
        Circle(50, 50, 9),
        Circle(36, 46, 3),
        Circle(66, 54, 3),
        P("M32 60 Q50 32 68 40"),
    ),
    "L": (
        Circle(50, 50, 18),
        Circle(60, 60, 6),
        Circle(40, 40, 6),
        P("M32 50 Q50 70 68 50"),
    ),
    "M": (
        Circle(50, 48, 20),
        Circle(50, 48, 7),
        Circle(64, 60, 3),
        Circle(36, 36, 3),
        P("M30 56 Q50 30 70 40"),
    ),
    "N": (
        Circle(50, 52, 19),
        Circle(42, 44, 7),
        Circle(62, 60, 4),
        P("M34 48 Q50 72 68 44"),
    ),
    "O": (
        Circle(50, 50, 21),
        Circle(50, 50, 11),
        Circle(34, 50, 3),
        Circle(66, 50, 3),
        P("M30 40 Q50 30 70 40"),
    ),
    "P": (
        Circle(50, 52, 18),
        Circle(60, 46, 8),
        Circle(40, 62, 3),
        P("M32 46 Q50 30 66 60"),
    ),
    "Q": (
        Circle(50, 50, 20),
        Circle(50, 50, 8),
        Circle(64, 44, 4),
        P("M40 60 L60 76"),
    ),
    "R": (
        Circle(50, 50, 18),
        Circle(40, 60, 7),
        Circle(60, 40, 4),
        P("M32 52 Q50 30 70 52"),
    ),
    "S": (
        Circle(50, 50, 22),
        Circle(50, 50, 9),
        Circle(38, 44, 3),
        Circle(64, 58, 3),
        P("M30 58 Q50 32 70 46"),
    ),
    "T": (
        Circle(48, 50, 19),
        Circle(60, 54, 7),
        Circle(40, 38, 4),
        P("M32 46 Q50 72 68 46"),
    ),
    "U": (
        Circle(50, 48, 18),
        Circle(50, 48, 6),
        Circle(64, 54, 3),
        Circle(36, 54, 3),
        P("M32 38 Q50 30 68 38"),
    ),
    "V": (
        Circle(50, 50, 20),
        Circle(58, 40, 8),
        Circle(42, 60, 3),
        P("M30 52 Q50 70 70 52"),
    ),
    "W": (
        Circle(50, 50, 21),
        Circle(50, 50, 7),
        Circle(36, 44, 3),
        Circle(64, 44, 3),
        Circle(50, 66, 3),
        P("M30 40 Q50 30 70 40"),
    ),
    "X": (
        Circle(50, 50, 18),
        Circle(60, 60, 6),
        Circle(40, 40, 3),
        Circle(36, 62, 3),
        P("M32 50 Q50 70 68 48"),
    ),
    "Y": (
        Circle(50, 50, 19),
        Circle(50, 50, 5),
        Circle(62, 40, 4),
        Circle(38, 60, 4),
        P("M30 56 Q50 30 70 44"),
    ),
    "Z": (
        Circle(50, 50, 22),
        Circle(50, 50, 9),
        Circle(36, 50, 3),
        Circle(64, 40, 3),
        P("M30 60 Q50 32 70 38"),
    ),
}
