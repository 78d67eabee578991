"""Stroke primitives shared by the glyph tables, the generator and renderers.

All coordinates live in a 100x100 logical viewport. Strokes are frozen so a
glyph (a tuple of strokes) can be cached and compared safely.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Tuple, Union

Point = Tuple[float, float]

VIEWPORT_SIZE = 100.0

# Number of arguments each supported path command consumes.
_PATH_ARITY = {"M": 2, "L": 2, "Q": 4, "Z": 0}
_PATH_TOKEN = re.compile(r"[MLQZ]|-?\d*\.?\d+(?:[eE][-+]?\d+)?")


def format_number(value: float) -> str:
    """Compact SVG-style number formatting (``50`` rather than ``50.0``)."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(value, ".6g")


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    rx: float = 0.0
    ry: float = 0.0


@dataclass(frozen=True)
class Polyline:
    points: Tuple[Point, ...]
    closed: bool = False

    @classmethod
    def parse(cls, points: str, closed: bool = False) -> "Polyline":
        """Build from an SVG ``points`` attribute such as ``"50,26 30,70"``."""
        parsed = []
        for pair in points.split():
            x, y = pair.split(",")
            parsed.append((float(x), float(y)))
        return cls(points=tuple(parsed), closed=closed)

    @property
    def points_text(self) -> str:
        return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in self.points)


@dataclass(frozen=True)
class PathCommand:
    """One path instruction: ``M``/``L`` take a point, ``Q`` a control and
    end point, ``Z`` closes the current subpath."""

    op: str
    args: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        arity = _PATH_ARITY.get(self.op)
        if arity is None:
            raise ValueError(f"unsupported path command: {self.op!r}")
        if len(self.args) != arity:
            raise ValueError(f"path command {self.op} expects {arity} arguments, got {len(self.args)}")


@dataclass(frozen=True)
class Path:
    commands: Tuple[PathCommand, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, d: str) -> "Path":
        """Parse the subset of SVG path data used by the glyph art (M, L, Q, Z).

        Extra coordinate groups after a command repeat it, and extra groups
        after ``M`` become ``L`` commands, as in SVG.
        """
        commands = []
        op = None
        pending: list[float] = []
        for token in _PATH_TOKEN.findall(d):
            if token in _PATH_ARITY:
                if pending:
                    raise ValueError(f"dangling coordinates in path data: {d!r}")
                op = token
                if op == "Z":
                    commands.append(PathCommand("Z"))
                continue
            if op is None or op == "Z":
                raise ValueError(f"path data must start with a command: {d!r}")
            pending.append(float(token))
            if len(pending) == _PATH_ARITY[op]:
                commands.append(PathCommand(op, tuple(pending)))
                pending = []
                if op == "M":
                    op = "L"
        if pending:
            raise ValueError(f"dangling coordinates in path data: {d!r}")
        return cls(commands=tuple(commands))

    @property
    def d(self) -> str:
        parts = []
        for command in self.commands:
            coords = " ".join(format_number(a) for a in command.args)
            parts.append(f"{command.op}{coords}")
        return " ".join(parts)

    @property
    def closed(self) -> bool:
        return bool(self.commands) and self.commands[-1].op == "Z"

    def points(self) -> Iterator[Point]:
        """Yield every anchor and control point, in command order."""
        for command in self.commands:
            args = command.args
            for k in range(0, len(args), 2):
                yield (args[k], args[k + 1])


Stroke = Union[Line, Circle, Rect, Polyline, Path]
Glyph = Tuple[Stroke, ...]
