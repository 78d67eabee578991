"""Qt rendering of rune glyphs."""

from __future__ import annotations

import random
from typing import Optional

from PySide6.QtCore import QPointF, QRectF, QSize, Qt, Signal
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from veilcode.core.glyphs import Family, generate
from veilcode.core.render import IDENTITY, RenderTransform, display_transform
from veilcode.core.runes import Rune
from veilcode.core.strokes import VIEWPORT_SIZE, Circle, Glyph, Line, Path, Polyline, Rect
from veilcode.ui.colors import VeilColors


def stroke_path(stroke) -> QPainterPath:
    """Build a QPainterPath for one stroke in viewport coordinates."""
    path = QPainterPath()
    if isinstance(stroke, Line):
        path.moveTo(stroke.x1, stroke.y1)
        path.lineTo(stroke.x2, stroke.y2)
    elif isinstance(stroke, Circle):
        path.addEllipse(QPointF(stroke.cx, stroke.cy), stroke.r, stroke.r)
    elif isinstance(stroke, Rect):
        path.addRoundedRect(QRectF(stroke.x, stroke.y, stroke.width, stroke.height), stroke.rx, stroke.ry)
    elif isinstance(stroke, Polyline):
        if stroke.points:
            first, *rest = stroke.points
            path.moveTo(*first)
            for point in rest:
                path.lineTo(*point)
            if stroke.closed:
                path.closeSubpath()
    elif isinstance(stroke, Path):
        for command in stroke.commands:
            args = command.args
            if command.op == "M":
                path.moveTo(*args)
            elif command.op == "L":
                path.lineTo(*args)
            elif command.op == "Q":
                path.quadTo(args[0], args[1], args[2], args[3])
            elif command.op == "Z":
                path.closeSubpath()
    return path


def paint_glyph(
    painter: QPainter,
    glyph: Glyph,
    target: QRectF,
    transform: RenderTransform = IDENTITY,
    color: str = VeilColors.INK,
    width: float = 4.0,
) -> None:
    """Draw ``glyph`` scaled from the 100x100 viewport into ``target``."""
    if not glyph:
        return
    side = min(target.width(), target.height())
    painter.save()
    painter.setRenderHint(QPainter.Antialiasing, True)
    painter.translate(target.center())
    painter.scale(side / VIEWPORT_SIZE, side / VIEWPORT_SIZE)
    painter.rotate(transform.rotation_degrees)
    painter.scale(transform.scale, transform.scale)
    painter.translate(-VIEWPORT_SIZE / 2, -VIEWPORT_SIZE / 2)
    pen = QPen(QColor(color))
    pen.setWidthF(width)
    pen.setCapStyle(Qt.RoundCap)
    pen.setJoinStyle(Qt.RoundJoin)
    painter.setPen(pen)
    painter.setBrush(Qt.NoBrush)
    for stroke in glyph:
        painter.drawPath(stroke_path(stroke))
    painter.restore()


class GlyphWidget(QWidget):
    """Square widget showing one rune. Clickable when ``clicked`` is connected."""

    clicked = Signal()

    def __init__(
        self,
        rune: Optional[Rune] = None,
        *,
        size: int = 56,
        jitter_degrees: float = 4.0,
        rng: Optional[random.Random] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._rune: Optional[Rune] = None
        self._glyph: Glyph = ()
        self._transform = IDENTITY
        self._jitter = jitter_degrees
        self._rng = rng
        self._color = VeilColors.INK
        self._size = size
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setFixedSize(size, size)
        self.set_rune(rune)

    def sizeHint(self) -> QSize:
        return QSize(self._size, self._size)

    @property
    def rune(self) -> Optional[Rune]:
        return self._rune

    @property
    def glyph(self) -> Glyph:
        return self._glyph

    @property
    def transform(self) -> RenderTransform:
        return self._transform

    def set_rune(self, rune: Optional[Rune]) -> None:
        self._rune = rune
        if rune is None:
            self._glyph = ()
            self._transform = IDENTITY
            self.setAccessibleName("Empty")
            self.update()
            return
        self.show_glyph(generate(rune.letter, rune.family), rune.family)
        self.setAccessibleName(f"Rune {rune.letter} in {rune.family.label}")

    def show_glyph(self, glyph: Glyph, family: Family) -> None:
        """Draw an already generated glyph with the display transform of ``family``."""
        self._glyph = glyph
        self._transform = display_transform(family, rng=self._rng, jitter_degrees=self._jitter)
        self.update()

    def set_color(self, color: str) -> None:
        self._color = color
        self.update()

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mousePressEvent(event)

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        painter = QPainter(self)
        pad = self.width() * 0.06
        target = QRectF(pad, pad, self.width() - 2 * pad, self.height() - 2 * pad)
        paint_glyph(painter, self._glyph, target, self._transform, color=self._color)
        painter.end()
