"""Level selection UI: LevelCard and LevelMapWidget."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import (
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from veilcode.ui.colors import VeilColors, blend_hex
from veilcode.ui.models import LevelState


def star_text(stars: int) -> str:
    return "★" * stars + "☆" * (3 - stars)


class LevelCard(QWidget):
    """A clickable level node: number, tag, stars and a lock badge."""

    def __init__(
        self,
        *,
        base_color: str,
        on_click: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._base_color = base_color
        self._on_click = on_click
        self._level_id: int = 0
        self._unlocked: bool = True

        self.setObjectName("levelCard")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_Hover, True)
        self.setCursor(Qt.PointingHandCursor)
        self.setFixedHeight(84)

        self._dot = QLabel("")
        self._dot.setObjectName("levelCardDot")
        self._dot.setAlignment(Qt.AlignCenter)
        self._dot.setFixedSize(48, 48)

        self._title = QLabel("")
        self._title.setObjectName("levelCardTitle")
        self._tag = QLabel("")
        self._tag.setObjectName("levelCardTag")
        self._stars = QLabel("")
        self._stars.setObjectName("levelCardStars")

        info = QVBoxLayout()
        info.setSpacing(2)
        info.addWidget(self._title)
        info.addWidget(self._tag)
        info.addWidget(self._stars)

        self._lock_badge = QLabel("🔒")
        self._lock_badge.setObjectName("levelCardLockBadge")
        self._lock_badge.setAlignment(Qt.AlignCenter)
        self._lock_badge.setFixedSize(28, 28)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 10, 14, 10)
        layout.setSpacing(14)
        layout.addWidget(self._dot, 0, Qt.AlignVCenter)
        layout.addLayout(info, 1)
        layout.addWidget(self._lock_badge, 0, Qt.AlignVCenter)

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(22)
        shadow.setOffset(0, 6)
        shadow.setColor(QColor(0, 0, 0, 110))
        self.setGraphicsEffect(shadow)

    def _apply_styles(self, state: LevelState) -> None:
        base = self._base_color if state.unlocked else VeilColors.LOCKED
        top = blend_hex(base, "#FFFFFF", 0.10)
        bottom = blend_hex(base, "#000000", 0.35)
        border = VeilColors.ACCENT if state.is_current else VeilColors.CARD_BORDER
        self.setStyleSheet(
            f"""
            QWidget#levelCard {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
                    stop:0 {top},
                    stop:1 {bottom}
                );
                border-radius: 16px;
                border: 2px solid {border};
            }}
            QLabel#levelCardDot {{
                background: rgba(255, 255, 255, 0.18);
                color: {VeilColors.INK};
                border-radius: 24px;
                font-weight: 900;
                font-size: 18px;
            }}
            QLabel#levelCardTitle {{
                color: {VeilColors.INK};
                font-weight: 800;
                font-size: 14px;
            }}
            QLabel#levelCardTag {{
                color: rgba(255, 255, 255, 0.70);
                font-size: 12px;
            }}
            QLabel#levelCardStars {{
                color: {VeilColors.STAR_FILLED};
                font-size: 14px;
            }}
            QLabel#levelCardLockBadge {{
                background: rgba(255, 255, 255, 0.20);
                border-radius: 14px;
                font-size: 13px;
            }}
            """
        )

    def set_state(self, state: LevelState) -> None:
        self._level_id = state.puzzle.id
        self._unlocked = bool(state.unlocked)
        self._dot.setText("✓" if state.solved else str(state.puzzle.id))
        self._title.setText(f"Level {state.puzzle.id}")
        self._tag.setText(state.puzzle.tag)
        self._stars.setText(star_text(state.stars))
        self._lock_badge.setVisible(not self._unlocked)
        if self._unlocked:
            self.setToolTip(f"Level {state.puzzle.id} · {state.puzzle.tag}")
        else:
            self.setToolTip(f"Level {state.puzzle.id}\nSealed")
        self.setAccessibleName(f"Level {state.puzzle.id}, {state.puzzle.tag}")
        self._apply_styles(state)
        self.update()

    def mousePressEvent(self, event) -> None:
        if self._level_id:
            self._on_click(self._level_id)
        super().mousePressEvent(event)


class LevelMapWidget(QScrollArea):
    """Vertical journey of LevelCards joined by a curved connector."""

    def __init__(
        self,
        *,
        on_level_clicked: Callable[[int], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_level_clicked = on_level_clicked
        self._cards: list[LevelCard] = []

        self.setWidgetResizable(True)
        self.setFrameShape(QScrollArea.NoFrame)
        self.setStyleSheet("background: transparent;")

        self._canvas = _ConnectorCanvas(self._cards)
        self._layout = QVBoxLayout(self._canvas)
        self._layout.setContentsMargins(40, 16, 40, 16)
        self._layout.setSpacing(18)
        self._layout.addStretch(1)
        self.setWidget(self._canvas)

    def set_level_states(self, states: list[LevelState]) -> None:
        while len(self._cards) < len(states):
            idx = len(self._cards)
            card = LevelCard(
                base_color=VeilColors.LEVEL_PALETTE[idx % len(VeilColors.LEVEL_PALETTE)],
                on_click=self._on_level_clicked,
                parent=self._canvas,
            )
            self._cards.append(card)
            self._layout.insertWidget(idx, card)

        current: Optional[LevelCard] = None
        for i, state in enumerate(states):
            self._cards[i].show()
            self._cards[i].set_state(state)
            if state.is_current:
                current = self._cards[i]

        for j in range(len(states), len(self._cards)):
            self._cards[j].hide()

        if current is not None:
            self.ensureWidgetVisible(current)
        self._canvas.update()


class _ConnectorCanvas(QWidget):
    def __init__(self, cards: list[LevelCard], parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._cards = cards
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setStyleSheet("background: transparent;")

    def paintEvent(self, event) -> None:
        super().paintEvent(event)
        visible = [c for c in self._cards if c.isVisible()]
        if len(visible) < 2:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        pen = QPen(QColor(201, 162, 92, 90))
        pen.setWidth(4)
        pen.setCapStyle(Qt.RoundCap)
        painter.setPen(pen)

        for a, b in zip(visible, visible[1:]):
            ga, gb = a.geometry(), b.geometry()
            start = QPointF(ga.left() - 14, ga.center().y())
            end = QPointF(gb.left() - 14, gb.center().y())
            midy = (start.y() + end.y()) / 2.0
            path = QPainterPath(start)
            path.cubicTo(QPointF(start.x() - 18, midy), QPointF(end.x() - 18, midy), end)
            painter.drawPath(path)
