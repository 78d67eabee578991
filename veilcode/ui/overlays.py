"""In-window overlays: level success and the rune codex."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QFrame,
    QGraphicsDropShadowEffect,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QSizePolicy,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from veilcode.core.glyphs import Family, generate_alphabet
from veilcode.core.render import DEFAULT_JITTER_DEGREES
from veilcode.ui.colors import VeilColors, format_time
from veilcode.ui.glyph_widget import GlyphWidget
from veilcode.ui.level_cards import star_text

_BUTTON_STYLE = f"""
    QPushButton {{
        background: {VeilColors.ACCENT};
        color: #1a1206;
        padding: 10px 18px;
        border: none;
        border-radius: 14px;
        font-weight: 800;
        font-size: 13px;
    }}
    QPushButton:hover {{
        background: {VeilColors.ACCENT_LIGHT};
    }}
"""


class _Overlay(QWidget):
    """Dimmed backdrop with a centered card; clicking the backdrop closes it."""

    closed = Signal()

    def __init__(self, object_name: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        main_layout = QGridLayout(self)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        overlay_bg = QWidget(self)
        overlay_bg.setStyleSheet("background: rgba(0, 0, 0, 0.55);")
        overlay_bg.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        def on_overlay_click(_e) -> None:
            self.dismiss()

        overlay_bg.mousePressEvent = on_overlay_click
        main_layout.addWidget(overlay_bg, 0, 0)

        self.container = QFrame(self)
        self.container.setObjectName(object_name)
        self.container.setStyleSheet(
            f"""
            QFrame#{object_name} {{
                background: {VeilColors.BG_BOTTOM};
                border: 1px solid {VeilColors.CARD_BORDER};
                border-radius: 22px;
            }}
            """
        )
        shadow = QGraphicsDropShadowEffect(self.container)
        shadow.setBlurRadius(28)
        shadow.setOffset(0, 10)
        shadow.setColor(QColor(0, 0, 0, 140))
        self.container.setGraphicsEffect(shadow)
        main_layout.addWidget(self.container, 0, 0, Qt.AlignCenter)
        self.hide()

    def dismiss(self) -> None:
        self.hide()
        self.closed.emit()


class SuccessOverlay(_Overlay):
    """Shown when a level is solved: time, stars and where to go next."""

    next_requested = Signal()
    map_requested = Signal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__("successContainer", parent)
        self.container.setMinimumWidth(360)
        layout = QVBoxLayout(self.container)
        layout.setContentsMargins(32, 28, 32, 28)
        layout.setSpacing(14)

        title = QLabel("Revealed")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {VeilColors.ACCENT_LIGHT}; font-size: 26px; font-weight: 900;")
        layout.addWidget(title)

        self._word = QLabel("")
        self._word.setAlignment(Qt.AlignCenter)
        self._word.setStyleSheet(f"color: {VeilColors.INK}; font-size: 22px; letter-spacing: 6px;")
        layout.addWidget(self._word)

        self._stars = QLabel("")
        self._stars.setAlignment(Qt.AlignCenter)
        self._stars.setStyleSheet(f"color: {VeilColors.STAR_FILLED}; font-size: 34px;")
        layout.addWidget(self._stars)

        self._time = QLabel("")
        self._time.setAlignment(Qt.AlignCenter)
        self._time.setStyleSheet(f"color: {VeilColors.INK_MUTED}; font-size: 14px;")
        layout.addWidget(self._time)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)
        self._map_btn = QPushButton("Level map")
        self._map_btn.setStyleSheet(_BUTTON_STYLE)
        self._map_btn.clicked.connect(self.map_requested.emit)
        self._next_btn = QPushButton("Next level")
        self._next_btn.setStyleSheet(_BUTTON_STYLE)
        self._next_btn.clicked.connect(self.next_requested.emit)
        btn_row.addWidget(self._map_btn, 1)
        btn_row.addWidget(self._next_btn, 1)
        layout.addLayout(btn_row)

    def show_result(self, word: str, elapsed_seconds: float, stars: int, best_time: Optional[float], has_next: bool) -> None:
        self._word.setText(word)
        self._stars.setText(star_text(stars))
        text = f"Time {format_time(elapsed_seconds)}"
        if best_time is not None:
            text += f"  ·  Best {format_time(best_time)}"
        self._time.setText(text)
        self._next_btn.setVisible(has_next)


class CodexOverlay(_Overlay):
    """All 26 glyphs of every family, one tab per family, unlabeled."""

    def __init__(self, parent: Optional[QWidget] = None, jitter_degrees: float = DEFAULT_JITTER_DEGREES) -> None:
        super().__init__("codexContainer", parent)
        self._jitter = jitter_degrees
        self.container.setMinimumSize(620, 460)
        layout = QVBoxLayout(self.container)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)

        header = QHBoxLayout()
        title = QLabel("Codex")
        title.setStyleSheet(f"color: {VeilColors.ACCENT_LIGHT}; font-size: 22px; font-weight: 900;")
        header.addWidget(title, 1)
        close_btn = QPushButton("Close")
        close_btn.setStyleSheet(_BUTTON_STYLE)
        close_btn.clicked.connect(self.dismiss)
        header.addWidget(close_btn, 0)
        layout.addLayout(header)

        self._tabs = QTabWidget()
        self._tabs.setStyleSheet(
            f"""
            QTabWidget::pane {{ border: none; }}
            QTabBar::tab {{
                background: transparent;
                color: {VeilColors.INK_MUTED};
                padding: 8px 14px;
                font-weight: 700;
            }}
            QTabBar::tab:selected {{
                color: {VeilColors.ACCENT_LIGHT};
                border-bottom: 2px solid {VeilColors.ACCENT};
            }}
            """
        )
        layout.addWidget(self._tabs, 1)
        self._built = False

    def open(self) -> None:
        # Glyph grids are built on first open only.
        if not self._built:
            for family in Family:
                self._tabs.addTab(self._build_grid(family), family.label)
            self._built = True
        self.raise_()
        self.show()

    def _build_grid(self, family: Family) -> QWidget:
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        grid_host = QWidget()
        grid = QGridLayout(grid_host)
        grid.setSpacing(10)
        for n, glyph in enumerate(generate_alphabet(family).values()):
            cell = GlyphWidget(size=64, jitter_degrees=self._jitter)
            cell.show_glyph(glyph, family)
            grid.addWidget(cell, n // 7, n % 7)
        scroll.setWidget(grid_host)
        return scroll
