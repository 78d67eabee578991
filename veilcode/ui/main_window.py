from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from veilcode.core.game import (
    FamilyChanged,
    GameEvent,
    GameSession,
    GuessChanged,
    GuessRejected,
    LevelSealed,
    LevelSolved,
    LevelStarted,
    Screen,
    ScreenChanged,
)
from veilcode.core.glyphs import Family
from veilcode.core.runes import KEYBOARD_ROWS, Rune
from veilcode.ui.colors import VeilColors, format_time
from veilcode.ui.glyph_widget import GlyphWidget
from veilcode.ui.level_cards import LevelMapWidget, star_text
from veilcode.ui.models import build_level_states
from veilcode.ui.overlays import CodexOverlay, SuccessOverlay

logger = logging.getLogger(__name__)

_BUTTON_STYLE = f"""
    QPushButton {{
        background: {VeilColors.CARD_BG};
        color: {VeilColors.INK};
        padding: 10px 18px;
        border: 1px solid {VeilColors.CARD_BORDER};
        border-radius: 14px;
        font-weight: 700;
        font-size: 13px;
    }}
    QPushButton:hover {{
        background: {VeilColors.CARD_BG_HOVER};
        border-color: {VeilColors.ACCENT};
    }}
    QPushButton:disabled {{
        color: {VeilColors.INK_MUTED};
    }}
    QPushButton:checked {{
        border-color: {VeilColors.ACCENT};
        color: {VeilColors.ACCENT_LIGHT};
    }}
"""


class MainWindow(QMainWindow):
    """Thin view over a :class:`GameSession`.

    Buttons call session operations; everything shown on screen is updated
    from the events the session emits.
    """

    def __init__(self, game: GameSession, jitter_degrees: float = 4.0) -> None:
        super().__init__()
        self._game = game
        self._jitter = jitter_degrees

        self._stack: Optional[QStackedWidget] = None
        self._screens: dict[Screen, QWidget] = {}
        self._continue_btn: Optional[QPushButton] = None
        self._map_widget: Optional[LevelMapWidget] = None
        self._map_feedback: Optional[QLabel] = None
        self._intro_number: Optional[QLabel] = None
        self._intro_stars: Optional[QLabel] = None
        self._intro_tag: Optional[QLabel] = None
        self._game_title: Optional[QLabel] = None
        self._game_meta: Optional[QLabel] = None
        self._clue_label: Optional[QLabel] = None
        self._clock_label: Optional[QLabel] = None
        self._feedback: Optional[QLabel] = None
        self._slots_row: Optional[QHBoxLayout] = None
        self._slot_glyphs: list[GlyphWidget] = []
        self._slot_letters: list[QLabel] = []
        self._family_buttons: dict[Family, QPushButton] = {}
        self._keys: list[GlyphWidget] = []
        self._commit_btn: Optional[QPushButton] = None
        self._clock_timer = QTimer(self)
        self._clock_timer.timeout.connect(self._tick_clock)

        self.setWindowTitle("Veilcode")
        self.setMinimumSize(820, 640)
        self._build_ui()
        self._unsubscribe = self._game.subscribe(self._on_event)
        self._game.show_splash()

    # -- construction ------------------------------------------------------

    def _build_ui(self) -> None:
        root = QWidget()
        root.setObjectName("veilRoot")
        root.setStyleSheet(
            f"""
            QWidget#veilRoot {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {VeilColors.BG_TOP}, stop:0.5 {VeilColors.BG_MIDDLE}, stop:1 {VeilColors.BG_BOTTOM});
            }}
            QLabel {{ color: {VeilColors.INK}; }}
            """
        )
        root_layout = QGridLayout(root)
        root_layout.setContentsMargins(0, 0, 0, 0)

        self._stack = QStackedWidget()
        self._screens = {
            Screen.SPLASH: self._build_splash(),
            Screen.LEVEL_SELECT: self._build_level_select(),
            Screen.LEVEL_INTRO: self._build_level_intro(),
            Screen.PLAYING: self._build_game_screen(),
        }
        for screen in self._screens.values():
            self._stack.addWidget(screen)
        root_layout.addWidget(self._stack, 0, 0)

        self._success_overlay = SuccessOverlay(root)
        self._success_overlay.next_requested.connect(self._game.next_level)
        self._success_overlay.map_requested.connect(self._game.show_level_select)
        self._success_overlay.closed.connect(self._game.close_success)
        root_layout.addWidget(self._success_overlay, 0, 0)

        self._codex_overlay = CodexOverlay(root, jitter_degrees=self._jitter)
        root_layout.addWidget(self._codex_overlay, 0, 0)

        self.setCentralWidget(root)

    def _button(self, text: str, slot) -> QPushButton:
        btn = QPushButton(text)
        btn.setStyleSheet(_BUTTON_STYLE)
        btn.setCursor(Qt.PointingHandCursor)
        btn.clicked.connect(lambda checked=False: slot())
        return btn

    def _header(self, back_slot) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addWidget(self._button("← Back", back_slot), 0)
        row.addStretch(1)
        row.addWidget(self._button("Codex", self._codex_overlay_open), 0)
        return row

    def _build_splash(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(40, 40, 40, 40)
        layout.addStretch(1)

        title = QLabel("VEILCODE")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {VeilColors.ACCENT_LIGHT}; font-size: 48px; font-weight: 900; letter-spacing: 10px;")
        layout.addWidget(title)
        subtitle = QLabel("Decode the runes. Reveal the word.")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {VeilColors.INK_MUTED}; font-size: 15px;")
        layout.addWidget(subtitle)
        layout.addSpacing(30)

        for btn in (
            self._button("Begin", self._game.show_level_select),
            self._continue_button(),
            self._button("Codex", self._codex_overlay_open),
        ):
            btn.setFixedWidth(220)
            layout.addWidget(btn, 0, Qt.AlignHCenter)
        layout.addStretch(2)
        return screen

    def _continue_button(self) -> QPushButton:
        self._continue_btn = self._button("Continue", self._game.continue_game)
        return self._continue_btn

    def _build_level_select(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.addLayout(self._header(self._game.show_splash))

        self._map_feedback = QLabel("")
        self._map_feedback.setAlignment(Qt.AlignCenter)
        self._map_feedback.setStyleSheet(f"color: {VeilColors.ERROR}; font-size: 13px;")
        layout.addWidget(self._map_feedback)

        self._map_widget = LevelMapWidget(on_level_clicked=self._game.show_level_intro)
        layout.addWidget(self._map_widget, 1)
        return screen

    def _build_level_intro(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.addLayout(self._header(self._game.show_level_select))
        layout.addStretch(1)

        self._intro_number = QLabel("")
        self._intro_number.setAlignment(Qt.AlignCenter)
        self._intro_number.setStyleSheet(f"color: {VeilColors.ACCENT_LIGHT}; font-size: 40px; font-weight: 900;")
        layout.addWidget(self._intro_number)
        self._intro_tag = QLabel("")
        self._intro_tag.setAlignment(Qt.AlignCenter)
        self._intro_tag.setStyleSheet(f"color: {VeilColors.INK_MUTED}; font-size: 15px;")
        layout.addWidget(self._intro_tag)
        self._intro_stars = QLabel("")
        self._intro_stars.setAlignment(Qt.AlignCenter)
        self._intro_stars.setStyleSheet(f"color: {VeilColors.STAR_FILLED}; font-size: 32px;")
        layout.addWidget(self._intro_stars)
        layout.addSpacing(20)

        play = self._button("Play", lambda: self._game.enter_level(self._game.current_level_id))
        play.setFixedWidth(220)
        layout.addWidget(play, 0, Qt.AlignHCenter)
        layout.addStretch(2)
        return screen

    def _build_game_screen(self) -> QWidget:
        screen = QWidget()
        layout = QVBoxLayout(screen)
        layout.setContentsMargins(24, 20, 24, 20)
        layout.setSpacing(12)
        layout.addLayout(self._header(self._game.leave_level))

        title_row = QHBoxLayout()
        self._game_title = QLabel("")
        self._game_title.setStyleSheet("font-size: 22px; font-weight: 900;")
        title_row.addWidget(self._game_title, 1)
        self._clock_label = QLabel("0:00")
        self._clock_label.setStyleSheet(f"color: {VeilColors.INK_MUTED}; font-size: 15px;")
        title_row.addWidget(self._clock_label, 0)
        layout.addLayout(title_row)

        self._game_meta = QLabel("")
        self._game_meta.setStyleSheet(f"color: {VeilColors.INK_MUTED}; font-size: 13px;")
        layout.addWidget(self._game_meta)
        self._clue_label = QLabel("")
        self._clue_label.setWordWrap(True)
        self._clue_label.setStyleSheet("font-size: 16px; font-style: italic;")
        layout.addWidget(self._clue_label)

        slots_host = QWidget()
        self._slots_row = QHBoxLayout(slots_host)
        self._slots_row.setSpacing(10)
        layout.addWidget(slots_host, 0, Qt.AlignHCenter)

        self._feedback = QLabel("")
        self._feedback.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._feedback)

        tabs = QHBoxLayout()
        group = QButtonGroup(screen)
        group.setExclusive(True)
        for family in Family:
            btn = self._button(family.label, lambda f=family: self._game.select_family(f))
            btn.setCheckable(True)
            btn.setAccessibleName(f"Select {family.label} family")
            group.addButton(btn)
            self._family_buttons[family] = btn
            tabs.addWidget(btn)
        layout.addLayout(tabs)

        keyboard = QFrame()
        grid = QGridLayout(keyboard)
        grid.setSpacing(6)
        for row_index, row in enumerate(KEYBOARD_ROWS):
            for col_index, letter in enumerate(row):
                key = GlyphWidget(Rune(letter, Family.F1), size=52, jitter_degrees=self._jitter)
                key.setCursor(Qt.PointingHandCursor)
                key.clicked.connect(lambda l=letter: self._game.press_key(l))
                grid.addWidget(key, row_index, col_index)
                self._keys.append(key)
        layout.addWidget(keyboard, 0, Qt.AlignHCenter)

        actions = QHBoxLayout()
        actions.addStretch(1)
        actions.addWidget(self._button("Clear", self._game.clear_guess))
        self._commit_btn = self._button("Reveal", self._game.submit_guess)
        self._commit_btn.setEnabled(False)
        actions.addWidget(self._commit_btn)
        actions.addStretch(1)
        layout.addLayout(actions)
        return screen

    # -- event handling ----------------------------------------------------

    def _on_event(self, event: GameEvent) -> None:
        if isinstance(event, ScreenChanged):
            self._show_screen(event.screen, event.level_id)
        elif isinstance(event, LevelSealed):
            self._set_feedback(self._map_feedback, event.message, VeilColors.ERROR)
        elif isinstance(event, LevelStarted):
            self._load_level(event)
        elif isinstance(event, FamilyChanged):
            self._render_keyboard(event.family)
        elif isinstance(event, GuessChanged):
            self._render_slots(event)
        elif isinstance(event, GuessRejected):
            self._set_feedback(self._feedback, event.message, VeilColors.ERROR)
        elif isinstance(event, LevelSolved):
            self._level_solved(event)

    def _show_screen(self, screen: Screen, level_id: Optional[int]) -> None:
        if self._stack is None:
            return
        self._stack.setCurrentWidget(self._screens[screen])
        if screen is not Screen.PLAYING:
            self._clock_timer.stop()
            self._success_overlay.hide()
        if screen is Screen.SPLASH and self._continue_btn is not None:
            self._continue_btn.setVisible(self._game.can_continue())
        elif screen is Screen.LEVEL_SELECT:
            self._refresh_level_map()
        elif screen is Screen.LEVEL_INTRO and level_id is not None:
            puzzle = self._game.puzzles.get(level_id)
            self._intro_number.setText(f"Level {level_id}")
            self._intro_tag.setText(puzzle.tag)
            self._intro_stars.setText(star_text(self._game.level_intro_stars(level_id)))

    def _refresh_level_map(self) -> None:
        if self._map_widget is None:
            return
        self._set_feedback(self._map_feedback, "", VeilColors.ERROR)
        states = build_level_states(self._game.puzzles.all(), self._game.progress, self._game.current_level_id)
        self._map_widget.set_level_states(states)

    def _load_level(self, event: LevelStarted) -> None:
        puzzle = self._game.puzzles.get(event.level_id)
        self._game_title.setText(f"Level {puzzle.id}")
        self._game_meta.setText(f"{len(puzzle.word)} letters · {puzzle.family.label}")
        self._clue_label.setText(puzzle.clue)
        self._set_feedback(self._feedback, "", VeilColors.INK)

        while self._slots_row.count():
            item = self._slots_row.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)
                w.deleteLater()
        self._slot_glyphs = []
        self._slot_letters = []
        for index in range(event.slot_count):
            column = QWidget()
            col_layout = QVBoxLayout(column)
            col_layout.setContentsMargins(0, 0, 0, 0)
            col_layout.setSpacing(4)
            letter = QLabel("")
            letter.setAlignment(Qt.AlignCenter)
            letter.setStyleSheet(f"color: {VeilColors.INK_MUTED}; font-size: 12px;")
            glyph = GlyphWidget(size=64, jitter_degrees=self._jitter)
            glyph.setCursor(Qt.PointingHandCursor)
            glyph.setAccessibleName(f"Slot {index + 1}")
            glyph.clicked.connect(lambda i=index: self._game.select_slot(i))
            col_layout.addWidget(letter)
            col_layout.addWidget(glyph)
            self._slots_row.addWidget(column)
            self._slot_letters.append(letter)
            self._slot_glyphs.append(glyph)

        self._clock_label.setText("0:00")
        self._clock_timer.start(1000)

    def _render_keyboard(self, family: Family) -> None:
        btn = self._family_buttons.get(family)
        if btn is not None:
            btn.setChecked(True)
        for key, letter in zip(self._keys, "".join(KEYBOARD_ROWS)):
            key.set_rune(Rune(letter, family))

    def _render_slots(self, event: GuessChanged) -> None:
        for index, (glyph, label) in enumerate(zip(self._slot_glyphs, self._slot_letters)):
            rune = event.slots[index]
            if glyph.rune != rune:
                glyph.set_rune(rune)
            label.setText(rune.letter if rune is not None else "")
            active = index == event.selected_index
            glyph.setStyleSheet(
                f"background: {VeilColors.SLOT_BG}; border-radius: 10px;"
                f" border: 2px solid {VeilColors.SLOT_ACTIVE if active else VeilColors.CARD_BORDER};"
            )
        if self._commit_btn is not None:
            self._commit_btn.setEnabled(event.ready)
        self._set_feedback(self._feedback, "", VeilColors.INK)

    def _level_solved(self, event: LevelSolved) -> None:
        self._clock_timer.stop()
        self._clock_label.setText(format_time(event.elapsed_seconds))
        self._set_feedback(self._feedback, "Correct!", VeilColors.SUCCESS)
        puzzle = self._game.puzzles.get(event.level_id)
        self._success_overlay.show_result(
            puzzle.word,
            event.elapsed_seconds,
            event.stars,
            event.best_time,
            has_next=event.next_level_id is not None,
        )
        self._success_overlay.raise_()
        self._success_overlay.show()

    def _tick_clock(self) -> None:
        level = self._game.level
        if level is None or self._clock_label is None:
            return
        self._clock_label.setText(format_time(level.elapsed()))

    def _set_feedback(self, label: Optional[QLabel], text: str, color: str) -> None:
        if label is None:
            return
        label.setText(text)
        label.setStyleSheet(f"color: {color}; font-size: 14px; font-weight: 700;")

    def _codex_overlay_open(self) -> None:
        self._codex_overlay.open()

    def closeEvent(self, event) -> None:
        self._clock_timer.stop()
        self._unsubscribe()
        super().closeEvent(event)
