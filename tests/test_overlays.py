"""Tests for veilcode.ui.overlays – the codex glyph grids."""

from __future__ import annotations

import os

import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from veilcode.core.game import GameSession
from veilcode.core.glyphs import Family, generate_alphabet
from veilcode.ui.glyph_widget import GlyphWidget
from veilcode.ui.main_window import MainWindow
from veilcode.ui.overlays import CodexOverlay


@pytest.fixture(scope="module")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def _tab_glyphs(overlay: CodexOverlay, index: int) -> list:
    return overlay._tabs.widget(index).widget().findChildren(GlyphWidget)


class TestCodexOverlay:
    def test_one_tab_per_family(self, qapp):
        overlay = CodexOverlay()
        overlay.open()
        assert overlay._tabs.count() == len(Family)
        overlay.open()
        assert overlay._tabs.count() == len(Family)

    def test_tabs_show_whole_alphabet(self, qapp):
        overlay = CodexOverlay()
        overlay.open()
        for index, family in enumerate(Family):
            cells = _tab_glyphs(overlay, index)
            assert len(cells) == 26
            assert {c.glyph for c in cells} == set(generate_alphabet(family).values())

    def test_jitter_setting_used(self, qapp):
        overlay = CodexOverlay(jitter_degrees=0)
        overlay.open()
        assert all(c.transform.is_identity for c in _tab_glyphs(overlay, 0))

    def test_jitter_bounds(self, qapp):
        overlay = CodexOverlay(jitter_degrees=10)
        overlay.open()
        assert all(abs(c.transform.rotation_degrees) <= 5 for c in _tab_glyphs(overlay, 0))

    def test_main_window_passes_jitter(self, qapp, ten_puzzles, progress, clock):
        window = MainWindow(GameSession(ten_puzzles, progress, clock), jitter_degrees=0)
        window._codex_overlay.open()
        assert all(c.transform.is_identity for c in _tab_glyphs(window._codex_overlay, 0))
        window.close()
