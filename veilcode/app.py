"""Application entry point and setup for the Veilcode rune puzzle."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from veilcode.core.config import Settings, load_settings
from veilcode.core.game import GameSession
from veilcode.core.progress import JsonFileStorage, ProgressStore
from veilcode.core.puzzles import PuzzleRepository
from veilcode.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_game(settings: Settings) -> GameSession:
    """Wire puzzles and persisted progress into a fresh game session."""
    puzzles = PuzzleRepository(settings.puzzles_path)
    progress = ProgressStore(JsonFileStorage(settings.data_dir), key=settings.storage_key)
    logging.info(
        "Loaded %d puzzles from %s; %d solved",
        len(puzzles),
        settings.puzzles_path,
        len(progress.solved_ids),
    )
    return GameSession(puzzles, progress)


def run() -> None:
    """Initialize the application, load resources, and start the main window."""
    settings = load_settings()
    configure_logging(settings.log_level)
    app = QApplication(sys.argv)
    app.setApplicationName("Veilcode")
    app.setApplicationDisplayName("Veilcode")

    game = build_game(settings)
    window = MainWindow(game, jitter_degrees=settings.f1_jitter_degrees)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1100, geometry.width()), min(860, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
