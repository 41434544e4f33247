"""Application entry point and setup for the Vegam typing speed test."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from vegam.core.config import load_config
from vegam.core.words import WordRepository
from vegam.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load config and vocabulary, then show the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Vegam")
    app.setApplicationDisplayName("Vegam")

    config = load_config()
    words = WordRepository(config.vocabulary_path)

    window = MainWindow(words=words, config=config)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1200, geometry.width()), min(760, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
