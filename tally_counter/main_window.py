"""
================================================================================
Main Window - Application Shell
================================================================================

This module contains the single window of the application: the logo and
the counter, centred on a dark background.

Design Philosophy:
    "That's been one of my mantras - focus and simplicity." - Steve Jobs
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PyQt6.QtCore import Qt

try:
    from .config import CounterConfig
    from .styles.theme import get_window_style
    from .widgets import CounterView, LogoWidget
except ImportError:
    from config import CounterConfig
    from styles.theme import get_window_style
    from widgets import CounterView, LogoWidget

logger = logging.getLogger(__name__)


class CounterWindow(QMainWindow):
    """
    Main application window.

    Example:
        >>> app = QApplication(sys.argv)
        >>> window = CounterWindow(CounterConfig(width=360))
        >>> window.show()
        >>> sys.exit(app.exec())
    """

    def __init__(self, config: Optional[CounterConfig] = None):
        """
        Initialize the main window.

        Args:
            config: Start-up configuration (defaults if None)
        """
        super().__init__()
        self.config = config or CounterConfig()
        self.setWindowTitle("Tally Counter")

        self._build_ui()
        logger.debug("window built with width=%s initial_count=%s",
                     self.config.width, self.config.initial_count)

    def _build_ui(self) -> None:
        """Build the logo and counter, centred in the window."""
        self.setStyleSheet(get_window_style())

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        spacing = int(self.config.width / 10)
        layout.setContentsMargins(spacing, spacing, spacing, spacing)
        layout.setSpacing(spacing)
        layout.addStretch(1)

        self.logo = LogoWidget(self.config.width, self.config.logo_path)
        layout.addWidget(self.logo, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.counter_view = CounterView(self.config.width, self.config.initial_count)
        layout.addWidget(self.counter_view, alignment=Qt.AlignmentFlag.AlignHCenter)

        layout.addStretch(1)
        self.setMinimumSize(
            self.counter_view.width() + 2 * spacing,
            self.logo.height() + self.counter_view.height() + 4 * spacing,
        )
