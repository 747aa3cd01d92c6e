"""
================================================================================
Application Entry Point
================================================================================

This module provides the main entry point for the Tally Counter.

Usage:
    python -m tally_counter.app

Or:
    from tally_counter.app import main
    main()

Configuration is read from ``tally_config.json`` in the working
directory, or from the file named by ``TALLY_COUNTER_CONFIG``.
"""

import sys
from typing import List, Optional

from PyQt6.QtWidgets import QApplication

try:
    from .config import get_default_config
    from .main_window import CounterWindow
    from .utils.logging_setup import configure_logging
except ImportError:
    from config import get_default_config
    from main_window import CounterWindow
    from utils.logging_setup import configure_logging


def main(argv: Optional[List[str]] = None) -> int:
    """
    Launch the tally counter.

    Args:
        argv: Arguments passed to QApplication (sys.argv if None)

    Returns:
        Exit code (0 for success)

    Example:
        >>> import sys
        >>> sys.exit(main())
    """
    config = get_default_config()
    logger = configure_logging(config.log_level)
    logger.info("Starting tally counter (width=%s)", config.width)

    # Create application
    app = QApplication(sys.argv if argv is None else argv)
    app.setStyle('Fusion')
    app.setApplicationName("Tally Counter")

    # Create and show main window
    window = CounterWindow(config)
    window.show()

    # Run event loop
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
