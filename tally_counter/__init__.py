"""
================================================================================
Tally Counter
================================================================================

A single-screen tally counter: tap the number to count, drag it right to
add, left to subtract, or pull it down to reset.

Package Structure:
    tally_counter/
    ├── __init__.py          # This file - package entry point
    ├── app.py               # Application launcher
    ├── main_window.py       # Main application window
    ├── config.py            # Start-up configuration (JSON)
    ├── core/                # Interaction model (no Qt)
    │   ├── geometry.py          # Width-derived sizes
    │   ├── tally.py             # Bounded count
    │   ├── gesture.py           # Drag direction state machine
    │   └── feedback.py          # Drag-driven opacities and offsets
    ├── styles/              # Visual design system
    │   └── theme.py             # Colors, fonts, styles
    ├── utils/               # Constants and utilities
    │   ├── constants.py         # Count range, thresholds, timings
    │   └── logging_setup.py     # Logging configuration
    ├── widgets/             # Custom UI components
    │   ├── control_button.py    # Minus / reset / plus buttons
    │   ├── count_label.py       # Draggable count circle
    │   ├── counter_view.py      # The counter widget
    │   └── logo.py              # Logo above the counter
    └── assets/
        └── logo.svg

Design Philosophy:
    "Simplicity is the ultimate sophistication." - Leonardo da Vinci

Usage:
    # Launch the application
    python -m tally_counter.app

    # Or import and run programmatically
    from tally_counter import main
    main()
"""

__version__ = "1.0.0"

try:
    from .app import main
    from .main_window import CounterWindow
except ImportError:
    from app import main
    from main_window import CounterWindow

__all__ = [
    'main',
    'CounterWindow',
]
