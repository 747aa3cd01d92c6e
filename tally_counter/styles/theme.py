"""
================================================================================
Theme - Counter Visual Design System
================================================================================

This module defines the colours and typography of the tally counter.
The palette is deliberately small: a dark screen, a slightly lighter
control pill, and a saturated label circle that draws the eye.

Design Philosophy:
    "Simplicity is the ultimate sophistication." - Leonardo da Vinci

Typography:
    A rounded, semibold face for the count keeps three digits legible
    inside the circle at any configured width.
"""

from typing import Dict

from PyQt6.QtGui import QColor, QFont

# =============================================================================
# Color Palette
# =============================================================================

COLORS: Dict[str, str] = {
    # -------------------------------------------------------------------------
    # Surfaces
    # -------------------------------------------------------------------------
    'screen_background': '#1c1c2e',     # Window background
    'controls_background': '#2e2e48',   # Rounded pill behind the controls
    'label_background': '#6c5ce7',      # Count circle

    # -------------------------------------------------------------------------
    # Foreground
    # -------------------------------------------------------------------------
    'controls': '#b8b8d9',              # Minus / xmark / plus glyphs
    'text_white': '#ffffff',            # Count text
    'pressed': '#ffffff',               # Pressed button fill

    # -------------------------------------------------------------------------
    # Effects
    # -------------------------------------------------------------------------
    'overlay': '#000000',               # Darkening overlay during drag
    'shadow': '#000000',
}

# =============================================================================
# Typography
# =============================================================================

FONT_FAMILY: str = "SF Pro Rounded, Nunito, Varela Round, sans-serif"

# First family Qt should try when building a QFont
_PRIMARY_FAMILY: str = FONT_FAMILY.split(',')[0].strip()


# =============================================================================
# Helper Functions
# =============================================================================

def color(name: str, alpha: float = 1.0) -> QColor:
    """
    Build a QColor from the palette.

    Args:
        name: Key into COLORS
        alpha: Opacity from 0.0 to 1.0

    Returns:
        QColor with the requested alpha applied

    Example:
        >>> shadow = color('shadow', 0.5)
    """
    result = QColor(COLORS[name])
    result.setAlphaF(max(0.0, min(1.0, alpha)))
    return result


def label_font(point_size: float) -> QFont:
    """Semibold rounded font for the count label."""
    font = QFont(_PRIMARY_FAMILY)
    font.setPointSizeF(max(1.0, point_size))
    font.setWeight(QFont.Weight.DemiBold)
    return font


def get_window_style() -> str:
    """
    Generate the stylesheet for the main window.

    Returns:
        CSS stylesheet string for QMainWindow
    """
    return f"""
        QMainWindow {{
            background-color: {COLORS['screen_background']};
        }}
        QLabel {{
            font-family: {FONT_FAMILY};
            color: {COLORS['text_white']};
        }}
    """
