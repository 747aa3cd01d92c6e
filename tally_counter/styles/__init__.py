"""
================================================================================
Styles Package - Visual Design System
================================================================================

This package defines the visual language of the counter: colours,
typography and window styles.

Design Philosophy:
    "Design is not just what it looks like and feels like.
     Design is how it works." - Steve Jobs

Modules:
    theme: Color palette, fonts, and style helpers
"""

try:
    from .theme import (
        # Color palette
        COLORS,
        # Typography
        FONT_FAMILY,
        # Helper functions
        color,
        label_font,
        get_window_style,
    )
except ImportError:
    from styles.theme import (
        COLORS,
        FONT_FAMILY,
        color,
        label_font,
        get_window_style,
    )

__all__ = [
    'COLORS',
    'FONT_FAMILY',
    'color',
    'label_font',
    'get_window_style',
]
