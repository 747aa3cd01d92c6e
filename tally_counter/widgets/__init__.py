"""
================================================================================
Widgets Package - Custom UI Components
================================================================================

This package contains the widgets that make up the counter screen.
Each widget is self-contained and animated.

Design Philosophy:
    "The best interface is no interface." - Golden Krishna

    A single circle you can tap or fling: the controls only come forward
    while you drag toward them.

Modules:
    control_button: Round glyph buttons with press feedback
    count_label: The draggable count circle
    counter_view: The tally counter itself
    logo: Image shown above the counter
"""

try:
    from .control_button import ControlButton
    from .count_label import CountLabel
    from .counter_view import CounterView
    from .logo import LogoWidget
except ImportError:
    from widgets.control_button import ControlButton
    from widgets.count_label import CountLabel
    from widgets.counter_view import CounterView
    from widgets.logo import LogoWidget

__all__ = [
    'ControlButton',
    'CountLabel',
    'CounterView',
    'LogoWidget',
]
