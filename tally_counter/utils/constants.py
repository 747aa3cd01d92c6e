"""
================================================================================
Constants - Counter Tuning Values
================================================================================

This module defines every number that shapes how the tally counter behaves
and feels. Centralizing these values keeps the gesture model, the painter
and the tests in agreement.

Design Philosophy:
    "The details are not the details. They make the design." - Charles Eames
"""

# =============================================================================
# Count Range
# =============================================================================

# Three digits fit inside the label circle
MIN_COUNT: int = 0
MAX_COUNT: int = 999

# =============================================================================
# Widget Sizing
# =============================================================================

# Default widget width; every other size is derived from it
DEFAULT_WIDTH: float = 300.0

# =============================================================================
# Drag Gesture
# =============================================================================

# Vertical travel allowed before an initial movement counts as "down"
DIRECTION_LOCK_THRESHOLD: float = 30.0

# Minimum travel on the committed axis before release triggers an action
START_ZONE: float = 20.0

# Label moves slower than the finger so it feels heavier
DRAG_DAMPING: float = 0.75

# Movement past the axis limit continues at this fraction (rubber band)
RUBBER_BAND_FACTOR: float = 0.55

# Press/release travel below this is a tap, not a drag
TAP_SLOP: float = 8.0

# =============================================================================
# Visual Feedback
# =============================================================================

# Resting opacity of the minus/plus controls
BASE_CONTROL_OPACITY: float = 0.4

# Control container follows the label at this scale (parallax)
PARALLAX_DIVISOR: float = 6.0

# Weights of the darkening overlay on the control background
OVERLAY_VERTICAL_WEIGHT: float = 0.5
OVERLAY_HORIZONTAL_WEIGHT: float = 0.3

# =============================================================================
# Animation Timing (milliseconds)
# =============================================================================

SPRING_DURATION_MS: int = 450
SPRING_OVERSHOOT: float = 1.6
PRESS_FADE_MS: int = 100
COUNT_BUMP_MS: int = 180
COUNT_BUMP_SCALE: float = 1.08
