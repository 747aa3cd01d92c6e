"""
================================================================================
Utils Package - Core Constants and Utilities
================================================================================

This package contains the tuning constants and small utilities used
throughout the application. Keeping these centralized ensures consistency
and makes the counter easier to tune.

Modules:
    constants: Count range, gesture thresholds, feedback and timing values
    logging_setup: Idempotent logging configuration
"""

try:
    from .constants import (
        # Count range
        MIN_COUNT,
        MAX_COUNT,
        # Sizing
        DEFAULT_WIDTH,
        # Drag gesture
        DIRECTION_LOCK_THRESHOLD,
        START_ZONE,
        DRAG_DAMPING,
        RUBBER_BAND_FACTOR,
        TAP_SLOP,
        # Visual feedback
        BASE_CONTROL_OPACITY,
        PARALLAX_DIVISOR,
        OVERLAY_VERTICAL_WEIGHT,
        OVERLAY_HORIZONTAL_WEIGHT,
        # Animation timing
        SPRING_DURATION_MS,
        SPRING_OVERSHOOT,
        PRESS_FADE_MS,
        COUNT_BUMP_MS,
        COUNT_BUMP_SCALE,
    )
    from .logging_setup import configure_logging
except ImportError:
    from utils.constants import (
        MIN_COUNT,
        MAX_COUNT,
        DEFAULT_WIDTH,
        DIRECTION_LOCK_THRESHOLD,
        START_ZONE,
        DRAG_DAMPING,
        RUBBER_BAND_FACTOR,
        TAP_SLOP,
        BASE_CONTROL_OPACITY,
        PARALLAX_DIVISOR,
        OVERLAY_VERTICAL_WEIGHT,
        OVERLAY_HORIZONTAL_WEIGHT,
        SPRING_DURATION_MS,
        SPRING_OVERSHOOT,
        PRESS_FADE_MS,
        COUNT_BUMP_MS,
        COUNT_BUMP_SCALE,
    )
    from utils.logging_setup import configure_logging

__all__ = [
    'MIN_COUNT',
    'MAX_COUNT',
    'DEFAULT_WIDTH',
    'DIRECTION_LOCK_THRESHOLD',
    'START_ZONE',
    'DRAG_DAMPING',
    'RUBBER_BAND_FACTOR',
    'TAP_SLOP',
    'BASE_CONTROL_OPACITY',
    'PARALLAX_DIVISOR',
    'OVERLAY_VERTICAL_WEIGHT',
    'OVERLAY_HORIZONTAL_WEIGHT',
    'SPRING_DURATION_MS',
    'SPRING_OVERSHOOT',
    'PRESS_FADE_MS',
    'COUNT_BUMP_MS',
    'COUNT_BUMP_SCALE',
    'configure_logging',
]
