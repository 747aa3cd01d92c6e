"""
================================================================================
Core Package - Interaction Model
================================================================================

This package holds the counter's behaviour, free of any Qt types:
the bounded count, the drag state machine and the pure functions that
turn a drag into visual feedback.

Design Philosophy:
    "The people who are crazy enough to think they can change the world
     are the ones who do." - Steve Jobs

Because nothing here touches the screen, the whole interaction can be
driven headless in tests.

Modules:
    geometry: Width-derived sizes and drag limits
    tally: Bounded count with increase/decrease/reset
    gesture: Direction latching and label offset computation
    feedback: Opacities, parallax and overlay from the label offset
"""

try:
    from .geometry import CounterGeometry
    from .gesture import (
        DraggingDirection, GesturePhase, CounterAction, Offset, DragTracker,
        classify_direction, compute_offset, resolve_action, rubber_band
    )
    from .tally import TallyCounter
    from .feedback import VisualFeedback, feedback_for
except ImportError:
    from core.geometry import CounterGeometry
    from core.gesture import (
        DraggingDirection, GesturePhase, CounterAction, Offset, DragTracker,
        classify_direction, compute_offset, resolve_action, rubber_band
    )
    from core.tally import TallyCounter
    from core.feedback import VisualFeedback, feedback_for

__all__ = [
    'CounterGeometry',
    'DraggingDirection',
    'GesturePhase',
    'CounterAction',
    'Offset',
    'DragTracker',
    'classify_direction',
    'compute_offset',
    'resolve_action',
    'rubber_band',
    'TallyCounter',
    'VisualFeedback',
    'feedback_for',
]
