"""
================================================================================
Drag Gesture - Direction Latching State Machine
================================================================================

This module turns a continuous drag on the count label into one discrete
decision: increase (right), decrease (left), reset (down) or nothing.

Design Philosophy:
    "Design is not just what it looks like and feels like.
     Design is how it works." - Steve Jobs

Lifecycle:
    IDLE --begin()--> DRAGGING(direction=NONE)
    DRAGGING(NONE) --update()--> DRAGGING(LEFT | RIGHT | DOWN)   (latched)
    DRAGGING(any) --end()--> IDLE, optionally yielding a CounterAction

Offset Algorithm:
    1. Scale the raw translation by DRAG_DAMPING (label feels heavier)
    2. Keep only the axis of the committed direction
    3. Suppress upward movement
    4. Past the axis limit, continue at RUBBER_BAND_FACTOR
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

try:
    from .geometry import CounterGeometry
    from ..utils.constants import (
        DIRECTION_LOCK_THRESHOLD, START_ZONE,
        DRAG_DAMPING, RUBBER_BAND_FACTOR
    )
except ImportError:
    from core.geometry import CounterGeometry
    from utils.constants import (
        DIRECTION_LOCK_THRESHOLD, START_ZONE,
        DRAG_DAMPING, RUBBER_BAND_FACTOR
    )

logger = logging.getLogger(__name__)


class DraggingDirection(enum.Enum):
    """Direction a drag committed to; NONE means not yet committed."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


class GesturePhase(enum.Enum):
    """Whether a label drag is in progress."""

    IDLE = "idle"
    DRAGGING = "dragging"


class CounterAction(enum.Enum):
    """What a finished gesture asks the counter to do."""

    INCREASE = "increase"
    DECREASE = "decrease"
    RESET = "reset"


@dataclass(frozen=True)
class Offset:
    """
    Displacement of the count label from its resting centre.

    Attributes:
        width: Horizontal displacement (positive is right)
        height: Vertical displacement (positive is down)
    """

    width: float = 0.0
    height: float = 0.0

    @property
    def is_zero(self) -> bool:
        return self.width == 0.0 and self.height == 0.0


def classify_direction(dx: float, dy: float) -> DraggingDirection:
    """
    Decide which way a drag is heading from its first movement.

    Args:
        dx: Horizontal translation since the press
        dy: Vertical translation since the press

    Returns:
        DOWN once the label has moved more than DIRECTION_LOCK_THRESHOLD
        downward, otherwise LEFT/RIGHT by the sign of dx. Upward movement
        never commits to DOWN. NONE while dx is exactly zero.
    """
    if dy <= DIRECTION_LOCK_THRESHOLD:
        if dx > 0:
            return DraggingDirection.RIGHT
        if dx < 0:
            return DraggingDirection.LEFT
        return DraggingDirection.NONE
    return DraggingDirection.DOWN


def rubber_band(value: float, limit: float) -> float:
    """
    Soften movement past a limit.

    Up to the limit the value passes through unchanged; beyond it the
    excess is scaled by RUBBER_BAND_FACTOR. The sign is preserved.

    Example:
        >>> rubber_band(150.0, 130.0)
        141.0
    """
    magnitude = abs(value)
    if magnitude <= limit:
        return float(value)
    return float(np.sign(value) * (limit + (magnitude - limit) * RUBBER_BAND_FACTOR))


def compute_offset(dx: float, dy: float, direction: DraggingDirection,
                   geometry: CounterGeometry) -> Offset:
    """
    Map a raw translation to the label offset for a committed direction.

    Args:
        dx: Horizontal translation since the press
        dy: Vertical translation since the press
        direction: The latched drag direction
        geometry: Sizes supplying the per-axis limits

    Returns:
        The damped, axis-filtered, rubber-banded offset
    """
    width = dx * DRAG_DAMPING
    height = dy * DRAG_DAMPING

    if direction is DraggingDirection.DOWN:
        width = 0.0
    elif direction in (DraggingDirection.LEFT, DraggingDirection.RIGHT):
        height = 0.0
    else:
        width = height = 0.0

    # Dragging up has no meaning
    height = max(0.0, height)

    return Offset(
        rubber_band(width, geometry.horizontal_limit),
        rubber_band(height, geometry.vertical_limit),
    )


def resolve_action(direction: DraggingDirection, dx: float,
                   dy: float) -> Optional[CounterAction]:
    """
    Decide whether a released drag went far enough to act.

    Returns:
        The action for the committed direction, or None when the drag
        ended inside the start zone.
    """
    if direction is DraggingDirection.RIGHT and dx > START_ZONE:
        return CounterAction.INCREASE
    if direction is DraggingDirection.LEFT and dx < -START_ZONE:
        return CounterAction.DECREASE
    if direction is DraggingDirection.DOWN and dy > START_ZONE:
        return CounterAction.RESET
    return None


class DragTracker:
    """
    Explicit Idle/Dragging state machine for one label drag at a time.

    The tracker owns no counter; it only reports which action a gesture
    resolved to, so it can be driven headless in tests or wired to any
    widget toolkit.

    Attributes:
        geometry: Sizes used for the offset limits
        phase: IDLE or DRAGGING
        direction: Latched direction (NONE while idle)
        offset: Current label offset (zero while idle)

    Example:
        >>> tracker = DragTracker(CounterGeometry())
        >>> tracker.begin()
        >>> tracker.update(50, 5)
        Offset(width=37.5, height=0.0)
        >>> tracker.end(60, 5)
        <CounterAction.INCREASE: 'increase'>
    """

    def __init__(self, geometry: Optional[CounterGeometry] = None):
        """
        Initialize the tracker in the idle phase.

        Args:
            geometry: Counter sizes (defaults to the default width)
        """
        self.geometry = geometry or CounterGeometry()
        self.phase = GesturePhase.IDLE
        self.direction = DraggingDirection.NONE
        self.offset = Offset()

    @property
    def is_dragging(self) -> bool:
        return self.phase is GesturePhase.DRAGGING

    def begin(self) -> None:
        """Start a gesture, cancelling any gesture still in progress."""
        if self.is_dragging:
            logger.debug("new gesture cancels drag committed to %s", self.direction.value)
        self.phase = GesturePhase.DRAGGING
        self.direction = DraggingDirection.NONE
        self.offset = Offset()

    def update(self, dx: float, dy: float) -> Offset:
        """
        Feed the total translation since the press.

        Args:
            dx: Horizontal translation
            dy: Vertical translation

        Returns:
            The new label offset
        """
        if not self.is_dragging:
            return self.offset

        if self.direction is DraggingDirection.NONE:
            self.direction = classify_direction(dx, dy)
            if self.direction is not DraggingDirection.NONE:
                logger.debug("drag committed to %s", self.direction.value)

        self.offset = compute_offset(dx, dy, self.direction, self.geometry)
        return self.offset

    def end(self, dx: float, dy: float) -> Optional[CounterAction]:
        """
        Finish the gesture and return to idle.

        Args:
            dx: Final horizontal translation
            dy: Final vertical translation

        Returns:
            The action to apply, or None if the drag was inconclusive
        """
        if not self.is_dragging:
            return None

        action = resolve_action(self.direction, dx, dy)
        if action is not None:
            logger.debug("drag %s released at (%.1f, %.1f): %s",
                         self.direction.value, dx, dy, action.value)
        self._to_idle()
        return action

    def cancel(self) -> None:
        """Abandon the gesture without an action."""
        self._to_idle()

    def _to_idle(self) -> None:
        self.phase = GesturePhase.IDLE
        self.direction = DraggingDirection.NONE
        self.offset = Offset()
