"""
================================================================================
Visual Feedback - Drag-Driven Opacities and Offsets
================================================================================

Pure functions from the label offset to everything else that moves while
the user drags: control opacities, the parallax of the control pill and
the darkening overlay behind it.

Design Philosophy:
    "Good design is as little design as possible." - Dieter Rams

Nothing here is cached. The painter recomputes the feedback from the
current offset on every frame, so the visuals can never drift away from
the state that produced them.
"""

from dataclasses import dataclass

import numpy as np

try:
    from .geometry import CounterGeometry
    from .gesture import DraggingDirection, Offset
    from ..utils.constants import (
        BASE_CONTROL_OPACITY, PARALLAX_DIVISOR,
        OVERLAY_VERTICAL_WEIGHT, OVERLAY_HORIZONTAL_WEIGHT
    )
except ImportError:
    from core.geometry import CounterGeometry
    from core.gesture import DraggingDirection, Offset
    from utils.constants import (
        BASE_CONTROL_OPACITY, PARALLAX_DIVISOR,
        OVERLAY_VERTICAL_WEIGHT, OVERLAY_HORIZONTAL_WEIGHT
    )


def _unit(value: float) -> float:
    return float(np.clip(value, 0.0, 1.0))


def horizontal_fraction(offset: Offset, geometry: CounterGeometry) -> float:
    """How far the label is toward either side, from 0.0 to 1.0."""
    return _unit(abs(offset.width) / geometry.horizontal_limit)


def vertical_fraction(offset: Offset, geometry: CounterGeometry) -> float:
    """How far the label is pulled down, from 0.0 to 1.0."""
    return _unit(max(offset.height, 0.0) / geometry.vertical_limit)


def control_opacity(offset: Offset, geometry: CounterGeometry,
                    side: DraggingDirection) -> float:
    """
    Opacity of the minus (LEFT) or plus (RIGHT) control.

    At rest both controls sit at BASE_CONTROL_OPACITY. Dragging toward a
    control brightens it up to twice that, dragging away dims it, and
    pulling down fades both.

    Args:
        offset: Current label offset
        geometry: Counter sizes
        side: DraggingDirection.LEFT or DraggingDirection.RIGHT

    Returns:
        Opacity from 0.0 to 1.0
    """
    if side not in (DraggingDirection.LEFT, DraggingDirection.RIGHT):
        raise ValueError(f"Control side must be LEFT or RIGHT, got {side!r}")

    sign = 1.0 if side is DraggingDirection.RIGHT else -1.0
    ratio = float(np.clip(offset.width * sign / geometry.horizontal_limit, -1.0, 1.0))
    toward = max(ratio, 0.0)
    away = max(-ratio, 0.0)
    vertical = vertical_fraction(offset, geometry)

    return _unit(BASE_CONTROL_OPACITY * (1.0 + toward - away - vertical))


def reset_control_opacity(offset: Offset, geometry: CounterGeometry) -> float:
    """The reset control appears only as the label is pulled down."""
    return vertical_fraction(offset, geometry)


def container_offset(offset: Offset) -> Offset:
    """The control pill follows the label at a fraction of its travel."""
    return Offset(offset.width / PARALLAX_DIVISOR, offset.height / PARALLAX_DIVISOR)


def overlay_opacity(offset: Offset, geometry: CounterGeometry) -> float:
    """Darkening of the control pill while dragging."""
    return _unit(
        OVERLAY_VERTICAL_WEIGHT * vertical_fraction(offset, geometry)
        + OVERLAY_HORIZONTAL_WEIGHT * horizontal_fraction(offset, geometry)
    )


@dataclass(frozen=True)
class VisualFeedback:
    """
    Everything the painter needs for one frame.

    Attributes:
        decrease_opacity: Opacity of the minus control
        reset_opacity: Opacity of the xmark control
        increase_opacity: Opacity of the plus control
        container_offset: Parallax offset of the control pill
        overlay_opacity: Darkening of the control pill
    """

    decrease_opacity: float
    reset_opacity: float
    increase_opacity: float
    container_offset: Offset
    overlay_opacity: float


def feedback_for(offset: Offset, geometry: CounterGeometry) -> VisualFeedback:
    """
    Compute the full visual feedback for a label offset.

    Example:
        >>> fb = feedback_for(Offset(), CounterGeometry())
        >>> fb.increase_opacity, fb.reset_opacity
        (0.4, 0.0)
    """
    return VisualFeedback(
        decrease_opacity=control_opacity(offset, geometry, DraggingDirection.LEFT),
        reset_opacity=reset_control_opacity(offset, geometry),
        increase_opacity=control_opacity(offset, geometry, DraggingDirection.RIGHT),
        container_offset=container_offset(offset),
        overlay_opacity=overlay_opacity(offset, geometry),
    )
