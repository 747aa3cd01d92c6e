"""
================================================================================
Counter View - The Tally Counter Widget
================================================================================

This module ties the interaction model to the screen. The user can:
    - Tap the count to add one
    - Drag it right to add one, left to take one away
    - Pull it down to reset to zero
    - Press the minus, reset and plus controls directly

Design Philosophy:
    "Design is not just what it looks like. Design is how it works." - Steve Jobs

While dragging, the label follows the finger (damped and rubber-banded),
the control pill drifts after it, the control glyphs brighten or fade and
the pill darkens. On release the count changes at once and the label
springs back to the centre.

Layout (not to scale):

    +------------------------------------------+
    |   (  -  )        (  x  )        (  +  )  |   <- control pill
    |                  ( 123 )                 |   <- count label (on top)
    +------------------------------------------+
"""

import logging
import math
from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import (
    QPointF, QRectF, QPropertyAnimation, QEasingCurve, pyqtProperty, pyqtSignal
)
from PyQt6.QtGui import QPainter, QBrush, QPainterPath

try:
    from ..core import (
        CounterAction, CounterGeometry, DraggingDirection, DragTracker,
        Offset, TallyCounter, VisualFeedback, feedback_for
    )
    from ..styles.theme import color
    from ..utils.constants import (
        DEFAULT_WIDTH, MIN_COUNT, TAP_SLOP,
        SPRING_DURATION_MS, SPRING_OVERSHOOT, COUNT_BUMP_MS, COUNT_BUMP_SCALE
    )
    from .control_button import ControlButton
    from .count_label import CountLabel
except ImportError:
    from core import (
        CounterAction, CounterGeometry, DraggingDirection, DragTracker,
        Offset, TallyCounter, VisualFeedback, feedback_for
    )
    from styles.theme import color
    from utils.constants import (
        DEFAULT_WIDTH, MIN_COUNT, TAP_SLOP,
        SPRING_DURATION_MS, SPRING_OVERSHOOT, COUNT_BUMP_MS, COUNT_BUMP_SCALE
    )
    from widgets.control_button import ControlButton
    from widgets.count_label import CountLabel

logger = logging.getLogger(__name__)


class CounterView(QWidget):
    """
    A tally counter driven by taps, drags and control buttons.

    Signals:
        count_changed: Emitted with the new count whenever it changes
        action_triggered: Emitted with the action name when a drag commits

    Attributes:
        sizes: CounterGeometry derived from the configured width
        counter: The TallyCounter holding the value
        tracker: The DragTracker interpreting label drags

    Example:
        >>> view = CounterView(width=300, initial_count=5)
        >>> view.count_changed.connect(print)
        >>> view.increase()
        6
    """

    count_changed = pyqtSignal(int)
    action_triggered = pyqtSignal(str)

    def __init__(self, width: float = DEFAULT_WIDTH, initial_count: int = MIN_COUNT,
                 parent=None):
        """
        Initialize the counter view.

        Args:
            width: Width of the control pill; every size derives from it
            initial_count: Count shown at start
            parent: Parent widget (optional)
        """
        super().__init__(parent)

        self.sizes = CounterGeometry(width)
        self.counter = TallyCounter(initial_count)
        self.tracker = DragTracker(self.sizes)

        self._label_offset = QPointF(0, 0)
        self._press_pos: Optional[QPointF] = None
        self._travel = 0.0

        self._setup_size()
        self._setup_controls()
        self._setup_label()
        self._setup_animations()
        self._apply_feedback()

    # =========================================================================
    # Initialization
    # =========================================================================

    def _setup_size(self) -> None:
        """Reserve room for the pill plus the label's downward travel."""
        s = self.sizes
        self.setFixedSize(
            int(math.ceil(s.width + 2 * s.spacing)),
            int(math.ceil(s.height + 2 * s.spacing + s.vertical_limit * 1.5)),
        )

    def _setup_controls(self) -> None:
        """Create the minus, reset and plus controls."""
        size = self.sizes.control_size
        self.decrease_button = ControlButton('minus', size, self)
        self.reset_button = ControlButton('xmark', size, self)
        self.increase_button = ControlButton('plus', size, self)

        self.decrease_button.clicked.connect(self.decrease)
        self.reset_button.clicked.connect(self.reset)
        self.increase_button.clicked.connect(self.increase)

    def _setup_label(self) -> None:
        """Create the count label above the controls."""
        self.label = CountLabel(self.sizes.label_size, self.sizes.label_font_size, self)
        self.label.set_count(self.counter.count)
        self.label.raise_()

        self.label.pressed.connect(self._on_label_pressed)
        self.label.moved.connect(self._on_label_moved)
        self.label.released.connect(self._on_label_released)

    def _setup_animations(self) -> None:
        """Initialize the spring-back and count bump animations."""
        curve = QEasingCurve(QEasingCurve.Type.OutBack)
        curve.setOvershoot(SPRING_OVERSHOOT)

        self._spring_anim = QPropertyAnimation(self, b"labelOffset")
        self._spring_anim.setDuration(SPRING_DURATION_MS)
        self._spring_anim.setEasingCurve(curve)

        self._bump_anim = QPropertyAnimation(self.label, b"scale")
        self._bump_anim.setDuration(COUNT_BUMP_MS)
        self._bump_anim.setStartValue(1.0)
        self._bump_anim.setKeyValueAt(0.5, COUNT_BUMP_SCALE)
        self._bump_anim.setEndValue(1.0)
        self._bump_anim.setEasingCurve(QEasingCurve.Type.OutCubic)

    # =========================================================================
    # Qt Properties for Animation
    # =========================================================================

    @pyqtProperty(QPointF)
    def labelOffset(self) -> QPointF:
        """Get the displayed label offset."""
        return QPointF(self._label_offset)

    @labelOffset.setter
    def labelOffset(self, value: QPointF) -> None:
        """Set the displayed label offset and refresh everything derived from it."""
        self._label_offset = QPointF(value)
        self._apply_feedback()

    # =========================================================================
    # State
    # =========================================================================

    @property
    def count(self) -> int:
        return self.counter.count

    @property
    def direction(self) -> DraggingDirection:
        """Direction the current drag committed to (NONE when idle)."""
        return self.tracker.direction

    @property
    def label_offset(self) -> Offset:
        """Displayed label offset, including any spring-back in progress."""
        return Offset(self._label_offset.x(), self._label_offset.y())

    @property
    def feedback(self) -> VisualFeedback:
        """Visual feedback for the displayed label offset."""
        return feedback_for(self.label_offset, self.sizes)

    # =========================================================================
    # Operations
    # =========================================================================

    def increase(self) -> int:
        """Add one (no-op at the maximum)."""
        return self._mutate(self.counter.increase)

    def decrease(self) -> int:
        """Take one away (no-op at zero)."""
        return self._mutate(self.counter.decrease)

    def reset(self) -> int:
        """Return to zero."""
        return self._mutate(self.counter.reset)

    def apply(self, action: CounterAction) -> int:
        """Run a gesture's action on the counter."""
        return self._mutate(lambda: self.counter.apply(action))

    def _mutate(self, operation) -> int:
        before = self.counter.count
        count = operation()
        if count != before:
            logger.debug("count %d -> %d", before, count)
            self.label.set_count(count)
            self._bump_anim.stop()
            self._bump_anim.start()
            self.count_changed.emit(count)
        return count

    # =========================================================================
    # Gesture Handling
    # =========================================================================

    def begin_drag(self) -> None:
        """Start a drag on the label, interrupting any spring-back."""
        self._spring_anim.stop()
        self.tracker.begin()
        self._travel = 0.0
        self.labelOffset = QPointF(0, 0)

    def drag_to(self, dx: float, dy: float) -> Offset:
        """
        Follow a drag.

        Args:
            dx: Horizontal translation since the press
            dy: Vertical translation since the press

        Returns:
            The new label offset
        """
        offset = self.tracker.update(dx, dy)
        if self.tracker.is_dragging:
            self._travel = max(self._travel, math.hypot(dx, dy))
            self.labelOffset = QPointF(offset.width, offset.height)
        return offset

    def end_drag(self, dx: float, dy: float) -> Optional[CounterAction]:
        """
        Finish a drag, apply its action and spring the label back.

        A gesture that never strayed past TAP_SLOP counts as a tap and
        adds one.

        Args:
            dx: Final horizontal translation
            dy: Final vertical translation

        Returns:
            The action applied, or None if the drag was inconclusive
        """
        if not self.tracker.is_dragging:
            return None

        action = self.tracker.end(dx, dy)
        if action is not None:
            self.apply(action)
            self.action_triggered.emit(action.value)
        elif max(self._travel, math.hypot(dx, dy)) < TAP_SLOP:
            action = CounterAction.INCREASE
            self.tap()

        self._spring_back()
        return action

    def tap(self) -> int:
        """A tap on the label adds one."""
        return self.increase()

    def _spring_back(self) -> None:
        """Animate the label offset back to the centre."""
        self._spring_anim.stop()
        self._spring_anim.setStartValue(QPointF(self._label_offset))
        self._spring_anim.setEndValue(QPointF(0, 0))
        self._spring_anim.start()

    def _on_label_pressed(self, global_pos: QPointF) -> None:
        self._press_pos = QPointF(global_pos)
        self.begin_drag()

    def _on_label_moved(self, global_pos: QPointF) -> None:
        if self._press_pos is None:
            return
        delta = global_pos - self._press_pos
        self.drag_to(delta.x(), delta.y())

    def _on_label_released(self, global_pos: QPointF) -> None:
        if self._press_pos is None:
            return
        delta = global_pos - self._press_pos
        self._press_pos = None
        self.end_drag(delta.x(), delta.y())

    # =========================================================================
    # Layout and Painting
    # =========================================================================

    def _pill_center(self) -> QPointF:
        """Resting centre of the control pill."""
        s = self.sizes
        return QPointF(self.width() / 2, s.spacing + s.height / 2)

    def _apply_feedback(self) -> None:
        """Position children and fade controls for the current label offset."""
        fb = self.feedback
        center = self._pill_center()
        pill = center + QPointF(fb.container_offset.width, fb.container_offset.height)

        step = self.sizes.control_size + self.sizes.spacing
        for button, dx, opacity in (
            (self.decrease_button, -step, fb.decrease_opacity),
            (self.reset_button, 0.0, fb.reset_opacity),
            (self.increase_button, step, fb.increase_opacity),
        ):
            button.move(
                int(round(pill.x() + dx - button.width() / 2)),
                int(round(pill.y() - button.height() / 2)),
            )
            button.iconOpacity = opacity

        label_center = center + self._label_offset
        self.label.move(
            int(round(label_center.x() - self.label.width() / 2)),
            int(round(label_center.y() - self.label.height() / 2)),
        )
        self.update()

    def pill_rect(self) -> QRectF:
        """Control pill rectangle including the parallax offset."""
        s = self.sizes
        offset = self.feedback.container_offset
        center = self._pill_center()
        return QRectF(
            center.x() - s.width / 2 + offset.width,
            center.y() - s.height / 2 + offset.height,
            s.width,
            s.height,
        )

    def paintEvent(self, event) -> None:
        """Paint the control pill and its darkening overlay."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        path = QPainterPath()
        path.addRoundedRect(self.pill_rect(), self.sizes.radius, self.sizes.radius)

        painter.fillPath(path, QBrush(color('controls_background')))

        overlay = self.feedback.overlay_opacity
        if overlay > 0:
            painter.fillPath(path, QBrush(color('overlay', overlay)))
        painter.end()
