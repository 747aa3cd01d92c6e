"""
================================================================================
Count Label Widget
================================================================================

The circular label showing the count. It is the only surface the user
drags, so it reports its own press, move and release in global
coordinates and leaves the interpretation to the counter.

Design Philosophy:
    "Make it simple. Make it memorable. Make it inviting to look at." - Leo Burnett
"""

import math

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPointF, QRectF, pyqtProperty, pyqtSignal
from PyQt6.QtGui import QPainter, QBrush

try:
    from ..styles.theme import color, label_font
except ImportError:
    from styles.theme import color, label_font


class CountLabel(QWidget):
    """
    A circle with the count drawn in its centre.

    Signals:
        pressed: Emitted with the global position when the circle is pressed
        moved: Emitted with the global position while dragging
        released: Emitted with the global position on release

    Example:
        >>> label = CountLabel(100, font_size=40)
        >>> label.set_count(12)
    """

    pressed = pyqtSignal(QPointF)
    moved = pyqtSignal(QPointF)
    released = pyqtSignal(QPointF)

    def __init__(self, diameter: float, font_size: float, parent=None):
        """
        Initialize the count label.

        Args:
            diameter: Diameter of the circle in pixels
            font_size: Point size of the count text
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self.diameter = diameter
        self.font_size = font_size
        self._text = "0"
        self._scale = 1.0
        self._tracking = False

        # Room around the circle for the drop shadow
        self.margin = diameter * 0.12
        side = int(math.ceil(diameter + 2 * self.margin))
        self.setFixedSize(side, side)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setCursor(Qt.CursorShape.OpenHandCursor)

    @property
    def text(self) -> str:
        return self._text

    def set_count(self, count: int) -> None:
        """Show a new count."""
        self._text = str(count)
        self.setAccessibleName(self._text)
        self.update()

    @pyqtProperty(float)
    def scale(self) -> float:
        """Get the text scale factor."""
        return self._scale

    @scale.setter
    def scale(self, value: float) -> None:
        """Set the text scale factor and trigger repaint."""
        self._scale = value
        self.update()

    def circle_rect(self) -> QRectF:
        """The circle, in local coordinates."""
        return QRectF(self.margin, self.margin, self.diameter, self.diameter)

    def hit(self, pos: QPointF) -> bool:
        """Whether a local position lies inside the circle."""
        center = self.circle_rect().center()
        return math.hypot(pos.x() - center.x(), pos.y() - center.y()) <= self.diameter / 2

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def mousePressEvent(self, event) -> None:
        """Start tracking when the press lands inside the circle."""
        if event.button() != Qt.MouseButton.LeftButton or not self.hit(event.position()):
            event.ignore()
            return
        self._tracking = True
        self.setCursor(Qt.CursorShape.ClosedHandCursor)
        self.pressed.emit(event.globalPosition())

    def mouseMoveEvent(self, event) -> None:
        if self._tracking:
            self.moved.emit(event.globalPosition())

    def mouseReleaseEvent(self, event) -> None:
        if self._tracking and event.button() == Qt.MouseButton.LeftButton:
            self._tracking = False
            self.setCursor(Qt.CursorShape.OpenHandCursor)
            self.released.emit(event.globalPosition())

    def paintEvent(self, event) -> None:
        """Paint the shadow, the circle and the count."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        circle = self.circle_rect()

        # Shadow sits a little below the circle
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(color('shadow', 0.35)))
        painter.drawEllipse(circle.translated(0, self.margin * 0.5))

        painter.setBrush(QBrush(color('label_background')))
        painter.drawEllipse(circle)

        painter.setPen(color('text_white'))
        painter.setFont(label_font(self.font_size * self._scale))
        painter.drawText(circle, Qt.AlignmentFlag.AlignCenter, self._text)
        painter.end()
