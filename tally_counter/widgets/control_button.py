"""
================================================================================
Control Button Widget
================================================================================

A round icon button for the minus, reset and plus controls of the
counter.

Design Philosophy:
    "Details matter, it's worth waiting to get it right." - Steve Jobs

The button responds to user interaction with:
    - A white disc that fades in while pressed
    - The glyph inverting to the pill colour on top of the disc
    - An icon opacity driven by the counter's drag feedback
"""

from PyQt6.QtWidgets import QPushButton
from PyQt6.QtCore import Qt, QPropertyAnimation, QEasingCurve, QPointF, QRectF, pyqtProperty
from PyQt6.QtGui import QPainter, QPen, QBrush

try:
    from ..styles.theme import color
    from ..utils.constants import PRESS_FADE_MS
except ImportError:
    from styles.theme import color
    from utils.constants import PRESS_FADE_MS

GLYPHS = ('minus', 'xmark', 'plus')


class ControlButton(QPushButton):
    """
    A circular glyph button with a press overlay.

    Attributes:
        glyph: The drawn symbol ('minus', 'xmark' or 'plus')

    Example:
        >>> btn = ControlButton('plus', 71)
        >>> btn.clicked.connect(counter.increase)
    """

    def __init__(self, glyph: str, size: float, parent=None):
        """
        Initialize the control button.

        Args:
            glyph: One of 'minus', 'xmark', 'plus'
            size: Diameter of the button in pixels
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        if glyph not in GLYPHS:
            raise ValueError(f"Unknown glyph {glyph!r}, expected one of {GLYPHS}")

        self.glyph = glyph
        self._press_opacity = 0.0
        self._icon_opacity = 1.0

        self._setup_appearance(size)
        self._setup_animations()

    def _setup_appearance(self, size: float) -> None:
        """Configure size, cursor and transparency."""
        self.setFixedSize(int(round(size)), int(round(size)))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setFlat(True)
        self.setAccessibleName(self.glyph)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

    def _setup_animations(self) -> None:
        """Initialize the press fade animation."""
        self._press_anim = QPropertyAnimation(self, b"pressOpacity")
        self._press_anim.setDuration(PRESS_FADE_MS)
        self._press_anim.setEasingCurve(QEasingCurve.Type.Linear)

    # =========================================================================
    # Qt Properties for Animation
    # =========================================================================

    @pyqtProperty(float)
    def pressOpacity(self) -> float:
        """Get the opacity of the pressed disc."""
        return self._press_opacity

    @pressOpacity.setter
    def pressOpacity(self, value: float) -> None:
        """Set the pressed disc opacity and trigger repaint."""
        self._press_opacity = value
        self.update()

    @pyqtProperty(float)
    def iconOpacity(self) -> float:
        """Get the glyph opacity."""
        return self._icon_opacity

    @iconOpacity.setter
    def iconOpacity(self, value: float) -> None:
        """Set the glyph opacity and trigger repaint."""
        self._icon_opacity = value
        self.update()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def mousePressEvent(self, event) -> None:
        """Fade the pressed disc in."""
        self._fade_press(1.0)
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        """Fade the pressed disc out."""
        self._fade_press(0.0)
        super().mouseReleaseEvent(event)

    def _fade_press(self, target: float) -> None:
        self._press_anim.stop()
        self._press_anim.setStartValue(self._press_opacity)
        self._press_anim.setEndValue(target)
        self._press_anim.start()

    def paintEvent(self, event) -> None:
        """Paint the pressed disc and the glyph."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        size = min(self.width(), self.height())
        bounds = QRectF(0, 0, size, size)

        if self._press_opacity > 0:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(color('pressed', self._press_opacity)))
            painter.drawEllipse(bounds)

        glyph_color = 'controls_background' if self._press_opacity >= 0.5 else 'controls'
        alpha = 1.0 if self._press_opacity >= 0.5 else self._icon_opacity
        pen = QPen(color(glyph_color, alpha))
        pen.setWidthF(max(1.5, size / 14))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)

        self._draw_glyph(painter, bounds.adjusted(
            size / 3.5, size / 3.5, -size / 3.5, -size / 3.5
        ))
        painter.end()

    def _draw_glyph(self, painter: QPainter, box: QRectF) -> None:
        """Draw the button symbol inside box."""
        center = box.center()
        if self.glyph in ('minus', 'plus'):
            painter.drawLine(QPointF(box.left(), center.y()), QPointF(box.right(), center.y()))
        if self.glyph == 'plus':
            painter.drawLine(QPointF(center.x(), box.top()), QPointF(center.x(), box.bottom()))
        if self.glyph == 'xmark':
            inset = box.width() * 0.1
            inner = box.adjusted(inset, inset, -inset, -inset)
            painter.drawLine(inner.topLeft(), inner.bottomRight())
            painter.drawLine(inner.topRight(), inner.bottomLeft())
