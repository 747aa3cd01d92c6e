"""
================================================================================
Logo Widget
================================================================================

The image shown above the counter. Purely cosmetic: if the image cannot
be loaded, a tally-mark glyph is painted in its place and the app carries
on.
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QPainter, QPen, QPixmap

try:
    from ..styles.theme import color
except ImportError:
    from styles.theme import color

logger = logging.getLogger(__name__)

DEFAULT_LOGO_PATH = Path(__file__).resolve().parent.parent / "assets" / "logo.svg"


class LogoWidget(QWidget):
    """
    Displays the logo image scaled to the counter width.

    Attributes:
        path: Image file that was requested
        pixmap: Loaded image, or None when the fallback glyph is drawn

    Example:
        >>> logo = LogoWidget(width=300)
        >>> logo.has_image
        True
    """

    def __init__(self, width: float, path: Optional[str] = None, parent=None):
        """
        Initialize the logo.

        Args:
            width: Width of the counter the logo sits above
            path: Image file (bundled logo if None)
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self.path = Path(path) if path else DEFAULT_LOGO_PATH
        self.pixmap = self._load(self.path)

        self.setFixedSize(int(width), int(width * 0.4))
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

    @property
    def has_image(self) -> bool:
        return self.pixmap is not None

    @staticmethod
    def _load(path: Path) -> Optional[QPixmap]:
        """Load an image, returning None if it is missing or unreadable."""
        if not path.exists():
            logger.warning("Logo not found: %s", path)
            return None

        pixmap = QPixmap(str(path))
        if pixmap.isNull():
            logger.warning("Logo could not be decoded: %s", path)
            return None
        return pixmap

    def paintEvent(self, event) -> None:
        """Paint the logo, or the fallback glyph."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform)

        if self.pixmap is not None:
            scaled = self.pixmap.scaled(
                self.size(),
                Qt.AspectRatioMode.KeepAspectRatio,
                Qt.TransformationMode.SmoothTransformation,
            )
            x = (self.width() - scaled.width()) // 2
            y = (self.height() - scaled.height()) // 2
            painter.drawPixmap(x, y, scaled)
        else:
            self._draw_tally(painter)
        painter.end()

    def _draw_tally(self, painter: QPainter) -> None:
        """Four strokes crossed by a fifth."""
        h = self.height() * 0.6
        step = h * 0.35
        box = QRectF(0, 0, step * 3, h)
        box.moveCenter(QPointF(self.width() / 2, self.height() / 2))

        pen = QPen(color('controls'))
        pen.setWidthF(max(2.0, h / 12))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        painter.setPen(pen)
        for i in range(4):
            x = box.left() + i * step
            painter.drawLine(QPointF(x, box.top()), QPointF(x, box.bottom()))

        pen.setColor(color('label_background'))
        painter.setPen(pen)
        painter.drawLine(
            QPointF(box.left() - step * 0.5, box.bottom() - h * 0.15),
            QPointF(box.right() + step * 0.5, box.top() + h * 0.15),
        )
