"""
Filter Display Widget
Animated frequency response curve of the modulated filter

Receives a fresh point list every frame from the AnimationDriver and
paints it as a gradient-filled area with a glowing accent stroke.
"""

from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QPointF
from PyQt5.QtGui import QPainter, QColor, QPen, QPainterPath, QLinearGradient

from .theme import COLORS
from filter_viz.config import SIZES


def hex_to_rgb(hex_str):
    """Convert '#rrggbb' or '#rgb' to an (r, g, b) tuple."""
    hex_str = hex_str.strip().lstrip('#')
    if len(hex_str) == 3:
        hex_str = ''.join(c + c for c in hex_str)
    n = int(hex_str, 16)
    return (n >> 16) & 255, (n >> 8) & 255, n & 255


def _hex_to_qcolor(hex_str, alpha=1.0):
    """Convert hex color string to QColor with alpha 0-1."""
    r, g, b = hex_to_rgb(hex_str)
    color = QColor(r, g, b)
    color.setAlphaF(alpha)
    return color


class FilterDisplay(QWidget):
    """
    Render sink for the response curve.

    Features:
    - Vertical gradient fill under the curve (accent 25% -> 0%)
    - Accent stroke with a soft glow underlay
    - Size read by the driver every frame
    """

    STROKE_WIDTH = 1.5
    GLOW_WIDTH = 6.0
    GLOW_ALPHA = 0.25
    FILL_ALPHA = 0.25

    def __init__(self, parent=None):
        super().__init__(parent)
        self._points = []
        self._accent = COLORS['accent_filter']

        self.setMinimumHeight(SIZES['display_min_height'])
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setAttribute(Qt.WA_OpaquePaintEvent)

    def viewport_size(self):
        """Current (width, height) in pixels."""
        return self.width(), self.height()

    def set_curve(self, points, accent_color):
        """Store the frame's points and schedule a repaint."""
        self._points = points
        self._accent = accent_color
        self.update()

    def paintEvent(self, event):
        """Draw background, fill and stroke."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        w = self.width()
        h = self.height()

        painter.fillRect(0, 0, w, h, QColor(COLORS['background_dark']))

        if len(self._points) < 2:
            return

        curve = self._curve_path()

        # Filled area under curve, closed along the bottom edge
        fill = QPainterPath(curve)
        fill.lineTo(w, h)
        fill.lineTo(0, h)
        fill.closeSubpath()

        gradient = QLinearGradient(0, 0, 0, h)
        gradient.setColorAt(0, _hex_to_qcolor(self._accent, self.FILL_ALPHA))
        gradient.setColorAt(1, _hex_to_qcolor(self._accent, 0.0))
        painter.fillPath(fill, gradient)

        # Glow underlay, then the curve itself
        painter.setBrush(Qt.NoBrush)
        glow_pen = QPen(_hex_to_qcolor(self._accent, self.GLOW_ALPHA))
        glow_pen.setWidthF(self.GLOW_WIDTH)
        glow_pen.setCapStyle(Qt.RoundCap)
        glow_pen.setJoinStyle(Qt.RoundJoin)
        painter.setPen(glow_pen)
        painter.drawPath(curve)

        pen = QPen(_hex_to_qcolor(self._accent))
        pen.setWidthF(self.STROKE_WIDTH)
        painter.setPen(pen)
        painter.drawPath(curve)

    def _curve_path(self):
        path = QPainterPath()
        x0, y0 = self._points[0]
        path.moveTo(QPointF(x0, y0))
        for x, y in self._points[1:]:
            path.lineTo(QPointF(x, y))
        return path
