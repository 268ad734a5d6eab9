"""
QPainter rendering of the migration canvas.

Draws the three zone bands, each neuron's guide path, the neurons themselves
and the column captions. Neuron positions come from the core animators; this
module only converts them to pixels.
"""
from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPainterPath, QPen

from core.config import DEFAULT_CONFIG


def qcolor(rgba, opacity=1.0):
    """Convert an (r, g, b, alpha) tuple to QColor, optionally scaling alpha."""
    r, g, b, a = rgba
    color = QColor(r, g, b)
    color.setAlphaF(max(0.0, min(1.0, a * opacity)))
    return color


def polyline(points, offset_x=0.0):
    """Build a QPainterPath through an (N, 2) array of points."""
    path = QPainterPath()
    if len(points) == 0:
        return path
    path.moveTo(QPointF(points[0][0] + offset_x, points[0][1]))
    for x, y in points[1:]:
        path.lineTo(QPointF(x + offset_x, y))
    return path


class MigrationPainter:
    """Stateless renderer for one frame of the migration canvas."""

    def __init__(self, config=DEFAULT_CONFIG):
        self.config = config
        self.label_font = QFont()
        self.label_font.setPointSize(9)
        self.label_font.setBold(True)
        self.badge_font = QFont()
        self.badge_font.setPointSize(7)
        self.badge_font.setBold(True)

    def paint(self, painter: QPainter, rect: QRectF, neurons, now):
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.draw_zones(painter, rect)

        column_width = rect.width() / max(1, len(neurons))
        for index, neuron in enumerate(neurons):
            column = QRectF(
                rect.left() + column_width * index, rect.top(), column_width, rect.height()
            )
            self.draw_guides(painter, column, neuron)
            self.draw_neuron(painter, column, neuron, now)
            self.draw_caption(painter, column, self.config.text.captions[index])

    def draw_zones(self, painter, rect):
        """Three equal horizontal bands with a capsule label in the middle of each."""
        titles = self.config.text.zones
        colors = self.config.zone_colors()
        band_height = rect.height() / len(titles)
        painter.setFont(self.label_font)
        metrics = painter.fontMetrics()

        for i, (title, color) in enumerate(zip(titles, colors)):
            band = QRectF(rect.left(), rect.top() + band_height * i, rect.width(), band_height)
            painter.fillRect(band, qcolor(color))

            text_width = metrics.horizontalAdvance(title) + 12
            text_height = metrics.height() + 6
            capsule = QRectF(
                band.center().x() - text_width / 2,
                band.center().y() - text_height / 2,
                text_width,
                text_height,
            )
            painter.setPen(Qt.NoPen)
            painter.setBrush(QColor(255, 255, 255, 170))
            painter.drawRoundedRect(capsule, text_height / 2, text_height / 2)
            painter.setPen(qcolor(self.config.colors.text))
            painter.drawText(capsule, Qt.AlignCenter, title)

    def draw_guides(self, painter, column, neuron):
        paths = neuron.guide_paths(column.width(), column.height())
        if not paths:
            return
        if neuron.guide_style == "dashed":
            pen = QPen(qcolor(self.config.colors.radial_glia), 2)
            pen.setDashPattern([2.5, 2.5])
        else:
            pen = QPen(qcolor(neuron.color, opacity=0.3), 1)
            pen.setCapStyle(Qt.RoundCap)
            pen.setJoinStyle(Qt.RoundJoin)
        painter.setPen(pen)
        painter.setBrush(Qt.NoBrush)
        for points in paths:
            shifted = points.copy()
            shifted[:, 1] += column.top()
            painter.drawPath(polyline(shifted, offset_x=column.left()))

    def draw_neuron(self, painter, column, neuron, now):
        size = self.config.layout.neuron_size
        x, y = neuron.position(column.width(), column.height(), now)
        center = QPointF(column.left() + x, column.top() + y)

        painter.setPen(Qt.NoPen)
        painter.setBrush(QBrush(qcolor(neuron.color)))
        painter.drawEllipse(center, size / 2, size / 2)

        painter.setPen(QColor(Qt.white))
        painter.setFont(self.badge_font)
        badge = QRectF(center.x() - size / 2, center.y() - size / 2, size, size)
        painter.drawText(badge, Qt.AlignCenter, neuron.label)

    def draw_caption(self, painter, column, caption):
        painter.setPen(qcolor(self.config.colors.text))
        painter.setFont(self.label_font)
        area = column.adjusted(4, 4, -4, -4)
        painter.drawText(area, Qt.AlignHCenter | Qt.AlignBottom, caption)
