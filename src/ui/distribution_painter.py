"""DistributionPainter: TimeDistributionSlider의 렌더링 로직을 캡슐화."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen

from src.utils.config import HANDLE_DIAMETER, SEGMENT_COLORS, SLIDER_HEIGHT

if TYPE_CHECKING:
    from src.ui.time_distribution_slider import TimeDistributionSlider


def segment_color(index: int) -> QColor:
    """Palette colour for the item at *index* (cycles)."""
    r, g, b = SEGMENT_COLORS[index % len(SEGMENT_COLORS)]
    return QColor(r, g, b)


class DistributionPainter:
    """TimeDistributionSlider 전용 렌더러."""

    _TRACK_COLOR = QColor(128, 128, 128, 26)
    _HANDLE_COLOR = QColor(255, 255, 255)
    _HANDLE_SHADOW = QColor(0, 0, 0, 60)
    _ACTIVE_HANDLE_BORDER = QColor(100, 220, 255)

    def __init__(self, slider: TimeDistributionSlider) -> None:
        self.slider = slider

    def bar_rect(self) -> QRectF:
        """Capsule area, vertically centred in the widget."""
        s = self.slider
        top = (s.height() - SLIDER_HEIGHT) / 2
        return QRectF(0, top, s.width(), SLIDER_HEIGHT)

    def paint(self) -> None:
        """TimeDistributionSlider.paintEvent에서 호출."""
        s = self.slider
        painter = QPainter(s)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = self.bar_rect()
        radius = rect.height() / 2

        capsule = QPainterPath()
        capsule.addRoundedRect(rect, radius, radius)
        painter.fillPath(capsule, self._TRACK_COLOR)

        bounds = s.boundaries()
        self._draw_segments(painter, capsule, rect, bounds)
        self._draw_handles(painter, rect, bounds)
        painter.end()

    def _draw_segments(self, painter: QPainter, capsule: QPainterPath,
                       rect: QRectF, bounds: list[float]) -> None:
        painter.save()
        painter.setClipPath(capsule)
        painter.setPen(Qt.PenStyle.NoPen)
        w = rect.width()
        for i in range(len(bounds) - 1):
            x1 = rect.left() + bounds[i] * w
            seg_w = max(0.0, (bounds[i + 1] - bounds[i]) * w)
            if seg_w <= 0:
                continue
            painter.fillRect(QRectF(x1, rect.top(), seg_w, rect.height()), segment_color(i))
        painter.restore()

    def _draw_handles(self, painter: QPainter, rect: QRectF, bounds: list[float]) -> None:
        if len(bounds) < 3:
            return
        r = HANDLE_DIAMETER / 2
        cy = rect.center().y()
        active = self.slider.active_separator()
        for index in range(len(bounds) - 2):
            cx = rect.left() + bounds[index + 1] * rect.width()
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(self._HANDLE_SHADOW))
            painter.drawEllipse(QPointF(cx, cy + 1), r, r)
            if index == active:
                painter.setPen(QPen(self._ACTIVE_HANDLE_BORDER, 2))
            painter.setBrush(QBrush(self._HANDLE_COLOR))
            painter.drawEllipse(QPointF(cx, cy), r, r)
