"""Custom-painted bar that splits a duration between items with draggable separators."""

from __future__ import annotations

import logging

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QCursor, QKeyEvent, QMouseEvent, QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from src.models.distribution import DistributionState
from src.services.separator_locator import locate_separator
from src.ui.distribution_drag import DistributionDragManager
from src.ui.distribution_painter import DistributionPainter
from src.utils.config import HANDLE_DIAMETER, SEPARATOR_HIT_PX

logger = logging.getLogger(__name__)


class TimeDistributionSlider(QWidget):
    """Distribution bar: one coloured segment per item, one handle per separator.

    The widget never owns the shares; it reads and replaces ``state.shares``
    of the DistributionState given by the host.
    """

    shares_changed = Signal(object)  # ShareMap (item id -> share), after every drag step
    drag_finished = Signal(object, object)  # (old ShareMap, new ShareMap) for one gesture

    def __init__(self, state: DistributionState, parent=None,
                 hit_distance: float = SEPARATOR_HIT_PX):
        super().__init__(parent)
        self.setMouseTracking(True)
        self.setFocusPolicy(Qt.FocusPolicy.ClickFocus)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setFixedHeight(HANDLE_DIAMETER + 8)

        self._drag_mgr = DistributionDragManager(state, hit_distance)
        self._painter = DistributionPainter(self)

    # -------------------------------------------------------- Public API

    @property
    def state(self) -> DistributionState:
        return self._drag_mgr.state

    def set_state(self, state: DistributionState) -> None:
        self._drag_mgr.cancel()
        self._drag_mgr.state = state
        self.update()

    def set_hit_distance(self, pixels: float) -> None:
        self._drag_mgr.hit_distance = pixels

    def boundaries(self) -> list[float]:
        return self._drag_mgr.boundaries()

    def active_separator(self) -> int | None:
        return self._drag_mgr.active_index

    def refresh(self) -> None:
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(320, HANDLE_DIAMETER + 8)

    # ----------------------------------------------------------- Paint

    def paintEvent(self, event: QPaintEvent) -> None:
        self._painter.paint()

    # ----------------------------------------------------------- Mouse

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        x = event.position().x()
        index = self._drag_mgr.start(x, self.width())
        if index is None:
            logger.debug("No separator within %.0f px of x=%.1f", self._drag_mgr.hit_distance, x)
            return
        self.setCursor(QCursor(Qt.CursorShape.SizeHorCursor))
        # 누르는 순간에도 구분선을 포인터 위치로 이동
        self._apply_move(x)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        x = event.position().x()
        if self._drag_mgr.is_active:
            self._apply_move(x)
            return

        # Hover cursor
        if locate_separator(x, self.width(), self.boundaries(), self._drag_mgr.hit_distance) is not None:
            self.setCursor(QCursor(Qt.CursorShape.SizeHorCursor))
        else:
            self.setCursor(QCursor(Qt.CursorShape.ArrowCursor))

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            return
        result = self._drag_mgr.end()
        self.setCursor(QCursor(Qt.CursorShape.ArrowCursor))
        self.update()
        if result is not None:
            old, new = result
            self.drag_finished.emit(old, new)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Escape and self._drag_mgr.is_active:
            self._drag_mgr.cancel()
            self.setCursor(QCursor(Qt.CursorShape.ArrowCursor))
            self.shares_changed.emit(dict(self.state.shares))
            self.update()
            return
        super().keyPressEvent(event)

    def _apply_move(self, x: float) -> None:
        shares = self._drag_mgr.update(x, self.width())
        if shares is None:
            return
        self.shares_changed.emit(dict(shares))
        self.update()
