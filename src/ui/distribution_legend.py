"""Legend row under the distribution bar: colour dot + 'name: duration' per item."""

from __future__ import annotations

from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget

from src.services.duration_projector import LegendEntry
from src.ui.distribution_painter import segment_color
from src.utils.config import LEGEND_DOT_SIZE


class _LegendChip(QWidget):
    def __init__(self, entry: LegendEntry, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        self.dot = QLabel()
        self.dot.setFixedSize(LEGEND_DOT_SIZE, LEGEND_DOT_SIZE)
        self.dot.setStyleSheet(
            f"background-color: {segment_color(entry.index).name()};"
            f" border-radius: {LEGEND_DOT_SIZE // 2}px;"
        )
        self.text = QLabel(entry.label)
        self.text.setStyleSheet("font-size: 11px;")
        layout.addWidget(self.dot)
        layout.addWidget(self.text)
        self.setStyleSheet("_LegendChip { background-color: rgba(128, 128, 128, 13); border-radius: 4px; }")


class DistributionLegend(QWidget):
    """Horizontal list of legend chips. Rebuilt when the item count changes, relabelled otherwise."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        self._layout.setSpacing(8)
        self._chips: list[_LegendChip] = []

    def set_entries(self, entries: list[LegendEntry]) -> None:
        if len(entries) == len(self._chips):
            for chip, entry in zip(self._chips, entries):
                chip.text.setText(entry.label)
            return

        for chip in self._chips:
            self._layout.removeWidget(chip)
            chip.deleteLater()
        self._chips = []
        # stretch 항목 제거
        while self._layout.count():
            self._layout.takeAt(0)
        for entry in entries:
            chip = _LegendChip(entry, self)
            self._layout.addWidget(chip)
            self._chips.append(chip)
        self._layout.addStretch()

    def labels(self) -> list[str]:
        return [chip.text.text() for chip in self._chips]
