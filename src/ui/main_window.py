"""Demo window: distribution settings, the slider with its legend, and a detail table."""

from __future__ import annotations

import logging
from dataclasses import replace

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeySequence, QUndoStack
from PySide6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QGroupBox,
    QHeaderView,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QSlider,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from src.models.distributable import Client
from src.models.distribution import DistributionConstraints, DistributionState
from src.services.duration_projector import legend_entries
from src.services.settings_manager import SettingsManager
from src.ui.commands import ChangeSharesCommand, EqualizeSharesCommand
from src.ui.distribution_legend import DistributionLegend
from src.ui.time_distribution_slider import TimeDistributionSlider
from src.utils.config import (
    APP_NAME,
    APP_VERSION,
    DURATION_RANGE,
    DURATION_STEP,
    ITEM_COUNT_MAX,
    ITEM_COUNT_MIN,
    MIN_SHARE_RANGE,
    MIN_SHARE_STEP,
)
from src.utils.i18n import tr
from src.utils.time_utils import format_duration, format_percent, hours_to_seconds

logger = logging.getLogger(__name__)


def _make_slider(lo: int, hi: int, value: int) -> QSlider:
    slider = QSlider(Qt.Orientation.Horizontal)
    slider.setRange(lo, hi)
    slider.setSingleStep(1)
    slider.setPageStep(1)
    slider.setValue(value)
    return slider


def _percent_steps(share: float) -> int:
    return int(round(share / MIN_SHARE_STEP))


class MainWindow(QMainWindow):
    def __init__(self, settings: SettingsManager | None = None) -> None:
        super().__init__()
        self.setWindowTitle(f"{tr('Time Distribution Slider')} - {APP_NAME} v{APP_VERSION}")
        self.resize(760, 720)

        self._settings = settings or SettingsManager()
        self._undo_stack = QUndoStack(self)

        max_items = max(ITEM_COUNT_MIN, min(ITEM_COUNT_MAX, self._settings.get_max_items()))
        count = max(ITEM_COUNT_MIN, min(max_items, self._settings.get_item_count()))
        min_lo, min_hi = MIN_SHARE_RANGE
        min_share = min(max(self._settings.get_min_share(), min_lo), min_hi)
        duration_lo, duration_hi = DURATION_RANGE
        duration = min(max(self._settings.get_total_duration(), duration_lo), duration_hi)

        self._state = DistributionState(
            total_duration=duration,
            items=[Client(name=tr("Client {}").format(i + 1)) for i in range(count)],
            constraints=DistributionConstraints(
                min_share=min_share,
                enable_push=self._settings.get_enable_push(),
            ),
        )

        self._build_ui(max_items)
        self._build_menu()
        self._undo_stack.indexChanged.connect(lambda _: self._refresh())
        self._refresh()

    # -------------------------------------------------------- UI setup

    def _build_ui(self, max_items: int) -> None:
        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setSpacing(20)

        # ---- Controls ----
        controls = QGroupBox(tr("Test settings"))
        controls_layout = QVBoxLayout(controls)

        self._count_label = QLabel()
        self._count_slider = _make_slider(ITEM_COUNT_MIN, max_items, len(self._state))
        self._count_slider.valueChanged.connect(self._on_count_changed)

        self._max_label = QLabel()
        self._max_slider = _make_slider(ITEM_COUNT_MIN, ITEM_COUNT_MAX, max_items)
        self._max_slider.valueChanged.connect(self._on_max_changed)

        self._duration_label = QLabel()
        self._duration_slider = _make_slider(
            DURATION_RANGE[0] // DURATION_STEP,
            DURATION_RANGE[1] // DURATION_STEP,
            int(self._state.total_duration // DURATION_STEP),
        )
        self._duration_slider.valueChanged.connect(self._on_duration_changed)

        self._min_share_label = QLabel()
        self._min_share_slider = _make_slider(
            _percent_steps(MIN_SHARE_RANGE[0]),
            _percent_steps(MIN_SHARE_RANGE[1]),
            _percent_steps(self._state.constraints.min_share),
        )
        self._min_share_slider.valueChanged.connect(self._on_min_share_changed)

        self._push_check = QCheckBox(tr("Allow pushing separators"))
        self._push_check.setChecked(self._state.constraints.enable_push)
        self._push_check.toggled.connect(self._on_push_toggled)

        self._equalize_btn = QPushButton(tr("Distribute evenly"))
        self._equalize_btn.clicked.connect(self._on_equalize)

        for label, slider in (
            (self._count_label, self._count_slider),
            (self._max_label, self._max_slider),
            (self._duration_label, self._duration_slider),
            (self._min_share_label, self._min_share_slider),
        ):
            controls_layout.addWidget(label)
            controls_layout.addWidget(slider)
        controls_layout.addWidget(self._push_check)
        controls_layout.addWidget(self._equalize_btn, alignment=Qt.AlignmentFlag.AlignLeft)
        layout.addWidget(controls)

        # ---- Slider ----
        slider_box = QGroupBox(tr("Time distribution"))
        slider_layout = QVBoxLayout(slider_box)
        self._slider = TimeDistributionSlider(
            self._state, hit_distance=self._settings.get_separator_hit_distance()
        )
        self._slider.shares_changed.connect(self._on_shares_changed)
        self._slider.drag_finished.connect(self._on_drag_finished)
        self._legend = DistributionLegend()
        slider_layout.addWidget(self._slider)
        slider_layout.addWidget(self._legend)
        layout.addWidget(slider_box)

        # ---- Details ----
        details_box = QGroupBox(tr("Distribution details"))
        details_layout = QVBoxLayout(details_box)
        self._details = QTableWidget(0, 3)
        self._details.horizontalHeader().setVisible(False)
        self._details.verticalHeader().setVisible(False)
        self._details.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._details.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._details.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        details_layout.addWidget(self._details)
        layout.addWidget(details_box)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        self.setCentralWidget(scroll)

    def _build_menu(self) -> None:
        edit_menu = self.menuBar().addMenu(tr("&Edit"))

        undo_action = self._undo_stack.createUndoAction(self, tr("&Undo"))
        undo_action.setShortcut(QKeySequence("Ctrl+Z"))
        edit_menu.addAction(undo_action)

        redo_action = self._undo_stack.createRedoAction(self, tr("&Redo"))
        redo_action.setShortcut(QKeySequence("Ctrl+Shift+Z"))
        edit_menu.addAction(redo_action)

    # -------------------------------------------------------- Refresh

    def _refresh(self) -> None:
        """Re-project durations and redraw everything that shows the shares."""
        state = self._state
        self._count_label.setText(tr("Number of clients: {}").format(len(state)))
        self._max_label.setText(tr("Max. clients: {}").format(self._max_slider.value()))
        self._duration_label.setText(tr("Total duration: {}").format(format_duration(state.total_duration)))
        self._min_share_label.setText(
            tr("Min. share per client: {}").format(format_percent(state.constraints.min_share))
        )

        entries = legend_entries(state.items, state.shares, state.total_duration)
        self._legend.set_entries(entries)

        self._details.setRowCount(len(entries))
        for row, entry in enumerate(entries):
            cells = (entry.item.name, entry.duration_text, f"({entry.percent_text})")
            for col, text in enumerate(cells):
                cell = QTableWidgetItem(text)
                if col > 0:
                    cell.setTextAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
                self._details.setItem(row, col, cell)

        if not state.constraints.is_feasible(len(state)):
            self.statusBar().showMessage(
                tr("Minimum share is too large for {} clients").format(len(state))
            )
        else:
            self.statusBar().showMessage(tr("Ready"))
        self._slider.refresh()

    # -------------------------------------------------------- Handlers

    def closeEvent(self, event: QCloseEvent) -> None:
        self._settings.sync()
        super().closeEvent(event)

    def _on_count_changed(self, count: int) -> None:
        old_items = self._state.items
        items = [
            old_items[i] if i < len(old_items) else Client(name=tr("Client {}").format(i + 1))
            for i in range(count)
        ]
        self._state.set_items(items)
        # 스냅샷이 이전 항목 id를 참조하므로 undo 기록을 비움
        self._undo_stack.clear()
        self._settings.set_item_count(count)
        logger.debug("Item count changed to %d", count)
        self._refresh()

    def _on_max_changed(self, max_items: int) -> None:
        self._settings.set_max_items(max_items)
        # setMaximum이 value를 줄이면 valueChanged → _on_count_changed
        self._count_slider.setMaximum(max_items)
        self._refresh()

    def _on_duration_changed(self, hours: int) -> None:
        self._state.total_duration = hours_to_seconds(hours)
        self._settings.set_total_duration(int(self._state.total_duration))
        self._refresh()

    def _on_min_share_changed(self, steps: int) -> None:
        min_share = steps * MIN_SHARE_STEP
        self._state.constraints = replace(self._state.constraints, min_share=min_share)
        self._settings.set_min_share(min_share)
        self._refresh()

    def _on_push_toggled(self, checked: bool) -> None:
        self._state.constraints = replace(self._state.constraints, enable_push=checked)
        self._settings.set_enable_push(checked)

    def _on_equalize(self) -> None:
        self._undo_stack.push(EqualizeSharesCommand(self._state))

    def _on_shares_changed(self, shares: dict) -> None:
        self._refresh()

    def _on_drag_finished(self, old: dict, new: dict) -> None:
        self._undo_stack.push(ChangeSharesCommand(self._state, old, new))

    # -------------------------------------------------------- Accessors (tests)

    @property
    def state(self) -> DistributionState:
        return self._state

    @property
    def slider(self) -> TimeDistributionSlider:
        return self._slider

    @property
    def undo_stack(self) -> QUndoStack:
        return self._undo_stack
