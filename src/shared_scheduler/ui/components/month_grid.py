from __future__ import annotations

import html
from datetime import date
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFontMetrics, QMouseEvent, QResizeEvent
from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QSizePolicy, QVBoxLayout, QWidget

from ...config import AppPalette
from ...layout import WEEKDAY_LABELS, CalendarCell, Chip, MonthView


def _tooltip_markup(tooltip: str) -> str:
    # Qt treats tooltips that look like HTML as rich text, so always escape.
    return f"<p style='white-space:pre'>{html.escape(tooltip)}</p>"


class ChipLabel(QLabel):
    clicked = pyqtSignal(str)

    def __init__(self, chip: Chip, color: str) -> None:
        super().__init__()
        self.chip = chip
        self.setObjectName("eventChip")
        self.setToolTip(_tooltip_markup(chip.tooltip))
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.setSizePolicy(QSizePolicy.Policy.Ignored, QSizePolicy.Policy.Fixed)
        self.setStyleSheet(
            f"background-color: {color}; color: #031525; border-radius: 4px; padding: 1px 4px;"
        )
        self._refresh_text()

    def _refresh_text(self) -> None:
        metrics = QFontMetrics(self.font())
        available = max(self.width() - 8, 0)
        self.setText(metrics.elidedText(self.chip.label, Qt.TextElideMode.ElideRight, available))

    def resizeEvent(self, event: QResizeEvent) -> None:  # noqa: N802
        super().resizeEvent(event)
        self._refresh_text()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.chip.event_id)
        event.accept()


class DayCell(QFrame):
    day_activated = pyqtSignal(object)
    event_activated = pyqtSignal(str)

    def __init__(self, cell: CalendarCell, palette: AppPalette) -> None:
        super().__init__()
        self.cell = cell
        self.setObjectName("dayCell")
        self.setProperty("otherMonth", cell.is_other_month)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(2)

        number = QLabel(str(cell.date.day))
        number.setObjectName("dayNumber")
        number.setProperty("otherMonth", cell.is_other_month)
        layout.addWidget(number)

        for chip in cell.chips:
            label = ChipLabel(chip, palette.category_color(chip.category_id))
            label.clicked.connect(self.event_activated)
            layout.addWidget(label)
        layout.addStretch(1)

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:  # noqa: N802
        self.day_activated.emit(self.cell.date)
        event.accept()


class MonthGrid(QWidget):
    """Weekday header plus one row per week of the displayed month."""

    day_activated = pyqtSignal(object)
    event_activated = pyqtSignal(str)

    def __init__(self, palette: Optional[AppPalette] = None) -> None:
        super().__init__()
        self.palette_config = palette or AppPalette()
        self.grid = QGridLayout(self)
        self.grid.setContentsMargins(0, 0, 0, 0)
        self.grid.setSpacing(2)
        self._row_count = 0

    def set_view(self, view: MonthView) -> None:
        self._clear()
        for column, label in enumerate(WEEKDAY_LABELS):
            header = QLabel(label)
            header.setObjectName("weekdayHeader")
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.grid.addWidget(header, 0, column)
            self.grid.setColumnStretch(column, 1)

        for row_index, row in enumerate(view.rows, start=1):
            self.grid.setRowMinimumHeight(row_index, view.row_min_height)
            self.grid.setRowStretch(row_index, 1)
            for column, cell in enumerate(row):
                widget = DayCell(cell, self.palette_config)
                widget.day_activated.connect(self.day_activated)
                widget.event_activated.connect(self.event_activated)
                self.grid.addWidget(widget, row_index, column)
        self._row_count = view.row_count

    @property
    def row_count(self) -> int:
        return self._row_count

    def _clear(self) -> None:
        while self.grid.count():
            item = self.grid.takeAt(0)
            widget = item.widget() if item else None
            if widget is not None:
                widget.deleteLater()
        for row_index in range(1, self._row_count + 1):
            self.grid.setRowMinimumHeight(row_index, 0)
            self.grid.setRowStretch(row_index, 0)
