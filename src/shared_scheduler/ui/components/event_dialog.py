from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Optional

from PyQt6.QtCore import QDate, Qt, QTime
from PyQt6.QtWidgets import (
    QCheckBox,
    QDateEdit,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QTextEdit,
    QTimeEdit,
    QVBoxLayout,
)

from ...domain import Event


class EventDialog(QDialog):
    """Create or edit a single event. Edit mode also offers deletion."""

    def __init__(
        self,
        *,
        users: Iterable[str],
        default_date: date,
        default_category: str,
        event: Optional[Event] = None,
    ) -> None:
        super().__init__()
        self.delete_requested = False
        self.setWindowTitle("Edit Event" if event else "New Event")
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.title_input = QLineEdit(event.title if event else "")
        self.title_input.setPlaceholderText("Title")
        form.addRow("Title", self.title_input)

        initial_date = event.date if event else default_date
        self.date_input = QDateEdit(QDate(initial_date.year, initial_date.month, initial_date.day))
        self.date_input.setCalendarPopup(True)
        self.date_input.setDisplayFormat("yyyy-MM-dd")
        form.addRow("Date", self.date_input)

        self.all_day_input = QCheckBox("All day")
        self.time_input = QTimeEdit()
        self.time_input.setDisplayFormat("HH:mm")
        if event and event.time:
            hours, minutes = (int(part) for part in event.time.split(":"))
            self.time_input.setTime(QTime(hours, minutes))
        else:
            self.time_input.setTime(QTime(9, 0))
            self.all_day_input.setChecked(True)
        self.time_input.setEnabled(not self.all_day_input.isChecked())
        self.all_day_input.toggled.connect(lambda checked: self.time_input.setEnabled(not checked))
        form.addRow("", self.all_day_input)
        form.addRow("Time", self.time_input)

        self.assignee_list = QListWidget()
        selected = set(event.assignees) if event else set()
        for name in users:
            item = QListWidgetItem(name)
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(Qt.CheckState.Checked if name in selected else Qt.CheckState.Unchecked)
            self.assignee_list.addItem(item)
        form.addRow("Assignees", self.assignee_list)

        self.category_input = QLineEdit(event.category_id if event else default_category)
        form.addRow("Category", self.category_input)

        self.description_input = QTextEdit()
        self.description_input.setPlainText((event.description or "") if event else "")
        self.description_input.setPlaceholderText("Optional description")
        form.addRow("Description", self.description_input)

        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        if event:
            delete_button = QPushButton("Delete")
            delete_button.setObjectName("secondaryButton")
            delete_button.clicked.connect(self._request_delete)
            buttons.addButton(delete_button, QDialogButtonBox.ButtonRole.DestructiveRole)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def _request_delete(self) -> None:
        self.delete_requested = True
        self.accept()

    def values(self) -> dict[str, Any]:
        assignees = [
            self.assignee_list.item(index).text()
            for index in range(self.assignee_list.count())
            if self.assignee_list.item(index).checkState() == Qt.CheckState.Checked
        ]
        return {
            "title": self.title_input.text().strip(),
            "date": self.date_input.date().toPyDate(),
            "time": None if self.all_day_input.isChecked() else self.time_input.time().toString("HH:mm"),
            "assignees": assignees,
            "category_id": self.category_input.text().strip() or None,
            "description": self.description_input.toPlainText().strip() or None,
        }
