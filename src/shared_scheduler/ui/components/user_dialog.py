from __future__ import annotations

from typing import Iterable

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QHBoxLayout,
    QLineEdit,
    QListWidget,
    QPushButton,
    QVBoxLayout,
)


class UserDialog(QDialog):
    """Lists users and forwards add/delete requests.

    The dialog itself changes nothing; the owner runs the transaction and calls
    :meth:`set_users` with the committed list.
    """

    add_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str)

    def __init__(self, users: Iterable[str]) -> None:
        super().__init__()
        self.setWindowTitle("Users")
        layout = QVBoxLayout(self)

        self.user_list = QListWidget()
        layout.addWidget(self.user_list, stretch=1)

        delete_button = QPushButton("Delete Selected")
        delete_button.setObjectName("secondaryButton")
        delete_button.clicked.connect(self._emit_delete)
        layout.addWidget(delete_button)

        add_row = QHBoxLayout()
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("New user name")
        self.name_input.returnPressed.connect(self._emit_add)
        add_row.addWidget(self.name_input, stretch=1)
        add_button = QPushButton("Add")
        add_button.clicked.connect(self._emit_add)
        add_row.addWidget(add_button)
        layout.addLayout(add_row)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

        self.set_users(users)

    def set_users(self, users: Iterable[str]) -> None:
        self.user_list.clear()
        self.user_list.addItems(list(users))

    def _emit_add(self) -> None:
        name = self.name_input.text().strip()
        if not name:
            return
        self.add_requested.emit(name)
        self.name_input.clear()

    def _emit_delete(self) -> None:
        item = self.user_list.currentItem()
        if item is not None:
            self.delete_requested.emit(item.text())
