from __future__ import annotations

from datetime import date
from typing import Any, Callable, Optional

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget

from ..config import AppPalette, AppSettings
from ..domain import SchedulerError, ValidationError
from ..layout import MonthView
from ..services import CalendarService, ServiceContext, UserService
from ..utils.qt import AsyncTaskRunner
from .components.event_dialog import EventDialog
from .components.month_grid import MonthGrid
from .components.user_dialog import UserDialog


class MainWindow(QMainWindow):
    def __init__(self, *, context: ServiceContext, settings: AppSettings, palette: AppPalette) -> None:
        super().__init__()
        self.context = context
        self.settings = settings
        self.calendar = CalendarService(context)
        self.users = UserService(context)
        self.runner = AsyncTaskRunner(self)
        self._user_dialog: Optional[UserDialog] = None

        store_name = getattr(context.engine.store, "name", "")
        self.setWindowTitle(f"{settings.ui.app_name} - {store_name}" if store_name else settings.ui.app_name)
        self.resize(1200, 860)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        toolbar = QHBoxLayout()
        for text, handler in (
            ("<", self.show_previous),
            ("Today", self.show_today),
            (">", self.show_next),
        ):
            button = QPushButton(text)
            button.clicked.connect(handler)
            toolbar.addWidget(button)
        self.title_label = QLabel("")
        self.title_label.setObjectName("title")
        toolbar.addWidget(self.title_label, stretch=1)
        users_button = QPushButton("Users")
        users_button.clicked.connect(self.manage_users)
        toolbar.addWidget(users_button)
        add_button = QPushButton("Add Event")
        add_button.clicked.connect(lambda: self.create_event(date.today()))
        toolbar.addWidget(add_button)
        layout.addLayout(toolbar)
        self._edit_buttons = (users_button, add_button)
        self.runner.busy_changed.connect(self._set_busy)

        self.month_grid = MonthGrid(palette)
        self.month_grid.day_activated.connect(self.create_event)
        self.month_grid.event_activated.connect(self.edit_event)
        layout.addWidget(self.month_grid, stretch=1)

        self.setCentralWidget(central)
        self.refresh()

    # ------------------------------------------------------------------ view

    def refresh(self) -> None:
        self._render(self.calendar.month_view())

    def _render(self, view: MonthView) -> None:
        self.title_label.setText(view.title)
        self.month_grid.set_view(view)

    def show_previous(self) -> None:
        self._navigate(self.calendar.show_previous)

    def show_next(self) -> None:
        self._navigate(self.calendar.show_next)

    def show_today(self) -> None:
        self._navigate(self.calendar.show_today)

    def _navigate(self, move: Callable[[], Any]) -> None:
        try:
            self._render(move())
        except SchedulerError as exc:
            self._handle_error(exc)

    # ------------------------------------------------------------------ actions

    def _set_busy(self, busy: bool) -> None:
        for button in self._edit_buttons:
            button.setEnabled(not busy)
        self.month_grid.setEnabled(not busy)

    def _transact(self, coroutine_fn: Callable[..., Any], *args: Any, message: str, **kwargs: Any) -> None:
        if self.runner.busy:
            self.statusBar().showMessage("Still saving the previous change.", 3000)
            return

        def done(_result: Any) -> None:
            self.refresh()
            if self._user_dialog is not None:
                self._user_dialog.set_users(self.users.list_users())
            self.statusBar().showMessage(message, 3000)

        self.statusBar().showMessage("Saving...")
        self.runner.submit(coroutine_fn, *args, on_success=done, on_error=self._handle_error, **kwargs)

    def create_event(self, day: date) -> None:
        dialog = EventDialog(
            users=self.users.list_users(),
            default_date=day,
            default_category=self.settings.storage.default_category,
        )
        if dialog.exec() != EventDialog.DialogCode.Accepted:
            return
        values = dialog.values()
        if not values["title"]:
            QMessageBox.warning(self, "Missing title", "Provide a title for the event.")
            return
        self._transact(self.calendar.create_event, message="Event saved.", **values)

    def edit_event(self, event_id: str) -> None:
        event = self.calendar.get_event(event_id)
        if event is None:
            return
        dialog = EventDialog(
            users=self.users.list_users(),
            default_date=event.date,
            default_category=self.settings.storage.default_category,
            event=event,
        )
        if dialog.exec() != EventDialog.DialogCode.Accepted:
            return
        if dialog.delete_requested:
            if self._confirm(f"Delete event '{event.title}'?"):
                self._transact(self.calendar.delete_event, event_id, message="Event deleted.")
            return
        values = dialog.values()
        values["category_id"] = values["category_id"] or self.settings.storage.default_category
        self._transact(self.calendar.update_event, event_id, message="Event saved.", **values)

    def manage_users(self) -> None:
        dialog = UserDialog(self.users.list_users())
        dialog.add_requested.connect(lambda name: self._transact(self.users.add_user, name, message="User added."))
        dialog.delete_requested.connect(self._delete_user)
        self._user_dialog = dialog
        try:
            dialog.exec()
        finally:
            self._user_dialog = None

    def _delete_user(self, name: str) -> None:
        if self._confirm(f"Delete user '{name}'? They will be unassigned from every event."):
            self._transact(self.users.delete_user, name, message="User deleted.")

    # ------------------------------------------------------------------ misc

    def _confirm(self, question: str) -> bool:
        answer = QMessageBox.question(self, "Confirm", question)
        return answer == QMessageBox.StandardButton.Yes

    def _handle_error(self, exc: Exception) -> None:
        self.statusBar().showMessage(f"Error: {exc}", 5000)
        if isinstance(exc, ValidationError):
            QMessageBox.warning(self, "Invalid", str(exc))
        else:
            QMessageBox.critical(self, "Error", str(exc))
