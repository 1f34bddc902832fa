from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication, QFileDialog, QMessageBox

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..domain import PersistenceError
from ..services import ServiceContext
from ..storage import LocalFileHandle
from .main_window import MainWindow

logger = logging.getLogger(__name__)


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    roles = {
        QPalette.ColorRole.Window: palette.background_primary,
        QPalette.ColorRole.WindowText: palette.text_primary,
        QPalette.ColorRole.Base: palette.background_secondary,
        QPalette.ColorRole.AlternateBase: palette.surface,
        QPalette.ColorRole.Text: palette.text_primary,
        QPalette.ColorRole.PlaceholderText: palette.text_muted,
        QPalette.ColorRole.Button: palette.surface,
        QPalette.ColorRole.ButtonText: palette.text_primary,
        QPalette.ColorRole.Highlight: palette.accent_primary,
        QPalette.ColorRole.HighlightedText: palette.background_primary,
        # chip tooltips carry multi-line event details
        QPalette.ColorRole.ToolTipBase: palette.surface,
        QPalette.ColorRole.ToolTipText: palette.text_primary,
    }
    qt_palette = QPalette()
    for role, color in roles.items():
        qt_palette.setColor(role, QColor(color))
    app.setPalette(qt_palette)
    app.setStyleSheet(palette.as_stylesheet())


def _pick_schedule_file(default: Path) -> Optional[Path]:
    chosen, _ = QFileDialog.getSaveFileName(
        None,
        "Open or create a schedule file",
        str(default),
        "Schedule files (*.json)",
        options=QFileDialog.Option.DontConfirmOverwrite,
    )
    return Path(chosen) if chosen else None


def run_gui(path: Optional[str] = None) -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    palette = AppPalette()
    apply_palette(app, palette)

    target = Path(path).expanduser() if path else _pick_schedule_file(settings.storage.document_path)
    if target is None:
        return

    try:
        context = asyncio.run(ServiceContext.open(LocalFileHandle(target), settings=settings))
    except PersistenceError as exc:
        logger.error("Could not open %s: %s", target, exc)
        QMessageBox.critical(None, "Could not open schedule", str(exc))
        return

    window = MainWindow(context=context, settings=settings, palette=palette)
    window.show()
    sys.exit(app.exec())
