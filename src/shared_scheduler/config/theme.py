from __future__ import annotations

import zlib
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#030712"
    background_secondary: str = "#050b18"
    surface: str = "#0c162c"
    surface_muted: str = "#070e1d"
    accent_primary: str = "#7dd3fc"
    accent_error: str = "#fb7185"
    text_primary: str = "#f8fafc"
    text_secondary: str = "#c7d2fe"
    text_muted: str = "#64748b"
    border_subtle: str = "#1e293b"
    border_strong: str = "#243657"
    category_colors: Tuple[str, ...] = field(
        default=("#4cc9f0", "#ffb703", "#70e000", "#f472b6", "#a78bfa", "#fb923c")
    )

    def category_color(self, category_id: str) -> str:
        """Stable color for an opaque category tag."""

        bucket = zlib.crc32(category_id.encode("utf-8")) % len(self.category_colors)
        return self.category_colors[bucket]

    def as_stylesheet(self) -> str:
        """Global stylesheet for the PyQt app."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #031525;
            border: none;
            padding: 8px 14px;
            border-radius: 8px;
            font-weight: 600;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QLineEdit, QTextEdit, QComboBox, QDateEdit, QTimeEdit {{
            background-color: {self.background_secondary};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 8px;
            padding: 6px 10px;
        }}
        QFrame#dayCell {{
            background-color: {self.surface};
            border: 1px solid {self.border_subtle};
        }}
        QFrame#dayCell[otherMonth="true"] {{
            background-color: {self.surface_muted};
        }}
        QLabel#dayNumber[otherMonth="true"] {{
            color: {self.text_muted};
        }}
        QLabel#weekdayHeader {{
            color: {self.text_secondary};
            font-weight: 600;
        }}
        QLabel#title {{
            font-size: 20px;
            font-weight: 600;
        }}
        """
