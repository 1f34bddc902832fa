from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..config import AppSettings, get_settings
from ..storage import FileHandle, HandleStore, TransactionEngine


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root shared by services: settings, the engine and the displayed month."""

    engine: TransactionEngine
    settings: AppSettings = field(default_factory=get_settings)
    year: int = field(default_factory=lambda: date.today().year)
    month: int = field(default_factory=lambda: date.today().month)

    @classmethod
    async def open(cls, handle: FileHandle, *, settings: Optional[AppSettings] = None) -> "ServiceContext":
        resolved = settings or get_settings()
        engine = await TransactionEngine.open(
            HandleStore(handle),
            default_category=resolved.storage.default_category,
        )
        return cls(engine=engine, settings=resolved)
