"""Application services orchestrating the engine and the month view."""

from __future__ import annotations

from .calendar import CalendarService
from .context import ServiceContext
from .users import UserService

__all__ = ["CalendarService", "ServiceContext", "UserService"]
