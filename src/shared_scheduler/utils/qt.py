from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal

logger = logging.getLogger(__name__)

CoroutineFn = Callable[..., Awaitable[Any]]


class _Signals(QObject):
    completed = pyqtSignal(object)
    failed = pyqtSignal(Exception)


class _CoroutineJob(QRunnable):
    """Runs one coroutine function to completion on a pool thread."""

    def __init__(self, fn: CoroutineFn, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        super().__init__()
        self.fn = fn
        self.args = args
        self.kwargs = kwargs
        self.signals = _Signals()

    def run(self) -> None:
        try:
            result = asyncio.run(self.fn(*self.args, **self.kwargs))
        except Exception as exc:  # noqa: BLE001
            self.signals.failed.emit(exc)
        else:
            self.signals.completed.emit(result)


class AsyncTaskRunner(QObject):
    """Runs coroutine functions off the GUI thread, one at a time.

    Callbacks arrive through queued signals and therefore run on the GUI
    thread. ``busy_changed`` lets the window lock its controls while a save is
    pending.
    """

    busy_changed = pyqtSignal(bool)

    def __init__(self, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.pool = QThreadPool(self)
        self.pool.setMaxThreadCount(1)
        self._pending: set[_CoroutineJob] = set()

    @property
    def busy(self) -> bool:
        return bool(self._pending)

    def submit(
        self,
        fn: CoroutineFn,
        *args: Any,
        on_success: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
        **kwargs: Any,
    ) -> None:
        job = _CoroutineJob(fn, args, kwargs)
        job.setAutoDelete(False)
        job.signals.completed.connect(lambda result: self._finish(job, on_success, result))
        job.signals.failed.connect(lambda exc: self._finish(job, on_error, exc))

        was_busy = self.busy
        self._pending.add(job)
        if not was_busy:
            self.busy_changed.emit(True)
        logger.debug("Queued %s", getattr(fn, "__qualname__", fn))
        self.pool.start(job)

    def _finish(self, job: _CoroutineJob, callback: Optional[Callable[[Any], None]], value: Any) -> None:
        self._pending.discard(job)
        if not self.busy:
            self.busy_changed.emit(False)
        if callback is not None:
            callback(value)
