"""File handles modelled on the browser File System Access API.

A handle hands out the current file contents and a writable stream. Writes go
to a swap file that only replaces the real file when the stream is closed, so
an aborted or failed write leaves the original untouched.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import IO, Optional, Protocol

from ..config import get_settings

logger = logging.getLogger(__name__)


class WritableFile(Protocol):
    async def write(self, data: bytes) -> None: ...

    async def close(self) -> None: ...

    async def abort(self) -> None: ...


class FileHandle(Protocol):
    @property
    def name(self) -> str: ...

    async def get_file(self) -> bytes: ...

    async def create_writable(self) -> WritableFile: ...


@dataclass
class LocalWritable:
    target: Path
    _swap: IO[bytes] = field(init=False, repr=False)
    _finished: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        self._swap = tempfile.NamedTemporaryFile(
            mode="wb",
            dir=self.target.parent,
            prefix=f".{self.target.name}.",
            suffix=".swp",
            delete=False,
        )

    @property
    def swap_path(self) -> Path:
        return Path(self._swap.name)

    async def write(self, data: bytes) -> None:
        if self._finished:
            raise ValueError("Writable stream is already closed.")
        await asyncio.to_thread(self._swap.write, data)

    async def close(self) -> None:
        if self._finished:
            return
        await asyncio.to_thread(self._commit)
        self._finished = True

    async def abort(self) -> None:
        if self._finished:
            return
        self._finished = True
        await asyncio.to_thread(self._discard)

    def _commit(self) -> None:
        try:
            self._swap.flush()
            os.fsync(self._swap.fileno())
            self._swap.close()
            os.replace(self.swap_path, self.target)
        except OSError:
            self._discard()
            raise

    def _discard(self) -> None:
        self._swap.close()
        try:
            self.swap_path.unlink()
        except FileNotFoundError:
            pass


@dataclass
class LocalFileHandle:
    """Handle onto a file on the local disk."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    async def get_file(self) -> bytes:
        return await asyncio.to_thread(self._read)

    def _read(self) -> bytes:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return b""

    async def create_writable(self) -> LocalWritable:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        writable = LocalWritable(self.path)
        logger.debug("Opened swap file %s for %s", writable.swap_path, self.path)
        return writable


def open_handle(path: Optional[os.PathLike[str] | str]) -> LocalFileHandle:
    resolved = Path(path).expanduser() if path else get_settings().storage.document_path
    return LocalFileHandle(resolved)
