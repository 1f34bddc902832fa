from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .handles import FileHandle

logger = logging.getLogger(__name__)


class BackingStore(Protocol):
    """Where a document's bytes live.

    ``write`` signals failure by raising, or by returning ``False``.
    """

    async def read(self) -> bytes: ...

    async def write(self, payload: bytes) -> Optional[bool]: ...


@dataclass
class HandleStore:
    """Backing store on top of a :class:`FileHandle`."""

    handle: FileHandle

    @property
    def name(self) -> str:
        return self.handle.name

    async def read(self) -> bytes:
        return await self.handle.get_file()

    async def write(self, payload: bytes) -> None:
        writable = await self.handle.create_writable()
        try:
            await writable.write(payload)
        except BaseException:
            logger.debug("Aborting write to %s", self.name)
            await writable.abort()
            raise
        await writable.close()
