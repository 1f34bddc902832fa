"""Persistence: file handles, the on-disk codec and the transaction engine."""

from __future__ import annotations

from .codec import EMPTY_DOCUMENT, decode_document, encode_document
from .engine import Mutation, TransactionEngine
from .handles import FileHandle, LocalFileHandle, LocalWritable, WritableFile, open_handle
from .stores import BackingStore, HandleStore

__all__ = [
    "BackingStore",
    "EMPTY_DOCUMENT",
    "FileHandle",
    "HandleStore",
    "LocalFileHandle",
    "LocalWritable",
    "Mutation",
    "TransactionEngine",
    "WritableFile",
    "decode_document",
    "encode_document",
    "open_handle",
]
