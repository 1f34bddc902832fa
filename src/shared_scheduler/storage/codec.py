from __future__ import annotations

import orjson
from pydantic import ValidationError as RecordValidationError

from ..domain import Document, DocumentFormatError, ValidationError, validate_document
from .schema import DocumentRecord

EMPTY_DOCUMENT = Document()


def encode_document(document: Document) -> bytes:
    """Serialize ``document`` to the canonical on-disk bytes.

    The output is stable: encoding a decoded canonical file reproduces it byte
    for byte.
    """

    record = DocumentRecord.from_domain(document)
    payload = orjson.dumps(record.model_dump(by_alias=True, exclude_none=True), option=orjson.OPT_INDENT_2)
    return payload + b"\n"


def decode_document(raw: bytes, *, default_category: str) -> Document:
    """Parse and validate stored bytes. Empty content yields an empty document."""

    if not raw.strip():
        return EMPTY_DOCUMENT
    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise DocumentFormatError(f"Schedule file is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise DocumentFormatError("Schedule file must contain a JSON object.")
    try:
        document = DocumentRecord.model_validate(data).to_domain(default_category=default_category)
        validate_document(document)
    except RecordValidationError as exc:
        raise DocumentFormatError(f"Schedule file has an unexpected shape: {exc}") from exc
    except ValidationError as exc:
        raise DocumentFormatError(f"Schedule file violates document rules: {exc}") from exc
    return document
