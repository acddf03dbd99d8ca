"""Size and length thresholds shared by the guard, the extractor and the generator."""

from __future__ import annotations

MAX_INPUT_CHARS = 10_000

MIB = 1024 * 1024
MAX_DOCUMENT_UPLOAD_BYTES = 10 * MIB
MAX_TEXT_UPLOAD_BYTES = 5 * MIB

DOCUMENT_EXTENSIONS = frozenset({"pdf", "docx", "doc"})
TEXT_EXTENSIONS = frozenset({"txt", "md", "text"})
SUPPORTED_EXTENSIONS = DOCUMENT_EXTENSIONS | TEXT_EXTENSIONS


def upload_ceiling(extension: str) -> int:
    """Return the byte ceiling that applies to an upload with this extension."""

    if extension.lower() in DOCUMENT_EXTENSIONS:
        return MAX_DOCUMENT_UPLOAD_BYTES
    return MAX_TEXT_UPLOAD_BYTES
