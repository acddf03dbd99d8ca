"""Plain-text adapters: verbatim UTF-8 for known text formats, best effort otherwise."""

from __future__ import annotations

import re

from examace.ingestion.models import RawUpload
from examace.limits import TEXT_EXTENSIONS

# C0 controls and DEL, keeping tab, newline and carriage return.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")


def decode_utf8(data: bytes) -> str:
    """Decode like a browser text reader: BOM dropped, bad sequences replaced."""

    return data.decode("utf-8-sig", errors="replace")


class TXTAdapter:
    """Return `.txt`, `.md` and `.text` uploads exactly as decoded."""

    def supports(self, extension: str) -> bool:
        return extension in TEXT_EXTENSIONS

    def extract(self, upload: RawUpload) -> str:
        return decode_utf8(upload.data)


class FallbackTextAdapter:
    """Best-effort decode for unrecognised extensions."""

    def supports(self, extension: str) -> bool:
        return True

    def extract(self, upload: RawUpload) -> str:
        return _CONTROL_RE.sub("", decode_utf8(upload.data))
