"""Shared adapter contract for per-format text extractors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from examace.ingestion.models import RawUpload


@runtime_checkable
class ExtractionAdapter(Protocol):
    """Protocol that every format adapter must implement."""

    def supports(self, extension: str) -> bool:
        """Return True when this adapter handles the given lower-cased extension."""

    def extract(self, upload: RawUpload) -> str:
        """Return the plain text carried by the upload."""
