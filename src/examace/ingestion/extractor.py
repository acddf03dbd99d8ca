"""Routing entrypoint for extraction adapters."""

from __future__ import annotations

import logging

from examace.errors import ExtractionError
from examace.guard import ContentGuard
from examace.ingestion.adapters.base import ExtractionAdapter
from examace.ingestion.models import ExtractedText, RawUpload


logger = logging.getLogger(__name__)


class DocumentExtractor:
    """Resolve the adapter for an upload's extension and return its plain text."""

    def __init__(self, *, guard: ContentGuard | None = None) -> None:
        self._guard = guard or ContentGuard()
        self._adapter_map: dict[str, ExtractionAdapter] = {}

    @property
    def adapter_map(self) -> dict[str, ExtractionAdapter]:
        """Registered adapters keyed by adapter name."""

        return dict(self._adapter_map)

    def register_adapter(self, name: str, adapter: ExtractionAdapter) -> None:
        """Register an adapter by key. Adapters are tried in registration order.

        Re-registering an existing key replaces that adapter but keeps its position.
        """

        if not name:
            raise ValueError("Adapter name cannot be empty")
        self._adapter_map[name] = adapter

    def extract(self, upload: RawUpload) -> ExtractedText:
        """Size-check the upload, then run exactly one matching adapter."""

        self._guard.check_upload(upload)
        extension = upload.extension

        for name, adapter in self._adapter_map.items():
            if not adapter.supports(extension):
                continue
            try:
                text = adapter.extract(upload)
            except ExtractionError:
                raise
            except Exception as exc:
                logger.exception("Adapter %s failed for %s", name, upload.filename)
                raise ExtractionError(extension=extension, message=str(exc) or type(exc).__name__) from exc

            logger.info(
                "Extracted %d characters from %s (adapter=%s, bytes=%d)",
                len(text),
                upload.filename,
                name,
                upload.size,
            )
            return ExtractedText(text=text, source=upload.filename, extension=extension)

        raise ExtractionError(extension=extension, message="No adapter registered for file content")
