"""PDF adapter joining page text runs in reading order."""

from __future__ import annotations

import logging

from examace.ingestion.models import RawUpload
from examace.ingestion.pdf_engine import PdfEngine

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


def _page_runs(page) -> list[str]:
    """Collect span text for one page in content-stream order."""

    runs: list[str] = []
    content = page.get_text("dict")
    for block in content.get("blocks", []):
        if block.get("type") != 0:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                runs.append(span.get("text", ""))
    return runs


class PDFAdapter:
    """Extract text from every page; runs joined by spaces, pages by a blank line."""

    def __init__(self, engine: PdfEngine) -> None:
        self._engine = engine

    def supports(self, extension: str) -> bool:
        return extension == "pdf"

    def extract(self, upload: RawUpload) -> str:
        page_texts: list[str] = []
        with self._engine.open(upload.data) as doc:
            for page in doc:
                page_texts.append(" ".join(_page_runs(page)))

        logger.debug("Extracted %d page(s) from %s", len(page_texts), upload.filename)
        return PAGE_SEPARATOR.join(page_texts).strip()
