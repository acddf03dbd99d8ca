"""Extraction adapter implementations and contracts."""

from examace.ingestion.pdf_engine import PdfEngine

from .base import ExtractionAdapter
from .docx_adapter import DOCXAdapter
from .pdf_adapter import PDFAdapter
from .txt_adapter import FallbackTextAdapter, TXTAdapter


def build_default_adapters(pdf_engine: PdfEngine) -> dict[str, ExtractionAdapter]:
    """Return the default adapter map; the fallback adapter must stay last."""
    return {
        "pdf": PDFAdapter(pdf_engine),
        "docx": DOCXAdapter(),
        "txt": TXTAdapter(),
        "fallback": FallbackTextAdapter(),
    }


__all__ = [
    "ExtractionAdapter",
    "PDFAdapter",
    "DOCXAdapter",
    "TXTAdapter",
    "FallbackTextAdapter",
    "build_default_adapters",
]
