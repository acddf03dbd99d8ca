"""Ingestion package interfaces."""

from .extractor import DocumentExtractor
from .models import ExtractedText, RawUpload
from .pdf_engine import PdfEngine

__all__ = ["DocumentExtractor", "ExtractedText", "PdfEngine", "RawUpload"]
