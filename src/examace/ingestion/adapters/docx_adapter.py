"""Word adapter reading raw text runs from the OOXML package."""

from __future__ import annotations

from io import BytesIO
from zipfile import ZipFile

from lxml import etree

from examace.ingestion.models import RawUpload

_DOCUMENT_PART = "word/document.xml"
_W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
_PARAGRAPH = f"{{{_W_NS}}}p"
_TEXT = f"{{{_W_NS}}}t"
_TAB = f"{{{_W_NS}}}tab"
_TAB_STOPS = f"{{{_W_NS}}}tabs"
_BREAKS = {f"{{{_W_NS}}}br", f"{{{_W_NS}}}cr"}

PARAGRAPH_SEPARATOR = "\n\n"


def _owning_paragraph(node: etree._Element) -> etree._Element | None:
    parent = node.getparent()
    while parent is not None and parent.tag != _PARAGRAPH:
        parent = parent.getparent()
    return parent


class DOCXAdapter:
    """Flatten paragraphs (including table cells) to plain text, dropping formatting."""

    def supports(self, extension: str) -> bool:
        return extension in {"docx", "doc"}

    def extract(self, upload: RawUpload) -> str:
        xml_bytes = self._read_document_part(upload.data)
        parser = etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False, huge_tree=False)
        root = etree.fromstring(xml_bytes, parser=parser)

        paragraphs = [self._paragraph_text(node) for node in root.iter(_PARAGRAPH)]
        return PARAGRAPH_SEPARATOR.join(paragraphs).strip()

    def _read_document_part(self, raw: bytes) -> bytes:
        with ZipFile(BytesIO(raw), "r") as archive:
            if _DOCUMENT_PART not in archive.namelist():
                raise ValueError("Could not find main document part in the package")
            return archive.read(_DOCUMENT_PART)

    def _paragraph_text(self, paragraph: etree._Element) -> str:
        parts: list[str] = []
        for node in paragraph.iter(_TEXT, _TAB, *_BREAKS):
            # Nested paragraphs (text boxes) are emitted on their own.
            if _owning_paragraph(node) is not paragraph:
                continue
            if node.tag == _TEXT:
                parts.append(node.text or "")
            elif node.tag == _TAB:
                # w:tab inside w:pPr/w:tabs is a tab stop definition, not content.
                if node.getparent().tag != _TAB_STOPS:
                    parts.append("\t")
            else:
                parts.append("\n")
        return "".join(parts)
