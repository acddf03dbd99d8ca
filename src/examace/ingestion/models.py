"""Data structures passed between the upload boundary and the extractors."""

from __future__ import annotations

from dataclasses import dataclass


def extension_of(filename: str) -> str:
    """Lower-cased text after the last dot, or an empty string when there is none."""

    name = filename.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


@dataclass(frozen=True, slots=True)
class RawUpload:
    """Uploaded bytes plus the declared filename and content-type hint."""

    filename: str
    data: bytes
    content_type: str | None = None

    @property
    def extension(self) -> str:
        return extension_of(self.filename)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(slots=True)
class ExtractedText:
    """Plain text derived from an upload or typed in directly."""

    text: str
    source: str | None = None
    extension: str | None = None

    def __len__(self) -> int:
        return len(self.text)
