"""Size and length checks applied before text reaches the generation endpoint."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING

from examace.errors import PayloadTooLarge, ValidationError
from examace.limits import MAX_INPUT_CHARS, upload_ceiling

if TYPE_CHECKING:
    from examace.ingestion.models import RawUpload


logger = logging.getLogger(__name__)

TRUNCATION_WARNING = (
    f"File content was truncated to {MAX_INPUT_CHARS:,} characters to meet API limits."
)


@dataclass(frozen=True, slots=True)
class GuardedText:
    """Outcome of the text length check."""

    text: str
    truncated: bool = False
    warning: str | None = None
    blocked: bool = False


class ContentGuard:
    """Upload size ceilings plus input length limits."""

    def __init__(self, *, max_chars: int = MAX_INPUT_CHARS) -> None:
        if max_chars < 1:
            raise ValueError("max_chars must be >= 1")
        self._max_chars = max_chars

    @property
    def max_chars(self) -> int:
        return self._max_chars

    def check_upload(self, upload: RawUpload) -> None:
        """Reject an upload above its ceiling before any extraction runs."""

        self.check_size(upload.filename, upload.extension, upload.size)

    def check_size(self, filename: str, extension: str, size: int) -> None:
        """Size check on its own, for callers that know the size before reading the body."""

        ceiling = upload_ceiling(extension)
        if size > ceiling:
            logger.info(
                "Rejected upload %s: %d bytes exceeds %d byte ceiling",
                filename,
                size,
                ceiling,
            )
            raise PayloadTooLarge(
                message=(
                    "File is too large. Please use files smaller than "
                    f"{ceiling // (1024 * 1024)}MB."
                ),
                limit_bytes=ceiling,
            )

    def guard_text(self, text: str) -> GuardedText:
        """Truncate long input with a warning; mark blank input as blocked."""

        if not text.strip():
            return GuardedText(text=text, blocked=True)

        if len(text) > self._max_chars:
            return GuardedText(
                text=text[: self._max_chars],
                truncated=True,
                warning=TRUNCATION_WARNING,
            )

        return GuardedText(text=text)

    def validate_for_dispatch(self, text: object) -> str:
        """Strict check at the network boundary: no truncation, only accept or reject."""

        return validate_dispatch_text(text, max_chars=self._max_chars)


def validate_dispatch_text(text: object, *, max_chars: int = MAX_INPUT_CHARS) -> str:
    if not isinstance(text, str) or not text:
        raise ValidationError("Missing inputText")
    if not text.strip():
        raise ValidationError("Input text cannot be empty")
    if len(text) > max_chars:
        raise ValidationError(
            f"Input text is too long. Please limit to {max_chars:,} characters."
        )
    return text
