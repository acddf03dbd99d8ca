"""Error taxonomy shared by ingestion, guarding, generation and the HTTP surface."""

from __future__ import annotations

from dataclasses import dataclass


class StudyGuideError(Exception):
    """Base class for every classified failure surfaced to callers."""

    kind = "internal"

    @property
    def user_message(self) -> str:
        return str(self)


@dataclass(slots=True)
class ValidationError(StudyGuideError):
    """User input rejected locally: empty text, text too long, oversized upload."""

    message: str

    kind = "validation"

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class PayloadTooLarge(ValidationError):
    """Upload exceeds the size ceiling for its category."""

    limit_bytes: int = 0

    @property
    def limit_mb(self) -> int:
        return self.limit_bytes // (1024 * 1024)


@dataclass(slots=True)
class ExtractionError(StudyGuideError):
    """Format-specific parse failure for an uploaded document."""

    extension: str
    message: str

    kind = "extraction"

    def __str__(self) -> str:
        label = self.extension or "unknown"
        return f"Failed to read {label} file: {self.message}"

    @property
    def user_message(self) -> str:
        return (
            f"Failed to read file: {self}. "
            "Please try a different file or paste the content directly."
        )


@dataclass(slots=True)
class EnvironmentUnsupported(ExtractionError):
    """The PDF engine cannot run in the current process."""


@dataclass(slots=True)
class ConfigurationError(StudyGuideError):
    """Required runtime configuration is missing or invalid."""

    message: str
    variables: tuple[str, ...] = ()

    kind = "configuration"

    def __str__(self) -> str:
        return self.message


@dataclass(slots=True)
class TransportError(StudyGuideError):
    """The generation endpoint could not be reached or answered with an error status."""

    model: str
    message: str
    status_code: int | None = None

    kind = "transport"

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (model={self.model}, status={self.status_code})"
        return f"{self.message} (model={self.model})"

    @property
    def user_message(self) -> str:
        return "Network error while talking to the AI."


@dataclass(slots=True)
class MalformedResponse(StudyGuideError):
    """Model output could not be decoded into a study guide."""

    message: str
    raw: str = ""

    kind = "malformed_response"

    def __str__(self) -> str:
        return self.message

    @property
    def user_message(self) -> str:
        return "Failed to parse AI response. Please try again."


@dataclass(slots=True)
class InvalidShape(MalformedResponse):
    """Model output decoded but is not a study guide object."""

    @property
    def user_message(self) -> str:
        return "Invalid response format from AI. Please try again."
