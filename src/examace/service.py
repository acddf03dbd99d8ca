"""Upload intake and study-guide generation with user-facing outcomes."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from examace.errors import StudyGuideError, ValidationError
from examace.generation.client import StudyGuideGenerator
from examace.generation.config import GenerationSettings
from examace.generation.models import GenerationResult
from examace.guard import ContentGuard
from examace.ingestion.adapters import build_default_adapters
from examace.ingestion.extractor import DocumentExtractor
from examace.ingestion.models import RawUpload
from examace.ingestion.pdf_engine import PdfEngine


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IntakeOutcome:
    """Text ready for the input field, or the message explaining why there is none."""

    text: str | None = None
    truncated: bool = False
    warning: str | None = None
    error: str | None = None
    error_kind: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class GenerationOutcome:
    """Result of one generate action as seen by an interactive caller."""

    result: GenerationResult | None = None
    warning: str | None = None
    error: str | None = None
    error_kind: str | None = None
    blocked: bool = False

    @property
    def success(self) -> bool:
        return self.result is not None


def build_extractor(pdf_engine: PdfEngine, guard: ContentGuard) -> DocumentExtractor:
    extractor = DocumentExtractor(guard=guard)
    for name, adapter in build_default_adapters(pdf_engine).items():
        extractor.register_adapter(name, adapter)
    return extractor


class StudyGuideService:
    """Glue between the extractor, the guard and the generator."""

    def __init__(
        self,
        *,
        pdf_engine: PdfEngine | None = None,
        guard: ContentGuard | None = None,
        extractor: DocumentExtractor | None = None,
        settings_loader: Callable[[], GenerationSettings] = GenerationSettings.from_env,
        generator_factory: Callable[[GenerationSettings], StudyGuideGenerator] = StudyGuideGenerator,
    ) -> None:
        self._guard = guard or ContentGuard()
        self._pdf_engine = pdf_engine or PdfEngine()
        self._extractor = extractor or build_extractor(self._pdf_engine, self._guard)
        self._settings_loader = settings_loader
        self._generator_factory = generator_factory

    @property
    def guard(self) -> ContentGuard:
        return self._guard

    @property
    def extractor(self) -> DocumentExtractor:
        return self._extractor

    def read_upload(self, upload: RawUpload) -> IntakeOutcome:
        """Extract and length-guard an upload; failures become messages."""

        try:
            extracted = self._extractor.extract(upload)
        except StudyGuideError as exc:
            logger.warning("Error reading file %s: %s", upload.filename, exc)
            return IntakeOutcome(error=exc.user_message, error_kind=exc.kind)

        guarded = self._guard.guard_text(extracted.text)
        return IntakeOutcome(text=guarded.text, truncated=guarded.truncated, warning=guarded.warning)

    def generate(self, text: str) -> GenerationResult:
        """Raise on any failure; blank input raises instead of dispatching."""

        guarded = self._guard.guard_text(text)
        if guarded.blocked:
            raise ValidationError("Input text cannot be empty")

        settings = self._settings_loader()
        generator = self._generator_factory(settings)
        return generator.generate(guarded.text)

    def run(self, text: str) -> GenerationOutcome:
        """Generate for an interactive caller: never raises for classified failures."""

        guarded = self._guard.guard_text(text)
        if guarded.blocked:
            return GenerationOutcome(blocked=True)

        try:
            settings = self._settings_loader()
            generator = self._generator_factory(settings)
            result = generator.generate(guarded.text)
        except StudyGuideError as exc:
            logger.warning("Study guide generation failed (%s): %s", exc.kind, exc)
            return GenerationOutcome(warning=guarded.warning, error=exc.user_message, error_kind=exc.kind)

        return GenerationOutcome(result=result, warning=guarded.warning)
