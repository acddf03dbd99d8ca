from __future__ import annotations

from types import SimpleNamespace

import pytest

from examace.errors import ConfigurationError, ValidationError
from examace.generation.client import StudyGuideGenerator
from examace.generation.config import GenerationSettings
from examace.generation.models import GenerationResult
from examace.ingestion.models import RawUpload
from examace.service import StudyGuideService


class _RecordingGenerator:
    def __init__(self, settings: GenerationSettings) -> None:
        self.settings = settings
        self.inputs: list[str] = []

    def generate(self, text: str) -> GenerationResult:
        self.inputs.append(text)
        return GenerationResult(summary=f"{len(text)} chars")


class _Factory:
    def __init__(self) -> None:
        self.generators: list[_RecordingGenerator] = []

    def __call__(self, settings: GenerationSettings) -> _RecordingGenerator:
        generator = _RecordingGenerator(settings)
        self.generators.append(generator)
        return generator


def _service(factory: _Factory, settings_loader=None) -> StudyGuideService:
    return StudyGuideService(
        settings_loader=settings_loader or (lambda: GenerationSettings(api_key="hf_test")),
        generator_factory=factory,
    )


def test_run_truncates_long_input_and_reports_warning() -> None:
    factory = _Factory()

    outcome = _service(factory).run("y" * 12_345)

    assert outcome.success
    assert outcome.result.summary == "10000 chars"
    assert outcome.warning is not None
    assert factory.generators[0].inputs == ["y" * 10_000]


def test_run_blocks_blank_input_without_dispatch() -> None:
    factory = _Factory()

    outcome = _service(factory).run("   ")

    assert outcome.blocked
    assert outcome.result is None
    assert outcome.error is None
    assert factory.generators == []


def test_generate_raises_for_blank_input_without_dispatch() -> None:
    factory = _Factory()

    with pytest.raises(ValidationError):
        _service(factory).generate("")

    assert factory.generators == []


def test_missing_credential_surfaces_as_configuration_message() -> None:
    factory = _Factory()

    def loader() -> GenerationSettings:
        return GenerationSettings.from_env({})

    outcome = _service(factory, loader).run("notes")

    assert not outcome.success
    assert outcome.error_kind == "configuration"
    assert outcome.error == "Missing HUGGINGFACE_API_KEY"
    assert factory.generators == []


def test_generate_propagates_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        _service(_Factory(), lambda: GenerationSettings.from_env({})).generate("notes")


def test_read_upload_truncates_extracted_text() -> None:
    outcome = _service(_Factory()).read_upload(RawUpload(filename="long.txt", data=b"z" * 10_500))

    assert outcome.success
    assert outcome.text == "z" * 10_000
    assert outcome.truncated
    assert "truncated" in outcome.warning


def test_read_upload_failure_leaves_text_unset() -> None:
    outcome = _service(_Factory()).read_upload(RawUpload(filename="essay.docx", data=b"corrupted"))

    assert not outcome.success
    assert outcome.text is None
    assert outcome.error_kind == "extraction"
    assert "docx" in outcome.error


def test_read_upload_rejects_oversized_file() -> None:
    outcome = _service(_Factory()).read_upload(RawUpload(filename="huge.txt", data=b"a" * (5 * 1024 * 1024 + 1)))

    assert outcome.error_kind == "validation"
    assert "5MB" in outcome.error


def test_run_reports_undecodable_model_output_without_raising() -> None:
    content = '{"summary": "S", "n": ' + "1" * 5000 + "}"
    response = SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])
    client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=lambda **kwargs: response)))

    service = StudyGuideService(
        settings_loader=lambda: GenerationSettings(api_key="hf_test"),
        generator_factory=lambda settings: StudyGuideGenerator(settings, client=client),
    )
    outcome = service.run("notes")

    assert not outcome.success
    assert outcome.error_kind == "malformed_response"
    assert outcome.error == "Failed to parse AI response. Please try again."
