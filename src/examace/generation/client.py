"""Chat-completions client that turns study material into a study guide."""

from __future__ import annotations

import logging
from typing import Any

from examace.errors import ConfigurationError, MalformedResponse, TransportError
from examace.generation.config import GenerationSettings
from examace.generation.models import GenerationResult
from examace.generation.parser import parse_generation_response
from examace.generation.prompt import build_messages
from examace.guard import validate_dispatch_text
from examace.limits import MAX_INPUT_CHARS


logger = logging.getLogger(__name__)


def _build_default_client(settings: GenerationSettings) -> Any:
    try:
        from openai import OpenAI
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise ConfigurationError(message=f"OpenAI SDK unavailable for generation client: {exc}") from exc

    # One exchange per call; retries are left to the caller.
    return OpenAI(api_key=settings.api_key, base_url=settings.base_url, max_retries=0)


def _message_content(response: Any) -> str | None:
    choices = getattr(response, "choices", None)
    if not isinstance(choices, list) or not choices:
        return None

    first = choices[0]
    message = getattr(first, "message", None)
    content = getattr(message, "content", None) if message is not None else None
    if content is None and isinstance(first, dict):
        message_dict = first.get("message", {})
        if isinstance(message_dict, dict):
            content = message_dict.get("content")

    if isinstance(content, list):
        content = "".join(str(part.get("text", "")) for part in content if isinstance(part, dict))

    return content if isinstance(content, str) else None


class StudyGuideGenerator:
    """Send one prompt to the generation endpoint and parse the reply."""

    def __init__(
        self,
        settings: GenerationSettings,
        *,
        client: Any | None = None,
        max_chars: int = MAX_INPUT_CHARS,
    ) -> None:
        self._settings = settings
        self._client = client or _build_default_client(settings)
        self._max_chars = max_chars

    @property
    def model(self) -> str:
        return self._settings.model

    def generate(self, text: str) -> GenerationResult:
        """Validate, dispatch exactly once, and return the normalized result."""

        material = validate_dispatch_text(text, max_chars=self._max_chars)
        if not self._settings.api_key:
            raise ConfigurationError(message="Missing HUGGINGFACE_API_KEY", variables=("HUGGINGFACE_API_KEY",))

        response = self._request_generation(material)
        content = _message_content(response)
        if not content or not content.strip():
            logger.error("Unexpected generation output (model=%s): %r", self.model, response)
            raise MalformedResponse(message="Generation response returned no text content")

        result = parse_generation_response(content)
        logger.info(
            "Generated study guide (model=%s, input_chars=%d, concepts=%d, questions=%d)",
            self.model,
            len(material),
            len(result.concepts),
            len(result.questions),
        )
        return result

    def _request_generation(self, material: str) -> Any:
        try:
            return self._client.chat.completions.create(
                model=self._settings.model,
                messages=build_messages(material),
                temperature=self._settings.temperature,
                max_tokens=self._settings.max_tokens,
            )
        except Exception as exc:
            logger.warning("Generation request failed (model=%s): %s", self.model, exc)
            raise TransportError(
                model=self.model,
                message=f"Generation request failed: {exc}",
                status_code=getattr(exc, "status_code", None),
            ) from exc
