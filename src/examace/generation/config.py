"""Runtime configuration for the study-guide generation endpoint."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping

from examace.errors import ConfigurationError


DEFAULT_BASE_URL = "https://router.huggingface.co/v1"
DEFAULT_MODEL = "meta-llama/Llama-3.1-8B-Instruct"
DEFAULT_TEMPERATURE = 0.4
DEFAULT_MAX_TOKENS = 700


@dataclass(frozen=True, slots=True)
class GenerationSettings:
    """Validated endpoint settings, resolved from the environment per request."""

    api_key: str
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    temperature: float = DEFAULT_TEMPERATURE
    max_tokens: int = DEFAULT_MAX_TOKENS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GenerationSettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        api_key = source.get("HUGGINGFACE_API_KEY", "").strip()
        model = source.get("HUGGINGFACE_MODEL", "").strip() or DEFAULT_MODEL
        base_url = source.get("HUGGINGFACE_BASE_URL", DEFAULT_BASE_URL).strip()

        if not api_key:
            raise ConfigurationError(
                message="Missing HUGGINGFACE_API_KEY",
                variables=("HUGGINGFACE_API_KEY",),
            )

        if not base_url:
            raise ConfigurationError(
                message="HUGGINGFACE_BASE_URL cannot be empty",
                variables=("HUGGINGFACE_BASE_URL",),
            )
        if not (base_url.startswith("http://") or base_url.startswith("https://")):
            raise ConfigurationError(
                message="HUGGINGFACE_BASE_URL must start with http:// or https://",
                variables=("HUGGINGFACE_BASE_URL",),
            )

        return cls(api_key=api_key, model=model, base_url=base_url.rstrip("/"))
