from __future__ import annotations

import pytest

from examace.errors import ConfigurationError
from examace.generation.config import DEFAULT_BASE_URL, DEFAULT_MODEL, GenerationSettings


def test_settings_load_from_env_with_defaults() -> None:
    settings = GenerationSettings.from_env({"HUGGINGFACE_API_KEY": "hf_test"})

    assert settings.api_key == "hf_test"
    assert settings.model == DEFAULT_MODEL
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.temperature == 0.4
    assert settings.max_tokens == 700


def test_settings_use_configured_model_and_trim_base_url() -> None:
    settings = GenerationSettings.from_env(
        {
            "HUGGINGFACE_API_KEY": "hf_test",
            "HUGGINGFACE_MODEL": "Qwen/Qwen2.5-7B-Instruct",
            "HUGGINGFACE_BASE_URL": "https://example.test/v1/",
        }
    )

    assert settings.model == "Qwen/Qwen2.5-7B-Instruct"
    assert settings.base_url == "https://example.test/v1"


def test_missing_credential_is_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="HUGGINGFACE_API_KEY") as excinfo:
        GenerationSettings.from_env({"HUGGINGFACE_MODEL": "meta-llama/Llama-3.1-8B-Instruct"})

    assert excinfo.value.kind == "configuration"
    assert excinfo.value.variables == ("HUGGINGFACE_API_KEY",)


def test_settings_validate_base_url() -> None:
    with pytest.raises(ConfigurationError, match="HUGGINGFACE_BASE_URL"):
        GenerationSettings.from_env(
            {"HUGGINGFACE_API_KEY": "hf_test", "HUGGINGFACE_BASE_URL": "router.huggingface.co/v1"}
        )
