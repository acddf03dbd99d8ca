"""Decode raw model output into a validated :class:`GenerationResult`."""

from __future__ import annotations

import json
import logging
from typing import Any

from examace.errors import InvalidShape, MalformedResponse
from examace.generation.models import Concept, GenerationResult


logger = logging.getLogger(__name__)

_REQUIRED_ANY = ("summary", "concepts", "questions")


def slice_json_candidate(raw: str) -> str:
    """Return text from the first ``{`` to the last ``}``, or the whole input."""

    first = raw.find("{")
    last = raw.rfind("}")
    if first == -1 or last == -1:
        return raw
    return raw[first : last + 1]


def _is_set(value: Any) -> bool:
    """Truthiness of a decoded JSON value: null, false, 0 and "" are unset; [] and {} are set."""

    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def decode_payload(raw: str) -> dict[str, Any]:
    """Strict decode stage: a JSON object carrying at least one study-guide key."""

    candidate = slice_json_candidate(raw)
    try:
        parsed = json.loads(candidate)
    except (ValueError, RecursionError) as exc:
        logger.warning("Failed to parse model output as JSON: %s; content=%r", exc, candidate)
        raise MalformedResponse(message=f"Model output is not valid JSON: {exc}", raw=raw) from exc

    if not isinstance(parsed, dict) or not any(_is_set(parsed.get(key)) for key in _REQUIRED_ANY):
        logger.warning("Model output has unexpected structure: %r", parsed)
        raise InvalidShape(message="Model output is not a study guide object", raw=raw)

    return parsed


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _concepts(value: Any) -> tuple[Concept, ...]:
    if not isinstance(value, list):
        return ()
    concepts: list[Concept] = []
    for item in value:
        if not isinstance(item, dict):
            continue
        term = item.get("term")
        definition = item.get("def")
        concepts.append(
            Concept(
                term="" if term is None else str(term),
                definition="" if definition is None else str(definition),
            )
        )
    return tuple(concepts)


def _questions(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    questions: list[str] = []
    for item in value:
        if isinstance(item, str):
            questions.append(item)
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            questions.append(str(item))
    return tuple(questions)


def parse_generation_response(raw: str) -> GenerationResult:
    """Tolerate prose or code fences around the JSON, then fill safe defaults."""

    payload = decode_payload(raw)
    return GenerationResult(
        summary=_as_text(payload.get("summary")),
        detailed_summary=_as_text(payload.get("detailed_summary")),
        concepts=_concepts(payload.get("concepts")),
        questions=_questions(payload.get("questions")),
    )
