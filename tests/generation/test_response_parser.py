from __future__ import annotations

import json

import pytest

from examace.errors import InvalidShape, MalformedResponse
from examace.generation.models import Concept, GenerationResult
from examace.generation.parser import parse_generation_response, slice_json_candidate


def test_fenced_json_with_prose_is_extracted() -> None:
    raw = 'Sure! ```{"summary":"S","concepts":[],"questions":[]}```'

    result = parse_generation_response(raw)

    assert result == GenerationResult(summary="S", detailed_summary="", concepts=(), questions=())
    assert result.to_dict() == {"summary": "S", "detailed_summary": "", "concepts": [], "questions": []}


def test_plain_refusal_is_malformed_not_a_crash() -> None:
    with pytest.raises(MalformedResponse) as excinfo:
        parse_generation_response("I cannot help with that.")

    assert excinfo.value.user_message == "Failed to parse AI response. Please try again."
    assert excinfo.value.raw == "I cannot help with that."


def test_object_without_study_keys_is_invalid_shape() -> None:
    with pytest.raises(InvalidShape) as excinfo:
        parse_generation_response('{"answer": "42"}')

    assert isinstance(excinfo.value, MalformedResponse)
    assert excinfo.value.kind == "malformed_response"


def test_json_array_is_invalid_shape() -> None:
    with pytest.raises(InvalidShape):
        parse_generation_response('[{"summary": "S"}]')


def test_missing_and_mistyped_fields_get_defaults() -> None:
    raw = json.dumps({"summary": 12, "concepts": "none", "questions": None, "detailed_summary": ["x"]})

    result = parse_generation_response(raw)

    assert result == GenerationResult()
    assert not result.has_content


def test_concepts_and_questions_keep_order_and_duplicates() -> None:
    raw = json.dumps(
        {
            "summary": "Cells",
            "detailed_summary": "Long form.",
            "concepts": [
                {"term": "ATP", "def": "Energy currency"},
                {"term": "ATP", "def": "Energy currency"},
                {"term": "Ribosome"},
                "stray",
            ],
            "questions": ["What is ATP?", 7, {"q": "nested"}, "Why?"],
        }
    )

    result = parse_generation_response(raw)

    assert result.concepts == (
        Concept("ATP", "Energy currency"),
        Concept("ATP", "Energy currency"),
        Concept("Ribosome", ""),
    )
    assert result.questions == ("What is ATP?", "7", "Why?")
    assert result.detailed_summary == "Long form."


def test_slice_uses_first_and_last_brace() -> None:
    assert slice_json_candidate('x {"a": {"b": 1}} y') == '{"a": {"b": 1}}'
    assert slice_json_candidate("no braces") == "no braces"
    assert slice_json_candidate("only { open") == "only { open"


def test_oversized_integer_literal_is_malformed() -> None:
    raw = '{"summary": "S", "n": ' + "1" * 5000 + "}"

    with pytest.raises(MalformedResponse):
        parse_generation_response(raw)


@pytest.mark.parametrize(
    "raw",
    [
        '{"summary": ""}',
        '{"summary": null}',
        '{"questions": null, "concepts": null}',
        '{"summary": false, "detailed_summary": "Only detail"}',
    ],
)
def test_study_keys_with_empty_values_are_invalid_shape(raw: str) -> None:
    with pytest.raises(InvalidShape):
        parse_generation_response(raw)


def test_empty_lists_still_count_as_present() -> None:
    result = parse_generation_response('{"summary": "", "concepts": [], "questions": []}')

    assert result == GenerationResult()
