"""Typed study-guide result returned by the response parser."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Concept:
    """One key term and its definition, in generation order."""

    term: str
    definition: str

    def to_dict(self) -> dict[str, str]:
        return {"term": self.term, "def": self.definition}


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Normalized four-field study guide. Fields are never None."""

    summary: str = ""
    detailed_summary: str = ""
    concepts: tuple[Concept, ...] = ()
    questions: tuple[str, ...] = ()

    @property
    def has_content(self) -> bool:
        return bool(self.summary or self.concepts or self.questions or self.detailed_summary)

    def to_dict(self) -> dict[str, object]:
        return {
            "summary": self.summary,
            "detailed_summary": self.detailed_summary,
            "concepts": [concept.to_dict() for concept in self.concepts],
            "questions": list(self.questions),
        }
