"""Prompt text sent with every study-guide request."""

from __future__ import annotations


SYSTEM_PROMPT = "You generate concise, exam-focused study guides. Only output JSON when asked."

_INSTRUCTIONS = """\
You are an AI that turns raw study material into a structured exam study guide.

Return ONLY valid JSON with this exact shape:
{
  "summary": "string",
  "detailed_summary": "string",
  "concepts": [
    { "term": "string", "def": "string" }
  ],
  "questions": ["string"]
}

- "summary" = very short high-level overview (2-3 sentences max)
- "detailed_summary" = deeper explanation (2-6 short paragraphs), still exam-focused
Do NOT add explanations, markdown, or backticks. Output JSON only."""

MATERIAL_DELIMITER = '"""'


def build_prompt(text: str) -> str:
    """Embed the study material verbatim inside a delimited block."""

    return f"{_INSTRUCTIONS}\n\nStudy material:\n{MATERIAL_DELIMITER}{text}{MATERIAL_DELIMITER}\n"


def build_messages(text: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_prompt(text)},
    ]
