"""Plain-text and printable HTML renderings of a study guide."""

from __future__ import annotations

from pathlib import Path
import re

from examace.generation.models import Concept, GenerationResult


SUMMARY_HEADING = "Summary"
CONCEPTS_HEADING = "Key Concepts & Definitions"
QUESTIONS_HEADING = "Practice Questions"
DETAILED_SUMMARY_HEADING = "Detailed Summary"

NO_SUMMARY = "No summary generated."
NO_CONCEPTS = "No key concepts generated."
NO_QUESTIONS = "No questions generated."
NO_DETAILED_SUMMARY = "No detailed summary generated."

DEFAULT_APP_TITLE = "examAce"
EXPORT_BASENAME = "study-guide"

_HEADINGS = (SUMMARY_HEADING, CONCEPTS_HEADING, QUESTIONS_HEADING, DETAILED_SUMMARY_HEADING)
_HEADER_RE = re.compile(r"^=== (.+) ===$")
_NUMBERED_RE = re.compile(r"^(\d+)\. (.*)$")
_DEFINITION_PREFIX = "   - "
# Continuation lines of multi-line entries are indented so they never read as a new item.
_ITEM_INDENT = "   "
_DEFINITION_INDENT = "     "

_HTML_TEMPLATE = """\
<html>
  <head>
    <title>Study Guide</title>
    <style>
      body {{
        font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
        padding: 24px;
        line-height: 1.5;
        white-space: pre-wrap;
      }}
      h1 {{
        font-size: 20px;
        margin-bottom: 16px;
      }}
    </style>
  </head>
  <body>
    <h1>{title} – Study Guide</h1>
    <pre>{body}</pre>
  </body>
</html>
"""


def _heading(name: str) -> str:
    return f"=== {name} ==="


def _hanging(prefix: str, text: str, indent: str) -> list[str]:
    first, *rest = text.split("\n")
    return [f"{prefix}{first}", *(f"{indent}{line}" for line in rest)]


def _dedent(line: str, indent: str) -> str:
    return line[len(indent):] if line.startswith(indent) else line


def to_plain_text(result: GenerationResult) -> str:
    """Render the four sections in fixed order with placeholders for empty ones."""

    parts: list[str] = [_heading(SUMMARY_HEADING), result.summary or NO_SUMMARY]

    parts.append("")
    parts.append(_heading(CONCEPTS_HEADING))
    if not result.concepts:
        parts.append(NO_CONCEPTS)
    else:
        for index, concept in enumerate(result.concepts, start=1):
            parts.extend(_hanging(f"{index}. ", concept.term, _ITEM_INDENT))
            parts.extend(_hanging(_DEFINITION_PREFIX, concept.definition, _DEFINITION_INDENT))

    parts.append("")
    parts.append(_heading(QUESTIONS_HEADING))
    if not result.questions:
        parts.append(NO_QUESTIONS)
    else:
        for index, question in enumerate(result.questions, start=1):
            parts.extend(_hanging(f"{index}. ", question, _ITEM_INDENT))

    parts.append("")
    parts.append(_heading(DETAILED_SUMMARY_HEADING))
    parts.append(result.detailed_summary or NO_DETAILED_SUMMARY)

    return "\n".join(parts)


def escape_markup(text: str) -> str:
    return text.replace("<", "&lt;").replace(">", "&gt;")


def to_printable_html(result: GenerationResult, *, title: str = DEFAULT_APP_TITLE) -> str:
    """Wrap the plain-text export in a minimal printable document."""

    return _HTML_TEMPLATE.format(title=escape_markup(title), body=escape_markup(to_plain_text(result)))


def _split_sections(text: str) -> dict[str, list[str]]:
    sections: dict[str, list[str]] = {}
    current: list[str] | None = None
    for line in text.split("\n"):
        match = _HEADER_RE.match(line)
        if match and match.group(1) in _HEADINGS and match.group(1) not in sections:
            current = sections.setdefault(match.group(1), [])
            continue
        if current is not None:
            current.append(line)

    for lines in sections.values():
        while lines and not lines[-1]:
            lines.pop()
    return sections


def _free_text(lines: list[str], placeholder: str) -> str:
    body = "\n".join(lines)
    return "" if body == placeholder else body


def _numbered_blocks(lines: list[str]) -> list[list[str]]:
    """Group lines into items that start with the next expected `N. ` marker."""

    blocks: list[list[str]] = []
    for line in lines:
        match = _NUMBERED_RE.match(line)
        if match and int(match.group(1)) == len(blocks) + 1:
            blocks.append([match.group(2)])
        elif blocks:
            blocks[-1].append(line)
    return blocks


def _parse_concepts(lines: list[str]) -> tuple[Concept, ...]:
    if lines == [NO_CONCEPTS]:
        return ()
    concepts: list[Concept] = []
    for first, *rest in _numbered_blocks(lines):
        # Term continuation lines may themselves look like a definition marker; the last one is real.
        marker = max((i for i, line in enumerate(rest) if line.startswith(_DEFINITION_PREFIX)), default=None)
        if marker is None:
            term_lines, definition = rest, ""
        else:
            term_lines = rest[:marker]
            definition_lines = [_dedent(line, _DEFINITION_INDENT) for line in rest[marker + 1 :]]
            definition = "\n".join([rest[marker][len(_DEFINITION_PREFIX) :], *definition_lines])
        term = "\n".join([first, *(_dedent(line, _ITEM_INDENT) for line in term_lines)])
        concepts.append(Concept(term=term, definition=definition))
    return tuple(concepts)


def _parse_questions(lines: list[str]) -> tuple[str, ...]:
    if lines == [NO_QUESTIONS]:
        return ()
    return tuple(
        "\n".join([first, *(_dedent(line, _ITEM_INDENT) for line in rest)])
        for first, *rest in _numbered_blocks(lines)
    )


def parse_plain_text(text: str) -> GenerationResult:
    """Read a plain-text export back into a study guide."""

    sections = _split_sections(text)
    return GenerationResult(
        summary=_free_text(sections.get(SUMMARY_HEADING, []), NO_SUMMARY),
        detailed_summary=_free_text(sections.get(DETAILED_SUMMARY_HEADING, []), NO_DETAILED_SUMMARY),
        concepts=_parse_concepts(sections.get(CONCEPTS_HEADING, [])),
        questions=_parse_questions(sections.get(QUESTIONS_HEADING, [])),
    )


def write_export(result: GenerationResult, directory: str | Path, *, fmt: str = "txt") -> Path:
    """Write ``study-guide.txt`` or ``study-guide.html`` into *directory*."""

    if fmt == "txt":
        content = to_plain_text(result)
    elif fmt == "html":
        content = to_printable_html(result)
    else:
        raise ValueError(f"Unsupported export format: {fmt}")

    target = Path(directory) / f"{EXPORT_BASENAME}.{fmt}"
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return target
