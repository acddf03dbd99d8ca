"""CLI entrypoint: build a study guide from a file or pasted text."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from dotenv import load_dotenv

load_dotenv()

from examace.export.formatter import to_plain_text, to_printable_html, write_export
from examace.ingestion.models import RawUpload
from examace.service import StudyGuideService


logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_GENERATION_ERROR = 2


def _render(result, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    if fmt == "html":
        return to_printable_html(result)
    return to_plain_text(result)


def run(
    service: StudyGuideService,
    *,
    file_path: Path | None,
    text: str | None,
    fmt: str,
    output_dir: Path | None,
) -> int:
    if file_path is not None:
        try:
            data = file_path.read_bytes()
        except OSError as exc:
            print(f"Failed to read file: {exc}", file=sys.stderr)
            return EXIT_INPUT_ERROR

        intake = service.read_upload(RawUpload(filename=file_path.name, data=data))
        if not intake.success:
            print(intake.error, file=sys.stderr)
            return EXIT_INPUT_ERROR
        if intake.warning:
            print(intake.warning, file=sys.stderr)
        text = intake.text

    outcome = service.run(text or "")
    if outcome.blocked:
        print("Nothing to summarize: input is empty.", file=sys.stderr)
        return EXIT_INPUT_ERROR
    if outcome.warning:
        print(outcome.warning, file=sys.stderr)
    if outcome.result is None:
        print(outcome.error or "Something went wrong generating your study guide.", file=sys.stderr)
        return EXIT_INPUT_ERROR if outcome.error_kind == "validation" else EXIT_GENERATION_ERROR

    if output_dir is not None and fmt in {"txt", "html"}:
        target = write_export(outcome.result, output_dir, fmt=fmt)
        print(str(target))
    else:
        print(_render(outcome.result, fmt))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate an exam study guide from study material")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", type=Path, help="Path to a .txt, .md, .pdf or .docx file")
    source.add_argument("--text", help="Study material passed directly")
    parser.add_argument("--format", choices=("txt", "html", "json"), default="txt", help="Output format")
    parser.add_argument("--output-dir", type=Path, help="Write study-guide.<format> into this directory")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")

    return run(
        StudyGuideService(),
        file_path=args.file,
        text=args.text,
        fmt=args.format,
        output_dir=args.output_dir,
    )


if __name__ == "__main__":
    raise SystemExit(main())
