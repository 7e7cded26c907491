"""Command-line entry point: analyze source files."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from tqdm import tqdm

from codesense.languages import (
    DEFAULT_LANGUAGE,
    Language,
    LanguageMismatchError,
    language_for_path,
    read_source_file,
)
from codesense.pipeline import AnalysisResult, analyze
from codesense.render import SECTIONS, render_result

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codesense",
        description="Token, syntax, semantic and formatting analysis for source snippets",
    )
    parser.add_argument("files", nargs="+", type=Path, help="Source files to analyze")
    parser.add_argument(
        "-l",
        "--language",
        choices=[language.value for language in Language],
        default=None,
        help="Language of the files (default: inferred from the extension, else javascript)",
    )
    parser.add_argument(
        "--section",
        choices=["all", *SECTIONS],
        default="all",
        help="Only print one result section",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the tqdm progress bar shown for multiple files",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _resolve_language(path: Path, selected: str | None) -> str:
    if selected is not None:
        return selected
    detected = language_for_path(path)
    return detected.value if detected is not None else DEFAULT_LANGUAGE.value


def _json_payload(path: Path, result: AnalysisResult, *, section: str) -> dict[str, object]:
    payload = result.to_dict()
    if section != "all":
        key = "tokens" if section == "lexical" else section
        payload = {key: payload[key]}
    return {"file": str(path), "language": result.language, **payload}


def _print_result(path: Path, result: AnalysisResult, *, section: str) -> None:
    sections = SECTIONS if section == "all" else (section,)
    print(f"== {path} ({result.language})")
    print(render_result(result, sections))


def main(argv: list[str] | None = None) -> int:
    """Analyze every file. With `--json`, one JSON list holds every file's result."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    files: list[Path] = args.files
    show_progress = len(files) > 1 and not args.no_progress
    iterator = tqdm(files, desc="analyzing", unit="file") if show_progress else files

    status = 0
    payloads: list[dict[str, object]] = []
    for path in iterator:
        language = _resolve_language(path, args.language)
        try:
            text = read_source_file(path, language)
        except LanguageMismatchError as exc:
            print(f"error: {exc}", file=sys.stderr)
            status = 2
            continue
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: failed to read {path}: {exc}", file=sys.stderr)
            status = 2
            continue

        result = analyze(text, language)
        if result.has_errors and status == 0:
            status = 1
        if args.json:
            payloads.append(_json_payload(path, result, section=args.section))
        else:
            _print_result(path, result, section=args.section)

    if args.json:
        print(json.dumps(payloads, indent=2))
    return status


if __name__ == "__main__":
    raise SystemExit(main())
