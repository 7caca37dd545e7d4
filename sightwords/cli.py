"""
Command-line interface for sightwords.

Usage:
    sightwords extract worksheet.pdf --diagnostics
    sightwords check willtest cat hello
    sightwords manual "cat, dog, fish"
    sightwords save worksheet.pdf --store lists/ --base-url https://example.org
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from sightwords.config import ExtractionOptions, OCRConfig, SightWordsConfig
from sightwords.convert import extract_from_file
from sightwords.exceptions import ConfigurationError, SightWordsError
from sightwords.models import ExtractionResult
from sightwords.normalizers.text import parse_manual_words
from sightwords.ocr.validator import WordValidator
from sightwords.session import JsonWordListStore, WordListSession, build_student_url

logger = logging.getLogger(__name__)


def _build_config(args: argparse.Namespace) -> SightWordsConfig:
    extraction_kwargs: dict = {"max_word_length": args.max_length}
    ocr_kwargs: dict = {"capability": args.capability}
    if args.min_confidence is not None:
        extraction_kwargs["min_confidence"] = args.min_confidence
        ocr_kwargs["capable_confidence"] = args.min_confidence
        ocr_kwargs["constrained_confidence"] = args.min_confidence

    try:
        return SightWordsConfig(
            extraction=ExtractionOptions(**extraction_kwargs),
            ocr=OCRConfig(**ocr_kwargs),
        )
    except ValueError as e:
        raise ConfigurationError(str(e)) from e


def _print_diagnostics(result: ExtractionResult) -> None:
    diagnostics = result.diagnostics
    print(f"\nProcessed {diagnostics.total_processed} tokens", file=sys.stderr)
    print(f"Valid: {len(diagnostics.valid_words)}", file=sys.stderr)
    print(f"Rejected: {len(diagnostics.invalid_words)}", file=sys.stderr)
    for item in diagnostics.invalid_words:
        reason = item.reason.value
        if item.parts:
            reason += f" ({'+'.join(item.parts)})"
        print(f"  {item.word}: {reason}", file=sys.stderr)


def cmd_extract(args: argparse.Namespace) -> int:
    result = extract_from_file(args.file, _build_config(args))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for word in result.words:
            print(word)
        if args.diagnostics:
            _print_diagnostics(result)

    if result.is_empty:
        logger.warning("No valid words found; add words manually instead")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    validator = WordValidator()
    for word in args.words:
        verdict = validator.validate(word)
        status = "PASS" if verdict.is_valid else "FAIL"
        print(f'"{word}": {status} ({verdict.describe()})')
    return 0


def cmd_manual(args: argparse.Namespace) -> int:
    for word in parse_manual_words(args.text):
        print(word)
    return 0


def cmd_save(args: argparse.Namespace) -> int:
    session = WordListSession()
    result = extract_from_file(args.file, _build_config(args))
    session.preview(result)
    session.accept_preview()

    if args.add:
        session.add_manual(args.add)

    list_id = session.save(JsonWordListStore(args.store))
    print(build_student_url(args.base_url, list_id))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sightwords",
        description="Extract sight-word lists from worksheets",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_extraction_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("file", help="PDF or DOCX document")
        sub.add_argument(
            "--min-confidence", type=float, default=None, help="OCR confidence threshold (0-100)"
        )
        sub.add_argument("--max-length", type=int, default=10, help="Longest word kept")
        sub.add_argument(
            "--capability",
            choices=("auto", "capable", "constrained"),
            default="auto",
            help="Host capability used to pick OCR parameters",
        )

    extract = subparsers.add_parser("extract", help="Extract words from a document")
    add_extraction_args(extract)
    extract.add_argument("--json", action="store_true", help="Print result as JSON")
    extract.add_argument(
        "--diagnostics", action="store_true", help="Print rejected words to stderr"
    )
    extract.set_defaults(func=cmd_extract)

    check = subparsers.add_parser("check", help="Validate individual words")
    check.add_argument("words", nargs="+")
    check.set_defaults(func=cmd_check)

    manual = subparsers.add_parser("manual", help="Parse a typed word list")
    manual.add_argument("text")
    manual.set_defaults(func=cmd_manual)

    save = subparsers.add_parser("save", help="Extract, save and print a student link")
    add_extraction_args(save)
    save.add_argument("--store", required=True, help="Directory for saved lists")
    save.add_argument("--base-url", required=True, help="Base URL of the flashcard site")
    save.add_argument("--add", default="", help="Extra words to add, comma separated")
    save.set_defaults(func=cmd_save)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except SightWordsError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
