"""Command-line entry point: print study aids for uploaded documents as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

from .engine import StudyMaterialEngine
from .core.models import ExtractionOutcome


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Extract study aids from PDF, DOCX, or TXT files")
    parser.add_argument("paths", nargs="+", type=Path, help="Files or directories to process.")
    parser.add_argument("--max-sentences", type=int, default=5, help="Sentences in the summary.")
    parser.add_argument("--max-terms", type=int, default=20, help="Maximum key terms.")
    parser.add_argument("--max-concepts", type=int, default=8, help="Maximum concepts.")
    parser.add_argument("--workers", type=int, default=None, help="Files processed in parallel.")
    parser.add_argument("--pdf-workers", type=int, default=1, help="PDF pages read in parallel.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def _collect_paths(engine: StudyMaterialEngine, paths: List[Path]) -> List[Path]:
    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(engine.file_scanner.scan_directory(path))
        else:
            files.append(path)
    return files


def _report(engine: StudyMaterialEngine, outcome: ExtractionOutcome,
            args: argparse.Namespace) -> Dict[str, Any]:
    if not outcome.success:
        return {
            "file": outcome.file_name,
            "error": {"kind": outcome.error_kind, "message": str(outcome.error)},
        }

    aids = engine.analyze(
        outcome.document,
        max_sentences=args.max_sentences,
        max_terms=args.max_terms,
        max_concepts=args.max_concepts,
    )
    return {
        "file": outcome.file_name,
        "document": outcome.document.get_text_stats(),
        "study_aids": aids.to_dict(),
    }


def main(argv: List[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, stream=sys.stderr)

    config: Dict[str, Any] = {"extractors": {"pdf": {"max_workers": args.pdf_workers}}}
    if args.workers:
        config["max_workers"] = args.workers
    engine = StudyMaterialEngine(config)

    files = _collect_paths(engine, args.paths)
    if not files:
        print("No supported documents found.", file=sys.stderr)
        return 1

    result = engine.extract_batch(files)
    reports = [_report(engine, outcome, args) for outcome in result.outcomes]

    print(json.dumps(reports, ensure_ascii=False, indent=2))
    return 0 if result.failed_extractions == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
