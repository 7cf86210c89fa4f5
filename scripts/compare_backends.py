"""
Run the same rules and input through every map backend and check that the
outputs are byte-identical.

Usage:
  python scripts/compare_backends.py --input data/input.txt --rules data/rules.txt \
    [--log-file scripts/output/compare_backends.jsonl]

Prints PASS/FAIL per backend against the first backend's output and exits
with the number of failures (0 when every backend agrees). A rule set that
fails to resolve must fail the same way on every backend.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from word_replacer_engine.core.word_replacer.backends import available_backends
from word_replacer_engine.core.word_replacer.config import configure_logging, load_config
from word_replacer_engine.core.word_replacer.exceptions import WordReplacerError
from word_replacer_engine.core.word_replacer.pipeline import WordReplacementPipeline


def _write_log(log_path: Optional[Path], event: str, payload: Dict[str, Any]) -> None:
    if not log_path:
        return
    entry = {"event": event, "payload": payload}
    with log_path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(entry, ensure_ascii=False) + "\n")


def _run_backend(backend: str, input_file: Path, rules_file: Path, encoding: str, strict: bool) -> Dict[str, Any]:
    pipeline = WordReplacementPipeline(backend=backend, strict_rules=strict)
    try:
        pipeline.load_rules_from_file(rules_file, encoding)
        pipeline.load_input_text_from_file(input_file, encoding)
        result = pipeline.run_full_pipeline()
    except WordReplacerError as e:
        return {"backend": backend, "error": type(e).__name__, "output": None}
    return {"backend": backend, "error": None, "output": result.output_text, "summary": result.to_dict()}


def compare_backends(input_file: Path, rules_file: Path, log_file: Optional[Path], strict: bool = False) -> int:
    config = load_config()
    runs = [
        _run_backend(backend, input_file, rules_file, config.encoding, strict or config.strict_rules)
        for backend in available_backends()
    ]

    reference = runs[0]
    failures = 0
    for run in runs:
        same = run["error"] == reference["error"] and run["output"] == reference["output"]
        _write_log(log_file, "backend_compared", {
            "backend": run["backend"],
            "matches_reference": same,
            "error": run["error"],
            "summary": run.get("summary"),
        })
        if same:
            detail = run["error"] or f"{len(run['output'])} chars"
            print(f"{run['backend']} PASS: {detail}")
        else:
            failures += 1
            print(f"{run['backend']} FAIL: differs from {reference['backend']}")
    return failures


def main() -> None:
    parser = argparse.ArgumentParser(description="Check that every map backend produces the same output.")
    parser.add_argument("--input", required=True, type=Path, help="Input text file")
    parser.add_argument("--rules", required=True, type=Path, help="Replacement rules file")
    parser.add_argument("--log-file", type=Path, default=None, help="Append JSONL results to this file")
    parser.add_argument("--strict", action="store_true", help="Reject rule lines without a separator")
    parser.add_argument("--verbose", action="store_true", help="Log pipeline progress to stderr")
    args = parser.parse_args()

    configure_logging("INFO" if args.verbose else "WARNING")
    if args.log_file:
        args.log_file.parent.mkdir(parents=True, exist_ok=True)

    failures = compare_backends(args.input, args.rules, args.log_file, strict=args.strict)
    logging.getLogger(__name__).info("Backend comparison finished with %d failures", failures)
    sys.exit(failures)


if __name__ == "__main__":
    main()
