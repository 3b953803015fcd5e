"""
Measure local EDGAR submission files.

Usage:
    python -m edgar_metrics 0000320193-17-000070.txt
    python -m edgar_metrics data/*.txt --all-documents --quiet

Prints one JSON object per file: header, document summaries and the report
row of the primary document's metrics.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from edgar_metrics.features.metrics import DisclosureMetricsEngine
from edgar_metrics.pipeline import analyze_submission
from edgar_metrics.preprocessing import SubmissionDecodeError, SubmissionParser

logger = logging.getLogger(__name__)


def analyze_file(
    file_path: Path,
    parser: SubmissionParser,
    engine: DisclosureMetricsEngine,
    all_documents: bool = False,
) -> dict:
    """Analyze one submission file into a JSON-serializable dict."""
    analysis = analyze_submission(file_path.read_bytes(), parser=parser, engine=engine)

    result = {
        "file": str(file_path),
        "header": analysis.parsed.header.model_dump(),
        "record": analysis.to_record(),
    }
    if all_documents:
        result["documents"] = [doc.summary() for doc in analysis.parsed.documents]
    if analysis.metrics is not None:
        result["metrics"] = analysis.metrics.summary()
    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse EDGAR submission files and compute disclosure metrics"
    )
    parser.add_argument(
        'files',
        nargs='+',
        type=Path,
        help='Raw submission .txt files'
    )
    parser.add_argument(
        '--all-documents',
        action='store_true',
        help='Include a summary of every sub-document, not only the metrics row'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Only log warnings and errors'
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    submission_parser = SubmissionParser()
    engine = DisclosureMetricsEngine()

    failures = 0
    for file_path in args.files:
        if not file_path.exists():
            logger.error(f"File not found: {file_path}")
            failures += 1
            continue
        try:
            result = analyze_file(file_path, submission_parser, engine, args.all_documents)
        except SubmissionDecodeError as e:
            logger.error(f"Failed to decode {file_path}: {e}")
            failures += 1
            continue
        except OSError as e:
            logger.error(f"Cannot read {file_path}: {e}")
            failures += 1
            continue
        print(json.dumps(result, ensure_ascii=False))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
