"""
Submission analysis: parse a raw submission and measure its primary document.

The primary document is the first ``<DOCUMENT>`` of the submission (the filing
itself, e.g. the 10-K). Its pages are joined into one text and passed to the
metrics engine; XML documents and documents without pages get no metrics.

Usage:
    from edgar_metrics.pipeline import analyze_submission

    analysis = analyze_submission(Path("0000320193-17-000070.txt").read_bytes())
    row = analysis.to_record()
    print(row["Company Name"], row["Fog Index"])
"""

import logging
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from edgar_metrics.features.metrics import DisclosureMetrics, DisclosureMetricsEngine
from edgar_metrics.preprocessing import ParsedSubmission, SubDocument, SubmissionParser

logger = logging.getLogger(__name__)


class SubmissionAnalysis(BaseModel):
    """Parsed submission plus metrics of its primary document (None when not measurable)."""
    model_config = ConfigDict(frozen=True)

    parsed: ParsedSubmission
    metrics: Optional[DisclosureMetrics] = None

    def to_record(self) -> Dict[str, Any]:
        """
        Flatten into one report row keyed by column label.

        Missing values are empty strings, so every row has every column.
        """
        header = self.parsed.header
        metrics = self.metrics

        def metric(value):
            return "" if metrics is None else value(metrics)

        return {
            "CIK": header.company.central_index_key,
            "Form Date": header.filing_date,
            "Form Type": header.filing_details.form_type,
            "Company Name": header.company.name,
            "Filename": header.filename,
            "Sentence Count": metric(lambda m: m.sentence_count),
            "Word Count": metric(lambda m: m.word_count),
            "Higher Syllable Word Count": metric(lambda m: m.higher_syllable_word_count),
            "Numerical Intensity": metric(lambda m: m.numerical_intensity),
            "Fog Index": metric(lambda m: m.fog_index),
            "Negative Words Count": metric(lambda m: m.negative_word_count),
            "Positive Words Count": metric(lambda m: m.positive_word_count),
            "Tone": metric(lambda m: m.tone),
        }


def document_text(document: SubDocument) -> str:
    """Pages joined with newlines (one trailing newline), "" when nothing to measure."""
    if document.is_xml or not document.pages:
        return ""
    return "\n".join(document.pages) + "\n"


def analyze_submission(
    raw: Union[str, bytes],
    parser: Optional[SubmissionParser] = None,
    engine: Optional[DisclosureMetricsEngine] = None,
) -> SubmissionAnalysis:
    """
    Parse a raw submission and compute metrics for its primary document.

    Args:
        raw: Submission text or bytes
        parser: Optional SubmissionParser (default configuration if None)
        engine: Optional DisclosureMetricsEngine (default collaborators if None)

    Returns:
        SubmissionAnalysis

    Raises:
        SubmissionDecodeError: If the input cannot be decoded to text
    """
    parser = parser or SubmissionParser()
    parsed = parser.parse(raw)

    document = parsed.primary_document
    if document is None:
        logger.warning(
            f"Submission {parsed.header.accession_number or '<no accession>'} has no documents"
        )
        return SubmissionAnalysis(parsed=parsed)

    text = document_text(document)
    if not text:
        logger.info(
            f"Primary document {document.filename or document.sequence or '?'} "
            f"({document.classification.value}) has no prose; skipping metrics"
        )
        return SubmissionAnalysis(parsed=parsed)

    engine = engine or DisclosureMetricsEngine()
    return SubmissionAnalysis(parsed=parsed, metrics=engine.compute(text))
