from __future__ import annotations
import logging
from typing import Optional

from .datatypes import TextAnalysis
from .features import extract_keywords
from .preprocessing import AnalyzerConfig, DEFAULT_CONFIG
from .stats import compute_statistics
from .summarize import summarize
from .validation import ExtractionError, TextExtractor, ensure_text_usable

logger = logging.getLogger(__name__)


def analyze_text(text: str, max_keywords: int = 12, max_sentences: int = 4,
                 cfg: Optional[AnalyzerConfig] = None) -> TextAnalysis:
    """Gate the text, then extract keywords, a summary and statistics."""
    cfg = cfg or DEFAULT_CONFIG
    ensure_text_usable(text, cfg)

    keywords = extract_keywords(text, max_keywords, cfg)
    summary = summarize(text, max_sentences, cfg)
    statistics = compute_statistics(text, cfg)
    logger.info("Analyzed text: %d keywords, summary of %d characters, %d sentences",
                len(keywords), len(summary), statistics.total_sentences)
    return TextAnalysis(keywords=tuple(keywords), summary=summary, statistics=statistics)


def analyze_document(document_bytes: bytes, extractor: TextExtractor,
                     max_keywords: int = 12, max_sentences: int = 4,
                     cfg: Optional[AnalyzerConfig] = None) -> TextAnalysis:
    try:
        text = extractor.extract_plain_text(document_bytes)
    except ExtractionError:
        raise
    except Exception as e:
        logger.error("Text extraction failed: %s", e)
        raise ExtractionError(
            "The document could not be processed; make sure the file is not corrupted."
        ) from e
    logger.debug("Extracted %d characters", len(text))
    return analyze_text(text, max_keywords, max_sentences, cfg)
