from __future__ import annotations
import logging
from typing import List, Optional

from .datatypes import SentenceScore
from .features import extract_keywords
from .preprocessing import AnalyzerConfig, DEFAULT_CONFIG
from .scoring import score_sentences, rank_sentences

logger = logging.getLogger(__name__)


def select_sentences(text: str, max_sentences: Optional[int] = None,
                     cfg: Optional[AnalyzerConfig] = None) -> List[SentenceScore]:
    cfg = cfg or DEFAULT_CONFIG
    if max_sentences is None:
        max_sentences = cfg.default_max_sentences
    # the summary has its own keyword budget, independent of what callers display
    keywords = extract_keywords(text, cfg.summary_keyword_budget, cfg)
    ranked = rank_sentences(score_sentences(text, keywords, cfg))
    return ranked[:max(0, max_sentences)]


def summarize(text: str, max_sentences: Optional[int] = None,
              cfg: Optional[AnalyzerConfig] = None) -> str:
    """
    Extractive summary: the highest-scoring sentences, most salient first.

    Sentences are emitted in score order (not document order), joined with
    ". " and closed with a single period. Returns "" when no sentence
    qualifies, rather than a lone "." with nothing before it.
    """
    selected = select_sentences(text, max_sentences, cfg)
    if not selected:
        logger.debug("No candidate sentences; empty summary")
        return ""
    return ". ".join(s.sentence for s in selected) + "."


generate_summary = summarize
