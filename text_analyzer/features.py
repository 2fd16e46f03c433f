from __future__ import annotations
import logging
import math
from collections import Counter
from typing import Dict, List, Optional

from .datatypes import TermScore
from .preprocessing import AnalyzerConfig, DEFAULT_CONFIG, tokenize, corpus_sentences

logger = logging.getLogger(__name__)


def _compute_tf(tokens: List[str]) -> Dict[str, float]:
    """
    TF(t) = count(t) / |tokens|
    Keys keep first-encounter order of the tokens.
    """
    counts = Counter(tokens)
    total = len(tokens)
    if not total:
        return {}
    return {t: c / total for t, c in counts.items()}


def _compute_df(terms, sentences: List[str]) -> Dict[str, int]:
    """
    DF(t) = number of sentences whose lowercased text contains t.
    Plain substring containment, so a term also matches inside longer words.
    """
    lowered = [s.lower() for s in sentences]
    return {t: sum(1 for s in lowered if t in s) for t in terms}


def _compute_idf(df: Dict[str, int], n_sentences: int) -> Dict[str, float]:
    """IDF(t) = ln(N / max(DF, 1)); never negative since DF <= N."""
    if n_sentences == 0:
        return {}
    return {t: math.log(n_sentences / max(d, 1)) for t, d in df.items()}


def score_terms(text: str, cfg: Optional[AnalyzerConfig] = None) -> List[TermScore]:
    """
    TF-IDF over a single text, where each sentence is one "document".

    Returns one TermScore per distinct token sorted by score descending;
    equal scores stay in first-encounter order.
    """
    cfg = cfg or DEFAULT_CONFIG
    tokens = tokenize(text, cfg)
    sentences = corpus_sentences(text, cfg)
    if not tokens or not sentences:
        logger.debug("No scorable structure: %d tokens, %d sentences", len(tokens), len(sentences))
        return []

    tf = _compute_tf(tokens)
    idf = _compute_idf(_compute_df(tf, sentences), len(sentences))
    scores = [TermScore(term=t, score=tf[t] * idf[t]) for t in tf]
    logger.debug("Scored %d terms over %d sentences", len(scores), len(sentences))
    return sorted(scores, key=lambda s: s.score, reverse=True)


# calculate_tfidf is kept as a second public name
calculate_tfidf = score_terms


def extract_keywords(text: str, max_keywords: Optional[int] = None,
                     cfg: Optional[AnalyzerConfig] = None) -> List[str]:
    cfg = cfg or DEFAULT_CONFIG
    if max_keywords is None:
        max_keywords = cfg.default_max_keywords
    max_keywords = max(0, max_keywords)
    top = score_terms(text, cfg)[:max_keywords]
    # tokenize() already enforces the minimum length
    return [s.term for s in top if len(s.term) > 2]
