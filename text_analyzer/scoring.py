from __future__ import annotations
import logging
from typing import Iterable, List, Optional

from .datatypes import SentenceScore
from .preprocessing import AnalyzerConfig, DEFAULT_CONFIG, tokenize, candidate_sentences

logger = logging.getLogger(__name__)


def _length_factor(n_tokens: int, norm: int) -> float:
    # short sentences are penalized, anything past `norm` tokens scores 1.0
    return min(n_tokens / norm, 1.0)


def score_sentence(sentence: str, keyword_set, cfg: Optional[AnalyzerConfig] = None) -> float:
    """
    score = (keyword tokens / tokens) * min(tokens / 20, 1)

    A sentence with no surviving tokens scores 0.
    """
    cfg = cfg or DEFAULT_CONFIG
    words = tokenize(sentence, cfg)
    if not words:
        return 0.0
    hits = sum(1 for w in words if w in keyword_set)
    return (hits / len(words)) * _length_factor(len(words), cfg.length_norm_tokens)


def score_sentences(text: str, keywords: Iterable[str],
                    cfg: Optional[AnalyzerConfig] = None) -> List[SentenceScore]:
    """Score every summary candidate of `text`, in document order."""
    cfg = cfg or DEFAULT_CONFIG
    keyword_set = frozenset(keywords)
    scores = [SentenceScore(sentence=s, score=score_sentence(s, keyword_set, cfg))
              for s in candidate_sentences(text, cfg)]
    logger.debug("Scored %d candidate sentences against %d keywords", len(scores), len(keyword_set))
    return scores


def rank_sentences(scores: List[SentenceScore]) -> List[SentenceScore]:
    # stable: equal scores keep document order
    return sorted(scores, key=lambda s: s.score, reverse=True)
