from __future__ import annotations
import logging
import math
from typing import Optional

from .datatypes import TextStatistics
from .preprocessing import AnalyzerConfig, DEFAULT_CONFIG, tokenize, corpus_sentences

logger = logging.getLogger(__name__)


def _round_half_up(x: float) -> int:
    # round() is banker's rounding; averages round .5 upwards
    return int(math.floor(x + 0.5))


def _safe_average(total: int, count: int) -> int:
    if count == 0:
        return 0
    return _round_half_up(total / count)


def compute_statistics(text: str, cfg: Optional[AnalyzerConfig] = None) -> TextStatistics:
    cfg = cfg or DEFAULT_CONFIG
    words = tokenize(text, cfg)
    sentences = corpus_sentences(text, cfg)
    characters = len(text)
    if not sentences or not words:
        logger.debug("Averages not computable: %d words, %d sentences", len(words), len(sentences))

    return TextStatistics(
        total_words=len(words),
        unique_words=len(set(words)),
        total_sentences=len(sentences),
        total_characters=characters,
        average_words_per_sentence=_safe_average(len(words), len(sentences)),
        average_characters_per_word=_safe_average(characters, len(words)),
    )


get_text_statistics = compute_statistics
