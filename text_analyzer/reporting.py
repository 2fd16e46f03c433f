from __future__ import annotations
from collections import Counter
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from .features import _compute_df, _compute_idf, _compute_tf, extract_keywords
from .preprocessing import AnalyzerConfig, DEFAULT_CONFIG, tokenize, corpus_sentences, candidate_sentences
from .scoring import _length_factor, score_sentence

TERM_COLUMNS = ["term", "count", "tf", "df", "idf", "score"]
SENTENCE_COLUMNS = ["sentence", "tokens", "keywords", "length_factor", "score"]


def term_table(text: str, cfg: Optional[AnalyzerConfig] = None) -> pd.DataFrame:
    """
    One row per distinct term with the pieces of its TF-IDF score,
    in the same order as score_terms().
    """
    cfg = cfg or DEFAULT_CONFIG
    tokens = tokenize(text, cfg)
    sentences = corpus_sentences(text, cfg)
    if not tokens or not sentences:
        return pd.DataFrame(columns=TERM_COLUMNS)

    counts = Counter(tokens)
    tf = _compute_tf(tokens)
    df = _compute_df(tf, sentences)
    idf = _compute_idf(df, len(sentences))

    rows = []
    for term in tf:
        rows.append({
            "term": term,
            "count": counts[term],
            "tf": tf[term],
            "df": df[term],
            "idf": idf[term],
            "score": tf[term] * idf[term],
        })
    frame = pd.DataFrame(rows, columns=TERM_COLUMNS)
    # mergesort is stable, ties keep first-encounter order
    return frame.sort_values("score", ascending=False, kind="mergesort").reset_index(drop=True)


def sentence_table(text: str, cfg: Optional[AnalyzerConfig] = None) -> pd.DataFrame:
    """Summary candidates in document order with their score breakdown."""
    cfg = cfg or DEFAULT_CONFIG
    keyword_set = frozenset(extract_keywords(text, cfg.summary_keyword_budget, cfg))
    rows = []
    for sentence in candidate_sentences(text, cfg):
        words = tokenize(sentence, cfg)
        rows.append({
            "sentence": sentence,
            "tokens": len(words),
            "keywords": sum(1 for w in words if w in keyword_set),
            "length_factor": _length_factor(len(words), cfg.length_norm_tokens),
            "score": score_sentence(sentence, keyword_set, cfg),
        })
    return pd.DataFrame(rows, columns=SENTENCE_COLUMNS)


def score_distribution(scores: List[float]) -> Dict[str, float]:
    if len(scores) == 0:
        return {"count": 0, "min": 0.0, "max": 0.0, "mean": 0.0, "std": 0.0}
    arr = np.asarray(scores, dtype=float)
    return {
        "count": int(arr.size),
        "min": float(np.min(arr)),
        "max": float(np.max(arr)),
        "mean": float(np.mean(arr)),
        "std": float(np.std(arr)),
    }
