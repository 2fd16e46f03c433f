from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import List, Optional

logger = logging.getLogger(__name__)

# Turkish letters outside ASCII; compared after lowercasing
ACCENTED_LETTERS = frozenset("çğıöşüÇĞIİÖŞÜ")

TURKISH_STOPWORDS = frozenset({
    'acaba', 'ama', 'aslında', 've', 'veya', 'ya', 'yahut', 'ancak', 'fakat', 'lakin', 'ne',
    'ki', 'bu', 'şu', 'o', 'ben', 'sen', 'biz', 'siz', 'onlar', 'bir', 'iki', 'üç', 'dört',
    'beş', 'altı', 'yedi', 'sekiz', 'dokuz', 'on', 'de', 'da', 'den', 'dan', 'e', 'a', 'i',
    'için', 'ile', 'gibi', 'kadar', 'daha', 'en', 'çok', 'az', 'var', 'yok', 'olan', 'olur',
    'bunlar', 'şunlar', 'her', 'bazı', 'hiç', 'tüm', 'hep', 'artık',
    'ayrıca', 'böyle', 'şöyle', 'nasıl', 'neden', 'niçin', 'kim', 'nerede', 'ne zaman',
    'hangi', 'kaç', 'mi', 'mı', 'mu', 'mü', 'dir', 'dır', 'dur', 'dür', 'tir', 'tır', 'tur', 'tür',
})

ENGLISH_STOPWORDS = frozenset({
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for', 'of', 'with', 'by',
    'from', 'up', 'about', 'into', 'through', 'during', 'before', 'after', 'above', 'below',
    'is', 'are', 'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'do', 'does',
    'did', 'will', 'would', 'could', 'should', 'may', 'might', 'must', 'can', 'this', 'that',
    'these', 'those', 'i', 'me', 'my', 'myself', 'we', 'our', 'ours', 'ourselves', 'you',
    'your', 'yours', 'yourself', 'yourselves', 'he', 'him', 'his', 'himself', 'she', 'her',
    'hers', 'herself', 'it', 'its', 'itself', 'they', 'them', 'their', 'theirs', 'themselves',
})

STOPWORDS = TURKISH_STOPWORDS | ENGLISH_STOPWORDS

# Space separators, line terminators and U+FEFF; U+001C-U+001F and U+0085 are not whitespace here
_WHITESPACE = "\t\n\x0b\x0c\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_STRIP_RE = re.compile("[^A-Za-z0-9_" + _WHITESPACE + "".join(sorted(ACCENTED_LETTERS)) + "]")
_SPACE_RE = re.compile("[" + _WHITESPACE + "]+")
_NUMERIC_RE = re.compile(r"[0-9]+")
_SENT_SPLIT_RE = re.compile(r"[.!?]+")


@dataclass(frozen=True)
class AnalyzerConfig:
    min_token_length: int = 3
    corpus_min_sentence_length: int = 10    # IDF "documents"
    summary_min_sentence_length: int = 20   # summary candidates
    summary_keyword_budget: int = 15
    length_norm_tokens: int = 20
    default_max_keywords: int = 10
    default_max_sentences: int = 3
    min_usable_length: int = 50
    min_alphanumeric_ratio: float = 0.3

    def __post_init__(self):
        if self.min_token_length < 1:
            raise ValueError(f"min_token_length must be >= 1, got {self.min_token_length}")
        if self.length_norm_tokens < 1:
            raise ValueError(f"length_norm_tokens must be >= 1, got {self.length_norm_tokens}")
        if self.summary_keyword_budget < 0:
            raise ValueError(f"summary_keyword_budget must be >= 0, got {self.summary_keyword_budget}")
        if not 0.0 <= self.min_alphanumeric_ratio <= 1.0:
            raise ValueError(f"min_alphanumeric_ratio must be within [0, 1], got {self.min_alphanumeric_ratio}")


DEFAULT_CONFIG = AnalyzerConfig()


def normalize(text: str) -> str:
    """
    Lowercase, drop punctuation (ASCII word chars, whitespace and the
    accented allowlist survive), collapse whitespace and trim.
    """
    text = _STRIP_RE.sub("", text.lower())
    return _SPACE_RE.sub(" ", text).strip()


def is_stopword(word: str) -> bool:
    return word in STOPWORDS


def tokenize(text: str, cfg: Optional[AnalyzerConfig] = None) -> List[str]:
    cfg = cfg or DEFAULT_CONFIG
    toks = []
    for word in normalize(text).split(" "):
        if len(word) < cfg.min_token_length:
            continue
        if is_stopword(word):
            continue
        if _NUMERIC_RE.fullmatch(word):
            continue
        toks.append(word)
    return toks


def split_sentences(text: str, min_length: int) -> List[str]:
    # Split on runs of . ! ? and keep trimmed parts longer than min_length
    parts = [p.strip() for p in _SENT_SPLIT_RE.split(text)]
    return [p for p in parts if len(p) > min_length]


def corpus_sentences(text: str, cfg: Optional[AnalyzerConfig] = None) -> List[str]:
    """Sentences treated as documents for IDF and counted by the statistics."""
    cfg = cfg or DEFAULT_CONFIG
    return split_sentences(text, cfg.corpus_min_sentence_length)


def candidate_sentences(text: str, cfg: Optional[AnalyzerConfig] = None) -> List[str]:
    """Sentences long enough to appear in a summary."""
    cfg = cfg or DEFAULT_CONFIG
    return split_sentences(text, cfg.summary_min_sentence_length)
