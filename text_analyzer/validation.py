from __future__ import annotations
import logging
import re
from typing import Iterable, Optional, Protocol

from .preprocessing import AnalyzerConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)

# ASCII letters/digits plus Latin-1 Supplement and Latin Extended-A letters
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9\u00C0-\u017F]")


class TextAnalyzerError(Exception):
    """Base class for errors raised by text_analyzer."""


class ExtractionError(TextAnalyzerError):
    """The source document could not be turned into plain text."""


class UnusableTextError(TextAnalyzerError, ValueError):
    """Extracted text is too short or mostly non-alphanumeric."""


class TextExtractor(Protocol):
    """Anything that turns document bytes (e.g. a PDF) into plain text."""

    def extract_plain_text(self, document_bytes: bytes) -> str:
        ...


def join_pages(pages: Iterable[str]) -> str:
    # each page is followed by a blank line; outer whitespace trimmed
    return "".join(page + "\n\n" for page in pages).strip()


def alphanumeric_ratio(text: str) -> float:
    if not text:
        return 0.0
    return len(_NON_ALNUM_RE.sub("", text)) / len(text)


def is_text_usable(text: Optional[str], cfg: Optional[AnalyzerConfig] = None) -> bool:
    """
    Quality gate applied before analysis: rejects empty or near-empty text
    and text that is mostly symbols.
    """
    cfg = cfg or DEFAULT_CONFIG
    if not text or len(text.strip()) < cfg.min_usable_length:
        return False
    return alphanumeric_ratio(text) >= cfg.min_alphanumeric_ratio


def ensure_text_usable(text: Optional[str], cfg: Optional[AnalyzerConfig] = None) -> str:
    if not is_text_usable(text, cfg):
        length = len(text) if text else 0
        logger.warning("Rejected text of %d characters by quality gate", length)
        raise UnusableTextError(
            f"Not enough readable text to analyze ({length} characters); "
            "the document may not contain a text layer."
        )
    return text
