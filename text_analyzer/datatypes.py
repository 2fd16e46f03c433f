from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class TermScore:
    term: str
    score: float  # tf * idf


@dataclass(frozen=True)
class SentenceScore:
    sentence: str
    score: float


@dataclass(frozen=True)
class TextStatistics:
    total_words: int
    unique_words: int
    total_sentences: int
    total_characters: int
    average_words_per_sentence: int
    average_characters_per_word: int

    def to_dict(self) -> dict:
        return {
            "totalWords": self.total_words,
            "uniqueWords": self.unique_words,
            "totalSentences": self.total_sentences,
            "totalCharacters": self.total_characters,
            "averageWordsPerSentence": self.average_words_per_sentence,
            "averageCharactersPerWord": self.average_characters_per_word,
        }


@dataclass(frozen=True)
class TextAnalysis:
    keywords: Tuple[str, ...]
    summary: str
    statistics: TextStatistics
