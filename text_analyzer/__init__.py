import logging

from .datatypes import TermScore, SentenceScore, TextStatistics, TextAnalysis
from .preprocessing import AnalyzerConfig, normalize, tokenize, corpus_sentences, candidate_sentences
from .features import score_terms, calculate_tfidf, extract_keywords
from .scoring import score_sentences, rank_sentences
from .summarize import summarize, generate_summary
from .stats import compute_statistics, get_text_statistics
from .validation import (TextAnalyzerError, ExtractionError, UnusableTextError, TextExtractor,
                         is_text_usable, ensure_text_usable, join_pages)
from .analysis import analyze_text, analyze_document
from .reporting import term_table, sentence_table, score_distribution

logging.getLogger(__name__).addHandler(logging.NullHandler())
