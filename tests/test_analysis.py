import unittest

from text_analyzer import (
    ExtractionError,
    TextAnalysis,
    UnusableTextError,
    analyze_document,
    analyze_text,
    compute_statistics,
    extract_keywords,
    join_pages,
    summarize,
)

ARTICLE = (
    "Machine learning models require careful evaluation. "
    "Evaluation metrics such as precision and recall describe model quality! "
    "Data quality matters more than model size in many projects. "
    "Careful data cleaning improves precision. "
    "Projects without evaluation plans often fail? "
    "Recall improves when training data covers rare cases."
)


class FakeExtractor:
    def __init__(self, pages=None, error=None):
        self.pages = pages or []
        self.error = error
        self.calls = []

    def extract_plain_text(self, document_bytes):
        self.calls.append(document_bytes)
        if self.error is not None:
            raise self.error
        return join_pages(self.pages)


class TestAnalyzeText(unittest.TestCase):
    def test_runs_all_stages(self):
        result = analyze_text(ARTICLE)
        self.assertIsInstance(result, TextAnalysis)
        self.assertEqual(result.keywords, tuple(extract_keywords(ARTICLE, 12)))
        self.assertIsInstance(result.keywords, tuple)
        self.assertEqual(result.summary, summarize(ARTICLE, 4))
        self.assertEqual(result.statistics, compute_statistics(ARTICLE))

    def test_custom_counts(self):
        result = analyze_text(ARTICLE, max_keywords=3, max_sentences=1)
        self.assertEqual(len(result.keywords), 3)
        self.assertEqual(result.summary.count(". "), 0)

    def test_rejects_unusable_text(self):
        with self.assertRaises(UnusableTextError):
            analyze_text("%%%% ---- ####")


class TestAnalyzeDocument(unittest.TestCase):
    def test_uses_extracted_pages(self):
        sentences = ARTICLE.split("! ")
        extractor = FakeExtractor(pages=[sentences[0] + "!", sentences[1]])
        result = analyze_document(b"%PDF-1.4", extractor)
        self.assertEqual(extractor.calls, [b"%PDF-1.4"])
        self.assertEqual(result.statistics.total_words, compute_statistics(ARTICLE).total_words)

    def test_wraps_unexpected_errors(self):
        extractor = FakeExtractor(error=RuntimeError("bad xref table"))
        with self.assertRaises(ExtractionError) as ctx:
            analyze_document(b"garbage", extractor)
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)

    def test_extraction_error_passes_through(self):
        original = ExtractionError("encrypted document")
        extractor = FakeExtractor(error=original)
        with self.assertRaises(ExtractionError) as ctx:
            analyze_document(b"garbage", extractor)
        self.assertIs(ctx.exception, original)

    def test_empty_document_is_unusable(self):
        with self.assertRaises(UnusableTextError):
            analyze_document(b"", FakeExtractor(pages=[]))


if __name__ == "__main__":
    unittest.main(verbosity=2)
