import unittest

from infrastructure.tokenization.stopwords import STOPWORDS, STOPWORDS_VERSION
from infrastructure.tokenization.word_tokenizer import WordTokenizer


class TestWordTokenizer(unittest.TestCase):
    def setUp(self) -> None:
        self.tokenizer = WordTokenizer()

    def test_extracts_words_and_removes_stopwords(self) -> None:
        unigrams, _ = self.tokenizer.tokenize("The transformer architecture is a neural network model")
        self.assertEqual(unigrams, ["transformer", "architecture", "neural", "network", "model"])

    def test_bigrams_from_adjacent_words(self) -> None:
        _, bigrams = self.tokenizer.tokenize("Machine learning algorithms process data")
        self.assertEqual(
            bigrams,
            ["machine learning", "learning algorithms", "algorithms process", "process data"],
        )

    def test_lowercases_tokens(self) -> None:
        unigrams, _ = self.tokenizer.tokenize("Python JavaScript TypeScript")
        self.assertEqual(unigrams, ["python", "javascript", "typescript"])

    def test_drops_short_words(self) -> None:
        unigrams, _ = self.tokenizer.tokenize("AI is an ML API for NLP")
        self.assertEqual(unigrams, ["api", "nlp"])

    def test_words_with_digits(self) -> None:
        unigrams, _ = self.tokenizer.tokenize("python3 es2015 http2 ipv6")
        self.assertEqual(unigrams, ["python3", "es2015", "http2", "ipv6"])

    def test_tokens_must_start_with_a_letter(self) -> None:
        unigrams, _ = self.tokenizer.tokenize("version 123 release 456 3d model")
        self.assertEqual(unigrams, ["version", "release", "model"])

    def test_bigrams_skip_filtered_words(self) -> None:
        unigrams, bigrams = self.tokenizer.tokenize("The machine learning model and the neural networks")
        self.assertEqual(unigrams, ["machine", "learning", "model", "neural", "networks"])
        self.assertIn("model neural", bigrams)
        self.assertNotIn("the machine", bigrams)
        for bigram in bigrams:
            left, right = bigram.split(" ")
            self.assertNotIn(left, STOPWORDS)
            self.assertNotIn(right, STOPWORDS)

    def test_bigram_words_are_adjacent_in_filtered_sequence(self) -> None:
        unigrams, bigrams = self.tokenizer.tokenize(
            "Graph databases store relationships; graph queries traverse relationships quickly."
        )
        pairs = {f"{left} {right}" for left, right in zip(unigrams, unigrams[1:])}
        self.assertEqual(len(bigrams), max(len(unigrams) - 1, 0))
        self.assertTrue(set(bigrams) <= pairs)

    def test_empty_text(self) -> None:
        self.assertEqual(self.tokenizer.tokenize(""), ([], []))

    def test_only_stopwords(self) -> None:
        self.assertEqual(self.tokenizer.tokenize("the and of it is with some"), ([], []))

    def test_counts_and_order(self) -> None:
        unigrams, bigrams = self.tokenizer.tokenize("alpha beta gamma delta")
        self.assertEqual(len(unigrams), 4)
        self.assertEqual(bigrams, ["alpha beta", "beta gamma", "gamma delta"])

    def test_stopwords_never_survive(self) -> None:
        for word in sorted(STOPWORDS):
            unigrams, _ = self.tokenizer.tokenize(f"keepme {word.upper()} keepme")
            self.assertNotIn(word, unigrams)

    def test_non_ascii_text_does_not_fail(self) -> None:
        unigrams, _ = self.tokenizer.tokenize("naïve café résumé 東京 données")
        for token in unigrams:
            self.assertTrue(token.isascii())

    def test_deterministic(self) -> None:
        text = "Vector search ranks vector embeddings by cosine similarity"
        self.assertEqual(self.tokenizer.tokenize(text), self.tokenizer.tokenize(text))

    def test_stopword_list_is_versioned(self) -> None:
        self.assertEqual(STOPWORDS_VERSION, 1)
        self.assertIsInstance(STOPWORDS, frozenset)
        self.assertIn("the", STOPWORDS)
        self.assertNotIn("machine", STOPWORDS)


if __name__ == "__main__":
    unittest.main()
