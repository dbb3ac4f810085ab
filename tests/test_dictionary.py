import tempfile
import unittest
from pathlib import Path

from gridplay.core.exceptions import DictionaryLoadError
from gridplay.data.dictionary import DictionaryConfig, WordDictionary
from gridplay.data.normalization import clean_word, is_alphabetic


class NormalizationTests(unittest.TestCase):
    def test_clean_word_folds_accents_and_drops_symbols(self) -> None:
        self.assertEqual(clean_word("Café-au-lait"), "CAFEAULAIT")
        self.assertEqual(clean_word("naïve"), "NAIVE")
        self.assertEqual(clean_word(""), "")

    def test_is_alphabetic(self) -> None:
        self.assertTrue(is_alphabetic("abcXYZ"))
        self.assertFalse(is_alphabetic("ab1"))
        self.assertFalse(is_alphabetic(""))


class DictionaryTests(unittest.TestCase):
    def test_loads_word_list_skipping_comments_and_blanks(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "words.txt"
            sample.write_text("# sample list\ncat\n\nCart\n  dart  \n", encoding="utf-8")

            dictionary = WordDictionary(DictionaryConfig(path=sample))
            self.assertEqual(len(dictionary), 3)
            self.assertEqual(list(dictionary), ["CART", "CAT", "DART"])

    def test_missing_file_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(DictionaryLoadError):
                WordDictionary(DictionaryConfig(path=Path(tmpdir) / "absent.txt"))

    def test_config_without_path_or_words_raises(self) -> None:
        with self.assertRaises(DictionaryLoadError):
            WordDictionary(DictionaryConfig())

    def test_contains_is_case_insensitive(self) -> None:
        dictionary = WordDictionary.from_words(["Boggle", "maze"])
        self.assertTrue(dictionary.contains("boggle"))
        self.assertTrue(dictionary.contains("MAZE"))
        self.assertIn("Maze", dictionary)
        self.assertFalse(dictionary.contains("life"))

    def test_contains_prefix_includes_whole_words(self) -> None:
        dictionary = WordDictionary.from_words(["cart", "carton", "dart"])
        self.assertTrue(dictionary.contains_prefix("CA"))
        self.assertTrue(dictionary.contains_prefix("cart"))
        self.assertTrue(dictionary.contains_prefix("carto"))
        self.assertFalse(dictionary.contains_prefix("cartons"))
        self.assertFalse(dictionary.contains_prefix("ce"))
        self.assertFalse(dictionary.contains_prefix("zz"))

    def test_length_limits_filter_entries(self) -> None:
        dictionary = WordDictionary(
            DictionaryConfig(min_length=3, max_length=4),
            words=["at", "cat", "cart", "carts"],
        )
        self.assertEqual(list(dictionary), ["CART", "CAT"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
