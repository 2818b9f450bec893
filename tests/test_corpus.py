"""
Tests for configuration and corpus loading.
"""

import tempfile
import unittest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from char_lm.config import DEFAULT_SEED, ModelConfig, NormalizeConfig
from char_lm.corpus import iter_corpus, normalize_corpus, read_corpus


class TestModelConfig(unittest.TestCase):
    """Tests for ModelConfig."""

    def test_defaults(self):
        config = ModelConfig()
        self.assertEqual(config.window_length, 3)
        self.assertIsNone(config.seed)
        self.assertFalse(config.reproducible)

    def test_invalid_window_length(self):
        with self.assertRaises(ValueError):
            ModelConfig(window_length=0)

    def test_invalid_seed(self):
        with self.assertRaises(ValueError):
            ModelConfig(seed="20")

    def test_seed_modes(self):
        self.assertEqual(ModelConfig.from_seed_mode(2, "fixed").seed, DEFAULT_SEED)
        self.assertIsNone(ModelConfig.from_seed_mode(2, "random").seed)
        self.assertEqual(ModelConfig.from_seed_mode(2, "random", seed=5).seed, 5)
        with self.assertRaises(ValueError):
            ModelConfig.from_seed_mode(2, "sometimes")

    def test_dict_round_trip(self):
        config = ModelConfig.from_dict({"window_length": 5, "seed": 1, "unused": True})
        self.assertEqual(config.to_dict(), {"window_length": 5, "seed": 1})


class TestNormalize(unittest.TestCase):
    """Tests for optional corpus normalization."""

    def test_default_is_noop(self):
        text = "Café  Au\nLait"
        self.assertEqual(normalize_corpus(text), text)
        self.assertFalse(NormalizeConfig().enabled)

    def test_all_options(self):
        config = NormalizeConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)
        self.assertEqual(normalize_corpus("Café  Au\nLait ", config), "cafe au lait")

    def test_strip_accents_alone(self):
        config = NormalizeConfig(strip_accents=True)
        self.assertEqual(normalize_corpus("Café naïve Ångström", config), "Cafe naive Angstrom")


class TestReadCorpus(unittest.TestCase):
    """Tests for reading corpus files."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = Path(self.tmpdir.name) / "corpus.txt"
        with open(self.path, "w", encoding="utf-8", newline="") as f:
            f.write("Héllo\r\nworld")

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_read_keeps_raw_characters(self):
        self.assertEqual(read_corpus(self.path), "Héllo\r\nworld")

    def test_read_with_normalization(self):
        config = NormalizeConfig(lowercase=True, strip_accents=True, normalize_whitespace=True)
        self.assertEqual(read_corpus(self.path, normalize=config), "hello world")

    def test_iter_matches_read(self):
        self.assertEqual(list(iter_corpus(self.path, chunk_size=2)), list("Héllo\r\nworld"))

    def test_missing_file(self):
        missing = Path(self.tmpdir.name) / "missing.txt"
        with self.assertRaises(FileNotFoundError):
            read_corpus(missing)
        with self.assertRaises(FileNotFoundError):
            next(iter_corpus(missing))

    def test_invalid_chunk_size(self):
        with self.assertRaises(ValueError):
            next(iter_corpus(self.path, chunk_size=0))


if __name__ == '__main__':
    unittest.main()
