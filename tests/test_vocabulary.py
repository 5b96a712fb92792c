"""Tests for the h-system vocabulary."""

import pytest

from esperanto_text import h_system_to_utf8
from esperanto_text.vocabulary import DEFAULT_VOCABULARY_PATH, Match, Vocabulary, get_vocabulary


class TestBundledVocabulary:
    def test_loads(self, vocabulary: Vocabulary):
        assert len(vocabulary) > 0
        assert "senchav" in vocabulary.literal_h
        assert "naur" in vocabulary.literal_au

    def test_shared_instance(self):
        assert get_vocabulary() is get_vocabulary()

    def test_entries_are_frozen(self, vocabulary: Vocabulary):
        assert isinstance(vocabulary.literal_h, frozenset)
        assert isinstance(vocabulary.literal_au, frozenset)

    def test_default_path_exists(self):
        assert DEFAULT_VOCABULARY_PATH.exists()

    def test_contains_is_case_insensitive(self, vocabulary: Vocabulary):
        assert "senchav" in vocabulary
        assert "SENCHAV" in vocabulary
        assert "senchavaj" not in vocabulary
        assert 42 not in vocabulary


class TestIsLiteralH:
    def test_vocabulary_word(self, vocabulary: Vocabulary):
        assert vocabulary.is_literal_h("senchavaj", 3)

    def test_sentence_initial_capital(self, vocabulary: Vocabulary):
        assert not vocabulary.is_literal_h("Chiuj", 0)

    def test_case_folded(self, vocabulary: Vocabulary):
        assert vocabulary.is_literal_h("SENCHAVAJ", 3)
        assert vocabulary.is_literal_h("Flughaveno", 3)

    def test_root_inside_longer_word(self, vocabulary: Vocabulary):
        # ne-senchava
        assert vocabulary.is_literal_h("nesenchava", 5)

    def test_whole_word_entry(self, vocabulary: Vocabulary):
        assert vocabulary.is_literal_h("kashal", 2)

    def test_not_a_candidate(self, vocabulary: Vocabulary):
        assert not vocabulary.is_literal_h("senchavaj", 0)
        assert not vocabulary.is_literal_h("senchavaj", 8)

    def test_unknown_word(self, vocabulary: Vocabulary):
        assert not vocabulary.is_literal_h("shanghi", 0)
        assert not vocabulary.is_literal_h("shanghi", 4)

    def test_agrees_with_decoder_after_consumed_letter(self, vocabulary: Vocabulary):
        # "ch" becomes ĉ; the remaining "hh" pair starts on a consumed h
        assert not vocabulary.is_literal_h("chh", 0)
        assert vocabulary.is_literal_h("chh", 1)
        assert h_system_to_utf8("chh") == "ĉh"

    def test_agrees_with_decoder_per_candidate(self, vocabulary: Vocabulary):
        for word in ["chh", "shh", "ehhoshangho", "senchavaj", "nesenchava", "hhh"]:
            decoded = h_system_to_utf8(word)
            kept = [i for i in range(len(word) - 1) if vocabulary.is_literal_h(word, i)]
            converted = [
                i for i in range(len(word) - 1)
                if word[i : i + 2] in ("ch", "gh", "hh", "jh", "sh") and i not in kept
            ]
            assert len(decoded) == len(word) - len(converted)


class TestIsLiteralAU:
    def test_protected(self, vocabulary: Vocabulary):
        assert vocabulary.is_literal_au("Nauron", 1)

    def test_position_is_index_of_a(self, vocabulary: Vocabulary):
        assert vocabulary.is_literal_au("Nauron", 1)
        assert not vocabulary.is_literal_au("Nauron", 2)
        assert not vocabulary.is_literal_au("hierau", 5)

    def test_unprotected(self, vocabulary: Vocabulary):
        assert not vocabulary.is_literal_au("hierau", 4)
        assert not vocabulary.is_literal_au("taugaj", 1)


class TestScan:
    def test_leftmost_longest(self, vocabulary: Vocabulary):
        matches = list(vocabulary.scan("senchavaj"))
        assert matches == [Match(0, 7, True)]

    def test_digraph_matches(self, vocabulary: Vocabulary):
        matches = list(vocabulary.scan("ehhoshangho"))
        assert [(m.start, m.end) for m in matches] == [(1, 3), (4, 6), (8, 10)]
        assert not any(m.literal for m in matches)

    def test_protected_spans(self, vocabulary: Vocabulary):
        assert vocabulary.protected_spans("tobushaltejo") == [(0, 11)]
        assert vocabulary.protected_spans("chiuj") == []

    def test_match_length(self):
        assert Match(2, 5, False).length == 3

    def test_empty_word(self, vocabulary: Vocabulary):
        assert list(vocabulary.scan("")) == []


class TestCustomVocabulary:
    def test_constructor_lowercases(self):
        vocab = Vocabulary(["Grashav"])
        assert "grashav" in vocab.literal_h

    def test_empty_vocabulary(self):
        vocab = Vocabulary([])
        assert len(vocab) == 0
        assert not vocab.is_literal_h("senchavaj", 3)

    def test_load_from_path(self, write_vocabulary):
        path = write_vocabulary({"version": 2, "literal_h": ["flughaven"], "literal_au": []})
        vocab = Vocabulary.load(path)
        assert vocab.literal_h == frozenset({"flughaven"})
        assert vocab.literal_au == frozenset()

    def test_load_accepts_str_path(self, write_vocabulary):
        path = write_vocabulary({"literal_h": ["senchav"]})
        assert "senchav" in Vocabulary.load(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Vocabulary file not found"):
            Vocabulary.load(tmp_path / "missing.json")

    def test_invalid_json(self, write_vocabulary):
        path = write_vocabulary("{not json")
        with pytest.raises(ValueError, match="Invalid vocabulary file"):
            Vocabulary.load(path)

    def test_not_an_object(self, write_vocabulary):
        path = write_vocabulary(["senchav"])
        with pytest.raises(ValueError, match="expected an object"):
            Vocabulary.load(path)

    def test_uppercase_entry_rejected(self, write_vocabulary):
        path = write_vocabulary({"literal_h": ["Senchav"]})
        with pytest.raises(ValueError, match="lowercase"):
            Vocabulary.load(path)

    def test_entry_without_digraph_rejected(self, write_vocabulary):
        path = write_vocabulary({"literal_h": ["domo"]})
        with pytest.raises(ValueError, match="no h-digraph"):
            Vocabulary.load(path)

    def test_au_entry_without_au_rejected(self, write_vocabulary):
        path = write_vocabulary({"literal_h": [], "literal_au": ["domo"]})
        with pytest.raises(ValueError, match="no 'au'"):
            Vocabulary.load(path)

    def test_load_logs_entry_counts(self, write_vocabulary, caplog):
        path = write_vocabulary({"version": 3, "literal_h": ["senchav"], "literal_au": ["naur"]})
        with caplog.at_level("DEBUG", logger="esperanto_text.vocabulary._vocabulary"):
            Vocabulary.load(path)
        assert "1 literal-h, 1 literal-au" in caplog.text
