"""
Known-word vocabulary for h-system disambiguation.

In the h-system "ch" may be ĉ or a literal c + h (senchava, "meaningless"),
and "au" may be aŭ or a + u (naŭro vs. Nauro). The vocabulary lists word
fragments (roots) in which the plain reading is the right one; every other
candidate is read as a diacritic.

Matching works on one word at a time. The case-folded word is segmented
left to right, always taking the longest pattern that starts at the current
position (vocabulary fragments and the plain digraphs compete equally), so a
fragment protects any word containing it and a word equal to a fragment is
protected as a whole.

Example:
    >>> from esperanto_text.vocabulary import get_vocabulary
    >>> vocab = get_vocabulary()
    >>> vocab.is_literal_h("senchavaj", 3)
    True
    >>> vocab.is_literal_h("Chiuj", 0)
    False
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

__all__ = ["Match", "Vocabulary", "get_vocabulary", "DEFAULT_VOCABULARY_PATH"]

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_PATH = Path(__file__).parent / "data" / "vocabulary.json"

# Digraphs that stand for a diacritic letter when not protected
H_DIGRAPHS = frozenset({"ch", "gh", "hh", "jh", "sh"})
AU_DIGRAPH = "au"


@dataclass(frozen=True)
class Match:
    """A pattern occurrence inside a word."""

    start: int
    end: int
    literal: bool

    @property
    def length(self) -> int:
        return self.end - self.start


class Vocabulary:
    """
    Immutable set of fragments whose h (or au) is not a diacritic.

    Args:
        literal_h: Fragments where trigger letter + "h" is a literal h
        literal_au: Fragments where "au" is a plain a + u
    """

    def __init__(self, literal_h: Iterable[str], literal_au: Iterable[str] = ()) -> None:
        self.literal_h = frozenset(entry.lower() for entry in literal_h)
        self.literal_au = frozenset(entry.lower() for entry in literal_au)

        self._fragments = self.literal_h | self.literal_au
        self._patterns = self._fragments | H_DIGRAPHS | {AU_DIGRAPH}
        self._max_length = max(len(p) for p in self._patterns)

    @classmethod
    def load(cls, path: Union[str, Path, None] = None) -> "Vocabulary":
        """
        Load a vocabulary from a JSON data file.

        Args:
            path: Path to the JSON file. Defaults to the bundled vocabulary.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file content is not a valid vocabulary
        """
        filepath = Path(path) if path is not None else DEFAULT_VOCABULARY_PATH

        if not filepath.exists():
            raise FileNotFoundError(f"Vocabulary file not found: {filepath}")

        with open(filepath, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid vocabulary file {filepath}: {e}") from e

        literal_h = _read_entries(data, "literal_h", filepath)
        literal_au = _read_entries(data, "literal_au", filepath)

        for entry in literal_h:
            if not any(digraph in entry for digraph in H_DIGRAPHS):
                raise ValueError(
                    f"Entry {entry!r} in {filepath} has no h-digraph to protect"
                )
        for entry in literal_au:
            if AU_DIGRAPH not in entry:
                raise ValueError(f"Entry {entry!r} in {filepath} has no 'au' to protect")

        logger.debug(
            "Loaded vocabulary v%s from %s: %d literal-h, %d literal-au entries",
            data.get("version", "?"),
            filepath,
            len(literal_h),
            len(literal_au),
        )
        return cls(literal_h, literal_au)

    def __len__(self) -> int:
        return len(self._fragments)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._fragments

    def scan(self, word: str) -> Iterator[Match]:
        """
        Yield the leftmost-longest pattern matches in a word.

        Matches with ``literal=True`` are vocabulary fragments; the others are
        bare digraphs ("ch", "au", ...) that should become diacritics.
        """
        folded = word.lower()
        i = 0
        while i < len(folded):
            match = None
            for length in range(min(self._max_length, len(folded) - i), 1, -1):
                candidate = folded[i : i + length]
                if candidate in self._patterns:
                    match = Match(i, i + length, candidate in self._fragments)
                    break
            if match is None:
                i += 1
                continue
            yield match
            i = match.end

    def protected_spans(self, word: str) -> list[tuple[int, int]]:
        """Return (start, end) spans of the word covered by vocabulary fragments."""
        return [(m.start, m.end) for m in self.scan(word) if m.literal]

    def is_literal_h(self, word: str, position: int) -> bool:
        """
        Decide whether trigger letter + "h" at ``position`` is a literal h.

        Args:
            word: A single word (maximal run of letters)
            position: Index of the trigger letter in ``word``

        Returns:
            True if the pair must be kept as written. This is also the case
            when the trigger letter belongs to an earlier digraph, as the
            second "h" of "chh" does.
        """
        if word[position : position + 2].lower() not in H_DIGRAPHS:
            return False
        return self._is_kept(word, position)

    def is_literal_au(self, word: str, position: int) -> bool:
        """
        Decide whether "au" at ``position`` is a plain a + u.

        ``position`` is the index of the "a", as for ``is_literal_h``.
        """
        if word[position : position + 2].lower() != AU_DIGRAPH:
            return False
        return self._is_kept(word, position)

    def _is_kept(self, word: str, position: int) -> bool:
        return not any(m.start == position and not m.literal for m in self.scan(word))


def _read_entries(data: object, key: str, filepath: Path) -> list[str]:
    if not isinstance(data, dict):
        raise ValueError(f"Invalid vocabulary file {filepath}: expected an object")
    entries = data.get(key, [])
    if not isinstance(entries, list) or not all(
        isinstance(e, str) and e.isalpha() and e == e.lower() for e in entries
    ):
        raise ValueError(
            f"Invalid vocabulary file {filepath}: '{key}' must be a list of lowercase words"
        )
    return entries


# Shared instance loaded on first use
_default_vocabulary: Optional[Vocabulary] = None


def get_vocabulary() -> Vocabulary:
    """Return the bundled vocabulary, loading it on first call."""
    global _default_vocabulary
    if _default_vocabulary is None:
        _default_vocabulary = Vocabulary.load()
    return _default_vocabulary
