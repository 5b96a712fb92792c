"""
Converter between UTF-8 Esperanto and the h-system.

The h-system marks ĉ ĝ ĥ ĵ ŝ with a trailing "h" and writes ŭ as plain "u".
Encoding is always safe. Decoding is a best-effort heuristic: "h" is also an
ordinary letter, so a vocabulary of known words decides which "ch", "gh",
"hh", "jh", "sh" and "au" sequences to leave alone. Words missing from the
vocabulary are read as diacritics, and may be mis-converted.

Example:
    >>> from esperanto_text.h_system import h_system_to_utf8
    >>> h_system_to_utf8("Chiuj estas senchavaj kaj taugaj ideoj.")
    'Ĉiuj estas senchavaj kaj taŭgaj ideoj.'

    >>> from esperanto_text.h_system import utf8_to_h_system
    >>> utf8_to_h_system("eĥoŝanĝo ĉiuĵaŭde")
    'ehhoshangho chiujhaude'
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from esperanto_text._charmap import encode_diacritics, is_letter, with_diacritic
from esperanto_text.vocabulary import Vocabulary, get_vocabulary

__all__ = [
    "HSystemConverter",
    "ConversionResult",
    "Change",
    "utf8_to_h_system",
    "h_system_to_utf8",
]

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Change:
    """Record of a single decoded digraph."""

    position: int
    original: str
    converted: str
    rule: str
    context: str


@dataclass
class ConversionResult:
    """Detailed result from h-system decoding."""

    original: str
    converted: str
    changes: list[Change] = field(default_factory=list)


# =============================================================================
# Tokenisation Helpers
# =============================================================================


def _split_words(text: str) -> Iterator[tuple[int, str, bool]]:
    """Split text into (offset, chunk, is_word) runs covering all of it."""
    start = 0
    while start < len(text):
        in_word = is_letter(text[start])
        end = start + 1
        while end < len(text) and is_letter(text[end]) == in_word:
            end += 1
        yield start, text[start:end], in_word
        start = end


def _get_context(text: str, start: int, end: int, window: int = 3) -> str:
    """Get context string around a span for debugging."""
    left = max(0, start - window)
    right = min(len(text), end + window)
    return text[left:start] + "[" + text[start:end] + "]" + text[end:right]


def _decode_pair(pair: str) -> tuple[str, str]:
    """Return (replacement, rule_name) for an unprotected digraph."""
    if pair.lower() == "au":
        return pair[0] + with_diacritic(pair[1]), "au_breve"
    return with_diacritic(pair[0]), "h_digraph"


# =============================================================================
# Main Converter Class
# =============================================================================


class HSystemConverter:
    """
    Vocabulary-assisted h-system transliterator.

    Args:
        vocabulary: Known-word list to consult when decoding.
            Defaults to the bundled vocabulary.

    Example:
        >>> converter = HSystemConverter()
        >>> converter.decode("La flughaveno estas chi tie")
        'La flughaveno estas ĉi tie'
    """

    def __init__(self, vocabulary: Optional[Vocabulary] = None) -> None:
        self.vocabulary = vocabulary if vocabulary is not None else get_vocabulary()

    def encode(self, text: str) -> str:
        """
        Convert UTF-8 diacritics to the h-system.

        Args:
            text: Any text; non-Esperanto characters pass through

        Returns:
            Text with ĉ → ch, ĝ → gh, ĥ → hh, ĵ → jh, ŝ → sh, ŭ → u
        """
        if not text:
            return text
        return encode_diacritics(text, "h")

    def decode(self, text: str) -> str:
        """
        Convert h-system text to UTF-8.

        Args:
            text: h-system text

        Returns:
            Text with every unprotected digraph replaced by its diacritic
        """
        return self.decode_detailed(text).converted

    def decode_detailed(self, text: str) -> ConversionResult:
        """
        Decode with a record of every digraph that was converted.

        Args:
            text: h-system text

        Returns:
            ConversionResult with original, converted, and list of changes

        Example:
            >>> converter = HSystemConverter()
            >>> result = converter.decode_detailed("ankau")
            >>> result.converted
            'ankaŭ'
            >>> result.changes[0].rule
            'au_breve'
        """
        if not text:
            return ConversionResult(original=text, converted=text, changes=[])

        result = []
        changes = []

        for offset, chunk, is_word in _split_words(text):
            if not is_word:
                result.append(chunk)
                continue

            pos = 0
            for match in self.vocabulary.scan(chunk):
                if match.literal:
                    continue
                pair = chunk[match.start : match.end]
                replacement, rule = _decode_pair(pair)
                result.append(chunk[pos : match.start])
                result.append(replacement)
                pos = match.end
                changes.append(
                    Change(
                        position=offset + match.start,
                        original=pair,
                        converted=replacement,
                        rule=rule,
                        context=_get_context(text, offset + match.start, offset + match.end),
                    )
                )
            result.append(chunk[pos:])

        return ConversionResult(original=text, converted="".join(result), changes=changes)


# =============================================================================
# Module-level Convenience Functions
# =============================================================================

# Singleton instance for convenience functions
_default_converter: Optional[HSystemConverter] = None


def _get_converter() -> HSystemConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = HSystemConverter()
    return _default_converter


def utf8_to_h_system(text: str) -> str:
    """Convert UTF-8 "ĵaŭdo" to h-system "jhaudo"."""
    return _get_converter().encode(text)


def h_system_to_utf8(text: str) -> str:
    """
    Convert h-system "jhaudo" to UTF-8 "ĵaŭdo".

    Convenience function that uses a shared converter instance with the
    bundled vocabulary.
    """
    return _get_converter().decode(text)
