"""
Character map for the Esperanto alphabet.

Defines the six diacritic letters (ĉ ĝ ĥ ĵ ŝ ŭ, plus capitals) and their
ASCII digraph spellings under the x-system and the h-system.

The h-system writes ŭ as a bare "u" (Zamenhof's convention), so it has no
h-system digraph of its own; the h-system decoder recovers it from "au".

Static tables only, no external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = [
    "DiacriticLetter",
    "LETTERS",
    "TRIGGER_LETTERS",
    "DIGRAPH_SYSTEMS",
    "diacritic_to_digraph",
    "digraph_to_diacritic",
    "encode_diacritics",
    "is_letter",
    "with_diacritic",
]

DIGRAPH_SYSTEMS = ("x", "h")


@dataclass(frozen=True)
class DiacriticLetter:
    """One diacritic letter and its spellings in each system."""

    char: str
    base: str
    x_digraph: str
    h_digraph: str

    def digraph(self, system: str) -> Optional[str]:
        if system == "x":
            return self.x_digraph
        if system == "h":
            return self.h_digraph
        return None


def _build_letters() -> tuple[DiacriticLetter, ...]:
    letters = []
    for char, base in zip("ĉĝĥĵŝŭ", "cghjsu"):
        h_digraph = base if base == "u" else base + "h"
        letters.append(DiacriticLetter(char, base, base + "x", h_digraph))
        letters.append(
            DiacriticLetter(
                char.upper(), base.upper(), base.upper() + "x", h_digraph.capitalize()
            )
        )
    return tuple(letters)


LETTERS = _build_letters()

# Base letters that can carry a diacritic
TRIGGER_LETTERS = frozenset("cghjsuCGHJSU")

_BY_CHAR = {letter.char: letter for letter in LETTERS}
_BY_BASE = {letter.base: letter for letter in LETTERS}

# Word characters for tokenisation: ASCII letters plus the diacritic letters
_LETTERS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ" + "".join(_BY_CHAR)
)


def is_letter(char: str) -> bool:
    """Check if character belongs to a word (ASCII or Esperanto letter)."""
    return char in _LETTERS


def diacritic_to_digraph(letter: str, system: str) -> Optional[str]:
    """
    Return the digraph for a diacritic letter, or None if not one.

    Example:
        >>> diacritic_to_digraph("ĝ", "x")
        'gx'
        >>> diacritic_to_digraph("Ŝ", "h")
        'Sh'
    """
    entry = _BY_CHAR.get(letter)
    if entry is None:
        return None
    return entry.digraph(system)


def with_diacritic(base: str) -> Optional[str]:
    """Return the diacritic form of a base letter (same case), or None."""
    entry = _BY_BASE.get(base)
    return entry.char if entry is not None else None


def digraph_to_diacritic(base: str, system: str) -> Optional[str]:
    """
    Return the diacritic letter for a base letter, or None.

    The result takes the case of ``base``. ``system`` only selects whether
    the base letter can be marked in that system at all: ŭ has no h-system
    digraph.

    Example:
        >>> digraph_to_diacritic("S", "x")
        'Ŝ'
        >>> digraph_to_diacritic("u", "h") is None
        True
    """
    if system not in DIGRAPH_SYSTEMS:
        return None
    if system == "h" and base in ("u", "U"):
        return None
    return with_diacritic(base)


def _upper_suffix(text: str, idx: int) -> bool:
    """True when the letter at idx sits in an upper-case run."""
    if idx > 0 and text[idx - 1].isupper():
        return True
    return idx + 1 < len(text) and text[idx + 1].isupper()


def encode_diacritics(text: str, system: str) -> str:
    """
    Replace every diacritic letter with its digraph in ``system``.

    A capital letter gets a capital suffix when a neighbouring character is
    also upper-case, so "ĈIO" becomes "CXIO" but "Ĉio" becomes "Cxio".
    """
    result = []
    for i, char in enumerate(text):
        entry = _BY_CHAR.get(char)
        if entry is None:
            result.append(char)
            continue
        digraph = entry.digraph(system)
        if char.isupper() and _upper_suffix(text, i):
            digraph = digraph.upper()
        result.append(digraph)
    return "".join(result)
