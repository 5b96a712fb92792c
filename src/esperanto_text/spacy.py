"""
spaCy integration for esperanto-text.

Provides a pipeline component that transliterates documents between UTF-8,
the x-system and the h-system.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("eo")
    >>> nlp.add_pipe("esperanto_transliterator", config={"source": "x", "target": "u"})
    >>> doc = nlp("Mi sxatas la jxauxdon")
    >>> doc._.transliterated
    'Mi ŝatas la ĵaŭdon'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from esperanto_text import convert, resolve_system

__all__ = [
    "EsperantoTransliteratorComponent",
    "create_esperanto_transliterator",
]


@Language.factory(
    "esperanto_transliterator",
    default_config={"source": "h", "target": "u"},
    assigns=["doc._.transliterated", "token._.transliterated"],
)
def create_esperanto_transliterator(
    nlp: Language,
    name: str,
    source: str = "h",
    target: str = "u",
) -> "EsperantoTransliteratorComponent":
    """Create an Esperanto transliterator pipeline component."""
    return EsperantoTransliteratorComponent(nlp, name, source=source, target=target)


class EsperantoTransliteratorComponent:
    """
    spaCy pipeline component for Esperanto transliteration.

    Extensions:
        - Doc._.transliterated: Full converted text.
        - Token._.transliterated: Converted token text.

    The document itself is never modified.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        source: str = "h",
        target: str = "u",
    ) -> None:
        self.name = name
        # Raises ValueError for unknown systems
        self.source = resolve_system(source)
        self.target = resolve_system(target)

        if not Doc.has_extension("transliterated"):
            Doc.set_extension("transliterated", default=None)
        if not Token.has_extension("transliterated"):
            Token.set_extension("transliterated", default=None)

    def _convert(self, text: str) -> str:
        return convert(text, self.source, self.target)

    def __call__(self, doc: Doc) -> Doc:
        doc._.transliterated = self._convert(doc.text)

        for token in doc:
            token._.transliterated = self._convert(token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "EsperantoTransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "EsperantoTransliteratorComponent":
        return self


def get_transliterator_pipe(nlp: Language) -> Optional[EsperantoTransliteratorComponent]:
    """Get the transliterator component from a pipeline."""
    if "esperanto_transliterator" in nlp.pipe_names:
        return nlp.get_pipe("esperanto_transliterator")
    return None
