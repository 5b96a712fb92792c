"""
Converter between UTF-8 Esperanto and the x-system.

The x-system marks a diacritic with a trailing "x" (ĉ → cx, ŭ → ux). Since
"x" is not part of the Esperanto alphabet the mapping is unambiguous and
fully reversible.

Example:
    >>> from esperanto_text.x_system import utf8_to_x_system
    >>> utf8_to_x_system("eĥoŝanĝo ĉiuĵaŭde")
    'ehxosxangxo cxiujxauxde'

    >>> from esperanto_text.x_system import x_system_to_utf8
    >>> x_system_to_utf8("Cxiuj sxatas la jxauxdon")
    'Ĉiuj ŝatas la ĵaŭdon'
"""

from typing import Optional

from esperanto_text._charmap import TRIGGER_LETTERS, digraph_to_diacritic, encode_diacritics

__all__ = ["XSystemConverter", "utf8_to_x_system", "x_system_to_utf8"]


class XSystemConverter:
    """
    Lossless x-system transliterator.

    Example:
        >>> converter = XSystemConverter()
        >>> converter.encode("ŝanĝo")
        'sxangxo'
        >>> converter.decode("SXANGXO")
        'ŜANĜO'
    """

    def encode(self, text: str) -> str:
        """
        Convert UTF-8 diacritics to x-system digraphs.

        Args:
            text: Any text; non-Esperanto characters pass through

        Returns:
            Text with each diacritic letter replaced by base letter + "x"
        """
        if not text:
            return text
        return encode_diacritics(text, "x")

    def decode(self, text: str) -> str:
        """
        Convert x-system digraphs to UTF-8 diacritics.

        The base letter decides the case of the result; the case of the
        "x" is ignored ("cX" → "ĉ", "Cx" → "Ĉ").

        Args:
            text: x-system text

        Returns:
            Text with every trigger letter + "x" replaced by its diacritic
        """
        if not text:
            return text

        result = []
        i = 0
        while i < len(text):
            char = text[i]
            if (
                char in TRIGGER_LETTERS
                and i + 1 < len(text)
                and text[i + 1] in ("x", "X")
            ):
                result.append(digraph_to_diacritic(char, "x"))
                i += 2
            else:
                result.append(char)
                i += 1
        return "".join(result)


# Singleton instance for convenience functions
_default_converter: Optional[XSystemConverter] = None


def _get_converter() -> XSystemConverter:
    global _default_converter
    if _default_converter is None:
        _default_converter = XSystemConverter()
    return _default_converter


def utf8_to_x_system(text: str) -> str:
    """Convert UTF-8 "ĵaŭdo" to x-system "jxauxdo"."""
    return _get_converter().encode(text)


def x_system_to_utf8(text: str) -> str:
    """Convert x-system "jxauxdo" to UTF-8 "ĵaŭdo"."""
    return _get_converter().decode(text)
