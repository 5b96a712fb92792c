"""
esperanto-text: Esperanto transliteration.

Converts text between UTF-8 Esperanto (ĉ ĝ ĥ ĵ ŝ ŭ), the x-system (cx, gx,
...) and the h-system (ch, gh, ...). The x-system is converted exactly; for
the h-system a small vocabulary keeps real words such as "senchava" intact.

Basic usage:
    >>> from esperanto_text import utf8_to_x_system
    >>> utf8_to_x_system("eĥoŝanĝo ĉiuĵaŭde")
    'ehxosxangxo cxiujxauxde'

    >>> from esperanto_text import h_system_to_utf8
    >>> h_system_to_utf8("Chiuj estas senchavaj kaj taugaj ideoj.")
    'Ĉiuj estas senchavaj kaj taŭgaj ideoj.'

    >>> from esperanto_text import convert
    >>> convert("sxangxo", "x", "h")
    'shangho'
"""

from esperanto_text.x_system import XSystemConverter, utf8_to_x_system, x_system_to_utf8
from esperanto_text.h_system import (
    Change,
    ConversionResult,
    HSystemConverter,
    h_system_to_utf8,
    utf8_to_h_system,
)
from esperanto_text.vocabulary import Vocabulary, get_vocabulary

__version__ = "0.1.0"
__all__ = [
    "SYSTEMS",
    "convert",
    "resolve_system",
    "utf8_to_x_system",
    "x_system_to_utf8",
    "utf8_to_h_system",
    "h_system_to_utf8",
    "XSystemConverter",
    "HSystemConverter",
    "ConversionResult",
    "Change",
    "Vocabulary",
    "get_vocabulary",
]

# Canonical system names: UTF-8, x-system, h-system
SYSTEMS = ("u", "x", "h")

_ALIASES = {
    "u": "u",
    "utf8": "u",
    "utf-8": "u",
    "x": "x",
    "h": "h",
}

_TO_UTF8 = {
    "u": lambda text: text,
    "x": x_system_to_utf8,
    "h": h_system_to_utf8,
}

_FROM_UTF8 = {
    "u": lambda text: text,
    "x": utf8_to_x_system,
    "h": utf8_to_h_system,
}


def resolve_system(name: str) -> str:
    """
    Return the canonical name ('u', 'x' or 'h') for a system name.

    Raises:
        ValueError: If the name is not a known system
    """
    key = name.lower() if isinstance(name, str) else name
    if key not in _ALIASES:
        raise ValueError(
            f"Unknown system: {name!r}. Use one of: {', '.join(sorted(_ALIASES))}"
        )
    return _ALIASES[key]


def convert(text: str, source: str, target: str) -> str:
    """
    Convert text from one representation to another.

    Conversion between the x-system and the h-system goes through UTF-8.

    Args:
        text: Text to convert
        source: System of the input ('u', 'x' or 'h')
        target: System of the output ('u', 'x' or 'h')

    Returns:
        Converted text (unchanged if source and target are the same)
    """
    source = resolve_system(source)
    target = resolve_system(target)
    if source == target:
        return text
    return _FROM_UTF8[target](_TO_UTF8[source](text))


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "EsperantoTransliteratorComponent":
        try:
            from esperanto_text.spacy import EsperantoTransliteratorComponent
            return EsperantoTransliteratorComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install esperanto-text[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
