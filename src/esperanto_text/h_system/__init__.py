"""
H-system conversion submodule.

Re-exports the vocabulary-assisted h-system converter.
"""

from esperanto_text.h_system._rules import (
    Change,
    ConversionResult,
    HSystemConverter,
    h_system_to_utf8,
    utf8_to_h_system,
)

__all__ = [
    "HSystemConverter",
    "ConversionResult",
    "Change",
    "h_system_to_utf8",
    "utf8_to_h_system",
]
