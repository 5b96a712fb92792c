"""
Vocabulary submodule.

Re-exports the known-word list used to disambiguate h-system text.
"""

from esperanto_text.vocabulary._vocabulary import (
    DEFAULT_VOCABULARY_PATH,
    Match,
    Vocabulary,
    get_vocabulary,
)

__all__ = [
    "DEFAULT_VOCABULARY_PATH",
    "Match",
    "Vocabulary",
    "get_vocabulary",
]
