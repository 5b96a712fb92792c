"""
X-system conversion submodule.

Re-exports the lossless x-system converter.
"""

from esperanto_text.x_system._rules import (
    XSystemConverter,
    utf8_to_x_system,
    x_system_to_utf8,
)

__all__ = [
    "XSystemConverter",
    "utf8_to_x_system",
    "x_system_to_utf8",
]
