"""Shared fixtures for esperanto-text tests."""

import json
from pathlib import Path

import pytest

from esperanto_text.h_system import HSystemConverter
from esperanto_text.vocabulary import Vocabulary, get_vocabulary
from esperanto_text.x_system import XSystemConverter


@pytest.fixture
def x_converter() -> XSystemConverter:
    """Return a fresh x-system converter instance."""
    return XSystemConverter()


@pytest.fixture
def h_converter() -> HSystemConverter:
    """Return an h-system converter using the bundled vocabulary."""
    return HSystemConverter()


@pytest.fixture
def vocabulary() -> Vocabulary:
    """Return the bundled vocabulary."""
    return get_vocabulary()


@pytest.fixture
def write_vocabulary(tmp_path: Path):
    """Write a vocabulary JSON file and return its path."""

    def _write(data, name: str = "vocabulary.json") -> Path:
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return path

    return _write
