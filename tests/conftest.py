"""Pytest configuration and fixtures."""

import json
import pytest
import sys
from pathlib import Path

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fixphrase.dictionary import Dictionary
from fixphrase.wordlist import clear_dictionary_cache


@pytest.fixture
def words():
    """Generated word list covering all four bands."""
    return [f"word{i:04d}" for i in range(7610)]


@pytest.fixture
def dictionary(words):
    """Dictionary built from the generated word list."""
    return Dictionary(words)


@pytest.fixture
def wordlist_file(tmp_path, monkeypatch, words):
    """wordlist.json on disk, wired in through WORDLIST_PATH."""
    path = tmp_path / "wordlist.json"
    path.write_text(json.dumps(words))
    monkeypatch.setenv("WORDLIST_PATH", str(path))
    monkeypatch.delenv("WORDLIST_S3_BUCKET", raising=False)
    clear_dictionary_cache()
    yield path
    clear_dictionary_cache()
