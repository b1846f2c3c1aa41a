"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from wordsplitter.providers.static_lexicon import create_static_lexicon
from wordsplitter.config.loader import load_config_from_string


@pytest.fixture
def house_lexicon():
    """Provide a tiny lexicon with 's' as connecting character."""
    return create_static_lexicon(["haus", "tür", "auto", "bahn"],
                                 minimum_word_length=2,
                                 connecting_characters=["s"])


@pytest.fixture
def word_list_text():
    """Provide the contents of a plain-text word list."""
    return """# German nouns
Kranken
versicherung

beitrag
  Haus
"""


@pytest.fixture
def word_list_file(word_list_text):
    """Provide a temporary word list file."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.txt', delete=False, encoding='utf-8') as f:
        f.write(word_list_text)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def sample_config_yaml():
    """Provide a sample splitter config YAML for testing."""
    return """
version: 1
language: de
lexicon:
  words:
    - kranken
    - versicherung
    - beitrag
    - auto
    - bahn
splitter:
  hide_connecting_characters: true
  strict_mode: false
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def config_dir(word_list_text):
    """Provide a directory holding a config file next to its word list."""
    with tempfile.TemporaryDirectory() as d:
        base = Path(d)
        (base / "words.txt").write_text(word_list_text, encoding="utf-8")
        (base / "splitter.yaml").write_text(
            "language: de\n"
            "lexicon:\n"
            "  dictionary: words.txt\n"
            "  words: [tür]\n"
            "  minimum_word_length: 3\n",
            encoding="utf-8",
        )
        yield base


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()
