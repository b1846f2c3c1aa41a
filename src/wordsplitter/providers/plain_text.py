"""Plain-text dictionary loading (one word per line)."""

from pathlib import Path
from typing import FrozenSet, Iterable, Union

from ..core.util import normalize_word
from .static_lexicon import StaticLexicon, create_static_lexicon

class LexiconLoadError(Exception):
    """Exception raised when a word list cannot be loaded."""
    pass

def load_word_list(path: Union[str, Path], encoding: str = "utf-8") -> FrozenSet[str]:
    """
    Load a plain-text word list.

    Blank lines and lines starting with ``#`` are skipped. Words are trimmed
    and lowercased.

    Args:
        path: Path to the word list
        encoding: File encoding

    Returns:
        FrozenSet[str]: The words in the file

    Raises:
        LexiconLoadError: If the file is missing, unreadable or cannot be decoded
    """
    path = Path(path)

    if not path.exists():
        raise LexiconLoadError(f"Word list not found: {path}")

    try:
        with open(path, "r", encoding=encoding) as f:
            lines = f.readlines()
    except UnicodeDecodeError as e:
        raise LexiconLoadError(f"Cannot decode word list {path} as {encoding}: {e}")
    except OSError as e:
        raise LexiconLoadError(f"Cannot read word list {path}: {e}")

    words = set()
    for line in lines:
        word = normalize_word(line)
        if not word or word.startswith("#"):
            continue
        words.add(word)

    return frozenset(words)

def create_plain_text_lexicon(path: Union[str, Path], minimum_word_length: int = 2,
                              connecting_characters: Iterable[str] = (),
                              encoding: str = "utf-8") -> StaticLexicon:
    """Load a word list file into a StaticLexicon."""
    return create_static_lexicon(
        load_word_list(path, encoding=encoding),
        minimum_word_length=minimum_word_length,
        connecting_characters=connecting_characters,
    )
