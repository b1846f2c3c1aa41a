"""In-memory lexicon for tests, presets and loaded word lists."""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple

from ..core.util import normalize_word

@dataclass(frozen=True)
class StaticLexicon:
    """An immutable word set with its minimum word length and connecting characters."""
    words: FrozenSet[str]
    minimum_word_length: int = 2
    connecting_characters: Tuple[str, ...] = ()

    def __post_init__(self):
        if self.minimum_word_length < 1:
            raise ValueError(f"minimum_word_length must be >= 1, got {self.minimum_word_length}")
        blank = [c for c in self.connecting_characters if not c]
        if blank:
            raise ValueError("Connecting characters must be non-empty strings")

    def __contains__(self, word: object) -> bool:
        return word in self.words

    def __len__(self) -> int:
        return len(self.words)

def create_static_lexicon(words: Iterable[str], minimum_word_length: int = 2,
                          connecting_characters: Iterable[str] = ()) -> StaticLexicon:
    """Create a static lexicon, lowercasing and trimming words and dropping blanks."""
    normalized = frozenset(w for w in (normalize_word(word) for word in words) if w)
    return StaticLexicon(
        words=normalized,
        minimum_word_length=minimum_word_length,
        connecting_characters=tuple(connecting_characters),
    )
