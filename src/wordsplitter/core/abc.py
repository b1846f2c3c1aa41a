"""Protocol interfaces for dependency injection from the host application."""

from typing import Protocol, Sequence, Any

class Lexicon(Protocol):
    """Host-injected word list. Implement with a set, a file loader, a database, etc."""

    minimum_word_length: int
    connecting_characters: Sequence[str]

    def __contains__(self, word: object) -> bool:
        """
        Test membership of a lowercase, trimmed word.

        Args:
            word: Candidate word

        Returns:
            bool: True if the word is in the dictionary
        """
        ...

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...
