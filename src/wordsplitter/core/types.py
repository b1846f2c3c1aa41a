"""Result structures for split operations."""

from dataclasses import dataclass, field
from typing import List, Optional

@dataclass
class SplitResult:
    """Outcome of splitting a single word."""
    word: Optional[str]             # input as given (untrimmed)
    parts: List[str] = field(default_factory=list)
    method: str = "unsplit"         # "empty" | "short" | "tupel" | "truncate" | "truncate_reverse" | "unsplit" | "too_long"

    @property
    def is_compound(self) -> bool:
        """True if the word was split into more than one part."""
        return len(self.parts) > 1
