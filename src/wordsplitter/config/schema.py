"""Pydantic schemas for YAML splitter configuration."""

from pydantic import BaseModel, Field
from typing import List, Optional, Tuple

from ..languages import LANGUAGES, get_language

DEFAULT_MINIMUM_WORD_LENGTH = 2

class LexiconCfg(BaseModel):
    """Where the words come from and how they are matched."""
    dictionary: Optional[str] = Field(default=None,
                                      description="Plain-text word list, one word per line (relative to the config file)")
    words: List[str] = Field(default_factory=list, description="Inline words added to the dictionary")
    encoding: str = Field(default="utf-8", description="Encoding of the dictionary file")
    minimum_word_length: Optional[int] = Field(default=None, ge=1,
                                               description="Shorter strings never count as words (overrides language preset)")
    connecting_characters: Optional[List[str]] = Field(default=None,
                                                       description="Suffixes stripped between parts, tried in order (overrides language preset)")

    class Config:
        extra = "forbid"  # Strict validation

class SplitterCfg(BaseModel):
    """Matching policy for the splitter."""
    hide_connecting_characters: bool = Field(default=True,
                                             description="Strip matched connecting characters from emitted parts")
    strict_mode: bool = Field(default=False,
                              description="Only emit dictionary words; disables truncation fallbacks")
    max_word_length: Optional[int] = Field(default=None, ge=2,
                                           description="Longer words are returned unsplit")

    class Config:
        extra = "forbid"  # Strict validation

class SplitterConfig(BaseModel):
    """Complete configuration for a compound splitter."""
    version: int = Field(default=1, description="Config schema version")
    language: Optional[str] = Field(default=None, description="Language preset code, e.g. 'de'")
    lexicon: LexiconCfg = Field(description="Lexicon definition")
    splitter: SplitterCfg = Field(default_factory=SplitterCfg, description="Splitter policy")

    class Config:
        extra = "forbid"  # Strict validation

    def validate_lexicon(self) -> List[str]:
        """Validate lexicon configuration and return any issues."""
        issues = []

        if not self.lexicon.dictionary and not self.lexicon.words:
            issues.append("Lexicon has no dictionary file and no inline words")

        if self.language and self.language.strip().lower() not in LANGUAGES:
            issues.append(f"Unknown language: '{self.language}'")

        conn = self.lexicon.connecting_characters or []
        if any(not c for c in conn):
            issues.append("Connecting characters must not be empty strings")
        duplicates = set([c for c in conn if conn.count(c) > 1])
        if duplicates:
            issues.append(f"Duplicate connecting characters: {duplicates}")

        return issues

    def resolved_minimum_word_length(self) -> int:
        """Explicit value, else the language preset, else the default."""
        if self.lexicon.minimum_word_length is not None:
            return self.lexicon.minimum_word_length
        if self.language:
            return get_language(self.language).minimum_word_length
        return DEFAULT_MINIMUM_WORD_LENGTH

    def resolved_connecting_characters(self) -> Tuple[str, ...]:
        """Explicit list, else the language preset, else none."""
        if self.lexicon.connecting_characters is not None:
            return tuple(self.lexicon.connecting_characters)
        if self.language:
            return get_language(self.language).connecting_characters
        return ()
