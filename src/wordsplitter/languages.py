"""Language presets: minimum word length and connecting characters per language."""

from dataclasses import dataclass
from typing import Dict, List, Tuple

class UnknownLanguageError(ValueError):
    """Raised when no preset exists for a language code."""
    pass

@dataclass(frozen=True)
class LanguagePreset:
    """Lexicon defaults for one language."""
    code: str
    name: str
    minimum_word_length: int
    connecting_characters: Tuple[str, ...]   # tried in this order

GERMAN = LanguagePreset(
    code="de",
    name="German",
    minimum_word_length=4,
    connecting_characters=("s", "-"),
)

# Swedish linking morpheme is mostly -s- (arbetsgivare, trafikskada)
SWEDISH = LanguagePreset(
    code="sv",
    name="Swedish",
    minimum_word_length=3,
    connecting_characters=("s",),
)

LANGUAGES: Dict[str, LanguagePreset] = {p.code: p for p in (GERMAN, SWEDISH)}

def get_language(code: str) -> LanguagePreset:
    """Look up a preset by its (case-insensitive) language code."""
    try:
        return LANGUAGES[code.strip().lower()]
    except KeyError:
        raise UnknownLanguageError(
            f"Unknown language '{code}', available: {', '.join(available_languages())}"
        )

def available_languages() -> List[str]:
    return sorted(LANGUAGES)
