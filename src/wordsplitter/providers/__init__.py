"""
wordsplitter Providers Package

This package contains lexicon providers for wordsplitter. All providers
return objects satisfying the ``Lexicon`` protocol.
"""

from .static_lexicon import StaticLexicon, create_static_lexicon
from .plain_text import LexiconLoadError, load_word_list, create_plain_text_lexicon

__all__ = [
    'StaticLexicon',
    'create_static_lexicon',
    'LexiconLoadError',
    'load_word_list',
    'create_plain_text_lexicon',
]
