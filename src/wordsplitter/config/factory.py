"""Build lexicons and splitters from a validated configuration."""

from pathlib import Path
from typing import Optional, Union

from ..core.abc import Logger
from ..providers.plain_text import load_word_list
from ..providers.static_lexicon import StaticLexicon, create_static_lexicon
from ..segmenters.compound import CompoundSplitter
from .schema import SplitterConfig

def build_lexicon(config: SplitterConfig, base_dir: Optional[Union[str, Path]] = None) -> StaticLexicon:
    """
    Build a lexicon from config: dictionary file plus inline words.

    Args:
        config: Validated splitter config
        base_dir: Directory relative dictionary paths are resolved against

    Returns:
        StaticLexicon: The populated lexicon

    Raises:
        LexiconLoadError: If the dictionary file cannot be loaded
    """
    words = set(config.lexicon.words)

    if config.lexicon.dictionary:
        dict_path = Path(config.lexicon.dictionary)
        if not dict_path.is_absolute() and base_dir is not None:
            dict_path = Path(base_dir) / dict_path
        words |= load_word_list(dict_path, encoding=config.lexicon.encoding)

    return create_static_lexicon(
        words,
        minimum_word_length=config.resolved_minimum_word_length(),
        connecting_characters=config.resolved_connecting_characters(),
    )

def build_splitter(config: SplitterConfig, base_dir: Optional[Union[str, Path]] = None,
                   logger: Optional[Logger] = None) -> CompoundSplitter:
    """Build a CompoundSplitter with the lexicon and policy from config."""
    lexicon = build_lexicon(config, base_dir=base_dir)

    if logger:
        logger.info("lexicon_loaded",
                    words=len(lexicon),
                    minimum_word_length=lexicon.minimum_word_length,
                    connecting_characters=list(lexicon.connecting_characters))

    return CompoundSplitter(
        lexicon,
        hide_connecting_characters=config.splitter.hide_connecting_characters,
        strict_mode=config.splitter.strict_mode,
        max_word_length=config.splitter.max_word_length,
        logger=logger,
    )
