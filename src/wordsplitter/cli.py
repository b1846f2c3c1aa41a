"""Command-line interface for splitting compound words."""

import argparse
import sys
from pathlib import Path

from wordsplitter.config.loader import load_config, ConfigLoadError
from wordsplitter.config.factory import build_splitter
from wordsplitter.core.log import StdLogger, setup_logging
from wordsplitter.core.util import safe_json
from wordsplitter.languages import available_languages, get_language, LANGUAGES
from wordsplitter.providers.plain_text import create_plain_text_lexicon, LexiconLoadError
from wordsplitter.segmenters.compound import CompoundSplitter


def _splitter_from_args(args, logger):
    """Build a splitter from --config or from --dictionary and friends."""
    if args.config:
        config_path = Path(args.config)
        config = load_config(config_path)
        if args.language:
            get_language(args.language)
            config.language = args.language
        if args.min_length is not None:
            config.lexicon.minimum_word_length = args.min_length
        if args.connecting is not None:
            config.lexicon.connecting_characters = list(args.connecting)
        if args.strict:
            config.splitter.strict_mode = True
        if args.keep_connecting:
            config.splitter.hide_connecting_characters = False
        return build_splitter(config, base_dir=config_path.parent, logger=logger)

    minimum_word_length = 2
    connecting = ()
    if args.language:
        preset = get_language(args.language)
        minimum_word_length = preset.minimum_word_length
        connecting = preset.connecting_characters
    if args.min_length is not None:
        minimum_word_length = args.min_length
    if args.connecting is not None:
        connecting = tuple(args.connecting)

    lexicon = create_plain_text_lexicon(
        args.dictionary,
        minimum_word_length=minimum_word_length,
        connecting_characters=connecting,
    )
    return CompoundSplitter(
        lexicon,
        hide_connecting_characters=not args.keep_connecting,
        strict_mode=args.strict,
        logger=logger,
    )


def split_command(args):
    """Split words given on the command line or read from stdin."""
    if not args.config and not args.dictionary:
        print("Error: either --config or --dictionary is required", file=sys.stderr)
        return 1

    logger = None
    if args.verbose:
        setup_logging("INFO")
        logger = StdLogger()

    try:
        splitter = _splitter_from_args(args, logger)
    except (ConfigLoadError, LexiconLoadError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    words = args.words or [line.strip() for line in sys.stdin if line.strip()]
    results = [splitter.analyze(word) for word in words]

    if args.json:
        print(safe_json(results))
    else:
        for result in results:
            print(f"{result.word}\t{' '.join(result.parts)}")

    return 0


def validate_config_command(args):
    """Validate a splitter config file."""
    try:
        config_path = Path(args.config_file)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1

        print(f"Validating config: {config_path}")
        config = load_config(config_path)
        splitter = build_splitter(config, base_dir=config_path.parent)

        print("✅ Config validation successful!")
        print(f"   Version: {config.version}")
        print(f"   Language: {config.language or 'none'}")
        print(f"   Words: {len(splitter.lexicon)}")
        print(f"   Minimum word length: {splitter.lexicon.minimum_word_length}")
        print(f"   Strict mode: {splitter.strict_mode}")

        if args.verbose:
            print(f"\nConnecting characters: {list(splitter.lexicon.connecting_characters)}")
            print(f"Hide connecting characters: {splitter.hide_connecting_characters}")
            print(f"Max word length: {splitter.max_word_length or 'unlimited'}")

        return 0

    except (ConfigLoadError, LexiconLoadError) as e:
        print(f"❌ Config validation failed: {e}")
        return 1


def info_command(args):
    """Display version and available language presets."""
    print("wordsplitter CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("wordsplitter")
        print(f"Version: {version}")
    except Exception:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nLanguage presets:")
    for code in available_languages():
        preset = LANGUAGES[code]
        print(f"   {code}: {preset.name}, min length {preset.minimum_word_length}, "
              f"connecting {list(preset.connecting_characters)}")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordsplitter",
        description="Split compound words into dictionary parts"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split compound words (from arguments or stdin)"
    )
    split_parser.add_argument(
        "words",
        nargs="*",
        help="Words to split (default: one word per line from stdin)"
    )
    split_parser.add_argument(
        "-c", "--config",
        help="Path to a splitter config YAML file"
    )
    split_parser.add_argument(
        "-d", "--dictionary",
        help="Plain-text word list, one word per line"
    )
    split_parser.add_argument(
        "-l", "--language",
        help="Language preset for minimum length and connecting characters"
    )
    split_parser.add_argument(
        "--min-length",
        type=int,
        help="Minimum word length (overrides the language preset)"
    )
    split_parser.add_argument(
        "--connecting",
        action="append",
        help="Connecting character suffix, repeatable, tried in order"
    )
    split_parser.add_argument(
        "--keep-connecting",
        action="store_true",
        help="Keep connecting characters in the emitted parts"
    )
    split_parser.add_argument(
        "--strict",
        action="store_true",
        help="Only emit dictionary words"
    )
    split_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )
    split_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log fallback decisions to stderr"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a splitter config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed validation results"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and language presets"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "split":
        return split_command(args)
    elif args.command == "validate":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
