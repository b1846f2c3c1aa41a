"""Test splitter config loading, validation and wiring."""

import pytest
from pathlib import Path

from wordsplitter.config.loader import load_config, load_config_from_string, ConfigLoadError
from wordsplitter.config.schema import SplitterConfig, LexiconCfg, SplitterCfg
from wordsplitter.config.factory import build_lexicon, build_splitter
from wordsplitter.providers.plain_text import LexiconLoadError
from wordsplitter.segmenters.compound import CompoundSplitter


class TestConfigLoading:
    """Test config loading from YAML files and strings."""

    def test_load_valid_config_from_string(self, sample_config_yaml):
        """Test loading valid config from YAML string."""
        config = load_config_from_string(sample_config_yaml)

        assert isinstance(config, SplitterConfig)
        assert config.version == 1
        assert config.language == "de"
        assert len(config.lexicon.words) == 5
        assert config.splitter.hide_connecting_characters is True
        assert config.splitter.strict_mode is False

    def test_load_valid_config_from_file(self, config_dir):
        """Test loading valid config from file."""
        config = load_config(config_dir / "splitter.yaml")

        assert config.lexicon.dictionary == "words.txt"
        assert config.lexicon.words == ["tür"]

    def test_load_invalid_yaml(self):
        invalid_yaml = """
        invalid: yaml: content:
          - missing: bracket
        """

        with pytest.raises(ConfigLoadError, match="Invalid YAML"):
            load_config_from_string(invalid_yaml)

    def test_load_non_mapping(self):
        with pytest.raises(ConfigLoadError, match="YAML mapping"):
            load_config_from_string("- just\n- a list\n")

    def test_load_missing_lexicon(self):
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("version: 1\n")

    def test_load_lexicon_without_words(self):
        with pytest.raises(ConfigLoadError, match="no dictionary file and no inline words"):
            load_config_from_string("lexicon: {}\n")

    def test_load_invalid_minimum_word_length(self):
        invalid_yaml = """
        lexicon:
          words: [haus]
          minimum_word_length: 0   # Invalid - should be >= 1
        """

        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string(invalid_yaml)

    def test_load_unknown_language(self):
        invalid_yaml = """
        language: xx
        lexicon:
          words: [haus]
        """

        with pytest.raises(ConfigLoadError, match="Unknown language"):
            load_config_from_string(invalid_yaml)

    def test_load_duplicate_connecting_characters(self):
        duplicate_yaml = """
        lexicon:
          words: [haus]
          connecting_characters: [s, n, s]
        """

        with pytest.raises(ConfigLoadError, match="Duplicate connecting characters"):
            load_config_from_string(duplicate_yaml)

    def test_load_empty_connecting_character(self):
        empty_yaml = """
        lexicon:
          words: [haus]
          connecting_characters: ["s", ""]
        """

        with pytest.raises(ConfigLoadError, match="must not be empty"):
            load_config_from_string(empty_yaml)

    def test_load_nonexistent_file(self):
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(Path("/does/not/exist.yaml"))

    def test_load_extra_forbidden_fields(self):
        extra_fields_yaml = """
        lexicon:
          words: [haus]
        splitter:
          greedy: true  # This should be forbidden
        """

        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string(extra_fields_yaml)


class TestConfigSchema:
    """Test the config schema defaults and preset resolution."""

    def test_splitter_defaults(self):
        cfg = SplitterCfg()
        assert cfg.hide_connecting_characters is True
        assert cfg.strict_mode is False
        assert cfg.max_word_length is None

    def test_resolution_without_language(self):
        config = SplitterConfig(lexicon=LexiconCfg(words=["haus"]))

        assert config.resolved_minimum_word_length() == 2
        assert config.resolved_connecting_characters() == ()

    def test_resolution_from_language_preset(self, sample_config):
        assert sample_config.resolved_minimum_word_length() == 4
        assert sample_config.resolved_connecting_characters() == ("s", "-")

    def test_explicit_values_override_preset(self):
        config = SplitterConfig.model_validate({
            "language": "de",
            "lexicon": {
                "words": ["haus"],
                "minimum_word_length": 3,
                "connecting_characters": ["n"],
            },
        })

        assert config.resolved_minimum_word_length() == 3
        assert config.resolved_connecting_characters() == ("n",)

    def test_explicit_empty_connecting_characters(self):
        config = SplitterConfig.model_validate({
            "language": "de",
            "lexicon": {"words": ["haus"], "connecting_characters": []},
        })

        assert config.resolved_connecting_characters() == ()

    def test_validate_lexicon_returns_list(self):
        config = SplitterConfig(lexicon=LexiconCfg(words=["haus"]))
        assert config.validate_lexicon() == []


class TestFactory:
    """Test building lexicons and splitters from config."""

    def test_build_lexicon_from_inline_words(self, sample_config):
        lexicon = build_lexicon(sample_config)

        assert "versicherung" in lexicon
        assert lexicon.minimum_word_length == 4
        assert lexicon.connecting_characters == ("s", "-")

    def test_build_lexicon_with_relative_dictionary(self, config_dir):
        """Test that the dictionary path is resolved against the config directory."""
        config = load_config(config_dir / "splitter.yaml")
        lexicon = build_lexicon(config, base_dir=config_dir)

        assert "kranken" in lexicon
        assert "tür" in lexicon
        assert lexicon.minimum_word_length == 3

    def test_build_lexicon_missing_dictionary(self, tmp_path):
        config = load_config_from_string("lexicon:\n  dictionary: missing.txt\n")

        with pytest.raises(LexiconLoadError, match="not found"):
            build_lexicon(config, base_dir=tmp_path)

    def test_build_splitter(self, sample_config):
        splitter = build_splitter(sample_config)

        assert isinstance(splitter, CompoundSplitter)
        assert splitter.hide_connecting_characters is True
        assert splitter.strict_mode is False
        assert splitter.split_word("Krankenversicherungsbeitrag") == ["Kranken", "versicherung", "beitrag"]
        assert splitter.split_word("auto-bahn") == ["auto", "bahn"]

    def test_build_splitter_strict(self):
        config = load_config_from_string("""
        lexicon:
          words: [haus]
        splitter:
          strict_mode: true
          max_word_length: 10
        """)
        splitter = build_splitter(config)

        assert splitter.strict_mode is True
        assert splitter.max_word_length == 10
        assert splitter.split_word("xhaus") == ["xhaus"]

    def test_build_splitter_logs_lexicon(self, sample_config, test_logger):
        build_splitter(sample_config, logger=test_logger)

        level, msg, kv = test_logger.messages[0]
        assert level == "info"
        assert msg == "lexicon_loaded"
        assert kv["words"] == 5
