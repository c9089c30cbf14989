"""
Unit tests for MarkingConfig and ConfigLoader.
"""

import dataclasses

import pytest

from answer_marker.config import ConfigLoader, MarkingConfig, PerformanceBand
from answer_marker.config.models import DEFAULT_DOMAIN_PHRASES, DEFAULT_STOP_WORDS


class TestMarkingConfig:
    """Tests for MarkingConfig dataclass."""

    def test_defaults_when_constructed_then_original_constants(self):
        """Defaults carry the standard thresholds and vocabularies."""
        config = MarkingConfig()

        assert config.partial_match_threshold == 0.75
        assert config.min_fuzzy_keyword_length == 4
        assert config.min_token_length == 3
        assert config.default_marks == 1
        assert "volatile memory" in config.domain_phrases
        assert "the" in config.stop_words

    def test_init_when_frozen_then_immutable(self):
        """Configs cannot be mutated after construction."""
        config = MarkingConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.partial_match_threshold = 0.5  # type: ignore

    def test_init_when_bands_unordered_then_sorted_descending(self):
        """Bands are stored highest threshold first."""
        config = MarkingConfig(
            bands=(PerformanceBand(0, "low"), PerformanceBand(80, "high"), PerformanceBand(40, "mid"))
        )
        assert [b.message for b in config.bands] == ["high", "mid", "low"]

    def test_init_when_no_zero_band_then_raises_error(self):
        """Every percentage must fall into some band."""
        with pytest.raises(ValueError, match="lowest performance band"):
            MarkingConfig(bands=(PerformanceBand(50, "half"),))

    @pytest.mark.parametrize("threshold", [0, -0.5, 1.5])
    def test_init_when_threshold_out_of_range_then_raises_error(self, threshold):
        """The partial match threshold is a fraction of the keyword."""
        with pytest.raises(ValueError, match="partial_match_threshold"):
            MarkingConfig(partial_match_threshold=threshold)

    def test_from_dict_when_empty_then_defaults(self):
        """An empty mapping gives the default configuration."""
        assert MarkingConfig.from_dict({}) == MarkingConfig()

    def test_from_dict_when_extra_vocabulary_then_extends_defaults(self):
        """Extra stop words and phrases are added to the defaults."""
        config = MarkingConfig.from_dict(
            {"extra_stop_words": ["Explain"], "extra_domain_phrases": ["Cache Memory", "ip address"]}
        )

        assert config.stop_words == DEFAULT_STOP_WORDS | {"explain"}
        assert config.domain_phrases == DEFAULT_DOMAIN_PHRASES + ("cache memory",)

    def test_from_dict_when_vocabulary_replaced_then_uses_it(self):
        """Explicit vocabularies replace the defaults."""
        config = MarkingConfig.from_dict({"stop_words": ["x"], "domain_phrases": ["cell wall"]})

        assert config.stop_words == frozenset({"x"})
        assert config.domain_phrases == ("cell wall",)

    def test_from_dict_when_bands_then_parsed(self):
        """Bands are read from mappings."""
        config = MarkingConfig.from_dict(
            {"bands": [{"min_percentage": 0, "message": "Try again."}, {"min_percentage": 50, "message": "Pass."}]}
        )
        assert config.bands == (PerformanceBand(50.0, "Pass."), PerformanceBand(0.0, "Try again."))


class TestConfigLoader:
    """Tests for loading YAML marking configs."""

    def test_load_marking_when_yaml_then_parsed(self, tmp_path):
        """Settings in the YAML file reach the config."""
        (tmp_path / "marking.yml").write_text(
            "partial_match_threshold: 0.8\n"
            "min_fuzzy_keyword_length: 5\n"
            "extra_domain_phrases:\n"
            "  - cell membrane\n",
            encoding="utf-8",
        )

        config = ConfigLoader(tmp_path).load_marking("marking.yml")

        assert config.partial_match_threshold == 0.8
        assert config.min_fuzzy_keyword_length == 5
        assert "cell membrane" in config.domain_phrases

    def test_load_marking_when_absolute_path_then_ignores_config_dir(self, tmp_path):
        """Absolute paths are used as given."""
        path = tmp_path / "abs.yml"
        path.write_text("default_marks: 2\n", encoding="utf-8")

        config = ConfigLoader(tmp_path / "elsewhere").load_marking(path)
        assert config.default_marks == 2

    def test_load_marking_when_empty_file_then_defaults(self, tmp_path):
        """An empty YAML document gives the defaults."""
        (tmp_path / "empty.yml").write_text("", encoding="utf-8")
        assert ConfigLoader(tmp_path).load_marking("empty.yml") == MarkingConfig()

    def test_load_marking_when_missing_then_raises(self, tmp_path):
        """Missing files are reported."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            ConfigLoader(tmp_path).load_marking("nope.yml")

    def test_load_marking_when_not_mapping_then_raises(self, tmp_path):
        """Documents must be mappings."""
        (tmp_path / "list.yml").write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            ConfigLoader(tmp_path).load_marking("list.yml")
