"""Test config loading and validation."""

import pytest
from pathlib import Path

from gluecheck.config.loader import load_config, load_config_from_string, ConfigLoadError
from gluecheck.config.schema import AnalyzerConfig, Thresholds, OutputCfg


class TestConfigLoading:
    """Test config loading from YAML files and strings."""
    
    def test_load_valid_config_from_string(self, sample_config_yaml):
        config = load_config_from_string(sample_config_yaml)
        
        assert isinstance(config, AnalyzerConfig)
        assert config.version == 1
        assert config.thresholds.sticky_above == 40
        assert config.output.echo_display_form is False
    
    def test_load_valid_config_from_file(self, temp_config_file):
        config = load_config(temp_config_file)
        
        assert isinstance(config, AnalyzerConfig)
        assert config.thresholds.sticky_above == 40
    
    def test_empty_document_gives_defaults(self):
        config = load_config_from_string("")
        
        assert config == AnalyzerConfig()
        assert config.thresholds.sticky_above == 50
    
    def test_partial_config_keeps_other_defaults(self):
        config = load_config_from_string("thresholds:\n  sticky_above: 70\n")
        
        assert config.thresholds.sticky_above == 70
        assert config.output.echo_display_form is True
    
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
    
    def test_load_out_of_range_threshold(self):
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("thresholds:\n  sticky_above: 150\n")
    
    def test_load_extra_forbidden_fields(self):
        with pytest.raises(ConfigLoadError, match="validation failed"):
            load_config_from_string("glue_words: [a, the]\n")
    
    def test_load_nonexistent_file(self):
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(Path("/does/not/exist.yaml"))


class TestConfigSchema:
    """Test the config schema defaults."""
    
    def test_defaults(self):
        assert Thresholds().sticky_above == 50
        assert OutputCfg().echo_display_form is True
        assert AnalyzerConfig().version == 1
