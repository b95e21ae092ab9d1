"""YAML config loading and validation.

For applications embedding gluecheck; the command-line entry point takes no config file.
"""

import yaml
from pathlib import Path
from typing import Any, Union
from pydantic import ValidationError
from .schema import AnalyzerConfig

class ConfigLoadError(Exception):
    """Exception raised when config loading or validation fails."""
    pass

def load_config(path: Union[str, Path]) -> AnalyzerConfig:
    """
    Load and validate an analyzer config from a YAML file.
    
    Args:
        path: Path to YAML config file
        
    Returns:
        AnalyzerConfig: Validated config object
        
    Raises:
        ConfigLoadError: If file cannot be read or config is invalid
    """
    path = Path(path)
    
    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")
        
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")
        
    return _validate(data, f"Config file {path}")

def load_config_from_string(yaml_content: str) -> AnalyzerConfig:
    """
    Load and validate an analyzer config from a YAML string.
    
    Raises:
        ConfigLoadError: If YAML is invalid or validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")
        
    return _validate(data, "Config content")

def _validate(data: Any, source: str) -> AnalyzerConfig:
    # An empty document means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(f"{source} must contain a YAML mapping, got {type(data)}")
        
    try:
        return AnalyzerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}")
