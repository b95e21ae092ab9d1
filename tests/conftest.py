"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from gluecheck.config.loader import load_config_from_string


@pytest.fixture
def sample_config_yaml():
    """Provide a sample config YAML for testing."""
    return """
version: 1
thresholds:
  sticky_above: 40
output:
  echo_display_form: false
"""


@pytest.fixture
def sample_config(sample_config_yaml):
    """Provide a loaded config object for testing."""
    return load_config_from_string(sample_config_yaml)


@pytest.fixture
def temp_config_file(sample_config_yaml):
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write(sample_config_yaml)
        temp_path = Path(f.name)
    
    yield temp_path
    
    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def three_sentences_text():
    """Three sentences spread over five lines, the last with no trailing newline."""
    return (
        "The first sentence.\n"
        "  The second\n"
        "  sentence! The\n"
        "  3rd\n"
        "  sentence?"
    )


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""
    
    def __init__(self):
        self.messages = []
    
    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))
    
    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))
    
    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))
    
    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter for testing that accumulates counters and observations."""
    
    def __init__(self):
        self.counters = {}
        self.observations = {}
    
    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount
    
    def observe(self, name: str, value: float, **tags):
        self.observations.setdefault(name, []).append(value)


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that records metrics."""
    return SimpleTestMeter()
