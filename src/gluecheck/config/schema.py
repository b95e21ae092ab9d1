"""Pydantic schemas for YAML analyzer configuration."""

from pydantic import BaseModel, ConfigDict, Field

class Thresholds(BaseModel):
    """Cut-off applied to per-sentence glue ratios."""
    model_config = ConfigDict(extra="forbid")
    
    sticky_above: int = Field(default=50, ge=0, le=100,
                              description="A sentence is sticky when its glue ratio is strictly greater")

class OutputCfg(BaseModel):
    """Report rendering options."""
    model_config = ConfigDict(extra="forbid")
    
    echo_display_form: bool = Field(default=True,
                                    description="Repeat the sentence's `N: `text`` form after the line prefix")

class AnalyzerConfig(BaseModel):
    """Complete analyzer configuration. Every field has a default."""
    model_config = ConfigDict(extra="forbid")
    
    version: int = Field(default=1, description="Config schema version")
    thresholds: Thresholds = Field(default_factory=Thresholds)
    output: OutputCfg = Field(default_factory=OutputCfg)
