"""Configuration system with YAML parsing and Pydantic validation"""

from pathlib import Path
import yaml
from pydantic import BaseModel, Field, field_validator

from effectsizes.registry import list_measures


class IntervalConfig(BaseModel):
    """Confidence interval configuration."""
    coverage: float = Field(default=0.95, ge=0.0, le=1.0)
    bootstrap: int | None = Field(default=None, ge=2, description="Resample count; normal approximation when unset")
    seed: int | None = None
    progress: bool = False


class OutputConfig(BaseModel):
    """Output configuration."""
    precision: int = Field(default=3, ge=0)
    out: str | None = Field(default=None, description="JSONL file for result records")


class AnalysisConfig(BaseModel):
    """Complete analysis configuration."""
    measures: list[str] = Field(default_factory=list_measures, min_length=1)
    interval: IntervalConfig = Field(default_factory=IntervalConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("measures")
    @classmethod
    def check_measures(cls, measures: list[str]) -> list[str]:
        known = list_measures()
        unknown = [m for m in measures if m not in known]
        if unknown:
            raise ValueError(f"Unknown measures {unknown}, expected any of {known}")
        return measures


def load_config(config_path: str | Path) -> AnalysisConfig:
    """Load and validate YAML config file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return AnalysisConfig(**(data or {}))
