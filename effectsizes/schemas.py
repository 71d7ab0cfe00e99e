"""Pydantic schemas for exported results"""

from typing import Any
from pydantic import BaseModel, Field

from effectsizes.effects import EffectSize


class EffectSizeRecord(BaseModel):
    """One effect size and its interval, as stored in JSONL."""
    measure: str = Field(..., description="cohen_d, hedge_g or glass_delta")
    estimate: float
    magnitude: str = Field(..., description="negligible, small, medium or large")
    interval_kind: str = Field(..., description="normal or bootstrap")
    lower: float
    upper: float
    coverage: float = Field(..., ge=0.0, le=1.0)
    resample_count: int | None = Field(default=None, description="Only set for bootstrap intervals")
    n_x: int = Field(..., ge=0)
    n_y: int = Field(..., ge=0)

    @classmethod
    def from_result(cls, result: EffectSize, n_x: int, n_y: int) -> "EffectSizeRecord":
        """Flatten an EffectSize and the sizes of the samples behind it."""
        interval = result.interval
        return cls(
            measure=result.measure,
            estimate=result.estimate,
            magnitude=result.magnitude,
            interval_kind=interval.kind,
            lower=interval.lower,
            upper=interval.upper,
            coverage=interval.coverage,
            resample_count=getattr(interval, "resample_count", None),
            n_x=n_x,
            n_y=n_y,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSONL storage."""
        return self.model_dump()
