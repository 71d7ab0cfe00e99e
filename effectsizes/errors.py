"""Error types for effect size and confidence interval computation.

Every error derives from ``EffectSizeError``, which is itself a ``ValueError``,
so callers can catch the whole family or keep their ``except ValueError:``
handlers.
"""


class EffectSizeError(ValueError):
    """Base exception for all effectsizes errors."""


class InvalidCoverage(EffectSizeError):
    """Coverage level outside [0, 1]."""

    def __init__(self, coverage: float):
        self.coverage = coverage
        super().__init__(f"Coverage must be in [0, 1], got {coverage}")


class InvalidResampleCount(EffectSizeError):
    """Bootstrap resample count not greater than one."""

    def __init__(self, resample_count: int):
        self.resample_count = resample_count
        super().__init__(f"Resample count must be > 1, got {resample_count}")


class InvertedBounds(EffectSizeError):
    """Confidence interval with lower bound above upper bound."""

    def __init__(self, lower: float, upper: float):
        self.lower = lower
        self.upper = upper
        super().__init__(f"Bounds ({lower}, {upper}) do not satisfy lower <= upper")


class DegenerateSample(EffectSizeError):
    """Sample too small for resampling or variance estimation."""


__all__ = [
    "EffectSizeError",
    "InvalidCoverage",
    "InvalidResampleCount",
    "InvertedBounds",
    "DegenerateSample",
]
