"""Confidence interval value types.

Two independent record types describe an interval around an effect size:

* ``ConfidenceInterval`` for intervals from the normal approximation
* ``BootstrapConfidenceInterval`` for empirical intervals, which also record
  how many resamples produced them

Both are frozen and compare by value. They share a read-only contract
(``lower``, ``upper``, ``coverage``) that the accessor functions below rely on.
"""

from dataclasses import dataclass, field
from typing import Literal, Union

from effectsizes.errors import InvalidResampleCount, InvertedBounds
from effectsizes.utils.stats import check_coverage


def _check_bounds(lower: float, upper: float) -> None:
    # NaN bounds fail both comparisons and are passed through
    if lower > upper:
        raise InvertedBounds(lower, upper)


@dataclass(frozen=True)
class ConfidenceInterval:
    """Interval built from a closed-form normal approximation."""
    lower: float
    upper: float
    coverage: float
    kind: Literal["normal"] = field(default="normal", init=False)

    def __post_init__(self) -> None:
        _check_bounds(self.lower, self.upper)
        check_coverage(self.coverage)


@dataclass(frozen=True)
class BootstrapConfidenceInterval:
    """Interval built from ``resample_count`` bootstrap resamples."""
    lower: float
    upper: float
    coverage: float
    resample_count: int
    kind: Literal["bootstrap"] = field(default="bootstrap", init=False)

    def __post_init__(self) -> None:
        # Bootstrap bounds are empirical quantiles, so NaN is never valid here
        if not self.lower <= self.upper:
            raise InvertedBounds(self.lower, self.upper)
        check_coverage(self.coverage)
        if self.resample_count <= 1:
            raise InvalidResampleCount(self.resample_count)


AnyConfidenceInterval = Union[ConfidenceInterval, BootstrapConfidenceInterval]


def confint(ci: AnyConfidenceInterval) -> tuple[float, float]:
    """Return ``(lower, upper)``."""
    return ci.lower, ci.upper


def lower_bound(ci: AnyConfidenceInterval) -> float:
    return ci.lower


def upper_bound(ci: AnyConfidenceInterval) -> float:
    return ci.upper


def coverage(ci: AnyConfidenceInterval) -> float:
    return ci.coverage


def resample_count(ci: AnyConfidenceInterval) -> int:
    """Number of resamples behind a bootstrap interval."""
    if not isinstance(ci, BootstrapConfidenceInterval):
        raise TypeError(f"{type(ci).__name__} has no resample count")
    return ci.resample_count


def width(ci: AnyConfidenceInterval) -> float:
    return ci.upper - ci.lower


def format_interval(ci: AnyConfidenceInterval, precision: int = 3) -> str:
    """Render an interval as ``"0.95CI (-1.2, 0.3)"``."""
    return f"{ci.coverage}CI ({round(ci.lower, precision)}, {round(ci.upper, precision)})"
