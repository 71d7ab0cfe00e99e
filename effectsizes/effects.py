"""Effect size formulas (Cohen's d, Hedge's g, Glass's delta)

All three measures are positive when the mean of the first sample is larger
than the mean of the second.

Conventional magnitudes:

| Effect | Size |
|--------|------|
| small  | 0.2  |
| medium | 0.5  |
| large  | 0.8  |
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from effectsizes.confint.interval import AnyConfidenceInterval, format_interval
from effectsizes.errors import DegenerateSample


def _as_sample(values: Sequence[float] | np.ndarray, min_size: int, name: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if len(arr) < min_size:
        raise DegenerateSample(
            f"{name} needs at least {min_size} observations, got {len(arr)}"
        )
    return arr


def pooled_std(xs: Sequence[float] | np.ndarray, ys: Sequence[float] | np.ndarray) -> float:
    """Pooled standard deviation with ``nx + ny - 2`` degrees of freedom (Cohen)."""
    xs = _as_sample(xs, 2, "xs")
    ys = _as_sample(ys, 2, "ys")
    nx, ny = len(xs), len(ys)
    pooled_var = ((nx - 1) * np.var(xs, ddof=1) + (ny - 1) * np.var(ys, ddof=1)) / (nx + ny - 2)
    return float(np.sqrt(pooled_var))


def pooled_std_unadjusted(xs: Sequence[float] | np.ndarray, ys: Sequence[float] | np.ndarray) -> float:
    """Pooled standard deviation over ``nx + ny`` (Hedge)."""
    xs = _as_sample(xs, 2, "xs")
    ys = _as_sample(ys, 2, "ys")
    nx, ny = len(xs), len(ys)
    pooled_var = ((nx - 1) * np.var(xs, ddof=1) + (ny - 1) * np.var(ys, ddof=1)) / (nx + ny)
    return float(np.sqrt(pooled_var))


def correction(n: int) -> float:
    """Small-sample bias correction for a total sample size ``n``."""
    if n <= 1:
        raise DegenerateSample(f"Bias correction needs n > 1, got {n}")
    return float(((n - 3) / (n - 2.25)) * np.sqrt((n - 2) / n))


def cohen_d(xs: Sequence[float] | np.ndarray, ys: Sequence[float] | np.ndarray) -> float:
    """Cohen's d: mean difference over the pooled std, bias corrected."""
    xs = _as_sample(xs, 2, "xs")
    ys = _as_sample(ys, 2, "ys")
    d = (np.mean(xs) - np.mean(ys)) / pooled_std(xs, ys)
    return float(d * correction(len(xs) + len(ys)))


def hedge_g(xs: Sequence[float] | np.ndarray, ys: Sequence[float] | np.ndarray) -> float:
    """Hedge's g: mean difference over the unadjusted pooled std, bias corrected."""
    xs = _as_sample(xs, 2, "xs")
    ys = _as_sample(ys, 2, "ys")
    g = (np.mean(xs) - np.mean(ys)) / pooled_std_unadjusted(xs, ys)
    return float(g * correction(len(xs) + len(ys)))


def glass_delta(treatment: Sequence[float] | np.ndarray, control: Sequence[float] | np.ndarray) -> float:
    """Glass's delta: mean difference over the control group's std.

    Use when the two groups have very different standard deviations.
    """
    treatment = _as_sample(treatment, 1, "treatment")
    control = _as_sample(control, 2, "control")
    return float((np.mean(treatment) - np.mean(control)) / np.std(control, ddof=1))


def interpret_magnitude(value: float) -> str:
    """Conventional label for the size of an effect."""
    abs_value = abs(value)
    if abs_value < 0.2:
        return "negligible"
    elif abs_value < 0.5:
        return "small"
    elif abs_value < 0.8:
        return "medium"
    else:
        return "large"


@dataclass(frozen=True)
class EffectSize:
    """Point estimate of one measure together with its confidence interval."""
    measure: str
    estimate: float
    interval: AnyConfidenceInterval

    @property
    def magnitude(self) -> str:
        return interpret_magnitude(self.estimate)


def effect_size(es: EffectSize) -> float:
    return es.estimate


def format_effect_size(es: EffectSize, precision: int = 3) -> str:
    """Render as ``"-0.511, 0.95CI (-1.772, 0.749)"``."""
    return f"{round(es.estimate, precision)}, {format_interval(es.interval, precision)}"
