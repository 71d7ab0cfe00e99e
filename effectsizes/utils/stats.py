"""Statistical utilities"""

import numpy as np
from typing import Sequence

from effectsizes.errors import DegenerateSample, InvalidCoverage


def check_coverage(coverage: float) -> float:
    """Validate a coverage level, returning it unchanged."""
    if not 0.0 <= coverage <= 1.0:
        raise InvalidCoverage(coverage)
    return coverage


def two_tailed_quantile(coverage: float) -> tuple[float, float]:
    """Split a central coverage level into its two tail quantiles.

    Coverage 0.95 gives (0.025, 0.975).

    Returns:
        (lower_quantile, upper_quantile), which always sum to 1
    """
    check_coverage(coverage)
    lower = (1 - coverage) / 2
    upper = coverage + lower
    return lower, upper


def bootstrap_sample(
    data: Sequence[float] | np.ndarray,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Draw a resample with replacement, the same length as ``data``."""
    data = np.asarray(data)
    n = len(data)
    if n == 0:
        raise DegenerateSample("Cannot resample an empty sample")
    if rng is None:
        rng = np.random.default_rng()
    return data[rng.integers(0, n, size=n)]


def empirical_quantile(values: Sequence[float] | np.ndarray, q: float) -> float:
    """Linearly interpolated quantile of ``values``."""
    if len(values) == 0:
        raise DegenerateSample("Cannot compute quantile of empty sequence")
    return float(np.quantile(np.asarray(values, dtype=float), q))
