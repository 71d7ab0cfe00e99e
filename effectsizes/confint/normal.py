"""Normal-approximation confidence intervals"""

import logging
import math
from typing import Sequence

import numpy as np
from scipy.stats import norm

from effectsizes.confint.interval import ConfidenceInterval
from effectsizes.errors import DegenerateSample
from effectsizes.utils.stats import check_coverage, two_tailed_quantile

logger = logging.getLogger(__name__)


def effect_size_variance(nx: int, ny: int, estimate: float) -> float:
    """Approximate sampling variance of a standardized mean difference."""
    return (nx + ny) / (nx * ny) + estimate**2 / (2 * (nx + ny))


def build_normal_interval(
    xs: Sequence[float] | np.ndarray,
    ys: Sequence[float] | np.ndarray,
    estimate: float,
    coverage: float = 0.95,
) -> ConfidenceInterval:
    """Compute a confidence interval for ``estimate`` from the normal approximation.

    Args:
        xs: First sample
        ys: Second sample
        estimate: Effect size already computed from ``xs`` and ``ys``
        coverage: Two-sided coverage level (default: 0.95)

    Returns:
        ConfidenceInterval centred on ``estimate``

    Raises:
        InvalidCoverage: If coverage is outside [0, 1]
        DegenerateSample: If either sample is empty
    """
    check_coverage(coverage)
    nx = len(xs)
    ny = len(ys)
    if nx == 0 or ny == 0:
        raise DegenerateSample(
            f"Normal interval needs non-empty samples, got sizes {nx} and {ny}"
        )

    variance = effect_size_variance(nx, ny, estimate)
    _, upper_q = two_tailed_quantile(coverage)
    z = float(norm.ppf(upper_q))
    margin = z * math.sqrt(variance)
    logger.debug("normal interval: n=(%d, %d) z=%.4f margin=%.4f", nx, ny, z, margin)

    return ConfidenceInterval(estimate - margin, estimate + margin, coverage)
