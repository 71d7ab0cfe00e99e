"""Bootstrap confidence intervals"""

import logging
from typing import Callable, Sequence

import numpy as np
from tqdm import tqdm

from effectsizes.confint.interval import BootstrapConfidenceInterval
from effectsizes.errors import DegenerateSample, InvalidResampleCount
from effectsizes.utils.stats import (
    bootstrap_sample,
    check_coverage,
    empirical_quantile,
    two_tailed_quantile,
)

logger = logging.getLogger(__name__)

Reducer = Callable[[np.ndarray, np.ndarray], float]  # (resampled_xs, resampled_ys) -> statistic


def bootstrap_distribution(
    xs: np.ndarray,
    ys: np.ndarray,
    reducer: Reducer,
    resample_count: int,
    rng: np.random.Generator,
    progress: bool = False,
) -> np.ndarray:
    """Apply ``reducer`` to ``resample_count`` paired resamples of ``xs`` and ``ys``."""
    values = np.empty(resample_count, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in tqdm(range(resample_count), desc="Bootstrapping", disable=not progress):
            values[i] = reducer(bootstrap_sample(xs, rng), bootstrap_sample(ys, rng))
    return values


def build_bootstrap_interval(
    xs: Sequence[float] | np.ndarray,
    ys: Sequence[float] | np.ndarray,
    reducer: Reducer,
    resample_count: int = 1000,
    coverage: float = 0.95,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    progress: bool = False,
) -> BootstrapConfidenceInterval:
    """Compute a bootstrap confidence interval for a two-sample statistic.

    Both samples are resampled with replacement ``resample_count`` times and
    ``reducer`` is applied to each pair. The bounds are the linearly
    interpolated tail quantiles of the resulting distribution.

    Args:
        xs: First sample
        ys: Second sample
        reducer: Statistic of two samples, the same one used for the point estimate
        resample_count: Number of bootstrap iterations (default: 1000)
        coverage: Two-sided coverage level (default: 0.95)
        seed: Random seed for reproducibility, ignored when ``rng`` is given
        rng: Random generator to draw resamples from
        progress: Show a progress bar over the resamples

    Returns:
        BootstrapConfidenceInterval

    Raises:
        InvalidCoverage: If coverage is outside [0, 1]
        InvalidResampleCount: If resample_count <= 1
        DegenerateSample: If either sample is empty, or if any replicate of
            the statistic is not finite (e.g. a resample with zero variance)
    """
    check_coverage(coverage)
    if resample_count <= 1:
        raise InvalidResampleCount(resample_count)

    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    if len(xs) == 0 or len(ys) == 0:
        raise DegenerateSample(
            f"Bootstrap needs non-empty samples, got sizes {len(xs)} and {len(ys)}"
        )

    if rng is None:
        rng = np.random.default_rng(seed)

    values = bootstrap_distribution(xs, ys, reducer, resample_count, rng, progress=progress)
    non_finite = int(np.count_nonzero(~np.isfinite(values)))
    if non_finite:
        raise DegenerateSample(
            f"{non_finite} of {resample_count} bootstrap replicates are not finite; "
            "resamples with zero spread make the statistic undefined"
        )

    lower_q, upper_q = two_tailed_quantile(coverage)
    lower = empirical_quantile(values, lower_q)
    upper = empirical_quantile(values, upper_q)
    logger.debug(
        "bootstrap interval: resamples=%d quantiles=(%.4f, %.4f) bounds=(%.4f, %.4f)",
        resample_count, lower_q, upper_q, lower, upper,
    )

    return BootstrapConfidenceInterval(lower, upper, coverage, resample_count)
