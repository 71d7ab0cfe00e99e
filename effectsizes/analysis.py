"""Effect sizes with confidence intervals"""

import logging
from typing import Sequence

import numpy as np

from effectsizes.confint.bootstrap import build_bootstrap_interval
from effectsizes.confint.normal import build_normal_interval
from effectsizes.effects import EffectSize
from effectsizes.errors import InvalidResampleCount
from effectsizes.registry import get_measure
from effectsizes.utils.stats import check_coverage

logger = logging.getLogger(__name__)


def compute_effect_size(
    xs: Sequence[float] | np.ndarray,
    ys: Sequence[float] | np.ndarray,
    measure: str = "cohen_d",
    coverage: float = 0.95,
    bootstrap: int | None = None,
    seed: int | None = None,
    progress: bool = False,
) -> EffectSize:
    """Compute an effect size between ``xs`` and ``ys`` and its confidence interval.

    The interval comes from the normal approximation unless ``bootstrap`` is
    given, in which case it is built from that many resamples using the same
    measure as the point estimate.
    """
    check_coverage(coverage)
    if bootstrap is not None and bootstrap <= 1:
        raise InvalidResampleCount(bootstrap)

    reducer = get_measure(measure)
    estimate = reducer(xs, ys)
    if bootstrap is None:
        interval = build_normal_interval(xs, ys, estimate, coverage=coverage)
    else:
        interval = build_bootstrap_interval(
            xs, ys, reducer,
            resample_count=bootstrap,
            coverage=coverage,
            seed=seed,
            progress=progress,
        )
    logger.debug("%s = %.4f (%s interval)", measure, estimate, interval.kind)
    return EffectSize(measure=measure, estimate=estimate, interval=interval)


def compute_effect_sizes(
    xs: Sequence[float] | np.ndarray,
    ys: Sequence[float] | np.ndarray,
    measures: Sequence[str],
    coverage: float = 0.95,
    bootstrap: int | None = None,
    seed: int | None = None,
    progress: bool = False,
) -> list[EffectSize]:
    """Compute several measures for the same pair of samples.

    Each bootstrap measure gets the same seed so results do not depend on
    the order of ``measures``.
    """
    return [
        compute_effect_size(
            xs, ys, measure,
            coverage=coverage,
            bootstrap=bootstrap,
            seed=seed,
            progress=progress,
        )
        for measure in measures
    ]
