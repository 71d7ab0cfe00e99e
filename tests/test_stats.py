"""Tests for resampling and quantile utilities"""

import numpy as np
import pytest

from effectsizes.errors import DegenerateSample, InvalidCoverage
from effectsizes.utils.stats import (
    bootstrap_sample,
    check_coverage,
    empirical_quantile,
    two_tailed_quantile,
)


def test_two_tailed_quantile_known_values():
    """Test tail split for common coverage levels."""
    lower, upper = two_tailed_quantile(0.95)
    assert lower == pytest.approx(0.025)
    assert upper == pytest.approx(0.975)
    assert lower + upper == 1

    lower, upper = two_tailed_quantile(0.9)
    assert lower == pytest.approx(0.05)
    assert upper == pytest.approx(0.95)
    assert lower + upper == 1


def test_two_tailed_quantile_tails_sum_to_one():
    """Test that tails are symmetric and span the coverage."""
    for c in np.random.default_rng(5).random(1000):
        lower, upper = two_tailed_quantile(c)
        assert lower + upper == 1

    for c in np.linspace(0.0, 1.0, 101):
        lower, upper = two_tailed_quantile(c)
        assert upper - lower == pytest.approx(c)
        assert 0.0 <= lower <= upper <= 1.0


@pytest.mark.parametrize("coverage", [-0.1, 1.1])
def test_two_tailed_quantile_rejects_invalid_coverage(coverage):
    """Test coverage outside [0, 1]."""
    with pytest.raises(InvalidCoverage):
        two_tailed_quantile(coverage)


def test_check_coverage_is_value_error():
    """Invalid coverage is still catchable as ValueError."""
    with pytest.raises(ValueError):
        check_coverage(2.0)
    assert check_coverage(0.0) == 0.0
    assert check_coverage(1.0) == 1.0


def test_bootstrap_sample_length_and_membership():
    """Test resample keeps length and only draws original elements."""
    rng = np.random.default_rng(0)
    for _ in range(100):
        xs = rng.random(100)
        resampled = bootstrap_sample(xs, rng)
        assert len(resampled) == len(xs)
        assert set(resampled) <= set(xs)


def test_bootstrap_sample_repeats_elements():
    """Sampling with replacement repeats values in a large resample."""
    xs = np.arange(50)
    resampled = bootstrap_sample(xs, np.random.default_rng(3))
    assert len(set(resampled)) < len(xs)


def test_bootstrap_sample_accepts_lists():
    """Test plain Python sequences."""
    resampled = bootstrap_sample([1.0, 2.0, 3.0])
    assert len(resampled) == 3
    assert set(resampled) <= {1.0, 2.0, 3.0}


def test_bootstrap_sample_seeded():
    """Same generator state gives same resample."""
    xs = np.arange(20)
    a = bootstrap_sample(xs, np.random.default_rng(11))
    b = bootstrap_sample(xs, np.random.default_rng(11))
    assert np.array_equal(a, b)


def test_bootstrap_sample_empty():
    """Test empty input."""
    with pytest.raises(DegenerateSample):
        bootstrap_sample([])


def test_empirical_quantile_interpolates():
    """Test linear interpolation between order statistics."""
    values = [4.0, 1.0, 3.0, 2.0]
    assert empirical_quantile(values, 0.5) == pytest.approx(2.5)
    assert empirical_quantile(values, 0.0) == 1.0
    assert empirical_quantile(values, 1.0) == 4.0
    assert empirical_quantile(values, 0.25) == pytest.approx(1.75)


def test_empirical_quantile_empty():
    """Test empty input."""
    with pytest.raises(DegenerateSample):
        empirical_quantile([], 0.5)
