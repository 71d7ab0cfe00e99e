"""Measure registry mapping names to effect size reducers"""

from typing import Callable

import numpy as np

from effectsizes.effects import cohen_d, glass_delta, hedge_g

Measure = Callable[[np.ndarray, np.ndarray], float]

_registry: dict[str, Measure] = {
    "cohen_d": cohen_d,
    "hedge_g": hedge_g,
    "glass_delta": glass_delta,
}


def get_measure(name: str) -> Measure:
    """Get effect size function by name.

    Args:
        name: One of 'cohen_d', 'hedge_g', 'glass_delta'

    Returns:
        Function computing the effect size of two samples
    """
    try:
        return _registry[name]
    except KeyError:
        raise ValueError(f"Unknown measure: {name}") from None


def list_measures() -> list[str]:
    """List all registered measure names."""
    return list(_registry.keys())
