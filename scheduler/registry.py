"""
Strategy registry — maps named weighting strategies to weight vectors.

Instead of passing raw [fee, time, complexity, tier] lists around, callers
(the CLI, the API) can ask for "balanced" or "fee_first" and get a scheduler
configured with the matching weights.

To add a new strategy: add a value to WeightingStrategy and one line here.
"""

from typing import Union

from models.enums import WeightingStrategy
from scheduler.priority import Weights
from scheduler.weighted import WeightedScheduler


_REGISTRY: dict[WeightingStrategy, Weights] = {
    WeightingStrategy.UNIFORM: (0.25, 0.25, 0.25, 0.25),
    WeightingStrategy.BALANCED: (0.4, 0.3, 0.2, 0.1),
    WeightingStrategy.FEE_FIRST: (1.0, 0.0, 0.0, 0.0),
    WeightingStrategy.OLDEST_FIRST: (0.0, 1.0, 0.0, 0.0),
    WeightingStrategy.SIMPLEST_FIRST: (0.0, 0.0, 1.0, 0.0),
    WeightingStrategy.TIER_FIRST: (0.0, 0.0, 0.0, 1.0),
}


def get_strategy_weights(strategy: Union[WeightingStrategy, str]) -> Weights:
    """Look up the weight vector for a strategy. Raises ValueError if unknown."""
    try:
        return _REGISTRY[WeightingStrategy(strategy)]
    except (ValueError, KeyError):
        raise ValueError(
            f"Unknown weighting strategy: '{strategy}'. "
            f"Available: {[s.value for s in _REGISTRY]}"
        ) from None


def create_scheduler(strategy: Union[WeightingStrategy, str], **kwargs) -> WeightedScheduler:
    """
    Create a scheduler preloaded with a strategy's weights.

    Extra kwargs go straight to WeightedScheduler (e.g. clock=...).
    """
    return WeightedScheduler(get_strategy_weights(strategy), **kwargs)
