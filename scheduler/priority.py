"""
Priority computation and weight handling.

The score is a weighted linear combination of four factors:

    priority = w_fee * fee
             + w_time * wait_hours
             + w_complexity * 1 / (complexity + 1)
             + w_tier * account_tier

wait_hours is (now - arrival_time) / 3600, so the score is a live value:
the same transaction scores higher the longer it sits in the queue. This is
"aging" — the fix for the starvation problem a plain priority queue has.

Why the heap can still be trusted between insertions:
every pending transaction's wait_hours grows by exactly the same amount as
the clock advances, so the time term adds the same w_time * dt / 3600 to
every score. Relative order never changes with time alone. rank_key() drops
that shared term and gives a number that orders transactions exactly like
compute_priority() does at any instant.
"""

import math
from typing import Sequence

from scheduler.base import Transaction
from scheduler.errors import InvalidWeightVectorError

SECONDS_PER_HOUR = 3600.0

# (fee, time, complexity, tier)
Weights = tuple[float, float, float, float]


def compute_priority(txn: Transaction, weights: Sequence[float], now: float) -> float:
    """Score a transaction at the instant `now` (epoch seconds). Higher = served sooner."""
    wait_hours = (now - txn.arrival_time) / SECONDS_PER_HOUR  # negative if it arrives in the future
    complexity_score = 1.0 / (txn.complexity + 1)

    return (
        weights[0] * txn.fee
        + weights[1] * wait_hours
        + weights[2] * complexity_score
        + weights[3] * txn.account_tier
    )


def rank_key(txn: Transaction, weights: Sequence[float], epoch: float = 0.0) -> float:
    """
    The time-independent part of compute_priority().

    compute_priority(txn, w, now) == rank_key(txn, w, epoch) + w[1] * (now - epoch) / 3600

    `epoch` is any fixed reference time. Arrival times are measured from it
    so the key stays small (raw epoch seconds would cost float precision
    on near-equal scores). Keys are only comparable under the same epoch.
    """
    return (
        weights[0] * txn.fee
        - weights[1] * (txn.arrival_time - epoch) / SECONDS_PER_HOUR
        + weights[2] * (1.0 / (txn.complexity + 1))
        + weights[3] * txn.account_tier
    )


def normalize_weights(weights: Sequence[float]) -> Weights:
    """
    Validate and normalize a weight vector so it sums to 1.0.

    A vector whose sum is zero or negative is returned as-is (no division
    by zero, and no sign flip for negative sums).

    Raises:
        InvalidWeightVectorError: if the vector doesn't have exactly 4 entries,
            or any entry is NaN or infinite.
    """
    values = [float(w) for w in weights]
    if len(values) != 4:
        raise InvalidWeightVectorError(
            f"Expected exactly 4 weights (fee, time, complexity, tier), got {len(values)}"
        )
    if not all(math.isfinite(w) for w in values):
        raise InvalidWeightVectorError(f"Weights must be finite numbers, got {values}")

    total = sum(values)
    if total > 0:
        values = [w / total for w in values]
    return tuple(values)
