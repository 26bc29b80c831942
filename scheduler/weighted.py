"""
Weighted priority scheduler.

Transactions with the HIGHEST weighted score come out first. The score mixes
fee, wait time, complexity and account tier (see scheduler/priority.py).

Data structure: max-heap (heapq is a min-heap, so keys are negated)
- add:  heappush → O(log n)
- next: heappop  → O(log n)
- set_weights: rebuild → O(n)

The heap stores tuples: (-rank_key, sequence, transaction)
- rank_key: the time-independent part of the score, so ordering stays
  correct as transactions age (every pending score grows at the same rate).
  Arrival times are measured from the clock reading at construction to
  keep the keys small.
- sequence: tiebreaker — equal scores come out in insertion order. Without
  it Python would try to compare Transaction objects on a tie.

Re-weighting:
the heap's ordering was computed under the old weights. Changing the weights
without touching the heap would leave everything already queued in the wrong
order, and only new arrivals would follow the new weights. So set_weights()
drains every pending transaction, throws the old heap away, and rebuilds a
fresh one keyed by the new weights. The old comparator is never mutated in
place: a new heap is built and every transaction is re-enqueued.
"""

import heapq
import logging
import time
from typing import Callable, Optional, Sequence

from scheduler.base import Transaction
from scheduler.errors import EmptyQueueError
from scheduler.priority import Weights, compute_priority, normalize_weights, rank_key

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS: Weights = (0.25, 0.25, 0.25, 0.25)


class WeightedScheduler:
    """
    Single-threaded, in-memory. No locking: callers that share one instance
    across threads must serialize access themselves.
    """

    def __init__(
        self,
        weights: Sequence[float] = DEFAULT_WEIGHTS,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._weights: Weights = normalize_weights(weights)
        self._clock = clock or time.time
        self._epoch: float = self._clock()  # reference time for heap keys
        self._heap: list[tuple[float, int, Transaction]] = []
        self._counter: int = 0  # monotonic tiebreaker for heap stability

        # ── Statistics ──────────────────────────────────────────
        self._processed: int = 0
        self._total_fees: float = 0.0

    def add(self, txn: Transaction) -> None:
        heapq.heappush(self._heap, (-rank_key(txn, self._weights, self._epoch), self._counter, txn))
        self._counter += 1
        logger.debug(f"Queued transaction from account {txn.account_id} (fee={txn.fee})")

    def next(self) -> Transaction:
        """
        Remove and return the highest-priority transaction.

        Raises:
            EmptyQueueError: nothing is pending. Statistics are not touched.
        """
        if not self._heap:
            raise EmptyQueueError("Queue is empty - nothing to process")

        _, _, txn = heapq.heappop(self._heap)
        self._processed += 1
        self._total_fees += txn.fee
        return txn

    def peek(self) -> Transaction:
        """View the next transaction without removing it."""
        if not self._heap:
            raise EmptyQueueError("Queue is empty - nothing to peek at")
        return self._heap[0][2]

    def empty(self) -> bool:
        return not self._heap

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def set_weights(self, new_weights: Sequence[float]) -> None:
        """
        Swap in a new weight vector and re-rank everything still pending.

        Validation happens before any state changes: a bad vector raises
        InvalidWeightVectorError and leaves the old weights and heap intact.
        The processed count and fee total are not affected.
        """
        weights = normalize_weights(new_weights)

        # Drain old heap → plain list, keeping each entry's original sequence
        # number so ties still resolve in insertion order afterwards.
        drained = [(seq, txn) for _, seq, txn in self._heap]

        self._weights = weights
        self._heap = [(-rank_key(txn, weights, self._epoch), seq, txn) for seq, txn in drained]
        heapq.heapify(self._heap)

        logger.info(
            f"Weights set to {self._format_weights()}, "
            f"re-ranked {len(drained)} pending transactions"
        )

    def now(self) -> float:
        """Current time according to this scheduler's clock (epoch seconds)."""
        return self._clock()

    def priority_of(self, txn: Transaction) -> float:
        """Live priority of `txn` under the current weights, right now."""
        return compute_priority(txn, self._weights, self._clock())

    @property
    def weights(self) -> Weights:
        return self._weights

    @property
    def processed_count(self) -> int:
        return self._processed

    @property
    def total_fees(self) -> float:
        return self._total_fees

    def _format_weights(self) -> str:
        return "[" + ", ".join(f"{w:.3f}" for w in self._weights) + "]"
