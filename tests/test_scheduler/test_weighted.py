"""
Tests for the WeightedScheduler.

The scheduler dequeues the transaction with the HIGHEST weighted score.
Re-weighting must re-rank transactions that are already queued.
"""

import pytest

from models.enums import TransactionType
from scheduler.base import Transaction
from scheduler.errors import EmptyQueueError, InvalidWeightVectorError
from scheduler.priority import compute_priority
from scheduler.weighted import WeightedScheduler

T0 = 1735689600.0
HOUR = 3600.0


def _make_txn(account_id, fee=1.0, arrival_time=T0, complexity=0, account_tier=0) -> Transaction:
    return Transaction(
        account_id=account_id,
        target_id=0,
        amount=100.0,
        type=TransactionType.DEPOSIT,
        fee=fee,
        arrival_time=arrival_time,
        complexity=complexity,
        account_tier=account_tier,
    )


def _drain(scheduler: WeightedScheduler) -> list[int]:
    order = []
    while not scheduler.empty():
        order.append(scheduler.next().account_id)
    return order


# ── Construction ────────────────────────────────────────────────


def test_default_weights_are_uniform():
    assert WeightedScheduler().weights == pytest.approx((0.25, 0.25, 0.25, 0.25))


def test_constructor_normalizes_weights():
    scheduler = WeightedScheduler([4, 3, 2, 1])
    assert sum(scheduler.weights) == pytest.approx(1.0)
    assert scheduler.weights == pytest.approx((0.4, 0.3, 0.2, 0.1))


def test_all_zero_weights_stored_verbatim(clock):
    scheduler = WeightedScheduler([0, 0, 0, 0], clock=clock)
    assert scheduler.weights == (0.0, 0.0, 0.0, 0.0)

    # Every score is 0 → ties → insertion order
    scheduler.add(_make_txn(1, fee=5.0))
    scheduler.add(_make_txn(2, fee=50.0))
    assert scheduler.priority_of(scheduler.peek()) == 0.0
    assert _drain(scheduler) == [1, 2]


def test_constructor_rejects_wrong_length():
    with pytest.raises(InvalidWeightVectorError):
        WeightedScheduler([0.5, 0.5])


def test_new_scheduler_is_empty_with_zero_stats():
    scheduler = WeightedScheduler()
    assert scheduler.empty()
    assert scheduler.size() == 0
    assert scheduler.processed_count == 0
    assert scheduler.total_fees == 0.0


# ── Ordering ────────────────────────────────────────────────────


def test_fee_only_weights_order_by_fee(clock):
    """Core example: fees 5, 20, 1 come out 20, 5, 1 whatever else differs."""
    scheduler = WeightedScheduler([1, 0, 0, 0], clock=clock)
    scheduler.add(_make_txn(5, fee=5.0, arrival_time=T0 - 10 * HOUR, complexity=0, account_tier=5))
    scheduler.add(_make_txn(20, fee=20.0, arrival_time=T0, complexity=9, account_tier=0))
    scheduler.add(_make_txn(1, fee=1.0, arrival_time=T0 - 50 * HOUR, complexity=0, account_tier=3))

    assert _drain(scheduler) == [20, 5, 1]


def test_time_only_weights_serve_oldest_first(clock):
    scheduler = WeightedScheduler([0, 1, 0, 0], clock=clock)
    scheduler.add(_make_txn(3, arrival_time=T0 + 2 * HOUR))
    scheduler.add(_make_txn(1, arrival_time=T0))
    scheduler.add(_make_txn(2, arrival_time=T0 + 1 * HOUR))

    clock.advance(3 * HOUR)
    assert _drain(scheduler) == [1, 2, 3]


def test_complexity_only_weights_serve_simplest_first(clock):
    scheduler = WeightedScheduler([0, 0, 1, 0], clock=clock)
    scheduler.add(_make_txn(1, complexity=7))
    scheduler.add(_make_txn(2, complexity=0))
    scheduler.add(_make_txn(3, complexity=2))

    assert _drain(scheduler) == [2, 3, 1]


def test_tier_only_weights_serve_vip_first(clock):
    scheduler = WeightedScheduler([0, 0, 0, 1], clock=clock)
    scheduler.add(_make_txn(1, account_tier=1))
    scheduler.add(_make_txn(2, account_tier=5))
    scheduler.add(_make_txn(3, account_tier=3))

    assert _drain(scheduler) == [2, 3, 1]


def test_equal_priority_preserves_insertion_order(clock):
    scheduler = WeightedScheduler(clock=clock)
    for account_id in (1, 2, 3):
        scheduler.add(_make_txn(account_id))

    assert _drain(scheduler) == [1, 2, 3]


def test_drain_is_non_increasing_in_live_priority(clock):
    scheduler = WeightedScheduler([0.4, 0.3, 0.2, 0.1], clock=clock)
    specs = [
        (1, 2.0, T0 - 3 * HOUR, 4, 1),
        (2, 9.5, T0 - 1 * HOUR, 0, 0),
        (3, 0.5, T0 - 20 * HOUR, 1, 5),
        (4, 4.0, T0, 2, 2),
        (5, 4.0, T0 - 2 * HOUR, 8, 4),
    ]
    for account_id, fee, arrival, complexity, tier in specs:
        scheduler.add(_make_txn(account_id, fee, arrival, complexity, tier))

    scores = []
    while not scheduler.empty():
        txn = scheduler.next()
        scores.append(compute_priority(txn, scheduler.weights, clock()))

    assert scores == sorted(scores, reverse=True)


def test_next_returns_max_live_priority_after_time_passes(clock):
    """Aging between add and next doesn't make the heap return the wrong item."""
    scheduler = WeightedScheduler([0.5, 0.5, 0, 0], clock=clock)
    pending = [
        _make_txn(1, fee=10.0, arrival_time=T0),
        _make_txn(2, fee=1.0, arrival_time=T0 - 30 * HOUR),
        _make_txn(3, fee=6.0, arrival_time=T0 - 3 * HOUR),
    ]
    for txn in pending:
        scheduler.add(txn)

    clock.advance(48 * HOUR)
    expected = max(pending, key=lambda t: compute_priority(t, scheduler.weights, clock()))
    assert scheduler.next() is expected


def test_peek_does_not_remove(clock):
    scheduler = WeightedScheduler([1, 0, 0, 0], clock=clock)
    scheduler.add(_make_txn(1, fee=1.0))
    scheduler.add(_make_txn(2, fee=2.0))

    assert scheduler.peek().account_id == 2
    assert scheduler.size() == 2
    assert len(scheduler) == 2
    assert scheduler.processed_count == 0


# ── Empty queue ─────────────────────────────────────────────────


def test_next_on_empty_raises_and_keeps_stats(clock):
    scheduler = WeightedScheduler(clock=clock)
    scheduler.add(_make_txn(1, fee=3.0))
    scheduler.next()

    with pytest.raises(EmptyQueueError):
        scheduler.next()

    assert scheduler.processed_count == 1
    assert scheduler.total_fees == pytest.approx(3.0)


def test_peek_on_empty_raises():
    with pytest.raises(EmptyQueueError):
        WeightedScheduler().peek()


def test_add_still_works_after_empty_error(clock):
    scheduler = WeightedScheduler(clock=clock)
    with pytest.raises(EmptyQueueError):
        scheduler.next()

    scheduler.add(_make_txn(7))
    assert scheduler.next().account_id == 7


# ── Re-weighting ────────────────────────────────────────────────


def test_set_weights_reorders_pending_transactions(clock):
    """The key guarantee: already-queued transactions follow the new weights."""
    scheduler = WeightedScheduler([1, 0, 0, 0], clock=clock)
    scheduler.add(_make_txn(1, fee=50.0, account_tier=0))
    scheduler.add(_make_txn(2, fee=10.0, account_tier=5))
    scheduler.add(_make_txn(3, fee=1.0, account_tier=3))
    assert scheduler.peek().account_id == 1

    scheduler.set_weights([0, 0, 0, 1])

    assert _drain(scheduler) == [2, 3, 1]


def test_set_weights_normalizes(clock):
    scheduler = WeightedScheduler(clock=clock)
    scheduler.set_weights([3, 1, 0, 0])
    assert scheduler.weights == pytest.approx((0.75, 0.25, 0.0, 0.0))
    assert sum(scheduler.weights) == pytest.approx(1.0)


def test_set_weights_keeps_stats(clock):
    scheduler = WeightedScheduler(clock=clock)
    scheduler.add(_make_txn(1, fee=2.5))
    scheduler.add(_make_txn(2, fee=1.0))
    scheduler.next()

    scheduler.set_weights([0, 0, 1, 0])

    assert scheduler.processed_count == 1
    assert scheduler.total_fees == pytest.approx(2.5)
    assert scheduler.size() == 1


def test_set_weights_keeps_insertion_order_for_ties(clock):
    scheduler = WeightedScheduler([1, 0, 0, 0], clock=clock)
    scheduler.add(_make_txn(1, fee=3.0, account_tier=2))
    scheduler.add(_make_txn(2, fee=9.0, account_tier=2))
    scheduler.add(_make_txn(3, fee=1.0, account_tier=2))

    scheduler.set_weights([0, 0, 0, 1])  # all tiers equal → tie

    assert _drain(scheduler) == [1, 2, 3]


@pytest.mark.parametrize("bad", [[1, 0, 0], [1, 0, 0, 0, 0]])
def test_set_weights_wrong_length_changes_nothing(clock, bad):
    scheduler = WeightedScheduler([1, 0, 0, 0], clock=clock)
    scheduler.add(_make_txn(1, fee=1.0, account_tier=5))
    scheduler.add(_make_txn(2, fee=9.0, account_tier=0))
    before = scheduler.weights

    with pytest.raises(InvalidWeightVectorError):
        scheduler.set_weights(bad)

    assert scheduler.weights == before
    assert _drain(scheduler) == [2, 1]


def test_set_weights_on_empty_scheduler(clock):
    scheduler = WeightedScheduler(clock=clock)
    scheduler.set_weights([0, 0, 0, 2])
    assert scheduler.weights == pytest.approx((0.0, 0.0, 0.0, 1.0))
    assert scheduler.empty()


def test_add_after_set_weights_uses_new_weights(clock):
    scheduler = WeightedScheduler([1, 0, 0, 0], clock=clock)
    scheduler.add(_make_txn(1, fee=10.0, complexity=5))
    scheduler.set_weights([0, 0, 1, 0])
    scheduler.add(_make_txn(2, fee=0.0, complexity=0))

    assert _drain(scheduler) == [2, 1]


# ── Statistics ──────────────────────────────────────────────────


def test_stats_track_successful_next_calls(clock):
    scheduler = WeightedScheduler(clock=clock)
    fees = [1.25, 4.0, 0.75, 10.0]
    for i, fee in enumerate(fees):
        scheduler.add(_make_txn(i, fee=fee))

    returned = [scheduler.next(), scheduler.next()]

    assert scheduler.processed_count == 2
    assert scheduler.total_fees == pytest.approx(sum(t.fee for t in returned))

    _drain(scheduler)
    assert scheduler.processed_count == 4
    assert scheduler.total_fees == pytest.approx(sum(fees))


def test_priority_of_uses_current_weights_and_clock(clock):
    scheduler = WeightedScheduler([0, 1, 0, 0], clock=clock)
    txn = _make_txn(1, arrival_time=T0)
    clock.advance(2 * HOUR)
    assert scheduler.priority_of(txn) == pytest.approx(2.0)
    assert scheduler.now() == T0 + 2 * HOUR


def test_near_equal_scores_order_by_fee_with_time_weight(clock):
    """Key precision: a 1e-12 fee difference still decides the order."""
    scheduler = WeightedScheduler([0.5, 0.5, 0, 0], clock=clock)
    scheduler.add(_make_txn(1, fee=1.0))
    scheduler.add(_make_txn(2, fee=1.0 + 1e-12))
    scheduler.add(_make_txn(3, fee=1.0))

    assert _drain(scheduler) == [2, 1, 3]


def test_non_finite_weights_change_nothing(clock):
    scheduler = WeightedScheduler([1, 0, 0, 0], clock=clock)
    scheduler.add(_make_txn(1, fee=1.0))
    scheduler.add(_make_txn(2, fee=9.0))

    with pytest.raises(InvalidWeightVectorError):
        scheduler.set_weights([float("nan"), 1, 0, 0])

    assert scheduler.weights == (1.0, 0.0, 0.0, 0.0)
    assert _drain(scheduler) == [2, 1]
    assert scheduler.total_fees == pytest.approx(10.0)
