"""
Scheduler exceptions.

Only two things can go wrong with a WeightedScheduler:
- EmptyQueueError: next()/peek() called with nothing pending
- InvalidWeightVectorError: a weight vector that doesn't have exactly 4 entries

Both are recoverable. The scheduler's state is untouched when either is raised.
"""


class SchedulerError(Exception):
    """Base class for everything the scheduler raises."""


class EmptyQueueError(SchedulerError):
    """Raised when extracting from a scheduler with no pending transactions."""


class InvalidWeightVectorError(SchedulerError, ValueError):
    """Raised when a weight vector does not have exactly four components."""
