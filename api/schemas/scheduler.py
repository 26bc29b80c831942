"""
Pydantic schemas for the /scheduler endpoints.

WeightsUpdate: request body for replacing the weight vector at runtime.
StrategyUpdate: request body for switching to a named strategy.
SchedulerStatus: response showing current scheduler state.
"""

from pydantic import BaseModel

from models.enums import WeightingStrategy


class WeightsUpdate(BaseModel):
    """Request body for PUT /scheduler/weights."""

    # Length is checked by the scheduler itself, so a 3- or 5-element list
    # gets the same InvalidWeightVectorError path as any other caller.
    weights: list[float]  # [fee, time, complexity, tier]


class StrategyUpdate(BaseModel):
    """Request body for PUT /scheduler/strategy."""

    strategy: WeightingStrategy


class SchedulerStatus(BaseModel):
    """Response body for GET /scheduler/status."""

    weights: list[float]
    pending: int             # transactions waiting in the queue
    processed_count: int     # successful next() calls so far
    total_fees: float        # sum of fees over processed transactions
