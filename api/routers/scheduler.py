"""
Scheduler control endpoints.

PUT /scheduler/weights   → Replace the weight vector at runtime
PUT /scheduler/strategy  → Switch to a named weighting strategy
GET /scheduler/status    → View weights, queue depth, processed count, fees

The key feature here: re-weighting takes effect on transactions ALREADY in
the queue, not just new ones. The scheduler rebuilds its heap under the new
weights before returning, so the very next /transactions/next call uses them.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_scheduler
from api.schemas.scheduler import SchedulerStatus, StrategyUpdate, WeightsUpdate
from scheduler.errors import InvalidWeightVectorError
from scheduler.registry import get_strategy_weights
from scheduler.weighted import WeightedScheduler

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _status(scheduler: WeightedScheduler) -> SchedulerStatus:
    return SchedulerStatus(
        weights=list(scheduler.weights),
        pending=scheduler.size(),
        processed_count=scheduler.processed_count,
        total_fees=scheduler.total_fees,
    )


@router.put("/weights", response_model=SchedulerStatus)
async def set_weights(
    update: WeightsUpdate,
    scheduler: WeightedScheduler = Depends(get_scheduler),
) -> SchedulerStatus:
    """
    Replace the weight vector. Weights are normalized to sum to 1.0
    (unless their sum is zero or negative, in which case they're kept as-is).
    """
    try:
        scheduler.set_weights(update.weights)
    except InvalidWeightVectorError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _status(scheduler)


@router.put("/strategy", response_model=SchedulerStatus)
async def set_strategy(
    update: StrategyUpdate,
    scheduler: WeightedScheduler = Depends(get_scheduler),
) -> SchedulerStatus:
    scheduler.set_weights(get_strategy_weights(update.strategy))
    return _status(scheduler)


@router.get("/status", response_model=SchedulerStatus)
async def get_scheduler_status(
    scheduler: WeightedScheduler = Depends(get_scheduler),
) -> SchedulerStatus:
    """Get current scheduler state."""
    return _status(scheduler)
