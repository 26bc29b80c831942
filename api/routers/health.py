"""
Health check endpoint.

Load balancers and container orchestrators hit this to decide if the
service is ready. It also reports the queue depth as a cheap liveness signal.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from scheduler.weighted import WeightedScheduler

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    scheduler: WeightedScheduler = Depends(get_scheduler),
) -> dict:
    return {"status": "healthy", "pending": scheduler.size()}
