"""
FastAPI dependency injection.

How this works:
- An endpoint declares `scheduler: WeightedScheduler = Depends(get_scheduler)`
- FastAPI calls get_scheduler() before the endpoint runs
- The endpoint receives the one scheduler instance owned by the app

Tests swap in their own scheduler (with a fake clock) through
app.dependency_overrides[get_scheduler].
"""

from fastapi import Request

from scheduler.weighted import WeightedScheduler


async def get_scheduler(request: Request) -> WeightedScheduler:
    """Returns the scheduler stored on the app at creation time."""
    return request.app.state.scheduler
