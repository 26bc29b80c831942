"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Creates the one WeightedScheduler the app owns (on app.state)
3. Registers all routers (transactions, scheduler, health)

The scheduler lives in memory only: restarting the process empties the queue.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from scheduler.registry import create_scheduler
from api.routers import transactions, scheduler, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs on startup (before yield) and shutdown (after yield)."""
    logger.info(
        f"API ready — strategy: {settings.DEFAULT_STRATEGY}, "
        f"weights: {list(app.state.scheduler.weights)}"
    )

    yield  # app is running and serving requests between startup and shutdown

    pending = app.state.scheduler.size()
    if pending:
        logger.warning(f"Shutting down with {pending} transactions still pending")
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Weighted Transaction Scheduler",
        description="In-memory priority scheduler ranking transactions by fee, wait time, complexity and account tier",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Created here rather than in lifespan so it exists even when the ASGI
    # lifespan protocol isn't run (e.g. httpx ASGITransport in tests).
    app.state.scheduler = create_scheduler(settings.DEFAULT_STRATEGY)

    app.include_router(health.router)
    app.include_router(transactions.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
