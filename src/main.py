"""FastAPI application entry point."""

import logging
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.daily_adapter import DailyAdapter
from src.api.router import api_router
from src.config import settings
from src.db.mongo import MongoStore
from src.meetings import (
    AdminActionRelay,
    AdminQueryService,
    MeetingAssignmentService,
    ParticipantLifecycleService,
)
from src.repositories.meeting_repo import MeetingRepository

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)
access_logger = structlog.get_logger("src.access")


def _initialize_services(app: FastAPI, store: MongoStore, daily: DailyAdapter) -> None:
    """Build the meeting services on app state.

    All services share the one store connection and provider client.
    """
    repo = MeetingRepository(store.meetings)
    app.state.assignment_service = MeetingAssignmentService(repo=repo, daily=daily)
    app.state.admin_query_service = AdminQueryService(repo)
    app.state.lifecycle_service = ParticipantLifecycleService(repo)
    app.state.action_relay = AdminActionRelay(daily)
    logger.info("Meeting services initialized")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Connect to MongoDB (fails if the deployment is unreachable)
    - Create the Daily client
    - Initialize meeting services

    Shutdown:
    - Close the Daily client
    - Close the MongoDB connection
    """
    logger.info(f"Starting {settings.app_name}...")

    store = MongoStore()
    await store.connect()
    app.state.store = store

    daily = DailyAdapter()
    if not daily.is_configured:
        logger.warning("DAILY_API_KEY is not set; room creation will fail")
    app.state.daily = daily

    _initialize_services(app, store, daily)

    yield

    logger.info(f"Shutting down {settings.app_name}...")
    await daily.close()
    await store.close()


app = FastAPI(
    title=settings.app_name,
    description="Pairs customers with support agents in video meetings",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log method, path, status and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    access_logger.info(
        "request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return response


app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
