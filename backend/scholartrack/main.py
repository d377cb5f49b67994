"""ScholarTrack API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ScholarTrackError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized, and sample data seeded, before the first request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Seeder awaited in the lifespan instead of fired in the background, so it
      cannot race client writes; its failures are logged and startup continues
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scholartrack.api.error_handlers import register_error_handlers
from scholartrack.api.routes import health, scholarships
from scholartrack.config import get_settings
from scholartrack.infrastructure.database import init_db, close_db
from scholartrack.infrastructure.observability import setup_logging
from scholartrack.services.seed_scholarships import run_startup_seed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_all()
    if settings.seed_on_startup:
        await run_startup_seed(manager)
    logger.info("ScholarTrack API started")
    yield
    logger.info("ScholarTrack API shutting down")
    await close_db()


app = FastAPI(
    title="ScholarTrack API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(scholarships.router)

register_error_handlers(app)
