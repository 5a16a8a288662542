"""Exercise Tracker API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ExerciseTrackerError → {"error": ...} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - /public mounted only if the directory exists, so API-only deployments still boot
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import init_db, close_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.routes import health, index, users, exercises

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parent / "public"


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
    if settings.database_create_tables:
        await manager.create_all()
    logger.info(
        f"Exercise Tracker API started (store: {manager.engine.url.drivername})",
    )
    yield
    await close_db()
    logger.info("Exercise Tracker API shutting down")


app = FastAPI(
    title="Exercise Tracker API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(index.router)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(exercises.router)

if PUBLIC_DIR.is_dir():
    app.mount("/public", StaticFiles(directory=PUBLIC_DIR), name="public")

register_error_handlers(app)
