"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cli.logging_config import setup_logging
from web.deps import get_config
from web.routes import analytics, companion, journal, mood, quotes

logger = structlog.get_logger()


def _verify_store_config() -> None:
    """Fail fast when the hosted store or JWT secret is missing."""
    sb = get_config().supabase
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", sb.url),
            ("SUPABASE_ANON_KEY", sb.anon_key),
            ("SUPABASE_JWT_SECRET", sb.jwt_secret),
        )
        if not value
    ]
    if missing:
        logger.critical("web.config_missing", missing=missing)
        raise RuntimeError(f"Missing configuration: {', '.join(missing)}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    log_cfg = get_config().logging
    setup_logging(json_mode=True, level=log_cfg.level)
    _verify_store_config()
    logger.info("web.startup")
    yield
    logger.info("web.shutdown")


app = FastAPI(
    title="Wellness Tracker",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS: allow frontend origin
frontend_origin = os.getenv("FRONTEND_ORIGIN", "http://localhost:5173")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[frontend_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount routes
app.include_router(mood.router)
app.include_router(analytics.router)
app.include_router(journal.router)
app.include_router(quotes.router)
app.include_router(companion.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
