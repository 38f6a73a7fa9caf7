"""Beerpong API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BeerPongError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Clients built once in the lifespan and held on app.state:
      cache (None when Redis is unreachable), policy_client, publisher
    - Missing required settings (policy API key) fail at import/startup

Design Decisions:
    - Lifespan over @app.on_event: cleanup of Redis and httpx pools on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beerpong.api.error_handlers import register_error_handlers
from beerpong.api.routes import cup, health, throw
from beerpong.config import get_settings
from beerpong.infrastructure.cache_client import connect_cache
from beerpong.infrastructure.event_publisher import LoggingEventPublisher
from beerpong.infrastructure.observability import setup_logging
from beerpong.infrastructure.policy_client import PermitPolicyClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.cache = await connect_cache(
        settings.redis_url,
        connect_timeout=settings.redis_connect_timeout_seconds,
        socket_timeout=settings.redis_socket_timeout_seconds,
    )
    app.state.policy_client = PermitPolicyClient(
        settings.policy_api_key, settings.policy_pdp_url,
    )
    app.state.publisher = LoggingEventPublisher()
    logger.info(f"Beerpong API started (port {settings.port})")
    yield
    logger.info("Beerpong API shutting down")
    if app.state.cache is not None:
        await app.state.cache.close()
    await app.state.policy_client.close()


app = FastAPI(
    title="Beerpong API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(throw.router)
app.include_router(cup.router)

register_error_handlers(app)
