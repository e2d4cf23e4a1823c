"""AutoConnect API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AutoConnectError -> {message, status, error} envelope
    - CORS configured from settings (not hardcoded)
    - Database and every external-service client built once in the lifespan
    - Every request is access-logged (arrival and completion)

Design Decisions:
    - Lifespan over @app.on_event: cleaner cleanup of the pool and HTTP client
    - One httpx.AsyncClient owned by the vision adapter, closed on shutdown
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autoconnect.api.error_handlers import register_error_handlers
from autoconnect.api.routes import (
    accounts, categories, dashboard, health, inquiries, ocr, payments,
)
from autoconnect.config import get_settings
from autoconnect.infrastructure.database import init_db
from autoconnect.infrastructure.llm_client import JSONCompletionClient
from autoconnect.infrastructure.mail_transport import SMTPTransport
from autoconnect.infrastructure.observability import log_requests, setup_logging
from autoconnect.infrastructure.payment_gateway import StripeCheckoutGateway
from autoconnect.infrastructure.vision_client import VisionReadClient

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

    http = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    app.state.vision_client = VisionReadClient(
        http,
        settings.azure_vision_endpoint,
        settings.azure_vision_key,
        max_polls=settings.ocr_max_polls,
        poll_interval_seconds=settings.ocr_poll_interval_seconds,
    )
    app.state.payment_gateway = StripeCheckoutGateway.from_secret_key(
        settings.stripe_secret_key,
        api_base=settings.stripe_api_base,
        currency=settings.payment_currency,
        timeout_seconds=settings.http_timeout_seconds,
    )
    app.state.llm_client = JSONCompletionClient.from_api_key(
        settings.anthropic_api_key,
        settings.llm_model,
        timeout_seconds=settings.http_timeout_seconds,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
    )
    app.state.mail_transport = SMTPTransport(
        settings.smtp_host,
        settings.smtp_port,
        settings.smtp_user,
        settings.smtp_email,
        settings.smtp_key,
        use_tls=settings.smtp_use_tls,
        timeout_seconds=settings.http_timeout_seconds,
    )
    logger.info("AutoConnect API started")
    yield
    logger.info("AutoConnect API shutting down")
    await http.aclose()
    await manager.dispose()


app = FastAPI(
    title="AutoConnect API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

app.include_router(health.router)
app.include_router(accounts.router)
app.include_router(categories.router)
app.include_router(ocr.router)
app.include_router(payments.router)
app.include_router(inquiries.router)
app.include_router(dashboard.router)

register_error_handlers(app)
