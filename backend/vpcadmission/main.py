"""IBMVPCCluster Admission API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map AdmissionError → structured JSON responses
    - Logging configured once on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py (keeps import fan-out of main low)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from vpcadmission.api.error_handlers import register_error_handlers
from vpcadmission.api.routes import health, webhooks
from vpcadmission.config import get_settings
from vpcadmission.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format, settings.service_name)
    logger.info(f"{settings.service_name} started")
    yield
    logger.info(f"{settings.service_name} shutting down")


app = FastAPI(
    title="IBMVPCCluster Admission Webhook", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(webhooks.router)

register_error_handlers(app)
