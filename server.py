"""
HookScore API server.

Assembles logging, Sentry, CORS, request logging, exception handlers and
the analysis routes into the FastAPI application.
"""

import sentry_sdk
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

# Configure structured logging first, before other imports that use logging
from hookscore.utils.logging import SERVICE_NAME, redact_sensitive_data, setup_logging

logger = setup_logging(service_name=SERVICE_NAME)

from hookscore import __version__
from hookscore.config import Settings, get_settings

from app.error_handlers import register_exception_handlers
from app.middleware import RequestLoggingMiddleware
from app.routes import analyze_router, health_router

settings: Settings = get_settings()
logger.info("Configuration loaded", extra={"config": settings.get_config_summary()})


def filter_sensitive_breadcrumbs(crumb, hint):
    """Redact API keys from log breadcrumbs before they reach Sentry."""
    if crumb.get("category") in ("console", "log") and "message" in crumb:
        crumb["message"] = redact_sensitive_data(str(crumb["message"]))
    return crumb


if settings.is_sentry_configured:
    sentry_settings = settings.sentry
    sentry_sdk.init(
        dsn=sentry_settings.sentry_dsn,
        environment=sentry_settings.sentry_environment,
        sample_rate=1.0,
        traces_sample_rate=sentry_settings.sentry_traces_sample_rate,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        before_breadcrumb=filter_sensitive_breadcrumbs,
        # Submitted content is user data
        send_default_pii=False,
        server_name=SERVICE_NAME,
        release=sentry_settings.sentry_release,
    )
    logger.info(f"Sentry initialized for environment: {sentry_settings.sentry_environment}")
else:
    logger.info("Sentry DSN not configured, error tracking disabled")


app = FastAPI(
    title="HookScore API",
    description="""
## Content Scoring API

Scores social posts and long-form articles on hook strength, structure and
emotional pull, with readability and tone reports.

- **POST /analyze**: full analysis of one piece of content
- **POST /compare**: A/B comparison of two versions
- **POST /readability**, **POST /tone**: standalone reports
""",
    version=__version__,
    openapi_tags=[
        {"name": "health", "description": "Health checks and system status"},
        {"name": "analysis", "description": "Content scoring endpoints"},
    ],
)

register_exception_handlers(app)

app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.security.origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time"],
)

app.include_router(health_router)
app.include_router(analyze_router)


if __name__ == "__main__":
    uvicorn.run(
        "server:app",
        host="0.0.0.0",
        port=8000,
        reload=not settings.is_production,
        log_level=settings.logging.log_level.lower(),
    )
