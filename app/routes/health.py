"""
Health check and root endpoints.
"""

import logging
from datetime import datetime
from typing import Any, Dict

import sentry_sdk
from fastapi import APIRouter

from hookscore import __version__
from hookscore.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def get_sentry_status() -> Dict[str, Any]:
    """Whether Sentry is configured and its client is active."""
    settings = get_settings()
    configured = settings.is_sentry_configured
    try:
        active = configured and sentry_sdk.get_client().is_active()
    except Exception as e:
        logger.warning(f"Sentry status check failed: {e}")
        active = False

    return {
        "configured": configured,
        "active": active,
        "environment": settings.sentry.sentry_environment if configured else None,
    }


def get_provider_status() -> Dict[str, Any]:
    """Which engine will produce the core scores."""
    settings = get_settings()
    providers = settings.llm.available_providers
    remote = settings.remote_analysis_available

    return {
        "available": providers,
        "active": settings.llm.default_provider if remote else "heuristic",
        "remote_enabled": settings.analysis.remote_analysis_enabled,
    }


@router.get("/")
async def root() -> Dict[str, Any]:
    return {"message": "Welcome to the HookScore API", "version": __version__}


@router.get(
    "/health",
    summary="Service health check",
    description="""
Health check for monitoring and load balancers.

The heuristic engine has no external dependencies, so the service is
always healthy; the payload reports which LLM provider (if any) would
score content and whether Sentry is active.
    """,
    responses={
        200: {
            "description": "Health status retrieved",
            "content": {
                "application/json": {
                    "example": {
                        "status": "healthy",
                        "timestamp": "2026-01-24T12:00:00",
                        "version": "1.0.0",
                        "environment": "production",
                        "providers": {
                            "available": ["anthropic"],
                            "active": "anthropic",
                            "remote_enabled": True,
                        },
                        "services": {"sentry": {"status": "up"}},
                    }
                }
            }
        }
    }
)
async def health_check() -> Dict[str, Any]:
    settings = get_settings()
    sentry_status = get_sentry_status()

    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "environment": settings.security.environment,
        "providers": get_provider_status(),
        "services": {
            "sentry": {
                "status": "up" if sentry_status["active"] else (
                    "unconfigured" if not sentry_status["configured"] else "down"
                ),
            },
        },
    }
