"""
Health check views and URLs for monitoring and deployment verification.

This module provides health check endpoints used by:
- Load balancers for health checks
- Container liveness and readiness probes
- Monitoring systems for uptime checks
"""

import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.urls import path
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


def _check_database():
    with connection.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()


@never_cache
@require_GET
def health_check(request) -> JsonResponse:
    """
    Basic health check endpoint.

    Returns 200 OK if the application is running.

    Returns:
        JsonResponse: {"status": "ok", "version": "1.0.0"}
    """
    return JsonResponse(
        {
            "status": "ok",
            "version": getattr(settings, "VERSION", "1.0.0"),
            "environment": getattr(settings, "ENVIRONMENT", "unknown"),
        }
    )


@never_cache
@require_GET
def health_check_detailed(request) -> JsonResponse:
    """
    Detailed health check endpoint with dependency checks.

    Returns 200 if the database answers, 503 otherwise.
    """
    health_status = {
        "status": "healthy",
        "version": getattr(settings, "VERSION", "1.0.0"),
        "environment": getattr(settings, "ENVIRONMENT", "unknown"),
        "checks": {},
    }

    try:
        _check_database()
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful",
        }
        status_code = 200
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": "Database connection failed",
        }
        health_status["status"] = "unhealthy"
        status_code = 503

    return JsonResponse(health_status, status=status_code)


@never_cache
@require_GET
def liveness_probe(request) -> JsonResponse:
    """Returns 200 while the application process is alive."""
    return JsonResponse({"status": "alive"})


@never_cache
@require_GET
def readiness_probe(request) -> JsonResponse:
    """
    Readiness probe endpoint.

    Returns 200 once the database is reachable, 503 otherwise.
    """
    try:
        _check_database()
        return JsonResponse({"status": "ready"})
    except DatabaseError as e:
        logger.error(f"Readiness probe failed: {e}")
        return JsonResponse({"status": "not_ready"}, status=503)


# URL patterns for health check endpoints
urlpatterns = [
    path("", health_check, name="health"),
    path("detailed/", health_check_detailed, name="health_detailed"),
    path("live/", liveness_probe, name="liveness"),
    path("ready/", readiness_probe, name="readiness"),
]
