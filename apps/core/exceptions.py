"""
API error envelope.

Every error leaving the JSON API has the shape ``{"error": "...", "details": ...}``
where ``details`` is only present for field-level validation failures.
"""

import logging

from django.http import Http404

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred."


def error_payload(message, details=None):
    """Build the JSON body used for every API error response."""
    payload = {"error": message}
    if details is not None:
        payload["details"] = details
    return payload


def api_exception_handler(exc, context):
    """
    DRF exception handler that reshapes framework errors into the error envelope.

    Handled API exceptions (405, 404, malformed JSON, ...) keep their status
    code. Anything DRF does not know about is logged and reported as a
    generic 500 so internal messages are never exposed to the storefront.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'API view'}: {exc}",
            exc_info=exc,
        )
        return Response(
            error_payload(GENERIC_ERROR_MESSAGE),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        response.data = error_payload("Invalid request data.", response.data)
    elif isinstance(exc, Http404):
        response.data = error_payload("Not found.")
    elif isinstance(response.data, dict) and "detail" in response.data:
        response.data = error_payload(str(response.data["detail"]))

    return response
