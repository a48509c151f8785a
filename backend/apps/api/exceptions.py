from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    MethodNotAllowed,
    NotFound,
    ParseError,
    UnsupportedMediaType,
    ValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.api.utils import error_response
from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="exception")

SERVER_ERROR_MESSAGE = "Something went wrong"


def global_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Render every API exception in the shared error envelope."""

    bound_logger = _bind_logger(context)

    if isinstance(exc, DjangoValidationError):
        exc = ValidationError(
            exc.message_dict if hasattr(exc, "error_dict") else list(exc.messages)
        )

    response = drf_exception_handler(exc, context)
    if response is None:
        bound_logger.exception("Unhandled exception bubbled to global handler")
        return error_response(
            "SERVER_ERROR",
            SERVER_ERROR_MESSAGE,
            http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    code, message, details = _normalize(exc, response.data, response.status_code)
    if response.status_code >= 500:
        bound_logger.error("Converted server error", code=code, status=response.status_code)
    else:
        bound_logger.info("Converted API exception", code=code, status=response.status_code)
    headers = dict(response.headers) if getattr(response, "headers", None) else None
    return error_response(
        code, message, details, http_status=response.status_code, headers=headers
    )


def _bind_logger(context: Dict[str, Any]):
    log = logger
    view = context.get("view")
    request = context.get("request")
    if view is not None:
        log = log.bind(view=type(view).__name__)
    if request is not None:
        log = log.bind(
            method=getattr(request, "method", None),
            path=getattr(request, "path", None),
        )
    return log


def _normalize(
    exc: Exception, payload: Any, status_code: int
) -> Tuple[str, str, Optional[Any]]:
    if status_code >= 500:
        return "SERVER_ERROR", SERVER_ERROR_MESSAGE, None
    if isinstance(exc, ValidationError):
        return "VALIDATION_ERROR", "Validation failed", payload
    if isinstance(exc, ParseError):
        return "VALIDATION_ERROR", _detail(payload, "Malformed request"), None
    if isinstance(exc, (NotFound, Http404)):
        return "NOT_FOUND", _detail(payload, "Resource not found"), None
    if isinstance(exc, MethodNotAllowed):
        return "METHOD_NOT_ALLOWED", _detail(payload, "Method not allowed"), None
    if isinstance(exc, UnsupportedMediaType):
        return "UNSUPPORTED_MEDIA_TYPE", _detail(payload, "Unsupported media type"), None
    return "REQUEST_FAILED", _detail(payload, "Request failed"), None


def _detail(payload: Any, fallback: str) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("detail"), str):
        return payload["detail"]
    return fallback


__all__ = ["global_exception_handler"]
