"""
Common API utilities for consistent response formatting across all controllers.
"""

import logging
import re
from typing import Any, Optional

from flask import jsonify, request

from showcase.core.exceptions import DomainValidationError, NotFoundError, PaymentFailedError

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_INT_ID = re.compile(r"[+-]?[0-9]+")


def error_response(message: str, status_code: int) -> tuple:
    """
    Standardized error payload for all endpoints.

    Returns:
        Tuple of (json_response, status_code) with body ``{"error": message}``
    """
    return jsonify({"error": message}), status_code


def json_body() -> Optional[dict]:
    """
    Return the request JSON object, or None when the body is missing,
    malformed, or not a JSON object.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    return data


def parse_int_id(raw: str) -> Optional[int]:
    """
    Parse a path segment as a signed 64-bit integer id.

    Returns None for anything else, including forms only ``int()`` accepts
    such as ``"5_0"`` or surrounding whitespace.
    """
    if not isinstance(raw, str) or not _INT_ID.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def status_for_exception(exc: Exception) -> int:
    """Map an application exception to its HTTP status code."""
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, DomainValidationError):
        return 400
    if isinstance(exc, PaymentFailedError):
        return 402
    return 500


def exception_response(exc: Exception, fallback_message: str = "internal server error") -> tuple:
    """
    Translate an exception raised by a service into an error response.

    Known application errors keep their message; anything else is logged
    and answered with ``fallback_message``.
    """
    status = status_for_exception(exc)
    if status == 500:
        logger.error(
            fallback_message,
            extra={"context": {"path": request.path, "error": str(exc)}},
            exc_info=True,
        )
        return error_response(fallback_message, 500)
    return error_response(str(exc), status)


def isoformat(value: Any) -> Optional[str]:
    return value.isoformat() if value is not None else None
