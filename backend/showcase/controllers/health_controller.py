"""
Health controller - health check endpoint for monitoring.
"""

import logging

from flask import Blueprint, jsonify
from sqlalchemy import text

from showcase.core.config import ENVIRONMENT
from showcase.db.session import SessionLocal

logger = logging.getLogger(__name__)

health_bp = Blueprint("health", __name__)


@health_bp.route("/health", methods=["GET"])
def health_check():
    """
    Report whether the application can reach its database.

    Example responses:
        {"status": "healthy", "database": "ok", "environment": "development"}
        {"status": "unhealthy", "database": "error", "environment": "production"}

    Status codes:
        200: Database answered ``SELECT 1``
        503: Database unreachable
    """
    db = None
    try:
        db = SessionLocal()
        db.execute(text("SELECT 1"))
        return (
            jsonify({"status": "healthy", "database": "ok", "environment": ENVIRONMENT}),
            200,
        )
    except Exception as e:
        logger.error(
            "Health check failed",
            extra={"context": {"endpoint": "/health", "error": str(e)}},
            exc_info=True,
        )
        return (
            jsonify(
                {"status": "unhealthy", "database": "error", "environment": ENVIRONMENT}
            ),
            503,
        )
    finally:
        if db is not None:
            db.close()
