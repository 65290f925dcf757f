"""
Centralized configuration module for application-wide settings.

Every setting is read from the environment (optionally populated from a
``.env`` file by the application factory) and cached at import time as a
module-level constant. Getters stay available so tests can re-read values
after changing the environment.
"""

import logging
import os

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def is_testing() -> bool:
    """Return True when running under the test suite (TESTING=true)."""
    return _env_flag("TESTING", "false")


# ===========================
# Environment / Database
# ===========================


def get_environment() -> str:
    """
    Get the deployment environment name.

    Environment Variables:
        FLASK_ENV: 'development' or 'production'
            Default: 'development'
    """
    return os.getenv("FLASK_ENV", "development")


def get_database_url() -> str:
    """
    Get the SQLAlchemy database URL.

    Environment Variables:
        DATABASE_URL: Any SQLAlchemy URL
            Default: 'sqlite:///./showcase.db' (embedded SQLite file)

    Examples:
        >>> # DATABASE_URL=sqlite:///:memory:
        >>> get_database_url()
        'sqlite:///:memory:'
    """
    return os.getenv("DATABASE_URL", "sqlite:///./showcase.db")


ENVIRONMENT = get_environment()


# ===========================
# Logging Configuration
# ===========================


def get_log_level() -> str:
    """
    Get the root log level name.

    Environment Variables:
        LOG_LEVEL: Standard logging level name
            Default: 'INFO' in production, 'DEBUG' otherwise
    """
    default = "INFO" if get_environment() == "production" else "DEBUG"
    return os.getenv("LOG_LEVEL", default).upper()


def get_log_to_file() -> bool:
    """
    Get whether logs are also written to rotating files under ``logs/``.

    Environment Variables:
        LOG_TO_FILE: Truthy values "true", "1", "yes" (case-insensitive)
            Default: '0' (console only)
    """
    return _env_flag("LOG_TO_FILE", "0")


# ===========================
# Rate Limiting Configuration
# ===========================


def get_rate_limit_enabled() -> bool:
    """
    Get whether request rate limiting is active.

    Environment Variables:
        RATE_LIMIT_ENABLED: Truthy values "true", "1", "yes"
            Default: 'true'. Always disabled when TESTING is set.
    """
    if is_testing():
        return False
    return _env_flag("RATE_LIMIT_ENABLED", "true")


# ===========================
# Domain Configuration
# ===========================


def get_default_currency() -> str:
    """
    Get the currency used when an order line omits one.

    Environment Variables:
        DEFAULT_CURRENCY: ISO-4217 code
            Default: 'USD'
    """
    return os.getenv("DEFAULT_CURRENCY", "USD").strip().upper() or "USD"


DEFAULT_CURRENCY = get_default_currency()


def log_domain_config():
    """Log the active domain configuration."""
    logger.info(
        "Domain configuration initialized",
        extra={"context": {"default_currency": DEFAULT_CURRENCY}},
    )


# ===========================
# Microservices Configuration
# ===========================


def get_service_urls() -> dict[str, str]:
    """
    Get upstream base URLs used by the API gateway.

    Environment Variables:
        USER_SERVICE_URL: Default 'http://localhost:8081'
        PRODUCT_SERVICE_URL: Default 'http://localhost:8082'
        ORDER_SERVICE_URL: Default 'http://localhost:8083'
    """
    return {
        "users": os.getenv("USER_SERVICE_URL", "http://localhost:8081").rstrip("/"),
        "products": os.getenv("PRODUCT_SERVICE_URL", "http://localhost:8082").rstrip(
            "/"
        ),
        "orders": os.getenv("ORDER_SERVICE_URL", "http://localhost:8083").rstrip("/"),
    }


def get_gateway_timeout() -> float:
    """
    Get the gateway's upstream request timeout in seconds.

    Environment Variables:
        GATEWAY_TIMEOUT_SECONDS: Positive number
            Default: '5'
    """
    raw = os.getenv("GATEWAY_TIMEOUT_SECONDS", "5")
    try:
        value = float(raw)
    except ValueError:
        logger.warning(
            f"Invalid GATEWAY_TIMEOUT_SECONDS '{raw}'. Falling back to 5 seconds."
        )
        return 5.0
    return value if value > 0 else 5.0


SERVICE_PORTS = {"gateway": 8080, "users": 8081, "products": 8082, "orders": 8083}


def log_gateway_config():
    """Log the gateway upstreams without exposing anything sensitive."""
    logger.info(
        "Gateway configuration initialized",
        extra={
            "context": {
                "upstreams": get_service_urls(),
                "timeout_seconds": get_gateway_timeout(),
            }
        },
    )


# ===========================
# Error Tracking Configuration
# ===========================


def get_sentry_dsn() -> str | None:
    """
    Get the Sentry DSN.

    Environment Variables:
        SENTRY_DSN: Sentry project DSN
            Default: None (error tracking disabled)
    """
    return os.getenv("SENTRY_DSN") or None
