import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify

# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()

from showcase.core.api_utils import error_response, status_for_exception  # noqa: E402
from showcase.core.config import (  # noqa: E402
    get_environment,
    get_log_level,
    get_log_to_file,
    get_rate_limit_enabled,
    get_sentry_dsn,
    is_testing,
    log_domain_config,
)
from showcase.core.exceptions import ShowcaseError  # noqa: E402

logger = logging.getLogger(__name__)


def _init_sentry(env: str) -> None:
    sentry_dsn = get_sentry_dsn()
    if not sentry_dsn:
        logger.info(
            "Sentry not initialized (SENTRY_DSN not set)",
            extra={"context": {"environment": env}},
        )
        return

    import sentry_sdk
    from sentry_sdk.integrations.flask import FlaskIntegration
    from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration

    sentry_sdk.init(
        dsn=sentry_dsn,
        environment=env,
        release=os.getenv("GIT_SHA", "unknown"),
        integrations=[FlaskIntegration(), SqlalchemyIntegration()],
        traces_sample_rate=0.1,
        send_default_pii=False,
    )
    logger.info(
        "Sentry initialized",
        extra={"context": {"environment": env, "traces_sample_rate": 0.1}},
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def not_found(_error):
        return error_response("not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_error):
        return error_response("method not allowed", 405)

    @app.errorhandler(ShowcaseError)
    def application_error(error):
        status = status_for_exception(error)
        if status == 500:
            logger.error(
                "Unhandled application error",
                extra={"context": {"error": str(error)}},
                exc_info=True,
            )
            return error_response("internal server error", 500)
        return error_response(str(error), status)

    @app.errorhandler(500)
    def internal_error(_error):
        return error_response("internal server error", 500)


def create_app(config_overrides=None):
    """
    Application factory for the task, product and order APIs.

    Args:
        config_overrides: Optional mapping merged into ``app.config``

    Returns:
        Configured Flask application with tables created and the domain
        event publisher available as ``app.extensions["event_publisher"]``.
    """
    app = Flask(__name__)
    env = get_environment()
    is_production = env == "production"

    app.config["TESTING"] = is_testing()
    app.config["JSON_SORT_KEYS"] = False
    if config_overrides:
        app.config.update(config_overrides)

    from showcase.core.logging_config import setup_logging

    setup_logging(
        app=app,
        log_level=get_log_level(),
        enable_sql_echo=not is_production and not app.config["TESTING"],
        log_to_file=get_log_to_file(),
        use_json_format=is_production,
    )
    log_domain_config()

    _init_sentry(env)

    # Rate limiting; the global limiter instance backs the route decorators
    from showcase.core.limiter_config import limiter

    limiter.init_app(app)
    limiter.enabled = get_rate_limit_enabled()
    if not limiter.enabled:
        logger.info(
            "Rate limiting disabled", extra={"context": {"testing": app.config["TESTING"]}}
        )

    from showcase.db.session import create_tables

    create_tables()

    from showcase.services.event_publisher import build_default_publisher

    app.extensions["event_publisher"] = build_default_publisher()

    from showcase.controllers import health_bp, order_bp, product_bp, task_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(task_bp)
    app.register_blueprint(product_bp)
    app.register_blueprint(order_bp)

    _register_error_handlers(app)

    @app.route("/")
    def index():
        return jsonify(
            {
                "name": "architecture-showcase",
                "endpoints": ["/health", "/tasks", "/products", "/orders"],
            }
        )

    logger.info(
        "Application created",
        extra={"context": {"blueprints": sorted(app.blueprints)}},
    )
    return app
