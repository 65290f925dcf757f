"""
API gateway: single entry point that forwards ``/api/<service>/...`` to the
owning microservice.

The ``/api`` prefix is removed before forwarding, so ``GET /api/users/1``
becomes ``GET {USER_SERVICE_URL}/users/1``. Method, body, query string and
content headers are passed through; the upstream status, content type and
body are relayed unchanged.
"""

import time

import requests
from flask import Blueprint, Flask, Response, current_app, jsonify, request

from showcase.core.api_utils import error_response
from showcase.core.config import get_gateway_timeout, get_service_urls, log_gateway_config
from showcase.core.exceptions import UpstreamServiceError
from showcase.core.logging_config import get_logger, log_performance

logger = get_logger(__name__)

FORWARDED_HEADERS = ("Content-Type", "Accept", "Authorization", "X-Request-ID")
PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]

gateway_bp = Blueprint("gateway", __name__, url_prefix="/api")


def forward(service: str, path: str) -> requests.Response:
    """Send the current request to ``service`` and return the upstream response.

    Raises:
        UpstreamServiceError: connection failure or timeout
    """
    base_url = current_app.config["SERVICE_URLS"][service]
    url = f"{base_url}/{path}"
    headers = {h: request.headers[h] for h in FORWARDED_HEADERS if h in request.headers}

    start = time.time()
    try:
        upstream = requests.request(
            method=request.method,
            url=url,
            params=request.args,
            data=request.get_data(),
            headers=headers,
            timeout=current_app.config["GATEWAY_TIMEOUT"],
        )
    except requests.RequestException as e:
        logger.error(
            "Upstream request failed",
            extra={"context": {"service": service, "url": url, "error": str(e)}},
        )
        raise UpstreamServiceError(service, str(e))

    log_performance(
        "gateway.forward",
        (time.time() - start) * 1000,
        service=service,
        status=upstream.status_code,
    )
    return upstream


def _proxy(service: str, path: str = ""):
    target = service if not path else f"{service}/{path}"
    try:
        upstream = forward(service, target)
    except UpstreamServiceError as e:
        return error_response(str(e), 502)

    return Response(
        upstream.content,
        status=upstream.status_code,
        content_type=upstream.headers.get("Content-Type", "application/json"),
    )


@gateway_bp.route("/users", methods=PROXY_METHODS)
@gateway_bp.route("/users/<path:path>", methods=PROXY_METHODS)
def users_proxy(path=""):
    return _proxy("users", path)


@gateway_bp.route("/products", methods=PROXY_METHODS)
@gateway_bp.route("/products/<path:path>", methods=PROXY_METHODS)
def products_proxy(path=""):
    return _proxy("products", path)


@gateway_bp.route("/orders", methods=PROXY_METHODS)
@gateway_bp.route("/orders/<path:path>", methods=PROXY_METHODS)
def orders_proxy(path=""):
    return _proxy("orders", path)


def create_gateway(service_urls=None, timeout=None) -> Flask:
    """
    Build the gateway app.

    Args:
        service_urls: Optional override of the upstream base URLs
            (keys ``users``, ``products``, ``orders``)
        timeout: Optional upstream timeout in seconds
    """
    app = Flask(__name__)
    urls = get_service_urls()
    if service_urls:
        urls.update({k: v.rstrip("/") for k, v in service_urls.items()})
    app.config["SERVICE_URLS"] = urls
    app.config["GATEWAY_TIMEOUT"] = timeout or get_gateway_timeout()
    app.register_blueprint(gateway_bp)

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "healthy", "service": "gateway"}), 200

    log_gateway_config()
    return app
