"""Order microservice: stores orders referencing users and products by id only."""

from flask import Blueprint, Flask, current_app, jsonify

from showcase.core.api_utils import error_response, json_body
from showcase.core.logging_config import get_logger
from showcase.microservices.store import InMemoryStore

logger = get_logger(__name__)

orders_bp = Blueprint("order_records", __name__)


def _store() -> InMemoryStore:
    return current_app.extensions["order_store"]


@orders_bp.route("/orders", methods=["POST"])
def create_order():
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)

    user_id = data.get("user_id")
    product_id = data.get("product_id")
    total = data.get("total", 0)
    if not isinstance(user_id, str) or not isinstance(product_id, str):
        return error_response("user_id and product_id are required", 400)
    if isinstance(total, bool) or not isinstance(total, (int, float)) or total < 0:
        return error_response("total must be a non-negative number", 400)

    order = _store().add({"user_id": user_id, "product_id": product_id, "total": total})
    logger.info("Order recorded", extra={"context": {"order_id": order["id"]}})
    return jsonify(order), 201


@orders_bp.route("/orders/<order_id>", methods=["GET"])
def get_order(order_id):
    order = _store().get(order_id)
    if order is None:
        return error_response("order not found", 404)
    return jsonify(order), 200


@orders_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "healthy", "service": "orders"}), 200


def create_order_service() -> Flask:
    app = Flask(__name__)
    app.extensions["order_store"] = InMemoryStore(prefix="order-")
    app.register_blueprint(orders_bp)
    return app
