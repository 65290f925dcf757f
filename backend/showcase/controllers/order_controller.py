"""
Order endpoints for the integration example.

The event publisher is application-wide (stored in ``app.extensions``);
repository and service are built per request like every other controller.
"""

from flask import Blueprint, current_app, jsonify

from showcase.core.api_utils import error_response, exception_response, json_body
from showcase.core.limiter_config import limiter
from showcase.db.session import SessionLocal
from showcase.repositories.order_repo import OrderRepository
from showcase.schemas.dtos import CreateOrderInput, OrderResponse
from showcase.services.order_service import OrderService

order_bp = Blueprint("orders", __name__)


def _order_service(db) -> OrderService:
    return OrderService(
        OrderRepository(db),
        current_app.extensions["event_publisher"],
    )


def _order_json(order):
    return OrderResponse.from_domain(order).to_dict()


@order_bp.route("/orders", methods=["POST"])
@limiter.limit("30 per minute")
def create_order():
    """Place an order: ``{"customer_id": ..., "items": [...]}``."""
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        order = _order_service(db).create_order(CreateOrderInput.from_json(data))
        return jsonify(_order_json(order)), 201
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@order_bp.route("/orders/<order_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_order(order_id):
    db = SessionLocal()
    try:
        return jsonify(_order_json(_order_service(db).get_order(order_id))), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@order_bp.route("/orders/<order_id>/payment", methods=["POST"])
@limiter.limit("30 per minute")
def process_payment(order_id):
    data = json_body()
    if data is None or not isinstance(data.get("payment_method"), str):
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        _order_service(db).process_payment(order_id, data["payment_method"])
        return jsonify({"message": "payment processed"}), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@order_bp.route("/orders/<order_id>/ship", methods=["POST"])
@limiter.limit("30 per minute")
def ship_order(order_id):
    data = json_body() or {}
    tracking_number = data.get("tracking_number", "")
    if not isinstance(tracking_number, str):
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        order = _order_service(db).ship_order(order_id, tracking_number)
        return jsonify(_order_json(order)), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@order_bp.route("/orders/<order_id>/cancel", methods=["POST"])
@limiter.limit("30 per minute")
def cancel_order(order_id):
    db = SessionLocal()
    try:
        order = _order_service(db).cancel_order(order_id)
        return jsonify(_order_json(order)), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@order_bp.route("/customers/<customer_id>/orders", methods=["GET"])
@limiter.limit("100 per minute")
def list_customer_orders(customer_id):
    db = SessionLocal()
    try:
        orders = _order_service(db).get_customer_orders(customer_id)
        return jsonify([_order_json(o) for o in orders]), 200
    except Exception as e:
        return exception_response(e, "failed to retrieve orders")
    finally:
        db.close()
