"""Product catalogue endpoints (DDD example)."""

from flask import Blueprint, jsonify

from showcase.core.api_utils import error_response, exception_response, json_body
from showcase.core.limiter_config import limiter
from showcase.db.session import SessionLocal
from showcase.repositories.product_repo import ProductRepository
from showcase.schemas.dtos import CreateProductInput, ProductResponse
from showcase.services.product_service import ProductService

product_bp = Blueprint("products", __name__, url_prefix="/products")


def _product_json(product):
    return ProductResponse.from_domain(product).to_dict()


@product_bp.route("", methods=["POST"])
@limiter.limit("30 per minute")
def create_product():
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        service = ProductService(ProductRepository(db))
        product = service.create_product(CreateProductInput.from_json(data))
        return jsonify(_product_json(product)), 201
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@product_bp.route("", methods=["GET"])
@limiter.limit("100 per minute")
def list_products():
    db = SessionLocal()
    try:
        service = ProductService(ProductRepository(db))
        return jsonify([_product_json(p) for p in service.get_all_products()]), 200
    except Exception as e:
        return exception_response(e, "failed to retrieve products")
    finally:
        db.close()


@product_bp.route("/<product_id>", methods=["GET"])
@limiter.limit("100 per minute")
def get_product(product_id):
    db = SessionLocal()
    try:
        service = ProductService(ProductRepository(db))
        return jsonify(_product_json(service.get_product(product_id))), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@product_bp.route("/<product_id>", methods=["PUT"])
@limiter.limit("30 per minute")
def update_product(product_id):
    """Update name and description; price changes go through /discount."""
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)
    name = data.get("name", "")
    description = data.get("description", "")
    if not isinstance(name, str) or not isinstance(description, str):
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        service = ProductService(ProductRepository(db))
        product = service.update_product_info(product_id, name, description)
        return jsonify(_product_json(product)), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@product_bp.route("/<product_id>/discount", methods=["POST"])
@limiter.limit("30 per minute")
def apply_discount(product_id):
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)
    percent = data.get("percent")
    if isinstance(percent, bool) or not isinstance(percent, (int, float)):
        return error_response("invalid request body", 400)

    db = SessionLocal()
    try:
        service = ProductService(ProductRepository(db))
        product = service.apply_discount_to_product(product_id, percent)
        return jsonify(_product_json(product)), 200
    except Exception as e:
        return exception_response(e)
    finally:
        db.close()


@product_bp.route("/<product_id>", methods=["DELETE"])
@limiter.limit("30 per minute")
def delete_product(product_id):
    db = SessionLocal()
    try:
        ProductService(ProductRepository(db)).delete_product(product_id)
        return "", 204
    except Exception as e:
        return exception_response(e, "failed to delete product")
    finally:
        db.close()
