"""Product microservice: read-only catalogue."""

from flask import Blueprint, Flask, current_app, jsonify

from showcase.core.api_utils import error_response
from showcase.microservices.store import InMemoryStore

SEED_PRODUCTS = [
    {"id": "1", "name": "Laptop", "price": 999.99},
    {"id": "2", "name": "Mouse", "price": 29.99},
]

products_bp = Blueprint("catalogue", __name__)


def _store() -> InMemoryStore:
    return current_app.extensions["product_store"]


@products_bp.route("/products", methods=["GET"])
def list_products():
    return jsonify(_store().all()), 200


@products_bp.route("/products/<product_id>", methods=["GET"])
def get_product(product_id):
    product = _store().get(product_id)
    if product is None:
        return error_response("product not found", 404)
    return jsonify(product), 200


@products_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "healthy", "service": "products"}), 200


def create_product_service() -> Flask:
    app = Flask(__name__)
    app.extensions["product_store"] = InMemoryStore(seed=SEED_PRODUCTS)
    app.register_blueprint(products_bp)
    return app
