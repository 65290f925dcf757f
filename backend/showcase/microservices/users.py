"""User microservice: owns user records, nothing else."""

from flask import Blueprint, Flask, current_app, jsonify

from showcase.core.api_utils import error_response, json_body
from showcase.core.logging_config import get_logger
from showcase.microservices.store import InMemoryStore

logger = get_logger(__name__)

SEED_USERS = [{"id": "1", "name": "John Doe", "email": "john@example.com"}]

users_bp = Blueprint("users", __name__)


def _store() -> InMemoryStore:
    return current_app.extensions["user_store"]


@users_bp.route("/users/<user_id>", methods=["GET"])
def get_user(user_id):
    user = _store().get(user_id)
    if user is None:
        return error_response("user not found", 404)
    return jsonify(user), 200


@users_bp.route("/users", methods=["POST"])
def create_user():
    data = json_body()
    if data is None:
        return error_response("invalid request body", 400)
    name = data.get("name")
    email = data.get("email")
    if not isinstance(name, str) or not name or not isinstance(email, str) or "@" not in email:
        return error_response("name and a valid email are required", 400)

    user = _store().add({"name": name, "email": email})
    logger.info("User created", extra={"context": {"user_id": user["id"]}})
    return jsonify(user), 201


@users_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "healthy", "service": "users"}), 200


def create_user_service() -> Flask:
    app = Flask(__name__)
    app.extensions["user_store"] = InMemoryStore(seed=SEED_USERS)
    app.register_blueprint(users_bp)
    return app
