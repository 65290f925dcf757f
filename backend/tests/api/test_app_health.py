"""API tests for the health check, index and generic error handlers."""

from unittest.mock import patch


class TestHealth:
    def test_healthy(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.get_json()
        assert body["status"] == "healthy"
        assert body["database"] == "ok"

    def test_database_failure(self, client):
        with patch("showcase.controllers.health_controller.SessionLocal") as session_factory:
            session_factory.return_value.execute.side_effect = RuntimeError("db down")
            response = client.get("/health")
        assert response.status_code == 503
        assert response.get_json()["status"] == "unhealthy"


class TestAppWiring:
    def test_index_lists_endpoints(self, client):
        body = client.get("/").get_json()
        assert "/tasks" in body["endpoints"]

    def test_unknown_route_is_json_404(self, client):
        response = client.get("/does-not-exist")
        assert response.status_code == 404
        assert response.get_json() == {"error": "not found"}

    def test_wrong_method_is_json_405(self, client):
        response = client.patch("/tasks")
        assert response.status_code == 405
        assert response.get_json() == {"error": "method not allowed"}

    def test_request_id_header(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"

    def test_event_publisher_registered(self, app):
        assert len(app.extensions["event_publisher"].observers) == 3
