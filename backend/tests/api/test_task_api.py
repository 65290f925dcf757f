"""API tests for the /tasks endpoints."""

import pytest


def create_task(client, title="Buy milk", description=""):
    response = client.post("/tasks", json={"title": title, "description": description})
    assert response.status_code == 201
    return response.get_json()


class TestTaskCreate:
    def test_create_task(self, client, response_helper):
        body = response_helper.assert_json_response(
            client.post("/tasks", json={"title": "Buy milk", "description": "2 litres"}),
            201,
        )
        assert isinstance(body["id"], int)
        assert body["title"] == "Buy milk"
        assert body["description"] == "2 litres"
        assert body["completed"] is False
        assert body["created_at"] and body["updated_at"]

    def test_empty_title(self, client, response_helper):
        response_helper.assert_error(
            client.post("/tasks", json={"title": ""}), 400, "task title cannot be empty"
        )

    def test_title_too_long(self, client, response_helper):
        response_helper.assert_error(
            client.post("/tasks", json={"title": "x" * 201}),
            400,
            "task title cannot exceed 200 characters",
        )

    @pytest.mark.parametrize("payload", ["not json", "[1, 2]"])
    def test_invalid_body(self, client, response_helper, payload):
        response = client.post("/tasks", data=payload, content_type="application/json")
        response_helper.assert_error(response, 400, "invalid request body")


class TestTaskRead:
    def test_list_newest_first(self, client):
        create_task(client, "first")
        create_task(client, "second")

        titles = [t["title"] for t in client.get("/tasks").get_json()]
        assert titles == ["second", "first"]

    def test_empty_list(self, client):
        response = client.get("/tasks")
        assert response.status_code == 200
        assert response.get_json() == []

    def test_get_task(self, client):
        task = create_task(client)
        response = client.get(f"/tasks/{task['id']}")
        assert response.status_code == 200
        assert response.get_json()["title"] == "Buy milk"

    def test_get_missing(self, client, response_helper):
        response_helper.assert_error(client.get("/tasks/9999"), 404, "task not found")

    def test_get_non_numeric_id(self, client, response_helper):
        response_helper.assert_error(client.get("/tasks/abc"), 400, "invalid task id")

    @pytest.mark.parametrize("raw_id", ["99999999999999999999", "9223372036854775808", "5_0", "%205"])
    def test_id_outside_int64_or_malformed(self, client, response_helper, raw_id):
        response_helper.assert_error(client.get(f"/tasks/{raw_id}"), 400, "invalid task id")

    def test_largest_int64_id_is_looked_up(self, client, response_helper):
        response_helper.assert_error(
            client.get("/tasks/9223372036854775807"), 404, "task not found"
        )

    @pytest.mark.parametrize(
        "method, suffix", [("put", ""), ("delete", ""), ("post", "/complete"), ("post", "/reopen")]
    )
    def test_oversized_id_on_write_routes(self, client, response_helper, method, suffix):
        response = getattr(client, method)(
            f"/tasks/99999999999999999999{suffix}", json={"title": "x"}
        )
        response_helper.assert_error(response, 400, "invalid task id")


class TestTaskWrite:
    def test_update(self, client):
        task = create_task(client)
        response = client.put(
            f"/tasks/{task['id']}",
            json={"title": "Buy oat milk", "description": "", "completed": True},
        )
        assert response.status_code == 200
        body = response.get_json()
        assert body["title"] == "Buy oat milk"
        assert body["completed"] is True

    def test_update_validation_leaves_task_unchanged(self, client):
        task = create_task(client)
        response = client.put(f"/tasks/{task['id']}", json={"title": ""})
        assert response.status_code == 400
        assert client.get(f"/tasks/{task['id']}").get_json()["title"] == "Buy milk"

    def test_update_missing(self, client):
        assert client.put("/tasks/9999", json={"title": "x"}).status_code == 404

    def test_complete_and_reopen(self, client):
        task = create_task(client)
        completed = client.post(f"/tasks/{task['id']}/complete").get_json()
        assert completed["completed"] is True
        reopened = client.post(f"/tasks/{task['id']}/reopen").get_json()
        assert reopened["completed"] is False

    def test_delete(self, client):
        task = create_task(client)
        response = client.delete(f"/tasks/{task['id']}")
        assert response.status_code == 204
        assert response.data == b""
        assert client.get(f"/tasks/{task['id']}").status_code == 404
        assert client.delete(f"/tasks/{task['id']}").status_code == 404
