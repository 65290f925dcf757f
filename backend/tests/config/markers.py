"""
Pytest markers and collection hooks for the showcase test suite.

Markers are applied from the test file location so that
``pytest -m unit`` or ``pytest -m api`` select the matching layer.
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "api: mark test as API endpoint test")
    config.addinivalue_line("markers", "database: mark test as database-related")
    config.addinivalue_line("markers", "services: mark test as service layer test")
    config.addinivalue_line("markers", "repositories: mark test as repository test")
    config.addinivalue_line("markers", "controllers: mark test as controller test")
    config.addinivalue_line("markers", "domain: mark test as domain model test")
    config.addinivalue_line("markers", "patterns: mark test as design pattern test")
    config.addinivalue_line("markers", "solid: mark test as SOLID principle test")
    config.addinivalue_line(
        "markers", "microservices: mark test as microservice/gateway test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test items during collection."""
    for item in items:
        path = str(item.fspath)

        # Add markers based on test file location
        if "unit" in path:
            item.add_marker(pytest.mark.unit)

        if "integration" in path:
            item.add_marker(pytest.mark.integration)
            item.add_marker(pytest.mark.database)

        if "/api/" in path:
            item.add_marker(pytest.mark.api)
            item.add_marker(pytest.mark.controllers)

        if "microservices" in path:
            item.add_marker(pytest.mark.microservices)

        if "service" in path or "service" in item.name:
            item.add_marker(pytest.mark.services)

        if "repo" in path or "repository" in path:
            item.add_marker(pytest.mark.repositories)

        if "pattern" in path:
            item.add_marker(pytest.mark.patterns)

        if "solid" in path:
            item.add_marker(pytest.mark.solid)


@pytest.fixture
def response_helper():
    """Simple response helper for API tests."""

    class ResponseHelper:
        @staticmethod
        def assert_json_response(response, expected_status=200):
            assert response.status_code == expected_status
            return response.get_json()

        @staticmethod
        def assert_error(response, expected_status, message=None):
            assert response.status_code == expected_status
            body = response.get_json()
            assert "error" in body
            if message is not None:
                assert body["error"] == message
            return body

    return ResponseHelper()
