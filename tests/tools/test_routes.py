"""
HTTP tests for GET /tools and POST /tools/execute.

The app is built around the fake resolver, so no backend is contacted.
"""

import json

import pytest
from fastapi.testclient import TestClient

from gateway.main import create_app

pytestmark = pytest.mark.tools


@pytest.fixture
def client(settings, fake_resolver):
    app = create_app(settings=settings, resolver=fake_resolver)
    return TestClient(app)


class TestListTools:
    def test_returns_catalogue(self, client, registry):
        response = client.get("/tools")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        body = response.json()
        assert [entry["name"] for entry in body] == registry.names()

    def test_entry_shape(self, client):
        body = client.get("/tools").json()
        entry = next(item for item in body if item["name"] == "get_student")
        assert entry == {
            "name": "get_student",
            "description": "Get detailed information about a student by ID",
            "parameters": {
                "type": "object",
                "properties": {
                    "id": {
                        "name": "id",
                        "type": "string",
                        "description": "The ID of the student",
                        "required": True,
                    }
                },
                "required": ["id"],
            },
        }

    def test_listing_is_stable(self, client):
        assert client.get("/tools").content == client.get("/tools").content


class TestExecuteTool:
    def test_success(self, client, fake_resolver):
        response = client.post(
            "/tools/execute",
            json={"tool_name": "get_student", "params": {"id": "42"}},
            headers={"Authorization": "Bearer 42...token"},
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "result": {"id": "42", "firstName": "Ada"}}
        _, context = fake_resolver.students.get_student.await_args.args
        assert context.credential == "42...token"

    def test_missing_authorization_is_tolerated(self, client, fake_resolver):
        response = client.post(
            "/tools/execute",
            json={"tool_name": "get_course", "params": {"id": "c-1"}},
        )

        assert response.status_code == 200
        _, context = fake_resolver.courses.get_course.await_args.args
        assert context.credential is None

    def test_non_bearer_scheme_still_split(self, client, fake_resolver):
        client.post(
            "/tools/execute",
            json={"tool_name": "get_course", "params": {"id": "c-1"}},
            headers={"Authorization": "Token abc"},
        )

        _, context = fake_resolver.courses.get_course.await_args.args
        assert context.credential == "abc"

    def test_request_id_header_used(self, client, fake_resolver):
        client.post(
            "/tools/execute",
            json={"tool_name": "get_course", "params": {"id": "c-1"}},
            headers={"X-Request-ID": "req-77"},
        )

        _, context = fake_resolver.courses.get_course.await_args.args
        assert context.request_id == "req-77"

    def test_null_params_treated_as_empty(self, client, fake_resolver):
        response = client.post(
            "/tools/execute",
            json={"tool_name": "get_student", "params": None},
        )

        assert response.status_code == 400
        assert response.text == "invalid parameter 'id': missing required parameter"

    def test_unknown_tool(self, client):
        response = client.post("/tools/execute", json={"tool_name": "nonexistent", "params": {}})

        assert response.status_code == 400
        assert response.text == "tool nonexistent not found"

    def test_validation_error(self, client, fake_resolver):
        response = client.post(
            "/tools/execute",
            json={"tool_name": "get_student", "params": {"id": 42}},
        )

        assert response.status_code == 400
        assert "'id'" in response.text
        assert "expected string, got number" in response.text
        fake_resolver.students.get_student.assert_not_awaited()

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            json.dumps(["get_student"]),
            json.dumps({"params": {}}),
            json.dumps({"tool_name": "   "}),
            json.dumps({"tool_name": "get_student", "params": [1, 2]}),
            "",
        ],
    )
    def test_malformed_body(self, client, content):
        response = client.post(
            "/tools/execute",
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.text.startswith("malformed request:")

    def test_backend_failure(self, client, fake_resolver):
        fake_resolver.students.get_student.side_effect = RuntimeError("students service down")

        response = client.post(
            "/tools/execute",
            json={"tool_name": "get_student", "params": {"id": "42"}},
        )

        assert response.status_code == 502
        assert response.text == "get_student failed: students service down"


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "tools": 14}


def test_lifespan_closes_resolver(settings, fake_resolver):
    app = create_app(settings=settings, resolver=fake_resolver)
    with TestClient(app):
        pass
    fake_resolver.aclose.assert_awaited_once()
