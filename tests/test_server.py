import pytest
from fastapi.testclient import TestClient

from todobridge.exceptions import DeadlineExceededError, RemoteRejectedError, RemoteStatusError, TransportError
from todobridge.models.remote import Payload
from todobridge.models.todo import Todo
from todobridge.server.app import create_app
from todobridge.server.dependencies import get_bridge_service

TODO_ID = "11111111-1111-1111-1111-111111111111"
RPC = "/todo.TodoService"


@pytest.fixture
def client(service):
    app = create_app()
    app.dependency_overrides[get_bridge_service] = lambda: service
    return TestClient(app)


class TestHealth:
    def test_health_check(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert res.json()["message"] == "Healthy"


class TestCreateTodo:
    def test_create_returns_todo(self, client, cache):
        res = client.post(f"{RPC}/CreateTodo", json={"id": TODO_ID, "title": "Buy milk", "description": ""})

        assert res.status_code == 200
        assert res.json() == {"id": TODO_ID, "title": "Buy milk", "description": "", "completed": False}
        assert cache.get(TODO_ID) is not None

    def test_deadline_header_is_forwarded(self, client, fake_api):
        res = client.post(
            f"{RPC}/CreateTodo",
            json={"id": TODO_ID, "title": "Buy milk"},
            headers={"X-Request-Timeout": "2.5"},
        )
        assert res.status_code == 200
        assert fake_api.calls[0][-1] == 2.5

    def test_invalid_deadline_header(self, client):
        res = client.post(
            f"{RPC}/CreateTodo",
            json={"id": TODO_ID, "title": "Buy milk"},
            headers={"X-Request-Timeout": "0"},
        )
        assert res.status_code == 422

    @pytest.mark.parametrize("value", ["inf", "-inf", "nan", "Infinity"])
    def test_non_finite_deadline_header_rejected(self, client, fake_api, value):
        res = client.post(
            f"{RPC}/CreateTodo",
            json={"id": TODO_ID, "title": "Buy milk"},
            headers={"X-Request-Timeout": value},
        )
        assert res.status_code == 422
        assert res.json()["error"] == "ValidationError"
        assert fake_api.calls == []

    def test_remote_rejection_maps_to_502(self, client, fake_api, cache):
        body = '{"code": 6, "message": "already exists"}'
        fake_api.create_outcome = RemoteRejectedError("POST /tasks/v1/actions", 6, "already exists", body)

        res = client.post(f"{RPC}/CreateTodo", json={"id": TODO_ID, "title": "Buy milk"})

        assert res.status_code == 502
        data = res.json()
        assert data["error"] == "RemoteRejected"
        assert "already exists" in data["message"]
        assert data["detail"] == body
        assert not cache.has_cache()

    def test_deadline_exceeded_maps_to_504(self, client, fake_api):
        fake_api.create_outcome = DeadlineExceededError("POST /tasks/v1/actions", 1.0)
        res = client.post(f"{RPC}/CreateTodo", json={"id": TODO_ID, "title": "Buy milk"})
        assert res.status_code == 504
        assert res.json()["error"] == "DeadlineExceeded"

    def test_transport_error_maps_to_503(self, client, fake_api):
        fake_api.create_outcome = TransportError("connection refused")
        res = client.post(f"{RPC}/CreateTodo", json={"id": TODO_ID, "title": "Buy milk"})
        assert res.status_code == 503
        assert res.json()["error"] == "TransportError"

    def test_remote_status_error_maps_to_502(self, client, fake_api):
        fake_api.create_outcome = RemoteStatusError(503, "Unexpected response status 503", "upstream down")
        res = client.post(f"{RPC}/CreateTodo", json={"id": TODO_ID, "title": "Buy milk"})
        assert res.status_code == 502
        assert res.json()["detail"] == "upstream down"

    def test_empty_title_is_validation_error(self, client, fake_api):
        res = client.post(f"{RPC}/CreateTodo", json={"id": TODO_ID, "title": ""})
        assert res.status_code == 400
        assert res.json()["error"] == "ValidationError"
        assert fake_api.calls == []

    def test_missing_id_is_request_validation_error(self, client):
        res = client.post(f"{RPC}/CreateTodo", json={"title": "Buy milk"})
        assert res.status_code == 422
        assert res.json()["error"] == "ValidationError"


class TestGetTodo:
    def test_get_cached_todo(self, client, cache):
        cache.put(Todo(id=TODO_ID, title="Buy milk"))
        res = client.post(f"{RPC}/GetTodo", json={"id": TODO_ID})
        assert res.status_code == 200
        assert res.json()["title"] == "Buy milk"

    def test_get_uncached_todo_is_404(self, client):
        res = client.post(f"{RPC}/GetTodo", json={"id": TODO_ID})
        assert res.status_code == 404
        assert res.json()["error"] == "NotFound"


class TestBulkDeleteTodo:
    def test_delete_confirmed(self, client, cache):
        cache.put(Todo(id="a", title="A"))
        cache.put(Todo(id="b", title="B"))

        res = client.post(f"{RPC}/BulkDeleteTodo", json={"ids": ["a", "b"]})

        assert res.status_code == 200
        assert res.json() == {}
        assert not cache.has_cache()

    def test_delete_with_payload_reply_is_decode_error(self, client, fake_api, cache):
        cache.put(Todo(id="a", title="A"))
        fake_api.delete_outcome = Payload(body=b'{"deleted": 0}')

        res = client.post(f"{RPC}/BulkDeleteTodo", json={"ids": ["a"]})

        assert res.status_code == 502
        assert res.json()["error"] == "DecodeError"
        assert cache.get("a") is not None

    def test_delete_not_found(self, client, fake_api, cache):
        cache.put(Todo(id="a", title="A"))
        body = '{"code": 404, "message": "not found"}'
        fake_api.delete_outcome = RemoteRejectedError("POST /tasks/v1/actions/delete", 404, "not found", body)

        res = client.post(f"{RPC}/BulkDeleteTodo", json={"ids": ["a"]})

        assert res.status_code == 502
        assert "not found" in res.json()["message"]
        assert cache.get("a") is not None

    def test_empty_id_list_is_400(self, client):
        res = client.post(f"{RPC}/BulkDeleteTodo", json={"ids": []})
        assert res.status_code == 400


class TestUnimplemented:
    def test_update_is_501(self, client):
        res = client.post(f"{RPC}/UpdateTodo", json={"id": TODO_ID, "title": "x"})
        assert res.status_code == 501
        assert res.json()["error"] == "NotImplemented"

    def test_list_is_501(self, client):
        res = client.post(f"{RPC}/ListTodos", json={})
        assert res.status_code == 501
        assert res.json()["error"] == "NotImplemented"
