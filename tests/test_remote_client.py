import json
from unittest.mock import MagicMock

import pytest
import requests
from conftest import make_response

from todobridge.api.client import RemoteActionClient
from todobridge.config import Config
from todobridge.exceptions import (
    DeadlineExceededError,
    DecodeError,
    MissingCredentialsError,
    RemoteRejectedError,
    RemoteStatusError,
    TransportError,
    ValidationError,
)
from todobridge.models.remote import EmptySuccess, Payload

BASE_URL = "https://api.example.test"
TODO_ID = "11111111-1111-1111-1111-111111111111"


@pytest.fixture
def client():
    api_client = RemoteActionClient(api_key="test-key", base_url=BASE_URL, default_timeout=10)
    api_client.session = MagicMock()
    return api_client


def sent_request(client):
    args, kwargs = client.session.request.call_args
    return args[0], args[1], kwargs


class TestConstruction:
    def test_missing_credential_raises(self):
        config = Config(api_key=None, _env_file=None)
        with pytest.raises(MissingCredentialsError):
            RemoteActionClient(config=config)

    def test_values_fall_back_to_config(self):
        config = Config(
            api_key="from-config",
            api_base_url="https://tasks.example.test/",
            request_timeout=7,
            _env_file=None,
        )
        api_client = RemoteActionClient(config=config)
        assert api_client.api_key == "from-config"
        assert api_client.base_url == "https://tasks.example.test"
        assert api_client.default_timeout == 7

    def test_headers_carry_bearer_credential(self, client):
        assert client.headers == {
            "accept": "application/json",
            "content-type": "application/json",
            "authorization": "Bearer test-key",
        }

    def test_request_without_session_fails(self):
        api_client = RemoteActionClient(api_key="test-key", base_url=BASE_URL, default_timeout=10)
        with pytest.raises(RuntimeError):
            api_client.get(TODO_ID)

    def test_context_manager_opens_and_closes_session(self):
        api_client = RemoteActionClient(api_key="test-key", base_url=BASE_URL, default_timeout=10)
        with api_client as opened:
            assert isinstance(opened.session, requests.Session)
        assert api_client.session is None


class TestCreate:
    def test_posts_task_payload(self, client):
        client.session.request.return_value = make_response(200, b'{"task_id": "x"}')

        result = client.create(TODO_ID, "Buy milk", "2 litres")

        method, url, kwargs = sent_request(client)
        assert method == "POST"
        assert url == f"{BASE_URL}/tasks/v1/actions"
        assert json.loads(kwargs["data"]) == {"task_id": TODO_ID, "title": "Buy milk", "description": "2 litres"}
        assert kwargs["headers"]["authorization"] == "Bearer test-key"
        assert kwargs["timeout"] == 10
        assert kwargs["stream"] is True
        assert isinstance(result, Payload)

    def test_empty_body_is_empty_success(self, client):
        client.session.request.return_value = make_response(200, b"")
        assert isinstance(client.create(TODO_ID, "Buy milk", ""), EmptySuccess)

    def test_caller_deadline_overrides_default(self, client):
        client.session.request.return_value = make_response(200, b"")
        client.create(TODO_ID, "Buy milk", "", timeout=0.5)
        _, _, kwargs = sent_request(client)
        assert kwargs["timeout"] == 0.5

    def test_error_envelope_raises_remote_rejected(self, client):
        body = b'{"code": 3, "message": "task_id must be a uuid"}'
        client.session.request.return_value = make_response(400, body)

        with pytest.raises(RemoteRejectedError) as exc_info:
            client.create("not-a-uuid", "Buy milk", "")

        assert exc_info.value.remote_code == 3
        assert exc_info.value.remote_message == "task_id must be a uuid"
        assert exc_info.value.response_text == body.decode()
        assert "task_id must be a uuid" in str(exc_info.value)

    def test_error_envelope_with_2xx_still_rejected(self, client):
        client.session.request.return_value = make_response(200, b'{"code": 16, "message": "unauthenticated"}')
        with pytest.raises(RemoteRejectedError):
            client.create(TODO_ID, "Buy milk", "")

    def test_unparsable_2xx_body_raises_decode_error(self, client):
        client.session.request.return_value = make_response(200, b"<html>ok</html>")
        with pytest.raises(DecodeError) as exc_info:
            client.create(TODO_ID, "Buy milk", "")
        assert exc_info.value.response_text == "<html>ok</html>"

    def test_non_2xx_without_envelope_raises_status_error(self, client):
        client.session.request.return_value = make_response(502, b"<html>bad gateway</html>")
        with pytest.raises(RemoteStatusError) as exc_info:
            client.create(TODO_ID, "Buy milk", "")
        assert exc_info.value.status_code == 502
        assert isinstance(exc_info.value, TransportError)

    def test_non_2xx_with_empty_body_is_not_success(self, client):
        client.session.request.return_value = make_response(500, b"")
        with pytest.raises(RemoteStatusError):
            client.create(TODO_ID, "Buy milk", "")

    def test_timeout_raises_deadline_exceeded(self, client):
        client.session.request.side_effect = requests.exceptions.ReadTimeout("slow")
        with pytest.raises(DeadlineExceededError) as exc_info:
            client.create(TODO_ID, "Buy milk", "", timeout=1.5)
        assert exc_info.value.timeout_seconds == 1.5

    @pytest.mark.parametrize("timeout", [0, -1, float("inf"), float("nan")])
    def test_unusable_deadline_rejected_before_sending(self, client, timeout):
        with pytest.raises(ValidationError) as exc_info:
            client.create(TODO_ID, "Buy milk", "", timeout=timeout)
        assert exc_info.value.field == "timeout"
        client.session.request.assert_not_called()

    def test_response_is_closed_after_reading(self, client):
        response = make_response(200, b"")
        client.session.request.return_value = response
        client.create(TODO_ID, "Buy milk", "")
        response.close.assert_called_once()

    def test_connection_failure_raises_transport_error(self, client):
        client.session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TransportError):
            client.create(TODO_ID, "Buy milk", "")

    def test_no_retry_on_failure(self, client):
        client.session.request.side_effect = requests.exceptions.ConnectionError("refused")
        with pytest.raises(TransportError):
            client.create(TODO_ID, "Buy milk", "")
        assert client.session.request.call_count == 1


class TestBulkDelete:
    def test_posts_id_list(self, client):
        client.session.request.return_value = make_response(200, b"")

        result = client.bulk_delete(["a", "b"])

        method, url, kwargs = sent_request(client)
        assert method == "POST"
        assert url == f"{BASE_URL}/tasks/v1/actions/delete"
        assert json.loads(kwargs["data"]) == {"ids": ["a", "b"]}
        assert kwargs["headers"]["content-type"] == "application/json"
        assert isinstance(result, EmptySuccess)

    def test_not_found_envelope(self, client):
        client.session.request.return_value = make_response(404, b'{"code": 404, "message": "not found"}')
        with pytest.raises(RemoteRejectedError) as exc_info:
            client.bulk_delete(["a"])
        assert exc_info.value.remote_message == "not found"


class TestGet:
    def test_gets_task_by_id(self, client):
        client.session.request.return_value = make_response(200, b'{"task_id": "abc"}')

        result = client.get("abc")

        method, url, kwargs = sent_request(client)
        assert method == "GET"
        assert url == f"{BASE_URL}/tasks/v1/actions/abc"
        assert kwargs["data"] is None
        assert kwargs["headers"]["authorization"] == "Bearer test-key"
        assert isinstance(result, Payload)
