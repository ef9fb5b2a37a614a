import json
from unittest.mock import MagicMock

import pytest

from todobridge.cache.todo import TodoCache
from todobridge.models.remote import EmptySuccess, Payload
from todobridge.services.todo_bridge import TodoBridgeService

TODO_ID = "11111111-1111-1111-1111-111111111111"
OTHER_ID = "22222222-2222-2222-2222-222222222222"


class FakeTaskAPI:
    """Scripted stand-in for RemoteActionClient.

    Each outcome is either a classified result to return or an exception to raise.
    """

    def __init__(self):
        self.create_outcome = EmptySuccess()
        self.delete_outcome = EmptySuccess()
        self.get_outcome = Payload(body=b'{"task_id": "x"}')
        self.calls = []

    def _respond(self, outcome):
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def create(self, todo_id, title, description, timeout=None):
        self.calls.append(("create", todo_id, title, description, timeout))
        return self._respond(self.create_outcome)

    def bulk_delete(self, ids, timeout=None):
        self.calls.append(("bulk_delete", list(ids), timeout))
        return self._respond(self.delete_outcome)

    def get(self, todo_id, timeout=None):
        self.calls.append(("get", todo_id, timeout))
        return self._respond(self.get_outcome)


def make_response(status_code=200, body=b""):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.content = body
    response.text = body.decode("utf-8", errors="replace")
    response.ok = 200 <= status_code < 400
    response.json.side_effect = lambda: json.loads(body)
    response.iter_content.side_effect = lambda chunk_size=1: iter([body])
    return response


@pytest.fixture
def cache():
    return TodoCache()


@pytest.fixture
def fake_api():
    return FakeTaskAPI()


@pytest.fixture
def service(fake_api, cache):
    return TodoBridgeService(fake_api, cache)
