import pytest
import requests

from core import GatewayError, TaskPage
from infrastructure.remote_api import ApiHttpClient, AuthClient, TasksClient


class DummyResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else ("" if payload is None else str(payload))

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class FakeSession:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []

    def _record(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, **kwargs):
        return self._record("get", url, **kwargs)

    def post(self, url, **kwargs):
        return self._record("post", url, **kwargs)

    def patch(self, url, **kwargs):
        return self._record("patch", url, **kwargs)

    def delete(self, url, **kwargs):
        return self._record("delete", url, **kwargs)

    def close(self):
        pass


def _client(responses, token="tok"):
    session = FakeSession(responses)
    http = ApiHttpClient("http://api.test/api/", session, token_provider=lambda: token, timeout=5)
    return http, session


def test_bearer_header_attached_when_token_present():
    http, session = _client([DummyResponse(200, {"tasks": [], "totalPages": 0})])
    TasksClient(http).list_tasks(1, 10)
    method, url, kwargs = session.calls[0]
    assert method == "get"
    assert url == "http://api.test/api/tasks"
    assert kwargs["headers"]["Authorization"] == "Bearer tok"
    assert kwargs["timeout"] == 5


def test_no_authorization_without_token():
    http, session = _client([DummyResponse(200, {"tasks": [], "totalPages": 0})], token=None)
    TasksClient(http).list_tasks(1, 10)
    assert "Authorization" not in session.calls[0][2]["headers"]


def test_list_tasks_omits_empty_search():
    http, session = _client(
        [
            DummyResponse(200, {"tasks": [{"_id": "1", "title": "a"}], "totalPages": 1}),
            DummyResponse(200, {"tasks": [], "totalPages": 0}),
        ]
    )
    client = TasksClient(http)
    page = client.list_tasks(2, 10, "")
    assert isinstance(page, TaskPage)
    assert page.tasks[0].id == "1"
    assert session.calls[0][2]["params"] == {"page": 2, "limit": 10}
    client.list_tasks(1, 10, "milk")
    assert session.calls[1][2]["params"] == {"page": 1, "limit": 10, "search": "milk"}


def test_create_update_delete_endpoints():
    http, session = _client(
        [
            DummyResponse(201, {"_id": "n1", "title": "New"}),
            DummyResponse(200, {"_id": "n1", "title": "New", "completed": True}),
            DummyResponse(204, None),
        ]
    )
    client = TasksClient(http)
    created = client.create_task("New", None)
    assert created.id == "n1"
    assert session.calls[0][2]["json"] == {"title": "New"}
    updated = client.update_task("n1", {"completed": True})
    assert updated.completed is True
    assert session.calls[1][0] == "patch"
    assert session.calls[1][1].endswith("/tasks/n1")
    assert client.delete_task("n1") is None
    assert session.calls[2][0] == "delete"


def test_http_error_maps_to_gateway_error():
    http, _ = _client([DummyResponse(500, {"message": "boom"})])
    with pytest.raises(GatewayError) as exc:
        TasksClient(http).list_tasks(1, 10)
    assert exc.value.status_code == 500
    assert "boom" in str(exc.value)


def test_network_error_is_not_retried():
    http, session = _client([requests.ConnectionError("down"), DummyResponse(200, {})])
    with pytest.raises(GatewayError):
        TasksClient(http).list_tasks(1, 10)
    assert len(session.calls) == 1


def test_malformed_json_raises():
    http, _ = _client([DummyResponse(200, None, text="<html>")])
    with pytest.raises(GatewayError):
        http.request("get", "/tasks")


def test_auth_client_login_and_register():
    http, session = _client(
        [
            DummyResponse(200, {"token": "t1", "user": {"_id": "u1", "name": "Ann", "email": "a@x.io"}}),
            DummyResponse(201, {"token": "t2", "user": {"_id": "u2", "name": "Bob", "email": "b@x.io"}}),
        ],
        token=None,
    )
    auth = AuthClient(http)
    token, user = auth.login("a@x.io", "pw")
    assert token == "t1" and user.name == "Ann"
    assert session.calls[0][1].endswith("/auth/login")
    assert session.calls[0][2]["json"] == {"email": "a@x.io", "password": "pw"}
    token, user = auth.register("Bob", "b@x.io", "pw")
    assert token == "t2" and user.id == "u2"
    assert session.calls[1][1].endswith("/auth/register")


def test_auth_client_rejects_incomplete_payload():
    http, _ = _client([DummyResponse(200, {"token": "t1"})], token=None)
    with pytest.raises(GatewayError):
        AuthClient(http).login("a@x.io", "pw")


@pytest.mark.parametrize(
    "body",
    [
        {"tasks": ["oops"], "totalPages": 1},
        {"tasks": 5, "totalPages": 1},
        {"tasks": {"_id": "1"}, "totalPages": 1},
        {"tasks": [{"title": "no id"}], "totalPages": 1},
    ],
)
def test_malformed_task_list_maps_to_gateway_error(body):
    http, _ = _client([DummyResponse(200, body)])
    with pytest.raises(GatewayError):
        TasksClient(http).list_tasks(1, 10)


def test_malformed_task_body_maps_to_gateway_error():
    http, _ = _client([DummyResponse(200, ["not", "an", "object"])])
    with pytest.raises(GatewayError):
        TasksClient(http).update_task("1", {"completed": True})


def test_malformed_list_lands_coordinator_in_error_state():
    from core import User
    from core.desktop.devtools.application.session_store import SessionStore
    from core.desktop.devtools.application.task_coordinator import STATUS_ERROR, TaskCoordinator
    from infrastructure.session_storage import MemorySessionStorage

    auth = type("Auth", (), {"login": lambda self, e, p: ("tok", User(id="u1", name="Ann", email=e))})()
    session = SessionStore(MemorySessionStorage(), auth)
    session.login("ann@example.com", "pw")
    http, _ = _client([DummyResponse(200, {"tasks": ["oops"]}), DummyResponse(200, {"tasks": 5})] * 2)
    coordinator = TaskCoordinator(TasksClient(http), session)
    state = coordinator.load()
    assert state.status == STATUS_ERROR
    assert coordinator.poll() is False
    assert coordinator.retry().status == STATUS_ERROR
