import json

import pytest

from core import AuthError, GatewayError, User
from core.desktop.devtools.application.session_store import (
    NAV_DASHBOARD,
    NAV_LOGIN,
    TOKEN_KEY,
    USER_KEY,
    SessionStore,
)
from infrastructure.session_storage import MemorySessionStorage


class FakeAuth:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def login(self, email, password):
        self.calls.append(("login", email, password))
        if self.fail:
            raise GatewayError("HTTP 401: Invalid credentials", status_code=401)
        return "tok-login", User(id="u1", name="Ann", email=email)

    def register(self, name, email, password):
        self.calls.append(("register", name, email, password))
        if self.fail:
            raise GatewayError("HTTP 400: Email taken", status_code=400)
        return "tok-register", User(id="u2", name=name, email=email)


def _store(storage=None, auth=None):
    storage = storage if storage is not None else MemorySessionStorage()
    store = SessionStore(storage, auth or FakeAuth())
    events = []
    store.subscribe(events.append)
    return store, storage, events


def test_bootstrap_without_persisted_state():
    store, _, events = _store()
    assert store.bootstrap() is False
    assert store.bootstrapped
    assert not store.is_authenticated
    assert store.token() is None
    assert events == []


def test_bootstrap_restores_consistent_session():
    storage = MemorySessionStorage()
    storage.set(TOKEN_KEY, "tok", 60)
    storage.set(USER_KEY, json.dumps({"id": "u1", "name": "Ann", "email": "ann@example.com"}), 60)
    store, _, _ = _store(storage)
    assert store.bootstrap() is True
    assert store.is_authenticated
    assert store.user.email == "ann@example.com"
    assert store.token() == "tok"


@pytest.mark.parametrize(
    "token,user",
    [
        ("tok", None),
        (None, json.dumps({"id": "u1", "email": "a@b.c"})),
        ("tok", "{not json"),
        ("tok", json.dumps({"name": "no id"})),
    ],
)
def test_bootstrap_clears_inconsistent_state(token, user):
    storage = MemorySessionStorage()
    if token:
        storage.set(TOKEN_KEY, token, 60)
    if user:
        storage.set(USER_KEY, user, 60)
    store, _, _ = _store(storage)
    assert store.bootstrap() is False
    assert not store.is_authenticated
    assert storage.get(TOKEN_KEY) is None
    assert storage.get(USER_KEY) is None


def test_login_persists_and_navigates_to_dashboard():
    store, storage, events = _store()
    store.bootstrap()
    user = store.login("ann@example.com", "secret")
    assert user.email == "ann@example.com"
    assert store.is_authenticated
    assert store.token() == "tok-login"
    assert storage.get(TOKEN_KEY) == "tok-login"
    assert json.loads(storage.get(USER_KEY))["email"] == "ann@example.com"
    assert [(e.kind, e.navigate_to) for e in events] == [("login", NAV_DASHBOARD)]


def test_register_behaves_like_login():
    store, storage, events = _store()
    store.register("Bob", "bob@example.com", "pw")
    assert store.user.name == "Bob"
    assert storage.get(TOKEN_KEY) == "tok-register"
    assert events[-1].navigate_to == NAV_DASHBOARD


def test_login_failure_leaves_state_untouched():
    store, storage, events = _store(auth=FakeAuth(fail=True))
    with pytest.raises(AuthError) as exc:
        store.login("ann@example.com", "wrong")
    assert isinstance(exc.value.__cause__, GatewayError)
    assert not store.is_authenticated
    assert storage.get(TOKEN_KEY) is None
    assert events == []


def test_session_entries_use_seven_day_ttl():
    now = [0.0]
    storage = MemorySessionStorage(clock=lambda: now[0])
    store, _, _ = _store(storage)
    store.login("ann@example.com", "pw")
    now[0] = 7 * 24 * 3600 - 1
    assert storage.get(TOKEN_KEY) == "tok-login"
    now[0] = 7 * 24 * 3600
    assert storage.get(TOKEN_KEY) is None


def test_logout_clears_everything_and_redirects():
    store, storage, events = _store()
    store.login("ann@example.com", "pw")
    store.logout()
    assert not store.is_authenticated
    assert store.token() is None
    assert storage.get(TOKEN_KEY) is None
    assert storage.get(USER_KEY) is None
    assert (events[-1].kind, events[-1].navigate_to) == ("logout", NAV_LOGIN)


def test_require_login_guard():
    store, _, events = _store()
    assert store.require_login() is False
    assert (events[-1].kind, events[-1].navigate_to) == ("guard", NAV_LOGIN)
    store.login("ann@example.com", "pw")
    assert store.require_login() is True


def test_unsubscribe_stops_events():
    store = SessionStore(MemorySessionStorage(), FakeAuth())
    events = []
    unsubscribe = store.subscribe(events.append)
    unsubscribe()
    store.login("ann@example.com", "pw")
    assert events == []
