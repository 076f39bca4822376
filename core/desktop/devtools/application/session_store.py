"""Authenticated session ownership: bootstrap, login/register/logout, token access."""

import json
import logging
from threading import Lock
from typing import Callable, List, Optional

from application.ports import AuthGateway, KeyValueStorage
from core import AuthError, GatewayError, Session, SessionEvent, StateInconsistencyError, User

logger = logging.getLogger("taskdash.session")

TOKEN_KEY = "token"
USER_KEY = "user"
SESSION_TTL_DAYS = 7

NAV_DASHBOARD = "dashboard"
NAV_LOGIN = "login"

SessionListener = Callable[[SessionEvent], None]


class SessionStore:
    def __init__(self, storage: KeyValueStorage, auth_gateway: AuthGateway, *, ttl_days: float = SESSION_TTL_DAYS) -> None:
        self.storage = storage
        self.auth_gateway = auth_gateway
        self.ttl_seconds = float(ttl_days) * 24 * 3600
        self.bootstrapped = False
        self._session: Optional[Session] = None
        self._listeners: List[SessionListener] = []
        self._lock = Lock()

    @property
    def is_authenticated(self) -> bool:
        session = self._session
        return bool(session and session.token and session.user)

    @property
    def user(self) -> Optional[User]:
        session = self._session
        return session.user if session else None

    def token(self) -> Optional[str]:
        session = self._session
        return session.token if session else None

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _emit(self, kind: str, navigate_to: str) -> None:
        event = SessionEvent(kind=kind, navigate_to=navigate_to)
        for listener in list(self._listeners):
            listener(event)

    def bootstrap(self) -> bool:
        """Restore the persisted session; any half-present state is wiped."""
        try:
            session = self._read_persisted()
        except StateInconsistencyError as exc:
            logger.info("Discarding persisted session: %s", exc)
            self._clear_persisted()
            session = None
        with self._lock:
            self._session = session
            self.bootstrapped = True
        return session is not None

    def _read_persisted(self) -> Optional[Session]:
        token = self.storage.get(TOKEN_KEY)
        raw_user = self.storage.get(USER_KEY)
        if not token and not raw_user:
            return None
        if not token or not raw_user:
            raise StateInconsistencyError("token and user must be stored together")
        try:
            user = User.from_dict(json.loads(raw_user))
        except (ValueError, TypeError, AttributeError) as exc:
            raise StateInconsistencyError(f"unreadable user record: {exc}") from exc
        return Session(user=user, token=token)

    def _persist(self, session: Session) -> None:
        self.storage.set(TOKEN_KEY, session.token, self.ttl_seconds)
        self.storage.set(USER_KEY, json.dumps(session.user.to_dict(), ensure_ascii=False), self.ttl_seconds)

    def _clear_persisted(self) -> None:
        self.storage.remove(TOKEN_KEY)
        self.storage.remove(USER_KEY)

    def login(self, email: str, password: str) -> User:
        return self._authenticate("login", lambda: self.auth_gateway.login(email, password))

    def register(self, name: str, email: str, password: str) -> User:
        return self._authenticate("register", lambda: self.auth_gateway.register(name, email, password))

    def _authenticate(self, kind: str, call: Callable[[], tuple]) -> User:
        try:
            token, user = call()
        except GatewayError as exc:
            logger.warning("%s failed: %s", kind, exc)
            raise AuthError("Authentication failed") from exc
        session = Session(user=user, token=token)
        self._persist(session)
        with self._lock:
            self._session = session
        logger.info("%s ok for %s", kind, user.email)
        self._emit(kind, NAV_DASHBOARD)
        return user

    def logout(self) -> None:
        self._clear_persisted()
        with self._lock:
            self._session = None
        self._emit("logout", NAV_LOGIN)

    def require_login(self) -> bool:
        """Guard for views that need a session; emits a redirect when there is none."""
        if self.is_authenticated:
            return True
        self._emit("guard", NAV_LOGIN)
        return False


__all__ = ["SessionStore", "NAV_DASHBOARD", "NAV_LOGIN", "TOKEN_KEY", "USER_KEY", "SESSION_TTL_DAYS"]
