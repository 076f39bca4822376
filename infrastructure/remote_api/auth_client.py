from typing import Any, Tuple

from core import GatewayError, User

from .http_client import ApiHttpClient


class AuthClient:
    def __init__(self, http: ApiHttpClient) -> None:
        self.http = http

    def login(self, email: str, password: str) -> Tuple[str, User]:
        body = self.http.request("post", "/auth/login", {"email": email, "password": password})
        return _credentials(body)

    def register(self, name: str, email: str, password: str) -> Tuple[str, User]:
        body = self.http.request("post", "/auth/register", {"name": name, "email": email, "password": password})
        return _credentials(body)


def _credentials(body: Any) -> Tuple[str, User]:
    if not isinstance(body, dict):
        raise GatewayError("Auth response is not an object")
    token = body.get("token")
    raw_user = body.get("user")
    if not token or not isinstance(raw_user, dict):
        raise GatewayError("Auth response missing token or user")
    try:
        user = User.from_dict(raw_user)
    except ValueError as exc:
        raise GatewayError(str(exc)) from exc
    return str(token), user
