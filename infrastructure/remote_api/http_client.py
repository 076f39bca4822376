import logging
from typing import Any, Callable, Dict, Optional

import requests

from core import GatewayError

logger = logging.getLogger("taskdash.gateway")


class ApiHttpClient:
    """JSON-over-HTTP transport for the task API.

    The bearer token is pulled from ``token_provider`` on every request, so a
    logout takes effect immediately. No retries happen at this level.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session],
        token_provider: Callable[[], Optional[str]],
        timeout: int = 30,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.token_provider = token_provider
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self.token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        kwargs: Dict[str, Any] = {"headers": self._headers(), "timeout": self.timeout}
        if payload is not None:
            kwargs["json"] = payload
        if params:
            kwargs["params"] = params
        try:
            resp = getattr(self.session, method)(url, **kwargs)
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method.upper(), path, exc)
            raise GatewayError(f"Network error: {exc}") from exc
        if resp.status_code >= 400:
            logger.warning("%s %s -> HTTP %s", method.upper(), path, resp.status_code)
            raise GatewayError(_error_message(resp), status_code=resp.status_code)
        if resp.status_code == 204 or not (resp.text or "").strip():
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise GatewayError(f"Malformed response from {path}", status_code=resp.status_code) from exc


def _error_message(resp: Any) -> str:
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if message:
            return f"HTTP {resp.status_code}: {message}"
    return f"HTTP {resp.status_code}: {(resp.text or '')[:120]}"
