from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import requests

from errors import AuthenticationError, RemoteError

DEFAULT_TIMEOUT = 30
TOKEN_PATH = "/identity/api/tokens"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GatewayResponse:
    status_code: int
    body: Any


def classify_response(
    response: GatewayResponse,
    *,
    context: Optional[str] = None,
    success_statuses: Iterable[int] = (200,),
) -> Any:
    """Return the body of a successful response, raise ``RemoteError`` otherwise.

    The error carries the response body untouched so callers see exactly what
    the server sent.
    """

    if response.status_code in set(success_statuses):
        return response.body
    raise RemoteError(response.body, status_code=response.status_code, context=context)


class HttpGateway:
    """Thin wrapper around ``requests.Session`` for the vRA REST endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        tenant: Optional[str] = None,
        token: Optional[str] = None,
        verify_ssl: bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.username = username
        self.password = password
        self.tenant = tenant
        self.token = token
        self.verify_ssl = verify_ssl
        self.timeout = timeout
        self._session = session or requests.Session()

    # ------------------------------------------------------------------
    # Auth helpers
    # ------------------------------------------------------------------
    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def connect(self) -> str:
        if not self.has_credentials:
            raise AuthenticationError("username and password must be configured to request a token")

        payload = {"username": self.username, "password": self.password, "tenant": self.tenant}
        response = self._send("POST", f"{self.base_url}{TOKEN_PATH}", json=payload, headers={})
        if response.status_code >= 400:
            raise AuthenticationError("token request rejected", details=response.body)
        token = response.body.get("id") if isinstance(response.body, dict) else None
        if not token:
            raise AuthenticationError("identity service returned no token", details=response.body)

        self.token = token
        return token

    def ensure_auth(self) -> None:
        if not self.token and self.has_credentials:
            self.connect()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------
    def get(self, url: str) -> GatewayResponse:
        self.ensure_auth()
        return self._send("GET", url, headers=self._headers())

    def post(self, url: str, *, json: Any = None) -> GatewayResponse:
        self.ensure_auth()
        return self._send("POST", url, json=json, headers=self._headers())

    def _send(self, method: str, url: str, *, headers: Dict[str, str], json: Any = None) -> GatewayResponse:
        logger.debug("%s %s", method, url)
        resp = self._session.request(
            method,
            url,
            json=json,
            headers=headers,
            timeout=self.timeout,
            verify=self.verify_ssl,
        )
        if resp.status_code == 401 and self.token and self.has_credentials:
            # expired or revoked; the next call fetches a fresh token
            self.token = None
        return GatewayResponse(status_code=resp.status_code, body=self._response_body(resp))

    @staticmethod
    def _response_body(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text
