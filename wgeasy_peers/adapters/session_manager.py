"""Cookie session lifecycle for the wg-easy HTTP API."""

import threading
from dataclasses import dataclass
from typing import Optional

import requests

from ..config import DEFAULT_TIMEOUT, USER_AGENT
from ..errors import AuthenticationError, TransportError
from ..interfaces import ILogSink
from .stdout_adapter import StdoutAdapter

SESSION_PATH = "/api/session"


@dataclass(frozen=True)
class Credentials:
    """wg-easy endpoint and login."""
    endpoint: str
    username: str
    password: str

    def __post_init__(self):
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))

    def __repr__(self) -> str:
        return f"Credentials(endpoint={self.endpoint!r}, username={self.username!r})"


class SessionManager:
    """Owns the cookie jar and the authenticated flag.

    The lock guards only the check-and-login sequence, never a whole
    request, so ordinary requests do not contend on it. Every successful
    login bumps ``generation``; ``invalidate`` with a stale generation is a
    no-op, which keeps concurrent 401s from triggering duplicate logins.
    """

    def __init__(
        self,
        credentials: Credentials,
        timeout: float = DEFAULT_TIMEOUT,
        http: Optional[requests.Session] = None,
        logger: Optional[ILogSink] = None,
    ):
        self.credentials = credentials
        self.timeout = timeout
        self.http = http if http is not None else requests.Session()
        self.logger = logger or StdoutAdapter()
        self.authenticated = False
        self.generation = 0
        self._lock = threading.Lock()

    @property
    def endpoint(self) -> str:
        return self.credentials.endpoint

    def headers(self, with_body: bool = False) -> dict:
        """Headers sent on every API call."""
        headers = {
            "Accept": "application/json",
            "User-Agent": USER_AGENT,
        }
        if with_body:
            headers["Content-Type"] = "application/json"
        return headers

    def login(self) -> None:
        """POST credentials; the session cookie lands in the jar."""
        try:
            resp = self.http.post(
                f"{self.endpoint}{SESSION_PATH}",
                json={
                    "username": self.credentials.username,
                    "password": self.credentials.password,
                    "remember": True,
                },
                headers=self.headers(with_body=True),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"login request failed: {e}") from e

        if resp.status_code != 200:
            self.logger.log(
                "error", f"wg-easy login rejected: {resp.status_code}"
            )
            raise AuthenticationError(
                "login rejected", status=resp.status_code, body=resp.text
            )

    def ensure_authenticated(self) -> int:
        """Log in unless already authenticated; return the login generation."""
        with self._lock:
            if self.authenticated:
                return self.generation

            self.login()
            self.authenticated = True
            self.generation += 1
            self.logger.log(
                "info",
                f"Logged in to {self.endpoint} as {self.credentials.username!r}",
            )
            return self.generation

    def invalidate(self, generation: Optional[int] = None) -> None:
        """Mark the session expired.

        With ``generation``, only a session from that login is invalidated;
        a newer login by another caller is left alone.
        """
        with self._lock:
            if generation is not None and generation != self.generation:
                return
            self.authenticated = False
