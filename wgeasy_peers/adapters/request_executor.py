"""Request execution with login-on-demand and a single re-login on 401."""

from typing import Any, Optional

import requests

from ..errors import AuthenticationError, TransportError
from ..interfaces import ILogSink
from .session_manager import SessionManager


class RequestExecutor:
    """Issues one logical API call against the wg-easy server."""

    def __init__(self, session: SessionManager, logger: Optional[ILogSink] = None):
        self.session = session
        self.logger = logger or session.logger

    def _send(self, method: str, path: str, body: Any) -> requests.Response:
        """Send the request once, no auth handling."""
        kwargs: dict[str, Any] = {
            "headers": self.session.headers(with_body=body is not None),
            "timeout": self.session.timeout,
        }
        if body is not None:
            kwargs["json"] = body

        try:
            return self.session.http.request(
                method, f"{self.session.endpoint}{path}", **kwargs
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

    def execute(
        self, method: str, path: str, body: Any = None
    ) -> requests.Response:
        """Perform one API call.

        A 401 is taken as evidence the session expired: the session is
        invalidated, login runs again and the call is retried exactly once.
        A second 401 raises AuthenticationError.
        """
        generation = self.session.ensure_authenticated()

        resp = self._send(method, path, body)
        if resp.status_code != 401:
            return resp

        # Session expired, retry once
        self.logger.log(
            "warn", f"{method} {path} returned 401, re-authenticating"
        )
        resp.close()
        self.session.invalidate(generation)
        self.session.ensure_authenticated()

        resp = self._send(method, path, body)
        if resp.status_code == 401:
            self.logger.log(
                "error", f"{method} {path} still unauthorized after re-login"
            )
            raise AuthenticationError(
                f"{method} {path} unauthorized after re-login",
                status=resp.status_code,
                body=resp.text,
            )
        return resp
