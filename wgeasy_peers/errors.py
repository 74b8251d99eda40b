"""Error taxonomy for the wg-easy peer client."""

from typing import Any, Optional

BODY_EXCERPT_LIMIT = 500


def excerpt(text: Any, limit: int = BODY_EXCERPT_LIMIT) -> str:
    """Bound a response body or payload for error messages."""
    if text is None:
        return ""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    text = str(text)
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


class WGEasyError(Exception):
    """Base error class for wg-easy client errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for structured output."""
        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class AuthenticationError(WGEasyError):
    """Login rejected, or a request still unauthorized after re-login."""

    def __init__(self, message: str, status: int = 0, body: str = ""):
        self.status = status
        self.body = excerpt(body)
        super().__init__(
            f"authentication failed: {message} (status {status}: {self.body})",
            {"status": status, "body": self.body},
        )


class NotFoundError(WGEasyError):
    """Peer ID absent from the server's collection."""

    def __init__(self, peer_id: str, found_ids: Optional[list[str]] = None):
        self.peer_id = peer_id
        self.found_ids = list(found_ids) if found_ids is not None else None
        message = f"client with ID {peer_id} not found"
        if self.found_ids is not None:
            message += f" (available IDs: {self.found_ids})"
        super().__init__(message, {"id": peer_id, "found_ids": self.found_ids})


class StatusError(WGEasyError):
    """Unexpected HTTP status from the API."""

    def __init__(self, message: str, status: int, body: str = ""):
        self.status = status
        self.body = excerpt(body)
        super().__init__(
            f"{message}: unexpected status {status}: {self.body}",
            {"status": status, "body": self.body},
        )


class DecodeError(WGEasyError):
    """Malformed response payload or unusable ID value."""

    def __init__(self, message: str, payload: Any = None):
        self.payload = excerpt(payload)
        if self.payload:
            message = f"{message} (payload: {self.payload})"
        super().__init__(message, {"payload": self.payload})


class TransportError(WGEasyError):
    """Connection, timeout or DNS failure. Never retried."""


class ValidationError(WGEasyError):
    """Local data issue detected before anything is sent."""


class ConfigurationError(WGEasyError):
    """Missing or invalid client configuration."""
