"""WireGuard API adapter (wg-easy HTTP API)."""

from typing import Any, Optional

import requests

from ..config import DEFAULT_TIMEOUT
from ..errors import DecodeError, NotFoundError, StatusError, ValidationError
from ..interfaces import (
    CreatePeerRequest,
    ILogSink,
    Peer,
    UpdatePeerRequest,
    normalize_id,
)
from .request_executor import RequestExecutor
from .session_manager import Credentials, SessionManager

CLIENTS_PATH = "/api/client"


def _decode_json(resp: requests.Response, what: str) -> Any:
    try:
        return resp.json()
    except ValueError as e:
        raise DecodeError(f"decoding {what} response: {e}", resp.text) from e


class WGEasyAPIAdapter:
    """Adapter for wg-easy HTTP API."""

    def __init__(self, executor: RequestExecutor, logger: Optional[ILogSink] = None):
        self.executor = executor
        self.logger = logger or executor.logger

    @classmethod
    def from_credentials(
        cls,
        endpoint: str,
        username: str,
        password: str,
        timeout: float = DEFAULT_TIMEOUT,
        logger: Optional[ILogSink] = None,
    ) -> "WGEasyAPIAdapter":
        """Wire session, executor and adapter for one server."""
        session = SessionManager(
            Credentials(endpoint, username, password),
            timeout=timeout,
            logger=logger,
        )
        return cls(RequestExecutor(session))

    def _client_path(self, peer_id: str) -> str:
        return f"{CLIENTS_PATH}/{peer_id}"

    def list_peers(self) -> list[Peer]:
        """List all peers."""
        resp = self.executor.execute("GET", CLIENTS_PATH)
        if resp.status_code != 200:
            raise StatusError("fetching clients", resp.status_code, resp.text)

        data = _decode_json(resp, "clients")
        if not isinstance(data, list):
            raise DecodeError("clients response is not a list", resp.text)
        return [Peer.from_api(item) for item in data]

    def get_peer(self, peer_id: str) -> Peer:
        """Find one peer in the collection (no single-item endpoint)."""
        wanted = normalize_id(peer_id)
        peers = self.list_peers()

        found_ids = []
        for peer in peers:
            found_ids.append(peer.id)
            if peer.id == wanted:
                return peer

        raise NotFoundError(wanted, found_ids)

    def create_peer(self, request: CreatePeerRequest) -> str:
        """Create new peer, return its ID."""
        if not request.name:
            raise ValidationError("client name required")

        resp = self.executor.execute("POST", CLIENTS_PATH, request.to_payload())
        if resp.status_code not in (200, 201):
            raise StatusError("creating client", resp.status_code, resp.text)

        data = _decode_json(resp, "create")
        if not isinstance(data, dict):
            raise DecodeError("create response is not an object", resp.text)

        raw_id = data.get("clientId")
        if raw_id is None:
            raise DecodeError("create response missing clientId", resp.text)
        peer_id = normalize_id(raw_id)
        if not peer_id:
            raise DecodeError("create response missing clientId", resp.text)

        self.logger.log("info", f"Created client {peer_id} ({request.name})")
        return peer_id

    def update_peer(self, peer_id: str, request: UpdatePeerRequest) -> Peer:
        """Write the full record, then re-read server-authoritative values."""
        peer_id = normalize_id(peer_id)
        resp = self.executor.execute(
            "POST", self._client_path(peer_id), request.to_payload()
        )

        if resp.status_code == 404:
            raise NotFoundError(peer_id)
        if resp.status_code != 200:
            raise StatusError(
                f"updating client {peer_id}", resp.status_code, resp.text
            )

        self.logger.log("info", f"Updated client {peer_id}")
        return self.get_peer(peer_id)

    def delete_peer(self, peer_id: str) -> None:
        """Delete peer; an already-absent peer is not an error."""
        peer_id = normalize_id(peer_id)
        resp = self.executor.execute("DELETE", self._client_path(peer_id))

        if resp.status_code == 404:
            self.logger.log("info", f"Client {peer_id} already absent")
            return
        if resp.status_code not in (200, 204):
            raise StatusError(
                f"deleting client {peer_id}", resp.status_code, resp.text
            )

        self.logger.log("info", f"Deleted client {peer_id}")
