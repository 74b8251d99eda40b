"""Handlers for the read-only wgeasy_client and wgeasy_clients lookups."""

from typing import Any

from ..errors import WGEasyError
from ..interfaces import ILogSink, IPeerProvider
from .state import peer_to_state


class PeerDataSourceHandler:
    """Look up a single peer by ID."""

    def __init__(self, vpn: IPeerProvider, logger: ILogSink):
        self.vpn = vpn
        self.logger = logger

    def read(self, peer_id: str) -> dict[str, Any]:
        # Unlike the resource, a missing peer is an error here
        try:
            return peer_to_state(self.vpn.get_peer(peer_id))
        except WGEasyError as e:
            self.logger.log("error", f"Reading client {peer_id} failed: {e}")
            raise


class PeersDataSourceHandler:
    """Fetch every peer on the server."""

    def __init__(self, vpn: IPeerProvider, logger: ILogSink):
        self.vpn = vpn
        self.logger = logger

    def read(self) -> dict[str, Any]:
        try:
            peers = self.vpn.list_peers()
        except WGEasyError as e:
            self.logger.log("error", f"Reading clients failed: {e}")
            raise

        return {"clients": [peer_to_state(peer) for peer in peers]}
