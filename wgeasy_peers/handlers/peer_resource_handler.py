"""Handler for the wgeasy_client resource."""

from typing import Any, Optional

from ..errors import NotFoundError, ValidationError, WGEasyError
from ..interfaces import CreatePeerRequest, ILogSink, IPeerProvider, PeerPlan, is_set
from ..reconcile import build_update_request, needs_follow_up_update
from .state import peer_to_state


class PeerResourceHandler:
    """Create, read, update and delete one managed peer."""

    def __init__(self, vpn: IPeerProvider, logger: ILogSink):
        self.vpn = vpn
        self.logger = logger

    def create(self, plan: PeerPlan) -> dict[str, Any]:
        """Create the peer, apply fields the create call can't take, read back."""
        if not is_set(plan.name) or not plan.name:
            raise ValidationError("client name required")

        expires_at = plan.expires_at if is_set(plan.expires_at) else None
        try:
            peer_id = self.vpn.create_peer(
                CreatePeerRequest(name=plan.name, expires_at=expires_at)
            )

            if needs_follow_up_update(plan):
                current = self.vpn.get_peer(peer_id)
                self.vpn.update_peer(peer_id, build_update_request(plan, current))

            return peer_to_state(self.vpn.get_peer(peer_id))

        except WGEasyError as e:
            self.logger.log("error", f"Create client {plan.name!r} failed: {e}")
            raise

    def read(self, peer_id: str) -> Optional[dict[str, Any]]:
        """Current state, or None when the peer no longer exists."""
        try:
            peer = self.vpn.get_peer(peer_id)
        except NotFoundError:
            self.logger.log("warn", f"Client {peer_id} gone, dropping from state")
            return None

        return peer_to_state(peer)

    def update(self, peer_id: str, plan: PeerPlan) -> dict[str, Any]:
        """Merge the plan into current server state and write it."""
        try:
            current = self.vpn.get_peer(peer_id)
            self.vpn.update_peer(peer_id, build_update_request(plan, current))
            return peer_to_state(self.vpn.get_peer(peer_id))

        except WGEasyError as e:
            # State on the server is unknown now; callers re-read before retrying
            self.logger.log("error", f"Update client {peer_id} failed: {e}")
            raise

    def delete(self, peer_id: str) -> None:
        """Delete the peer (idempotent)."""
        try:
            self.vpn.delete_peer(peer_id)
        except NotFoundError:
            return

    def import_state(self, peer_id: str) -> dict[str, Any]:
        """Adopt an existing peer by ID."""
        return peer_to_state(self.vpn.get_peer(peer_id))
