"""Mapping from API records to the engine's state attributes."""

from typing import Any

from ..interfaces import Peer


def peer_to_state(peer: Peer) -> dict[str, Any]:
    """Flatten a Peer into snake_case state attributes.

    List fields the server reports as null become empty lists so state
    matches a plan that left them at their default; nullable scalars stay
    None.
    """
    return {
        "id": peer.id,
        "name": peer.name,
        "enabled": peer.enabled,
        "ipv4_address": peer.ipv4_address,
        "ipv6_address": peer.ipv6_address,
        "public_key": peer.public_key,
        "private_key": peer.private_key,
        "preshared_key": peer.preshared_key,
        "expires_at": peer.expires_at,
        "allowed_ips": list(peer.allowed_ips or []),
        "server_allowed_ips": list(peer.server_allowed_ips or []),
        "dns": list(peer.dns or []),
        "mtu": peer.mtu,
        "persistent_keepalive": peer.persistent_keepalive,
        "server_endpoint": peer.server_endpoint,
        "pre_up": peer.pre_up,
        "post_up": peer.post_up,
        "pre_down": peer.pre_down,
        "post_down": peer.post_down,
        "jc": peer.jc,
        "j_min": peer.j_min,
        "j_max": peer.j_max,
        "i1": peer.i1,
        "i2": peer.i2,
        "i3": peer.i3,
        "i4": peer.i4,
        "i5": peer.i5,
        "created_at": peer.created_at,
        "updated_at": peer.updated_at,
    }
