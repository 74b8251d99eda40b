"""
wgeasy-peers - manage WireGuard peers on a wg-easy server.

Layers:
- adapters: cookie session, request executor, peer operations
- reconcile: partial desired state merged into full write records
- handlers: resource / data source entry points for a config engine
"""

from wgeasy_peers.adapters import WGEasyAPIAdapter
from wgeasy_peers.interfaces import UNSET, Peer, PeerPlan
from wgeasy_peers.provider import WGEasyProvider
from wgeasy_peers.reconcile import build_update_request

__version__ = "0.1.0"
__all__ = [
    "WGEasyAPIAdapter",
    "WGEasyProvider",
    "Peer",
    "PeerPlan",
    "UNSET",
    "build_update_request",
]
