"""Interface definitions for wg-easy peer adapters."""

from .i_peer_provider import (
    IPeerProvider,
    Peer,
    CreatePeerRequest,
    UpdatePeerRequest,
    normalize_id,
)
from .i_desired_state import PeerPlan, UNSET, is_set
from .i_log_sink import ILogSink

__all__ = [
    'IPeerProvider',
    'Peer',
    'CreatePeerRequest',
    'UpdatePeerRequest',
    'normalize_id',
    'PeerPlan',
    'UNSET',
    'is_set',
    'ILogSink',
]
