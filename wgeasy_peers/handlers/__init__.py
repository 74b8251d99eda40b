"""Handlers binding peer operations to the configuration engine."""

from .peer_resource_handler import PeerResourceHandler
from .peer_datasource_handler import PeerDataSourceHandler, PeersDataSourceHandler
from .state import peer_to_state

# Type name to handler mapping (table-driven)
RESOURCE_HANDLERS = {
    'wgeasy_client': PeerResourceHandler,
}

DATA_SOURCE_HANDLERS = {
    'wgeasy_client': PeerDataSourceHandler,
    'wgeasy_clients': PeersDataSourceHandler,
}

__all__ = [
    'PeerResourceHandler',
    'PeerDataSourceHandler',
    'PeersDataSourceHandler',
    'peer_to_state',
    'RESOURCE_HANDLERS',
    'DATA_SOURCE_HANDLERS',
]
