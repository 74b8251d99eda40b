"""Unit tests for resource and data source handlers."""

import pytest
from unittest.mock import Mock

from conftest import peer_record
from wgeasy_peers.errors import NotFoundError, StatusError, ValidationError
from wgeasy_peers.handlers import (
    PeerDataSourceHandler,
    PeerResourceHandler,
    PeersDataSourceHandler,
)
from wgeasy_peers.interfaces import Peer, PeerPlan


def test_create_minimal_skips_follow_up_update(fake_vpn, fake_server):
    """Name-only create is one write, then read back."""
    handler = PeerResourceHandler(fake_vpn, Mock())

    state = handler.create(PeerPlan(name="laptop"))

    assert state["id"] == "1"
    assert state["name"] == "laptop"
    assert state["private_key"] == "priv-key"
    assert state["allowed_ips"] == []
    assert state["dns"] == []
    assert fake_server.writes_to("1") == []


def test_create_with_extra_fields_updates_after_create(fake_vpn, fake_server):
    """Fields the create call can't take go through a follow-up update."""
    handler = PeerResourceHandler(fake_vpn, Mock())

    state = handler.create(PeerPlan(
        name="phone",
        expires_at="2030-06-01T00:00:00.000Z",
        dns=["1.1.1.1"],
        mtu=1280,
        enabled=False,
    ))

    assert state["name"] == "phone"
    assert state["expires_at"] == "2030-06-01T00:00:00.000Z"
    assert state["dns"] == ["1.1.1.1"]
    assert state["mtu"] == 1280
    assert state["enabled"] is False

    writes = fake_server.writes_to("1")
    assert len(writes) == 1
    body = writes[0][2]
    assert body["serverAllowedIps"] == []
    assert "privateKey" not in body


def test_create_requires_name(fake_vpn, fake_server):
    handler = PeerResourceHandler(fake_vpn, Mock())

    with pytest.raises(ValidationError):
        handler.create(PeerPlan())
    assert fake_server.calls == []


def test_update_applies_set_fields_and_preserves_others(fake_vpn, fake_server):
    """Update reflects every given field and keeps unset ones."""
    handler = PeerResourceHandler(fake_vpn, Mock())
    created = handler.create(PeerPlan(
        name="desk",
        allowed_ips=["10.0.0.1/32"],
        dns=["9.9.9.9"],
        post_up="echo up",
    ))

    state = handler.update(created["id"], PeerPlan(
        mtu=1380,
        allowed_ips=[],
        dns=[],
    ))

    assert state["name"] == "desk"
    assert state["post_up"] == "echo up"
    assert state["mtu"] == 1380
    assert state["dns"] == []
    assert state["allowed_ips"] == []
    assert fake_server.clients["1"]["allowedIps"] is None
    assert fake_server.clients["1"]["dns"] == []
    assert state["updated_at"] == "2025-01-02T00:00:00.000Z"


def test_update_missing_peer_raises(fake_vpn):
    handler = PeerResourceHandler(fake_vpn, Mock())

    with pytest.raises(NotFoundError):
        handler.update("99", PeerPlan(name="x"))


def test_update_failure_logged_and_raised():
    """Write failures are logged and re-raised."""
    vpn = Mock()
    vpn.get_peer.return_value = Peer.from_api(peer_record("abc", "x"))
    vpn.update_peer.side_effect = StatusError("updating client abc", 500, "boom")
    logger = Mock()

    handler = PeerResourceHandler(vpn, logger)

    with pytest.raises(StatusError):
        handler.update("abc", PeerPlan(mtu=1300))

    logger.log.assert_called_once()
    assert logger.log.call_args[0][0] == "error"
    sent = vpn.update_peer.call_args[0][1]
    assert sent.mtu == 1300


def test_read_existing(fake_vpn, fake_server):
    handler = PeerResourceHandler(fake_vpn, Mock())
    handler.create(PeerPlan(name="tablet"))

    state = handler.read("1")

    assert state["name"] == "tablet"
    assert state["ipv4_address"] == "10.8.0.2"


def test_read_missing_drops_state(fake_vpn):
    """A vanished peer reads as None and logs a warning."""
    logger = Mock()
    handler = PeerResourceHandler(fake_vpn, logger)

    assert handler.read("42") is None
    assert logger.log.call_args[0][0] == "warn"


def test_delete_is_idempotent(fake_vpn, fake_server):
    handler = PeerResourceHandler(fake_vpn, Mock())
    handler.create(PeerPlan(name="old"))

    handler.delete("1")
    handler.delete("1")

    assert fake_server.clients == {}


def test_delete_ignores_not_found_from_provider():
    vpn = Mock()
    vpn.delete_peer.side_effect = NotFoundError("x")

    PeerResourceHandler(vpn, Mock()).delete("x")

    vpn.delete_peer.assert_called_once_with("x")


def test_import_state(fake_vpn, fake_server):
    handler = PeerResourceHandler(fake_vpn, Mock())
    handler.create(PeerPlan(name="imported"))

    assert handler.import_state("1")["name"] == "imported"
    with pytest.raises(NotFoundError):
        handler.import_state("404")


def test_session_reused_across_operations(fake_vpn, fake_server):
    """One login serves a whole create/update/read cycle."""
    handler = PeerResourceHandler(fake_vpn, Mock())

    created = handler.create(PeerPlan(name="a", mtu=1300))
    handler.update(created["id"], PeerPlan(name="b"))
    handler.read(created["id"])

    assert fake_server.logins == 1


def test_datasource_single_peer(fake_vpn):
    PeerResourceHandler(fake_vpn, Mock()).create(PeerPlan(name="one"))
    handler = PeerDataSourceHandler(fake_vpn, Mock())

    assert handler.read("1")["name"] == "one"


def test_datasource_single_peer_missing_is_error(fake_vpn):
    logger = Mock()
    handler = PeerDataSourceHandler(fake_vpn, logger)

    with pytest.raises(NotFoundError) as exc_info:
        handler.read("7")

    assert exc_info.value.found_ids == []
    assert logger.log.call_args[0][0] == "error"


def test_datasource_all_peers(fake_vpn):
    resources = PeerResourceHandler(fake_vpn, Mock())
    resources.create(PeerPlan(name="one"))
    resources.create(PeerPlan(name="two"))

    state = PeersDataSourceHandler(fake_vpn, Mock()).read()

    assert [c["name"] for c in state["clients"]] == ["one", "two"]
    assert [c["id"] for c in state["clients"]] == ["1", "2"]
