"""Shared fixtures: an in-memory stand-in for the wg-easy HTTP API."""

from unittest.mock import Mock
from urllib.parse import urlparse

import pytest


def make_response(status_code=200, payload=None, text=""):
    """Mock requests.Response."""
    resp = Mock(status_code=status_code, text=text)
    resp.json = Mock(return_value=payload)
    return resp


def peer_record(peer_id, name, **overrides):
    """Full client record as GET /api/client returns it."""
    record = {
        "id": peer_id,
        "userId": 1,
        "interfaceId": "wg0",
        "name": name,
        "enabled": True,
        "ipv4Address": "10.8.0.2",
        "ipv6Address": "fdcc:ad94:bacf:61a4::cafe:2",
        "publicKey": "pub-key",
        "privateKey": "priv-key",
        "preSharedKey": "psk",
        "expiresAt": None,
        "allowedIps": None,
        "serverAllowedIps": [],
        "dns": None,
        "mtu": 1420,
        "persistentKeepalive": 0,
        "serverEndpoint": None,
        "preUp": "",
        "postUp": "",
        "preDown": "",
        "postDown": "",
        "jC": 7,
        "jMin": 10,
        "jMax": 1000,
        "i1": None,
        "i2": None,
        "i3": None,
        "i4": None,
        "i5": None,
        "oneTimeLink": None,
        "createdAt": "2025-01-01T00:00:00.000Z",
        "updatedAt": "2025-01-01T00:00:00.000Z",
    }
    record.update(overrides)
    return record


class FakeWGEasyServer:
    """Routes requests.Session calls to an in-memory client table.

    Numeric IDs are used on purpose so ID normalization is exercised.
    """

    def __init__(self):
        self.clients = {}
        self.next_id = 1
        self.logins = 0
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.logins += 1
        return make_response(200, {"status": "success"})

    def request(self, method, url, headers=None, timeout=None, json=None):
        path = urlparse(url).path
        self.calls.append((method, path, json))

        if path == "/api/client":
            if method == "GET":
                return make_response(200, [dict(c) for c in self.clients.values()])
            if method == "POST":
                client_id = self.next_id
                self.next_id += 1
                self.clients[str(client_id)] = peer_record(
                    client_id,
                    json["name"],
                    ipv4Address=f"10.8.0.{client_id + 1}",
                    expiresAt=json.get("expiresAt"),
                )
                return make_response(200, {"status": "success", "clientId": client_id})

        client_id = path.rsplit("/", 1)[-1]
        if client_id not in self.clients:
            return make_response(404, None, "client not found")

        if method == "POST":
            self.clients[client_id].update(json)
            self.clients[client_id]["updatedAt"] = "2025-01-02T00:00:00.000Z"
            return make_response(200, {"success": True})
        if method == "DELETE":
            del self.clients[client_id]
            return make_response(204)

        return make_response(405, None, "method not allowed")

    def writes_to(self, client_id):
        return [c for c in self.calls if c[0] == "POST" and c[1] == f"/api/client/{client_id}"]


@pytest.fixture
def fake_server():
    return FakeWGEasyServer()


@pytest.fixture
def fake_vpn(fake_server):
    """WGEasyAPIAdapter talking to the fake server."""
    from wgeasy_peers.adapters import (
        Credentials,
        RequestExecutor,
        SessionManager,
        WGEasyAPIAdapter,
    )

    session = SessionManager(
        Credentials("http://wg.test:51821/", "admin", "secret"),
        http=fake_server,
        logger=Mock(),
    )
    return WGEasyAPIAdapter(RequestExecutor(session))
