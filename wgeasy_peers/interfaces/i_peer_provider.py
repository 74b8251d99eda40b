"""Peer provider interface and wire records (adapter pattern)."""

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from ..errors import DecodeError


def normalize_id(value: Any) -> str:
    """Normalize a string-or-number ID from the API to its canonical string."""
    # bool is an int subclass; true/false are never valid IDs
    if isinstance(value, bool) or value is None:
        raise DecodeError("client ID is neither string nor number", repr(value))
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not value.is_integer():
            raise DecodeError("client ID is not an integral number", repr(value))
        return str(int(value))
    raise DecodeError("client ID is neither string nor number", repr(value))


def _string_list(data: dict, key: str) -> Optional[list[str]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise DecodeError(f"field {key} is not a list", value)
    return [str(item) for item in value]


@dataclass
class Peer:
    """WireGuard client record as returned by the wg-easy API."""
    id: str
    name: str
    enabled: bool = True
    user_id: Optional[int] = None
    interface_id: Optional[str] = None
    ipv4_address: Optional[str] = None
    ipv6_address: Optional[str] = None
    public_key: str = ""
    private_key: str = ""
    preshared_key: str = ""
    expires_at: Optional[str] = None
    allowed_ips: Optional[list[str]] = None
    server_allowed_ips: Optional[list[str]] = None
    dns: Optional[list[str]] = None
    mtu: Optional[int] = None
    persistent_keepalive: Optional[int] = None
    server_endpoint: Optional[str] = None
    pre_up: Optional[str] = None
    post_up: Optional[str] = None
    pre_down: Optional[str] = None
    post_down: Optional[str] = None
    jc: Optional[int] = None
    j_min: Optional[int] = None
    j_max: Optional[int] = None
    i1: Optional[str] = None
    i2: Optional[str] = None
    i3: Optional[str] = None
    i4: Optional[str] = None
    i5: Optional[str] = None
    one_time_link: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_api(cls, data: Any) -> "Peer":
        """Build a Peer from one element of GET /api/client."""
        if not isinstance(data, dict):
            raise DecodeError("client record is not an object", data)
        if "id" not in data:
            raise DecodeError("client record missing id", data)

        return cls(
            id=normalize_id(data["id"]),
            name=data.get("name", ""),
            enabled=data.get("enabled", True),
            user_id=data.get("userId"),
            interface_id=data.get("interfaceId"),
            ipv4_address=data.get("ipv4Address"),
            ipv6_address=data.get("ipv6Address"),
            public_key=data.get("publicKey") or "",
            private_key=data.get("privateKey") or "",
            preshared_key=data.get("preSharedKey") or "",
            expires_at=data.get("expiresAt"),
            allowed_ips=_string_list(data, "allowedIps"),
            server_allowed_ips=_string_list(data, "serverAllowedIps"),
            dns=_string_list(data, "dns"),
            mtu=data.get("mtu"),
            persistent_keepalive=data.get("persistentKeepalive"),
            server_endpoint=data.get("serverEndpoint"),
            pre_up=data.get("preUp"),
            post_up=data.get("postUp"),
            pre_down=data.get("preDown"),
            post_down=data.get("postDown"),
            jc=data.get("jC"),
            j_min=data.get("jMin"),
            j_max=data.get("jMax"),
            i1=data.get("i1"),
            i2=data.get("i2"),
            i3=data.get("i3"),
            i4=data.get("i4"),
            i5=data.get("i5"),
            one_time_link=data.get("oneTimeLink"),
            created_at=data.get("createdAt") or "",
            updated_at=data.get("updatedAt") or "",
        )


@dataclass
class CreatePeerRequest:
    """Body for POST /api/client."""
    name: str
    expires_at: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        return {"name": self.name, "expiresAt": self.expires_at}


@dataclass
class UpdatePeerRequest:
    """Body for POST /api/client/{id}.

    The API has no partial update: every field is sent. Nullable fields
    serialize None as JSON null. Key material is server-owned and has no
    place here.
    """
    name: str
    enabled: bool
    ipv4_address: str
    ipv6_address: str
    mtu: int
    persistent_keepalive: int
    pre_up: str
    post_up: str
    pre_down: str
    post_down: str
    jc: int
    j_min: int
    j_max: int
    server_allowed_ips: Optional[list[str]] = field(default_factory=list)
    allowed_ips: Optional[list[str]] = None
    dns: Optional[list[str]] = None
    expires_at: Optional[str] = None
    server_endpoint: Optional[str] = None
    i1: Optional[str] = None
    i2: Optional[str] = None
    i3: Optional[str] = None
    i4: Optional[str] = None
    i5: Optional[str] = None

    def to_payload(self) -> dict[str, Any]:
        # serverAllowedIps is a non-nullable array on the server
        server_allowed_ips = self.server_allowed_ips
        if server_allowed_ips is None:
            server_allowed_ips = []

        return {
            "name": self.name,
            "enabled": self.enabled,
            "ipv4Address": self.ipv4_address,
            "ipv6Address": self.ipv6_address,
            "serverAllowedIps": list(server_allowed_ips),
            "mtu": self.mtu,
            "persistentKeepalive": self.persistent_keepalive,
            "preUp": self.pre_up,
            "postUp": self.post_up,
            "preDown": self.pre_down,
            "postDown": self.post_down,
            "jC": self.jc,
            "jMin": self.j_min,
            "jMax": self.j_max,
            "expiresAt": self.expires_at,
            "allowedIps": None if self.allowed_ips is None else list(self.allowed_ips),
            "dns": None if self.dns is None else list(self.dns),
            "serverEndpoint": self.server_endpoint,
            "i1": self.i1,
            "i2": self.i2,
            "i3": self.i3,
            "i4": self.i4,
            "i5": self.i5,
        }


class IPeerProvider(Protocol):
    """Interface for WireGuard peer management."""

    def list_peers(self) -> list[Peer]:
        """List all peers."""
        ...

    def get_peer(self, peer_id: str) -> Peer:
        """Get one peer, raising NotFoundError when absent."""
        ...

    def create_peer(self, request: CreatePeerRequest) -> str:
        """Create a peer, return its server-assigned ID."""
        ...

    def update_peer(self, peer_id: str, request: UpdatePeerRequest) -> Peer:
        """Write a full record, return the re-read peer."""
        ...

    def delete_peer(self, peer_id: str) -> None:
        """Delete a peer; already-absent IDs succeed."""
        ...
