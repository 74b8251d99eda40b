"""Desired-state record handed over by the configuration engine."""

from dataclasses import dataclass, fields
from typing import Any


class _Unset:
    """Marker for a field the caller did not mention."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_set(value: Any) -> bool:
    """True unless the value is the UNSET marker."""
    return value is not UNSET


@dataclass
class PeerPlan:
    """Partial desired state of one peer.

    Every field defaults to UNSET, so "not mentioned" stays distinct from
    an explicit None or an explicit empty list.
    """
    name: Any = UNSET
    enabled: Any = UNSET
    expires_at: Any = UNSET
    allowed_ips: Any = UNSET
    server_allowed_ips: Any = UNSET
    dns: Any = UNSET
    mtu: Any = UNSET
    persistent_keepalive: Any = UNSET
    server_endpoint: Any = UNSET
    pre_up: Any = UNSET
    post_up: Any = UNSET
    pre_down: Any = UNSET
    post_down: Any = UNSET
    jc: Any = UNSET
    j_min: Any = UNSET
    j_max: Any = UNSET
    i1: Any = UNSET
    i2: Any = UNSET
    i3: Any = UNSET
    i4: Any = UNSET
    i5: Any = UNSET

    def set_fields(self) -> dict[str, Any]:
        """Fields the caller mentioned, with their values."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if is_set(getattr(self, f.name))
        }
