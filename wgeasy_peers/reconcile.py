"""Merge a partial desired state into the full record the API requires.

The server only accepts complete records, and the same input means
different things per field:

- scalars are overwritten when given;
- nullable scalars (expiry, server endpoint, i1..i5) are overwritten only
  by a real value, None leaves the current value alone;
- allowed-IP lists: an explicit empty list means "use the server default"
  and is sent as null;
- DNS: an explicit empty list is sent as ``[]``;
- serverAllowedIps is never null on the wire.
"""

from typing import Any, Optional

from .errors import ValidationError
from .interfaces import UNSET, Peer, PeerPlan, UpdatePeerRequest

SCALAR_FIELDS = (
    "name",
    "enabled",
    "mtu",
    "persistent_keepalive",
    "pre_up",
    "post_up",
    "pre_down",
    "post_down",
    "jc",
    "j_min",
    "j_max",
)

# Written back from current state; the plan never carries them
ADDRESS_FIELDS = ("ipv4_address", "ipv6_address")

NULLABLE_FIELDS = ("expires_at", "server_endpoint", "i1", "i2", "i3", "i4", "i5")

DEFAULTABLE_LIST_FIELDS = ("allowed_ips", "server_allowed_ips")

REQUIRED_FIELDS = SCALAR_FIELDS + ADDRESS_FIELDS


def _given(value: Any) -> bool:
    return value is not UNSET and value is not None


def _overlay_default_list(value: Any, current: Optional[list[str]]) -> Optional[list[str]]:
    if not _given(value):
        return current
    if len(value) > 0:
        return list(value)
    return None


def build_update_request(desired: PeerPlan, current: Peer) -> UpdatePeerRequest:
    """Build the full write record for ``current`` with ``desired`` applied."""
    values: dict[str, Any] = {}
    for name in REQUIRED_FIELDS + NULLABLE_FIELDS:
        values[name] = getattr(current, name)
    values["allowed_ips"] = current.allowed_ips
    values["server_allowed_ips"] = current.server_allowed_ips
    values["dns"] = current.dns

    for name in SCALAR_FIELDS + NULLABLE_FIELDS:
        value = getattr(desired, name)
        if _given(value):
            values[name] = value

    for name in DEFAULTABLE_LIST_FIELDS:
        values[name] = _overlay_default_list(getattr(desired, name), values[name])

    if _given(desired.dns):
        values["dns"] = list(desired.dns)

    if values["server_allowed_ips"] is None:
        values["server_allowed_ips"] = []

    missing = [name for name in REQUIRED_FIELDS if values[name] is None]
    if missing:
        raise ValidationError(
            f"client {current.id} lacks required field(s) {', '.join(missing)}; "
            "re-read the client before updating",
            {"id": current.id, "missing": missing},
        )

    return UpdatePeerRequest(**values)


def needs_follow_up_update(plan: PeerPlan) -> bool:
    """Whether a freshly created peer needs a second, full write.

    The create endpoint only takes name and expiry.
    """
    for name in ("allowed_ips", "server_allowed_ips", "dns"):
        value = getattr(plan, name)
        if _given(value) and len(value) > 0:
            return True

    for name in (
        "mtu",
        "persistent_keepalive",
        "server_endpoint",
        "jc",
        "j_min",
        "j_max",
        "i1",
        "i2",
        "i3",
        "i4",
        "i5",
    ):
        if _given(getattr(plan, name)):
            return True

    for name in ("pre_up", "post_up", "pre_down", "post_down"):
        if getattr(plan, name):
            return True

    return plan.enabled is False
