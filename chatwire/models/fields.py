"""
Field name translation between the local record convention and the wire.

Wire payloads use underscore-separated keys (``expire_behavior``). Edit
records and serialized snapshots use camelCase keys (``expireBehavior``).
Every boundary crossing goes through this table; the transforms return new
dicts and never mutate their input.
"""
import re
from typing import Any, Dict, Mapping

LOCAL_TO_WIRE: Dict[str, str] = {
    "expireBehavior": "expire_behavior",
    "expireGracePeriod": "expire_grace_period",
    "syncedAt": "synced_at",
    "roleId": "role_id",
}

WIRE_TO_LOCAL: Dict[str, str] = {wire: local for local, wire in LOCAL_TO_WIRE.items()}

_UNDERSCORE_WORD = re.compile(r"_([a-z0-9])")


def to_local_key(name: str) -> str:
    """Translate a wire or attribute name to the local camelCase convention."""
    if name in WIRE_TO_LOCAL:
        return WIRE_TO_LOCAL[name]
    return _UNDERSCORE_WORD.sub(lambda match: match.group(1).upper(), name)


def to_wire_fields(record: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build an outgoing wire payload from a local record.

    Known local keys are renamed (the local key is not carried over);
    unrecognized keys pass through unchanged. When both the local and the
    wire spelling are present, the local one wins.
    """
    payload = {}
    for key, value in record.items():
        if key in LOCAL_TO_WIRE:
            continue
        payload[key] = value
    for key, value in record.items():
        if key in LOCAL_TO_WIRE:
            payload[LOCAL_TO_WIRE[key]] = value
    return payload


def to_local_fields(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Inverse of to_wire_fields for keys present in the table."""
    return {WIRE_TO_LOCAL.get(key, key): value for key, value in payload.items()}
