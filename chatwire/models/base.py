"""
Base class for API-backed entities.
"""
import copy
from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel

from chatwire.core.time_utils import format_timestamp
from chatwire.models.fields import to_local_key
from chatwire.stores.collection import Collection


def _flatten(value: Any) -> Any:
    """Reduce a value to plain data, replacing related entities by their id."""
    if isinstance(value, Base):
        return getattr(value, "id", None)
    if isinstance(value, Collection):
        return list(value.keys())
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, (list, tuple)):
        return [_flatten(item) for item in value]
    return value


class Base:
    """
    An entity backed by the remote API.

    Holds the client handle used for remote calls. Subclasses implement
    `_patch` to apply partial payloads onto themselves.
    """

    def __init__(self, client):
        self.client = client

    def _clone(self):
        return copy.copy(self)

    def _patch(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return data

    def _update(self, data: Dict[str, Any]):
        """Patch this entity and return a clone of its state before the patch."""
        clone = self._clone()
        self._patch(data)
        return clone

    def to_json(self, **props) -> Dict[str, Any]:
        """
        Plain snapshot of the public attributes.

        Keys follow the local camelCase convention. Related entities are
        reduced to their ids so snapshots never contain cycles.

        Args:
            **props: Per-attribute overrides. A string renames the output key,
                False drops the attribute.
        """
        snapshot = {}
        for name, value in vars(self).items():
            if name.startswith("_") or name == "client":
                continue
            key = props.get(name, True)
            if key is False:
                continue
            if key is True:
                key = to_local_key(name)
            snapshot[key] = _flatten(value)
        return snapshot

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={getattr(self, 'id', None)!r}>"
