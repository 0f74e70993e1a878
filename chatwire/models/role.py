import weakref
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from chatwire.models.base import Base


class RoleTags(BaseModel):
    """Tag metadata the platform attaches to managed roles."""
    model_config = ConfigDict(extra="allow")

    bot_id: Optional[str] = None
    integration_id: Optional[str] = None
    premium_subscriber: bool = False

    @classmethod
    def from_payload(cls, data: Optional[Dict[str, Any]]) -> Optional["RoleTags"]:
        if data is None:
            return None
        # The wire sends premium_subscriber as a null-valued key when set
        tags = dict(data)
        if "premium_subscriber" in tags:
            tags["premium_subscriber"] = True
        return cls.model_validate(tags)


class Role(Base):
    """A role of a server."""

    def __init__(self, client, data: Dict[str, Any], server):
        super().__init__(client)
        self.server_id = server.id
        self._server_ref = weakref.ref(server)
        self.id = data["id"]
        self.name = None
        self.color = 0
        self.position = 0
        self.managed = False
        self.tags: Optional[RoleTags] = None
        self._patch(data)

    def _patch(self, data):
        if "name" in data:
            self.name = data["name"]
        if "color" in data:
            self.color = data["color"]
        if "position" in data:
            self.position = data["position"]
        if "managed" in data:
            self.managed = bool(data["managed"])
        if "tags" in data:
            self.tags = RoleTags.from_payload(data["tags"])
        return data

    @property
    def server(self):
        server = self.client.servers.cache.get(self.server_id)
        if server is None:
            server = self._server_ref()
        return server
