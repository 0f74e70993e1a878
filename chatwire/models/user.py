from typing import Any, Dict

from chatwire.models.base import Base


class User(Base):
    """A platform user. Canonical instances live in `client.users`."""

    def __init__(self, client, data: Dict[str, Any]):
        super().__init__(client)
        self.id = data["id"]
        self.username = None
        self.discriminator = None
        self.avatar = None
        self.bot = False
        self._patch(data)

    def _patch(self, data):
        if "username" in data:
            self.username = data["username"]
        if "discriminator" in data:
            self.discriminator = data["discriminator"]
        if "avatar" in data:
            self.avatar = data["avatar"]
        if "bot" in data:
            self.bot = bool(data["bot"])
        return data

    @property
    def tag(self) -> str:
        if self.discriminator is None:
            return self.username
        return f"{self.username}#{self.discriminator}"
