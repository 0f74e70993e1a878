from typing import Any, Dict, Optional

from chatwire.models.base import Base


class IntegrationApplication(Base):
    """
    The application behind an integration.

    Owned by its Integration and only ever mutated through `_patch`, so
    fields accumulate across partial payloads.
    """

    def __init__(self, client, data: Dict[str, Any]):
        super().__init__(client)
        self.id: Optional[str] = None
        self.name: Optional[str] = None
        self.icon: Optional[str] = None
        self.description: Optional[str] = None
        self.summary: Optional[str] = None
        self.bot = None
        self._patch(data)

    def _patch(self, data):
        if not data:
            return data
        if "id" in data:
            self.id = data["id"]
        if "name" in data:
            self.name = data["name"]
        if "icon" in data:
            self.icon = data["icon"]
        if "description" in data:
            self.description = data["description"]
        if "summary" in data:
            self.summary = data["summary"]
        if "bot" in data:
            self.bot = self.client.users.add(data["bot"]) if data["bot"] else None
        return data
