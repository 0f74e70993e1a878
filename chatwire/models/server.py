from typing import Any, Dict

from chatwire.core.logging_config import LogCategory, log_debug
from chatwire.models.base import Base
from chatwire.models.integration import Integration
from chatwire.stores.collection import Collection
from chatwire.stores.roles import RoleStore


class Server(Base):
    """
    A server (community) on the platform.

    Owns its role store. Integrations are fetched on demand and keep only a
    reference to the server's id.
    """

    def __init__(self, client, data: Dict[str, Any]):
        super().__init__(client)
        self.id = data["id"]
        self.name = None
        self.roles = RoleStore(self)
        self._patch(data)

    def _patch(self, data):
        if "name" in data:
            self.name = data["name"]
        if "roles" in data:
            for role_data in data["roles"]:
                self.roles.add(role_data)
        return data

    async def fetch_integrations(self) -> Collection:
        """
        Fetch the integrations of this server.

        Returns:
            Collection of Integration keyed by integration id

        Raises:
            RemoteOperationError: If the request fails
        """
        payloads = await self.client.rest.get_server_integrations(self.id)
        integrations = Collection()
        for data in payloads:
            integration = Integration(self.client, data, self)
            integrations[integration.id] = integration
        log_debug(
            "Fetched server integrations",
            category=LogCategory.ENTITIES,
            server_id=self.id,
            count=len(integrations),
        )
        return integrations

    def to_json(self):
        snapshot = super().to_json(roles=False)
        snapshot["roles"] = list(self.roles.cache.keys())
        return snapshot
