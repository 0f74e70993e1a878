from chatwire.models.role import Role
from chatwire.stores.base import DataStore


class RoleStore(DataStore):
    """Roles of a single server."""

    holds = Role

    def __init__(self, server, iterable=None):
        self.server = server
        super().__init__(server.client, iterable)

    def add(self, data, cache=True):
        return super().add(data, cache, self.server)
