"""
Client facade: the REST client plus the user and server registries.
"""
from typing import Optional

from chatwire.core.logging_config import log_info
from chatwire.rest.api import RestClient
from chatwire.stores.servers import ServerStore
from chatwire.stores.users import UserStore


class Client:
    """
    Entry point of the library.

    Usage:
        async with Client(token) as client:
            server = client.servers.add(server_payload)
            integrations = await server.fetch_integrations()
            await integrations.first().sync()
    """

    def __init__(self, token: Optional[str] = None, *, rest: Optional[RestClient] = None):
        self.rest = rest if rest is not None else RestClient(token=token)
        self.users = UserStore(self)
        self.servers = ServerStore(self)

    async def close(self) -> None:
        await self.rest.aclose()
        log_info("Client closed")

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
