from chatwire.models.server import Server
from chatwire.stores.base import DataStore


class ServerStore(DataStore):
    """
    The client's server registry.

    Entities that belong to a server keep only its id and resolve the server
    through this store.
    """

    holds = Server
