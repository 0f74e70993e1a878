from chatwire.models.user import User
from chatwire.stores.base import DataStore


class UserStore(DataStore):
    """The client's user registry."""

    holds = User
