"""
chatwire - an async client library for a chat/community platform REST API.

Architecture:
- core/: configuration, logging, exceptions, time helpers
- rest/: thin REST client for the platform API
- stores/: id-keyed registries (users, servers, roles)
- models/: live entities built from raw API payloads (Integration, Role, User, ...)
- client.py: the Client facade tying the above together
"""

from chatwire.client import Client
from chatwire.core.exceptions import (
    ChatwireException,
    RemoteHTTPError,
    RemoteNetworkError,
    RemoteOperationError,
)
from chatwire.models.integration import Integration, IntegrationAccount

__all__ = [
    "Client",
    "ChatwireException",
    "Integration",
    "IntegrationAccount",
    "RemoteHTTPError",
    "RemoteNetworkError",
    "RemoteOperationError",
]
