"""
Pytest fixtures shared across the unit suites.

Entities are exercised against a Client whose REST client is mocked, so no
test touches the network.
"""
from __future__ import annotations

from typing import Any, Callable, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest

from chatwire.client import Client
from chatwire.models.integration import Integration
from chatwire.models.server import Server


@pytest.fixture
def rest() -> MagicMock:
    """REST client double with async integration routes."""
    rest = MagicMock()
    rest.get_server_integrations = AsyncMock(return_value=[])
    rest.sync_server_integration = AsyncMock(return_value=None)
    rest.modify_server_integration = AsyncMock(return_value=None)
    rest.delete_server_integration = AsyncMock(return_value=None)
    rest.aclose = AsyncMock(return_value=None)
    return rest


@pytest.fixture
def client(rest: MagicMock) -> Client:
    return Client(rest=rest)


@pytest.fixture
def server(client: Client) -> Server:
    """A registered server with a subscriber role and a role managed by integration 100."""
    return client.servers.add(
        {
            "id": "300",
            "name": "Test Server",
            "roles": [
                {"id": "500", "name": "Subscribers"},
                {"id": "501", "name": "Twitch Managed", "managed": True, "tags": {"integration_id": "100"}},
                {"id": "502", "name": "Other Managed", "managed": True, "tags": {"integration_id": "999"}},
            ],
        }
    )


@pytest.fixture
def integration_payload() -> Dict[str, Any]:
    return {
        "id": "100",
        "name": "streamer",
        "type": "twitch",
        "enabled": True,
        "syncing": False,
        "role_id": "500",
        "expire_behavior": 0,
        "expire_grace_period": 1,
        "user": {"id": "200", "username": "owner", "discriminator": "0001"},
        "account": {"id": "acc-1", "name": "streamer"},
        "synced_at": "2024-01-01T12:00:00+00:00",
    }


@pytest.fixture
def make_integration(client: Client, server: Server, integration_payload: Dict[str, Any]) -> Callable[..., Integration]:
    """
    Factory that builds an Integration from the default payload.

    Keyword overrides replace payload keys; passing a key with value
    `...` (Ellipsis) removes it from the payload.
    """

    def _create(**overrides: Any) -> Integration:
        data = dict(integration_payload)
        for key, value in overrides.items():
            if value is ...:
                data.pop(key, None)
            else:
                data[key] = value
        return Integration(client, data, server)

    return _create
