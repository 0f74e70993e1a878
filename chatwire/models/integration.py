"""
Server integrations.

An Integration connects a server to a third-party service account (a
streaming channel, a video channel, ...). It is built from a raw API payload
and kept current through `_patch`, which only touches the fields a payload
mentions.

Lifecycle:
- Constructed by Server.fetch_integrations() (or directly from a payload)
- Mutated in place by sync() and edit()
- Void after a successful delete(); the object itself stays usable for logging
"""
import weakref
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from chatwire.core.logging_config import LogCategory, log_debug, log_info, log_warning
from chatwire.core.time_utils import parse_timestamp, utc_now
from chatwire.models.application import IntegrationApplication
from chatwire.models.base import Base
from chatwire.models.enums import ExpireBehavior
from chatwire.models.fields import to_wire_fields
from chatwire.stores.collection import Collection


class IntegrationAccount(BaseModel):
    """The external account linked by an integration."""
    model_config = ConfigDict(extra="allow")

    id: str
    name: str


class Integration(Base):
    """
    A server integration.

    Fields:
        id: Integration id
        name: Display name
        type: Service kind ("twitch", "youtube", ...)
        enabled: Whether the integration is enabled
        syncing: Whether a sync is in progress
        role: Subscriber role, looked up once at construction (None if not found)
        user: User that set up the integration, if the payload had one
        account: Linked external account
        synced_at: Last successful sync
        expire_behavior: ExpireBehavior applied when a subscription lapses
        expire_grace_period: Days before expire_behavior applies
        application: IntegrationApplication, if one was ever provided
        server_id: Id of the owning server
    """

    def __init__(self, client, data: Dict[str, Any], server):
        super().__init__(client)
        self.server_id = server.id
        # Non-owning fallback for servers that are not in client.servers
        self._server_ref = weakref.ref(server)

        self.id = data.get("id")
        self.name = data.get("name")
        self.type = data.get("type")
        self.enabled = data.get("enabled")
        self.syncing = data.get("syncing", False)

        # Snapshot lookup; not refreshed when the role cache changes
        self.role = server.roles.cache.get(data.get("role_id"))

        if data.get("user"):
            self.user = self.client.users.add(data["user"])
        else:
            self.user = None

        account = data.get("account")
        self.account = IntegrationAccount.model_validate(account) if account is not None else None
        self.synced_at = self._parse_synced_at(data.get("synced_at"))

        self.expire_behavior = None
        self.expire_grace_period = None
        self.application: Optional[IntegrationApplication] = None
        self._patch(data)

    def _parse_synced_at(self, value):
        try:
            return parse_timestamp(value)
        except (ValueError, TypeError, AttributeError):
            log_warning(
                "Unparseable synced_at kept as given",
                category=LogCategory.ENTITIES,
                integration_id=self.id,
                synced_at=value,
            )
            return value

    @property
    def server(self):
        """The owning server, resolved through the client's server registry."""
        server = self.client.servers.cache.get(self.server_id)
        if server is None:
            server = self._server_ref()
        return server

    @property
    def roles(self) -> Collection:
        """All roles of the server currently tagged as managed by this integration."""
        server = self.server
        if server is None:
            return Collection()
        return server.roles.cache.filter(
            lambda role: role.tags is not None and role.tags.integration_id == self.id
        )

    def _patch(self, data):
        if "expire_behavior" in data:
            self.expire_behavior = ExpireBehavior.coerce(data["expire_behavior"])
        if "expire_grace_period" in data:
            self.expire_grace_period = data["expire_grace_period"]

        if "application" in data:
            if self.application is not None:
                self.application._patch(data["application"])
            elif data["application"] is not None:
                self.application = IntegrationApplication(self.client, data["application"])
        elif self.application is None:
            self.application = None

        log_debug(
            "Integration patched",
            category=LogCategory.ENTITIES,
            integration_id=self.id,
            fields=sorted(data),
        )
        return data

    async def sync(self) -> "Integration":
        """
        Sync this integration.

        `syncing` is set before the remote call and only cleared on success;
        after a failure it stays True until the integration is re-fetched.

        Raises:
            RemoteOperationError: If the remote call fails
        """
        self.syncing = True
        await self.client.rest.sync_server_integration(self.server_id, self.id)
        self.syncing = False
        self.synced_at = utc_now()
        log_info(
            "Integration synced",
            category=LogCategory.ENTITIES,
            server_id=self.server_id,
            integration_id=self.id,
        )
        return self

    async def edit(self, data: Mapping[str, Any], reason: Optional[str] = None) -> "Integration":
        """
        Edit this integration.

        Args:
            data: Edit record, e.g. {"expireBehavior": 1, "expireGracePeriod": 7}.
                Keys outside the translation table (such as "enable_emoticons")
                are sent as-is but not tracked locally.
            reason: Reason for the audit log

        Raises:
            RemoteOperationError: If the remote call fails; local state is unchanged
        """
        payload = to_wire_fields(data)
        await self.client.rest.modify_server_integration(
            self.server_id, self.id, payload, reason=reason
        )
        self._patch(payload)
        log_info(
            "Integration edited",
            category=LogCategory.ENTITIES,
            server_id=self.server_id,
            integration_id=self.id,
            fields=sorted(payload),
        )
        return self

    async def delete(self, reason: Optional[str] = None) -> "Integration":
        """
        Delete this integration.

        Returns the same instance, which no longer matches a remote resource.

        Raises:
            RemoteOperationError: If the remote call fails
        """
        await self.client.rest.delete_server_integration(self.server_id, self.id, reason=reason)
        log_info(
            "Integration deleted",
            category=LogCategory.ENTITIES,
            server_id=self.server_id,
            integration_id=self.id,
        )
        return self

    def to_json(self) -> Dict[str, Any]:
        snapshot = super().to_json(server_id=False)
        snapshot["server"] = self.server_id
        return snapshot
