"""
Base class for id-keyed entity registries.
"""
from typing import Any, Dict, Optional

from chatwire.stores.collection import Collection


class DataStore:
    """
    Registry of entities of a single type, deduplicated by id.

    Subclasses set `holds` to the entity class they construct. Extra
    constructor arguments (e.g. the owning server of a role) are passed
    through `add(..., *extras)`.
    """

    holds: type = None

    def __init__(self, client, iterable=None):
        self.client = client
        self.cache = Collection()
        if iterable:
            for data in iterable:
                self.add(data)

    def add(self, data: Dict[str, Any], cache: bool = True, *extras):
        """
        Upsert an entity from a raw payload.

        An existing entry with the same id is patched in place and returned,
        so callers always share one canonical instance per id.
        """
        existing = self.cache.get(data.get("id"))
        if existing is not None:
            existing._patch(data)
            return existing

        entry = self.holds(self.client, data, *extras)
        if cache:
            self.cache[entry.id] = entry
        return entry

    def resolve(self, entity_or_id) -> Optional[Any]:
        """Resolve an entity instance or an id to the cached entity."""
        if isinstance(entity_or_id, self.holds):
            return entity_or_id
        return self.cache.get(entity_or_id)

    def resolve_id(self, entity_or_id) -> Optional[str]:
        if isinstance(entity_or_id, self.holds):
            return entity_or_id.id
        return entity_or_id

    def __len__(self) -> int:
        return len(self.cache)
