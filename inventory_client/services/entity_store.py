"""Fetch/create/update/delete synchronizer for one REST collection.

The store never patches its snapshot locally. Every successful write is
followed by a full ``list()`` so the snapshot is always a verbatim copy of
the latest successful server read.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inventory_client.api.client import ApiClient
from inventory_client.core.errors import LoadError, MutationError, ValidationError
from inventory_client.services.resources import Resource

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)
Listener = Callable[[tuple], None]


class EntityStore(Generic[EntityT]):
    """Client-side mirror of one collection, refreshed wholesale after writes."""

    def __init__(self, api: ApiClient, resource: Resource) -> None:
        self.api = api
        self.resource = resource
        self._snapshot: tuple[EntityT, ...] = ()
        self._loaded = False
        self._listeners: list[Listener] = []
        # Sequence numbers let an older in-flight read lose to a newer one
        self._issued_seq = 0
        self._applied_seq = 0

    @property
    def name(self) -> str:
        return self.resource.name

    @property
    def snapshot(self) -> tuple[EntityT, ...]:
        return self._snapshot

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, entity_id: int) -> EntityT | None:
        for entity in self._snapshot:
            if getattr(entity, "id", None) == entity_id:
                return entity
        return None

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for snapshot replacements; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def list(self) -> tuple[EntityT, ...]:
        """Fetch the collection and replace the snapshot in one assignment.

        Raises:
            LoadError: the previous snapshot is left untouched.
        """
        self._issued_seq += 1
        seq = self._issued_seq

        data = await self.api.get_json(self.resource.path, self.name)
        if not isinstance(data, list):
            raise LoadError(self.name, f"Expected a JSON array, got {type(data).__name__}")
        try:
            entities = tuple(self.resource.read_model.model_validate(item) for item in data)
        except PydanticValidationError as e:
            logger.warning(f"Discarding unreadable {self.name} payload: {e}")
            raise LoadError(self.name, "Response did not match the expected shape") from e

        if seq < self._applied_seq:
            logger.debug(f"Dropping stale {self.name} read #{seq} (newest is #{self._applied_seq})")
            return self._snapshot

        self._snapshot = entities
        self._applied_seq = seq
        self._loaded = True
        logger.debug(f"Loaded {len(entities)} {self.name}")
        self._notify()
        return self._snapshot

    async def create(self, entity: BaseModel | Mapping[str, Any]) -> None:
        """POST a new entity (server assigns the id), then refresh.

        Raises:
            ValidationError: payload rejected locally, nothing sent.
            MutationError: the POST failed; snapshot unchanged.
            LoadError: the POST succeeded but the refresh failed.
        """
        model = self.build_payload(entity, "create")
        await self.api.send("POST", self.resource.path, self.name, model.to_wire())
        logger.info(f"Created entry in {self.name}")
        await self.list()

    async def update(self, entity_id: int, entity: BaseModel | Mapping[str, Any]) -> None:
        """PUT the fields set on ``entity`` to its resource path, then refresh."""
        model = self.build_payload(entity, "update")
        await self.api.send(
            "PUT",
            self.resource.item_path(entity_id),
            self.name,
            model.to_wire(partial=True),
        )
        logger.info(f"Updated {self.name} {entity_id}")
        await self.list()

    async def remove(self, entity_id: int, *, refresh: bool = True) -> None:
        """DELETE one entity, then refresh.

        Confirmation is the caller's job; the store deletes unconditionally.
        Pass ``refresh=False`` only when the caller reloads this store itself
        straight afterwards.
        """
        if self.resource.read_only:
            raise MutationError("delete", self.name, f"{self.name} are read-only")
        await self.api.send("DELETE", self.resource.item_path(entity_id), self.name)
        logger.info(f"Deleted {self.name} {entity_id}")
        if refresh:
            await self.list()

    def build_payload(self, entity: BaseModel | Mapping[str, Any], action: str) -> BaseModel:
        """Validate ``entity`` against the create or update model without sending it."""
        model_cls = (
            self.resource.create_model if action == "create" else self.resource.update_model
        )
        if model_cls is None:
            raise MutationError(action, self.name, f"{self.name} are read-only")
        if isinstance(entity, model_cls):
            return entity
        if isinstance(entity, BaseModel):
            entity = entity.model_dump(exclude_unset=True)
        try:
            return model_cls.model_validate(entity)
        except PydanticValidationError as e:
            # Error locations carry the wire alias (categoryName); report field names
            names = {
                info.alias or name: name for name, info in model_cls.model_fields.items()
            }
            fields = tuple(
                dict.fromkeys(
                    names.get(str(err["loc"][0]), str(err["loc"][0]))
                    for err in e.errors()
                    if err.get("loc")
                )
            )
            raise ValidationError(
                fields, f"Invalid {self.name} data: {', '.join(fields) or 'payload'}"
            ) from e

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self._snapshot)
            except Exception as e:
                logger.error(f"{self.name} snapshot listener failed: {e}", exc_info=True)
