"""Add/edit modal state for one entity type on top of one EntityStore.

States::

    CLOSED --open_add/open_edit--> DRAFT --submit--> SUBMITTING --ok--> CLOSED
                                     ^                    |
                                     +------ failure -----+
    DRAFT/SUBMITTING --cancel--> CLOSED (draft discarded)

The draft is a private dict. It is copied out of the entity on
``open_edit`` and copied again into the request payload on ``submit``, so
nothing typed into the form reaches a snapshot before a successful round
trip.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from pydantic import BaseModel

from inventory_client.core.errors import (
    EditorStateError,
    InventoryClientError,
    LoadError,
    MutationError,
    ValidationError,
)
from inventory_client.services.entity_store import EntityStore
from inventory_client.utils.numbers import coerce_float, coerce_int, coerce_optional_int
from inventory_client.utils.validators import blank_to_none, require_fields

logger = logging.getLogger(__name__)


class EditorState(str, enum.Enum):
    CLOSED = "closed"
    DRAFT = "draft"
    SUBMITTING = "submitting"


class DraftMode(str, enum.Enum):
    ADD = "add"
    EDIT = "edit"


@dataclass(frozen=True)
class FormSchema:
    """Blank template, required fields and per-field coercion for one form."""

    label: str
    template: Mapping[str, Any]
    required: tuple[str, ...] = ()
    coercers: Mapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def requiring(self, *fields: str) -> FormSchema:
        """Return a copy that also requires ``fields``."""
        unknown = [name for name in fields if name not in self.template]
        if unknown:
            raise KeyError(f"Unknown {self.label} field(s): {', '.join(unknown)}")
        extra = tuple(name for name in fields if name not in self.required)
        return replace(self, required=self.required + extra)

    def blank(self) -> dict[str, Any]:
        return dict(self.template)

    def draft_from(self, entity: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
        """Field-by-field copy of ``entity`` limited to the form's fields."""
        source = entity.model_dump() if isinstance(entity, BaseModel) else dict(entity)
        draft = self.blank()
        for name in draft:
            if name in source and source[name] is not None:
                draft[name] = source[name]
        return draft

    def payload(self, draft: Mapping[str, Any]) -> dict[str, Any]:
        """Coerce a draft into request fields; the draft itself is not touched."""
        result = {}
        for name in self.template:
            value = draft.get(name)
            coerce = self.coercers.get(name)
            result[name] = coerce(value) if coerce else value
        return result


PRODUCT_FORM = FormSchema(
    label="product",
    template={"name": "", "category_name": "", "price": "", "stock": "", "image_url": None},
    # Category stays optional here, as on the web form; the mobile form adds
    # it with PRODUCT_FORM.requiring("category_name", "price", "stock").
    required=("name",),
    coercers={
        "price": coerce_float,
        "stock": coerce_int,
        "image_url": blank_to_none,
    },
)

SELLER_FORM = FormSchema(
    label="seller",
    template={
        "name": "",
        "address": "",
        "email": "",
        "password": "",
        "phone": "",
        "status_id": "",
    },
    required=("name", "email", "password"),
    coercers={
        "address": blank_to_none,
        "phone": blank_to_none,
        "status_id": coerce_optional_int,
    },
)


class FormEditor:
    """Modal draft state machine; one instance per screen and entity type."""

    def __init__(self, store: EntityStore, schema: FormSchema) -> None:
        self.store = store
        self.schema = schema
        self.state = EditorState.CLOSED
        self.mode: DraftMode | None = None
        self.editing_id: int | None = None
        self.error: InventoryClientError | None = None
        self._draft: dict[str, Any] = {}
        # Bumped on every open/cancel so a late submit result can tell it is stale
        self._generation = 0
        # True for the whole create/update await, even after cancel()
        self._in_flight = False

    @property
    def draft(self) -> dict[str, Any]:
        """A copy of the current draft (empty when closed)."""
        return dict(self._draft)

    @property
    def is_open(self) -> bool:
        return self.state is not EditorState.CLOSED

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    def open_add(self) -> None:
        self._open(DraftMode.ADD, self.schema.blank(), None)

    def open_edit(self, entity: BaseModel | Mapping[str, Any]) -> None:
        entity_id = (
            getattr(entity, "id", None)
            if isinstance(entity, BaseModel)
            else entity.get("id")
        )
        if entity_id is None:
            raise EditorStateError(f"Cannot edit a {self.schema.label} without an id")
        self._open(DraftMode.EDIT, self.schema.draft_from(entity), entity_id)

    def field_change(self, name: str, value: Any) -> None:
        if self.state is not EditorState.DRAFT:
            raise EditorStateError(f"Cannot edit fields while {self.state.value}")
        if name not in self._draft:
            raise KeyError(f"Unknown {self.schema.label} field: {name}")
        self._draft[name] = value

    def cancel(self) -> None:
        """Close and discard the draft, including unsaved edits.

        Cancelling a save in flight does not abort the request; the form
        cannot be reopened until it resolves.
        """
        if self.state is EditorState.SUBMITTING:
            logger.info(f"{self.schema.label} editor dismissed while a save is in flight")
        self._close()

    async def submit(self) -> bool:
        """Validate, coerce and send the draft.

        Returns ``True`` when the write reached the server. Errors are kept
        on ``self.error`` instead of being raised; a second call while a save
        is in flight is ignored, also after ``cancel()``.
        """
        if self._in_flight:
            logger.warning(f"Ignoring duplicate {self.schema.label} submit while one is in flight")
            return False
        if self.state is not EditorState.DRAFT:
            raise EditorStateError(f"Nothing to submit; {self.schema.label} editor is closed")

        self.error = None
        try:
            require_fields(self._draft, self.schema.required)
            payload = self.schema.payload(self._draft)
            action = "create" if self.mode is DraftMode.ADD else "update"
            model = self.store.build_payload(payload, action)
        except ValidationError as e:
            logger.info(f"{self.schema.label} draft rejected: {e.message}")
            self.error = e
            return False

        generation = self._generation
        self.state = EditorState.SUBMITTING
        self._in_flight = True
        try:
            if self.mode is DraftMode.ADD:
                await self.store.create(model)
            else:
                await self.store.update(self.editing_id, model)
        except MutationError as e:
            if generation == self._generation:
                # Back to DRAFT with every typed value intact
                self.state = EditorState.DRAFT
                self.error = e
            return False
        except LoadError as e:
            # The write landed; only the refresh failed. Closing prevents a
            # retry from writing the same draft twice.
            if generation == self._generation:
                self._close()
                self.error = e
            return True
        finally:
            self._in_flight = False

        if generation == self._generation:
            self._close()
        return True

    def _open(self, mode: DraftMode, draft: dict[str, Any], entity_id: int | None) -> None:
        if self._in_flight:
            raise EditorStateError("A save is in flight; wait for it to finish")
        self._generation += 1
        self.mode = mode
        self.editing_id = entity_id
        self._draft = draft
        self.error = None
        self.state = EditorState.DRAFT

    def _close(self) -> None:
        self._generation += 1
        self.state = EditorState.CLOSED
        self.mode = None
        self.editing_id = None
        self._draft = {}
