"""Screen controllers: compose stores and editors, surface errors as messages.

Controllers are where ``LoadError``, ``MutationError`` and ``ValidationError``
stop. Each one leaves the screen interactive: the snapshot stays as it was,
the draft is kept, and ``message`` carries the text to show.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from inventory_client.api.client import ApiClient
from inventory_client.core.errors import InventoryClientError, LoadError, MutationError
from inventory_client.services.dashboard import DashboardView, load_dashboard
from inventory_client.services.entity_store import EntityStore
from inventory_client.services.form_editor import (
    PRODUCT_FORM,
    SELLER_FORM,
    DraftMode,
    FormEditor,
    FormSchema,
)
from inventory_client.services.image_resolver import ImageResolver
from inventory_client.services.session import Session

logger = logging.getLogger(__name__)

# The confirmation capability: a yes/no prompt, sync or async
Confirm = Callable[[str], "bool | Awaitable[bool]"]


async def ask(confirm: Confirm, prompt: str) -> bool:
    answer = confirm(prompt)
    if inspect.isawaitable(answer):
        answer = await answer
    return bool(answer)


class ScreenController:
    """Base for one mounted screen; ``close()`` is the teardown."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.active = True
        self.message: str | None = None
        self.renders = 0
        self._unsubscribers: list[Callable[[], None]] = []

    def watch(self, store: EntityStore) -> None:
        self._unsubscribers.append(store.subscribe(self._on_snapshot))

    def close(self) -> None:
        """Tear down. In-flight reads still finish and update their store."""
        self.active = False
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers.clear()

    def surface(self, error: InventoryClientError | None = None, text: str | None = None) -> None:
        if not self.active:
            # Nobody is looking at this screen any more
            return
        self.message = text if text is not None else (error.message if error else None)

    def _on_snapshot(self, snapshot: tuple) -> None:
        if self.active:
            self.renders += 1


class CollectionScreen(ScreenController):
    """A table of one collection with an add/edit modal and delete buttons."""

    delete_prompt = "Are you sure?"
    load_failed_text: str | None = None
    created_text: str | None = None
    updated_text: str | None = None
    deleted_text: str | None = None

    def __init__(self, session: Session, store: EntityStore, schema: FormSchema) -> None:
        super().__init__(session)
        self.store = store
        self.editor = FormEditor(store, schema)
        self.watch(store)

    @property
    def rows(self) -> tuple:
        return self.store.snapshot

    async def load(self) -> bool:
        try:
            await self.store.list()
        except LoadError as e:
            logger.warning(f"Could not load {self.store.name}: {e.detail}")
            self.surface(e, self.load_failed_text)
            return False
        return True

    def add(self) -> None:
        self.message = None
        self.editor.open_add()

    def edit(self, entity_id: int) -> bool:
        entity = self.store.get(entity_id)
        if entity is None:
            self.surface(text=f"No {self.editor.schema.label} with id {entity_id}")
            return False
        self.message = None
        self.editor.open_edit(entity)
        return True

    def change(self, name: str, value: Any) -> None:
        self.editor.field_change(name, value)

    def dismiss(self) -> None:
        self.editor.cancel()

    async def save(self) -> bool:
        mode = self.editor.mode
        saved = await self.editor.submit()
        if self.editor.error is not None:
            self.surface(self.editor.error)
        elif saved:
            self.surface(text=self.created_text if mode is DraftMode.ADD else self.updated_text)
        return saved

    async def confirm_delete(self, entity_id: int, confirm: Confirm) -> bool:
        """Delete after the user agrees; a "no" issues no request."""
        if not await ask(confirm, self.delete_prompt):
            return False
        try:
            await self.store.remove(entity_id)
        except InventoryClientError as e:
            self.surface(e)
            return False
        self.surface(text=self.deleted_text)
        return True


class AdminScreen(CollectionScreen):
    """Product management; also loads categories for the category picker."""

    load_failed_text = "Failed to load products"

    def __init__(
        self,
        session: Session,
        products: EntityStore,
        categories: EntityStore,
        schema: FormSchema = PRODUCT_FORM,
    ) -> None:
        super().__init__(session, products, schema)
        self.categories = categories
        self.watch(categories)

    @property
    def category_names(self) -> list[str]:
        return [category.name for category in self.categories.snapshot]

    async def load(self) -> bool:
        if not await super().load():
            return False
        try:
            await self.categories.list()
        except LoadError as e:
            # The picker just stays empty
            logger.warning(f"Could not load categories: {e.detail}")
        return True


class SellersScreen(CollectionScreen):
    delete_prompt = "Are you sure you want to delete this seller?"
    load_failed_text = "Failed to load sellers. Please try again."
    created_text = "Seller created successfully!"
    updated_text = "Seller updated successfully!"
    deleted_text = "Seller deleted successfully!"

    def __init__(self, session: Session, sellers: EntityStore) -> None:
        super().__init__(session, sellers, SELLER_FORM)


class DashboardScreen(ScreenController):
    load_failed_text = "Failed to load dashboard data. Make sure backend is running."

    def __init__(
        self,
        session: Session,
        api: ApiClient,
        products: EntityStore,
        categories: EntityStore,
        resolver: ImageResolver | None = None,
        *,
        low_stock_threshold: int | None = None,
    ) -> None:
        super().__init__(session)
        self.api = api
        self.products = products
        self.categories = categories
        self.resolver = resolver or ImageResolver()
        self.low_stock_threshold = low_stock_threshold
        self.view: DashboardView | None = None
        self.watch(products)

    async def load(self) -> bool:
        try:
            view = await load_dashboard(
                self.api,
                self.products,
                self.categories,
                self.resolver,
                low_stock_threshold=self.low_stock_threshold,
            )
        except LoadError as e:
            self.surface(e, self.load_failed_text)
            return False
        if self.active:
            self.view = view
        return True

    async def confirm_delete(self, product_id: int, confirm: Confirm) -> bool:
        """Returns ``True`` once the DELETE succeeded, even if the reload fails."""
        if not await ask(confirm, "Are you sure?"):
            return False
        try:
            # load() below refetches products along with the stats
            await self.products.remove(product_id, refresh=False)
        except MutationError as e:
            self.surface(e, f"Error: {e.message}")
            return False
        await self.load()
        return True
