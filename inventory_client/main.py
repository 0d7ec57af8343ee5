"""Client bootstrap: one HTTP client, one store per collection, session and screens."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from inventory_client.api.client import ApiClient
from inventory_client.api.schemas import CategoryRead, ProductRead, SellerRead
from inventory_client.core.config import Settings, get_settings
from inventory_client.services.entity_store import EntityStore
from inventory_client.services.form_editor import PRODUCT_FORM, FormSchema
from inventory_client.services.image_resolver import ImageResolver
from inventory_client.services.resources import CATEGORIES, PRODUCTS, SELLERS
from inventory_client.services.screens import AdminScreen, DashboardScreen, SellersScreen
from inventory_client.services.session import SessionManager

logger = logging.getLogger(__name__)


class InventoryClient:
    """Shared state for every screen of one running client."""

    def __init__(self, settings: Settings, api: ApiClient) -> None:
        self.settings = settings
        self.api = api
        self.products: EntityStore[ProductRead] = EntityStore(api, PRODUCTS)
        self.categories: EntityStore[CategoryRead] = EntityStore(api, CATEGORIES)
        self.sellers: EntityStore[SellerRead] = EntityStore(api, SELLERS)
        self.images = ImageResolver(placeholder=settings.image_placeholder_url)
        self.sessions = SessionManager(api)

    async def close(self) -> None:
        await self.api.close()

    async def __aenter__(self) -> InventoryClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def dashboard_screen(self) -> DashboardScreen:
        return DashboardScreen(
            self.sessions.require(),
            self.api,
            self.products,
            self.categories,
            self.images,
            low_stock_threshold=self.settings.low_stock_threshold,
        )

    def admin_screen(self, schema: FormSchema = PRODUCT_FORM) -> AdminScreen:
        return AdminScreen(self.sessions.require(), self.products, self.categories, schema)

    def sellers_screen(self) -> SellersScreen:
        return SellersScreen(self.sessions.require(), self.sellers)


def create_client(
    settings: Settings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> InventoryClient:
    """Instantiate the client against the configured backend."""
    settings = settings or get_settings()
    api = ApiClient(settings=settings, transport=transport)
    logger.info(f"[{settings.app_name}] backend: {api.base_url}")
    return InventoryClient(settings, api)
