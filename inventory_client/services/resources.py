"""Endpoint and payload models for each backend collection."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from inventory_client.api.schemas import (
    CategoryRead,
    ProductCreate,
    ProductRead,
    ProductUpdate,
    SellerCreate,
    SellerRead,
    SellerUpdate,
)


@dataclass(frozen=True)
class Resource:
    """One REST collection: ``path`` for list/create, ``path/{id}`` for update/delete."""

    name: str
    path: str
    read_model: type[BaseModel]
    create_model: type[BaseModel] | None = None
    update_model: type[BaseModel] | None = None

    @property
    def read_only(self) -> bool:
        return self.create_model is None

    def item_path(self, entity_id: int) -> str:
        return f"{self.path}/{entity_id}"


PRODUCTS = Resource(
    name="products",
    path="/api/products",
    read_model=ProductRead,
    create_model=ProductCreate,
    update_model=ProductUpdate,
)

CATEGORIES = Resource(
    name="categories",
    path="/api/categories",
    read_model=CategoryRead,
)

SELLERS = Resource(
    name="sellers",
    path="/api/sellers",
    read_model=SellerRead,
    create_model=SellerCreate,
    update_model=SellerUpdate,
)

DASHBOARD_STATS_PATH = "/api/dashboard/stats"
LOGIN_PATH = "/api/auth/login"
