"""Composite dashboard read: stats, products and categories, all or nothing."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from inventory_client.api.client import ApiClient
from inventory_client.api.schemas import CategoryRead, DashboardStats, ProductRead
from inventory_client.core.config import get_settings
from inventory_client.core.errors import LoadError
from inventory_client.services.entity_store import EntityStore
from inventory_client.services.image_resolver import ImageResolver
from inventory_client.services.resources import DASHBOARD_STATS_PATH

logger = logging.getLogger(__name__)

IN_STOCK = "In Stock"
LOW_STOCK = "Low Stock"
OUT_OF_STOCK = "Out of Stock"


def stock_status(stock: int, low_stock_threshold: int | None = None) -> str:
    """Badge text for a stock level."""
    threshold = (
        get_settings().low_stock_threshold
        if low_stock_threshold is None
        else low_stock_threshold
    )
    if stock > threshold:
        return IN_STOCK
    if stock > 0:
        return LOW_STOCK
    return OUT_OF_STOCK


@dataclass(frozen=True)
class ProductCard:
    product: ProductRead
    image_uri: str
    stock_status: str


@dataclass(frozen=True)
class DashboardView:
    stats: DashboardStats
    categories: tuple[CategoryRead, ...]
    cards: tuple[ProductCard, ...]


async def fetch_stats(api: ApiClient) -> DashboardStats:
    data = await api.get_json(DASHBOARD_STATS_PATH, "dashboard stats")
    try:
        return DashboardStats.model_validate(data)
    except PydanticValidationError as e:
        raise LoadError("dashboard stats", "Response did not match the expected shape") from e


async def load_dashboard(
    api: ApiClient,
    products: EntityStore[ProductRead],
    categories: EntityStore[CategoryRead],
    resolver: ImageResolver | None = None,
    *,
    low_stock_threshold: int | None = None,
) -> DashboardView:
    """Issue the three reads concurrently and join them.

    Raises:
        LoadError: if any read fails; no partial view is returned.
    """
    resolver = resolver or ImageResolver()
    results = await asyncio.gather(
        fetch_stats(api),
        products.list(),
        categories.list(),
        return_exceptions=True,
    )
    failures = [result for result in results if isinstance(result, BaseException)]
    if failures:
        for failure in failures:
            if not isinstance(failure, LoadError):
                # Not a network outcome; let it surface as a real bug
                raise failure
        logger.warning(
            "Dashboard load failed: "
            + "; ".join(f"{f.resource}: {f.detail}" for f in failures)
        )
        raise LoadError(
            "dashboard data", "; ".join(f.message for f in failures)
        ) from failures[0]

    stats, product_list, category_list = results
    cards = tuple(
        ProductCard(
            product=product,
            image_uri=resolver.resolve(product),
            stock_status=stock_status(product.stock, low_stock_threshold),
        )
        for product in product_list
    )
    return DashboardView(stats=stats, categories=tuple(category_list), cards=cards)
