from __future__ import annotations

import pytest

from inventory_client.core.errors import LoadError
from inventory_client.services.dashboard import (
    IN_STOCK,
    LOW_STOCK,
    OUT_OF_STOCK,
    load_dashboard,
    stock_status,
)
from inventory_client.services.image_resolver import CATEGORY_IMAGES, ImageResolver

PLACEHOLDER = "https://placeholder.test/product.png"


@pytest.mark.parametrize(
    ("stock", "expected"),
    [(0, OUT_OF_STOCK), (-3, OUT_OF_STOCK), (1, LOW_STOCK), (10, LOW_STOCK), (11, IN_STOCK)],
)
def test_stock_status_thresholds(stock, expected):
    assert stock_status(stock, low_stock_threshold=10) == expected


@pytest.mark.asyncio
async def test_load_dashboard_joins_stats_products_and_categories(api, products, categories):
    view = await load_dashboard(
        api, products, categories, ImageResolver(placeholder=PLACEHOLDER), low_stock_threshold=10
    )

    assert view.stats.total_products == 3
    assert view.stats.total_categories == 5
    assert view.stats.total_inventory_value == 670000.0
    assert view.stats.total_stock == 16
    assert [c.name for c in view.categories][:2] == ["Electronics", "Mobiles"]
    assert [card.stock_status for card in view.cards] == [IN_STOCK, LOW_STOCK, OUT_OF_STOCK]
    assert view.cards[0].image_uri == CATEGORY_IMAGES["Electronics"][0]
    assert view.cards[2].image_uri == CATEGORY_IMAGES["Books"][2]
    # The stores are refreshed as a side effect
    assert products.loaded and categories.loaded


@pytest.mark.asyncio
async def test_any_failed_read_fails_the_whole_dashboard(api, products, categories, backend):
    backend.fail_next("GET", "/api/dashboard/stats")

    with pytest.raises(LoadError) as excinfo:
        await load_dashboard(api, products, categories)

    assert excinfo.value.message == "Failed to load dashboard data"
    assert "dashboard stats" in excinfo.value.detail


@pytest.mark.asyncio
async def test_backend_down_is_a_single_load_error(api, products, categories, transport):
    transport.down = True

    with pytest.raises(LoadError) as excinfo:
        await load_dashboard(api, products, categories)

    assert excinfo.value.resource == "dashboard data"
    assert not products.loaded
