from __future__ import annotations

from inventory_client.api.schemas import ProductRead
from inventory_client.services.image_resolver import (
    CATEGORY_IMAGES,
    DEFAULT_IMAGES,
    ImageResolver,
    resolve_image,
)

PLACEHOLDER = "https://placeholder.test/product.png"


def make_product(product_id: int | None, category: str | None, image_url: str | None = None):
    data = {"name": f"item-{product_id}", "categoryName": category, "imageUrl": image_url}
    if product_id is None:
        return data
    return ProductRead.model_validate({"id": product_id, **data})


def test_resolve_is_pure_for_fixed_inputs():
    resolver = ImageResolver(placeholder=PLACEHOLDER)
    product = make_product(7, "Books")
    first = resolver.resolve(product)
    assert all(resolver.resolve(product) == first for _ in range(5))
    assert ImageResolver(placeholder=PLACEHOLDER).resolve(make_product(7, "Books")) == first


def test_ids_round_robin_over_candidates_twice():
    candidates = ("a.png", "b.png", "c.png")
    resolver = ImageResolver({"Toys": candidates}, placeholder=PLACEHOLDER)
    resolved = [resolver.resolve(make_product(i, "Toys")) for i in range(1, 2 * len(candidates) + 1)]
    assert resolved == list(candidates) * 2
    assert all(resolved.count(uri) == 2 for uri in candidates)


def test_electronics_example_indices():
    electronics = CATEGORY_IMAGES["Electronics"]
    assert len(electronics) == 4
    resolver = ImageResolver(placeholder=PLACEHOLDER)
    got = [resolver.resolve(make_product(i, "Electronics")) for i in (1, 2, 5)]
    assert got == [electronics[0], electronics[1], electronics[0]]


def test_stored_image_url_wins():
    resolver = ImageResolver(placeholder=PLACEHOLDER)
    product = make_product(3, "Electronics", "https://cdn.test/laptop.jpg")
    assert resolver.resolve(product) == "https://cdn.test/laptop.jpg"


def test_empty_image_url_falls_back_to_category():
    resolver = ImageResolver(placeholder=PLACEHOLDER)
    assert resolver.resolve(make_product(2, "Food", "")) == CATEGORY_IMAGES["Food"][1]


def test_unknown_or_missing_category_uses_default_list():
    resolver = ImageResolver(placeholder=PLACEHOLDER)
    assert resolver.resolve(make_product(9, "Garden Gnomes")) == DEFAULT_IMAGES[0]
    assert resolver.resolve(make_product(4, None)) == DEFAULT_IMAGES[0]


def test_raw_backend_row_and_product_without_id():
    resolver = ImageResolver(placeholder=PLACEHOLDER)
    row = {"id": 6, "categoryName": "Mobiles", "imageUrl": None}
    assert resolver.resolve(row) == CATEGORY_IMAGES["Mobiles"][1]
    assert resolver.resolve(make_product(None, "Mobiles")) == CATEGORY_IMAGES["Mobiles"][0]


def test_load_failure_placeholder_does_not_change_resolve():
    resolver = ImageResolver(placeholder=PLACEHOLDER)
    product = make_product(3, "Fashion")
    expected = CATEGORY_IMAGES["Fashion"][2]
    assert resolver.display_uri(product, load_failed=True) == PLACEHOLDER
    assert resolver.resolve(product) == expected
    assert resolver.display_uri(product) == expected


def test_module_shortcut_matches_default_resolver():
    product = make_product(8, "Stationery")
    assert resolve_image(product) == CATEGORY_IMAGES["Stationery"][3]
