"""Deterministic display images for products without a stored image."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic.alias_generators import to_camel

from inventory_client.core.config import get_settings

_UNSPLASH = "https://images.unsplash.com/photo-{}?w=400&h=300&fit=crop"

CATEGORY_IMAGES: dict[str, tuple[str, ...]] = {
    "Electronics": tuple(
        _UNSPLASH.format(photo)
        for photo in (
            "1498049794561-7780e7231661",
            "1526738549149-8e07eca6c147",
            "1505740420928-5e560c06d30e",
            "1511385348-c1122a2b7f75",
        )
    ),
    "Mobiles": tuple(
        _UNSPLASH.format(photo)
        for photo in (
            "1511707171634-5f897ff02aa9",
            "1598327105666-5b89351aff97",
            "1601784551446-20c9e07cdbdb",
            "1592286927505-ed6f8b3b2f80",
        )
    ),
    "Food": tuple(
        _UNSPLASH.format(photo)
        for photo in (
            "1546069901-ba9599a7e63c",
            "1565299624946-b28f40a0ae38",
            "1504674900247-0877df9cc836",
            "1555939594-58d7cb561ad1",
        )
    ),
    "Fashion": tuple(
        _UNSPLASH.format(photo)
        for photo in (
            "1523381210434-271e8be1f52b",
            "1591047139829-d91aecb6caea",
            "1460353581641-37baddab0fa2",
            "1516762689617-e1cffcef479d",
        )
    ),
    "Books": tuple(
        _UNSPLASH.format(photo)
        for photo in (
            "1495446815901-a7297e633e8d",
            "1512820790803-83ca734da794",
            "1544947950-fa07a98d237f",
            "1481627834876-b7833e8f5570",
        )
    ),
    "Stationery": tuple(
        _UNSPLASH.format(photo)
        for photo in (
            "1544947950-fa07a98d237f",
            "1517842645767-c639042777db",
            "1583485088034-697b5bc54ccc",
            "1586075010923-2dd4570fb338",
        )
    ),
    "Home & Garden": tuple(
        _UNSPLASH.format(photo)
        for photo in (
            "1556909114-f6e7ad7d3136",
            "1615875221249-4e1c4c4c5901",
            "1558618666-fcd25c85cd64",
            "1513694203232-719a280e022f",
        )
    ),
}

DEFAULT_IMAGES: tuple[str, ...] = (_UNSPLASH.format("1505740420928-5e560c06d30e"),)


def _field(product: Any, name: str) -> Any:
    if isinstance(product, Mapping):
        # Raw backend rows use camelCase keys
        return product.get(name, product.get(to_camel(name)))
    return getattr(product, name, None)


class ImageResolver:
    """Pick a stable image per product id, round-robin within its category.

    ``resolve`` is pure: it depends only on the product's id, category name
    and stored image URL, so the same product maps to the same image on every
    render without any server-side storage.
    """

    def __init__(
        self,
        category_images: Mapping[str, Sequence[str]] | None = None,
        default_images: Sequence[str] | None = None,
        placeholder: str | None = None,
    ) -> None:
        source = CATEGORY_IMAGES if category_images is None else category_images
        self.category_images = {name: tuple(uris) for name, uris in source.items() if uris}
        self.default_images = tuple(default_images or DEFAULT_IMAGES)
        self.placeholder = placeholder or get_settings().image_placeholder_url

    def candidates(self, category_name: str | None) -> tuple[str, ...]:
        return self.category_images.get(category_name or "", self.default_images)

    def resolve(self, product: Any) -> str:
        """Return the stored image URL, else the category candidate for this id."""
        image_url = _field(product, "image_url")
        if image_url:
            return image_url

        candidates = self.candidates(_field(product, "category_name"))
        product_id = _field(product, "id")
        if product_id is None:
            return candidates[0]
        return candidates[(int(product_id) - 1) % len(candidates)]

    def display_uri(self, product: Any, *, load_failed: bool = False) -> str:
        """URI to render; the placeholder once the view reports a load failure.

        The failure is not remembered, so the next ``resolve`` is unaffected.
        """
        if load_failed:
            return self.placeholder
        return self.resolve(product)


def resolve_image(product: Any) -> str:
    """Module-level shortcut using the built-in category table."""
    return ImageResolver().resolve(product)
