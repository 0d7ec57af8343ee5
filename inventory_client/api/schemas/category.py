"""Category payloads; the name is the join key used by products."""

from inventory_client.api.schemas.base import WireModel


class CategoryRead(WireModel):
    id: int
    name: str
