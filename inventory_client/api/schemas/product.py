"""Pydantic models describing Product payloads."""

from pydantic import Field

from inventory_client.api.schemas.base import WireModel


class ProductBase(WireModel):
    name: str
    # Soft reference to Category.name; not checked against the category list
    category_name: str | None = None
    price: float = 0.0
    stock: int = 0
    image_url: str | None = None


class ProductCreate(ProductBase):
    """Schema for modal-created product rows."""

    name: str = Field(..., min_length=1)
    price: float = Field(0.0, ge=0)
    stock: int = Field(0, ge=0)


class ProductUpdate(WireModel):
    name: str | None = Field(None, min_length=1)
    category_name: str | None = None
    price: float | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)
    image_url: str | None = None


class ProductRead(ProductBase):
    id: int
