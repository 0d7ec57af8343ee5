"""Pydantic models describing Seller payloads."""

from pydantic import Field

from inventory_client.api.schemas.base import WireModel


class SellerBase(WireModel):
    name: str
    email: str
    password: str
    phone: str | None = None
    address: str | None = None
    status_id: int | None = None


class SellerCreate(SellerBase):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SellerUpdate(WireModel):
    name: str | None = Field(None, min_length=1)
    email: str | None = Field(None, min_length=1)
    password: str | None = Field(None, min_length=1)
    phone: str | None = None
    address: str | None = None
    status_id: int | None = None


class SellerRead(SellerBase):
    id: int
    # Older rows may lack credentials; reads must not reject them
    email: str = ""
    password: str = ""
