"""Request bodies accepted by the fake backend."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Body(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductBody(_Body):
    name: str | None = None
    category_name: str | None = None
    price: float | None = None
    stock: int | None = None
    image_url: str | None = None


class SellerBody(_Body):
    name: str | None = None
    email: str | None = None
    password: str | None = None
    phone: str | None = None
    address: str | None = None
    status_id: int | None = None


class LoginBody(_Body):
    username: str = ""
    password: str = ""
