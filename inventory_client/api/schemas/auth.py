"""Login request/response payloads."""

from inventory_client.api.schemas.base import WireModel


class LoginRequest(WireModel):
    username: str
    password: str


class LoginResponse(WireModel):
    success: bool
    message: str | None = None
