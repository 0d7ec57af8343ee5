"""Login state with an explicit create-on-login / tear-down-on-logout lifecycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from inventory_client.api.client import ApiClient
from inventory_client.api.schemas import LoginRequest, LoginResponse
from inventory_client.core.errors import (
    InventoryClientError,
    NotAuthenticatedError,
    ValidationError,
)
from inventory_client.services.resources import LOGIN_PATH
from inventory_client.utils.validators import require_fields

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """An authenticated session. The backend returns no token, so none is kept."""

    username: str
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    active: bool = True


class SessionManager:
    """Holds at most one session for the running client."""

    def __init__(self, api: ApiClient) -> None:
        self.api = api
        self._session: Session | None = None
        self.message: str | None = None

    @property
    def current(self) -> Session | None:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None and self._session.active

    def require(self) -> Session:
        if not self.is_authenticated:
            raise NotAuthenticatedError()
        return self._session

    async def login(self, username: str, password: str) -> Session | None:
        """Create a session when the backend accepts the credentials.

        Returns:
            Session | None: ``None`` when the credentials are rejected or the
            backend cannot be reached; ``self.message`` says why.

        Raises:
            ValidationError: username or password is blank; nothing is sent.
        """
        try:
            require_fields({"username": username, "password": password}, ("username", "password"))
        except ValidationError:
            self.message = "Please enter both username and password"
            raise

        request = LoginRequest(username=username, password=password)
        try:
            response = await self.api.send("POST", LOGIN_PATH, "login", request.to_wire())
            result = LoginResponse.model_validate(response.json())
        except InventoryClientError as e:
            logger.error(f"Login request failed: {e.message}")
            self.message = "Login failed. Make sure backend is running."
            return None
        except (ValueError, PydanticValidationError) as e:
            logger.error(f"Unreadable login response: {e}")
            self.message = "Login failed. Make sure backend is running."
            return None

        if not result.success:
            logger.warning(f"Login rejected: username={username}")
            self.message = result.message or "Invalid username or password"
            return None

        self.logout()
        self._session = Session(username=username)
        self.message = None
        logger.info(f"Login successful: username={username}")
        return self._session

    def logout(self) -> None:
        if self._session is not None:
            self._session.active = False
            logger.info(f"Logged out: username={self._session.username}")
        self._session = None
