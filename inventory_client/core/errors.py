"""Error taxonomy shared by stores, editors and screens."""

from __future__ import annotations


class InventoryClientError(Exception):
    """Base class; ``message`` is safe to show to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LoadError(InventoryClientError):
    """A GET failed: transport error, non-success status or unreadable body."""

    def __init__(
        self,
        resource: str,
        detail: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"Failed to load {resource}")
        self.resource = resource
        self.detail = detail
        # Kept for logs only; callers never branch on it
        self.status_code = status_code


class MutationError(InventoryClientError):
    """A POST, PUT or DELETE failed (same collapse as LoadError)."""

    def __init__(
        self,
        action: str,
        resource: str,
        detail: str | None = None,
        *,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"Failed to {action} {resource}")
        self.action = action
        self.resource = resource
        self.detail = detail
        self.status_code = status_code


class ValidationError(InventoryClientError, ValueError):
    """Local check failed before any network call."""

    def __init__(
        self,
        missing: tuple[str, ...] | list[str] = (),
        detail: str | None = None,
    ) -> None:
        self.missing = tuple(missing)
        if detail is None:
            labels = ", ".join(field_label(name) for name in self.missing)
            detail = f"Please fill in all required fields ({labels})"
        super().__init__(detail)


class EditorStateError(InventoryClientError, RuntimeError):
    """A FormEditor operation was called in a state that does not allow it."""


class NotAuthenticatedError(InventoryClientError):
    """An operation needs a session and none is active."""

    def __init__(self) -> None:
        super().__init__("Please log in first")


def field_label(name: str) -> str:
    """Turn a snake_case field name into a form label (``status_id`` -> ``Status Id``)."""
    return " ".join(part.capitalize() for part in name.split("_"))
