"""In-process stand-in for the inventory REST backend."""

from fake_backend.app import create_app
from fake_backend.state import BackendState

__all__ = ["BackendState", "create_app"]
