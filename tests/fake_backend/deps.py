"""State dependency shared by the routers."""

from fastapi import Request

from fake_backend.state import BackendState


def get_state(request: Request) -> BackendState:
    return request.app.state.backend
