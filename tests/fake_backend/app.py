"""FastAPI application wiring for the fake backend."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fake_backend.routers import catalog, products, sellers
from fake_backend.state import BackendState


def create_app(state: BackendState | None = None) -> FastAPI:
    app = FastAPI(title="Fake Inventory Backend")
    app.state.backend = state or BackendState.seeded()

    @app.middleware("http")
    async def inject_failures(request: Request, call_next):
        if app.state.backend.take_failure(request.method, request.url.path):
            return JSONResponse({"detail": "Injected failure"}, status_code=500)
        return await call_next(request)

    app.include_router(products.router, prefix="/api/products", tags=["products"])
    app.include_router(sellers.router, prefix="/api/sellers", tags=["sellers"])
    app.include_router(catalog.router, prefix="/api")
    return app
