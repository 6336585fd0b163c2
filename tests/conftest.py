"""Shared fixtures for api_envelope tests."""

from __future__ import annotations

import pytest
from fastapi import Depends, FastAPI, HTTPException
from fastapi.testclient import TestClient

from api_envelope.handlers import (
    envelope_response,
    install_exception_handlers,
    pagination_params,
    search_params,
)
from api_envelope.pagination import PaginationRequest
from api_envelope.response import paginated_response
from api_envelope.result import ok
from api_envelope.search import SearchRequest

ITEMS = [{"id": i, "name": f"item {i}"} for i in range(95)]


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    install_exception_handlers(app)

    @app.get("/items")
    async def list_items(page: PaginationRequest = Depends(pagination_params)):
        window = ITEMS[page.offset : page.offset + page.limit]
        return paginated_response(window, len(ITEMS), page.limit, page.offset)

    @app.get("/search")
    async def search(search: SearchRequest = Depends(search_params)):
        return envelope_response(ok(search.query_value(), "search normalized"))

    @app.get("/items/{item_id}")
    async def get_item(item_id: int):
        if item_id >= len(ITEMS):
            raise HTTPException(status_code=404, detail="Item not found")
        return envelope_response(ok(ITEMS[item_id]))

    @app.get("/secure")
    async def secure():
        raise HTTPException(
            status_code=401,
            detail={"reason": "expired"},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database exploded")

    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    # Unhandled errors are re-raised by the test client unless told otherwise
    return TestClient(app, raise_server_exceptions=False)
