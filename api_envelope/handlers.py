"""FastAPI wiring: query-param dependencies and envelope-shaped error handlers."""

import json
import logging
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_envelope.config import settings
from api_envelope.pagination import PaginationRequest, normalize_request
from api_envelope.result import Result, fail
from api_envelope.search import SearchRequest

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def pagination_params(
    offset: int = Query(0, description="Number of items to skip"),
    limit: int = Query(settings.default_limit, description="Maximum items per page"),
) -> PaginationRequest:
    """Out-of-range values are clamped rather than rejected."""
    return normalize_request(offset, limit)


def search_params(
    query: str = Query("", description="Free-text search query"),
) -> SearchRequest:
    return SearchRequest(query=query)


def envelope_response(
    result: Result,
    status_code: int = 200,
    headers: Optional[dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(result.to_dict()),
        headers=headers,
    )


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail
    # Structured details are carried as JSON text in the error message
    message = detail if isinstance(detail, str) else json.dumps(jsonable_encoder(detail))
    return envelope_response(
        fail(f"http_{exc.status_code}", message),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()))
        problems.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg")))
    message = "Validation error"
    if problems:
        message = f"{message}: {'; '.join(problems)}"
    return envelope_response(fail("validation_error", message), status_code=422)


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return envelope_response(
        fail("internal_error", "Internal server error"),
        status_code=500,
    )


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
