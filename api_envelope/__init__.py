"""Uniform API response envelopes, pagination metadata and search normalization."""

from api_envelope.handlers import (
    envelope_response,
    install_exception_handlers,
    pagination_params,
    search_params,
)
from api_envelope.options import Metadata, MetaOption, build_metadata, with_pagination
from api_envelope.pagination import (
    Pagination,
    PaginationRequest,
    compute_pagination,
    normalize_request,
)
from api_envelope.response import error_response, paginated_response, single_response
from api_envelope.result import Error, Result, fail, ok
from api_envelope.search import SearchRequest, new_search_request

__all__ = [
    "Error",
    "MetaOption",
    "Metadata",
    "Pagination",
    "PaginationRequest",
    "Result",
    "SearchRequest",
    "build_metadata",
    "compute_pagination",
    "envelope_response",
    "error_response",
    "fail",
    "install_exception_handlers",
    "new_search_request",
    "normalize_request",
    "ok",
    "paginated_response",
    "pagination_params",
    "search_params",
    "single_response",
    "with_pagination",
]
