"""
Pagination request normalization and response metadata.

Two separate steps:

  1. ``normalize_request`` clamps untrusted client input so it can be used
     directly in a query's OFFSET/LIMIT clause.
  2. ``compute_pagination`` derives display metadata once the authoritative
     total is known (after the query has run).
"""

import logging

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from api_envelope.config import settings

logger = logging.getLogger(__name__)


class PaginationRequest(BaseModel):
    """Client-supplied window. Always normalized on construction."""

    offset: int = 0
    limit: int = Field(default_factory=lambda: settings.default_limit)

    model_config = {"frozen": True}

    @field_validator("offset")
    @classmethod
    def clamp_offset(cls, v: int) -> int:
        if v < 0:
            logger.debug("Clamping negative offset %d to 0", v)
            return 0
        return v

    @field_validator("limit")
    @classmethod
    def clamp_limit(cls, v: int) -> int:
        if v < 1:
            logger.debug("Limit %d below 1, using default %d", v, settings.default_limit)
            return settings.default_limit
        if v > settings.max_limit:
            logger.debug("Limit %d above maximum, clamping to %d", v, settings.max_limit)
            return settings.max_limit
        return v

    def get_offset(self) -> int:
        return self.offset

    def get_limit(self) -> int:
        return self.limit


class Pagination(BaseModel):
    """Server-computed description of where a page sits in the full result set."""

    total: int
    page: int
    total_pages: int
    limit: int
    offset: int
    has_next: bool
    has_prev: bool

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "serialize_by_alias": True,
    }

    @classmethod
    def from_request(cls, total: int, request: PaginationRequest) -> "Pagination":
        return compute_pagination(total, request.offset, request.limit)


def normalize_request(offset: int, limit: int) -> PaginationRequest:
    """Clamp offset to >= 0 and limit to [1, max_limit] (default when < 1)."""
    return PaginationRequest(offset=offset, limit=limit)


def compute_pagination(total: int, offset: int, limit: int) -> Pagination:
    """
    Derive page metadata from an authoritative *total* and an offset/limit pair.

    *offset* and *limit* are expected to come from ``normalize_request``; they
    are used as given and never re-normalized here. A non-positive *limit*
    yields page 1 and zero total pages instead of dividing by zero.
    """
    page = 1
    total_pages = 0
    if limit > 0:
        page = offset // limit + 1
        total_pages = (total + limit - 1) // limit

    return Pagination(
        total=total,
        page=page,
        total_pages=total_pages,
        limit=limit,
        offset=offset,
        has_next=offset + limit < total,
        has_prev=offset > 0,
    )
