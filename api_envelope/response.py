"""Standard response envelope builders for API handlers."""

from typing import Any, Sequence, Union

from api_envelope.pagination import compute_pagination
from api_envelope.options import with_pagination
from api_envelope.result import fail, ok


def paginated_response(
    items: Sequence[Any],
    total: int,
    limit: int,
    offset: int,
    message: str = "",
) -> dict:
    pagination = compute_pagination(total, offset, limit)
    return ok(list(items), message, with_pagination(pagination)).to_dict()


def single_response(item: Any, message: str = "") -> dict:
    return ok(item, message).to_dict()


def error_response(code: str, error: Union[BaseException, str]) -> dict:
    return fail(code, error).to_dict()
