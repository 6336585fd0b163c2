"""
Uniform success/failure envelope returned by every API handler.

Wire shape::

    {"success": true, "data": ..., "message": "...", "meta": {...}}
    {"success": false, "error": {"code": "...", "message": "..."}, "meta": {...}}

``message`` and ``error.code`` are dropped when empty, ``error`` and ``meta``
when absent, and ``data`` on the failure path.
"""

import logging
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, model_serializer

from api_envelope.options import MetaOption, Metadata, build_metadata

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Error(BaseModel):
    code: str = ""
    message: str

    model_config = {"frozen": True}

    @model_serializer(mode="wrap")
    def omit_empty_code(self, handler):
        data = handler(self)
        if not self.code:
            data.pop("code", None)
        return data


class Result(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    message: str = ""
    error: Optional[Error] = None
    meta: Optional[Metadata] = None

    model_config = {"frozen": True}

    @model_serializer(mode="wrap")
    def omit_empty(self, handler):
        data = handler(self)
        # A success payload is always emitted, even when falsy
        if not self.success:
            data.pop("data", None)
        if not self.message:
            data.pop("message", None)
        if self.error is None:
            data.pop("error", None)
        if self.meta is None:
            data.pop("meta", None)
        return data

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def ok(value: T, message: str = "", *options: MetaOption) -> Result[T]:
    """Wrap *value* in a success envelope, applying *options* to its metadata."""
    return Result(
        success=True,
        data=value,
        message=message,
        meta=build_metadata(options),
    )


def fail(code: str, error: Union[BaseException, str], *options: MetaOption) -> Result[Any]:
    """
    Wrap *error* in a failure envelope.

    ``error.message`` is always ``str(error)``; *code* may be empty.
    """
    logger.debug("Building failure envelope code=%r from %s", code, type(error).__name__)
    return Result(
        success=False,
        error=Error(code=code, message=str(error)),
        meta=build_metadata(options),
    )
