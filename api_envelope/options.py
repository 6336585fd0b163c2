"""Envelope metadata and the options that populate it."""

from typing import Callable, Iterable, Optional

from pydantic import BaseModel, model_serializer

from api_envelope.pagination import Pagination


class Metadata(BaseModel):
    """
    Side-channel attached to an envelope, independent of success or failure.

    Every field is optional and left out of the serialized output when unset,
    so new fields can be added without affecting existing consumers.
    """

    pagination: Optional[Pagination] = None

    @model_serializer(mode="wrap")
    def omit_unset(self, handler):
        data = handler(self)
        return {k: v for k, v in data.items() if v is not None}


# An option receives the metadata holder while the envelope is being built
MetaOption = Callable[[Metadata], None]


def with_pagination(pagination: Pagination) -> MetaOption:
    """Attach a copy of *pagination* to the envelope metadata."""
    snapshot = pagination.model_copy(deep=True)

    def apply(meta: Metadata) -> None:
        meta.pagination = snapshot

    return apply


def build_metadata(options: Iterable[MetaOption]) -> Optional[Metadata]:
    """Apply *options* in order to a fresh holder. ``None`` when there are none."""
    options = list(options)
    if not options:
        return None
    meta = Metadata()
    for option in options:
        option(meta)
    return meta
