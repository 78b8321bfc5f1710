"""
Shared pydantic building blocks for API responses.

Every response is wrapped in an envelope with a success flag.
Field names are snake_case in Python and camelCase on the wire.
"""

from decimal import Decimal
from typing import Annotated, Generic, TypeVar

from pydantic import AliasGenerator, BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Money is kept as Decimal internally and written to JSON as a
# number rounded to 2 decimal places.
Money = Annotated[
    Decimal,
    PlainSerializer(
        lambda v: float(round(v, 2)), return_type=float, when_used="json"
    ),
]


class ResponseModel(BaseModel):
    """Base for response schemas: read from ORM objects, write camelCase."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class RequestModel(BaseModel):
    """Base for request bodies: accept camelCase or snake_case keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Envelope(ResponseModel, Generic[T]):
    success: bool = True
    data: T


class ListEnvelope(ResponseModel, Generic[T]):
    success: bool = True
    data: list[T]
    count: int


class Pagination(ResponseModel):
    total: int
    limit: int
    offset: int
    has_next: bool


class PageEnvelope(ResponseModel, Generic[T]):
    success: bool = True
    data: list[T]
    pagination: Pagination


class ErrorResponse(ResponseModel):
    success: bool = False
    error: str
    details: str | None = None
