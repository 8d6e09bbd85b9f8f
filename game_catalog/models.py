"""Pydantic models shared across the Game Catalog API."""

from datetime import date
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# A double carries any 15-digit decimal exactly, so prices inside that bound
# survive being written to JSON as a plain number.
PRICE_MAX_DIGITS = 15

Price = Annotated[
    Decimal,
    Field(max_digits=PRICE_MAX_DIGITS),
    PlainSerializer(lambda value: float(value), return_type=float, when_used="json"),
]


class _CatalogModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class Game(_CatalogModel):
    """A single catalog entry as stored and returned by the API."""

    id: int
    name: str
    genre: str
    price: Price
    release_date: date


class CreateGameRequest(_CatalogModel):
    """Client-supplied fields for a new entry; the store assigns the id."""

    name: str
    genre: str
    price: Price
    release_date: date


class UpdateGameRequest(CreateGameRequest):
    """Replacement fields for an existing entry; its id is kept."""
