"""Schemas for beer and rating CRUD endpoints (/v1/beers, /v1/ratings)."""

from datetime import datetime

from pydantic import BaseModel, Field


class BeerCreate(BaseModel):
    """Request body for creating a beer.

    Presence checks happen in the store so that missing fields produce the
    same error format as every other validation failure.
    """

    name: str | None = None
    price: float | None = None
    alcohol_percentage: float | None = Field(alias="alcoholPercentage", default=None)
    image_url: str | None = Field(alias="imageUrl", default=None)

    model_config = {"populate_by_name": True}


class BeerUpdate(BeerCreate):
    """Request body for updating a beer (name, price, ABV required)."""


class RatingCreate(BaseModel):
    """Request body for recording a rating."""

    beer_id: str | None = Field(alias="beerId", default=None)
    value: int | None = None

    model_config = {"populate_by_name": True}


class RatingSummary(BaseModel):
    """Rating as nested inside a beer."""

    id: str
    value: int


class RatingOut(BaseModel):
    """A stored rating."""

    id: str
    beer_id: str = Field(alias="beerId")
    value: int
    created_at: datetime | None = Field(alias="createdAt", default=None)

    model_config = {"populate_by_name": True}


class BeerOut(BaseModel):
    """A stored beer."""

    id: str
    name: str
    price: float | None = None
    alcohol_percentage: float | None = Field(alias="alcoholPercentage", default=None)
    image_url: str | None = Field(alias="imageUrl", default=None)
    created_at: datetime | None = Field(alias="createdAt", default=None)

    model_config = {"populate_by_name": True}


class BeerWithRatings(BeerOut):
    """A beer joined with its ratings in insertion order."""

    ratings: list[RatingSummary] = Field(default_factory=list)
