"""Schemas for the public result views (/v1/ui/leaderboard, /v1/ui/stats)."""

from enum import Enum

from pydantic import BaseModel, Field


class Medal(Enum):
    """Podium marker for the top three leaderboard entries."""

    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"


class CorrelationTrend(Enum):
    """Narrative band for the price vs. rating correlation."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    WEAK = "weak"


class LeaderboardEntry(BaseModel):
    """A single rated beer on the leaderboard.

    `name` and `imageUrl` are only set when beer names are revealed.
    """

    id: str
    rank: int = Field(ge=1)
    beer_number: int = Field(alias="beerNumber", ge=1)
    label: str
    name: str | None = None
    image_url: str | None = Field(alias="imageUrl", default=None)
    price: float | None = None
    alcohol_percentage: float | None = Field(alias="alcoholPercentage", default=None)
    average_rating: float = Field(alias="averageRating", ge=0, le=5)
    rating_count: int = Field(alias="ratingCount", ge=1)
    ratings: list[int] = Field(default_factory=list)
    medal: Medal | None = None

    model_config = {"populate_by_name": True}


class LeaderboardResponse(BaseModel):
    """Response payload for GET /v1/ui/leaderboard."""

    show_beer_names: bool = Field(alias="showBeerNames")
    entries: list[LeaderboardEntry]
    rated_count: int = Field(alias="ratedCount", ge=0)
    total_count: int = Field(alias="totalCount", ge=0)

    model_config = {"populate_by_name": True}


class StatsPoint(BaseModel):
    """A rated, priced beer plotted on the price vs. rating chart."""

    id: str
    beer_number: int = Field(alias="beerNumber", ge=1)
    label: str
    name: str | None = None
    price: float
    alcohol_percentage: float | None = Field(alias="alcoholPercentage", default=None)
    average_rating: float = Field(alias="averageRating", ge=0, le=5)
    rating_count: int = Field(alias="ratingCount", ge=1)

    model_config = {"populate_by_name": True}


class PriceDomain(BaseModel):
    """Padded price axis bounds for the chart."""

    min: float
    max: float


class StatsResponse(BaseModel):
    """Response payload for GET /v1/ui/stats."""

    show_beer_names: bool = Field(alias="showBeerNames")
    points: list[StatsPoint]
    sample_size: int = Field(alias="sampleSize", ge=0)
    correlation: float = Field(ge=-1, le=1)
    trend: CorrelationTrend
    summary: str
    price_domain: PriceDomain = Field(alias="priceDomain")

    model_config = {"populate_by_name": True}
