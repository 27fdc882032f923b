"""Pydantic schemas for API request/response validation."""

from beer_tasting.schemas.beers import (
    BeerCreate,
    BeerOut,
    BeerUpdate,
    BeerWithRatings,
    RatingCreate,
    RatingOut,
    RatingSummary,
)
from beer_tasting.schemas.common import ErrorResponse, SuccessResponse
from beer_tasting.schemas.tasting_settings import SettingsOut, SettingsUpdate
from beer_tasting.schemas.views import (
    CorrelationTrend,
    LeaderboardEntry,
    LeaderboardResponse,
    Medal,
    PriceDomain,
    StatsPoint,
    StatsResponse,
)

__all__ = [
    "BeerCreate",
    "BeerOut",
    "BeerUpdate",
    "BeerWithRatings",
    "RatingCreate",
    "RatingOut",
    "RatingSummary",
    "ErrorResponse",
    "SuccessResponse",
    "SettingsOut",
    "SettingsUpdate",
    "CorrelationTrend",
    "LeaderboardEntry",
    "LeaderboardResponse",
    "Medal",
    "PriceDomain",
    "StatsPoint",
    "StatsResponse",
]
