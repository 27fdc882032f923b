"""Catalog service: joins stores into snapshots and feeds the ranking service.

Each public view reads the beers, their ratings and the settings record once
per request; nothing is cached between requests.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.models import Beer, Rating
from beer_tasting.schemas import (
    BeerOut,
    BeerWithRatings,
    LeaderboardResponse,
    RatingOut,
    RatingSummary,
    StatsResponse,
)
from beer_tasting.services.ranking import build_leaderboard, build_stats
from beer_tasting.stores.beers import list_beers
from beer_tasting.stores.ratings import list_ratings_for_beers
from beer_tasting.stores.tasting_settings import get_or_create_settings


def beer_to_schema(beer: Beer) -> BeerOut:
    return BeerOut(
        id=beer.beer_id,
        name=beer.name,
        price=beer.price,
        alcohol_percentage=beer.alcohol_percentage,
        image_url=beer.image_url,
        created_at=beer.created_at,
    )


def beer_with_ratings_to_schema(beer: Beer, ratings: list[Rating]) -> BeerWithRatings:
    return BeerWithRatings(
        **beer_to_schema(beer).model_dump(),
        ratings=[RatingSummary(id=r.rating_id, value=r.value) for r in ratings],
    )


def rating_to_schema(rating: Rating) -> RatingOut:
    return RatingOut(
        id=rating.rating_id,
        beer_id=rating.beer_id,
        value=rating.value,
        created_at=rating.created_at,
    )


async def list_beers_with_ratings(session: AsyncSession) -> list[BeerWithRatings]:
    """Get all beers in creation order, each with its ratings.

    Uses two queries (beers, then their ratings) regardless of beer count.
    """
    beers = await list_beers(session)
    ratings_by_beer = await list_ratings_for_beers(session, [b.beer_id for b in beers])
    return [
        beer_with_ratings_to_schema(beer, ratings_by_beer.get(beer.beer_id, []))
        for beer in beers
    ]


async def get_leaderboard(session: AsyncSession) -> LeaderboardResponse:
    """Leaderboard view, redacted according to the current settings."""
    beers = await list_beers_with_ratings(session)
    settings = await get_or_create_settings(session)
    return build_leaderboard(beers, show_beer_names=settings.show_beer_names)


async def get_stats(session: AsyncSession) -> StatsResponse:
    """Price vs. rating statistics view."""
    beers = await list_beers_with_ratings(session)
    settings = await get_or_create_settings(session)
    return build_stats(beers, show_beer_names=settings.show_beer_names)
