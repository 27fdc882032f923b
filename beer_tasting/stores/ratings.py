"""Rating store: create/delete ratings and list them per beer."""

from collections import defaultdict
from collections.abc import Iterable
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.errors import NotFoundError, StoreError, ValidationError
from beer_tasting.models import Rating
from beer_tasting.models.rating import MAX_RATING, MIN_RATING

logger = logging.getLogger("uvicorn.error")


async def create_rating(session: AsyncSession, *, beer_id: str | None, value: int | None) -> Rating:
    """Record a rating.

    Raises:
        ValidationError: If beer_id/value are missing or value is outside 1-5.
    """
    if not beer_id or value is None:
        raise ValidationError("Beer ID and rating are required")
    if value < MIN_RATING or value > MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")

    rating = Rating(beer_id=beer_id, value=int(value))
    try:
        session.add(rating)
        await session.commit()
        await session.refresh(rating)
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Error creating rating")
        raise StoreError("Failed to create rating") from exc

    logger.info(f"[ratings] created rating_id={rating.rating_id} beer_id={beer_id}")
    return rating


async def list_ratings_by_beer(session: AsyncSession, beer_id: str) -> list[Rating]:
    """List ratings for one beer in insertion order."""
    grouped = await list_ratings_for_beers(session, [beer_id])
    return grouped.get(beer_id, [])


async def list_ratings_for_beers(
    session: AsyncSession,
    beer_ids: Iterable[str],
) -> dict[str, list[Rating]]:
    """Fetch ratings for many beers with one query.

    Returns:
        Mapping of beer ID -> ratings in insertion order. Beers without
        ratings are absent from the mapping.
    """
    ids = list(beer_ids)
    if not ids:
        return {}

    try:
        result = await session.execute(
            select(Rating)
            .where(Rating.beer_id.in_(ids))
            .order_by(Rating.created_at.asc(), Rating.id.asc())
        )
    except SQLAlchemyError as exc:
        logger.exception("Error fetching ratings")
        raise StoreError("Failed to fetch ratings") from exc

    grouped: dict[str, list[Rating]] = defaultdict(list)
    for rating in result.scalars().all():
        grouped[rating.beer_id].append(rating)
    return dict(grouped)


async def delete_rating(session: AsyncSession, rating_id: str) -> None:
    """Delete one rating.

    Raises:
        NotFoundError: If no rating has this ID.
    """
    try:
        result = await session.execute(select(Rating).where(Rating.rating_id == rating_id))
        rating = result.scalar_one_or_none()
        if rating is None:
            raise NotFoundError("Rating not found")
        await session.delete(rating)
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception(f"Error deleting rating {rating_id}")
        raise StoreError("Failed to delete rating") from exc

    logger.info(f"[ratings] deleted rating_id={rating_id}")
