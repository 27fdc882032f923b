"""Beer store: CRUD over the beers table.

Validation here is limited to presence/range checks. Deleting a beer removes
its ratings in the same transaction.
"""

import logging
import math

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.errors import NotFoundError, StoreError, ValidationError
from beer_tasting.models import Beer, Rating

logger = logging.getLogger("uvicorn.error")

MAX_ALCOHOL_PERCENTAGE = 100.0


def _clean_name(name: str | None) -> str:
    if name is None or not name.strip():
        raise ValidationError("Beer name is required")
    return name.strip()


def _check_numbers(price: float | None, alcohol_percentage: float | None) -> None:
    if price is not None and (not math.isfinite(price) or price < 0):
        raise ValidationError("Price must be a non-negative number")
    if alcohol_percentage is not None and (
        not math.isfinite(alcohol_percentage)
        or not 0 <= alcohol_percentage <= MAX_ALCOHOL_PERCENTAGE
    ):
        raise ValidationError("Alcohol percentage must be between 0 and 100")


async def list_beers(session: AsyncSession) -> list[Beer]:
    """List all beers in insertion order."""
    try:
        result = await session.execute(
            select(Beer).order_by(Beer.created_at.asc(), Beer.id.asc())
        )
    except SQLAlchemyError as exc:
        logger.exception("Error fetching beers")
        raise StoreError("Failed to fetch beers") from exc
    return list(result.scalars().all())


async def get_beer(session: AsyncSession, beer_id: str) -> Beer:
    """Get a beer by public ID.

    Raises:
        NotFoundError: If no beer has this ID.
    """
    try:
        result = await session.execute(select(Beer).where(Beer.beer_id == beer_id))
    except SQLAlchemyError as exc:
        logger.exception(f"Error fetching beer {beer_id}")
        raise StoreError("Failed to fetch beer") from exc

    beer = result.scalar_one_or_none()
    if beer is None:
        raise NotFoundError("Beer not found")
    return beer


async def create_beer(
    session: AsyncSession,
    *,
    name: str | None,
    price: float | None = None,
    alcohol_percentage: float | None = None,
    image_url: str | None = None,
) -> Beer:
    """Create a beer. Only the name is required."""
    clean_name = _clean_name(name)
    _check_numbers(price, alcohol_percentage)

    beer = Beer(
        name=clean_name,
        price=price,
        alcohol_percentage=alcohol_percentage,
        image_url=image_url or None,
    )
    try:
        session.add(beer)
        await session.commit()
        await session.refresh(beer)
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception("Error creating beer")
        raise StoreError("Failed to create beer") from exc

    logger.info(f"[beers] created beer_id={beer.beer_id} name={beer.name!r}")
    return beer


async def update_beer(
    session: AsyncSession,
    beer_id: str,
    *,
    name: str | None,
    price: float | None,
    alcohol_percentage: float | None,
    image_url: str | None = None,
) -> Beer:
    """Replace a beer's fields.

    Name, price and alcohol percentage must all be present on update. An
    absent or empty image URL keeps the stored image.
    """
    if not name or not name.strip() or price is None or alcohol_percentage is None:
        raise ValidationError("Name, price, and alcohol percentage are required")
    _check_numbers(price, alcohol_percentage)

    beer = await get_beer(session, beer_id)
    beer.name = name.strip()
    beer.price = price
    beer.alcohol_percentage = alcohol_percentage
    if image_url:
        beer.image_url = image_url
    try:
        await session.commit()
        await session.refresh(beer)
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception(f"Error updating beer {beer_id}")
        raise StoreError("Failed to update beer") from exc

    logger.info(f"[beers] updated beer_id={beer_id}")
    return beer


async def delete_beer(session: AsyncSession, beer_id: str) -> int:
    """Delete a beer and every rating that references it.

    Both deletes run in one transaction.

    Returns:
        Number of ratings removed with the beer.
    """
    beer = await get_beer(session, beer_id)
    try:
        result = await session.execute(delete(Rating).where(Rating.beer_id == beer_id))
        await session.delete(beer)
        await session.commit()
    except SQLAlchemyError as exc:
        await session.rollback()
        logger.exception(f"Error deleting beer {beer_id}")
        raise StoreError("Failed to delete beer") from exc

    removed = result.rowcount or 0
    logger.info(f"[beers] deleted beer_id={beer_id} ratings_removed={removed}")
    return removed
