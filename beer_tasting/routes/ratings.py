"""Rating endpoints.

GET    /v1/ratings?beerId=...  - Ratings for one beer
POST   /v1/ratings             - Record a 1-5 rating
DELETE /v1/ratings/{rating_id} - Remove a rating
"""

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.schemas import ErrorResponse, RatingCreate, RatingOut, SuccessResponse
from beer_tasting.services.catalog import rating_to_schema
from beer_tasting.stores import ratings as rating_store
from beer_tasting.stores.postgres import get_db_session

router = APIRouter()


@router.get("", response_model=list[RatingOut])
async def list_ratings(
    beer_id: str = Query(alias="beerId", min_length=1, max_length=100, description="Public beer ID"),
    session: AsyncSession = Depends(get_db_session),
) -> list[RatingOut]:
    """List ratings for a beer, oldest first. Unknown beers have none."""
    ratings = await rating_store.list_ratings_by_beer(session, beer_id)
    return [rating_to_schema(r) for r in ratings]


@router.post(
    "",
    response_model=RatingOut,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_rating(
    request: RatingCreate,
    session: AsyncSession = Depends(get_db_session),
) -> RatingOut:
    """Record an anonymous rating."""
    rating = await rating_store.create_rating(
        session,
        beer_id=request.beer_id,
        value=request.value,
    )
    return rating_to_schema(rating)


@router.delete(
    "/{rating_id}",
    response_model=SuccessResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_rating(
    rating_id: str = Path(description="Public rating ID", min_length=1, max_length=100),
    session: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    """Delete a single rating."""
    await rating_store.delete_rating(session, rating_id)
    return SuccessResponse(success=True)
