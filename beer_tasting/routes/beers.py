"""Beer CRUD endpoints.

GET    /v1/beers            - All beers with nested ratings, creation order
POST   /v1/beers            - Register a beer
PUT    /v1/beers/{beer_id}  - Replace a beer's fields
DELETE /v1/beers/{beer_id}  - Delete a beer and its ratings

Routers are thin: validation lives in the stores, joins in services.
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.schemas import (
    BeerCreate,
    BeerOut,
    BeerUpdate,
    BeerWithRatings,
    ErrorResponse,
    SuccessResponse,
)
from beer_tasting.services.catalog import (
    beer_to_schema,
    beer_with_ratings_to_schema,
    list_beers_with_ratings,
)
from beer_tasting.stores import beers as beer_store
from beer_tasting.stores.postgres import get_db_session

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("", response_model=list[BeerWithRatings])
async def list_beers(session: AsyncSession = Depends(get_db_session)) -> list[BeerWithRatings]:
    """List beers with their ratings, oldest first."""
    return await list_beers_with_ratings(session)


@router.post("", response_model=BeerWithRatings, status_code=201, responses=_ERRORS)
async def create_beer(
    request: BeerCreate,
    session: AsyncSession = Depends(get_db_session),
) -> BeerWithRatings:
    """Register a beer. Price, alcohol percentage and image are optional."""
    beer = await beer_store.create_beer(
        session,
        name=request.name,
        price=request.price,
        alcohol_percentage=request.alcohol_percentage,
        image_url=request.image_url,
    )
    return beer_with_ratings_to_schema(beer, [])


@router.put("/{beer_id}", response_model=BeerOut, responses=_ERRORS)
async def update_beer(
    request: BeerUpdate,
    beer_id: str = Path(description="Public beer ID", min_length=1, max_length=100),
    session: AsyncSession = Depends(get_db_session),
) -> BeerOut:
    """Update a beer. Name, price and alcohol percentage are required."""
    beer = await beer_store.update_beer(
        session,
        beer_id,
        name=request.name,
        price=request.price,
        alcohol_percentage=request.alcohol_percentage,
        image_url=request.image_url,
    )
    return beer_to_schema(beer)


@router.delete("/{beer_id}", response_model=SuccessResponse, responses=_ERRORS)
async def delete_beer(
    beer_id: str = Path(description="Public beer ID", min_length=1, max_length=100),
    session: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    """Delete a beer together with all of its ratings."""
    await beer_store.delete_beer(session, beer_id)
    return SuccessResponse(success=True)
