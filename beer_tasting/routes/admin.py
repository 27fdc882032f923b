"""Admin endpoints for tasting management.

GET /v1/admin/settings - Current reveal flag (created with defaults on first read)
PUT /v1/admin/settings - Toggle whether beer names are shown publicly

There is no authentication; anyone reaching the API can flip the flag.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from beer_tasting.errors import ValidationError
from beer_tasting.schemas import ErrorResponse, SettingsOut, SettingsUpdate
from beer_tasting.stores.postgres import get_db_session
from beer_tasting.stores.tasting_settings import get_or_create_settings, update_settings

router = APIRouter()


@router.get("/settings", response_model=SettingsOut)
async def get_tasting_settings(session: AsyncSession = Depends(get_db_session)) -> SettingsOut:
    """Get tasting settings."""
    settings = await get_or_create_settings(session)
    return SettingsOut(show_beer_names=settings.show_beer_names)


@router.put(
    "/settings",
    response_model=SettingsOut,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def put_tasting_settings(
    request: SettingsUpdate,
    session: AsyncSession = Depends(get_db_session),
) -> SettingsOut:
    """Set whether beer names and images are revealed."""
    if request.show_beer_names is None:
        raise ValidationError("showBeerNames is required")

    settings = await update_settings(session, show_beer_names=request.show_beer_names)
    return SettingsOut(show_beer_names=settings.show_beer_names)
